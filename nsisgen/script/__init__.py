# Copyright 2025 Roger Cibrian
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
NSIS script generation for nsisgen.

This package turns normalized options and a source directory into the text
of an .nsi script. It is split into the tree walk that produces packaging
directives, the section assemblers that render fixed script blocks, and the
composer that puts the document together.

Example:
    from nsisgen.script import compose_script

    script = compose_script({
        "app_name": "Demo",
        "src_dir": "dist/demo",
        "output": "dist/demo-setup.exe",
    })
"""

from .composer import NsisComposer, compose_script
from .sections import DIVIDER
from .tree import Directive, DirectiveKind, walk_directives

__all__ = [
    "DIVIDER",
    "Directive",
    "DirectiveKind",
    "NsisComposer",
    "compose_script",
    "walk_directives",
]
