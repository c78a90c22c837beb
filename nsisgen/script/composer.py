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

"""Top-level .nsi script composition.

NsisComposer ties the option normalizer, the tree walk and the section
assemblers together. The whole document is built in memory and only
returned once every section succeeded, so callers never see a partial
script.

Example:
    ```python
    from nsisgen.script import NsisComposer

    composer = NsisComposer.from_mapping(
        {
            "app_name": "Demo",
            "version": "1.0.0",
            "src_dir": "dist/demo",
            "output": "dist/demo-setup.exe",
        }
    )
    script = composer.make()
    ```
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from nsisgen.exceptions import ConfigError
from nsisgen.options import ComposerOptions, normalize_options
from nsisgen.script.sections import (
    make_banner,
    make_general_section,
    make_install_section,
    make_resources_section,
    make_uninstall_section,
)
from nsisgen.script.tree import Directive, walk_directives


class NsisComposer:
    """Generate an installer script from normalized options.

    Attributes:
        options: The immutable options this composer renders.
    """

    def __init__(self, options: ComposerOptions) -> None:
        self.options = options

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> NsisComposer:
        """Normalize a raw option mapping and build a composer from it."""
        return cls(normalize_options(raw))

    def collect_directives(self) -> list[Directive]:
        """Walk src_dir and return the install directives.

        Raises:
            ConfigError: If no source directory is configured.
            FilesystemError: If the walk fails.
        """
        if self.options.src_dir is None:
            raise ConfigError(
                "No source directory configured; set src_dir to package files"
            )
        return walk_directives(
            self.options.src_dir, sort_entries=self.options.sort_entries
        )

    def render(self, directives: Sequence[Directive]) -> str:
        """Assemble the full document around already collected directives."""
        sections = [
            make_general_section(self.options),
            make_resources_section(self.options),
            make_install_section(self.options, directives),
            make_uninstall_section(),
        ]
        return make_banner() + "\n" + "\n".join(sections) + "\n"

    def make(self) -> str:
        """Return the complete installer script.

        Raises:
            ConfigError: If no source directory is configured.
            FilesystemError: If the source tree cannot be read.
        """
        return self.render(self.collect_directives())


def compose_script(raw: Mapping[str, Any]) -> str:
    """Normalize raw options and return the generated script text."""
    return NsisComposer.from_mapping(raw).make()
