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

"""nsisgen - NSIS installer script generator

Generates complete NSIS (.nsi) installer scripts from application metadata
and a directory of files to package. The resulting script is compiled by
makensis into a standalone Windows installer.

nsisgen provides:

- YAML-based configuration with placeholder defaults for missing metadata
- Version-resource tagging with automatic X.X.X -> X.X.X.0 padding
- Depth-first packaging of a directory tree (SetOutPath/File directives)
- Whole-directory uninstall section
- Windows path rendering regardless of the host OS

Quick Start:
Validate a config:

    $ nsis-gen validate installer.yaml

Generate the script:

    $ nsis-gen generate installer.yaml

For full CLI documentation:

    $ nsis-gen --help
"""

__version__ = "0.1.0"
__author__ = "Roger Cibrian"
__license__ = "Apache-2.0"
__description__ = "nsisgen - NSIS installer script generator"

# Re-export commonly used functions for convenience
from nsisgen.config import load_options_config
from nsisgen.core import generate_script
from nsisgen.exceptions import ConfigError, FilesystemError, NsisGenError
from nsisgen.options import ComposerOptions, Compression, fix_version, normalize_options
from nsisgen.results import GenerateResult, ValidationResult
from nsisgen.script import NsisComposer, compose_script, walk_directives
from nsisgen.validation import validate_config

__all__ = [
    "__version__",
    "__author__",
    "__license__",
    "__description__",
    "ComposerOptions",
    "Compression",
    "ConfigError",
    "FilesystemError",
    "GenerateResult",
    "NsisComposer",
    "NsisGenError",
    "ValidationResult",
    "compose_script",
    "fix_version",
    "generate_script",
    "load_options_config",
    "normalize_options",
    "validate_config",
    "walk_directives",
]
