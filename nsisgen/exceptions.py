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

"""Exception hierarchy for nsisgen.

This module defines a small exception hierarchy that allows callers to
distinguish between the two ways script generation can fail:

- ConfigError: Configuration-related errors (missing source directory,
  unknown compression, missing output path, unreadable config file)
- FilesystemError: The source tree could not be listed or inspected

All exceptions inherit from NsisGenError, allowing users to catch all
nsisgen errors with a single except clause if needed.

Example:
    Branching on the error kind:
        ```python
        from nsisgen import compose_script
        from nsisgen.exceptions import ConfigError, FilesystemError

        try:
            script = compose_script({"app_name": "Demo", "output": "setup.exe"})
        except ConfigError as e:
            print(f"Configuration error: {e}")
        except FilesystemError as e:
            print(f"Cannot read {e.path}: {e}")
        ```
"""

from __future__ import annotations

from pathlib import Path

__all__ = [
    "NsisGenError",
    "ConfigError",
    "FilesystemError",
]


class NsisGenError(Exception):
    """Base exception for all nsisgen errors."""

    pass


class ConfigError(NsisGenError):
    """Raised for configuration-related errors.

    This exception is raised when there are problems with:

    - The install section is requested but no source directory is set
    - An unknown compression algorithm is configured
    - The output path is missing
    - The config file is missing, empty, not a mapping, or not valid YAML

    Example:
        Catching configuration errors:
            ```python
            from nsisgen.exceptions import ConfigError

            try:
                options = normalize_options({"app_name": "Demo"})
            except ConfigError as e:
                print(f"Config error: {e}")
            ```
    """

    pass


class FilesystemError(NsisGenError):
    """Raised when the source tree cannot be listed or inspected.

    The original OSError is chained as ``__cause__``; the path whose
    listing or status check failed is kept on ``path``.

    Attributes:
        path: Path of the directory or entry that failed.
    """

    def __init__(self, message: str, path: Path | str) -> None:
        super().__init__(message)
        self.path = Path(path)
