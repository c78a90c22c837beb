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

"""NSIS literal formatting helpers."""

from __future__ import annotations

import ntpath
import os
from pathlib import Path


def escape_nsis(value: str) -> str:
    """Escape a value for use inside a double-quoted NSIS string.

    Example:
        >>> escape_nsis('Say "hi" for $5')
        'Say $\\\\"hi$\\\\" for $$5'
    """
    return value.replace("$", "$$").replace('"', '$\\"')


def quote_nsis(value: str) -> str:
    """Escape and wrap a value in double quotes."""
    return f'"{escape_nsis(value)}"'


def to_windows_path(path: str | os.PathLike[str]) -> str:
    """Render a path with backslash separators, whatever the host OS is."""
    return ntpath.normpath(os.fspath(path))


def to_absolute_windows_path(path: Path) -> str:
    """Make a path absolute (without following links) and render it for Windows."""
    return to_windows_path(os.path.abspath(path))
