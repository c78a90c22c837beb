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

"""Source tree to NSIS packaging directives.

This module walks the packaging source directory and produces the ordered
list of directives that goes into the install section: one SetOutPath per
non-empty directory and one File per regular file.

Traversal Order:

- Depth-first
- Within a directory: SetOutPath first, then every regular file, then each
  subdirectory in turn (recursively)
- Empty directories produce nothing, including the root itself
- Sibling order is whatever os.listdir() yields unless sort_entries is set,
  in which case names are sorted lexicographically

Entry Classification:

Entries are classified with lstat(), so symbolic links are neither followed
nor included. Anything that is not a regular file or a directory (links,
FIFOs, sockets, devices) is skipped without error.

Errors:

Any OSError while listing a directory or inspecting an entry aborts the walk
with a FilesystemError naming the failing path. No partial result is
returned.

Example:
    ```python
    from pathlib import Path
    from nsisgen.script.tree import walk_directives

    for directive in walk_directives(Path("dist/app")):
        print(directive.render())
    # SetOutPath "$INSTDIR"
    # File "C:\\build\\dist\\app\\app.exe"
    # SetOutPath "$INSTDIR\\locales"
    # File "C:\\build\\dist\\app\\locales\\en.pak"
    ```
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import os
from pathlib import Path
import stat

from nsisgen.exceptions import FilesystemError
from nsisgen.logging import get_global_logger
from nsisgen.script.syntax import escape_nsis, to_windows_path

__all__ = ["Directive", "DirectiveKind", "walk_directives"]


class DirectiveKind(Enum):
    SET_OUT_PATH = "SetOutPath"
    FILE = "File"


@dataclass(frozen=True)
class Directive:
    """One packaging instruction in the install section.

    Attributes:
        kind: SetOutPath or File.
        path: Windows-style path. For SetOutPath it is relative to
            $INSTDIR ("" for the install root); for File it is the
            absolute source path.
    """

    kind: DirectiveKind
    path: str

    def render(self) -> str:
        """Return the directive as a line of NSIS script."""
        if self.kind is DirectiveKind.SET_OUT_PATH:
            if not self.path:
                return 'SetOutPath "$INSTDIR"'
            return f'SetOutPath "$INSTDIR\\{escape_nsis(self.path)}"'
        return f'File "{escape_nsis(self.path)}"'


def _list_entries(directory: Path, sort_entries: bool) -> list[str]:
    try:
        names = os.listdir(directory)
    except OSError as err:
        raise FilesystemError(
            f"Failed to list directory {directory}: {err.strerror or err}",
            directory,
        ) from err
    return sorted(names) if sort_entries else names


def _lstat_mode(path: Path) -> int:
    try:
        return path.lstat().st_mode
    except OSError as err:
        raise FilesystemError(
            f"Failed to inspect {path}: {err.strerror or err}", path
        ) from err


def _walk(directory: Path, base_dir: Path, sort_entries: bool) -> list[Directive]:
    """Return the directives for directory and everything below it."""
    logger = get_global_logger()

    names = _list_entries(directory, sort_entries)
    if not names:
        logger.debug("TREE", f"Skipping empty directory: {directory}")
        return []

    relative = os.path.relpath(directory, base_dir)
    out_path = "" if relative == os.curdir else to_windows_path(relative)
    directives = [Directive(DirectiveKind.SET_OUT_PATH, out_path)]

    subdirs: list[Path] = []
    for name in names:
        path = directory / name
        mode = _lstat_mode(path)
        if stat.S_ISREG(mode):
            directives.append(Directive(DirectiveKind.FILE, to_windows_path(path)))
        elif stat.S_ISDIR(mode):
            subdirs.append(path)
        else:
            logger.debug("TREE", f"Skipping non-regular entry: {path}")

    logger.debug(
        "TREE",
        f"{directory}: {len(directives) - 1} file(s), {len(subdirs)} subdirectory(ies)",
    )

    for subdir in subdirs:
        directives.extend(_walk(subdir, base_dir, sort_entries))

    return directives


def walk_directives(src_dir: Path, *, sort_entries: bool = False) -> list[Directive]:
    """Enumerate a source tree into ordered packaging directives.

    Args:
        src_dir: Directory whose contents are installed into $INSTDIR.
            Relative paths are made absolute against the working directory;
            links in src_dir itself are not resolved.
        sort_entries: Sort sibling entries by name instead of keeping the
            filesystem's listing order. Default is False.

    Returns:
        Directives in the order makensis must execute them. Empty if
        src_dir has no entries.

    Raises:
        FilesystemError: If any directory cannot be listed or any entry
            cannot be inspected (including src_dir not existing).
    """
    base_dir = Path(os.path.abspath(src_dir))
    get_global_logger().verbose("TREE", f"Walking source directory: {base_dir}")
    return _walk(base_dir, base_dir, sort_entries)
