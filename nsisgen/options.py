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

"""Composer options and their normalization.

Raw options (from a YAML config, CLI flags, or a plain dict) are turned into
an immutable ComposerOptions record once, up front. Missing cosmetic
metadata never fails generation: each empty field is replaced by a
placeholder that makes the omission visible in the installer's version
resource instead.

Normalization Rules:

- app_name, company_name, description, version, copyright: falsy values
  become NO_APPNAME, NO_COMPANYNAME, NO_DESCRIPTION, NO_VERSION and
  NO_COPYRIGHT respectively
- compression: defaults to lzma; anything outside zlib/bzip2/lzma is a
  ConfigError
- solid: coerced to a strict bool
- output: required; missing or empty is a ConfigError
- src_dir: optional here; the install section rejects it when unset

Keys are accepted in snake_case and in camelCase (appName, companyName,
srcDir), so option blobs written for other NSIS tooling load unchanged.

Example:
    ```python
    from nsisgen.options import normalize_options

    options = normalize_options(
        {"app_name": "Demo", "version": "1.2.3", "output": "dist/setup.exe"}
    )
    print(options.fixed_version)  # 1.2.3.0
    print(options.compression)    # Compression.LZMA
    ```
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
import os
import re
from typing import Any

from nsisgen.exceptions import ConfigError

__all__ = [
    "Compression",
    "ComposerOptions",
    "PLACEHOLDERS",
    "fix_version",
    "normalize_options",
]


class Compression(str, Enum):
    """Compressors understood by makensis' SetCompressor."""

    ZLIB = "zlib"
    BZIP2 = "bzip2"
    LZMA = "lzma"


PLACEHOLDERS: dict[str, str] = {
    "app_name": "NO_APPNAME",
    "company_name": "NO_COMPANYNAME",
    "description": "NO_DESCRIPTION",
    "version": "NO_VERSION",
    "copyright": "NO_COPYRIGHT",
}

_KEY_ALIASES: dict[str, str] = {
    "appName": "app_name",
    "companyName": "company_name",
    "srcDir": "src_dir",
    "sortEntries": "sort_entries",
}

# VIProductVersion requires X.X.X.X; plain semver is padded, nothing else is.
_SEMVER_TRIPLE = re.compile(r"\d+\.\d+\.\d+", re.ASCII)


def fix_version(version: str) -> str:
    """Pad a strict three-part numeric version with a fourth ``.0``.

    Args:
        version: Raw version string.

    Returns:
        ``version + ".0"`` when version is exactly ``<int>.<int>.<int>``,
        otherwise version unchanged.

    Example:
        >>> fix_version("1.2.3")
        '1.2.3.0'
        >>> fix_version("1.2.3-beta")
        '1.2.3-beta'
    """
    if _SEMVER_TRIPLE.fullmatch(version):
        return f"{version}.0"
    return version


@dataclass(frozen=True)
class ComposerOptions:
    """Normalized, immutable options for one script generation.

    Attributes:
        app_name: Product name; also the install directory name.
        company_name: CompanyName version key.
        description: FileDescription version key.
        version: Version exactly as supplied.
        copyright: LegalCopyright version key.
        compression: Compressor for SetCompressor.
        solid: Whether to compress all files as one solid block.
        output: Path of the installer executable makensis will write.
        src_dir: Directory whose contents are packaged, if any.
        sort_entries: Sort sibling entries by name while walking instead
            of keeping the filesystem's listing order.
        fixed_version: version with the three-part fixup applied, computed
            once at construction.
    """

    app_name: str
    company_name: str
    description: str
    version: str
    copyright: str
    output: Path
    compression: Compression = Compression.LZMA
    solid: bool = False
    src_dir: Path | None = None
    sort_entries: bool = False
    fixed_version: str = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "fixed_version", fix_version(self.version))


def _canonical_keys(raw: Mapping[str, Any]) -> dict[str, Any]:
    """Map camelCase aliases onto snake_case keys (snake_case wins)."""
    result: dict[str, Any] = {}
    for key, value in raw.items():
        canonical = _KEY_ALIASES.get(key, key)
        if canonical != key and canonical in raw:
            continue
        result[canonical] = value
    return result


def _parse_path(key: str, value: Any) -> Path:
    if not isinstance(value, (str, os.PathLike)):
        raise ConfigError(
            f"Option '{key}' must be a path string, got {type(value).__name__} {value!r}"
        )
    return Path(value)


def _parse_compression(value: Any) -> Compression:
    if not value:
        return Compression.LZMA
    try:
        return Compression(str(value).lower())
    except ValueError as err:
        allowed = ", ".join(c.value for c in Compression)
        raise ConfigError(
            f"Unsupported compression {value!r}. Supported: {allowed}"
        ) from err


def normalize_options(raw: Mapping[str, Any]) -> ComposerOptions:
    """Fill defaults and build an immutable ComposerOptions.

    Args:
        raw: Option mapping, typically the ``nsis`` block of a config file.

    Returns:
        Normalized options.

    Raises:
        ConfigError: If compression is unknown, output is missing, or
            output or src_dir is not a path.
    """
    opts = _canonical_keys(raw)

    metadata = {}
    for key, placeholder in PLACEHOLDERS.items():
        value = opts.get(key)
        metadata[key] = str(value) if value else placeholder

    output = opts.get("output")
    if not output:
        raise ConfigError("Missing required option: output")

    src_dir = opts.get("src_dir")

    return ComposerOptions(
        **metadata,
        output=_parse_path("output", output),
        compression=_parse_compression(opts.get("compression")),
        solid=bool(opts.get("solid")),
        src_dir=_parse_path("src_dir", src_dir) if src_dir else None,
        sort_entries=bool(opts.get("sort_entries")),
    )
