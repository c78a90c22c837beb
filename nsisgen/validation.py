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

"""Config validation module.

Checks a config file without walking the source tree or writing anything.
Useful for quick feedback while writing a config and as a CI pre-check.

Validation Checks:

- YAML syntax is valid and the top level is a mapping
- output is present
- compression is one of zlib, bzip2, lzma
- solid and sort_entries are booleans when given
- src_dir is set, exists, and is a directory

Warnings (generation still succeeds):

- Cosmetic metadata missing (a placeholder will be used)
- version is not a strict X.X.X or X.X.X.X number, which makensis
  rejects for VIProductVersion

Example:
    ```python
    from pathlib import Path
    from nsisgen.validation import validate_config

    result = validate_config(Path("installer.yaml"))
    if result.status == "valid":
        print("Config is valid")
    else:
        for error in result.errors:
            print(f"Error: {error}")
    ```
"""

from __future__ import annotations

from pathlib import Path
import re

from nsisgen.config import load_options_config
from nsisgen.exceptions import ConfigError
from nsisgen.logging import get_global_logger
from nsisgen.options import PLACEHOLDERS, Compression, normalize_options
from nsisgen.results import ValidationResult

__all__ = ["validate_config"]

_VI_PRODUCT_VERSION = re.compile(r"\d+\.\d+\.\d+\.\d+", re.ASCII)


def validate_config(config_path: Path) -> ValidationResult:
    """Validate a config file without reading the source tree.

    Args:
        config_path: Path to the YAML config file to validate.

    Returns:
        ValidationResult with status "valid" or "invalid", the error and
        warning messages, and the config path.
    """
    logger = get_global_logger()
    errors: list[str] = []
    warnings: list[str] = []

    def _result() -> ValidationResult:
        return ValidationResult(
            status="invalid" if errors else "valid",
            errors=errors,
            warnings=warnings,
            config_path=str(config_path),
        )

    try:
        raw = load_options_config(config_path)
    except ConfigError as err:
        errors.append(str(err))
        return _result()

    logger.verbose("VALIDATE", "[OK] YAML syntax is valid")

    compression = raw.get("compression")
    if compression and str(compression).lower() not in {c.value for c in Compression}:
        errors.append(
            f"Unsupported compression {compression!r} "
            f"(expected one of: {', '.join(c.value for c in Compression)})"
        )

    for flag in ("solid", "sort_entries"):
        if flag in raw and not isinstance(raw[flag], bool):
            errors.append(f"'{flag}' must be a boolean, got {raw[flag]!r}")

    output = raw.get("output")
    if not output:
        errors.append("Missing required field: output")
    elif not isinstance(output, str):
        errors.append(f"'output' must be a path string, got {output!r}")

    src_dir = raw.get("src_dir") or raw.get("srcDir")
    if not src_dir:
        errors.append("Missing field: src_dir (required to package files)")
    elif not isinstance(src_dir, str):
        errors.append(f"'src_dir' must be a path string, got {src_dir!r}")
    else:
        src_path = Path(src_dir)
        if not src_path.exists():
            errors.append(f"Source directory not found: {src_path}")
        elif not src_path.is_dir():
            errors.append(f"Source path is not a directory: {src_path}")
        else:
            logger.verbose("VALIDATE", f"[OK] Source directory: {src_path}")

    if errors:
        return _result()

    options = normalize_options(raw)
    for key, placeholder in PLACEHOLDERS.items():
        if getattr(options, key) == placeholder:
            warnings.append(f"'{key}' not set; '{placeholder}' will be used")

    if not _VI_PRODUCT_VERSION.fullmatch(options.fixed_version):
        warnings.append(
            f"Version {options.version!r} is not X.X.X or X.X.X.X; "
            "makensis will reject it for VIProductVersion"
        )

    return _result()
