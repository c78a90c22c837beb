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

"""Configuration loading and merging for nsisgen.

A config file is a YAML mapping. Options may sit at the top level, in an
``nsis`` block, or both, which lets one file carry general project metadata
next to installer-specific settings:

```yaml
app_name: Demo
version: 1.2.3
copyright: (c) 2025 Demo Inc.

nsis:
  company_name: Demo Inc.
  compression: lzma
  solid: true
  src_dir: dist/demo
  output: dist/demo-setup.exe
```

Configuration Layers:
    1. **Top-level options**: every top-level key except ``nsis``
    2. **nsis block**: overrides the top level
    3. **Overrides**: passed by the caller (CLI flags), override both

Merge Behavior:
    - **Dicts**: Recursively merged (keys from overlay override base)
    - **Lists and scalars**: Replaced (last wins)

Path Resolution:
    Relative ``src_dir`` and ``output`` values from the file are resolved
    against the CONFIG FILE location, so a config works the same from any
    working directory. Overrides are taken as given.

Error Handling:
    - ConfigError: File doesn't exist, YAML parse errors, empty files,
      or a non-mapping top level / nsis block
    - All errors are chained with "from err" for better debugging

Example:
    ```python
    from pathlib import Path
    from nsisgen.config import load_options_config

    raw = load_options_config(Path("installer.yaml"), overrides={"solid": True})
    print(raw["src_dir"])  # absolute path next to installer.yaml
    ```
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from nsisgen.exceptions import ConfigError
from nsisgen.logging import get_global_logger

NSIS_BLOCK = "nsis"

_PATH_KEYS = ("src_dir", "srcDir", "output")

# -------------------------------
# YAML helpers
# -------------------------------


def _load_yaml_file(p: Path) -> Any:
    """Load a YAML file and return the parsed Python object.

    Raises:
        ConfigError: When the file does not exist, is not valid YAML, or is
            empty.
    """
    if not p.exists():
        raise ConfigError(f"Config file not found: {p}")
    try:
        with p.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as err:
        raise ConfigError(f"Error parsing YAML: {p}: {err}") from err
    if data is None:
        raise ConfigError(f"YAML file is empty: {p}")
    return data


# -------------------------------
# Merge logic
# -------------------------------


def _deep_merge_dicts(base: dict[str, Any], overlay: dict[str, Any]) -> dict[str, Any]:
    """Deep-merge two dicts with "overlay wins".

    Rules:
      - dict + dict -> deep merge
      - everything else -> overlay overwrites base

    This function does not mutate inputs; returns a new dict.
    """
    result: dict[str, Any] = dict(base)
    for k, v in overlay.items():
        if k in result and isinstance(result[k], dict) and isinstance(v, dict):
            result[k] = _deep_merge_dicts(result[k], v)
        else:
            result[k] = v
    return result


# -------------------------------
# Layer extraction
# -------------------------------


def _split_layers(
    data: dict[str, Any], config_path: Path
) -> tuple[dict[str, Any], dict[str, Any]]:
    """Split a config mapping into (top-level options, nsis block)."""
    top_level = {k: v for k, v in data.items() if k != NSIS_BLOCK}
    block = data.get(NSIS_BLOCK) or {}
    if not isinstance(block, dict):
        raise ConfigError(f"'{NSIS_BLOCK}' must be a mapping: {config_path}")
    return top_level, block


# -------------------------------
# Path resolution
# -------------------------------


def _resolve_known_paths(cfg: dict[str, Any], config_dir: Path) -> None:
    """Resolve relative src_dir/output against config_dir, in place."""
    for key in _PATH_KEYS:
        raw_path = cfg.get(key)
        if isinstance(raw_path, str) and raw_path:
            p = Path(raw_path)
            if not p.is_absolute():
                cfg[key] = str(config_dir / p)


# -------------------------------
# Public API
# -------------------------------


def load_options_config(
    config_path: Path,
    *,
    overrides: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Load the raw composer options from a config file.

    Steps
      1) Read the YAML file (must be a mapping).
      2) Merge: top-level options -> nsis block.
      3) Resolve relative src_dir/output against the config directory.
      4) Merge caller overrides on top (None values are ignored).

    Args:
        config_path: Path to the YAML config file.
        overrides: Options that take precedence over the file, such as
            CLI flags.

    Returns:
        A raw option dict ready for normalize_options().

    Raises:
        ConfigError: On missing, empty, unparsable, or malformed files.
    """
    logger = get_global_logger()

    config_path = config_path.resolve()
    logger.verbose("CONFIG", f"Loading config: {config_path}")

    data = _load_yaml_file(config_path)
    if not isinstance(data, dict):
        raise ConfigError(f"Top-level YAML must be a mapping (dict): {config_path}")

    top_level, block = _split_layers(data, config_path)
    merged = _deep_merge_dicts(top_level, block)

    _resolve_known_paths(merged, config_path.parent)

    if overrides:
        applied = {k: v for k, v in overrides.items() if v is not None}
        if applied:
            logger.verbose("CONFIG", f"Applying overrides: {', '.join(applied)}")
        merged = _deep_merge_dicts(merged, applied)

    logger.debug("CONFIG", f"Effective options: {merged}")
    return merged
