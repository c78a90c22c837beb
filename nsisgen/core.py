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

"""Core orchestration for nsisgen.

generate_script() is the entry point behind ``nsis-gen generate``: it loads
a config file, normalizes the options, composes the script and writes it
next to the installer it describes.

Design Principles:

- Functions return structured data (dataclasses) for easy testing
- Error handling uses exceptions; the CLI layer formats them for display
- The script is written only after it was fully composed, so a failed run
  never leaves a truncated .nsi behind

Example:
    ```python
    from pathlib import Path
    from nsisgen.core import generate_script

    result = generate_script(Path("installer.yaml"))
    print(f"Wrote {result.script_path} ({result.file_count} files)")
    ```
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from nsisgen.config import load_options_config
from nsisgen.exceptions import FilesystemError
from nsisgen.logging import get_global_logger
from nsisgen.options import normalize_options
from nsisgen.results import GenerateResult
from nsisgen.script import DirectiveKind, NsisComposer

# makensis treats UTF-8 input as Unicode only when a BOM is present.
SCRIPT_ENCODING = "utf-8-sig"


def default_script_path(output: Path) -> Path:
    """Return the .nsi path used when none is given: output with .nsi suffix.

    Example:
        >>> default_script_path(Path("dist/demo-setup.exe"))
        PosixPath('dist/demo-setup.nsi')
    """
    return output.with_suffix(".nsi")


def generate_script(
    config_path: Path,
    script_path: Path | None = None,
    *,
    overrides: dict[str, Any] | None = None,
) -> GenerateResult:
    """Generate an .nsi script from a config file and write it to disk.

    Args:
        config_path: Path to the YAML config file.
        script_path: Where to write the script. Defaults to the configured
            output path with a .nsi suffix.
        overrides: Options that take precedence over the config file.

    Returns:
        GenerateResult describing the written script.

    Raises:
        ConfigError: If the config is unreadable, the output path or source
            directory is missing, or compression is unknown.
        FilesystemError: If the source tree cannot be read or the script
            cannot be written.
    """
    logger = get_global_logger()

    logger.step(1, 3, "Loading configuration...")
    raw = load_options_config(config_path, overrides=overrides)
    options = normalize_options(raw)
    logger.verbose("CONFIG", f"App: {options.app_name} {options.fixed_version}")
    logger.verbose(
        "CONFIG",
        f"Compression: {options.compression.value} (solid={options.solid})",
    )

    logger.step(2, 3, "Composing installer script...")
    composer = NsisComposer(options)
    directives = composer.collect_directives()
    script = composer.render(directives)

    if script_path is None:
        script_path = default_script_path(options.output)

    logger.step(3, 3, "Writing installer script...")
    try:
        data = script.encode(SCRIPT_ENCODING)
    except UnicodeEncodeError as err:
        # Undecodable file names surface from os.listdir as lone surrogates.
        raise FilesystemError(
            f"Cannot encode script {script_path} as {SCRIPT_ENCODING}: "
            f"{err.object[err.start:err.end]!r} at position {err.start}",
            script_path,
        ) from err
    try:
        script_path.parent.mkdir(parents=True, exist_ok=True)
        script_path.write_bytes(data)
    except OSError as err:
        raise FilesystemError(
            f"Failed to write script {script_path}: {err.strerror or err}",
            script_path,
        ) from err
    logger.verbose("WRITE", f"Wrote {len(script)} characters to {script_path}")

    return GenerateResult(
        app_name=options.app_name,
        fixed_version=options.fixed_version,
        script_path=script_path,
        output_path=options.output,
        directive_count=len(directives),
        file_count=sum(1 for d in directives if d.kind is DirectiveKind.FILE),
        status="success",
    )
