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

"""Public API return types for nsisgen.

All dataclasses are frozen (immutable) to prevent accidental mutation of
return values.

Example:
    ```python
    from pathlib import Path
    from nsisgen.core import generate_script

    result = generate_script(Path("installer.yaml"))
    print(result.script_path, result.file_count)
    ```
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class GenerateResult:
    """Result from generating an installer script.

    Attributes:
        app_name: Application name as written to the script.
        fixed_version: Version written to VIProductVersion.
        script_path: Path of the written .nsi file.
        output_path: Installer path the script's OutFile points at.
        directive_count: Number of packaging directives emitted.
        file_count: Number of File directives among them.
        status: Always "success" for successful generation.
    """

    app_name: str
    fixed_version: str
    script_path: Path
    output_path: Path
    directive_count: int
    file_count: int
    status: str


@dataclass(frozen=True)
class ValidationResult:
    """Result from validating a config file.

    Attributes:
        status: Validation status ("valid" or "invalid").
        errors: List of error messages (empty if valid).
        warnings: List of warning messages.
        config_path: String path to the validated config file.
    """

    status: str
    errors: list[str]
    warnings: list[str]
    config_path: str
