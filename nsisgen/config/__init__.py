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

"""Configuration loading for nsisgen.

Loads composer options from a YAML file, merging top-level options, the
``nsis`` block and caller overrides, and resolving relative paths against
the config file location.

Public API:

- load_options_config: Load the raw option mapping for a config file

Example:
    Basic usage:

        from pathlib import Path
        from nsisgen.config import load_options_config

        raw = load_options_config(Path("installer.yaml"))
        print(raw["app_name"])

"""

from .loader import load_options_config

__all__ = ["load_options_config"]
