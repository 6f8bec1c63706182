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

"""Configuration loading for tizenpkgtool.

This package loads the two configuration sources of a build:

  - Packager settings (tizenpkg.yaml), deep-merged over built-in defaults
  - Host project defaults (config.xml): app name, version, description

Public API:

- load_settings: Load packager settings
- load_host_config: Read prompt defaults from config.xml
- HostConfig: Host defaults dataclass
- DEFAULT_SETTINGS: Built-in settings

Example:
    Basic usage:

        from pathlib import Path
        from tizenpkgtool.config import load_host_config, load_settings

        settings = load_settings()
        host = load_host_config(Path(settings["host_config"]))
        print(host.name)

"""

from .loader import DEFAULT_SETTINGS, HostConfig, load_host_config, load_settings

__all__ = ["DEFAULT_SETTINGS", "HostConfig", "load_host_config", "load_settings"]
