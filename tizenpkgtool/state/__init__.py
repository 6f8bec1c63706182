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

"""Persisted metadata for tizenpkgtool.

Application metadata entered at the prompt is saved to
platforms/userconf.json so the next build can reuse it with only the
version bumped.

Public API:

- UserConfig: Load, query, and save userconf.json
- load_userconf: Load userconf.json
- save_userconf: Save userconf.json with pretty-printing
"""

from .userconf import UserConfig, load_userconf, save_userconf

__all__ = ["UserConfig", "load_userconf", "save_userconf"]
