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

"""Persisted application metadata (userconf.json) for tizenpkgtool.

userconf.json maps a platform key to that platform's metadata block:

    {"tizen": {"name": "...", "id": "...", "version": "...", "description": "..."}}

The file is read once at the start of a build and rewritten once at the end.
Blocks belonging to other platforms are preserved on save.

Key Features:

- JSON-based storage (standard library)
- Never partially trusted: an incomplete block or an unusable version
  means the block is treated as absent
- Corrupted files are backed up and treated as absent
- Auto-creation of parent directories on save

Example:
    ```python
    from pathlib import Path
    from tizenpkgtool.state import UserConfig

    userconf = UserConfig(Path("platforms/userconf.json"))
    userconf.load()

    cached = userconf.get_metadata("tizen")
    if cached is None:
        print(userconf.reason)

    userconf.set_metadata("tizen", metadata)
    userconf.save()
    ```
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from tizenpkgtool.exceptions import ConfigError
from tizenpkgtool.metadata import ApplicationMetadata


class UserConfig:
    """Loads, queries, and saves userconf.json.

    Attributes:
        path: Path to the JSON file.
        data: In-memory mapping of platform key to metadata block.
        exists: True if the file existed when load() was called.
        reason: Why the last get_metadata() call returned None, or None.
    """

    def __init__(self, path: Path):
        self.path = path
        self.data: dict[str, Any] = {}
        self.exists = False
        self.reason: str | None = None

    def load(self) -> dict[str, Any]:
        """Load userconf.json.

        A missing file loads as an empty mapping. A file that is not a
        UTF-8 JSON object is renamed to ``userconf.json.backup`` and also loads as
        an empty mapping, with a warning.

        Returns:
            The loaded mapping.

        Raises:
            OSError: If file permissions prevent reading.
        """
        from tizenpkgtool.logging import get_global_logger

        logger = get_global_logger()

        try:
            data = load_userconf(self.path)
        except FileNotFoundError:
            logger.verbose("USERCONF", f"No userconf found at {self.path}")
            self.data = {}
            self.exists = False
            return self.data
        except (json.JSONDecodeError, UnicodeDecodeError):
            data = None

        if not isinstance(data, dict):
            backup = self.path.with_suffix(".json.backup")
            self.path.replace(backup)
            logger.warning(
                f"'{self.path.name}' is corrupted and was backed up to {backup}. "
                "Please fill out the information again."
            )
            self.data = {}
            self.exists = False
            return self.data

        logger.verbose("USERCONF", f"Loaded {self.path} ({', '.join(data) or 'empty'})")
        self.data = data
        self.exists = True
        return self.data

    def get_metadata(self, platform: str) -> ApplicationMetadata | None:
        """Return the metadata block for a platform if it can be reused.

        Args:
            platform: Platform key, e.g. "tizen".

        Returns:
            ApplicationMetadata, or None if the block is absent or invalid.
            In the None case ``reason`` holds a user-facing explanation.
        """
        self.reason = None

        if platform not in self.data:
            self.reason = f"'{self.path.name}' is empty. Please fill out the information again."
            return None

        try:
            return ApplicationMetadata.from_dict(self.data[platform])
        except ConfigError as err:
            self.reason = (
                f"'{self.path.name}' has invalid data ({err}). "
                "Please fill out the information again."
            )
            return None

    def set_metadata(self, platform: str, metadata: ApplicationMetadata) -> None:
        """Replace the metadata block for a platform."""
        self.data[platform] = metadata.to_dict()

    def save(self) -> None:
        """Write the whole mapping back to disk.

        Raises:
            OSError: If file permissions prevent writing.
        """
        save_userconf(self.data, self.path)
        self.exists = True


def load_userconf(path: Path) -> Any:
    """Load userconf.json.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        json.JSONDecodeError: If the file contains invalid JSON.
    """
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def save_userconf(data: dict[str, Any], path: Path) -> None:
    """Save userconf.json with pretty-printing.

    Note:
        - Uses 2-space indentation and sorted keys for consistent diffs
        - Adds trailing newline for git compatibility
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, sort_keys=True)
        f.write("\n")
