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

"""Tizen application metadata and its validation rules.

The metadata block (name, id, version, description) is stored under the
"tizen" key of userconf.json and substituted into config.xml and .project.

Version rules:

- A stored version is reusable if it has 2 or 3 dot-separated segments
  made of digits only ("1.2", "1.2.3").
- A version typed at the prompt must have exactly 3 numeric segments.
- Reusing a stored version bumps the revision: "1.2.3" -> "1.2.4",
  "1.2" -> "1.2.1".

Example:
    >>> bump_revision("2.9")
    '2.9.1'
    >>> is_valid_version("1.2.3.4")
    False
    >>> validate_app_id(generate_app_id())
    True
"""

from __future__ import annotations

from dataclasses import dataclass
import random
import re
import string
from typing import Any

from tizenpkgtool.exceptions import ConfigError

PLATFORM_KEY = "tizen"
APP_ID_LENGTH = 10

APP_ID_PATTERN = re.compile(r"[0-9a-zA-Z]{10}")
VERSION_PATTERN = re.compile(r"\d+\.\d+\.\d+", re.ASCII)

INVALID_ID_MESSAGE = "invalid id string for tizen platform"
INVALID_VERSION_MESSAGE = "invalid version string for tizen platform"

_FIELDS = ("name", "id", "version", "description")


@dataclass(frozen=True)
class ApplicationMetadata:
    """Application metadata for the Tizen platform.

    Attributes:
        name: Human-readable application name.
        id: 10-character alphanumeric Tizen application id.
        version: Dot-separated numeric version.
        description: Free-text description.
    """

    name: str
    id: str
    version: str
    description: str

    @classmethod
    def from_dict(cls, data: Any) -> ApplicationMetadata:
        """Build metadata from a userconf.json platform block.

        Raises:
            ConfigError: If the block is not a mapping, a field is missing
                or not a string, or the version is not reusable.
        """
        if not isinstance(data, dict):
            raise ConfigError(f"metadata block must be a mapping, got {type(data).__name__}")

        missing = [f for f in _FIELDS if not isinstance(data.get(f), str)]
        if missing:
            raise ConfigError(f"metadata block is missing field(s): {', '.join(missing)}")

        if not is_valid_version(data["version"]):
            raise ConfigError(f"invalid version in metadata block: {data['version']!r}")

        return cls(
            name=data["name"],
            id=data["id"],
            version=data["version"],
            description=data["description"],
        )

    def to_dict(self) -> dict[str, str]:
        return {
            "name": self.name,
            "id": self.id,
            "version": self.version,
            "description": self.description,
        }


def is_valid_version(version: str) -> bool:
    """Return True if a stored version can be reused and bumped.

    Args:
        version: Version string from userconf.json.

    Returns:
        True when the version has 2 or 3 segments and each segment is
        made of ASCII digits only.
    """
    if not isinstance(version, str):
        return False
    segments = version.split(".")
    if len(segments) not in (2, 3):
        return False
    return all(seg.isascii() and seg.isdigit() for seg in segments)


def bump_revision(version: str) -> str:
    """Increment the revision segment of a version.

    A missing revision counts as 0, so "1.2" becomes "1.2.1". Leading
    zeros are normalized away ("01.02.3" -> "1.2.4").

    Args:
        version: Version in "major.minor" or "major.minor.revision" form.

    Returns:
        The bumped "major.minor.revision" string.

    Raises:
        ValueError: If major, minor, or revision is not an integer.
    """
    segments = version.split(".")
    if len(segments) < 2:
        raise ValueError(f"version needs at least major.minor: {version!r}")

    major = int(segments[0])
    minor = int(segments[1])
    revision = int(segments[2]) + 1 if len(segments) > 2 and segments[2] else 1

    return f"{major}.{minor}.{revision}"


def generate_app_id(length: int = APP_ID_LENGTH) -> str:
    """Generate a random lowercase alphanumeric application id."""
    alphabet = string.digits + string.ascii_lowercase
    return "".join(random.choices(alphabet, k=length))


def validate_app_id(value: str) -> bool | str:
    """Prompt validator for the application id.

    Returns:
        True if valid, otherwise the error message shown to the user.
    """
    return True if APP_ID_PATTERN.fullmatch(value or "") else INVALID_ID_MESSAGE


def validate_version(value: str) -> bool | str:
    """Prompt validator for a version typed by the user.

    Returns:
        True for "major.minor.revision" with numeric segments, otherwise
        the error message shown to the user.
    """
    return True if VERSION_PATTERN.fullmatch(value or "") else INVALID_VERSION_MESSAGE
