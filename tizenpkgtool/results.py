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

"""Public API return types for tizenpkgtool.

All dataclasses are frozen (immutable) to prevent accidental mutation of
return values.

Note:
    Only public API return types belong in this module. Domain types
    (like ApplicationMetadata) should remain co-located with their
    related logic.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class BuildResult:
    """Result from building a Tizen platform tree.

    Attributes:
        name: Application display name.
        app_id: 10-character Tizen application id.
        version: Application version written into the templates.
        build_dir: Absolute path to the build directory.
        rendered_files: Paths of the files produced from templates.
        status: Always "success" for a completed build.
    """

    name: str
    app_id: str
    version: str
    build_dir: Path
    rendered_files: tuple[Path, ...]
    status: str


@dataclass(frozen=True)
class PackageResult:
    """Result from creating a .wgt package.

    Attributes:
        build_dir: Path to the build directory that was archived.
        package_path: Path to the created .wgt file.
        file_count: Number of files written into the archive.
        status: Always "success" for a completed package.
    """

    build_dir: Path
    package_path: Path
    file_count: int
    status: str
