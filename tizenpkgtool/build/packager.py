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

""".wgt package generation for tizenpkgtool.

This module zips a built Tizen platform tree into a .wgt archive (a zip
file) ready for installation on a Samsung TV.

Design Principles:
    - Archive members use POSIX paths relative to the build directory
    - Only files are stored; directories are implied by member paths
    - An archive written inside the build directory never includes itself
    - Any archive failure is raised as ArchiveError

Example:
    Basic usage:
        ```python
        from pathlib import Path
        from tizenpkgtool.build.packager import create_wgt

        result = create_wgt(
            build_dir=Path("platforms/tizen/build"),
            output_dir=Path("platforms/tizen/package"),
        )

        print(f"Package: {result.package_path}")
        ```
"""

from __future__ import annotations

from pathlib import Path
import zipfile

from tizenpkgtool.exceptions import ArchiveError, PackagingError
from tizenpkgtool.results import PackageResult

DEFAULT_PACKAGE_NAME = "package.wgt"


def _collect_files(build_dir: Path, exclude: Path) -> list[Path]:
    """List every file under build_dir in a stable order, minus exclude."""
    return sorted(p for p in build_dir.rglob("*") if p.is_file() and p != exclude)


def _write_archive(build_dir: Path, files: list[Path], package_path: Path) -> None:
    """Write files into a deflated zip archive at package_path.

    Raises:
        ArchiveError: If the archive cannot be written.
    """
    from tizenpkgtool.logging import get_global_logger

    logger = get_global_logger()
    tmp_path = package_path.with_name(package_path.name + ".tmp")

    try:
        with zipfile.ZipFile(tmp_path, "w", compression=zipfile.ZIP_DEFLATED) as archive:
            for path in files:
                arcname = path.relative_to(build_dir).as_posix()
                archive.write(path, arcname)
                logger.debug("PACKAGE", f"  + {arcname}")
        tmp_path.replace(package_path)
    except (OSError, zipfile.BadZipFile, zipfile.LargeZipFile) as err:
        tmp_path.unlink(missing_ok=True)
        raise ArchiveError(f"Failed to write {package_path}: {err}") from err


def create_wgt(
    build_dir: Path,
    output_dir: Path,
    package_name: str = DEFAULT_PACKAGE_NAME,
) -> PackageResult:
    """Create a .wgt package from a Tizen build directory.

    Args:
        build_dir: Path to the built platform tree.
        output_dir: Directory for the .wgt output. Created if missing.
        package_name: Archive file name. Default is "package.wgt".

    Returns:
        PackageResult dataclass with the following fields:

            - build_dir (Path): The archived build directory.
            - package_path (Path): {output_dir}/{package_name}.
            - file_count (int): Number of files in the archive.
            - status (str): "success".

    Raises:
        PackagingError: If the build directory does not exist or the output
            directory cannot be created.
        ArchiveError: If the archive cannot be written.

    Example:
        Basic packaging:
            ```python
            result = create_wgt(Path("build/tizen"), Path("dist"))
            print(result.package_path)  # dist/package.wgt
            ```
    """
    from tizenpkgtool.logging import get_global_logger

    logger = get_global_logger()
    logger.info("Start packaging Samsung Tizen TV Platform......")

    build_dir = Path(build_dir).resolve()
    output_dir = Path(output_dir).resolve()

    if not build_dir.is_dir():
        raise PackagingError(f"Build directory not found: {build_dir}")

    logger.step(1, 3, "Preparing output directory...")
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as err:
        raise PackagingError(f"Cannot create output directory {output_dir}: {err}") from err

    package_path = output_dir / package_name

    logger.step(2, 3, "Collecting files...")
    files = _collect_files(build_dir, exclude=package_path)
    logger.verbose("PACKAGE", f"Archiving {len(files)} file(s) from {build_dir}")

    logger.step(3, 3, "Creating .wgt package...")
    _write_archive(build_dir, files, package_path)

    logger.verbose("PACKAGE", f"[OK] Package created: {package_path}")
    logger.info(f"Packaged at {output_dir}")

    return PackageResult(
        build_dir=build_dir,
        package_path=package_path,
        file_count=len(files),
        status="success",
    )
