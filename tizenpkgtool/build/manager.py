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

"""Build manager for Tizen platform trees.

This module orchestrates the complete build process: it collects the
application metadata, lays the web sources and Tizen platform files into
the destination, renders the platform templates, and saves the metadata
for the next build.

Private Helpers:
    - _load_cached_metadata: Read a reusable metadata block from userconf.json
    - _show_metadata: Print the cached metadata before asking to reuse it
    - _ask_reuse_metadata: Cache-reuse flow (confirm, then bump version)
    - _ask_new_metadata: Prompt flow (name, id, version, description)
    - _create_destination: Create the destination directory chain
    - _copy_scripts: Copy explicit script files into the destination
    - _copy_tree_contents: Overlay a directory's contents onto the destination

Design Principles:
    - Copy order is fixed: scripts, then www sources, then platform www;
      later copies overwrite earlier ones
    - A failed copy does not stop the build; all copy failures are raised
      together as one CopyError after the metadata has been saved
    - Template failures stop the build before userconf.json is written
    - userconf.json is read once at the start and written once at the end

Example:
    from pathlib import Path
    from tizenpkgtool.build import build_project

    result = build_project(
        www_src=Path("www"),
        dest=Path("platforms/tizen/build"),
        platform_repos=Path("platform_repos/sectv-tizen"),
        scripts={"toast.js": "dist/toast.js"},
    )

    print(f"Built: {result.build_dir}")
"""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path
import shutil

from tizenpkgtool.build.context import PackagerContext
from tizenpkgtool.build.template import render_template_file
from tizenpkgtool.config import load_settings
from tizenpkgtool.exceptions import CopyError
from tizenpkgtool.metadata import ApplicationMetadata, bump_revision, generate_app_id
from tizenpkgtool.prompts import new_metadata_questions, reuse_metadata_questions
from tizenpkgtool.results import BuildResult
from tizenpkgtool.state import UserConfig

CopyFailure = tuple[str, str, str]


def _load_cached_metadata(
    userconf: UserConfig, context: PackagerContext
) -> ApplicationMetadata | None:
    """Return reusable metadata from userconf.json, or None.

    Warns when the file exists but its block is missing or invalid.
    """
    from tizenpkgtool.logging import get_global_logger

    logger = get_global_logger()
    userconf.load()

    if not userconf.exists:
        return None

    cached = userconf.get_metadata(context.platform_key)
    if cached is None and userconf.reason:
        logger.warning(userconf.reason)
    return cached


def _show_metadata(metadata: ApplicationMetadata) -> None:
    from tizenpkgtool.logging import get_global_logger

    logger = get_global_logger()
    logger.info("")
    logger.info("      > [ Current Information ]")
    logger.info(f"      > name        : {metadata.name}")
    logger.info(f"      > id          : {metadata.id}")
    logger.info(f"      > version     : {metadata.version}")
    logger.info(f"      > description : {metadata.description}")


def _ask_reuse_metadata(
    cached: ApplicationMetadata, context: PackagerContext
) -> ApplicationMetadata | None:
    """Offer the cached metadata with a bumped version.

    Returns:
        The cached metadata with the new version, or None if the user
        declined to reuse it.
    """
    from tizenpkgtool.logging import get_global_logger

    logger = get_global_logger()
    next_version = bump_revision(cached.version)
    _show_metadata(cached)

    answers = context.prompter.ask(reuse_metadata_questions(cached.version, next_version))
    if not answers.get("cache"):
        logger.verbose("BUILD", "Cached metadata declined")
        return None

    version = answers.get("revision") or next_version
    logger.verbose("BUILD", f"Reusing cached metadata, version {cached.version} -> {version}")
    return replace(cached, version=version)


def _ask_new_metadata(context: PackagerContext) -> ApplicationMetadata:
    """Collect all four metadata fields from the user."""
    answers = context.prompter.ask(
        new_metadata_questions(context.host_config, generate_app_id())
    )
    return ApplicationMetadata(
        name=answers["name"],
        id=answers["id"],
        version=answers["version"],
        description=answers["description"],
    )


def resolve_metadata(context: PackagerContext, userconf: UserConfig) -> ApplicationMetadata:
    """Load reusable metadata from userconf.json or prompt for new metadata.

    Args:
        context: Build context (prompter, host defaults, platform key).
        userconf: userconf.json handle; it is loaded here.

    Returns:
        The metadata to build with.

    Raises:
        PromptError: If the prompt is cancelled or a default is invalid
            in non-interactive mode.
    """
    cached = _load_cached_metadata(userconf, context)
    if cached is not None:
        reused = _ask_reuse_metadata(cached, context)
        if reused is not None:
            return reused
    return _ask_new_metadata(context)


def _create_destination(dest: Path) -> None:
    """Create dest and every missing parent directory."""
    from tizenpkgtool.logging import get_global_logger

    logger = get_global_logger()
    dest.mkdir(parents=True, exist_ok=True)
    logger.verbose("BUILD", f"Destination ready: {dest}")


def _copy_scripts(scripts: dict[str, str | Path], dest: Path) -> list[CopyFailure]:
    """Copy each script source to dest/<relative path>, overwriting.

    Absolute keys are taken relative to dest. A key that escapes dest
    through ".." is recorded as a failure and nothing is written.

    Returns:
        Failures as (source, target, reason) tuples.
    """
    from tizenpkgtool.logging import get_global_logger

    logger = get_global_logger()
    failures: list[CopyFailure] = []

    for relative, source in scripts.items():
        target = (dest / str(relative).lstrip("/\\")).resolve()
        src = Path(source).resolve()

        if not target.is_relative_to(dest.resolve()) or target == dest.resolve():
            failures.append((str(src), str(target), "target outside build directory"))
            continue

        if not src.is_file():
            failures.append((str(src), str(target), "no such file"))
            continue

        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            shutil.copyfile(src, target)
        except OSError as err:
            failures.append((str(src), str(target), str(err)))
            continue

        logger.verbose("BUILD", f"  Copied script: {relative}")

    return failures


def _copy_tree_contents(source_dir: Path, dest: Path) -> list[CopyFailure]:
    """Recursively copy the contents of source_dir into dest, overwriting.

    Top-level entries whose names start with "." are not copied, matching
    a shell ``cp -rf source_dir/* dest``.

    Returns:
        Failures as (source, target, reason) tuples.
    """
    from tizenpkgtool.logging import get_global_logger

    logger = get_global_logger()

    if not source_dir.is_dir():
        return [(str(source_dir), str(dest), "no such directory")]

    failures: list[CopyFailure] = []
    for item in sorted(source_dir.iterdir()):
        if item.name.startswith("."):
            logger.debug("BUILD", f"  Skipped hidden entry: {item.name}")
            continue

        target = dest / item.name
        try:
            if item.is_dir():
                shutil.copytree(item, target, dirs_exist_ok=True)
                logger.verbose("BUILD", f"  Copied directory: {item.name}/")
            else:
                shutil.copy2(item, target)
                logger.verbose("BUILD", f"  Copied file: {item.name}")
        except OSError as err:
            failures.append((str(item), str(target), str(err)))

    return failures


def build_project(
    www_src: Path,
    dest: Path,
    platform_repos: Path,
    scripts: dict[str, str | Path] | None = None,
    *,
    context: PackagerContext | None = None,
) -> BuildResult:
    """Build a Tizen platform tree from web sources.

    This is the main entry point for the build process. It:

    1. Resolves all paths to absolute form
    2. Reuses metadata from userconf.json or prompts for it
    3. Copies scripts, www sources, and platform www into dest
    4. Renders config.xml and .project from their templates
    5. Saves the metadata to userconf.json

    Args:
        www_src: Directory with the application's web assets.
        dest: Build output directory. Created if missing.
        platform_repos: Tizen platform asset root; its www/ subdirectory
            is overlaid onto dest.
        scripts: Mapping of dest-relative file name to source file path.
            Default is no extra scripts.
        context: Build context. Default: built from load_settings(), which
            reads the host config.xml and uses the interactive prompter.

    Returns:
        BuildResult with the metadata used and the rendered file paths.

    Raises:
        PromptError: If metadata could not be collected.
        TemplateRenderError: If a template is missing or fails to render.
            userconf.json is not written in this case.
        CopyError: If any copy failed. Raised after every other step,
            including saving userconf.json, has run.

    Example:
        Build with one extra script:

            result = build_project(
                Path("www"), Path("build/tizen"), Path("platform_repos/sectv-tizen"),
                scripts={"toast.js": "dist/toast.js"},
            )
            print(result.version)  # 1.0.1
    """
    from tizenpkgtool.logging import get_global_logger

    logger = get_global_logger()
    if context is None:
        context = PackagerContext.from_settings(load_settings())
    scripts = scripts or {}

    logger.info("Start building Samsung Tizen Platform......")

    www_src = Path(www_src).resolve()
    dest = Path(dest).resolve()
    platform_repos = Path(platform_repos).resolve()

    logger.step(1, 5, "Resolving application metadata...")
    userconf = UserConfig(context.userconf_path)
    metadata = resolve_metadata(context, userconf)
    logger.verbose("BUILD", f"Building {metadata.name} v{metadata.version} ({metadata.id})")

    logger.step(2, 5, "Copying sources...")
    _create_destination(dest)
    failures = _copy_scripts(scripts, dest)
    failures += _copy_tree_contents(www_src, dest)

    logger.step(3, 5, "Copying platform files...")
    failures += _copy_tree_contents(platform_repos / "www", dest)

    logger.step(4, 5, "Rendering templates...")
    rendered = tuple(
        render_template_file(dest, spec.file, metadata, hidden=spec.hidden)
        for spec in context.templates
    )

    logger.step(5, 5, "Saving application metadata...")
    userconf.set_metadata(context.platform_key, metadata)
    userconf.save()
    logger.verbose("BUILD", f"[OK] Saved {userconf.path}")

    if failures:
        raise CopyError(failures)

    logger.info(f"Built at {dest}")

    return BuildResult(
        name=metadata.name,
        app_id=metadata.id,
        version=metadata.version,
        build_dir=dest,
        rendered_files=rendered,
        status="success",
    )
