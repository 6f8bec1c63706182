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

"""Command-line interface for tizenpkgtool.

This module provides the main CLI entry point for the tizenpkg tool.

Commands:

    build: Build a Tizen platform tree from web sources
    package: Create a .wgt package from a built tree

Example:
    Build (prompts for application metadata):
        ```bash
        $ tizenpkg build www platforms/tizen/build platform_repos/sectv-tizen \\
            --script toast.js=dist/toast.js
        ```

    Build without prompting (reuse userconf.json or accept defaults):
        ```bash
        $ tizenpkg build www platforms/tizen/build platform_repos/sectv-tizen --yes
        ```

    Create .wgt package:
        ```bash
        $ tizenpkg package platforms/tizen/build platforms/tizen/package
        ```

Exit Codes:

- 0: Success
- 1: Error (configuration, prompt, copy, template, or archive failure)
- 130: Interrupted

Note:
    Verbose mode shows full tracebacks on errors for debugging.
    Debug mode implies verbose mode.
"""

from __future__ import annotations

import argparse
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
import sys

from tizenpkgtool.build import PackagerContext, build_project, create_wgt
from tizenpkgtool.config import load_settings
from tizenpkgtool.exceptions import CopyError, TizenPkgError
from tizenpkgtool.logging import get_logger, set_global_logger
from tizenpkgtool.prompts import DefaultsPrompter, QuestionaryPrompter


def _parse_scripts(values: list[str]) -> dict[str, str]:
    """Parse repeated --script REL=SRC options into a mapping."""
    scripts: dict[str, str] = {}
    for value in values:
        relative, sep, source = value.partition("=")
        if not sep or not relative or not source:
            raise argparse.ArgumentTypeError(
                f"--script expects REL=SRC (e.g. toast.js=dist/toast.js), got {value!r}"
            )
        scripts[relative] = source
    return scripts


def _report_error(err: Exception, args: argparse.Namespace) -> int:
    print(f"Error: {err}")
    if args.verbose or args.debug:
        import traceback

        traceback.print_exc()
    return 1


def cmd_build(args: argparse.Namespace) -> int:
    """Handler for 'tizenpkg build' command.

    Loads settings and host defaults, builds the platform tree, and prints
    a results block.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Exit code (0 for success, 1 for failure).
    """
    logger = get_logger(verbose=args.verbose, debug=args.debug)
    set_global_logger(logger)

    try:
        scripts = _parse_scripts(args.script)
    except argparse.ArgumentTypeError as err:
        print(f"Error: {err}")
        return 1

    if args.config and not Path(args.config).exists():
        print(f"Error: Settings file not found: {args.config}")
        return 1

    www_src = Path(args.www_src).resolve()
    if not www_src.is_dir():
        print(f"Error: Source directory not found: {www_src}")
        return 1

    try:
        settings = load_settings(Path(args.config) if args.config else None)
        if args.userconf:
            settings["userconf_path"] = args.userconf
        if args.host_config:
            settings["host_config"] = args.host_config

        prompter = DefaultsPrompter() if args.yes else QuestionaryPrompter()
        context = PackagerContext.from_settings(settings, prompter=prompter)

        result = build_project(
            www_src,
            Path(args.dest),
            Path(args.platform_repos),
            scripts,
            context=context,
        )
    except CopyError as err:
        print(f"Error: {err}")
        print("Build finished with copy failures; the output may be incomplete.")
        return 1
    except TizenPkgError as err:
        return _report_error(err, args)

    print()
    print("=" * 70)
    print("BUILD RESULTS")
    print("=" * 70)
    print(f"App Name:        {result.name}")
    print(f"App ID:          {result.app_id}")
    print(f"Version:         {result.version}")
    print(f"Build Directory: {result.build_dir}")
    for rendered in result.rendered_files:
        print(f"Rendered:        {rendered.name}")
    print(f"Status:          {result.status}")
    print("=" * 70)
    print()
    print("[SUCCESS] Tizen platform built successfully!")

    return 0


def cmd_package(args: argparse.Namespace) -> int:
    """Handler for 'tizenpkg package' command.

    Args:
        args: Parsed command-line arguments containing the build directory,
            output directory, package name and settings file.

    Returns:
        Exit code (0 for success, 1 for failure).
    """
    logger = get_logger(verbose=args.verbose, debug=args.debug)
    set_global_logger(logger)

    build_dir = Path(args.build_dir).resolve()
    if not build_dir.exists():
        print(f"Error: Build directory not found: {build_dir}")
        return 1

    if args.config and not Path(args.config).exists():
        print(f"Error: Settings file not found: {args.config}")
        return 1

    try:
        settings = load_settings(Path(args.config) if args.config else None)
        package_name = args.name or str(settings["package_name"])
        result = create_wgt(build_dir, Path(args.dest), package_name=package_name)
    except TizenPkgError as err:
        return _report_error(err, args)

    print()
    print("=" * 70)
    print("PACKAGE RESULTS")
    print("=" * 70)
    print(f"Build Directory: {result.build_dir}")
    print(f"Package Path:    {result.package_path}")
    print(f"Files:           {result.file_count}")
    print(f"Status:          {result.status}")
    print("=" * 70)
    print()
    print("[SUCCESS] .wgt package created successfully!")

    return 0


def _add_output_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show progress and high-level status updates",
    )
    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="Show detailed debugging output (implies --verbose)",
    )


def _tool_version() -> str:
    try:
        return version("tizenpkgtool")
    except PackageNotFoundError:
        from tizenpkgtool import __version__

        return __version__


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands registered."""
    parser = argparse.ArgumentParser(
        prog="tizenpkg",
        description="tizenpkg - build and package web apps for Samsung Tizen TV",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"tizenpkg {_tool_version()}",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        help="Available commands",
        required=True,
    )

    # 'build' command
    parser_build = subparsers.add_parser(
        "build",
        help="Build a Tizen platform tree from web sources",
        description="Copy web sources and Tizen platform files into DEST and render config.xml/.project.",
    )
    parser_build.add_argument("www_src", help="Directory with the application's web assets")
    parser_build.add_argument("dest", help="Build output directory")
    parser_build.add_argument(
        "platform_repos",
        help="Tizen platform asset root (its www/ is overlaid onto DEST)",
    )
    parser_build.add_argument(
        "--script",
        action="append",
        default=[],
        metavar="REL=SRC",
        help="Extra file to copy into DEST (repeatable)",
    )
    parser_build.add_argument(
        "--config",
        default=None,
        help="Settings YAML file (default: ./tizenpkg.yaml if present)",
    )
    parser_build.add_argument(
        "--userconf",
        default=None,
        help="Metadata cache file (default: platforms/userconf.json)",
    )
    parser_build.add_argument(
        "--host-config",
        default=None,
        help="Host project config.xml providing prompt defaults (default: config.xml)",
    )
    parser_build.add_argument(
        "-y",
        "--yes",
        action="store_true",
        help="Do not prompt; reuse userconf.json or accept the defaults",
    )
    _add_output_flags(parser_build)
    parser_build.set_defaults(func=cmd_build)

    # 'package' command
    parser_package = subparsers.add_parser(
        "package",
        help="Create a .wgt package from a built tree",
        description="Zip a built Tizen platform tree into DEST/package.wgt.",
    )
    parser_package.add_argument("build_dir", help="Path to the built platform tree")
    parser_package.add_argument("dest", help="Directory for the .wgt output")
    parser_package.add_argument(
        "--name",
        default=None,
        help="Archive file name (default: package_name setting, package.wgt)",
    )
    parser_package.add_argument(
        "--config",
        default=None,
        help="Settings YAML file (default: ./tizenpkg.yaml if present)",
    )
    _add_output_flags(parser_package)
    parser_package.set_defaults(func=cmd_package)

    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the tizenpkg CLI.

    This function is registered as the 'tizenpkg' console script in pyproject.toml.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        exit_code = args.func(args)
    except KeyboardInterrupt:
        print("\nInterrupted.")
        exit_code = 130
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
