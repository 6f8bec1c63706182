"""
Tizen platform building and packaging for tizenpkgtool.

This package lays out a Tizen TV platform tree from web sources and zips it
into a .wgt package.

Public API:

build_project : function
    Build a Tizen platform tree (metadata, copies, templates, userconf).
create_wgt : function
    Create a .wgt package from a built platform tree.
PackagerContext : class
    Per-invocation build context (userconf path, prompter, templates).

Example:
    from pathlib import Path
    from tizenpkgtool.build import build_project, create_wgt

    build_result = build_project(
        www_src=Path("www"),
        dest=Path("platforms/tizen/build"),
        platform_repos=Path("platform_repos/sectv-tizen"),
    )

    package_result = create_wgt(
        build_dir=build_result.build_dir,
        output_dir=Path("platforms/tizen/package"),
    )

    print(f"Package: {package_result.package_path}")
"""

from .context import PackagerContext, TemplateSpec
from .manager import build_project
from .packager import create_wgt

__all__ = ["PackagerContext", "TemplateSpec", "build_project", "create_wgt"]
