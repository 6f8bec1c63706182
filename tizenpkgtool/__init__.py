"""
tizenpkgtool - Samsung Tizen TV packaging

A Python-based CLI tool that turns a web application source tree into a
Samsung Tizen TV platform tree and a .wgt package.

tizenpkgtool provides:
  - Interactive application metadata entry (name, id, version, description)
  - Metadata reuse from platforms/userconf.json with automatic revision bump
  - Overlay of web sources, Tizen platform files, and extra scripts
  - config.xml and .project generation from templates
  - .wgt (zip) package creation

Quick Start
-----------
Build the platform tree:

    $ tizenpkg build www platforms/tizen/build platform_repos/sectv-tizen

Package it:

    $ tizenpkg package platforms/tizen/build platforms/tizen/package

For full CLI documentation:

    $ tizenpkg --help

Package Structure
-----------------
cli : module
    Command-line interface with argparse.
build : package
    Build orchestration, template rendering, .wgt packaging.
config : package
    Settings YAML and host config.xml loading.
state : package
    userconf.json persistence.
metadata : module
    Application metadata, validators, and version bump.
prompts : module
    Declarative questions and prompt engines.

Public API
----------
    from tizenpkgtool.build import build_project, create_wgt, PackagerContext
    from tizenpkgtool.config import load_settings, load_host_config
    from tizenpkgtool.metadata import bump_revision, is_valid_version
"""

__version__ = "0.1.0"
__license__ = "Apache-2.0"
__description__ = "Build and package web applications for Samsung Tizen TV"

# Re-export commonly used functions for convenience
from tizenpkgtool.build import PackagerContext, build_project, create_wgt
from tizenpkgtool.config import load_host_config, load_settings
from tizenpkgtool.metadata import ApplicationMetadata, bump_revision, is_valid_version

__all__ = [
    "__version__",
    "__license__",
    "__description__",
    "build_project",
    "create_wgt",
    "PackagerContext",
    "load_settings",
    "load_host_config",
    "ApplicationMetadata",
    "bump_revision",
    "is_valid_version",
]
