"""
Configuration loading for tizenpkgtool.

Two kinds of configuration feed a build:

Packager Settings
-----------------
An optional YAML file (``tizenpkg.yaml`` in the working directory, or the
path given with ``--config``) that overrides the built-in defaults:

    userconf_path: platforms/userconf.json
    host_config: config.xml
    package_name: package.wgt
    templates:
      - {file: config.xml.tmpl, hidden: false}
      - {file: project.tmpl, hidden: true}

The file is deep-merged over DEFAULT_SETTINGS with "last wins" semantics:
  - **Dicts**: Recursively merged (keys from overlay override base)
  - **Lists**: Completely replaced (NOT appended/extended)
  - **Scalars**: Overwritten (strings, numbers, booleans)

Relative paths are left relative; they are interpreted against the process
working directory, the same place userconf.json has always lived.

Host Config
-----------
The host project's Cordova-style ``config.xml`` provides the defaults shown
at the metadata prompt (name, version, description). A missing file yields
empty defaults; a malformed one is a ConfigError.

Functions
---------
load_settings : function
    Load packager settings merged over the defaults.
load_host_config : function
    Read name/version/description defaults from config.xml.

Private Helpers
---------------
_load_yaml_file : Load YAML with error handling
_deep_merge_dicts : Recursive dict merging
_find_child_text : Namespace-agnostic child element lookup

Examples
--------
    >>> from pathlib import Path
    >>> from tizenpkgtool.config import load_settings, load_host_config
    >>> settings = load_settings()
    >>> settings["package_name"]
    'package.wgt'
    >>> host = load_host_config(Path(settings["host_config"]))
"""

from __future__ import annotations

import copy
from dataclasses import dataclass
from pathlib import Path
from typing import Any
import xml.etree.ElementTree as ET

import yaml

from tizenpkgtool.exceptions import ConfigError

DEFAULT_SETTINGS_FILE = Path("tizenpkg.yaml")

DEFAULT_SETTINGS: dict[str, Any] = {
    "userconf_path": "platforms/userconf.json",
    "host_config": "config.xml",
    "package_name": "package.wgt",
    "templates": [
        {"file": "config.xml.tmpl", "hidden": False},
        # .project is a hidden file, so the template is shipped without the dot
        {"file": "project.tmpl", "hidden": True},
    ],
}

# -------------------------------
# Data types
# -------------------------------


@dataclass(frozen=True)
class HostConfig:
    """
    Defaults read from the host project's config.xml.
    Empty strings stand in for anything the file does not declare.
    """

    name: str = ""
    version: str = ""
    description: str = ""
    widget_id: str = ""


# -------------------------------
# YAML helpers
# -------------------------------


def _load_yaml_file(p: Path) -> Any:
    """
    Load a YAML file and return the parsed Python object.

    Raises:
      FileNotFoundError      - when file does not exist
      ConfigError            - for invalid YAML (parse error) with chained context
    """
    if not p.exists():
        raise FileNotFoundError(f"file not found: {p}")
    try:
        with p.open("r", encoding="utf-8") as f:
            return yaml.safe_load(f)
    except yaml.YAMLError as err:
        raise ConfigError(f"Error parsing YAML: {p}: {err}") from err


# -------------------------------
# Merge logic
# -------------------------------


def _deep_merge_dicts(base: dict[str, Any], overlay: dict[str, Any]) -> dict[str, Any]:
    """
    Deep-merge two dicts with "overlay wins".

    Rules:
      - dict + dict -> deep merge
      - list + list -> overlay REPLACES base (not concatenated)
      - everything else -> overlay overwrites base

    This function does not mutate inputs; returns a new dict.
    """
    result: dict[str, Any] = dict(base)
    for k, v in overlay.items():
        if k in result and isinstance(result[k], dict) and isinstance(v, dict):
            result[k] = _deep_merge_dicts(result[k], v)
        else:
            result[k] = v
    return result


# -------------------------------
# Public API
# -------------------------------


def load_settings(settings_path: Path | None = None) -> dict[str, Any]:
    """
    Load packager settings.

    Steps
      1) Start from a copy of DEFAULT_SETTINGS.
      2) Read the settings YAML (explicit path, else tizenpkg.yaml if present).
      3) Merge the file over the defaults (dicts deep-merge, lists replace).
      4) Check that the template list is well formed.

    Returns
      The merged settings dict.

    Raises
      ConfigError if the YAML is invalid, is not a mapping, or declares
      malformed templates; FileNotFoundError if an explicit path is missing.
    """
    from tizenpkgtool.logging import get_global_logger

    logger = get_global_logger()
    settings = copy.deepcopy(DEFAULT_SETTINGS)

    if settings_path is None:
        if not DEFAULT_SETTINGS_FILE.exists():
            logger.verbose("CONFIG", "No tizenpkg.yaml found, using built-in settings")
            return settings
        settings_path = DEFAULT_SETTINGS_FILE

    logger.verbose("CONFIG", f"Loading settings: {settings_path}")
    overlay = _load_yaml_file(settings_path)

    if overlay is None:
        logger.verbose("CONFIG", f"Settings file is empty: {settings_path}")
        return settings
    if not isinstance(overlay, dict):
        raise ConfigError(f"top-level YAML must be a mapping (dict): {settings_path}")

    settings = _deep_merge_dicts(settings, overlay)

    templates = settings.get("templates")
    if not isinstance(templates, list) or not all(
        isinstance(t, dict) and str(t.get("file", "")).endswith(".tmpl") for t in templates
    ):
        raise ConfigError(
            f"'templates' must be a list of {{file: <name>.tmpl, hidden: bool}} in {settings_path}"
        )

    logger.debug("CONFIG", f"Effective settings: {settings}")
    return settings


def _find_child_text(root: ET.Element, tag: str) -> str:
    """Return the text of the first direct child named tag, ignoring namespaces."""
    for child in root:
        local = child.tag.rsplit("}", 1)[-1] if isinstance(child.tag, str) else ""
        if local == tag:
            return (child.text or "").strip()
    return ""


def load_host_config(config_xml: Path) -> HostConfig:
    """
    Read application defaults from the host project's config.xml.

    Recognizes the Cordova/W3C widget layout:

        <widget id="com.example.app" version="1.0.0" xmlns="http://www.w3.org/ns/widgets">
            <name>Example</name>
            <description>An example app</description>
        </widget>

    Returns
      HostConfig with empty strings for anything not declared. A missing
      file is not an error: a warning is logged and empty defaults returned.

    Raises
      ConfigError if the file exists but cannot be parsed.
    """
    from tizenpkgtool.logging import get_global_logger

    logger = get_global_logger()

    if not config_xml.exists():
        logger.warning(f"Host config not found: {config_xml}. Prompt defaults will be empty.")
        return HostConfig()

    try:
        root = ET.parse(config_xml).getroot()
    except ET.ParseError as err:
        raise ConfigError(f"Error parsing host config {config_xml}: {err}") from err

    host = HostConfig(
        name=_find_child_text(root, "name"),
        version=root.get("version", ""),
        description=_find_child_text(root, "description"),
        widget_id=root.get("id", ""),
    )
    logger.verbose("CONFIG", f"Host config: name={host.name!r} version={host.version!r}")
    return host
