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

"""Exception hierarchy for tizenpkgtool.

This module defines a custom exception hierarchy that allows library users
to distinguish between different types of errors:

- ConfigError: Settings, host config.xml, or userconf.json problems
- PromptError: Interactive input cancelled or a default failed validation
- PackagingError: Build/package failures, with the more specific
  CopyError, TemplateRenderError, and ArchiveError subclasses

All exceptions inherit from TizenPkgError, allowing users to catch all
errors with a single except clause if needed.

Example:
    Catching specific error types:
        ```python
        from tizenpkgtool.build import build_project
        from tizenpkgtool.exceptions import CopyError, TemplateRenderError

        try:
            build_project(Path("www"), Path("build/tizen"), Path("platforms/tizen"))
        except CopyError as e:
            for source, target, reason in e.failures:
                print(f"{source} -> {target}: {reason}")
        except TemplateRenderError as e:
            print(f"Template error: {e}")
        ```

    Catching all errors:
        ```python
        from tizenpkgtool.exceptions import TizenPkgError

        try:
            create_wgt(Path("build/tizen"), Path("dist"))
        except TizenPkgError as e:
            print(f"tizenpkg error: {e}")
        ```
"""

from __future__ import annotations

__all__ = [
    "TizenPkgError",
    "ConfigError",
    "PromptError",
    "PackagingError",
    "CopyError",
    "TemplateRenderError",
    "ArchiveError",
]


class TizenPkgError(Exception):
    """Base exception for all tizenpkgtool errors.

    All tizenpkgtool-specific exceptions inherit from this class, allowing
    users to catch all errors with a single except clause if needed.
    """

    pass


class ConfigError(TizenPkgError):
    """Raised for configuration-related errors.

    This exception is raised when there are problems with:

    - YAML parsing of the settings file (syntax errors, invalid structure)
    - Parsing the host project's config.xml
    - An application metadata block that is incomplete or has an invalid
      version string
    """

    pass


class PromptError(TizenPkgError):
    """Raised when metadata could not be collected from the user.

    This covers a cancelled interactive prompt (Ctrl-C) and, in
    non-interactive mode, a default answer that fails its validator.
    """

    pass


class PackagingError(TizenPkgError):
    """Raised for build/package-related errors.

    This exception is raised when there are problems with:

    - Missing build directories
    - File operations during the build
    - Template rendering
    - Archive creation
    """

    pass


class CopyError(PackagingError):
    """Raised after a build when one or more copy steps failed.

    Later build steps still run after a failed copy; the failures are
    collected and reported once, at the end of the build.

    Attributes:
        failures: List of (source, target, reason) tuples, in the order the
            copies were attempted.
    """

    def __init__(self, failures: list[tuple[str, str, str]]) -> None:
        self.failures = list(failures)
        lines = [f"  {source} -> {target}: {reason}" for source, target, reason in failures]
        super().__init__(
            f"{len(self.failures)} copy operation(s) failed:\n" + "\n".join(lines)
        )


class TemplateRenderError(PackagingError):
    """Raised when a template cannot be read, rendered, or installed."""

    pass


class ArchiveError(PackagingError):
    """Raised when the .wgt archive cannot be written."""

    pass
