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

"""Console output for tizenpkgtool builds and packages.

build_project() and create_wgt() report progress through the logger returned
by get_global_logger(). Nothing is printed until the CLI installs a
DefaultLogger; library callers get SilentLogger.

Output kinds:
- step: numbered build/package stages, e.g. "[2/5] Copying files..."
- info: lines the user must read, such as the cached userconf.json block
  shown before the reuse prompt
- warning: a stale or corrupt userconf.json, a missing host config.xml
- verbose: per-file copy and render details (-v)
- debug: template and archive internals (-d, implies -v)

Example:
    Show per-file details while building:
        ```python
        from tizenpkgtool.logging import get_logger, set_global_logger

        set_global_logger(get_logger(verbose=True))
        ```
"""

from __future__ import annotations

from typing import Protocol


class Logger(Protocol):
    """What build and package code may print through.

    verbose() and debug() take a tag such as "USERCONF", "BUILD",
    "TEMPLATE" or "PACKAGE" naming the stage the line comes from.
    """

    def step(self, step: int, total: int, message: str) -> None: ...

    def info(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def verbose(self, prefix: str, message: str) -> None: ...

    def debug(self, prefix: str, message: str) -> None: ...


class DefaultLogger:
    """Prints to stdout in the tizenpkg console format."""

    def __init__(self, verbose: bool = False, debug: bool = False) -> None:
        self._verbose = verbose or debug
        self._debug = debug

    def step(self, step: int, total: int, message: str) -> None:
        print(f"[{step}/{total}] {message}")

    def info(self, message: str) -> None:
        print(message)

    def warning(self, message: str) -> None:
        print(f"[WARNING] {message}")

    def verbose(self, prefix: str, message: str) -> None:
        if self._verbose:
            print(f"[{prefix}] {message}")

    def debug(self, prefix: str, message: str) -> None:
        if self._debug:
            print(f"[{prefix}] {message}")


class SilentLogger:
    """Discards everything. Installed until the CLI picks a logger."""

    def step(self, step: int, total: int, message: str) -> None:
        pass

    def info(self, message: str) -> None:
        pass

    def warning(self, message: str) -> None:
        pass

    def verbose(self, prefix: str, message: str) -> None:
        pass

    def debug(self, prefix: str, message: str) -> None:
        pass


_global_logger: Logger = SilentLogger()


def get_logger(verbose: bool = False, debug: bool = False) -> Logger:
    """Return a stdout logger for the -v/-d flags."""
    return DefaultLogger(verbose=verbose, debug=debug)


def get_global_logger() -> Logger:
    """Return the logger build and package code prints through."""
    return _global_logger


def set_global_logger(logger: Logger) -> None:
    """Install logger for every later get_global_logger() call."""
    global _global_logger
    _global_logger = logger
