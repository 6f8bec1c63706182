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

"""Build context for tizenpkgtool.

PackagerContext carries everything a build needs besides its input paths:
where userconf.json lives, the host defaults, the prompt engine, and the
templates to render. It is created once per command and passed explicitly.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from tizenpkgtool.config import DEFAULT_SETTINGS, HostConfig, load_host_config
from tizenpkgtool.metadata import PLATFORM_KEY
from tizenpkgtool.prompts import Prompter, QuestionaryPrompter


@dataclass(frozen=True)
class TemplateSpec:
    """A template to render inside the build directory.

    Attributes:
        file: Template file name, ending in .tmpl.
        hidden: Prefix the rendered name with "."
    """

    file: str
    hidden: bool = False


def _default_templates() -> tuple[TemplateSpec, ...]:
    return tuple(
        TemplateSpec(file=t["file"], hidden=bool(t.get("hidden", False)))
        for t in DEFAULT_SETTINGS["templates"]
    )


@dataclass(frozen=True)
class PackagerContext:
    """Per-invocation build context.

    Attributes:
        userconf_path: Location of userconf.json.
        host_config: Prompt defaults from the host config.xml.
        prompter: Prompt engine used for metadata input.
        templates: Templates rendered after the platform files are copied.
        platform_key: Key of the metadata block in userconf.json.
    """

    userconf_path: Path = Path(DEFAULT_SETTINGS["userconf_path"])
    host_config: HostConfig = field(default_factory=HostConfig)
    prompter: Prompter = field(default_factory=QuestionaryPrompter)
    templates: tuple[TemplateSpec, ...] = field(default_factory=_default_templates)
    platform_key: str = PLATFORM_KEY

    @classmethod
    def from_settings(
        cls,
        settings: dict[str, Any],
        prompter: Prompter | None = None,
    ) -> PackagerContext:
        """Build a context from loaded settings.

        Reads the host config.xml named by ``settings["host_config"]``.

        Raises:
            ConfigError: If the host config exists but cannot be parsed.
        """
        templates = tuple(
            TemplateSpec(file=str(t["file"]), hidden=bool(t.get("hidden", False)))
            for t in settings.get("templates", DEFAULT_SETTINGS["templates"])
        )
        return cls(
            userconf_path=Path(settings.get("userconf_path", DEFAULT_SETTINGS["userconf_path"])),
            host_config=load_host_config(
                Path(settings.get("host_config", DEFAULT_SETTINGS["host_config"]))
            ),
            prompter=prompter if prompter is not None else QuestionaryPrompter(),
            templates=templates,
        )
