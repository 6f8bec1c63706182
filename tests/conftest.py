"""
Pytest configuration and shared fixtures for tizenpkgtool tests.

This module provides reusable fixtures and test utilities used across
the test suite.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from tizenpkgtool.build import PackagerContext
from tizenpkgtool.config import HostConfig
from tizenpkgtool.exceptions import PromptError

CONFIG_XML_TMPL = """<?xml version="1.0" encoding="UTF-8"?>
<widget xmlns="http://www.w3.org/ns/widgets" xmlns:tizen="http://tizen.org/ns/widgets" version="{{version}}">
    <tizen:application id="{{id}}.{{name}}" package="{{id}}" required_version="2.3"/>
    <name>{{name}}</name>
    <description>{{description}}</description>
</widget>
"""

PROJECT_TMPL = """<?xml version="1.0" encoding="UTF-8"?>
<projectDescription>
    <name>{{name}}</name>
    <comment>{{description}}</comment>
</projectDescription>
"""


class ScriptedPrompter:
    """Prompter fake that answers from scripted responses.

    Each ask() call consumes the next dict from ``responses``; questions
    not named in it get their default. Questions whose ``when`` is False
    are skipped, and validators run on every answer, as in a real prompt.

    Attributes:
        calls: The question lists passed to each ask() call.
    """

    def __init__(self, *responses: dict[str, Any]) -> None:
        self.responses = list(responses)
        self.calls: list[list[Any]] = []

    def ask(self, questions):
        self.calls.append(list(questions))
        scripted = self.responses.pop(0) if self.responses else {}
        answers: dict[str, Any] = {}
        for question in questions:
            if question.when is not None and not question.when(answers):
                continue
            if question.name in scripted:
                value = scripted[question.name]
            elif question.kind == "confirm":
                value = True if question.default is None else question.default
            else:
                value = question.default
            if question.validate is not None:
                verdict = question.validate(value)
                if verdict is not True:
                    raise PromptError(f"{question.name}: {verdict}")
            answers[question.name] = value
        return answers

    def asked_names(self, call: int) -> list[str]:
        """Names of the questions in the given ask() call."""
        return [q.name for q in self.calls[call]]


@pytest.fixture
def host_config() -> HostConfig:
    """Host defaults as read from a config.xml."""
    return HostConfig(
        name="HelloTV",
        version="1.0.0",
        description="Hello from the host project",
        widget_id="com.example.hellotv",
    )


@pytest.fixture
def userconf_path(tmp_path: Path) -> Path:
    """Location of userconf.json inside the test directory (not created)."""
    return tmp_path / "platforms" / "userconf.json"


@pytest.fixture
def write_userconf(userconf_path: Path):
    """
    Factory fixture for writing userconf.json.

    Usage:
        write_userconf({"tizen": {...}})
    """

    def _write(data: Any) -> Path:
        userconf_path.parent.mkdir(parents=True, exist_ok=True)
        userconf_path.write_text(json.dumps(data), encoding="utf-8")
        return userconf_path

    return _write


@pytest.fixture
def cached_tizen() -> dict[str, str]:
    """A complete, reusable tizen metadata block."""
    return {
        "name": "CachedApp",
        "id": "abcde12345",
        "version": "1.0",
        "description": "Cached description",
    }


@pytest.fixture
def make_context(userconf_path: Path, host_config: HostConfig):
    """
    Factory fixture for a PackagerContext bound to the test userconf path.

    Usage:
        context = make_context(ScriptedPrompter({"name": "App"}))
    """

    def _make(prompter) -> PackagerContext:
        return PackagerContext(
            userconf_path=userconf_path,
            host_config=host_config,
            prompter=prompter,
        )

    return _make


@pytest.fixture
def web_project(tmp_path: Path) -> dict[str, Path]:
    """
    Create a www source tree, a Tizen platform repo, and an extra script.

    Layout:
        www/index.html, www/js/app.js, www/.gitignore
        platform/www/config.xml.tmpl, platform/www/project.tmpl,
        platform/www/js/tizen.js
        extra/toast.js
    """
    www = tmp_path / "www"
    (www / "js").mkdir(parents=True)
    (www / "index.html").write_text("<html>app</html>", encoding="utf-8")
    (www / "js" / "app.js").write_text("console.log('app');", encoding="utf-8")
    (www / ".gitignore").write_text("node_modules\n", encoding="utf-8")

    platform = tmp_path / "platform"
    (platform / "www" / "js").mkdir(parents=True)
    (platform / "www" / "config.xml.tmpl").write_text(CONFIG_XML_TMPL, encoding="utf-8")
    (platform / "www" / "project.tmpl").write_text(PROJECT_TMPL, encoding="utf-8")
    (platform / "www" / "js" / "tizen.js").write_text("// tizen", encoding="utf-8")

    extra = tmp_path / "extra"
    extra.mkdir()
    (extra / "toast.js").write_text("// toast", encoding="utf-8")

    return {
        "www": www,
        "platform": platform,
        "script": extra / "toast.js",
        "dest": tmp_path / "out" / "nested" / "build",
    }
