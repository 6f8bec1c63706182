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

"""Interactive metadata prompts for tizenpkgtool.

Questions are declared as plain Question descriptors and handed to a
Prompter, which returns a mapping of answers keyed by question name. The
build manager only ever talks to the Prompter protocol, so tests can drive
the prompt flows with scripted answers.

Prompters:

- QuestionaryPrompter: interactive terminal prompts via questionary. A
  failing validator keeps the user on the same question.
- DefaultsPrompter: non-interactive; accepts every default and fails with
  PromptError if a default does not pass its validator.

Example:
    ```python
    from tizenpkgtool.prompts import QuestionaryPrompter, new_metadata_questions

    answers = QuestionaryPrompter().ask(new_metadata_questions(host, "a1b2c3d4e5"))
    print(answers["id"])
    ```
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Literal, Protocol

import questionary

from tizenpkgtool.config import HostConfig
from tizenpkgtool.exceptions import PromptError
from tizenpkgtool.metadata import validate_app_id, validate_version

Answers = dict[str, Any]


@dataclass(frozen=True)
class Question:
    """A single prompt.

    Attributes:
        kind: "input" for free text, "confirm" for yes/no.
        name: Key of the answer in the returned mapping.
        message: Text shown to the user.
        default: Default answer.
        when: Predicate on the answers collected so far; the question is
            skipped when it returns False.
        validate: Returns True for an acceptable answer, otherwise an
            error message.
    """

    kind: Literal["input", "confirm"]
    name: str
    message: str
    default: Any = None
    when: Callable[[Answers], bool] | None = None
    validate: Callable[[str], bool | str] | None = None

    def to_questionary(self) -> dict[str, Any]:
        """Convert to a questionary question dict."""
        spec: dict[str, Any] = {
            "type": "confirm" if self.kind == "confirm" else "text",
            "name": self.name,
            "message": self.message,
        }
        if self.kind == "confirm":
            spec["default"] = bool(self.default) if self.default is not None else True
        else:
            spec["default"] = "" if self.default is None else str(self.default)
        if self.when is not None:
            spec["when"] = self.when
        if self.validate is not None:
            spec["validate"] = self.validate
        return spec


class Prompter(Protocol):
    """Protocol for prompt engines."""

    def ask(self, questions: list[Question]) -> Answers:
        """Ask the questions in order and return the answers by name."""
        ...


class QuestionaryPrompter:
    """Interactive prompter backed by questionary."""

    def ask(self, questions: list[Question]) -> Answers:
        try:
            answers = questionary.unsafe_prompt([q.to_questionary() for q in questions])
        except KeyboardInterrupt as err:
            raise PromptError("Prompt cancelled by user") from err

        # Skipped questions are simply absent; asked ones must be answered
        asked = [q for q in questions if q.when is None or q.when(answers)]
        missing = [q.name for q in asked if q.name not in answers]
        if missing:
            raise PromptError(f"No answer for: {', '.join(missing)}")
        return answers


class DefaultsPrompter:
    """Non-interactive prompter that accepts every default answer.

    Confirm questions without a default are answered True, so cached
    metadata is reused when it is valid.
    """

    def ask(self, questions: list[Question]) -> Answers:
        from tizenpkgtool.logging import get_global_logger

        logger = get_global_logger()
        answers: Answers = {}
        for question in questions:
            if question.when is not None and not question.when(answers):
                continue

            if question.kind == "confirm":
                value: Any = True if question.default is None else bool(question.default)
            else:
                value = "" if question.default is None else str(question.default)

            if question.validate is not None:
                verdict = question.validate(value)
                if verdict is not True:
                    raise PromptError(
                        f"Default for {question.name!r} ({value!r}) is not valid: {verdict}"
                    )

            logger.verbose("PROMPT", f"{question.name} = {value!r} (default)")
            answers[question.name] = value
        return answers


def new_metadata_questions(host: HostConfig, default_id: str) -> list[Question]:
    """Questions for entering application metadata from scratch."""
    return [
        Question(
            kind="input",
            name="name",
            message="What's the application's name?",
            default=host.name,
        ),
        Question(
            kind="input",
            name="id",
            message="Application Id (Valid RegExp: [0-9a-zA-Z]{10})",
            default=default_id,
            validate=validate_app_id,
        ),
        Question(
            kind="input",
            name="version",
            message="Application Version (Valid RegExp: \\d+.\\d+.\\d+)",
            default=host.version,
            validate=validate_version,
        ),
        Question(
            kind="input",
            name="description",
            message="Application Description",
            default=host.description,
        ),
    ]


def reuse_metadata_questions(current_version: str, next_version: str) -> list[Question]:
    """Questions for reusing cached metadata with a new version."""
    return [
        Question(
            kind="confirm",
            name="cache",
            message="Already have 'userconf.json', Do you want to use this data?",
            default=True,
        ),
        Question(
            kind="input",
            name="revision",
            message=f"(current version is {current_version}), Application version",
            default=next_version,
            when=lambda answers: bool(answers.get("cache")),
            validate=validate_version,
        ),
    ]
