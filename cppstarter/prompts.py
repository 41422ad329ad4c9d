# cppstarter/prompts.py
"""
Interactive collection of project metadata.

Prompting goes through a small :class:`Prompter` seam:
- :class:`QuestionaryPrompter` asks the user in the terminal.
- :class:`ScriptedPrompter` replays a fixed list of answers (tests, headless
  runs).

Values given on the command line skip their prompt. Empty answers take the
default; only the project name has no default. Answers are otherwise
accepted verbatim.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Sequence, Tuple

import click
import questionary

from cppstarter.definitions import (
    BUILD_TYPE_CHOICES,
    CPP_STANDARD_CHOICES,
    DEFAULT_BUILD_TYPE,
    DEFAULT_CPP_STANDARD,
    DEFAULT_GENERATOR,
    DEFAULT_LICENSE,
    DEFAULT_MIN_CMAKE_VERSION,
    LICENSE_CHOICES,
)
from cppstarter.log_manager import get_logger
from cppstarter.project_spec import Environment, ProjectSpec, default_repo_url, normalize_name

__all__ = [
    "Prompter",
    "QuestionaryPrompter",
    "ScriptedPrompter",
    "collect_project_spec",
    "prompt_build_settings",
    "normalize_build_type",
]

logger = get_logger(__name__)


class Prompter:
    """Source of answers for the collectors below."""

    def text(self, question: str, default: str = "") -> str:
        raise NotImplementedError

    def select(self, question: str, choices: Sequence[str], default: str) -> str:
        raise NotImplementedError


class QuestionaryPrompter(Prompter):
    """Ask in the terminal. Ctrl-C/Esc aborts the whole command."""

    @staticmethod
    def _answered(answer: Optional[str]) -> str:
        if answer is None:
            click.echo("❌ Aborted by user.")
            raise click.Abort()
        return answer

    def text(self, question: str, default: str = "") -> str:
        return self._answered(questionary.text(question, default=default).ask())

    def select(self, question: str, choices: Sequence[str], default: str) -> str:
        return self._answered(
            questionary.select(question, choices=list(choices), default=default).ask()
        )


class ScriptedPrompter(Prompter):
    """Replay ``answers`` in order; once they run out, every answer is empty."""

    def __init__(self, answers: Iterable[str] = ()) -> None:
        self._answers: List[str] = list(answers)
        self.asked: List[str] = []

    def _next(self, question: str) -> str:
        self.asked.append(question)
        return self._answers.pop(0) if self._answers else ""

    def text(self, question: str, default: str = "") -> str:
        return self._next(question)

    def select(self, question: str, choices: Sequence[str], default: str) -> str:
        return self._next(question)


def _or_default(answer: Optional[str], default: str) -> str:
    answer = (answer or "").strip()
    return answer or default


def collect_project_spec(
    env: Environment,
    prompter: Prompter,
    overrides: Optional[Dict[str, Optional[str]]] = None,
    assume_defaults: bool = False,
) -> ProjectSpec:
    """Build a :class:`ProjectSpec` from overrides, prompts and defaults.

    Parameters
    ----------
    env
        Environment snapshot; its git identity seeds the default repo URL.
    prompter
        Where answers come from.
    overrides
        Values already supplied (keys: ``name``, ``repo_url``,
        ``cpp_standard``, ``min_cmake_version``, ``license_type``). A
        non-empty value skips its prompt.
    assume_defaults
        Skip every prompt but the name and use the defaults.

    Raises
    ------
    EmptyInputError
        If the project name ends up empty.
    """
    given = {k: v for k, v in (overrides or {}).items() if v}

    def ask(key: str, question: str, default: str, choices: Optional[Sequence[str]] = None) -> str:
        if key in given:
            return given[key]
        if assume_defaults:
            return default
        if choices:
            return _or_default(prompter.select(question, choices, default), default)
        return _or_default(prompter.text(question, default), default)

    raw_name = given.get("name")
    if raw_name is None:
        raw_name = prompter.text("📛 Project name:")
    name = normalize_name(raw_name)

    repo_url = ask("repo_url", "🔗 Repository URL:", default_repo_url(env.identity_name, name))
    cpp_standard = ask(
        "cpp_standard", "🧮 C++ standard:", DEFAULT_CPP_STANDARD, CPP_STANDARD_CHOICES
    )
    min_cmake = ask("min_cmake_version", "🛠️  Minimum CMake version:", DEFAULT_MIN_CMAKE_VERSION)
    license_type = ask("license_type", "📜 License:", DEFAULT_LICENSE, LICENSE_CHOICES)

    spec = ProjectSpec.create(
        name,
        env,
        repo_url=repo_url,
        cpp_standard=cpp_standard,
        min_cmake_version=min_cmake,
        license_type=license_type,
    )
    logger.debug("collected %s", spec)
    return spec


def normalize_build_type(value: Optional[str]) -> Optional[str]:
    """Map ``debug``/``release`` (any case) to ``Debug``/``Release``.

    Anything else is returned unchanged.
    """
    if not value:
        return None
    for choice in BUILD_TYPE_CHOICES:
        if value.lower() == choice.lower():
            return choice
    return value


def prompt_build_settings(
    prompter: Prompter,
    build_type: Optional[str] = None,
    generator: Optional[str] = None,
    assume_defaults: bool = False,
) -> Tuple[str, str]:
    """Return ``(build_type, generator)`` for ``cppstarter config``."""
    build_type = normalize_build_type(build_type)
    if not build_type:
        build_type = DEFAULT_BUILD_TYPE if assume_defaults else normalize_build_type(
            _or_default(
                prompter.select("🏗️  Build type:", BUILD_TYPE_CHOICES, DEFAULT_BUILD_TYPE),
                DEFAULT_BUILD_TYPE,
            )
        )
    if not generator:
        generator = DEFAULT_GENERATOR if assume_defaults else _or_default(
            prompter.text("⚙️  CMake generator:", DEFAULT_GENERATOR), DEFAULT_GENERATOR
        )
    return build_type, generator
