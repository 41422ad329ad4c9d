# tests/conftest.py
"""
Shared fixtures for the cppstarter suite.

Everything here is hermetic:
- FakeRunner records tool invocations instead of spawning processes.
- Tool lookup is a plain function, never the real PATH.
- License downloads are served from a canned string.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Sequence, Tuple

import pytest

from cppstarter.prompts import ScriptedPrompter
from cppstarter.runner import CommandResult, ToolRunner
from cppstarter.state import AppState

APACHE_STUB = "\n".join([
    "Apache License",
    "Version 2.0, January 2004",
    "",
    "Copyright [yyyy] [name of copyright owner]",
    "",
    "END OF TERMS AND CONDITIONS",
]) + "\n"


class FakeRunner(ToolRunner):
    """Records ``(tool, args, cwd)`` and answers with canned results."""

    def __init__(
        self,
        returncodes: Optional[Dict[str, int]] = None,
        outputs: Optional[Dict[str, str]] = None,
    ) -> None:
        self.calls: List[Tuple[str, List[str], object]] = []
        self.returncodes = returncodes or {}
        self.outputs = outputs or {}

    def run(self, tool: str, args: Sequence[str] = (), cwd=None, capture: bool = False) -> CommandResult:
        self.calls.append((tool, list(args), cwd))
        return CommandResult(self.returncodes.get(tool, 0), self.outputs.get(tool, ""))

    def tools_called(self) -> List[str]:
        return [c[0] for c in self.calls]


def which_all(tool: str) -> Optional[str]:
    return f"/usr/bin/{tool}"


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner(outputs={"git": "Jane Doe\n"})


@pytest.fixture
def runner_cls():
    """The FakeRunner class, for tests that need custom exit codes."""
    return FakeRunner


@pytest.fixture
def fetched_urls() -> List[str]:
    return []


@pytest.fixture
def make_state(fake_runner, fetched_urls):
    """Factory building an AppState around the fake collaborators."""

    def _fetch(url: str) -> str:
        fetched_urls.append(url)
        return APACHE_STUB

    def _make(
        answers: Iterable[str] = (),
        which=which_all,
        headless: bool = False,
        runner: Optional[FakeRunner] = None,
    ) -> AppState:
        return AppState(
            runner=runner or fake_runner,
            prompter=ScriptedPrompter(answers),
            which=which,
            fetch=_fetch,
            headless=headless,
        )

    return _make
