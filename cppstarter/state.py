# cppstarter/state.py
"""Collaborators shared by all commands through ``click.Context.obj``."""

from __future__ import annotations

import shutil
from dataclasses import dataclass, field
from typing import Callable, Optional

from cppstarter.definitions import is_headless
from cppstarter.licenses import Fetcher, fetch_license_text
from cppstarter.prompts import Prompter, QuestionaryPrompter
from cppstarter.runner import ToolRunner

__all__ = ["AppState"]


@dataclass
class AppState:
    """Tests pass their own instance via ``CliRunner.invoke(..., obj=AppState(...))``."""

    runner: ToolRunner = field(default_factory=ToolRunner)
    prompter: Prompter = field(default_factory=QuestionaryPrompter)
    which: Callable[[str], Optional[str]] = shutil.which
    fetch: Fetcher = fetch_license_text
    headless: bool = field(default_factory=is_headless)
