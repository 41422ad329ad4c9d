# cppstarter/errors.py
"""
Fatal error types raised by cppstarter.

Every fatal condition is a :class:`click.ClickException`, so click prints a
short labelled diagnostic on stderr and exits with the exception's
``exit_code``. Nothing here is retried or recovered from.
"""

from __future__ import annotations

from typing import IO, Optional

import click

__all__ = [
    "CppStarterError",
    "MissingToolError",
    "EmptyInputError",
    "ScaffoldError",
    "LicenseFetchError",
    "PreconditionError",
    "ExternalToolError",
]


class CppStarterError(click.ClickException):
    """Base class for all fatal cppstarter errors."""

    label = "Error"
    exit_code = 1

    def format_message(self) -> str:
        return f"{self.label}: {self.message}"

    def show(self, file: Optional[IO] = None) -> None:
        click.secho(f"❌ {self.format_message()}", fg="red", err=True, file=file)


class MissingToolError(CppStarterError):
    """A required external tool is not on PATH."""

    label = "Missing tool"

    def __init__(self, tool: str) -> None:
        self.tool = tool
        super().__init__(f"'{tool}' was not found in PATH. Please install it and retry.")


class EmptyInputError(CppStarterError):
    """A mandatory prompt was left blank."""

    label = "Empty input"


class ScaffoldError(CppStarterError):
    """Creating the project tree or writing a generated file failed."""

    label = "I/O error"


class LicenseFetchError(ScaffoldError):
    """Downloading a license body failed."""

    label = "License download failed"


class PreconditionError(CppStarterError):
    """The current directory is not in the state a command requires."""

    label = "Precondition failed"

    def __init__(self, message: str, hint: Optional[str] = None) -> None:
        self.hint = hint
        super().__init__(message)

    def show(self, file: Optional[IO] = None) -> None:
        super().show(file)
        if self.hint:
            click.secho(f"💡 {self.hint}", fg="yellow", err=True, file=file)


class ExternalToolError(CppStarterError):
    """An external tool exited non-zero; its exit code becomes ours.

    A tool killed by signal N (``returncode == -N``) maps to ``128 + N``,
    the status a shell reports for it.
    """

    label = "Command failed"

    def __init__(self, tool: str, returncode: int) -> None:
        self.tool = tool
        self.returncode = returncode
        super().__init__(f"'{tool}' exited with status {returncode}.")
        self.exit_code = 128 - returncode if returncode < 0 else returncode
