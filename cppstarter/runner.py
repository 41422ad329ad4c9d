# cppstarter/runner.py
"""
External tool invocation.

Every call to cmake, ctest or git goes through :class:`ToolRunner` so the
project commands can be exercised in tests with a fake runner that records
calls instead of spawning processes.

Calls block until the tool exits. There are no timeouts and no retries.
"""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence, Union

from cppstarter.errors import ExternalToolError, MissingToolError
from cppstarter.log_manager import get_logger

__all__ = ["CommandResult", "ToolRunner", "run_checked"]

logger = get_logger(__name__)


@dataclass(frozen=True)
class CommandResult:
    """Exit status and (when captured) combined output of one tool call."""

    returncode: int
    output: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class ToolRunner:
    """Run external tools with :func:`subprocess.run`."""

    def run(
        self,
        tool: str,
        args: Sequence[str] = (),
        cwd: Optional[Union[str, Path]] = None,
        capture: bool = False,
    ) -> CommandResult:
        """Run ``tool`` with ``args`` and return its exit status.

        Parameters
        ----------
        tool
            Executable name, resolved through PATH.
        args
            Arguments passed verbatim.
        cwd
            Working directory for the child process.
        capture
            When True, stdout and stderr are captured (merged) into
            ``CommandResult.output``; otherwise the tool writes straight to
            the terminal.

        Raises
        ------
        MissingToolError
            If the executable cannot be found.
        """
        cmd: List[str] = [tool, *args]
        logger.debug("exec: %s (cwd=%s)", " ".join(cmd), cwd or ".")
        try:
            if capture:
                proc = subprocess.run(
                    cmd,
                    cwd=cwd,
                    stdout=subprocess.PIPE,
                    stderr=subprocess.STDOUT,
                    text=True,
                    check=False,
                )
                return CommandResult(proc.returncode, proc.stdout or "")
            proc = subprocess.run(cmd, cwd=cwd, check=False)
            return CommandResult(proc.returncode)
        except FileNotFoundError as exc:
            raise MissingToolError(tool) from exc


def run_checked(
    runner: ToolRunner,
    tool: str,
    args: Sequence[str] = (),
    cwd: Optional[Union[str, Path]] = None,
) -> CommandResult:
    """Run a tool and raise :class:`ExternalToolError` on a non-zero exit."""
    result = runner.run(tool, args, cwd=cwd)
    if not result.ok:
        logger.debug("%s failed with status %d", tool, result.returncode)
        raise ExternalToolError(tool, result.returncode)
    return result
