# cppstarter/dependencies.py
"""
External tool presence and version checks.

- :func:`check_dependencies` guards ``init``: the first required tool missing
  from PATH is fatal.
- :func:`probe_tools` backs ``check-tools``: it never fails, it reports.
"""

from __future__ import annotations

import re
import shutil
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional

from packaging.version import InvalidVersion, parse as parse_version

from cppstarter.definitions import MIN_TOOL_VERSIONS, REQUIRED_TOOLS
from cppstarter.errors import MissingToolError
from cppstarter.log_manager import get_logger
from cppstarter.runner import ToolRunner

__all__ = [
    "ToolStatus",
    "check_dependency",
    "check_dependencies",
    "extract_version",
    "probe_tools",
]

logger = get_logger(__name__)

Which = Callable[[str], Optional[str]]

_VERSION_RE = re.compile(r"\d+(?:\.\d+)+")


@dataclass(frozen=True)
class ToolStatus:
    name: str
    path: Optional[str]
    version: Optional[str] = None
    minimum: Optional[str] = None

    @property
    def found(self) -> bool:
        return self.path is not None

    @property
    def meets_minimum(self) -> Optional[bool]:
        """True/False when both versions are known, None otherwise."""
        if not self.version or not self.minimum:
            return None
        try:
            return parse_version(self.version) >= parse_version(self.minimum)
        except InvalidVersion:
            return None


def check_dependency(tool: str, which: Which = shutil.which) -> str:
    """Return the PATH location of ``tool`` or raise :class:`MissingToolError`."""
    path = which(tool)
    if not path:
        raise MissingToolError(tool)
    logger.debug("found %s at %s", tool, path)
    return path


def check_dependencies(tools: Iterable[str] = REQUIRED_TOOLS, which: Which = shutil.which) -> None:
    """Check each tool in order; the first missing one is fatal."""
    for tool in tools:
        check_dependency(tool, which=which)


def extract_version(output: str) -> Optional[str]:
    """Return the first dotted version number in ``output``.

    >>> extract_version("cmake version 3.28.1\\n\\nCMake suite maintained")
    '3.28.1'
    """
    match = _VERSION_RE.search(output or "")
    return match.group(0) if match else None


def probe_tools(
    tools: Iterable[str],
    runner: ToolRunner,
    which: Which = shutil.which,
) -> List[ToolStatus]:
    """Report presence and version of each tool without failing."""
    statuses: List[ToolStatus] = []
    for tool in tools:
        path = which(tool)
        version = None
        if path:
            try:
                result = runner.run(tool, ["--version"], capture=True)
            except MissingToolError:
                path = None
            else:
                version = extract_version(result.output)
        statuses.append(ToolStatus(tool, path, version, MIN_TOOL_VERSIONS.get(tool)))
    return statuses
