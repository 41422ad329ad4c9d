"""
Tests for cppstarter.dependencies: required-tool guard and tool probing.
"""

from __future__ import annotations

from typing import List

import pytest

from cppstarter.dependencies import (
    ToolStatus,
    check_dependencies,
    check_dependency,
    extract_version,
    probe_tools,
)
from cppstarter.errors import MissingToolError


def test_check_dependency_returns_path():
    assert check_dependency("cmake", which=lambda t: "/opt/bin/cmake") == "/opt/bin/cmake"


def test_check_dependency_missing_raises_naming_tool():
    with pytest.raises(MissingToolError) as excinfo:
        check_dependency("cmake", which=lambda t: None)
    assert excinfo.value.tool == "cmake"
    assert "cmake" in excinfo.value.format_message()
    assert excinfo.value.exit_code == 1


def test_check_dependencies_stops_at_first_missing():
    looked_up: List[str] = []

    def which(tool):
        looked_up.append(tool)
        return None if tool == "b" else f"/bin/{tool}"

    with pytest.raises(MissingToolError) as excinfo:
        check_dependencies(["a", "b", "c"], which=which)
    assert excinfo.value.tool == "b"
    assert looked_up == ["a", "b"]


def test_check_dependencies_default_tools_all_present():
    seen: List[str] = []
    check_dependencies(which=lambda t: seen.append(t) or f"/bin/{t}")
    assert seen == ["git", "cmake"]


@pytest.mark.parametrize(
    "output, expected",
    [
        ("cmake version 3.28.1\n\nCMake suite maintained by Kitware", "3.28.1"),
        ("git version 2.43.0", "2.43.0"),
        ("Ubuntu clang-format version 14.0.0-1ubuntu1", "14.0.0"),
        ("Cppcheck 2.13", "2.13"),
        ("no digits here", None),
        ("", None),
    ],
)
def test_extract_version(output, expected):
    assert extract_version(output) == expected


def test_tool_status_meets_minimum():
    assert ToolStatus("cmake", "/bin/cmake", "3.28.1", "3.25").meets_minimum is True
    assert ToolStatus("cmake", "/bin/cmake", "3.20", "3.25").meets_minimum is False
    assert ToolStatus("cmake", "/bin/cmake", None, "3.25").meets_minimum is None
    assert ToolStatus("cmake", None).found is False


def test_probe_tools_reports_presence_and_version(runner_cls):
    runner = runner_cls(outputs={"cmake": "cmake version 3.20.0\n"})
    which = {"cmake": "/bin/cmake"}.get
    statuses = probe_tools(["cmake", "cppcheck"], runner, which=which)

    cmake, cppcheck = statuses
    assert cmake.found and cmake.version == "3.20.0"
    assert cmake.meets_minimum is False
    assert not cppcheck.found and cppcheck.version is None
    # Only tools present on PATH are executed
    assert runner.calls == [("cmake", ["--version"], None)]
