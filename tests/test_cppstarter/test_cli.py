"""
Tests for the top-level CLI and the `init` command.

Covers:
- help/version/unknown command exit codes
- end-to-end `init` against a tmp parent directory
- fatal paths leaving the filesystem untouched
"""

from __future__ import annotations

import datetime
from pathlib import Path

from click.testing import CliRunner

from cppstarter import __version__
from cppstarter.cli import cli
from cppstarter.definitions import APACHE_LICENSE_URL


def _invoke(args, state=None):
    return CliRunner().invoke(cli, args, obj=state)


# ---------------------------------------------------------------------------
# dispatcher
# ---------------------------------------------------------------------------


def test_no_args_prints_help(make_state):
    result = _invoke([], make_state())
    assert result.exit_code == 0
    assert "Usage:" in result.output
    for name in ("init", "config", "build", "test", "install", "check-tools"):
        assert name in result.output


def test_help_flag(make_state):
    result = _invoke(["--help"], make_state())
    assert result.exit_code == 0
    assert "Usage:" in result.output


def test_version_flag():
    result = _invoke(["-v"])
    assert result.exit_code == 0
    assert __version__ in result.output
    assert _invoke(["--version"]).exit_code == 0


def test_unknown_command_prints_help_and_fails(make_state, fake_runner):
    result = _invoke(["frobnicate"], make_state())
    assert result.exit_code == 1
    assert "Unknown command: frobnicate" in result.output
    assert "Usage:" in result.output
    assert fake_runner.calls == []


# ---------------------------------------------------------------------------
# init
# ---------------------------------------------------------------------------


def test_init_end_to_end_with_defaults(tmp_path: Path, make_state, fake_runner):
    state = make_state(["demo"])
    result = _invoke(["init", "-C", str(tmp_path)], state)
    assert result.exit_code == 0, result.output

    root = tmp_path / "demo"
    for rel in (
        "CMakeLists.txt",
        "demo/CMakeLists.txt",
        "demo/include/demo/demo.hpp",
        "demo/src/demo.cpp",
        "tests/CMakeLists.txt",
        "tests/demo_test.cpp",
        "cmake/Dependencies.cmake",
        "cmake/CompilerWarnings.cmake",
        "cmake/StaticAnalysis.cmake",
        ".github/workflows/ci.yml",
        ".clang-format",
        ".clang-tidy",
        ".gitignore",
        "README.md",
        "LICENSE",
        "docs/.gitkeep",
    ):
        assert (root / rel).exists(), rel

    top = (root / "CMakeLists.txt").read_text()
    assert "set(CMAKE_CXX_STANDARD 20)" in top
    assert "cmake_minimum_required(VERSION 3.25)" in top
    assert 'HOMEPAGE_URL "https://github.com/JaneDoe/demo"' in top
    assert (root / "LICENSE").read_text().startswith("MIT License")
    assert (root / "README.md").read_text().startswith("# DEMO")

    # git config user.name, then git init inside the new project
    assert fake_runner.calls[0] == ("git", ["config", "user.name"], None)
    assert fake_runner.calls[-1] == ("git", ["init", "--quiet"], root)
    assert "Project initialized successfully" in result.output


def test_init_normalizes_name(tmp_path: Path, make_state):
    result = _invoke(["init", "-C", str(tmp_path), "--yes"], make_state(["My Lib"]))
    assert result.exit_code == 0, result.output
    assert (tmp_path / "my_lib" / "my_lib" / "src" / "my_lib.cpp").exists()
    assert "MY_LIB_BUILD_TESTS" in (tmp_path / "my_lib" / "CMakeLists.txt").read_text()


def test_init_options_skip_prompts(tmp_path: Path, make_state):
    state = make_state()
    result = _invoke(
        [
            "init", "-C", str(tmp_path),
            "--name", "demo",
            "--repo-url", "https://git.example/demo",
            "--std", "17",
            "--cmake-min", "3.28",
            "--license", "BSD-3-Clause",
        ],
        state,
    )
    assert result.exit_code == 0, result.output
    assert state.prompter.asked == []
    top = (tmp_path / "demo" / "CMakeLists.txt").read_text()
    assert "set(CMAKE_CXX_STANDARD 17)" in top
    assert "VERSION 3.28)" in top
    assert (tmp_path / "demo" / "LICENSE").read_text().startswith("BSD 3-Clause License")


def test_init_apache_license_is_downloaded(tmp_path: Path, make_state, fetched_urls):
    result = _invoke(
        ["init", "-C", str(tmp_path), "--name", "demo", "--license", "Apache-2.0", "-y"],
        make_state(),
    )
    assert result.exit_code == 0, result.output
    assert fetched_urls == [APACHE_LICENSE_URL]
    text = (tmp_path / "demo" / "LICENSE").read_text()
    assert f"Copyright {datetime.date.today().year} Jane Doe" in text


def test_init_unknown_license_warns(tmp_path: Path, make_state):
    result = _invoke(["init", "-C", str(tmp_path), "--name", "demo", "--license", "WTFPL", "-y"], make_state())
    assert result.exit_code == 0, result.output
    assert not (tmp_path / "demo" / "LICENSE").exists()
    assert "Unknown license 'WTFPL'" in result.output


def test_init_empty_name_fails_without_side_effects(tmp_path: Path, make_state, fake_runner):
    result = _invoke(["init", "-C", str(tmp_path)], make_state(["   "]))
    assert result.exit_code == 1
    assert "Project name cannot be empty" in result.output
    assert list(tmp_path.iterdir()) == []
    assert ("git", ["init", "--quiet"], tmp_path) not in fake_runner.calls


def test_init_missing_tool_fails_before_prompting(tmp_path: Path, make_state):
    which = {"git": "/usr/bin/git"}.get
    state = make_state(["demo"], which=which)
    result = _invoke(["init", "-C", str(tmp_path)], state)
    assert result.exit_code == 1
    assert "'cmake' was not found in PATH" in result.output
    assert state.prompter.asked == []
    assert list(tmp_path.iterdir()) == []


def test_init_headless_requires_name(tmp_path: Path, make_state):
    state = make_state(headless=True)
    result = _invoke(["init", "-C", str(tmp_path)], state)
    assert result.exit_code == 1
    assert "--name" in result.output
    assert state.prompter.asked == []


def test_init_headless_with_name_uses_defaults(tmp_path: Path, make_state):
    state = make_state(headless=True)
    result = _invoke(["init", "-C", str(tmp_path), "--name", "demo"], state)
    assert result.exit_code == 0, result.output
    assert state.prompter.asked == []
    assert (tmp_path / "demo" / "LICENSE").exists()


def test_init_existing_project_dir_fails(tmp_path: Path, make_state):
    (tmp_path / "demo").mkdir()
    (tmp_path / "demo" / "main.cpp").write_text("int main() {}\n")
    result = _invoke(["init", "-C", str(tmp_path), "--name", "demo", "-y"], make_state())
    assert result.exit_code == 1
    assert "already exists" in result.output


def test_init_no_git(tmp_path: Path, make_state, fake_runner):
    result = _invoke(["init", "-C", str(tmp_path), "--name", "demo", "-y", "--no-git"], make_state())
    assert result.exit_code == 0, result.output
    assert all(call[1][0] != "init" for call in fake_runner.calls)


def test_init_git_failure_propagates(tmp_path: Path, make_state, runner_cls):
    runner = runner_cls(returncodes={"git": 128})
    result = _invoke(["init", "-C", str(tmp_path), "--name", "demo", "-y"], make_state(runner=runner))
    assert result.exit_code == 128
    # files were written before git ran
    assert (tmp_path / "demo" / "CMakeLists.txt").exists()
