# cppstarter/cmakeflow.py
"""
CMake-based project commands.

This module exposes Click commands that drive an existing cppstarter project
through CMake. They must be run from the project root.

Commands provided (registered by the top-level CLI):
- config:       (Re)configure ``build/`` with a build type and generator
- build:        Build the configured tree
- run_tests:    Rebuild, then run ctest (`cppstarter test`)
- install:      Configure a fresh tree and build the ``install`` target
- check_tools:  Report tool availability and versions

Project state lives on disk only:

=====================  ==============================================
no project             no ``CMakeLists.txt`` in the current directory
scaffolded             ``CMakeLists.txt`` present, no build cache
configured             ``build/CMakeCache.txt`` present
=====================  ==============================================

Guards run before any external tool is invoked. A failing tool ends the
command with the tool's own exit status.
"""

from __future__ import annotations

import shutil
from typing import List, Optional

import click

from cppstarter.definitions import (
    BUILD_DIR,
    CACHE_MARKER,
    DEFAULT_BUILD_TYPE,
    DEFAULT_GENERATOR,
    OPTIONAL_TOOLS,
    PROJECT_MARKER,
    REQUIRED_TOOLS,
    TOOL_DESCRIPTIONS,
)
from cppstarter.dependencies import probe_tools
from cppstarter.errors import PreconditionError, ScaffoldError
from cppstarter.log_manager import get_logger
from cppstarter.prompts import prompt_build_settings
from cppstarter.runner import run_checked
from cppstarter.state import AppState

__all__ = [
    "config",
    "build",
    "run_tests",
    "install",
    "check_tools",
    "require_project",
    "require_build_cache",
    "configure_args",
]

logger = get_logger(__name__)

# ---------------------------------------------------------------------------
# Guards
# ---------------------------------------------------------------------------


def require_project() -> None:
    """Ensure the current directory holds a root ``CMakeLists.txt``.

    Raises
    ------
    PreconditionError
        If no build descriptor is found.
    """
    if not PROJECT_MARKER.exists():
        raise PreconditionError(
            f"No {PROJECT_MARKER} found in this directory.",
            hint="Run cppstarter commands from the project root, or create one with 'cppstarter init'.",
        )


def require_build_cache() -> None:
    """Ensure ``config`` has run (``build/CMakeCache.txt`` exists)."""
    if not CACHE_MARKER.exists():
        raise PreconditionError(
            f"No build cache found ({CACHE_MARKER}).",
            hint="Run 'cppstarter config [debug|release]' first.",
        )


# ---------------------------------------------------------------------------
# Shared utilities
# ---------------------------------------------------------------------------


def _state(ctx: click.Context) -> AppState:
    return ctx.ensure_object(AppState)


def configure_args(build_type: str, generator: str, prefix: Optional[str] = None) -> List[str]:
    """Arguments for ``cmake`` to configure ``build/`` from the cwd."""
    args = [
        "-S", ".",
        "-B", str(BUILD_DIR),
        "-G", generator,
        f"-DCMAKE_BUILD_TYPE={build_type}",
    ]
    if prefix:
        args.append(f"-DCMAKE_INSTALL_PREFIX={prefix}")
    return args


def _remove_build_dir() -> None:
    if not BUILD_DIR.exists():
        return
    click.secho(f"🧹 Removing existing {BUILD_DIR}/", fg="yellow")
    logger.debug("rmtree %s", BUILD_DIR.resolve())
    try:
        shutil.rmtree(BUILD_DIR)
    except OSError as exc:
        raise ScaffoldError(f"Could not remove {BUILD_DIR}: {exc}") from exc


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


@click.command()
@click.argument("build_type", required=False, metavar="[debug|release]")
@click.option("-G", "--generator", help=f"CMake generator (default: {DEFAULT_GENERATOR}).")
@click.pass_context
def config(ctx: click.Context, build_type: Optional[str], generator: Optional[str]) -> None:
    """
    Configure the project into ``build/``.

    Any existing build directory is deleted first. Build type and generator
    are prompted for when not given.
    """
    state = _state(ctx)
    require_project()
    _remove_build_dir()

    build_type, generator = prompt_build_settings(
        state.prompter, build_type, generator, assume_defaults=state.headless
    )
    click.secho(f"⚙️  Configuring ({build_type}, {generator})", fg="blue")
    run_checked(state.runner, "cmake", configure_args(build_type, generator))
    click.secho("✅ Project configured.", fg="green")


@click.command()
@click.pass_context
def build(ctx: click.Context) -> None:
    """Build the configured project."""
    state = _state(ctx)
    require_project()
    require_build_cache()

    click.secho("🔧 Building...", fg="cyan")
    run_checked(state.runner, "cmake", ["--build", str(BUILD_DIR)])
    click.secho("✅ Build finished.", fg="green")


@click.command("test")
@click.pass_context
def run_tests(ctx: click.Context) -> None:
    """Rebuild, then run the test suite with ctest."""
    state = _state(ctx)
    require_project()
    require_build_cache()

    click.secho("🔧 Building...", fg="cyan")
    run_checked(state.runner, "cmake", ["--build", str(BUILD_DIR)])
    click.secho("🧪 Running tests...", fg="cyan")
    run_checked(state.runner, "ctest", ["--test-dir", str(BUILD_DIR), "--output-on-failure"])
    click.secho("✅ All tests passed.", fg="green")


@click.command()
@click.option("--prefix", help="Installation prefix (CMAKE_INSTALL_PREFIX).")
@click.option("-G", "--generator", default=DEFAULT_GENERATOR, show_default=True, help="CMake generator.")
@click.pass_context
def install(ctx: click.Context, prefix: Optional[str], generator: str) -> None:
    """Configure a fresh Release tree and build the install target."""
    state = _state(ctx)
    require_project()
    # install refuses to run over an existing build cache and configures its own tree.
    if CACHE_MARKER.exists():
        raise PreconditionError(
            f"A build cache already exists ({CACHE_MARKER}).",
            hint="install configures its own tree; run it while build/ does not exist.",
        )

    click.secho(f"⚙️  Configuring ({DEFAULT_BUILD_TYPE}, {generator})", fg="blue")
    run_checked(state.runner, "cmake", configure_args(DEFAULT_BUILD_TYPE, generator, prefix))
    click.secho("📦 Installing...", fg="cyan")
    run_checked(state.runner, "cmake", ["--build", str(BUILD_DIR), "--target", "install"])
    click.secho("✅ Install finished.", fg="green")


@click.command("check-tools")
@click.pass_context
def check_tools(ctx: click.Context) -> None:
    """Check tool availability and versions in PATH."""
    state = _state(ctx)
    click.echo("🔍 Checking tool availability:\n")
    for status in probe_tools(REQUIRED_TOOLS + OPTIONAL_TOOLS, state.runner, which=state.which):
        if not status.found:
            mark = click.style("❌ MISSING", fg="red")
        elif status.meets_minimum is False:
            mark = click.style("⚠️  OLD    ", fg="yellow")
        else:
            mark = click.style("✅ FOUND  ", fg="green")
        kind = "required" if status.name in REQUIRED_TOOLS else "optional"
        version = status.version or "-"
        click.echo(
            f"{status.name.ljust(14)} {mark} {version.ljust(10)} ({kind}) - "
            f"{TOOL_DESCRIPTIONS.get(status.name, '')}"
        )
        if status.meets_minimum is False:
            click.secho(f"   minimum recommended version: {status.minimum}", fg="yellow")
