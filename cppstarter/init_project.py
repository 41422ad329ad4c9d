# cppstarter/init_project.py
"""
Project creation: ``cppstarter init``.

Fixed pipeline, no branching back:

1. Check that the required tools are on PATH (first missing one is fatal).
2. Collect project metadata (flags first, then prompts, then defaults).
3. Create the directory/placeholder skeleton.
4. Write the generated configuration files.
5. ``git init`` the new project.

Nothing touches the filesystem before step 3, so an empty project name or
a missing tool leaves no trace.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional

import click

from cppstarter.definitions import CPP_STANDARD_CHOICES, LICENSE_CHOICES
from cppstarter.dependencies import check_dependencies
from cppstarter.emitter import emit_artifacts
from cppstarter.errors import EmptyInputError
from cppstarter.log_manager import get_logger
from cppstarter.project_spec import Environment, ProjectSpec
from cppstarter.prompts import collect_project_spec
from cppstarter.runner import run_checked
from cppstarter.scaffold import build_tree
from cppstarter.state import AppState

__all__ = ["init", "create_project"]

logger = get_logger(__name__)


def create_project(
    parent: Path,
    spec: ProjectSpec,
    env: Environment,
    state: AppState,
    git: bool = True,
) -> Path:
    """Scaffold, emit and (optionally) ``git init`` ``parent/<name>``.

    Returns
    -------
    pathlib.Path
        The new project root.
    """
    root = parent / spec.name
    logger.debug("creating %s from %s", root, spec)
    click.secho(f"📂 Initializing project: {spec.name}", fg="green")
    build_tree(root, spec)
    emit_artifacts(root, spec, env, fetch=state.fetch)
    if git:
        run_checked(state.runner, "git", ["init", "--quiet"], cwd=root)
        click.secho("✅ Git repository initialized.", fg="cyan")
    return root


@click.command()
@click.option("--name", help="Project name (lower-cased, spaces become underscores).")
@click.option("--repo-url", help="Repository URL (default: derived from git user.name).")
@click.option("--std", "cpp_standard", help=f"C++ standard ({'/'.join(CPP_STANDARD_CHOICES)}).")
@click.option("--cmake-min", "min_cmake_version", help="Minimum CMake version.")
@click.option("--license", "license_type", help=f"License ({', '.join(LICENSE_CHOICES)}).")
@click.option("-y", "--yes", is_flag=True, help="Accept defaults for everything not given.")
@click.option("--no-git", is_flag=True, help="Do not run 'git init' in the new project.")
@click.option(
    "-C", "--directory",
    type=click.Path(file_okay=False, path_type=Path),
    default=Path("."),
    help="Parent directory of the new project.",
)
@click.pass_context
def init(
    ctx: click.Context,
    name: Optional[str],
    repo_url: Optional[str],
    cpp_standard: Optional[str],
    min_cmake_version: Optional[str],
    license_type: Optional[str],
    yes: bool,
    no_git: bool,
    directory: Path,
) -> None:
    """📁 Create a new C++/CMake project.

    Prompts for any value not given as an option.
    """
    state = ctx.ensure_object(AppState)

    check_dependencies(which=state.which)

    if state.headless and not name:
        raise EmptyInputError("Project name is required when prompts are disabled (use --name).")

    env = Environment.capture(state.runner)
    overrides: Dict[str, Optional[str]] = {
        "name": name,
        "repo_url": repo_url,
        "cpp_standard": cpp_standard,
        "min_cmake_version": min_cmake_version,
        "license_type": license_type,
    }
    spec = collect_project_spec(
        env, state.prompter, overrides, assume_defaults=yes or state.headless
    )

    root = create_project(directory, spec, env, state, git=not no_git)

    click.secho("🎉 Project initialized successfully!", fg="green", bold=True)
    click.secho(f"👉 Next: cd {root} && cppstarter config debug && cppstarter build", fg="blue")
