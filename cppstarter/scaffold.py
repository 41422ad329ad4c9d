# cppstarter/scaffold.py
"""
Directory and placeholder skeleton of a new project.

The root directory is created first and any failure there is fatal. The
rest of the tree is best effort: a directory or file that cannot be created
is logged and skipped, and nothing already created is rolled back.
"""

from __future__ import annotations

from pathlib import Path
from typing import List

import click

from cppstarter.errors import ScaffoldError
from cppstarter.log_manager import get_logger
from cppstarter.project_spec import ProjectSpec

__all__ = ["project_directories", "placeholder_files", "build_tree"]

logger = get_logger(__name__)


def project_directories(spec: ProjectSpec) -> List[str]:
    """Relative directories of the skeleton, parents before children."""
    return [
        ".github/workflows",
        "cmake",
        f"{spec.name}/include/{spec.name}",
        f"{spec.name}/src",
        "tests",
        "docs",
    ]


def placeholder_files(spec: ProjectSpec) -> List[str]:
    """Relative paths of the empty files dropped into the skeleton."""
    return [
        f"{spec.name}/include/{spec.name}/{spec.name}.hpp",
        f"{spec.name}/src/{spec.name}.cpp",
        f"tests/{spec.name}_test.cpp",
        "docs/.gitkeep",
    ]


def _create_root(root: Path) -> None:
    if root.exists() and (not root.is_dir() or any(root.iterdir())):
        raise ScaffoldError(f"'{root}' already exists and is not an empty directory.")
    try:
        root.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise ScaffoldError(f"Cannot create project directory '{root}': {exc}") from exc


def build_tree(root: Path, spec: ProjectSpec) -> List[Path]:
    """Create the project skeleton under ``root``.

    Returns
    -------
    list of pathlib.Path
        Every directory and file actually created.

    Raises
    ------
    ScaffoldError
        If ``root`` itself cannot be created.
    """
    _create_root(root)
    created: List[Path] = [root]

    for rel in project_directories(spec):
        path = root / rel
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            logger.warning("could not create directory %s: %s", path, exc)
            continue
        created.append(path)

    for rel in placeholder_files(spec):
        path = root / rel
        try:
            path.touch()
        except OSError as exc:
            logger.warning("could not create file %s: %s", path, exc)
            continue
        created.append(path)

    click.secho(f"📂 Project skeleton created in {root}", fg="green")
    return created
