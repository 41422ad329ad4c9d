# cppstarter/emitter.py
"""
Write every generated file of a new project, in a fixed order.

The first write failure aborts the sequence; files already written stay on
disk.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, List, Tuple

import click

from cppstarter import templates
from cppstarter.errors import ScaffoldError
from cppstarter.licenses import Fetcher, fetch_license_text, render_license
from cppstarter.log_manager import get_logger
from cppstarter.project_spec import Environment, ProjectSpec

__all__ = ["artifacts", "emit_artifacts", "write_text"]

logger = get_logger(__name__)

Renderer = Callable[[ProjectSpec], str]


def artifacts(spec: ProjectSpec) -> List[Tuple[str, Renderer]]:
    """Ordered ``(relative path, renderer)`` pairs, license excluded."""
    return [
        ("CMakeLists.txt", templates.render_root_cmake),
        (f"{spec.name}/CMakeLists.txt", templates.render_module_cmake),
        ("cmake/Dependencies.cmake", lambda _s: templates.render_dependencies_cmake()),
        ("cmake/CompilerWarnings.cmake", lambda _s: templates.render_compiler_warnings_cmake()),
        ("cmake/StaticAnalysis.cmake", templates.render_static_analysis_cmake),
        ("tests/CMakeLists.txt", templates.render_tests_cmake),
        (".github/workflows/ci.yml", lambda _s: templates.render_ci_workflow()),
        (".clang-format", lambda _s: templates.render_clang_format()),
        (".clang-tidy", lambda _s: templates.render_clang_tidy()),
        (".gitignore", lambda _s: templates.render_gitignore()),
        ("README.md", templates.render_readme),
    ]


def write_text(path: Path, content: str) -> None:
    """Write ``content`` to ``path``; any OSError is fatal."""
    try:
        with path.open("w", encoding="utf-8") as f:
            f.write(content)
    except OSError as exc:
        raise ScaffoldError(f"Failed to write {path}: {exc}") from exc
    logger.debug("wrote %s (%d bytes)", path, len(content))


def emit_artifacts(
    root: Path,
    spec: ProjectSpec,
    env: Environment,
    fetch: Fetcher = fetch_license_text,
) -> List[Path]:
    """Render and write all artifacts under ``root``.

    Returns
    -------
    list of pathlib.Path
        The files written, in order.

    Raises
    ------
    ScaffoldError
        On the first failed write, or when the license download fails.
    """
    written: List[Path] = []
    for rel, render in artifacts(spec):
        path = root / rel
        write_text(path, render(spec))
        written.append(path)

    license_text = render_license(spec.license_type, env, fetch=fetch)
    if license_text is None:
        click.secho(
            f"⚠️  Unknown license '{spec.license_type}'. Add a LICENSE file manually.",
            fg="yellow",
        )
    else:
        path = root / "LICENSE"
        write_text(path, license_text)
        written.append(path)

    click.secho(f"✅ {len(written)} configuration files written.", fg="cyan")
    return written
