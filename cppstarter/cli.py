# cppstarter/cli.py
"""
cppstarter unified CLI.

This module defines the top-level Click group and registers:
- Project creation (`init`, from cppstarter.init_project)
- CMake project commands (`config`, `build`, `test`, `install`,
  `check-tools`, from cppstarter.cmakeflow)

Exit codes
----------
0   success, ``--help``, ``-v/--version``
1   any fatal condition (missing tool, empty name, unknown command, wrong
    project state, I/O failure)
N   an external tool's own non-zero exit status
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

import click

from cppstarter import __version__
from cppstarter.cmakeflow import build, check_tools, config, install, run_tests
from cppstarter.init_project import init
from cppstarter.log_manager import set_level
from cppstarter.state import AppState


class CppStarterGroup(click.Group):
    """Group that reports unknown commands with the full help and exit status 1."""

    def resolve_command(
        self, ctx: click.Context, args: List[str]
    ) -> Tuple[Optional[str], Optional[click.Command], List[str]]:
        cmd_name = args[0] if args else None
        if cmd_name and not ctx.resilient_parsing and self.get_command(ctx, cmd_name) is None:
            click.secho(f"❌ Unknown command: {cmd_name}", fg="red", err=True)
            click.echo(ctx.get_help(), err=True)
            ctx.exit(1)
        return super().resolve_command(ctx, args)


@click.group(cls=CppStarterGroup, invoke_without_command=True)
@click.version_option(__version__, "-v", "--version", prog_name="cppstarter")
@click.option("--verbose", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """
    🧰 cppstarter: scaffold and drive C++/CMake projects.

    \b
    Create a project:   cppstarter init
    Then, from its root:
      cppstarter config [debug|release]
      cppstarter build
      cppstarter test
      cppstarter install
    """
    ctx.ensure_object(AppState)
    if verbose:
        set_level(logging.DEBUG)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


cli.add_command(init)
cli.add_command(config)
cli.add_command(build)
cli.add_command(run_tests)
cli.add_command(install)
cli.add_command(check_tools)


def main() -> None:
    """Console-script entry point."""
    cli()


if __name__ == "__main__":
    main()
