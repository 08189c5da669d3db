"""
Click-based CLI for unitgraph.

Provides the main command group; every command works on the build
description selected with --file (default: build.description setting).

Usage:
    from unitgraph.cli import cli
    cli()  # Invokes the CLI
"""

from __future__ import annotations

import click

from ..core.bootstrap import bootstrap
from .context import GraphContext

# Version is loaded from package metadata
try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("unitgraph")
except PackageNotFoundError:
    __version__ = "0.1.0"


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="unitgraph")
@click.option(
    "-f",
    "--file",
    "description",
    type=click.Path(dir_okay=False),
    help="Build description (default: units.toml)",
)
@click.option("--release", is_flag=True, help="Stamp a release version instead of a snapshot")
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr")
@click.pass_context
def cli(ctx: click.Context, description: str | None, release: bool, verbose: bool) -> None:
    """unitgraph - module graph and package publication for multi-unit builds

    Reads a TOML build description of units, bundles and demos, resolves
    their classpaths, plans the build actions and publishes one package
    per unit.

    \b
    Inspect:
        unitgraph units               List units
        unitgraph classpath UNIT      Effective classpath of a unit
        unitgraph plan [TARGET...]    Actions needed for a target

    \b
    Publish:
        unitgraph publish             Store packages in the local repository
        unitgraph packages            List stored packages

    \b
    Configuration:
        unitgraph config              Show effective settings
    """
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        ctx.exit(0)

    graph_ctx = GraphContext.create(description=description, release=release, verbose=verbose)
    bootstrap(graph_ctx.settings, verbose=verbose)
    ctx.obj = graph_ctx


def register_commands() -> None:
    """Register all CLI commands with the main group."""
    from .commands import COMMANDS

    for cmd in COMMANDS:
        cli.add_command(cmd)


# Register commands at module load time
register_commands()


__all__ = [
    "GraphContext",
    "__version__",
    "cli",
    "register_commands",
]
