"""
Native Click implementation of the classpath command.

Usage: unitgraph classpath UNIT [--runtime]
"""

import click

from ...core.models.unit import ClasspathScope
from ..context import GraphContext
from ..decorators import handle_errors, require_description


@click.command("classpath")
@click.argument("unit")
@click.option("--runtime", is_flag=True, help="Resolve the runtime classpath")
@click.option("--units", "units_only", is_flag=True, help="Only list the units reached")
@click.pass_obj
@require_description
@handle_errors
def classpath(ctx: GraphContext, unit: str, runtime: bool, units_only: bool) -> None:
    """Show the effective classpath of a unit.

    Compiled outputs are listed first (the unit's own, then every unit
    reached), followed by external coordinates.

    \b
    Examples:

        unitgraph classpath lwjgl2Plugin

        unitgraph classpath playerDemo --runtime
    """
    scope = ClasspathScope.RUNTIME if runtime else ClasspathScope.COMPILE
    resolution = ctx.evaluate().graph.resolve_classpath(unit, scope)

    entries = resolution.units if units_only else resolution.entries
    for entry in entries:
        click.echo(entry)
