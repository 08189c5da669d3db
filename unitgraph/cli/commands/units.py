"""
Native Click implementation of the units command.

Usage: unitgraph units
"""

import click

from ...core.di import get_presenter
from ..context import GraphContext
from ..decorators import handle_errors, require_description


@click.command("units")
@click.pass_obj
@require_description
@handle_errors
def units(ctx: GraphContext) -> None:
    """List the units of the build description.

    Shows each unit's kind, artifact name and parents, in declaration order.
    """
    evaluation = ctx.evaluate()
    presenter = get_presenter()

    rows = []
    for unit in evaluation.registry:
        published = "yes" if unit.is_publishable else "no"
        parents = ", ".join(unit.parents) or "-"
        rows.append([unit.name, unit.kind.value, unit.resolved_artifact_name, published, parents])

    if not rows:
        click.echo("No units declared.")
        return

    click.echo(f"Version: {evaluation.version}")
    click.echo("")
    presenter.print_table(["Unit", "Kind", "Artifact", "Published", "Parents"], rows)
