"""
Native Click implementation of the packages command.

Usage: unitgraph packages
"""

import click

from ...core.di import get_presenter
from ...db import create_database_context
from ..context import GraphContext
from ..decorators import handle_errors


@click.command("packages")
@click.option("--variants", is_flag=True, help="Show variants of each package")
@click.pass_obj
@handle_errors
def packages(ctx: GraphContext, variants: bool) -> None:
    """List packages stored in the local repository."""
    if not ctx.repository_path.exists():
        click.echo("No packages published.")
        return

    with create_database_context(ctx.repository_path) as db:
        stored = db.packages.list_packages()

    if not stored:
        click.echo("No packages published.")
        return

    presenter = get_presenter()
    if variants:
        for package in stored:
            presenter.print_package(package)
        return

    rows = [
        [p.group, p.artifact_name, p.version, ", ".join(k.value for k in p.variant_kinds)]
        for p in stored
    ]
    presenter.print_table(["Group", "Artifact", "Version", "Variants"], rows)
