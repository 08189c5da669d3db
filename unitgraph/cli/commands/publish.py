"""
Native Click implementation of the publish command.

Usage: unitgraph publish [--dry-run] [--json]
"""

import json

import click

from ...core.di import get_presenter
from ...db import create_database_context
from ..context import GraphContext
from ..decorators import handle_errors, require_description


@click.command("publish")
@click.option("--dry-run", is_flag=True, help="Show the packages without storing them")
@click.option("--json", "as_json", is_flag=True, help="Print package descriptors as JSON")
@click.pass_obj
@require_description
@handle_errors
def publish(ctx: GraphContext, dry_run: bool, as_json: bool) -> None:
    """Publish every unit's package to the local repository.

    One package is published per unit; demo units are skipped. Publishing
    the same version again replaces the stored package.
    """
    evaluation = ctx.evaluate()
    packages = evaluation.packages

    if as_json:
        click.echo(json.dumps([p.model_dump(mode="json") for p in packages], indent=2))
    else:
        presenter = get_presenter()
        for package in packages:
            presenter.print_package(package)

    if dry_run:
        return

    with create_database_context(ctx.repository_path) as db:
        for package in packages:
            created = db.packages.store(package)
            if not as_json:
                state = "published" if created else "replaced"
                click.echo(f"{package.coordinates} {state}")

    if not as_json:
        click.echo(f"Stored {len(packages)} package(s) in {ctx.repository_path}")
