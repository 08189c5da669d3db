"""
Native Click implementation of the config command.

Usage: unitgraph config
"""

import click

from ..context import GraphContext


@click.command("config")
@click.pass_obj
def config(ctx: GraphContext) -> None:
    """Show the effective settings.

    Settings come from .unitgraph/config.toml (or [tool.unitgraph] in
    pyproject.toml) and UNITGRAPH_<SECTION>__<FIELD> environment variables.
    """
    settings = ctx.settings.to_dict()
    config_file = settings.pop("_config_file", None)
    config_error = settings.pop("_config_error", None)

    click.echo(f"Config file: {config_file or '(none)'}")
    if config_error:
        click.echo(f"Config error: {config_error}")
    click.echo("")

    for section, values in settings.items():
        for key, value in values.items():
            click.echo(f"{section}.{key} = {value}")

    click.echo("")
    click.echo(f"Build description: {ctx.description_path}")
    click.echo(f"Release build: {ctx.release}")
