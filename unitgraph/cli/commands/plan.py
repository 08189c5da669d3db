"""
Native Click implementation of the plan command.

Usage: unitgraph plan [TARGET...]
"""

import click

from ...core.di import get_presenter
from ..context import GraphContext
from ..decorators import handle_errors, require_description


@click.command("plan")
@click.argument("targets", nargs=-1)
@click.option("--all", "show_all", is_flag=True, help="List every planned action")
@click.pass_obj
@require_description
@handle_errors
def plan(ctx: GraphContext, targets: tuple[str, ...], show_all: bool) -> None:
    """Show the actions needed to build TARGETS.

    Targets are action names such as 'jar', 'build' or 'mainSourcesJar';
    the default is 'build'. Actions are listed in execution order.
    """
    task_plan = ctx.evaluate().plan
    presenter = get_presenter()

    if show_all:
        rows = [
            [action.name, action.kind.value, action.unit or "-", action.output or "-"]
            for action in task_plan.actions
        ]
        presenter.print_table(["Action", "Kind", "Unit", "Output"], rows)
        return

    presenter.print_plan(task_plan.execution_order(targets or None))
