"""
Click decorators for unitgraph CLI commands.

- require_description: Ensures the build description file exists
- handle_errors: Turns unitgraph exceptions into Click errors
"""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar

import click

from ..core.exceptions import UnitGraphException

if TYPE_CHECKING:
    from .context import GraphContext

F = TypeVar("F", bound=Callable[..., Any])


def _context_from(args: tuple[Any, ...], kwargs: dict[str, Any], decorator: str) -> GraphContext:
    ctx_maybe: Any = args[0] if args else kwargs.get("ctx")
    if ctx_maybe is None:
        raise click.ClickException(
            "Internal error: GraphContext not available. "
            f"Ensure @click.pass_obj is applied before @{decorator}."
        )
    return ctx_maybe


def require_description(f: F) -> F:
    """Decorator to require a build description file.

    Usage:
        @click.command()
        @click.pass_obj
        @require_description
        def units(ctx: GraphContext):
            ...

    Note:
        This decorator should be applied AFTER @click.pass_obj so that
        the GraphContext is available.
    """

    @functools.wraps(f)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        ctx = _context_from(args, kwargs, "require_description")
        if not ctx.has_description:
            raise click.ClickException(
                f"Build description not found: {ctx.description_path}\n"
                "Pass one with --file or set build.description in .unitgraph/config.toml."
            )
        return f(*args, **kwargs)

    return wrapper  # type: ignore[return-value]


def handle_errors(f: F) -> F:
    """Decorator converting UnitGraphException into click.ClickException.

    The exception's exit code is kept.
    """

    @functools.wraps(f)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return f(*args, **kwargs)
        except UnitGraphException as e:
            error = click.ClickException(str(e))
            error.exit_code = e.exit_code
            raise error from e

    return wrapper  # type: ignore[return-value]
