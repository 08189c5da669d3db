"""
Dependency injection helpers for unitgraph.

Lets services fall back to a default implementation when the container has
not been bootstrapped, which keeps the graph services usable from tests and
library code without any setup.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from collections.abc import Callable

T = TypeVar("T")


def resolve_or_default(
    interface: type[T],
    default_factory: Callable[[], T],
) -> T:
    """Resolve a service from the container or create a default.

    Args:
        interface: The interface type to resolve
        default_factory: Callable that creates the default implementation

    Returns:
        Resolved service instance or default

    Example:
        >>> from unitgraph.core.interfaces.logger import ILogger
        >>> from unitgraph.services.logging import NullLogger
        >>> logger = resolve_or_default(ILogger, NullLogger)
    """
    from .container import get_container

    instance = get_container().try_resolve(interface)
    if instance is not None:
        return instance
    return default_factory()


def get_logger():
    """Resolve the process logger, or a NullLogger before bootstrap."""
    from ..services.logging import NullLogger
    from .interfaces.logger import ILogger

    return resolve_or_default(ILogger, NullLogger)  # type: ignore[type-abstract]


def get_presenter():
    """Resolve the presenter, or a ConsolePresenter before bootstrap."""
    from ..presenters.console import ConsolePresenter
    from .interfaces.presenter import IPresenter

    return resolve_or_default(IPresenter, ConsolePresenter)  # type: ignore[type-abstract]
