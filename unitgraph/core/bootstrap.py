"""
Application bootstrap for unitgraph.

Initializes the DI container with the process services. This module should
be called once at application startup.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .container import ServiceContainer, get_container
from .interfaces.logger import ILogger
from .interfaces.presenter import IPresenter

if TYPE_CHECKING:
    from .settings import UnitGraphSettings

_initialized = False


def bootstrap(
    settings: UnitGraphSettings | None = None,
    verbose: bool = False,
) -> ServiceContainer:
    """
    Bootstrap the unitgraph application.

    Registers the console presenter and the logger configured from the
    [logging] settings section. ``verbose`` turns on debug output to stderr.

    Args:
        settings: Loaded settings; loaded from the environment if None
        verbose: Force debug-level console logging

    Returns:
        Initialized ServiceContainer
    """
    global _initialized

    container = get_container()
    if _initialized:
        return container

    from ..presenters.console import ConsolePresenter
    from ..services.logging import UnitGraphLogger
    from .settings import load_settings

    if settings is None:
        settings = load_settings()
    logging_config = settings.logging

    def create_logger() -> ILogger:
        logger = UnitGraphLogger.from_config(logging_config, console=verbose or None)
        if verbose:
            logger.set_level("debug")
        return logger

    container.register_singleton(IPresenter, implementation=ConsolePresenter())  # type: ignore[type-abstract]
    container.register_singleton(ILogger, factory=create_logger)  # type: ignore[type-abstract]

    _initialized = True
    return container


def reset() -> None:
    """
    Reset the application state.

    Useful for testing to ensure clean state between tests.
    """
    global _initialized
    ServiceContainer.reset()
    _initialized = False


def is_initialized() -> bool:
    """Check if the application has been bootstrapped."""
    return _initialized
