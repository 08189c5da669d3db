"""
Logger interface.

Graph services report what they registered, wired and published through
ILogger. Messages meant for the person running a command go through
IPresenter instead.
"""

from abc import ABC, abstractmethod
from typing import Any


class ILogger(ABC):
    """
    Diagnostic logger of an evaluation.

    Messages use %-style arguments, formatted only when the level is
    enabled: ``logger.debug("Unit %s extends %s", child, parents)``.
    """

    @abstractmethod
    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Edges, classpath merges and other per-unit detail."""

    @abstractmethod
    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        """One line per evaluation step (composed bundle, published package)."""

    @abstractmethod
    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Suspicious but valid input, such as a documentation archive with no sources."""

    @abstractmethod
    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        """A planned action failed."""

    @abstractmethod
    def set_level(self, level: str) -> None:
        """Set the threshold by name: debug, info, warning or error (any case)."""
