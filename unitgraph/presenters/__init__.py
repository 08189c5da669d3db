"""Output presenters for unitgraph."""

from .console import ConsolePresenter

__all__ = ["ConsolePresenter"]
