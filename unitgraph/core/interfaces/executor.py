"""
Action executor interface.

Compiling sources and packing archives is an external capability: the core
only plans actions and calls an executor in prerequisite order.
"""

from abc import ABC, abstractmethod

from ..models.plan import Action


class IActionExecutor(ABC):
    """Interface for the external compile/archive capability."""

    @abstractmethod
    def execute(self, action: Action) -> None:
        """
        Run a single action.

        Args:
            action: Planned action whose prerequisites have already run

        Raises:
            Exception: Any failure; the task runner wraps it
        """
        pass
