"""
Presenter interface definitions for output formatting.

Enables pluggable output formats (console, JSON, etc.)
following the Interface Segregation Principle.
"""

from abc import ABC, abstractmethod

from ..models.package import PackageDescriptor
from ..models.plan import Action


class IPresenter(ABC):
    """
    Interface for output presentation.

    Implementations handle formatting and displaying output
    to the user in various formats (console, JSON, etc.).
    """

    @abstractmethod
    def print(self, message: str) -> None:
        """Print a message to output."""
        pass

    @abstractmethod
    def print_error(self, message: str) -> None:
        """Print an error message."""
        pass

    @abstractmethod
    def print_warning(self, message: str) -> None:
        """Print a warning message."""
        pass

    @abstractmethod
    def print_table(self, headers: list[str], rows: list[list[str]]) -> None:
        """
        Print a table.

        Args:
            headers: Column headers
            rows: Table rows (list of row values)
        """
        pass

    @abstractmethod
    def print_plan(self, actions: list[Action]) -> None:
        """Print actions in execution order."""
        pass

    @abstractmethod
    def print_package(self, package: PackageDescriptor) -> None:
        """Print a package descriptor with its variants."""
        pass
