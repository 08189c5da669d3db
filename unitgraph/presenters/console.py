"""
Console presenter for terminal output.

Human-readable rendering of units, plans and packages for the CLI.
"""

import sys

from ..core.interfaces.presenter import IPresenter
from ..core.models.package import PackageDescriptor
from ..core.models.plan import Action

_BOLD = "\033[1m"
_RED = "\033[91m"
_GREEN = "\033[92m"
_YELLOW = "\033[93m"
_RESET = "\033[0m"


class ConsolePresenter(IPresenter):
    """
    Console output presenter.

    Color is only used when stdout is a terminal.
    """

    def __init__(self, use_color: bool = True, file=None) -> None:
        """
        Initialize console presenter.

        Args:
            use_color: Whether to use ANSI color codes
            file: Output file (defaults to sys.stdout)
        """
        self._use_color = use_color and sys.stdout.isatty()
        self._file = file or sys.stdout
        self._err_file = sys.stderr

    def _paint(self, text: str, color: str) -> str:
        if self._use_color:
            return f"{color}{text}{_RESET}"
        return text

    def print(self, message: str) -> None:
        """Print a message to output."""
        print(message, file=self._file)

    def print_error(self, message: str) -> None:
        """Print an error message to stderr."""
        print(self._paint(f"Error: {message}", _RED), file=self._err_file)

    def print_warning(self, message: str) -> None:
        """Print a warning message to stderr."""
        print(self._paint(f"Warning: {message}", _YELLOW), file=self._err_file)

    def print_success(self, message: str) -> None:
        print(self._paint(message, _GREEN), file=self._file)

    def print_table(self, headers: list[str], rows: list[list[str]]) -> None:
        """
        Print a column-aligned table.

        Args:
            headers: Column headers
            rows: Table rows
        """
        if not rows:
            return

        widths = [len(h) for h in headers]
        for row in rows:
            for i, cell in enumerate(row[: len(widths)]):
                widths[i] = max(widths[i], len(str(cell)))

        header_line = "  ".join(str(h).ljust(widths[i]) for i, h in enumerate(headers))
        print(self._paint(header_line, _BOLD), file=self._file)
        print("-" * len(header_line), file=self._file)

        for row in rows:
            cells = [
                str(cell).ljust(widths[i]) if i < len(widths) else str(cell)
                for i, cell in enumerate(row)
            ]
            print("  ".join(cells).rstrip(), file=self._file)

    def print_plan(self, actions: list[Action]) -> None:
        """Print actions in execution order with their prerequisites."""
        if not actions:
            print("Nothing to do.", file=self._file)
            return

        for i, action in enumerate(actions, 1):
            line = f"  {i:>3}. {action.name}"
            if action.prerequisites:
                line += f"  <- {', '.join(action.prerequisites)}"
            print(line, file=self._file)

    def print_package(self, package: PackageDescriptor) -> None:
        """Print one package with its variants."""
        print(self._paint(package.coordinates, _BOLD), file=self._file)
        if package.metadata.name:
            print(f"    name: {package.metadata.name}", file=self._file)
        for variant in package.variants:
            print(f"    {variant.kind.value:<14} {variant.artifact}", file=self._file)
            for dependency in variant.dependencies:
                print(f"    {'':<14}   {dependency}", file=self._file)
