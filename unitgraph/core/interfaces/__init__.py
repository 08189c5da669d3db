"""
Interface definitions for unitgraph's services.

These interfaces define the contracts that implementations must follow,
enabling dependency inversion and loose coupling throughout the codebase.
"""

from .executor import IActionExecutor
from .logger import ILogger
from .presenter import IPresenter
from .repository import IPackageRepository

__all__ = [
    "IActionExecutor",
    "ILogger",
    "IPackageRepository",
    "IPresenter",
]
