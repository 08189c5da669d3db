"""
Core infrastructure for unitgraph.

This module provides:
- ServiceContainer: DI container using dependency-injector
- Application bootstrap for initialization
- Interfaces for logging, presentation, execution and package storage
- Custom exception hierarchy
"""

from .bootstrap import bootstrap, is_initialized, reset
from .container import ServiceContainer, get_container
from .exceptions import (
    ActionExecutionError,
    BuildDescriptionError,
    CyclicDependencyError,
    DuplicateActionNameError,
    DuplicateArtifactNameError,
    RepositoryConnectionError,
    RepositoryError,
    UnitGraphConfigError,
    UnitGraphException,
    UnitGraphGraphError,
    UnknownActionError,
    UnknownUnitError,
)

__all__ = [
    "ActionExecutionError",
    "BuildDescriptionError",
    "CyclicDependencyError",
    "DuplicateActionNameError",
    "DuplicateArtifactNameError",
    "RepositoryConnectionError",
    "RepositoryError",
    "ServiceContainer",
    "UnitGraphConfigError",
    "UnitGraphException",
    "UnitGraphGraphError",
    "UnknownActionError",
    "UnknownUnitError",
    "bootstrap",
    "get_container",
    "is_initialized",
    "reset",
]
