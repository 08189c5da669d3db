"""
Custom exception hierarchy for unitgraph.

Every failure raised while evaluating a build description is a typed,
configuration-time error. Graph errors halt the evaluation before any task
plan exists, so callers never see a partially wired graph.
"""

from __future__ import annotations


class UnitGraphException(Exception):
    """
    Base exception for all unitgraph errors.

    Attributes:
        message: Human-readable error description
        context: Additional debugging context (unit names, file paths, etc.)
        exit_code: Suggested exit code for CLI (default: 1)
        recoverable: Whether retry/recovery may be possible
    """

    exit_code: int = 1
    recoverable: bool = True

    def __init__(
        self,
        message: str,
        *,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.message = message
        self.context = context or {}
        if cause is not None:
            self.__cause__ = cause
        super().__init__(message)

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message


# =============================================================================
# Configuration Errors
# =============================================================================


class UnitGraphConfigError(UnitGraphException):
    """Base class for configuration-related errors."""

    pass


class BuildDescriptionError(UnitGraphConfigError, ValueError):
    """
    The build description could not be read or does not validate.

    Inherits from ValueError so schema problems can be caught alongside
    pydantic validation failures.
    """

    recoverable: bool = False

    def __init__(
        self,
        message: str,
        *,
        file_path: str | None = None,
        errors: list[str] | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if file_path:
            ctx["file_path"] = file_path
        if errors:
            ctx["errors"] = errors
        super().__init__(message, context=ctx, cause=cause)


# =============================================================================
# Graph Errors
# =============================================================================


class UnitGraphGraphError(UnitGraphException):
    """
    Base class for unit graph errors.

    Graph errors are always fatal to the current evaluation: the build
    description has to be fixed and evaluated again.
    """

    recoverable: bool = False


class UnknownUnitError(UnitGraphGraphError):
    """A unit was referenced before it was registered."""

    def __init__(
        self,
        unit: str,
        *,
        referenced_by: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        ctx["unit"] = unit
        if referenced_by:
            ctx["referenced_by"] = referenced_by
        self.unit = unit
        super().__init__(f"Unknown unit '{unit}'", context=ctx, cause=cause)


class CyclicDependencyError(UnitGraphGraphError):
    """
    A dependency traversal reached a unit that was still in progress.

    Attributes:
        cycle: Unit names along the cycle, first and last entries equal
    """

    def __init__(
        self,
        cycle: list[str],
        *,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.cycle = list(cycle)
        ctx = context or {}
        ctx["cycle"] = " -> ".join(self.cycle)
        super().__init__("Cyclic dependency between units", context=ctx, cause=cause)


class DuplicateArtifactNameError(UnitGraphGraphError):
    """Two different units resolve to the same publishable artifact name."""

    def __init__(
        self,
        artifact_name: str,
        *,
        units: list[str] | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.artifact_name = artifact_name
        self.units = list(units or [])
        ctx = context or {}
        ctx["artifact_name"] = artifact_name
        if self.units:
            ctx["units"] = self.units
        super().__init__(
            f"Artifact name '{artifact_name}' is claimed by more than one unit",
            context=ctx,
            cause=cause,
        )


class DuplicateActionNameError(UnitGraphGraphError):
    """Two planned actions resolve to the same action name."""

    def __init__(
        self,
        action: str,
        *,
        units: list[str] | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.action = action
        self.units = list(units or [])
        ctx = context or {}
        ctx["action"] = action
        if self.units:
            ctx["units"] = self.units
        super().__init__(
            f"Action name '{action}' is produced by more than one unit",
            context=ctx,
            cause=cause,
        )


# =============================================================================
# Repository Errors
# =============================================================================


class RepositoryError(UnitGraphException):
    """Base class for local package repository errors."""

    pass


class RepositoryConnectionError(RepositoryError):
    """
    Error connecting to or initializing the package repository database.

    Raised when the repository is used outside its context manager or
    the database cannot be opened.
    """

    def __init__(
        self,
        message: str,
        *,
        db_path: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if db_path:
            ctx["db_path"] = db_path
        super().__init__(message, context=ctx, cause=cause)


# =============================================================================
# Execution Errors
# =============================================================================


class ActionExecutionError(UnitGraphException):
    """
    The external executor failed to run a planned action.

    Raised by the task runner; actions after the failing one are not run.
    """

    def __init__(
        self,
        message: str,
        *,
        action: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if action:
            ctx["action"] = action
        self.action = action
        super().__init__(message, context=ctx, cause=cause)


class UnknownActionError(UnitGraphException):
    """A requested target is not an action of the task plan."""

    exit_code: int = 2

    def __init__(
        self,
        action: str,
        *,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        ctx["action"] = action
        self.action = action
        super().__init__(f"Unknown action '{action}'", context=ctx, cause=cause)
