"""
Task runner.

Hands planned actions to the external executor in prerequisite order.
"""

from __future__ import annotations

from collections.abc import Iterable

from ...core.di import get_logger
from ...core.exceptions import ActionExecutionError, UnitGraphException
from ...core.interfaces.executor import IActionExecutor
from ...core.interfaces.logger import ILogger
from .task_plan import TaskPlan


class TaskRunner:
    """Runs a task plan against an executor, stopping at the first failure."""

    def __init__(self, executor: IActionExecutor, logger: ILogger | None = None) -> None:
        self._executor = executor
        self._logger = logger or get_logger()

    def run(self, plan: TaskPlan, targets: Iterable[str] | None = None) -> list[str]:
        """
        Run the actions needed for ``targets``.

        Args:
            plan: Task plan of the evaluation
            targets: Action names; defaults to the full build umbrella

        Returns:
            Names of the executed actions, in order

        Raises:
            UnknownActionError: If a target is not planned
            ActionExecutionError: If the executor fails; later actions are skipped
        """
        order = plan.execution_order(targets)
        executed: list[str] = []
        for action in order:
            self._logger.debug("Running action %s", action.name)
            try:
                self._executor.execute(action)
            except UnitGraphException:
                raise
            except Exception as e:
                self._logger.error("Action %s failed: %s", action.name, e)
                raise ActionExecutionError(
                    f"Action '{action.name}' failed: {e}",
                    action=action.name,
                    cause=e,
                ) from e
            executed.append(action.name)

        self._logger.info("Ran %d actions", len(executed))
        return executed
