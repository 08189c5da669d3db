"""Task planning and running."""

from .runner import TaskRunner
from .task_plan import TaskPlan, TaskPlanBuilder, classes_action_name

__all__ = ["TaskPlan", "TaskPlanBuilder", "TaskRunner", "classes_action_name"]
