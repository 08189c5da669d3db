"""
Task plan construction.

Turns an evaluated graph into named actions with declared prerequisites, in
the shape a host task runner schedules: one classes action per unit, one
archive action per artifact, and the ``jar`` and ``build`` umbrellas.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING

from ...core.di import get_logger
from ...core.exceptions import DuplicateActionNameError, UnknownActionError
from ...core.interfaces.logger import ILogger
from ...core.models.artifact import ArtifactDescriptor, ArtifactKind
from ...core.models.plan import BINARIES_ACTION, FULL_BUILD_ACTION, Action, ActionKind
from ...core.models.unit import Channel

if TYPE_CHECKING:
    from ..graph.builder import DependencyGraph
    from ..graph.layout import BuildLayout

_ARCHIVE_ACTION_KINDS = {
    ArtifactKind.BINARY: ActionKind.BINARY,
    ArtifactKind.SOURCES: ActionKind.SOURCES,
    ArtifactKind.DOCUMENTATION: ActionKind.DOCUMENTATION,
}


def classes_action_name(unit_name: str) -> str:
    return f"{unit_name}Classes"


class TaskPlan:
    """Named actions of one evaluation."""

    def __init__(self, actions: Iterable[Action]) -> None:
        """
        Raises:
            DuplicateActionNameError: If two actions share a name
        """
        self._actions: dict[str, Action] = {}
        for action in actions:
            existing = self._actions.get(action.name)
            if existing is not None:
                raise DuplicateActionNameError(
                    action.name,
                    units=[name for name in (existing.unit, action.unit) if name],
                )
            self._actions[action.name] = action

    @property
    def actions(self) -> list[Action]:
        return list(self._actions.values())

    @property
    def names(self) -> list[str]:
        return list(self._actions)

    def get(self, name: str) -> Action:
        """
        Get an action by name.

        Raises:
            UnknownActionError: If the plan has no such action
        """
        action = self._actions.get(name)
        if action is None:
            raise UnknownActionError(name)
        return action

    def __contains__(self, name: object) -> bool:
        return name in self._actions

    def __len__(self) -> int:
        return len(self._actions)

    def execution_order(self, targets: Iterable[str] | None = None) -> list[Action]:
        """
        Actions needed for ``targets``, prerequisites first, each once.

        Args:
            targets: Action names; defaults to the full build umbrella

        Raises:
            UnknownActionError: If a target or prerequisite is not planned
        """
        wanted = list(targets) if targets else [FULL_BUILD_ACTION]
        seen: set[str] = set()
        order: list[Action] = []

        def visit(name: str) -> None:
            if name in seen:
                return
            seen.add(name)
            action = self.get(name)
            for prerequisite in action.prerequisites:
                visit(prerequisite)
            order.append(action)

        for target in wanted:
            visit(target)
        return order


class TaskPlanBuilder:
    """Builds the task plan of an evaluated graph."""

    def __init__(self, layout: BuildLayout, logger: ILogger | None = None) -> None:
        self._layout = layout
        self._logger = logger or get_logger()

    def build(
        self,
        graph: DependencyGraph,
        artifacts: Mapping[str, list[ArtifactDescriptor]],
    ) -> TaskPlan:
        """
        Build the plan.

        A unit's classes action depends on the classes actions of its
        compiled-output parents. An archive action depends on the classes
        actions of every unit whose output it packs; the documentation
        archive depends on the unit's own classes. Umbrellas depend on the
        archive actions that name them as a trigger, and ``build`` also
        depends on ``jar``.

        Args:
            graph: Evaluated, acyclic graph
            artifacts: Artifact descriptors per unit name
        """
        registry = graph.registry
        actions: list[Action] = []

        for name in graph.compile_order():
            unit = registry.lookup(name)
            actions.append(
                Action(
                    name=classes_action_name(name),
                    kind=ActionKind.CLASSES,
                    unit=name,
                    prerequisites=[
                        classes_action_name(parent)
                        for parent in graph.parents_of(name, Channel.COMPILED_OUTPUT)
                    ],
                    output=self._layout.classes_dir(name),
                    inputs=list(unit.source_roots),
                )
            )

        umbrellas: dict[str, list[str]] = {BINARIES_ACTION: [], FULL_BUILD_ACTION: [BINARIES_ACTION]}
        for unit_name, descriptors in artifacts.items():
            unit = registry.lookup(unit_name)
            for artifact in descriptors:
                if artifact.kind is ArtifactKind.BINARY:
                    packed = [unit_name, *unit.members]
                    prerequisites = [classes_action_name(name) for name in packed]
                elif artifact.kind is ArtifactKind.DOCUMENTATION:
                    prerequisites = [classes_action_name(unit_name)]
                else:
                    prerequisites = []

                actions.append(
                    Action(
                        name=artifact.task_name,
                        kind=_ARCHIVE_ACTION_KINDS[artifact.kind],
                        unit=unit_name,
                        prerequisites=prerequisites,
                        output=artifact.location,
                        inputs=list(artifact.contents),
                        includes=list(artifact.includes),
                    )
                )
                for trigger in artifact.triggers:
                    umbrellas.setdefault(trigger, []).append(artifact.task_name)

        for name, prerequisites in umbrellas.items():
            actions.append(Action(name=name, kind=ActionKind.UMBRELLA, prerequisites=prerequisites))

        plan = TaskPlan(actions)
        self._logger.debug("Planned %d actions", len(plan))
        return plan
