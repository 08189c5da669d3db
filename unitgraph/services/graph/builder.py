"""
Dependency graph builder.

Connects units with typed edges and resolves effective classpaths.

One ``extend`` call covers every kind of extension: the policy decides
which channels get an edge. A plain extension only makes the parent's
compiled output visible to the child; a library extension also exports the
parent's interface and runtime dependencies to the child's consumers.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from ...core.di import get_logger
from ...core.exceptions import CyclicDependencyError
from ...core.interfaces.logger import ILogger
from ...core.models.unit import (
    Channel,
    ClasspathResolution,
    ClasspathScope,
    DependencyEdge,
    ExtensionPolicy,
    Unit,
)
from .registry import UnitRegistry

_IN_PROGRESS = 1
_DONE = 2

ALL_CHANNELS = frozenset(Channel)

EdgeKey = tuple[str, str, Channel]


def coordinate_key(coordinate: str) -> str:
    """Conflict key of an external coordinate: ``group:name`` without version."""
    parts = coordinate.split(":")
    return ":".join(parts[:2])


class DependencyGraph:
    """Directed acyclic graph of units over three propagation channels."""

    def __init__(
        self,
        registry: UnitRegistry,
        output_of: Callable[[str], str] | None = None,
        logger: ILogger | None = None,
    ) -> None:
        """
        Args:
            registry: Registry of the evaluation the graph belongs to
            output_of: Maps a unit name to its compiled output location
            logger: Logger instance. If None, resolves from DI container.
        """
        self._registry = registry
        self._output_of = output_of or (lambda name: f"build/classes/{name}")
        self._logger = logger or get_logger()
        self._edges: list[DependencyEdge] = []
        self._edge_keys: set[EdgeKey] = set()
        self._outgoing: dict[str, list[DependencyEdge]] = {}

    @property
    def registry(self) -> UnitRegistry:
        return self._registry

    @property
    def edges(self) -> list[DependencyEdge]:
        """All edges in creation order."""
        return list(self._edges)

    def edges_from(self, unit: Unit | str, channel: Channel | None = None) -> list[DependencyEdge]:
        """Outgoing edges of a unit, optionally restricted to one channel."""
        name = unit.name if isinstance(unit, Unit) else unit
        return [
            edge
            for edge in self._outgoing.get(name, [])
            if channel is None or edge.channel is channel
        ]

    def parents_of(self, unit: Unit | str, channel: Channel) -> list[str]:
        """Direct parents reached over ``channel``, in declaration order."""
        return [edge.target for edge in self.edges_from(unit, channel)]

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    def extend(
        self,
        unit: Unit | str,
        parents: Sequence[Unit | str],
        policy: ExtensionPolicy = ExtensionPolicy.PLAIN,
    ) -> list[DependencyEdge]:
        """
        Declare that ``unit`` extends ``parents``.

        Edges are added in parent order, one per channel of the policy.
        Edges that already exist are not duplicated. If the new edges close
        a cycle they are removed again before the error propagates.

        Args:
            unit: The extending unit
            parents: Parent units, all already registered
            policy: Which channels to propagate

        Returns:
            The edges actually added

        Raises:
            UnknownUnitError: If the unit or a parent is not registered
            CyclicDependencyError: If the extension closes a cycle
        """
        child = self._lookup(unit)
        parent_units = [self._lookup(parent, referenced_by=child.name) for parent in parents]

        added: list[DependencyEdge] = []
        for parent in parent_units:
            for channel in policy.channels:
                key = (child.name, parent.name, channel)
                if key in self._edge_keys:
                    continue
                edge = DependencyEdge(source=child.name, target=parent.name, channel=channel)
                self._append(edge)
                added.append(edge)

        try:
            self._walk_all([child.name], ALL_CHANNELS, state={}, order=[])
        except CyclicDependencyError:
            for edge in added:
                self._discard(edge)
            raise

        declared = list(child.parents)
        for parent in parent_units:
            if parent.name not in declared:
                declared.append(parent.name)
        child.parents = declared

        self._logger.debug(
            "Unit %s extends %s (%s): %d new edges",
            child.name,
            [p.name for p in parent_units],
            policy.value,
            len(added),
        )
        return added

    def _lookup(self, unit: Unit | str, referenced_by: str | None = None) -> Unit:
        name = unit.name if isinstance(unit, Unit) else unit
        return self._registry.lookup(name, referenced_by=referenced_by)

    def _append(self, edge: DependencyEdge) -> None:
        self._edges.append(edge)
        self._edge_keys.add((edge.source, edge.target, edge.channel))
        self._outgoing.setdefault(edge.source, []).append(edge)

    def _discard(self, edge: DependencyEdge) -> None:
        self._edges.remove(edge)
        self._edge_keys.discard((edge.source, edge.target, edge.channel))
        self._outgoing[edge.source].remove(edge)

    # -------------------------------------------------------------------------
    # Traversal
    # -------------------------------------------------------------------------

    def _walk(
        self,
        name: str,
        channels: frozenset[Channel],
        state: dict[str, int],
        order: list[str],
        stack: list[str],
    ) -> None:
        """Depth-first post-order walk; raises on reaching an in-progress unit."""
        state[name] = _IN_PROGRESS
        stack.append(name)
        for edge in self._outgoing.get(name, []):
            if edge.channel in channels:
                self._visit(edge.target, channels, state, order, stack)
        stack.pop()
        state[name] = _DONE
        order.append(name)

    def _visit(
        self,
        name: str,
        channels: frozenset[Channel],
        state: dict[str, int],
        order: list[str],
        stack: list[str],
    ) -> None:
        status = state.get(name)
        if status == _IN_PROGRESS:
            raise CyclicDependencyError([*stack[stack.index(name) :], name])
        if status is None:
            self._walk(name, channels, state, order, stack)

    def _walk_all(
        self,
        roots: Sequence[str],
        channels: frozenset[Channel],
        state: dict[str, int],
        order: list[str],
    ) -> None:
        for root in roots:
            self._visit(root, channels, state, order, [])

    def check_acyclic(self) -> None:
        """
        Verify the whole graph is acyclic.

        Raises:
            CyclicDependencyError: Naming the units of the first cycle found
        """
        self._walk_all(self._registry.names, ALL_CHANNELS, state={}, order=[])

    def compile_order(self) -> list[str]:
        """All units, every unit after each unit it depends on (any channel)."""
        order: list[str] = []
        self._walk_all(self._registry.names, ALL_CHANNELS, state={}, order=order)
        return order

    def resolve_classpath(
        self,
        unit: Unit | str,
        scope: ClasspathScope = ClasspathScope.COMPILE,
    ) -> ClasspathResolution:
        """
        Resolve the effective classpath of a unit.

        Follows the scope's channels transitively, plus the unit's own
        compiled-output edges (those are not transitive: a grandparent
        reached only through compiled-output edges is not visible). Every
        reachable unit is visited exactly once, even through diamonds.

        External coordinates are merged last-write-wins by ``group:name`` in
        traversal order: ancestors first, later-declared parents after
        earlier ones, the unit's own declarations last.

        Raises:
            UnknownUnitError: If the unit is not registered
            CyclicDependencyError: If a cycle is reachable from the unit
        """
        root = self._lookup(unit)
        channels = scope.channels

        state: dict[str, int] = {root.name: _IN_PROGRESS}
        stack = [root.name]
        order: list[str] = []
        for edge in self._outgoing.get(root.name, []):
            if edge.channel in channels or edge.channel is Channel.COMPILED_OUTPUT:
                self._visit(edge.target, channels, state, order, stack)

        merged: dict[str, str] = {}
        for name in [*order, root.name]:
            member = self._registry.lookup(name)
            declared = list(member.dependencies)
            if scope is ClasspathScope.RUNTIME:
                declared.extend(member.runtime_dependencies)
            for coordinate in declared:
                key = coordinate_key(coordinate)
                if key in merged and merged[key] != coordinate:
                    self._logger.debug(
                        "Classpath of %s: %s replaces %s (declared by %s)",
                        root.name,
                        coordinate,
                        merged[key],
                        name,
                    )
                merged[key] = coordinate

        resolution = ClasspathResolution(
            unit=root.name,
            scope=scope,
            units=order,
            outputs=[self._output_of(name) for name in [root.name, *order]],
            coordinates=list(merged.values()),
        )
        self._logger.debug(
            "Resolved %s classpath of %s: %d units, %d coordinates",
            scope.value,
            root.name,
            len(resolution.units),
            len(resolution.coordinates),
        )
        return resolution
