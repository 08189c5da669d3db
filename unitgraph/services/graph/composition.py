"""
Composition layer.

Bundles aggregate the compiled output of several leaf units into one
publishable unit. Demos are runnable units that extend others and are never
published.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from ...core.di import get_logger
from ...core.interfaces.logger import ILogger
from ...core.models.unit import ExtensionPolicy, Unit, UnitKind
from .builder import DependencyGraph
from .registry import UnitRegistry


class CompositionLayer:
    """Registers bundle and demo units on top of an existing graph."""

    def __init__(
        self,
        registry: UnitRegistry,
        graph: DependencyGraph,
        logger: ILogger | None = None,
    ) -> None:
        self._registry = registry
        self._graph = graph
        self._logger = logger or get_logger()

    def compose(self, name: str, leaf_units: Sequence[Unit | str], **attributes: Any) -> Unit:
        """
        Create a bundle unit from leaf units.

        The bundle's binary archive packs its own output followed by each
        leaf's output in the listed order. Plain edges to the leaves make the
        bundle build after them.

        Args:
            name: Bundle unit name
            leaf_units: Registered leaf units, in packing order
            **attributes: Further unit fields (artifact_name, source_roots, ...)

        Returns:
            The bundle unit

        Raises:
            UnknownUnitError: If a leaf is not registered
            DuplicateArtifactNameError: If the bundle's artifact name is taken
        """
        members: list[str] = []
        for leaf in leaf_units:
            leaf_name = leaf.name if isinstance(leaf, Unit) else leaf
            self._registry.lookup(leaf_name, referenced_by=name)
            if leaf_name not in members:
                members.append(leaf_name)

        bundle = self._registry.register(
            name, kind=UnitKind.BUNDLE, members=members, **attributes
        )
        self._graph.extend(bundle, members, ExtensionPolicy.PLAIN)
        self._logger.info("Composed bundle %s from %s", name, members)
        return bundle

    def demo(self, name: str, parents: Sequence[Unit | str], **attributes: Any) -> Unit:
        """
        Create a demo unit extending ``parents`` with a plain extension.

        Raises:
            UnknownUnitError: If a parent is not registered
        """
        unit = self._registry.register(name, kind=UnitKind.DEMO, publish=False, **attributes)
        self._graph.extend(unit, parents, ExtensionPolicy.PLAIN)
        self._logger.debug("Registered demo %s", name)
        return unit
