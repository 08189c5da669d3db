"""
Variant publisher.

Packages a unit's artifacts into typed variants and attaches package
metadata. Each unit name maps to exactly one package descriptor per
evaluation: publishing again replaces the earlier descriptor.
"""

from __future__ import annotations

from ...core.di import get_logger
from ...core.exceptions import DuplicateArtifactNameError
from ...core.interfaces.logger import ILogger
from ...core.models.artifact import ArtifactDescriptor, ArtifactKind
from ...core.models.package import (
    PackageDescriptor,
    PackageMetadata,
    VariantKind,
    VariantRecord,
)
from ...core.models.unit import Channel, ClasspathScope, Unit, UnitKind
from .artifacts import ArtifactDeriver
from .builder import DependencyGraph, coordinate_key

# Variant declaration order
VARIANT_KINDS: tuple[VariantKind, ...] = (
    VariantKind.API,
    VariantKind.RUNTIME,
    VariantKind.SOURCES,
    VariantKind.DOCUMENTATION,
)


class VariantPublisher:
    """Builds and registers package descriptors for published units."""

    def __init__(
        self,
        graph: DependencyGraph,
        deriver: ArtifactDeriver,
        group: str,
        version: str,
        logger: ILogger | None = None,
    ) -> None:
        """
        Args:
            graph: Graph of the evaluation (and through it, the registry)
            deriver: Derives artifacts for units published without explicit ones
            group: Maven group of every package
            version: Version string resolved once for the evaluation
            logger: Logger instance. If None, resolves from DI container.
        """
        self._graph = graph
        self._deriver = deriver
        self._group = group
        self._version = version
        self._logger = logger or get_logger()
        self._packages: dict[str, PackageDescriptor] = {}
        self._artifact_owners: dict[str, str] = {}

    @property
    def version(self) -> str:
        return self._version

    @property
    def packages(self) -> list[PackageDescriptor]:
        """Registered descriptors, in first-publication order."""
        return list(self._packages.values())

    def get(self, unit_name: str) -> PackageDescriptor | None:
        """Get the descriptor published for a unit."""
        return self._packages.get(unit_name)

    def publish(
        self,
        unit: Unit,
        metadata: PackageMetadata,
        artifacts: list[ArtifactDescriptor] | None = None,
    ) -> PackageDescriptor:
        """
        Publish a unit.

        Args:
            unit: Unit to publish
            metadata: Package metadata to attach
            artifacts: The unit's artifacts; derived from the unit's flags if None

        Returns:
            The registered package descriptor

        Raises:
            DuplicateArtifactNameError: If another unit already published
                under the same artifact name
            ValueError: If no binary artifact is supplied
        """
        artifact_name = unit.resolved_artifact_name
        owner = self._artifact_owners.get(artifact_name)
        if owner is not None and owner != unit.name:
            raise DuplicateArtifactNameError(artifact_name, units=[owner, unit.name])

        if artifacts is None:
            artifacts = self._deriver.derive_artifacts(unit)
        by_kind = {artifact.kind: artifact for artifact in artifacts if artifact.unit == unit.name}
        if ArtifactKind.BINARY not in by_kind:
            raise ValueError(f"Unit {unit.name} has no binary artifact to publish")

        variants = self._bind_variants(unit, by_kind)

        descriptor = PackageDescriptor(
            unit=unit.name,
            group=self._group,
            artifact_name=artifact_name,
            version=self._version,
            metadata=metadata,
            variants=variants,
        )

        previous = self._packages.get(unit.name)
        if previous is not None:
            # A renamed re-publication frees the old name
            self._artifact_owners.pop(previous.artifact_name, None)
            self._logger.debug("Re-publishing %s replaces earlier descriptor", unit.name)
        self._packages[unit.name] = descriptor
        self._artifact_owners[artifact_name] = unit.name

        self._logger.info(
            "Published %s with variants %s",
            descriptor.coordinates,
            [kind.value for kind in descriptor.variant_kinds],
        )
        return descriptor

    def _bind_variants(
        self,
        unit: Unit,
        by_kind: dict[ArtifactKind, ArtifactDescriptor],
    ) -> list[VariantRecord]:
        if unit.kind is UnitKind.BUNDLE:
            api_dependencies = self._bundle_dependencies(unit, ClasspathScope.COMPILE)
            runtime_dependencies = self._bundle_dependencies(
                unit, ClasspathScope.RUNTIME, base=api_dependencies
            )
        else:
            api_dependencies = self._dependencies(unit, Channel.INTERFACE, unit.dependencies)
            runtime_dependencies = self._dependencies(
                unit,
                Channel.RUNTIME,
                [*unit.dependencies, *unit.runtime_dependencies],
                base=api_dependencies,
            )
        dependencies_of = {
            VariantKind.API: api_dependencies,
            VariantKind.RUNTIME: runtime_dependencies,
        }

        variants: list[VariantRecord] = []
        for kind in VARIANT_KINDS:
            artifact = by_kind.get(kind.artifact_kind)
            if artifact is None:
                continue
            variants.append(
                VariantRecord(
                    kind=kind,
                    artifact_kind=artifact.kind,
                    artifact=artifact.location,
                    dependencies=dependencies_of.get(kind, []),
                )
            )
        return variants

    def _dependencies(
        self,
        unit: Unit,
        channel: Channel,
        external: list[str],
        base: list[str] | None = None,
    ) -> list[str]:
        """Coordinates of direct parents on ``channel`` plus external ones, de-duplicated."""
        coordinates = list(base or [])
        for parent_name in self._graph.parents_of(unit, channel):
            parent = self._graph.registry.lookup(parent_name, referenced_by=unit.name)
            coordinate = f"{self._group}:{parent.resolved_artifact_name}:{self._version}"
            if coordinate not in coordinates:
                coordinates.append(coordinate)
        for coordinate in external:
            if coordinate not in coordinates:
                coordinates.append(coordinate)
        return coordinates

    def _bundle_dependencies(
        self,
        bundle: Unit,
        scope: ClasspathScope,
        base: list[str] | None = None,
    ) -> list[str]:
        """
        Coordinates a bundle's consumers need, merged by ``group:name``.

        Members' classes are packed into the bundle, so members themselves
        are left out; the units and external coordinates on each member's
        classpath are merged in member order, then the bundle's own.
        """
        packed = {bundle.name, *bundle.members}
        merged: dict[str, str] = {coordinate_key(c): c for c in base or []}

        def merge(coordinate: str) -> None:
            merged[coordinate_key(coordinate)] = coordinate

        for member in bundle.members:
            resolution = self._graph.resolve_classpath(member, scope)
            for name in resolution.units:
                if name in packed:
                    continue
                parent = self._graph.registry.lookup(name, referenced_by=bundle.name)
                merge(f"{self._group}:{parent.resolved_artifact_name}:{self._version}")
            for coordinate in resolution.coordinates:
                merge(coordinate)

        for coordinate in bundle.dependencies:
            merge(coordinate)
        if scope is ClasspathScope.RUNTIME:
            for coordinate in bundle.runtime_dependencies:
                merge(coordinate)
        return list(merged.values())
