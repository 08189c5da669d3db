"""
Artifact deriver.

Defines the archives a unit produces and which umbrella action each one
is wired into.
"""

from __future__ import annotations

from ...core.di import get_logger
from ...core.interfaces.logger import ILogger
from ...core.models.artifact import ArtifactDescriptor, ArtifactKind, ArtifactOptions
from ...core.models.plan import BINARIES_ACTION, FULL_BUILD_ACTION
from ...core.models.unit import Unit, UnitKind
from .layout import BuildLayout
from .registry import UnitRegistry

CLASS_FILES = "**/*.class"
JAVA_SOURCES = "**/*.java"


def binary_task_name(unit_name: str) -> str:
    return f"{unit_name}Jar"


def sources_task_name(unit_name: str) -> str:
    return f"{unit_name}SourcesJar"


def docs_task_name(unit_name: str) -> str:
    return f"{unit_name}JavadocJar"


class ArtifactDeriver:
    """
    Derives artifact descriptors for units.

    The binary archive always exists and packs exactly the unit's own
    compiled output; parents are reached through the classpath, never
    packed. Bundle units are the exception: their binary archive also packs
    every member's output, in member order.
    """

    def __init__(
        self,
        registry: UnitRegistry,
        layout: BuildLayout,
        logger: ILogger | None = None,
    ) -> None:
        self._registry = registry
        self._layout = layout
        self._logger = logger or get_logger()

    def derive_artifacts(
        self,
        unit: Unit,
        options: ArtifactOptions | None = None,
    ) -> list[ArtifactDescriptor]:
        """
        Derive the archives of a unit.

        Args:
            unit: Registered unit
            options: Opt-in archives; defaults to the unit's own flags

        Returns:
            Binary descriptor first, then sources and documentation if requested
        """
        if options is None:
            options = ArtifactOptions(
                include_sources=unit.include_sources,
                include_docs=unit.include_docs,
            )

        artifacts = [self._binary(unit)]
        if options.include_sources:
            artifacts.append(self._sources(unit))
        if options.include_docs:
            artifacts.append(self._documentation(unit))

        self._logger.debug(
            "Derived artifacts for %s: %s",
            unit.name,
            [artifact.kind.value for artifact in artifacts],
        )
        return artifacts

    def binary_contents(self, unit: Unit) -> list[str]:
        """Directories packed into the unit's binary archive."""
        contents = [self._layout.classes_dir(unit.name)]
        if unit.kind is UnitKind.BUNDLE:
            for member in unit.members:
                self._registry.lookup(member, referenced_by=unit.name)
                contents.append(self._layout.classes_dir(member))
        return contents

    def _binary(self, unit: Unit) -> ArtifactDescriptor:
        return ArtifactDescriptor(
            unit=unit.name,
            kind=ArtifactKind.BINARY,
            location=self._layout.archive_path(unit.resolved_artifact_name),
            task_name=binary_task_name(unit.name),
            triggers=[BINARIES_ACTION],
            contents=self.binary_contents(unit),
            includes=[CLASS_FILES],
        )

    def _sources(self, unit: Unit) -> ArtifactDescriptor:
        descriptor = ArtifactDescriptor(
            unit=unit.name,
            kind=ArtifactKind.SOURCES,
            location=self._layout.archive_path(
                unit.resolved_artifact_name, ArtifactKind.SOURCES.classifier
            ),
            task_name=sources_task_name(unit.name),
            triggers=[FULL_BUILD_ACTION],
            contents=list(unit.source_roots),
            includes=[JAVA_SOURCES],
            classifier=ArtifactKind.SOURCES.classifier,
        )
        if descriptor.is_empty:
            self._logger.info("Sources archive of %s is empty", unit.name)
        return descriptor

    def _documentation(self, unit: Unit) -> ArtifactDescriptor:
        # Nothing to document still yields a valid, empty archive
        descriptor = ArtifactDescriptor(
            unit=unit.name,
            kind=ArtifactKind.DOCUMENTATION,
            location=self._layout.archive_path(
                unit.resolved_artifact_name, ArtifactKind.DOCUMENTATION.classifier
            ),
            task_name=docs_task_name(unit.name),
            triggers=[FULL_BUILD_ACTION],
            contents=list(unit.source_roots),
            includes=[JAVA_SOURCES],
            classifier=ArtifactKind.DOCUMENTATION.classifier,
        )
        if descriptor.is_empty:
            self._logger.warning(
                "Unit %s has no documentable source; its documentation archive will be empty",
                unit.name,
            )
        return descriptor
