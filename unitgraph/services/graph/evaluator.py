"""
Build evaluator.

Evaluates a build description from scratch: registers units in declaration
order, wires the graph, derives artifacts, publishes packages and plans the
actions. Every evaluation owns a fresh registry, so re-evaluating never sees
state from an earlier run.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from ...core.di import get_logger
from ...core.exceptions import BuildDescriptionError
from ...core.interfaces.logger import ILogger
from ...core.models.artifact import ArtifactDescriptor
from ...core.models.description import BuildDescription, PackageSection
from ...core.models.package import (
    Author,
    License,
    PackageDescriptor,
    PackageMetadata,
    SourceControl,
)
from ...core.models.unit import ExtensionPolicy, UnitKind
from ..planning.task_plan import TaskPlan, TaskPlanBuilder
from .artifacts import ArtifactDeriver
from .builder import DependencyGraph
from .composition import CompositionLayer
from .layout import BuildLayout
from .publisher import VariantPublisher
from .registry import UnitRegistry
from .versioning import resolve_version


def default_source_roots(unit_name: str) -> list[str]:
    return [f"src/{unit_name}/java"]


def package_metadata(
    shared: PackageSection,
    override: PackageSection | None = None,
) -> PackageMetadata:
    """
    Build package metadata from the shared package section.

    Fields set in ``override`` replace the shared ones; an override with
    authors replaces the whole author list.
    """
    values = shared.model_dump()
    if override is not None:
        for key, value in override.model_dump().items():
            if value is not None and value != []:
                values[key] = value

    license_ = values["license"]
    scm = values["scm"]
    return PackageMetadata(
        name=values["name"],
        description=values["description"],
        url=values["url"],
        license=License(**license_) if license_ else None,
        authors=[Author(**author) for author in values["authors"]],
        scm=SourceControl(**scm) if scm else None,
    )


@dataclass
class Evaluation:
    """Everything one evaluation produced."""

    version: str
    layout: BuildLayout
    registry: UnitRegistry
    graph: DependencyGraph
    artifacts: dict[str, list[ArtifactDescriptor]] = field(default_factory=dict)
    packages: list[PackageDescriptor] = field(default_factory=list)
    plan: TaskPlan | None = None

    def package_for(self, unit_name: str) -> PackageDescriptor | None:
        for package in self.packages:
            if package.unit == unit_name:
                return package
        return None


class BuildEvaluator:
    """Evaluates build descriptions."""

    def __init__(self, logger: ILogger | None = None) -> None:
        self._logger = logger or get_logger()

    def evaluate(
        self,
        description: BuildDescription,
        release: bool = False,
        now: datetime | None = None,
    ) -> Evaluation:
        """
        Evaluate a build description.

        Args:
            description: Validated build description
            release: Stamp a release version instead of the snapshot version
            now: Build time for the release version

        Returns:
            The evaluation

        Raises:
            BuildDescriptionError: If a name is declared twice
            UnknownUnitError: If a unit refers to one not declared before it
            CyclicDependencyError: If the units form a cycle
            DuplicateArtifactNameError: If two units share an artifact name
        """
        version = resolve_version(release, now)
        project = description.project
        layout = BuildLayout(project.archives_base_name, version, project.build_dir)
        self._logger.info("Evaluating build of %s at version %s", project.group, version)

        registry = UnitRegistry(logger=self._logger)
        graph = DependencyGraph(registry, output_of=layout.classes_dir, logger=self._logger)
        composition = CompositionLayer(registry, graph, logger=self._logger)

        for name, section in description.units.items():
            self._ensure_new(registry, name)
            registry.register(
                name,
                kind=UnitKind.LEAF,
                artifact_name=section.artifact_name,
                source_roots=section.source_roots or default_source_roots(name),
                dependencies=list(section.dependencies),
                runtime_dependencies=list(section.runtime_dependencies),
                include_sources=section.sources,
                include_docs=section.docs,
                publish=section.publish,
            )
            if section.extends:
                graph.extend(name, section.extends, ExtensionPolicy(section.extension))

        for name, bundle in description.bundles.items():
            self._ensure_new(registry, name)
            composition.compose(
                name,
                bundle.units,
                artifact_name=bundle.artifact_name,
                source_roots=bundle.source_roots or default_source_roots(name),
                include_sources=bundle.sources,
                include_docs=bundle.docs,
            )

        for name, demo in description.demos.items():
            self._ensure_new(registry, name)
            composition.demo(
                name,
                demo.extends,
                source_roots=demo.source_roots or default_source_roots(name),
            )

        graph.check_acyclic()
        registry.validate_artifact_names()

        deriver = ArtifactDeriver(registry, layout, logger=self._logger)
        artifacts = {
            unit.name: deriver.derive_artifacts(unit)
            for unit in registry
            if unit.kind is not UnitKind.DEMO
        }

        publisher = VariantPublisher(
            graph, deriver, project.group, version, logger=self._logger
        )
        for unit in registry:
            if not unit.is_publishable:
                continue
            unit_section = description.units.get(unit.name)
            override = unit_section.package if unit_section is not None else None
            publisher.publish(
                unit,
                package_metadata(description.package, override),
                artifacts[unit.name],
            )

        plan = TaskPlanBuilder(layout, logger=self._logger).build(graph, artifacts)

        evaluation = Evaluation(
            version=version,
            layout=layout,
            registry=registry,
            graph=graph,
            artifacts=artifacts,
            packages=publisher.packages,
            plan=plan,
        )
        self._logger.info(
            "Evaluated %d units, %d packages, %d actions",
            len(registry),
            len(evaluation.packages),
            len(plan),
        )
        return evaluation

    @staticmethod
    def _ensure_new(registry: UnitRegistry, name: str) -> None:
        if name in registry:
            raise BuildDescriptionError(
                f"Unit '{name}' is declared more than once", context={"unit": name}
            )
