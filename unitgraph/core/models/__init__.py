"""
Pydantic models for unitgraph.

This package provides typed, validated models for units, edges, artifacts,
packages, task plans, build descriptions and settings.
"""

from .artifact import ArtifactDescriptor, ArtifactKind, ArtifactOptions
from .base import GraphBaseModel, ImmutableModel
from .config import BuildConfig, LoggingConfig, RepositoryConfig
from .description import (
    BuildDescription,
    BundleSection,
    DemoSection,
    PackageSection,
    ProjectSection,
    UnitSection,
)
from .package import (
    Author,
    License,
    PackageDescriptor,
    PackageMetadata,
    SourceControl,
    VariantKind,
    VariantRecord,
)
from .plan import BINARIES_ACTION, FULL_BUILD_ACTION, Action, ActionKind
from .unit import (
    Channel,
    ClasspathResolution,
    ClasspathScope,
    DependencyEdge,
    ExtensionPolicy,
    Unit,
    UnitKind,
)

__all__ = [
    "BINARIES_ACTION",
    "FULL_BUILD_ACTION",
    "Action",
    "ActionKind",
    "ArtifactDescriptor",
    "ArtifactKind",
    "ArtifactOptions",
    "Author",
    "BuildConfig",
    "BuildDescription",
    "BundleSection",
    "Channel",
    "ClasspathResolution",
    "ClasspathScope",
    "DemoSection",
    "DependencyEdge",
    "ExtensionPolicy",
    "GraphBaseModel",
    "ImmutableModel",
    "License",
    "LoggingConfig",
    "PackageDescriptor",
    "PackageMetadata",
    "PackageSection",
    "ProjectSection",
    "RepositoryConfig",
    "SourceControl",
    "Unit",
    "UnitKind",
    "UnitSection",
    "VariantKind",
    "VariantRecord",
]
