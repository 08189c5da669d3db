"""
Unit and dependency edge models.

A unit is a named compilation target (the analogue of a source set). Units
are connected by typed dependency edges, one per propagation channel.
"""

from __future__ import annotations

from enum import Enum

from pydantic import Field

from .base import GraphBaseModel, ImmutableModel


class UnitKind(str, Enum):
    """What a unit is used for."""

    LEAF = "leaf"  # Regular published unit
    BUNDLE = "bundle"  # Aggregates the compiled output of leaf units
    DEMO = "demo"  # Runnable, never published


class Channel(str, Enum):
    """Dependency propagation channel."""

    INTERFACE = "interface"  # Exported to consumers at compile time
    RUNTIME = "runtime"  # Exported to consumers at runtime only
    COMPILED_OUTPUT = "compiled_output"  # Parent classes visible, not re-exported


class ExtensionPolicy(str, Enum):
    """Which channels an extension propagates."""

    PLAIN = "plain"
    LIBRARY = "library"

    @property
    def channels(self) -> tuple[Channel, ...]:
        """Channels propagated by this policy, in edge creation order."""
        if self is ExtensionPolicy.LIBRARY:
            return (Channel.COMPILED_OUTPUT, Channel.INTERFACE, Channel.RUNTIME)
        return (Channel.COMPILED_OUTPUT,)


class ClasspathScope(str, Enum):
    """Classpath being resolved."""

    COMPILE = "compile"
    RUNTIME = "runtime"

    @property
    def channels(self) -> frozenset[Channel]:
        """Transitive channels followed when resolving this scope."""
        if self is ClasspathScope.RUNTIME:
            return frozenset({Channel.INTERFACE, Channel.RUNTIME})
        return frozenset({Channel.INTERFACE})


class Unit(GraphBaseModel):
    """A named compilation unit.

    ``name`` is the identity and never changes. ``artifact_name`` may be left
    unset by the build description; ``resolved_artifact_name`` falls back to
    the unit name.
    """

    name: str = Field(min_length=1, frozen=True, description="Unique unit identity")
    kind: UnitKind = Field(default=UnitKind.LEAF, description="Leaf, bundle or demo")
    artifact_name: str | None = Field(default=None, description="Publishable name")
    source_roots: list[str] = Field(default_factory=list, description="Source directories")
    parents: list[str] = Field(default_factory=list, description="Declared parents, in order")
    members: list[str] = Field(default_factory=list, description="Bundle leaf units, in order")
    dependencies: list[str] = Field(
        default_factory=list, description="External coordinates on the interface channel"
    )
    runtime_dependencies: list[str] = Field(
        default_factory=list, description="External coordinates on the runtime channel"
    )
    include_sources: bool = Field(default=True, description="Produce a sources archive")
    include_docs: bool = Field(default=False, description="Produce a documentation archive")
    publish: bool = Field(default=True, description="Emit a package for this unit")

    @property
    def resolved_artifact_name(self) -> str:
        """Artifact name, defaulting to the unit name."""
        return self.artifact_name or self.name

    @property
    def is_publishable(self) -> bool:
        """Demo units are never published."""
        return self.publish and self.kind is not UnitKind.DEMO


class DependencyEdge(ImmutableModel):
    """Directed edge from a unit to one of its parents on a single channel."""

    source: str = Field(description="Dependent unit")
    target: str = Field(description="Unit depended upon")
    channel: Channel = Field(description="Propagation channel")


class ClasspathResolution(ImmutableModel):
    """Result of resolving a unit's effective classpath.

    ``units`` lists every unit reached (each once, ancestors first), not
    including the unit being resolved. ``outputs`` starts with the unit's own
    compiled output. ``coordinates`` holds external dependencies after
    last-write-wins conflict resolution.
    """

    unit: str
    scope: ClasspathScope
    units: list[str] = Field(default_factory=list)
    outputs: list[str] = Field(default_factory=list)
    coordinates: list[str] = Field(default_factory=list)

    @property
    def entries(self) -> list[str]:
        """Full classpath: compiled outputs followed by external coordinates."""
        return [*self.outputs, *self.coordinates]
