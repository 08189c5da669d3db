"""
Artifact domain models.

Provides Pydantic models for the archives a unit can produce.
"""

from __future__ import annotations

from enum import Enum

from pydantic import Field

from .base import ImmutableModel


class ArtifactKind(str, Enum):
    """Kind of archive produced for a unit."""

    BINARY = "binary"
    SOURCES = "sources"
    DOCUMENTATION = "documentation"

    @property
    def classifier(self) -> str | None:
        """Archive classifier appended to the file name."""
        return _CLASSIFIERS[self]


_CLASSIFIERS: dict[ArtifactKind, str | None] = {
    ArtifactKind.BINARY: None,
    ArtifactKind.SOURCES: "sources",
    ArtifactKind.DOCUMENTATION: "javadoc",
}


class ArtifactOptions(ImmutableModel):
    """Which optional archives a unit opted into."""

    include_sources: bool = True
    include_docs: bool = False


class ArtifactDescriptor(ImmutableModel):
    """A producible archive of a unit.

    ``contents`` lists the directories packed into the archive, in order.
    ``triggers`` names the umbrella actions that depend on building it.
    """

    unit: str = Field(description="Owning unit")
    kind: ArtifactKind = Field(description="Binary, sources or documentation")
    location: str = Field(description="Output archive path")
    task_name: str = Field(description="Action producing the archive")
    triggers: list[str] = Field(default_factory=list, description="Umbrella actions")
    contents: list[str] = Field(default_factory=list, description="Packed directories")
    includes: list[str] = Field(default_factory=list, description="Include patterns")
    classifier: str | None = Field(default=None, description="Archive classifier")

    @property
    def is_empty(self) -> bool:
        """True when the archive has nothing to pack."""
        return not self.contents
