"""
Package publication models.

A package descriptor is what the package repository client consumes: one per
published unit, with metadata and a closed set of typed variants.
"""

from __future__ import annotations

from enum import Enum

from pydantic import Field, field_validator

from .artifact import ArtifactKind
from .base import ImmutableModel


class VariantKind(str, Enum):
    """Independently resolvable facet of a published package."""

    API = "api"
    RUNTIME = "runtime"
    SOURCES = "sources"
    DOCUMENTATION = "documentation"

    @property
    def artifact_kind(self) -> ArtifactKind:
        """Artifact kind this variant binds to."""
        return _VARIANT_BINDINGS[self]


_VARIANT_BINDINGS: dict[VariantKind, ArtifactKind] = {
    VariantKind.API: ArtifactKind.BINARY,
    VariantKind.RUNTIME: ArtifactKind.BINARY,
    VariantKind.SOURCES: ArtifactKind.SOURCES,
    VariantKind.DOCUMENTATION: ArtifactKind.DOCUMENTATION,
}


def validate_project_url(v: str | None) -> str | None:
    """Project URLs must be http(s); empty means unset."""
    if v is None or v == "":
        return None
    if not v.startswith(("http://", "https://")):
        raise ValueError("Project URL must start with http:// or https://")
    return v


class Author(ImmutableModel):
    """Package author (developer entry)."""

    id: str = Field(min_length=1)
    name: str
    email: str | None = None


class License(ImmutableModel):
    """Package license."""

    name: str
    url: str | None = None


class SourceControl(ImmutableModel):
    """Source-control origin of the package."""

    connection: str | None = Field(default=None, description="Clone URL")
    developer_connection: str | None = Field(default=None, description="Push URL")
    url: str | None = Field(default=None, description="Browse URL")


class PackageMetadata(ImmutableModel):
    """Descriptive metadata attached to every published package."""

    name: str | None = None
    description: str | None = None
    url: str | None = None
    license: License | None = None
    authors: list[Author] = Field(default_factory=list)
    scm: SourceControl | None = None

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str | None) -> str | None:
        return validate_project_url(v)


class VariantRecord(ImmutableModel):
    """A typed variant bound to one backing artifact."""

    kind: VariantKind
    artifact_kind: ArtifactKind
    artifact: str = Field(description="Location of the backing archive")
    consumable: bool = True
    dependencies: list[str] = Field(
        default_factory=list, description="Coordinates consumers receive with this variant"
    )


class PackageDescriptor(ImmutableModel):
    """Publication of one unit."""

    unit: str
    group: str
    artifact_name: str
    version: str
    metadata: PackageMetadata = Field(default_factory=PackageMetadata)
    variants: list[VariantRecord] = Field(default_factory=list)

    @property
    def coordinates(self) -> str:
        """``group:artifact:version`` coordinates."""
        return f"{self.group}:{self.artifact_name}:{self.version}"

    def variant(self, kind: VariantKind) -> VariantRecord | None:
        """Get the variant of the given kind, if published."""
        for record in self.variants:
            if record.kind is kind:
                return record
        return None

    @property
    def variant_kinds(self) -> list[VariantKind]:
        """Kinds of all published variants, in declaration order."""
        return [record.kind for record in self.variants]
