"""
Build description models.

Schema of the TOML build description: project properties, package metadata
and the unit, bundle and demo tables. These models use relaxed validation
since their input comes straight from TOML.
"""

from __future__ import annotations

from typing import Literal

from pydantic import ConfigDict, Field, field_validator

from .base import GraphBaseModel
from .package import validate_project_url

ExtensionName = Literal["plain", "library"]


class DescriptionBaseModel(GraphBaseModel):
    """Base model for description sections with relaxed strict mode for TOML loading."""

    model_config = ConfigDict(
        strict=False,  # Allow coercion from TOML types
        validate_assignment=True,
        extra="forbid",  # Typos in a build description are errors
        populate_by_name=True,
        revalidate_instances="never",
    )


class ProjectSection(DescriptionBaseModel):
    """Project properties (Maven group and archive base name)."""

    group: str = Field(min_length=1, alias="maven_group")
    archives_base_name: str = Field(min_length=1)
    build_dir: str = "build"


class LicenseSection(DescriptionBaseModel):
    name: str
    url: str | None = None


class AuthorSection(DescriptionBaseModel):
    id: str = Field(min_length=1)
    name: str
    email: str | None = None


class ScmSection(DescriptionBaseModel):
    connection: str | None = None
    developer_connection: str | None = None
    url: str | None = None


class PackageSection(DescriptionBaseModel):
    """Package metadata shared by every published unit."""

    name: str | None = None
    description: str | None = None
    url: str | None = None
    license: LicenseSection | None = None
    authors: list[AuthorSection] = Field(default_factory=list)
    scm: ScmSection | None = None

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str | None) -> str | None:
        return validate_project_url(v)


class UnitSection(DescriptionBaseModel):
    """A leaf unit declaration."""

    extends: list[str] = Field(default_factory=list)
    extension: ExtensionName = "plain"
    artifact_name: str | None = None
    source_roots: list[str] | None = None
    dependencies: list[str] = Field(default_factory=list)
    runtime_dependencies: list[str] = Field(default_factory=list)
    sources: bool = True
    docs: bool = False
    publish: bool = True
    package: PackageSection | None = None

    @field_validator("dependencies", "runtime_dependencies")
    @classmethod
    def validate_coordinates(cls, v: list[str]) -> list[str]:
        """External coordinates must be ``group:name[:version]``."""
        for coordinate in v:
            parts = coordinate.split(":")
            if len(parts) < 2 or not all(parts):
                raise ValueError(f"Invalid dependency coordinate: {coordinate!r}")
        return v


class BundleSection(DescriptionBaseModel):
    """A bundle unit aggregating leaf units."""

    units: list[str] = Field(min_length=1)
    artifact_name: str | None = None
    source_roots: list[str] | None = None
    sources: bool = True
    docs: bool = False


class DemoSection(DescriptionBaseModel):
    """A runnable, unpublished unit."""

    extends: list[str] = Field(default_factory=list)
    source_roots: list[str] | None = None


class BuildDescription(DescriptionBaseModel):
    """Complete build description.

    Table order is declaration order: parents and bundle members must appear
    before the units referring to them.
    """

    project: ProjectSection
    package: PackageSection = Field(default_factory=PackageSection)
    units: dict[str, UnitSection] = Field(default_factory=dict)
    bundles: dict[str, BundleSection] = Field(default_factory=dict)
    demos: dict[str, DemoSection] = Field(default_factory=dict)
