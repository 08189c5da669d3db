"""
SQLAlchemy ORM models for the local package repository.

One row per publication (group, artifact name, version) and one row per
variant of a publication.
"""

from typing import Optional

from sqlalchemy import (
    Boolean,
    Float,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass


class Publication(Base):
    """A published package."""

    __tablename__ = "publications"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    group_id: Mapped[str] = mapped_column("group", String, nullable=False)
    artifact_name: Mapped[str] = mapped_column(String, nullable=False)
    version: Mapped[str] = mapped_column(String, nullable=False)
    unit: Mapped[str] = mapped_column(String, nullable=False)
    published_at: Mapped[float] = mapped_column(Float, nullable=False)
    metadata_: Mapped[Optional[str]] = mapped_column("metadata", Text)  # JSON

    # Relationships
    variants: Mapped[list["Variant"]] = relationship(
        back_populates="publication",
        cascade="all, delete-orphan",
        order_by="Variant.position",
    )

    __table_args__ = (
        UniqueConstraint("group", "artifact_name", "version", name="uq_publication"),
        Index("idx_publications_artifact", "artifact_name", "version"),
    )


class Variant(Base):
    """A variant of a publication, bound to one archive."""

    __tablename__ = "variants"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    publication_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("publications.id", ondelete="CASCADE"), nullable=False
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False)
    kind: Mapped[str] = mapped_column(String, nullable=False)
    artifact_kind: Mapped[str] = mapped_column(String, nullable=False)
    artifact: Mapped[str] = mapped_column(Text, nullable=False)
    consumable: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    dependencies: Mapped[Optional[str]] = mapped_column(Text)  # JSON list

    # Relationships
    publication: Mapped["Publication"] = relationship(back_populates="variants")

    __table_args__ = (Index("idx_variants_publication", "publication_id"),)
