"""
SQLAlchemy package repository implementation.

Stores package descriptors so consumers can look them up by artifact name
and version.
"""

import json
import time

from sqlalchemy import select
from sqlalchemy.orm import Session

from ...core.interfaces.repository import IPackageRepository
from ...core.models.artifact import ArtifactKind
from ...core.models.package import PackageDescriptor, PackageMetadata, VariantKind, VariantRecord
from ..models import Publication, Variant


class SQLAlchemyPackageRepository(IPackageRepository):
    """
    SQLAlchemy implementation of the package repository.

    Storing a descriptor whose (group, artifact name, version) already
    exists replaces the earlier publication's metadata and variants.
    """

    def __init__(self, session: Session):
        """
        Initialize repository with database session.

        Args:
            session: SQLAlchemy session
        """
        self._session = session

    def store(self, descriptor: PackageDescriptor) -> bool:
        existing = self._session.execute(
            select(Publication).where(
                Publication.group_id == descriptor.group,
                Publication.artifact_name == descriptor.artifact_name,
                Publication.version == descriptor.version,
            )
        ).scalar_one_or_none()

        created = existing is None
        publication = existing or Publication(
            group_id=descriptor.group,
            artifact_name=descriptor.artifact_name,
            version=descriptor.version,
        )
        publication.unit = descriptor.unit
        publication.published_at = time.time()
        publication.metadata_ = descriptor.metadata.model_dump_json()
        publication.variants = [
            Variant(
                position=position,
                kind=record.kind.value,
                artifact_kind=record.artifact_kind.value,
                artifact=record.artifact,
                consumable=record.consumable,
                dependencies=json.dumps(record.dependencies),
            )
            for position, record in enumerate(descriptor.variants)
        ]

        if created:
            self._session.add(publication)
        self._session.flush()
        return created

    def get(self, artifact_name: str, version: str) -> PackageDescriptor | None:
        publication = self._session.execute(
            select(Publication).where(
                Publication.artifact_name == artifact_name,
                Publication.version == version,
            )
            .order_by(Publication.group_id)
        ).scalars().first()
        if publication is None:
            return None
        return self._to_descriptor(publication)

    def list_packages(self) -> list[PackageDescriptor]:
        publications = self._session.execute(
            select(Publication).order_by(Publication.artifact_name, Publication.version)
        ).scalars()
        return [self._to_descriptor(publication) for publication in publications]

    @staticmethod
    def _to_descriptor(publication: Publication) -> PackageDescriptor:
        metadata = (
            PackageMetadata.model_validate_json(publication.metadata_)
            if publication.metadata_
            else PackageMetadata()
        )
        return PackageDescriptor(
            unit=publication.unit,
            group=publication.group_id,
            artifact_name=publication.artifact_name,
            version=publication.version,
            metadata=metadata,
            variants=[
                VariantRecord(
                    kind=VariantKind(variant.kind),
                    artifact_kind=ArtifactKind(variant.artifact_kind),
                    artifact=variant.artifact,
                    consumable=variant.consumable,
                    dependencies=json.loads(variant.dependencies or "[]"),
                )
                for variant in publication.variants
            ],
        )
