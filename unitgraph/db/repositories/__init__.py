"""Repository implementations backed by SQLAlchemy."""

from .package import SQLAlchemyPackageRepository

__all__ = ["SQLAlchemyPackageRepository"]
