"""
Local package repository.

SQLite storage for published package descriptors:

- Models: SQLAlchemy ORM models (publications, variants)
- Repositories: IPackageRepository implementation
- Engine: SQLAlchemy engine and session configuration

Usage:
    from unitgraph.db import create_database_context

    with create_database_context(db_path) as ctx:
        ctx.packages.store(descriptor)
"""

from .context import DatabaseContext, create_database_context
from .engine import create_repository_engine, create_session_factory, init_database
from .models import Base, Publication, Variant
from .repositories import SQLAlchemyPackageRepository

__all__ = [
    "Base",
    "DatabaseContext",
    "Publication",
    "SQLAlchemyPackageRepository",
    "Variant",
    "create_database_context",
    "create_repository_engine",
    "create_session_factory",
    "init_database",
]
