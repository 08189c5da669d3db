"""
Database context for the local package repository.

Opens the SQLite database, creates the schema and exposes the package
repository for the lifetime of a ``with`` block.
"""

from pathlib import Path

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..core.exceptions import RepositoryConnectionError
from .engine import create_repository_engine, create_session_factory, init_database
from .repositories import SQLAlchemyPackageRepository


class DatabaseContext:
    """
    Context manager providing access to the package repository.

    Usage:
        with DatabaseContext(db_path) as ctx:
            ctx.packages.store(descriptor)
    """

    def __init__(self, db_path: Path):
        self.db_path = Path(db_path)
        self._engine: Engine | None = None
        self._session: Session | None = None
        self._package_repo: SQLAlchemyPackageRepository | None = None

    def connect(self) -> None:
        """Connect to the database and initialize schema if needed."""
        try:
            self._engine = create_repository_engine(self.db_path)
            init_database(self._engine)
        except (OSError, SQLAlchemyError) as e:
            self.close()
            raise RepositoryConnectionError(
                f"Cannot open package repository: {e}", db_path=str(self.db_path), cause=e
            ) from e
        self._session = create_session_factory(self._engine)()
        self._package_repo = SQLAlchemyPackageRepository(self._session)

    def close(self) -> None:
        """Close database connection."""
        if self._session:
            self._session.close()
            self._session = None
        if self._engine:
            self._engine.dispose()
            self._engine = None
        self._package_repo = None

    def commit(self) -> None:
        """Commit the current transaction."""
        if self._session:
            self._session.commit()

    def __enter__(self) -> "DatabaseContext":
        self.connect()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        if self._session:
            if exc_type:
                self._session.rollback()
            else:
                self._session.commit()
        self.close()

    @property
    def session(self) -> Session:
        """Get the underlying database session."""
        if self._session is None:
            raise RepositoryConnectionError(
                "DatabaseContext not connected. Use as context manager.",
                db_path=str(self.db_path),
            )
        return self._session

    @property
    def packages(self) -> SQLAlchemyPackageRepository:
        """Package repository for published descriptors."""
        if self._package_repo is None:
            raise RepositoryConnectionError(
                "DatabaseContext not connected. Use as context manager.",
                db_path=str(self.db_path),
            )
        return self._package_repo


def create_database_context(db_path: Path) -> DatabaseContext:
    """Create a database context for the repository file at ``db_path``."""
    return DatabaseContext(db_path)
