"""SQLAlchemy implementation of the key-value storage."""

import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from fintrack.database.base import Storage
from fintrack.database.models import StorageEntry, create_session_factory
from fintrack.domain.errors import PersistenceError

logger = logging.getLogger(__name__)


class SQLAlchemyStorage(Storage):
    """SQLAlchemy-based implementation of the Storage interface."""

    def __init__(self, database_url: str):
        """Initialize SQLAlchemy storage.

        Args:
            database_url: SQLAlchemy database URL (e.g., 'sqlite:///path/to.db')

        Raises:
            PersistenceError: If the database cannot be opened
        """
        self.database_url = database_url
        try:
            self.session_factory: sessionmaker[Session] = create_session_factory(
                database_url
            )
        except SQLAlchemyError as e:
            raise PersistenceError(f"Could not open storage at {database_url}: {e}") from e
        self._session: Optional[Session] = None

    def _get_session(self) -> Session:
        """Get current session, creating one if needed."""
        if self._session is None:
            self._session = self.session_factory()
        return self._session

    def connect(self) -> None:
        """Connect to the database."""
        # Connection is lazy, so this is a no-op
        pass

    def disconnect(self) -> None:
        """Disconnect from the database."""
        if self._session is not None:
            self._session.close()
            self._session = None

    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        # Schema is created automatically by create_session_factory
        pass

    def read(self, key: str) -> Optional[str]:
        session = self._get_session()
        try:
            entry = session.get(StorageEntry, key)
        except SQLAlchemyError as e:
            session.rollback()
            raise PersistenceError(f"Could not read '{key}': {e}") from e
        return None if entry is None else entry.value

    def write_many(self, entries: dict[str, str]) -> None:
        session = self._get_session()
        try:
            for key, value in entries.items():
                entry = session.get(StorageEntry, key)
                if entry is None:
                    session.add(StorageEntry(key=key, value=value))
                else:
                    entry.value = value
            session.commit()
        except SQLAlchemyError as e:
            session.rollback()
            raise PersistenceError(f"Could not write {', '.join(entries)}: {e}") from e
        logger.debug("Wrote %d storage entries", len(entries))

    def keys(self) -> list[str]:
        session = self._get_session()
        try:
            rows = session.query(StorageEntry.key).order_by(StorageEntry.key).all()
        except SQLAlchemyError as e:
            session.rollback()
            raise PersistenceError(f"Could not list storage keys: {e}") from e
        return [row.key for row in rows]
