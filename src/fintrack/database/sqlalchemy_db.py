"""Generic SQLAlchemy storage implementation."""

from typing import Optional
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from fintrack.database.base import Storage
from fintrack.database.models import StorageEntry, create_session_factory
from fintrack.domain.errors import StorageError, storage_failure
from fintrack.logging_setup import get_logger

logger = get_logger(__name__)


class SQLAlchemyStorage(Storage):
    """SQLAlchemy-based implementation of the Storage interface."""

    def __init__(self, database_url: str):
        """Initialize SQLAlchemy storage.

        Args:
            database_url: SQLAlchemy database URL (e.g., 'sqlite:///path/to.db')
        """
        self.database_url = database_url
        self.session_factory = create_session_factory(database_url)
        self._session: Optional[Session] = None

    def _get_session(self) -> Session:
        """Get current session, creating one if needed."""
        if self._session is None:
            self._session = self.session_factory()
        return self._session

    def connect(self) -> None:
        """Connect to the storage backend."""
        # Connection is lazy, so this is a no-op
        pass

    def disconnect(self) -> None:
        """Disconnect from the storage backend."""
        if self._session is not None:
            self._session.close()
            self._session = None

    def initialize_schema(self) -> None:
        """Initialize storage schema (create tables)."""
        # Schema is created automatically by create_session_factory
        pass

    def get_item(self, key: str) -> Optional[str]:
        """Get the value stored under key, or None when absent."""
        session = self._get_session()
        # Column query bypasses the identity map
        try:
            return session.query(StorageEntry.value).filter(StorageEntry.key == key).scalar()
        except SQLAlchemyError as e:
            session.rollback()
            raise StorageError(storage_failure(key, "read")) from e

    def set_item(self, key: str, value: str) -> None:
        """Store value under key, overwriting any previous value."""
        session = self._get_session()
        try:
            entry = session.query(StorageEntry).filter(StorageEntry.key == key).first()
            if entry is None:
                session.add(StorageEntry(key=key, value=value))
            else:
                entry.value = value
            session.commit()
        except SQLAlchemyError as e:
            session.rollback()
            raise StorageError(storage_failure(key, "write")) from e
        logger.debug("Stored %d characters under %s", len(value), key)

    def remove_item(self, key: str) -> None:
        """Remove key if present."""
        session = self._get_session()
        try:
            session.query(StorageEntry).filter(StorageEntry.key == key).delete()
            session.commit()
        except SQLAlchemyError as e:
            session.rollback()
            raise StorageError(storage_failure(key, "remove")) from e

    def keys(self) -> list[str]:
        """List stored keys in sorted order."""
        session = self._get_session()
        try:
            entries = session.query(StorageEntry.key).order_by(StorageEntry.key).all()
        except SQLAlchemyError as e:
            session.rollback()
            raise StorageError(storage_failure("*", "list")) from e
        return [row.key for row in entries]
