"""Abstract key-value storage interface."""

from abc import ABC, abstractmethod
from typing import Optional


class Storage(ABC):
    """Abstract key-value storage for fintrack.

    Values are opaque strings; callers own their serialization. Every write
    replaces the whole value stored under a key.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the storage backend."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the storage backend."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize storage schema (create tables)."""
        pass

    @abstractmethod
    def get_item(self, key: str) -> Optional[str]:
        """Get the value stored under key, or None when absent.

        Raises:
            StorageError: If the backend cannot be read
        """
        pass

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """Store value under key, overwriting any previous value.

        Raises:
            StorageError: If the backend cannot be written
        """
        pass

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """Remove key if present.

        Raises:
            StorageError: If the backend cannot be written
        """
        pass

    @abstractmethod
    def keys(self) -> list[str]:
        """List stored keys in sorted order.

        Raises:
            StorageError: If the backend cannot be read
        """
        pass
