"""Abstract key-value storage interface."""

from abc import ABC, abstractmethod
from typing import Optional


class Storage(ABC):
    """Abstract key-value storage medium holding serialized text values."""

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
    def read(self, key: str) -> Optional[str]:
        """Return the text stored under ``key``, or None if the key is absent.

        Raises:
            PersistenceError: If the backend cannot be read
        """
        pass

    @abstractmethod
    def write_many(self, entries: dict[str, str]) -> None:
        """Write every entry, replacing existing values, as one unit.

        Either all entries are written or none are.

        Raises:
            PersistenceError: If the backend cannot be written
        """
        pass

    @abstractmethod
    def keys(self) -> list[str]:
        """List stored keys."""
        pass
