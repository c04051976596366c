"""
Abstract interface for the persistent key-value store.

The engine treats the store as a last-writer-wins blob store: one string
value per key, no partial updates.
"""

from abc import ABC, abstractmethod


class IKeyValueStore(ABC):
    """
    Abstract interface for key-value blob storage.

    Implementations are free to raise on I/O failure; callers decide how to
    recover.
    """

    @abstractmethod
    async def get(self, key: str) -> str | None:
        """Return the stored value, or None when the key is absent."""
        pass

    @abstractmethod
    async def set(self, key: str, value: str) -> None:
        """Store a value, replacing whatever was there."""
        pass

    @abstractmethod
    async def delete(self, key: str) -> bool:
        """Remove a key. Returns True if something was removed."""
        pass
