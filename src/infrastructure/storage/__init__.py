"""Storage infrastructure implementations."""

from src.config import get_settings
from src.core.interfaces.storage import IKeyValueStore
from src.infrastructure.storage.memory import InMemoryKeyValueStore
from src.infrastructure.storage.sqlite import (
    SQLiteKeyValueStore,
    close_pool,
    get_pool,
)

# Singleton instance
_kv_store: IKeyValueStore | None = None


def get_kv_store() -> IKeyValueStore:
    """Get the configured key-value store (sqlite or memory)."""
    global _kv_store
    if _kv_store is None:
        backend = get_settings().storage.backend
        if backend == "memory":
            _kv_store = InMemoryKeyValueStore()
        else:
            _kv_store = SQLiteKeyValueStore()
    return _kv_store


def reset_kv_store() -> None:
    """Drop the cached store (for testing)."""
    global _kv_store
    _kv_store = None


__all__ = [
    "InMemoryKeyValueStore",
    "SQLiteKeyValueStore",
    "get_kv_store",
    "reset_kv_store",
    "get_pool",
    "close_pool",
]
