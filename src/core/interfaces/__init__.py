"""Core interfaces (ports) for dependency injection."""

from src.core.interfaces.clock import IClock
from src.core.interfaces.notifier import INotifier
from src.core.interfaces.storage import IKeyValueStore

__all__ = [
    "IClock",
    "IKeyValueStore",
    "INotifier",
]
