"""
Abstract interface for the platform notification capability.

Mirrors the browser Notification API: a permission query, a permission
request and a fire-and-forget emit.
"""

from abc import ABC, abstractmethod

from src.core.entities.notification import NotificationPermission


class INotifier(ABC):
    """Platform notification channel."""

    @property
    @abstractmethod
    def channel(self) -> str:
        """Short channel name used in logs."""
        pass

    @abstractmethod
    async def permission(self) -> NotificationPermission:
        """Current permission state, without prompting."""
        pass

    @abstractmethod
    async def request_permission(self) -> NotificationPermission:
        """Ask the platform for permission and return the resulting state."""
        pass

    @abstractmethod
    async def emit(self, title: str, body: str) -> None:
        """
        Deliver one notification.

        Raises:
            NotificationError: If the platform rejected the notification.
        """
        pass
