"""
Log-based notifier.

Writes each notification as a structured log event. Used when the engine
runs headless and there is no platform to show a notification on.
"""

from src.config import get_logger
from src.core.entities.notification import NotificationPermission
from src.core.interfaces.notifier import INotifier

logger = get_logger(__name__)


class LogNotifier(INotifier):
    """Always permitted; emits one ``reminder_notification`` log event per call."""

    def __init__(self) -> None:
        self.emitted: list[tuple[str, str]] = []

    @property
    def channel(self) -> str:
        return "log"

    async def permission(self) -> NotificationPermission:
        return NotificationPermission.GRANTED

    async def request_permission(self) -> NotificationPermission:
        return NotificationPermission.GRANTED

    async def emit(self, title: str, body: str) -> None:
        self.emitted.append((title, body))
        logger.info("reminder_notification", title=title, body=body)
