"""
Webhook notifier.

Posts each notification as JSON to a configured URL (ntfy, Gotify, a chat
bridge and similar push services all accept this shape).
"""

import httpx

from src.config import get_logger, get_settings
from src.core.entities.notification import NotificationPermission
from src.core.exceptions import NotificationError
from src.core.interfaces.notifier import INotifier

logger = get_logger(__name__)


class WebhookNotifier(INotifier):
    """
    HTTP push channel.

    Permission is granted exactly when a URL is configured; there is nothing
    to prompt for, so ``request_permission`` just reports the same state.
    """

    def __init__(
        self,
        url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        settings = get_settings()
        self.url = url if url is not None else settings.notifications.webhook_url
        self.timeout = timeout or settings.notifications.timeout
        self._transport = transport

    @property
    def channel(self) -> str:
        return "webhook"

    async def permission(self) -> NotificationPermission:
        if self.url:
            return NotificationPermission.GRANTED
        return NotificationPermission.DENIED

    async def request_permission(self) -> NotificationPermission:
        return await self.permission()

    async def emit(self, title: str, body: str) -> None:
        if not self.url:
            raise NotificationError(self.channel, "no webhook URL configured")

        payload = {"title": title, "body": body}
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self._transport
            ) as client:
                response = await client.post(self.url, json=payload)
        except httpx.HTTPError as e:
            raise NotificationError(self.channel, str(e)) from e

        if response.status_code >= 300:
            error_text = response.text[:200]
            raise NotificationError(self.channel, f"HTTP {response.status_code}: {error_text}")

        logger.debug("webhook_notification_sent", status=response.status_code)
