"""Notification channel implementations."""

from src.infrastructure.notifications.factory import get_notifier, reset_notifier
from src.infrastructure.notifications.log_notifier import LogNotifier
from src.infrastructure.notifications.webhook_notifier import WebhookNotifier

__all__ = [
    "LogNotifier",
    "WebhookNotifier",
    "get_notifier",
    "reset_notifier",
]
