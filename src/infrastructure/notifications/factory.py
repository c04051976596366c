"""
Notifier factory.

Creates the notification channel selected in configuration.
"""

from src.config import get_settings
from src.core.interfaces.notifier import INotifier

_notifier: INotifier | None = None


def get_notifier(backend: str | None = None) -> INotifier:
    """
    Get the notifier instance.

    Args:
        backend: "log" or "webhook" (default from settings)
    """
    global _notifier
    use_default = backend is None
    if use_default and _notifier is not None:
        return _notifier

    backend = backend or get_settings().notifications.backend

    if backend == "log":
        from src.infrastructure.notifications.log_notifier import LogNotifier

        notifier: INotifier = LogNotifier()
    elif backend == "webhook":
        from src.infrastructure.notifications.webhook_notifier import WebhookNotifier

        notifier = WebhookNotifier()
    else:
        raise ValueError(f"Unknown notification backend: {backend}")

    if use_default:
        _notifier = notifier
    return notifier


def reset_notifier() -> None:
    """Drop the cached notifier (for testing)."""
    global _notifier
    _notifier = None
