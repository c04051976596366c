"""
Service factory functions for dependency injection.

This module provides factory functions that wire infrastructure
implementations to core services. Use cases should import from here.

Clean Architecture: Application layer orchestrates DI, not core layer.
"""

from typing import TYPE_CHECKING

from src.config import get_settings
from src.core.entities.notification import DispatchPolicy
from src.core.entities.reminder import Priority
from src.core.services import (
    CalculationHistory,
    CalendarAggregator,
    DeadlineCalculator,
    HandoffDefaults,
    NotificationDispatcher,
    ReminderStore,
)

if TYPE_CHECKING:
    from src.core.interfaces import IClock, IKeyValueStore, INotifier


# Singleton service instances
_clock: "IClock | None" = None
_reminder_store: ReminderStore | None = None
_deadline_calculator: DeadlineCalculator | None = None
_calculation_history: CalculationHistory | None = None
_calendar_aggregator: CalendarAggregator | None = None
_notification_dispatcher: NotificationDispatcher | None = None


def get_clock() -> "IClock":
    """Get the process clock (system time unless overridden in tests)."""
    global _clock
    if _clock is None:
        from src.infrastructure.clock import SystemClock

        _clock = SystemClock()
    return _clock


def set_clock(clock: "IClock") -> None:
    """
    Replace the process clock.

    Services created afterwards pick it up; call ``reset_services`` first to
    rebuild existing ones.
    """
    global _clock
    _clock = clock


def get_reminder_store(kv_store: "IKeyValueStore | None" = None) -> ReminderStore:
    """
    Get or create the ReminderStore.

    Args:
        kv_store: Optional key-value store override

    Returns:
        The process-wide ReminderStore
    """
    global _reminder_store

    if _reminder_store is not None and kv_store is None:
        return _reminder_store

    # Lazy import infrastructure to avoid circular imports
    from src.infrastructure.storage import get_kv_store

    settings = get_settings()
    store = ReminderStore(
        kv_store=kv_store or get_kv_store(),
        clock=get_clock(),
        storage_key=settings.storage.reminders_key,
    )

    if kv_store is None:
        _reminder_store = store

    return store


def get_deadline_calculator() -> DeadlineCalculator:
    """Get or create the DeadlineCalculator with configured hand-off defaults."""
    global _deadline_calculator

    if _deadline_calculator is None:
        settings = get_settings()
        _deadline_calculator = DeadlineCalculator(
            clock=get_clock(),
            handoff=HandoffDefaults(
                lead_days=settings.reminders.handoff_lead_days,
                priority=Priority(settings.reminders.handoff_priority),
            ),
        )

    return _deadline_calculator


def get_calculation_history(kv_store: "IKeyValueStore | None" = None) -> CalculationHistory:
    """Get or create the calculator history."""
    global _calculation_history

    if _calculation_history is not None and kv_store is None:
        return _calculation_history

    from src.infrastructure.storage import get_kv_store

    settings = get_settings()
    history = CalculationHistory(
        kv_store=kv_store or get_kv_store(),
        clock=get_clock(),
        storage_key=settings.storage.history_key,
        limit=settings.reminders.history_limit,
    )

    if kv_store is None:
        _calculation_history = history

    return history


def get_calendar_aggregator() -> CalendarAggregator:
    global _calendar_aggregator

    if _calendar_aggregator is None:
        settings = get_settings()
        _calendar_aggregator = CalendarAggregator(
            urgent_horizon_days=settings.reminders.urgent_horizon_days,
        )

    return _calendar_aggregator


def get_notification_dispatcher(notifier: "INotifier | None" = None) -> NotificationDispatcher:
    """
    Get or create the NotificationDispatcher.

    The dispatcher keeps the per-session/per-day bookkeeping, so the default
    instance is a singleton.
    """
    global _notification_dispatcher

    if _notification_dispatcher is not None and notifier is None:
        return _notification_dispatcher

    from src.infrastructure.notifications import get_notifier

    settings = get_settings()
    dispatcher = NotificationDispatcher(
        notifier=notifier or get_notifier(),
        policy=DispatchPolicy(settings.notifications.policy),
        title=settings.notifications.title,
    )

    if notifier is None:
        _notification_dispatcher = dispatcher

    return dispatcher


def reset_services() -> None:
    """
    Reset all singleton service instances.

    Useful for testing or when configuration changes.
    """
    global _clock
    global _reminder_store
    global _deadline_calculator
    global _calculation_history
    global _calendar_aggregator
    global _notification_dispatcher

    _clock = None
    _reminder_store = None
    _deadline_calculator = None
    _calculation_history = None
    _calendar_aggregator = None
    _notification_dispatcher = None


__all__ = [
    # Factory functions
    "get_clock",
    "set_clock",
    "get_reminder_store",
    "get_deadline_calculator",
    "get_calculation_history",
    "get_calendar_aggregator",
    "get_notification_dispatcher",
    # Reset
    "reset_services",
]
