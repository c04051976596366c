"""
Dependency injection container for FastAPI.

Provides service instances to route handlers.
"""

from functools import lru_cache

from src.application.services import (
    get_calculation_history,
    get_calendar_aggregator,
    get_clock,
    get_deadline_calculator,
    get_notification_dispatcher,
    get_reminder_store,
)
from src.application.use_cases import (
    CreateReminderFromDeadlineUseCase,
    DispatchDueNotificationsUseCase,
)
from src.config import Settings, get_settings
from src.core.interfaces import IClock
from src.core.services import (
    CalculationHistory,
    CalendarAggregator,
    DeadlineCalculator,
    ReminderStore,
)


@lru_cache
def get_app_settings() -> Settings:
    """Get cached application settings."""
    return get_settings()


def get_app_clock() -> IClock:
    return get_clock()


# Service dependencies
async def get_rem_store() -> ReminderStore:
    """Get the reminder store, loaded and reconciled."""
    store = get_reminder_store()
    await store.reconcile()
    return store


def get_calculator() -> DeadlineCalculator:
    """Get deadline calculator."""
    return get_deadline_calculator()


def get_history() -> CalculationHistory:
    """Get calculator history."""
    return get_calculation_history()


def get_calendar() -> CalendarAggregator:
    """Get calendar aggregator."""
    return get_calendar_aggregator()


# Use case dependencies
def get_create_reminder_from_deadline_use_case() -> CreateReminderFromDeadlineUseCase:
    """Get calculator hand-off use case."""
    return CreateReminderFromDeadlineUseCase(
        calculator=get_deadline_calculator(),
        reminder_store=get_reminder_store(),
        history=get_calculation_history(),
    )


def get_dispatch_use_case() -> DispatchDueNotificationsUseCase:
    """Get notification dispatch use case."""
    return DispatchDueNotificationsUseCase(
        reminder_store=get_reminder_store(),
        dispatcher=get_notification_dispatcher(),
        clock=get_clock(),
    )
