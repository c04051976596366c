"""
Application layer - Use cases, DTOs, and service factories.

This layer orchestrates business logic by:
1. Defining request/response DTOs for API contracts
2. Implementing use cases that coordinate core services
3. Providing factory functions for dependency injection

Use cases are the only entry point for API handlers.
"""

from src.application.services import (
    get_calculation_history,
    get_calendar_aggregator,
    get_clock,
    get_deadline_calculator,
    get_notification_dispatcher,
    get_reminder_store,
    reset_services,
    set_clock,
)
from src.application.use_cases import (
    CreateReminderFromDeadlineUseCase,
    DispatchDueNotificationsUseCase,
)

__all__ = [
    # Factories
    "get_clock",
    "set_clock",
    "get_reminder_store",
    "get_deadline_calculator",
    "get_calculation_history",
    "get_calendar_aggregator",
    "get_notification_dispatcher",
    "reset_services",
    # Use cases
    "CreateReminderFromDeadlineUseCase",
    "DispatchDueNotificationsUseCase",
]
