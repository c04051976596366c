"""Application use cases."""

from src.application.use_cases.create_reminder_from_deadline import (
    CreateReminderFromDeadlineUseCase,
    DeadlineReminderResult,
)
from src.application.use_cases.dispatch_due_notifications import (
    DispatchDueNotificationsUseCase,
)

__all__ = [
    "CreateReminderFromDeadlineUseCase",
    "DeadlineReminderResult",
    "DispatchDueNotificationsUseCase",
]
