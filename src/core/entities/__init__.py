"""Core domain entities."""

from src.core.entities.calendar import CalendarMonth, ReminderSummary
from src.core.entities.countdown import Countdown, Severity
from src.core.entities.deadline import (
    CalculationRecord,
    DeadlineCategory,
    DeadlineResult,
)
from src.core.entities.notification import (
    DispatchPolicy,
    DispatchReport,
    NotificationPermission,
)
from src.core.entities.reminder import (
    Priority,
    RecurrenceInterval,
    Reminder,
    ReminderCategory,
    ReminderDraft,
    ReminderPatch,
    ReminderStatus,
)

__all__ = [
    # Reminder entities
    "Reminder",
    "ReminderDraft",
    "ReminderPatch",
    "ReminderCategory",
    "ReminderStatus",
    "Priority",
    "RecurrenceInterval",
    # Deadline entities
    "DeadlineCategory",
    "DeadlineResult",
    "CalculationRecord",
    # Derived views
    "Countdown",
    "Severity",
    "CalendarMonth",
    "ReminderSummary",
    # Notification entities
    "NotificationPermission",
    "DispatchPolicy",
    "DispatchReport",
]
