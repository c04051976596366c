"""
Core business logic services.

Layer-pure services that depend only on:
- src/core/entities/*
- src/core/interfaces/*
- src/core/exceptions.py

NO infrastructure imports. All dependencies injected via constructor.
"""

from src.core.services.calculation_history import CalculationHistory
from src.core.services.calendar_aggregator import CalendarAggregator
from src.core.services.deadline_calculator import (
    DEADLINE_RULES,
    DeadlineCalculator,
    DeadlineRule,
    HandoffDefaults,
)
from src.core.services.notification_dispatcher import NotificationDispatcher
from src.core.services.recurrence import next_occurrence
from src.core.services.reminder_lifecycle import (
    ALLOWED_TRANSITIONS,
    ReminderLifecycle,
    countdown,
)
from src.core.services.reminder_store import ReminderStore

__all__ = [
    # Deadline Calculator
    "DeadlineCalculator",
    "DeadlineRule",
    "DEADLINE_RULES",
    "HandoffDefaults",
    "CalculationHistory",
    # Reminders
    "ReminderLifecycle",
    "ALLOWED_TRANSITIONS",
    "countdown",
    "next_occurrence",
    "ReminderStore",
    # Calendar
    "CalendarAggregator",
    # Notifications
    "NotificationDispatcher",
]
