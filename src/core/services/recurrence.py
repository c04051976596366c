"""Next-occurrence suggestions for recurring reminders."""

from datetime import date

from src.core.entities.reminder import RecurrenceInterval
from src.core.services.date_math import add_months, add_years

# Months per interval; annual is handled as a year step so Feb 29 clamps once.
INTERVAL_MONTHS: dict[RecurrenceInterval, int] = {
    RecurrenceInterval.MONATLICH: 1,
    RecurrenceInterval.QUARTALSWEISE: 3,
    RecurrenceInterval.HALBJAEHRLICH: 6,
}


def next_occurrence(current: date, interval: RecurrenceInterval) -> date:
    """
    Suggest the next due date after ``current``.

    Only a suggestion: no reminder is created automatically.
    """
    if interval == RecurrenceInterval.JAEHRLICH:
        return add_years(current, 1)
    return add_months(current, INTERVAL_MONTHS[interval])
