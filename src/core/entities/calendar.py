"""Calendar views derived from the reminder collection."""

from pydantic import BaseModel, Field

from src.core.entities.reminder import Reminder


class CalendarMonth(BaseModel):
    """
    One month of the reminder calendar.

    ``cells`` is a Monday-first grid: leading None entries pad the first
    week, followed by the day numbers 1..n. ``days`` maps ISO dates to the
    reminders due on that day.
    """

    year: int
    month: int
    cells: list[int | None] = Field(default_factory=list)
    days: dict[str, list[Reminder]] = Field(default_factory=dict)


class ReminderSummary(BaseModel):
    """Headline counters shown above the reminder list."""

    open: int = 0
    due_this_week: int = 0
    overdue: int = 0
    completed_this_month: int = 0
