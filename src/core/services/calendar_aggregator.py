"""
Calendar aggregation over the reminder collection.

Pure read-side views: month index, month grid, urgent list and the headline
summary. Callers must pass a reconciled collection.
"""

import calendar
from datetime import date

from src.core.entities.calendar import CalendarMonth, ReminderSummary
from src.core.entities.reminder import Reminder, ReminderStatus
from src.core.services.date_math import add_days, week_bounds

URGENT_STATUSES = frozenset({ReminderStatus.AKTIV, ReminderStatus.VERPASST})


class CalendarAggregator:
    """Derives calendar views from reminders."""

    def __init__(self, urgent_horizon_days: int = 7) -> None:
        self._horizon = urgent_horizon_days

    @staticmethod
    def index_by_date(
        reminders: list[Reminder], year: int, month: int
    ) -> dict[str, list[Reminder]]:
        """
        Group reminders due in (year, month) by ISO deadline date.

        Buckets keep the input order.
        """
        index: dict[str, list[Reminder]] = {}
        for reminder in reminders:
            deadline = reminder.deadline_date
            if deadline.year == year and deadline.month == month:
                index.setdefault(deadline.isoformat(), []).append(reminder)
        return index

    def month_view(self, reminders: list[Reminder], year: int, month: int) -> CalendarMonth:
        """Monday-first grid for one month plus its date index."""
        first_weekday, days_in_month = calendar.monthrange(year, month)
        cells: list[int | None] = [None] * first_weekday
        cells.extend(range(1, days_in_month + 1))
        return CalendarMonth(
            year=year,
            month=month,
            cells=cells,
            days=self.index_by_date(reminders, year, month),
        )

    @staticmethod
    def items_on_day(reminders: list[Reminder], day: date) -> list[Reminder]:
        return [r for r in reminders if r.deadline_date == day]

    def urgent_within_days(
        self,
        reminders: list[Reminder],
        today: date,
        horizon_days: int | None = None,
    ) -> list[Reminder]:
        """
        Active or missed reminders due within the horizon (overdue included).

        Sorted by deadline, then priority with kritisch first.
        """
        horizon = self._horizon if horizon_days is None else horizon_days
        limit = add_days(today, horizon)
        urgent = [
            r for r in reminders
            if r.status in URGENT_STATUSES and r.deadline_date <= limit
        ]
        urgent.sort(key=lambda r: (r.deadline_date, r.priority.rank))
        return urgent

    @staticmethod
    def summary(reminders: list[Reminder], today: date) -> ReminderSummary:
        """Open, due-this-week, overdue and completed-this-month counters."""
        week_start, week_end = week_bounds(today)
        result = ReminderSummary()
        for reminder in reminders:
            if reminder.is_open:
                result.open += 1
                if week_start <= reminder.deadline_date <= week_end and reminder.deadline_date >= today:
                    result.due_this_week += 1
            if reminder.status == ReminderStatus.VERPASST:
                result.overdue += 1
            if reminder.status == ReminderStatus.ERLEDIGT and reminder.completed_at is not None:
                completed = reminder.completed_at.astimezone().date()
                if (completed.year, completed.month) == (today.year, today.month):
                    result.completed_this_month += 1
        return result
