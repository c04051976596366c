"""Clock implementations."""

from datetime import UTC, date, datetime

from src.core.interfaces.clock import IClock


class SystemClock(IClock):
    """Reads the host's local date and the current UTC time."""

    def today(self) -> date:
        return date.today()

    def now(self) -> datetime:
        return datetime.now(UTC)


class FixedClock(IClock):
    """
    Clock pinned to a given date.

    Used by tests and by batch runs that evaluate reminders "as of" a date.
    """

    def __init__(self, today: date, now: datetime | None = None):
        self._today = today
        self._now = now or datetime(today.year, today.month, today.day, 12, 0, tzinfo=UTC)

    def today(self) -> date:
        return self._today

    def now(self) -> datetime:
        return self._now

    def advance(self, new_today: date) -> None:
        """Move the clock forward (or back) to another day."""
        self._today = new_today
        self._now = datetime(new_today.year, new_today.month, new_today.day, 12, 0, tzinfo=UTC)
