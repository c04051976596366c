"""
Calendar arithmetic shared by the deadline calculator, recurrence and calendar.

Month and year addition clamp to the last day of the target month
(Jan 31 + 1 month -> Feb 28/29, Feb 29 + 1 year -> Feb 28).
"""

from datetime import date, datetime, timedelta

from dateutil.relativedelta import relativedelta

from src.core.exceptions import InvalidDateError


def parse_iso_date(value: date | str | None, field: str = "date") -> date:
    """
    Coerce an ISO ``YYYY-MM-DD`` string (or date) into a date.

    Raises:
        InvalidDateError: If the value is missing, blank or unparseable.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if value is None or not str(value).strip():
        raise InvalidDateError(field, value)
    try:
        return date.fromisoformat(str(value).strip()[:10])
    except ValueError:
        raise InvalidDateError(field, value) from None


def add_days(start: date, days: int) -> date:
    """Plain calendar-day addition."""
    return start + timedelta(days=days)


def add_months(start: date, months: int) -> date:
    """Add months, clamping to the last valid day of the target month."""
    return start + relativedelta(months=months)


def add_years(start: date, years: int) -> date:
    """Add years; Feb 29 lands on Feb 28 in non-leap target years."""
    return start + relativedelta(years=years)


def days_between(start: date, end: date) -> int:
    """Whole days from ``start`` to ``end`` (negative when end is earlier)."""
    return (end - start).days


def week_bounds(day: date) -> tuple[date, date]:
    """Monday and Sunday of the week containing ``day``."""
    monday = day - timedelta(days=day.weekday())
    return monday, monday + timedelta(days=6)


def format_date_de(value: date) -> str:
    """German short date, e.g. ``13.04.2025``."""
    return value.strftime("%d.%m.%Y")
