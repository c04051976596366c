"""
Reminder calendar endpoints.
"""

from fastapi import APIRouter, Depends, Path

from src.api.dependencies import get_app_clock, get_calendar, get_rem_store
from src.application.dto.responses import CalendarMonthResponse, ReminderSummaryResponse
from src.core.interfaces import IClock
from src.core.services import CalendarAggregator, ReminderStore

router = APIRouter(prefix="/api/calendar", tags=["calendar"])


@router.get(
    "/summary",
    response_model=ReminderSummaryResponse,
)
async def reminder_summary(
    store: ReminderStore = Depends(get_rem_store),
    calendar: CalendarAggregator = Depends(get_calendar),
    clock: IClock = Depends(get_app_clock),
) -> ReminderSummaryResponse:
    """Open, due-this-week, overdue and completed-this-month counters."""
    summary = calendar.summary(await store.all(), clock.today())
    return ReminderSummaryResponse(**summary.model_dump())


@router.get(
    "/{year}/{month}",
    response_model=CalendarMonthResponse,
)
async def month_view(
    year: int = Path(..., ge=1, le=9999),
    month: int = Path(..., ge=1, le=12),
    store: ReminderStore = Depends(get_rem_store),
    calendar: CalendarAggregator = Depends(get_calendar),
) -> CalendarMonthResponse:
    """Monday-first month grid with reminders grouped by deadline date."""
    view = calendar.month_view(await store.all(), year, month)
    return CalendarMonthResponse.from_entity(view)
