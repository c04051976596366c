"""
Reminder management endpoints.
"""

from typing import Literal

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from src.api.dependencies import get_app_clock, get_calendar, get_rem_store
from src.application.dto.requests import (
    CreateReminderRequest,
    SetStatusRequest,
    UpdateReminderRequest,
)
from src.application.dto.responses import (
    ErrorResponse,
    NextOccurrenceResponse,
    ReminderListResponse,
    ReminderResponse,
)
from src.core.entities.reminder import (
    Priority,
    Reminder,
    ReminderCategory,
    ReminderStatus,
)
from src.core.exceptions import ReminderNotFoundError
from src.core.interfaces import IClock
from src.core.services import CalendarAggregator, ReminderStore, countdown

router = APIRouter(prefix="/api/reminders", tags=["reminders"])


def _entity_to_response(reminder: Reminder, clock: IClock) -> ReminderResponse:
    """Convert entity to response DTO with its countdown badge."""
    return ReminderResponse.from_entity(
        reminder, countdown(reminder.deadline_date, clock.today())
    )


def _not_found(reminder_id: str) -> ReminderNotFoundError:
    return ReminderNotFoundError(reminder_id)


@router.post(
    "",
    response_model=ReminderResponse,
    status_code=status.HTTP_201_CREATED,
    responses={422: {"model": ErrorResponse}},
)
async def create_reminder(
    request: CreateReminderRequest,
    store: ReminderStore = Depends(get_rem_store),
    clock: IClock = Depends(get_app_clock),
) -> ReminderResponse:
    """Create a new reminder."""
    created = await store.create(request.to_draft())
    return _entity_to_response(created, clock)


@router.get(
    "",
    response_model=ReminderListResponse,
)
async def list_reminders(
    sort_by: Literal["deadline", "priority", "status"] = "deadline",
    category: ReminderCategory | None = None,
    status_filter: ReminderStatus | None = Query(default=None, alias="status"),
    priority: Priority | None = None,
    store: ReminderStore = Depends(get_rem_store),
    clock: IClock = Depends(get_app_clock),
) -> ReminderListResponse:
    """List reminders with optional category, status and priority filters."""
    reminders = await store.list_reminders(
        sort_by=sort_by,
        category=category,
        status=status_filter,
        priority=priority,
    )
    return ReminderListResponse(
        reminders=[_entity_to_response(r, clock) for r in reminders],
        total=len(reminders),
    )


@router.get(
    "/urgent",
    response_model=ReminderListResponse,
)
async def list_urgent_reminders(
    within_days: int | None = None,
    store: ReminderStore = Depends(get_rem_store),
    calendar: CalendarAggregator = Depends(get_calendar),
    clock: IClock = Depends(get_app_clock),
) -> ReminderListResponse:
    """Active or missed reminders due within the horizon, most pressing first."""
    reminders = calendar.urgent_within_days(
        await store.all(), clock.today(), horizon_days=within_days
    )
    return ReminderListResponse(
        reminders=[_entity_to_response(r, clock) for r in reminders],
        total=len(reminders),
    )


@router.get(
    "/{reminder_id}",
    response_model=ReminderResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_reminder(
    reminder_id: str,
    store: ReminderStore = Depends(get_rem_store),
    clock: IClock = Depends(get_app_clock),
) -> ReminderResponse:
    """Get a reminder by ID."""
    reminder = await store.get(reminder_id)
    if reminder is None:
        raise _not_found(reminder_id)
    return _entity_to_response(reminder, clock)


@router.put(
    "/{reminder_id}",
    response_model=ReminderResponse,
    responses={404: {"model": ErrorResponse}},
)
async def update_reminder(
    reminder_id: str,
    request: UpdateReminderRequest,
    store: ReminderStore = Depends(get_rem_store),
    clock: IClock = Depends(get_app_clock),
) -> ReminderResponse:
    """Edit reminder fields. The trigger date follows deadline and lead time."""
    updated = await store.update(reminder_id, request.to_patch())
    if updated is None:
        raise _not_found(reminder_id)
    return _entity_to_response(updated, clock)


@router.delete(
    "/{reminder_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"model": ErrorResponse}},
)
async def delete_reminder(
    reminder_id: str,
    store: ReminderStore = Depends(get_rem_store),
) -> Response:
    """Delete a reminder."""
    if not await store.remove(reminder_id):
        raise _not_found(reminder_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/{reminder_id}/status",
    response_model=ReminderResponse,
    responses={404: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
async def set_reminder_status(
    reminder_id: str,
    request: SetStatusRequest,
    store: ReminderStore = Depends(get_rem_store),
    clock: IClock = Depends(get_app_clock),
) -> ReminderResponse:
    """Change status. Undefined transitions are rejected with 409."""
    updated = await store.set_status(reminder_id, request.status)
    if updated is None:
        raise _not_found(reminder_id)
    return _entity_to_response(updated, clock)


@router.post(
    "/{reminder_id}/complete",
    response_model=ReminderResponse,
    responses={404: {"model": ErrorResponse}},
)
async def complete_reminder(
    reminder_id: str,
    store: ReminderStore = Depends(get_rem_store),
    clock: IClock = Depends(get_app_clock),
) -> ReminderResponse:
    """Mark a reminder as done."""
    updated = await store.mark_complete(reminder_id)
    if updated is None:
        raise _not_found(reminder_id)
    return _entity_to_response(updated, clock)


@router.post(
    "/{reminder_id}/mute",
    response_model=ReminderResponse,
    responses={404: {"model": ErrorResponse}},
)
async def toggle_mute_reminder(
    reminder_id: str,
    store: ReminderStore = Depends(get_rem_store),
    clock: IClock = Depends(get_app_clock),
) -> ReminderResponse:
    """Mute an active reminder or unmute a muted one."""
    updated = await store.toggle_mute(reminder_id)
    if updated is None:
        raise _not_found(reminder_id)
    return _entity_to_response(updated, clock)


@router.get(
    "/{reminder_id}/next-occurrence",
    response_model=NextOccurrenceResponse,
    responses={404: {"model": ErrorResponse}},
)
async def next_occurrence(
    reminder_id: str,
    store: ReminderStore = Depends(get_rem_store),
) -> NextOccurrenceResponse:
    """Suggested next deadline for a recurring reminder."""
    reminder = await store.get(reminder_id)
    if reminder is None:
        raise _not_found(reminder_id)
    suggested = await store.suggest_next_occurrence(reminder_id)
    if suggested is None or reminder.recurrence_interval is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No recurrence configured for {reminder_id}",
        )
    return NextOccurrenceResponse(
        reminder_id=reminder_id,
        recurrence_interval=reminder.recurrence_interval,
        current_deadline=reminder.deadline_date,
        suggested_deadline=suggested,
    )
