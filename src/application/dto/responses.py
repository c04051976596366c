"""Response DTOs for API endpoints.

Pydantic v2 models for API response serialization.
These are the ONLY contracts between use cases and API layer.
"""

from datetime import date, datetime

from pydantic import BaseModel, Field

from src.core.entities.calendar import CalendarMonth
from src.core.entities.countdown import Countdown, Severity
from src.core.entities.deadline import CalculationRecord, DeadlineCategory, DeadlineResult
from src.core.entities.reminder import (
    Priority,
    RecurrenceInterval,
    Reminder,
    ReminderCategory,
    ReminderStatus,
)
from src.core.services.date_math import format_date_de

# --- Deadlines ---


class DeadlineResponse(BaseModel):
    """Computed deadline."""

    category: DeadlineCategory
    reference_date: date
    deemed_received_date: date
    delivered_by_mail: bool
    deadline_date: date | None = None
    deadline_display: str | None = Field(
        default=None, description="Deadline as DD.MM.YYYY"
    )
    duration_label: str
    legal_basis_label: str
    guidance_notes: list[str] = Field(default_factory=list)
    is_open_ended: bool = False
    days_remaining: int | None = None
    severity: Severity | None = None

    @classmethod
    def from_result(cls, result: DeadlineResult) -> "DeadlineResponse":
        return cls(
            **result.model_dump(),
            deadline_display=(
                format_date_de(result.deadline_date) if result.deadline_date else None
            ),
        )


class CalculationRecordResponse(BaseModel):
    """Calculator history entry."""

    id: str
    calculated_at: datetime
    category: DeadlineCategory
    reference_date: date
    delivered_by_mail: bool
    deadline_date: date | None = None
    legal_basis_label: str

    @classmethod
    def from_entity(cls, record: CalculationRecord) -> "CalculationRecordResponse":
        return cls(**record.model_dump())


class CalculationHistoryResponse(BaseModel):
    entries: list[CalculationRecordResponse]
    total: int


# --- Reminders ---


class CountdownResponse(BaseModel):
    """Countdown badge."""

    days: int
    severity: Severity
    text: str

    @classmethod
    def from_entity(cls, countdown: Countdown) -> "CountdownResponse":
        return cls(days=countdown.days, severity=countdown.severity, text=countdown.text)


class ReminderResponse(BaseModel):
    """Reminder response DTO."""

    id: str
    title: str
    description: str = ""
    category: ReminderCategory
    category_label: str
    deadline_date: date
    trigger_date: date
    lead_days: int
    priority: Priority
    status: ReminderStatus
    case_reference: str | None = None
    is_recurring: bool = False
    recurrence_interval: RecurrenceInterval | None = None
    created_at: datetime
    completed_at: datetime | None = None
    countdown: CountdownResponse | None = None

    @classmethod
    def from_entity(
        cls, reminder: Reminder, countdown: Countdown | None = None
    ) -> "ReminderResponse":
        return cls(
            **reminder.model_dump(),
            category_label=reminder.category.label,
            countdown=CountdownResponse.from_entity(countdown) if countdown else None,
        )


class ReminderListResponse(BaseModel):
    """List of reminders."""

    reminders: list[ReminderResponse]
    total: int


class DeadlineReminderResponse(BaseModel):
    """Deadline computed and reminder created from it."""

    deadline: DeadlineResponse
    reminder: ReminderResponse


class NextOccurrenceResponse(BaseModel):
    """Suggested next deadline for a recurring reminder."""

    reminder_id: str
    recurrence_interval: RecurrenceInterval
    current_deadline: date
    suggested_deadline: date


# --- Calendar ---


class CalendarMonthResponse(BaseModel):
    """Month grid with reminders grouped by ISO date."""

    year: int
    month: int
    cells: list[int | None]
    days: dict[str, list[ReminderResponse]]

    @classmethod
    def from_entity(cls, view: CalendarMonth) -> "CalendarMonthResponse":
        return cls(
            year=view.year,
            month=view.month,
            cells=view.cells,
            days={
                day: [ReminderResponse.from_entity(r) for r in reminders]
                for day, reminders in view.days.items()
            },
        )


class ReminderSummaryResponse(BaseModel):
    open: int
    due_this_week: int
    overdue: int
    completed_this_month: int


# --- Notifications ---


class DispatchReportResponse(BaseModel):
    """Outcome of a notification run."""

    permission: str
    attempted: int
    delivered: list[str]
    failed: list[str]
    skipped: list[str]


# --- Health / errors ---


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str = "1.0.0"
    uptime_seconds: float
    storage_backend: str
    notification_backend: str
    reminders_loaded: int | None = None


class ErrorResponse(BaseModel):
    """Standardized error response DTO.

    Every error response includes:
    - error_code: machine-readable code (e.g. REMINDER_NOT_FOUND)
    - message: human-readable description
    - hint: suggested recovery action
    - path: request path that triggered the error
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error description")
    hint: str | None = Field(default=None, description="Suggested recovery action")
    detail: str | None = Field(default=None, description="Additional details")
    path: str | None = Field(default=None, description="Request path")
    timestamp: datetime = Field(default_factory=datetime.now)
