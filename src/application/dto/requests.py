"""Request DTOs for API endpoints.

Pydantic v2 models for request validation.
"""

from datetime import date

from pydantic import BaseModel, Field

from src.core.entities.deadline import DeadlineCategory
from src.core.entities.reminder import (
    Priority,
    RecurrenceInterval,
    ReminderCategory,
    ReminderDraft,
    ReminderPatch,
    ReminderStatus,
)

# --- Deadlines ---


class ComputeDeadlineRequest(BaseModel):
    """Request to compute a statutory deadline."""

    reference_date: str | None = Field(
        default=None, description="Date printed on the notice (YYYY-MM-DD)"
    )
    category: DeadlineCategory = Field(..., description="Deadline category")
    delivered_by_mail: bool = Field(
        default=True, description="Apply the three-day postal delivery fiction"
    )


class DeadlineReminderRequest(ComputeDeadlineRequest):
    """Request to compute a deadline and create a reminder for it."""

    case_reference: str | None = Field(default=None, description="Aktenzeichen")
    priority: Priority | None = Field(
        default=None, description="Override the hand-off priority"
    )
    lead_days: int | None = Field(
        default=None, ge=0, description="Override the hand-off lead time"
    )


# --- Reminders ---


class CreateReminderRequest(BaseModel):
    """Request to create a reminder."""

    title: str = Field(default="", description="Title; blank uses the category label")
    description: str = Field(default="", description="Free-text notes")
    category: ReminderCategory = Field(
        default=ReminderCategory.WIDERSPRUCHSFRIST, description="Reminder category"
    )
    deadline_date: date = Field(..., description="Deadline (YYYY-MM-DD)")
    lead_days: int | None = Field(
        default=None, ge=0, description="Days before the deadline to start reminding"
    )
    priority: Priority = Field(default=Priority.MITTEL, description="Priority")
    case_reference: str | None = Field(default=None, description="Aktenzeichen")
    is_recurring: bool = Field(default=False, description="Repeating obligation")
    recurrence_interval: RecurrenceInterval | None = Field(
        default=None, description="Cadence; defaults to monatlich when recurring"
    )

    def to_draft(self) -> ReminderDraft:
        return ReminderDraft(**self.model_dump())


class UpdateReminderRequest(BaseModel):
    """Request to update a reminder. Only the fields sent are changed."""

    title: str | None = Field(default=None, description="Reminder title")
    description: str | None = Field(default=None, description="Free-text notes")
    category: ReminderCategory | None = Field(default=None, description="Reminder category")
    deadline_date: date | None = Field(default=None, description="Deadline (YYYY-MM-DD)")
    lead_days: int | None = Field(default=None, ge=0, description="Lead time in days")
    priority: Priority | None = Field(default=None, description="Priority")
    case_reference: str | None = Field(default=None, description="Aktenzeichen")
    is_recurring: bool | None = Field(default=None, description="Repeating obligation")
    recurrence_interval: RecurrenceInterval | None = Field(
        default=None, description="Cadence"
    )

    def to_patch(self) -> ReminderPatch:
        return ReminderPatch(**self.model_dump(exclude_unset=True))


class SetStatusRequest(BaseModel):
    """Request to change a reminder's status."""

    status: ReminderStatus = Field(..., description="Target status")


# --- Notifications ---


class DispatchNotificationsRequest(BaseModel):
    """Request to run notification dispatch."""

    today: date | None = Field(
        default=None, description="Evaluation date; defaults to the server's today"
    )
