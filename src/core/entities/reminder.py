"""Reminder entity for statutory deadlines and appointments."""

import uuid
from datetime import UTC, date, datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ReminderCategory(str, Enum):
    """Kind of deadline a reminder tracks."""

    WIDERSPRUCHSFRIST = "widerspruchsfrist"
    KLAGEFRIST = "klagefrist"
    ABGABEFRIST = "abgabefrist"
    TERMIN = "termin"
    WEITERBEWILLIGUNGSANTRAG = "weiterbewilligungsantrag"
    MELDETERMIN = "meldetermin"
    SONSTIGES = "sonstiges"

    @property
    def label(self) -> str:
        return CATEGORY_LABELS[self]

    @property
    def default_lead_days(self) -> int:
        return DEFAULT_LEAD_DAYS[self]


class Priority(str, Enum):
    """Reminder priority, kritisch being the most urgent."""

    NIEDRIG = "niedrig"
    MITTEL = "mittel"
    HOCH = "hoch"
    KRITISCH = "kritisch"

    @property
    def rank(self) -> int:
        """Sort rank, lower sorts first."""
        return PRIORITY_RANK[self]


class ReminderStatus(str, Enum):
    """Lifecycle state of a reminder."""

    AKTIV = "aktiv"
    ERLEDIGT = "erledigt"
    VERPASST = "verpasst"
    STUMMGESCHALTET = "stummgeschaltet"

    @property
    def rank(self) -> int:
        return STATUS_RANK[self]


class RecurrenceInterval(str, Enum):
    """Cadence of a repeating obligation."""

    MONATLICH = "monatlich"
    QUARTALSWEISE = "quartalsweise"
    HALBJAEHRLICH = "halbjaehrlich"
    JAEHRLICH = "jaehrlich"


CATEGORY_LABELS: dict[ReminderCategory, str] = {
    ReminderCategory.WIDERSPRUCHSFRIST: "Widerspruchsfrist",
    ReminderCategory.KLAGEFRIST: "Klagefrist",
    ReminderCategory.ABGABEFRIST: "Abgabefrist fuer Unterlagen",
    ReminderCategory.TERMIN: "Termin beim Jobcenter",
    ReminderCategory.WEITERBEWILLIGUNGSANTRAG: "Weiterbewilligungsantrag",
    ReminderCategory.MELDETERMIN: "Meldetermin",
    ReminderCategory.SONSTIGES: "Sonstige Erinnerung",
}

DEFAULT_LEAD_DAYS: dict[ReminderCategory, int] = {
    ReminderCategory.WIDERSPRUCHSFRIST: 14,
    ReminderCategory.KLAGEFRIST: 14,
    ReminderCategory.ABGABEFRIST: 3,
    ReminderCategory.TERMIN: 1,
    ReminderCategory.WEITERBEWILLIGUNGSANTRAG: 30,
    ReminderCategory.MELDETERMIN: 1,
    ReminderCategory.SONSTIGES: 3,
}

PRIORITY_RANK: dict[Priority, int] = {
    Priority.KRITISCH: 0,
    Priority.HOCH: 1,
    Priority.MITTEL: 2,
    Priority.NIEDRIG: 3,
}

STATUS_RANK: dict[ReminderStatus, int] = {
    ReminderStatus.VERPASST: 0,
    ReminderStatus.AKTIV: 1,
    ReminderStatus.STUMMGESCHALTET: 2,
    ReminderStatus.ERLEDIGT: 3,
}


def _utcnow() -> datetime:
    return datetime.now(UTC)


class Reminder(BaseModel):
    """
    Reminder for a single deadline.

    Field aliases are the keys of the persisted JSON representation, so
    ``model_dump(by_alias=True)`` produces exactly what the blob store holds.
    Invariants are checked on construction; the store never mutates an
    instance in place but builds a new one for every change.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    title: str = Field(alias="titel")
    description: str = Field(default="", alias="beschreibung")
    category: ReminderCategory = Field(alias="typ")
    deadline_date: date = Field(alias="fristDatum")
    trigger_date: date = Field(alias="erinnerungsDatum")
    lead_days: int = Field(default=0, ge=0, alias="vorlaufTage")
    priority: Priority = Field(default=Priority.MITTEL, alias="prioritaet")
    status: ReminderStatus = ReminderStatus.AKTIV
    case_reference: str | None = Field(default=None, alias="aktenzeichen")
    is_recurring: bool = Field(default=False, alias="wiederholend")
    recurrence_interval: RecurrenceInterval | None = Field(
        default=None, alias="wiederholungsIntervall"
    )
    created_at: datetime = Field(default_factory=_utcnow, alias="erstelltAm")
    completed_at: datetime | None = Field(default=None, alias="erledigtAm")

    @model_validator(mode="after")
    def check_invariants(self) -> "Reminder":
        if self.trigger_date > self.deadline_date:
            raise ValueError("trigger date must not be after the deadline")
        if self.is_recurring != (self.recurrence_interval is not None):
            raise ValueError("recurrence interval is required exactly for recurring reminders")
        if (self.status == ReminderStatus.ERLEDIGT) != (self.completed_at is not None):
            raise ValueError("completed_at must be set exactly when the reminder is done")
        return self

    @property
    def is_open(self) -> bool:
        """Still waiting on the user (active or muted)."""
        return self.status in (ReminderStatus.AKTIV, ReminderStatus.STUMMGESCHALTET)

    def days_until(self, today: date) -> int:
        """Whole days from ``today`` to the deadline, negative when overdue."""
        return (self.deadline_date - today).days

    def to_storage(self) -> dict[str, Any]:
        """Serialize to the persisted JSON shape."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    @classmethod
    def from_storage(cls, data: dict[str, Any]) -> "Reminder":
        """Parse one persisted element."""
        return cls.model_validate(data)


class ReminderDraft(BaseModel):
    """User input for a new reminder."""

    title: str = ""
    description: str = ""
    category: ReminderCategory = ReminderCategory.WIDERSPRUCHSFRIST
    deadline_date: date
    lead_days: int | None = Field(default=None, ge=0)
    priority: Priority = Priority.MITTEL
    case_reference: str | None = None
    is_recurring: bool = False
    recurrence_interval: RecurrenceInterval | None = None


class ReminderPatch(BaseModel):
    """Partial edit of an existing reminder; unset fields stay untouched."""

    title: str | None = None
    description: str | None = None
    category: ReminderCategory | None = None
    deadline_date: date | None = None
    lead_days: int | None = Field(default=None, ge=0)
    priority: Priority | None = None
    case_reference: str | None = None
    is_recurring: bool | None = None
    recurrence_interval: RecurrenceInterval | None = None
