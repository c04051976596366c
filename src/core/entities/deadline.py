"""Statutory deadline categories and calculator results."""

import uuid
from datetime import UTC, date, datetime
from enum import Enum

from pydantic import BaseModel, Field

from src.core.entities.countdown import Severity


class DeadlineCategory(str, Enum):
    """Legal remedy or procedural step a deadline is computed for."""

    WIDERSPRUCH = "widerspruch"
    KLAGE = "klage"
    BERUFUNG = "berufung"
    UEBERPRUEFUNG = "ueberpruefung"
    EILANTRAG = "eilantrag"
    ANHOERUNG = "anhoerung"
    MITWIRKUNG = "mitwirkung"


class DeadlineResult(BaseModel):
    """
    Outcome of a deadline computation.

    Pure Pydantic model, not persisted with reminders. ``deadline_date``,
    ``days_remaining`` and ``severity`` are None for open-ended categories.
    """

    category: DeadlineCategory
    reference_date: date
    deemed_received_date: date
    delivered_by_mail: bool
    deadline_date: date | None = None
    duration_label: str
    legal_basis_label: str
    guidance_notes: list[str] = Field(default_factory=list)
    is_open_ended: bool = False
    days_remaining: int | None = None
    severity: Severity | None = None


class CalculationRecord(BaseModel):
    """One entry of the calculator history."""

    id: str = Field(default_factory=lambda: uuid.uuid4().hex[:12])
    calculated_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    category: DeadlineCategory
    reference_date: date
    delivered_by_mail: bool
    deadline_date: date | None = None
    legal_basis_label: str
