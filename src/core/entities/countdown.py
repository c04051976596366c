"""Countdown badge derived from the distance to a deadline."""

from enum import Enum

from pydantic import BaseModel


class Severity(str, Enum):
    """Urgency of a deadline, derived and never persisted."""

    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    NORMAL = "normal"


class Countdown(BaseModel):
    """Days left until a deadline plus its urgency label."""

    days: int
    severity: Severity
    text: str

    @property
    def is_overdue(self) -> bool:
        return self.days < 0

    @property
    def is_due_today(self) -> bool:
        return self.days == 0
