"""Notification permission states and dispatch results."""

from enum import Enum

from pydantic import BaseModel, Field


class NotificationPermission(str, Enum):
    """Permission state reported by the host platform."""

    GRANTED = "granted"
    DENIED = "denied"
    DEFAULT = "default"


class DispatchPolicy(str, Enum):
    """How often the same reminder may be announced."""

    PER_SESSION = "per_session"
    PER_DAY = "per_day"


class DispatchReport(BaseModel):
    """Outcome of one dispatch run."""

    permission: NotificationPermission
    attempted: int = 0
    delivered: list[str] = Field(default_factory=list)
    failed: list[str] = Field(default_factory=list)
    skipped: list[str] = Field(default_factory=list)
