"""
Domain exceptions for the deadline and reminder engine.

Every error carries a machine-readable code and a details dict so the API
layer can render it without knowing the concrete type.
"""

from typing import Any


class FristenError(Exception):
    """Base exception for all engine errors."""

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


# Storage Exceptions
class StorageError(FristenError):
    """Base exception for storage operations."""

    pass


class ReminderNotFoundError(StorageError):
    """Reminder not found in the collection."""

    def __init__(self, reminder_id: str):
        super().__init__(
            f"Reminder not found: {reminder_id}",
            code="REMINDER_NOT_FOUND",
            details={"reminder_id": reminder_id},
        )


class DatabaseError(StorageError):
    """Database operation failed."""

    def __init__(self, operation: str, error: str):
        super().__init__(
            f"Database error during {operation}: {error}",
            code="DATABASE_ERROR",
            details={"operation": operation, "error": error},
        )


# Lifecycle Exceptions
class LifecycleError(FristenError):
    """Base exception for reminder lifecycle operations."""

    pass


class InvalidTransitionError(LifecycleError):
    """Requested status change is not a defined transition."""

    def __init__(self, reminder_id: str, current: str, target: str):
        super().__init__(
            f"Transition {current} -> {target} is not allowed for reminder {reminder_id}",
            code="INVALID_TRANSITION",
            details={"reminder_id": reminder_id, "current": current, "target": target},
        )


# Date Exceptions
class InvalidDateError(FristenError):
    """A date value is missing or cannot be parsed."""

    def __init__(self, field: str, value: Any = None):
        super().__init__(
            f"Invalid date for '{field}': {value!r}",
            code="INVALID_DATE",
            details={"field": field, "value": str(value)[:50] if value else None},
        )


# Validation Exceptions
class ValidationError(FristenError):
    """Input validation failed."""

    def __init__(self, field: str, message: str, value: Any = None):
        super().__init__(
            f"Validation error for '{field}': {message}",
            code="VALIDATION_ERROR",
            details={
                "field": field,
                "message": message,
                "value": str(value)[:100] if value else None,
            },
        )


# Notification Exceptions
class NotificationError(FristenError):
    """Platform notification could not be delivered."""

    def __init__(self, channel: str, reason: str):
        super().__init__(
            f"Notification via {channel} failed: {reason}",
            code="NOTIFICATION_FAILED",
            details={"channel": channel, "reason": reason},
        )


class ConfigurationError(FristenError):
    """Configuration error."""

    pass
