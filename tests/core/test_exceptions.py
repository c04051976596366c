"""Unit tests for domain exceptions."""

import pytest

from src.core.exceptions import (
    ConfigurationError,
    DatabaseError,
    FristenError,
    InvalidDateError,
    InvalidTransitionError,
    LifecycleError,
    NotificationError,
    ReminderNotFoundError,
    StorageError,
    ValidationError,
)


class TestFristenError:
    """Tests for base FristenError exception."""

    def test_basic_initialization(self):
        error = FristenError("Something went wrong")
        assert error.message == "Something went wrong"
        assert error.code == "FristenError"
        assert error.details == {}
        assert str(error) == "Something went wrong"

    def test_with_code_and_details(self):
        error = FristenError("Bad", code="BAD", details={"key": "value"})
        assert error.to_dict() == {
            "error": "BAD",
            "message": "Bad",
            "details": {"key": "value"},
        }

    def test_code_defaults_to_class_name(self):
        assert ConfigurationError("missing").code == "ConfigurationError"


class TestStorageErrors:
    def test_reminder_not_found(self):
        error = ReminderNotFoundError("abc")
        assert isinstance(error, StorageError)
        assert error.code == "REMINDER_NOT_FOUND"
        assert error.details["reminder_id"] == "abc"

    def test_database_error(self):
        error = DatabaseError("set", "disk I/O error")
        assert error.code == "DATABASE_ERROR"
        assert "set" in error.message
        assert error.details == {"operation": "set", "error": "disk I/O error"}


class TestLifecycleErrors:
    def test_invalid_transition(self):
        error = InvalidTransitionError("r1", "erledigt", "aktiv")
        assert isinstance(error, LifecycleError)
        assert error.code == "INVALID_TRANSITION"
        assert error.details == {"reminder_id": "r1", "current": "erledigt", "target": "aktiv"}
        assert "erledigt -> aktiv" in error.message


class TestInputErrors:
    def test_invalid_date(self):
        error = InvalidDateError("reference_date", "2025-13-45")
        assert error.code == "INVALID_DATE"
        assert error.details["value"] == "2025-13-45"

    def test_invalid_date_without_value(self):
        assert InvalidDateError("reference_date").details["value"] is None

    def test_validation_error_truncates_value(self):
        error = ValidationError("title", "too long", "x" * 500)
        assert error.code == "VALIDATION_ERROR"
        assert len(error.details["value"]) == 100


class TestNotificationError:
    def test_fields(self):
        error = NotificationError("webhook", "HTTP 500")
        assert error.code == "NOTIFICATION_FAILED"
        assert error.details == {"channel": "webhook", "reason": "HTTP 500"}


@pytest.mark.parametrize(
    "error",
    [
        ReminderNotFoundError("x"),
        InvalidTransitionError("x", "a", "b"),
        InvalidDateError("d"),
        ValidationError("f", "m"),
        NotificationError("c", "r"),
    ],
)
def test_all_errors_derive_from_base(error):
    assert isinstance(error, FristenError)
