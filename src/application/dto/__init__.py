"""Request and response DTOs."""

from src.application.dto.requests import (
    ComputeDeadlineRequest,
    CreateReminderRequest,
    DeadlineReminderRequest,
    DispatchNotificationsRequest,
    SetStatusRequest,
    UpdateReminderRequest,
)
from src.application.dto.responses import (
    CalculationHistoryResponse,
    CalculationRecordResponse,
    CalendarMonthResponse,
    CountdownResponse,
    DeadlineReminderResponse,
    DeadlineResponse,
    DispatchReportResponse,
    ErrorResponse,
    HealthResponse,
    NextOccurrenceResponse,
    ReminderListResponse,
    ReminderResponse,
    ReminderSummaryResponse,
)

__all__ = [
    # Requests
    "ComputeDeadlineRequest",
    "DeadlineReminderRequest",
    "CreateReminderRequest",
    "UpdateReminderRequest",
    "SetStatusRequest",
    "DispatchNotificationsRequest",
    # Responses
    "DeadlineResponse",
    "CalculationRecordResponse",
    "CalculationHistoryResponse",
    "CountdownResponse",
    "ReminderResponse",
    "ReminderListResponse",
    "DeadlineReminderResponse",
    "NextOccurrenceResponse",
    "CalendarMonthResponse",
    "ReminderSummaryResponse",
    "DispatchReportResponse",
    "HealthResponse",
    "ErrorResponse",
]
