"""
Deadline calculator endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from src.api.dependencies import (
    get_app_clock,
    get_calculator,
    get_create_reminder_from_deadline_use_case,
    get_history,
)
from src.application.dto.requests import ComputeDeadlineRequest, DeadlineReminderRequest
from src.application.dto.responses import (
    CalculationHistoryResponse,
    CalculationRecordResponse,
    DeadlineReminderResponse,
    DeadlineResponse,
    ErrorResponse,
    ReminderResponse,
)
from src.application.use_cases import CreateReminderFromDeadlineUseCase
from src.core.interfaces import IClock
from src.core.services import CalculationHistory, DeadlineCalculator, countdown

router = APIRouter(prefix="/api/deadlines", tags=["deadlines"])


@router.post(
    "/compute",
    response_model=DeadlineResponse,
    responses={422: {"model": ErrorResponse}},
)
async def compute_deadline(
    request: ComputeDeadlineRequest,
    calculator: DeadlineCalculator = Depends(get_calculator),
    history: CalculationHistory = Depends(get_history),
) -> DeadlineResponse:
    """
    Compute the end of a statutory period.

    A missing or unparseable notice date yields 422 and no result.
    """
    result = calculator.compute(
        request.reference_date, request.category, request.delivered_by_mail
    )
    if result is None:
        raise HTTPException(
            status_code=422,
            detail=f"Cannot compute a deadline for reference date {request.reference_date!r}",
        )

    await history.record(result)
    return DeadlineResponse.from_result(result)


@router.post(
    "/reminder",
    response_model=DeadlineReminderResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
async def create_deadline_reminder(
    request: DeadlineReminderRequest,
    use_case: CreateReminderFromDeadlineUseCase = Depends(
        get_create_reminder_from_deadline_use_case
    ),
    clock: IClock = Depends(get_app_clock),
) -> DeadlineReminderResponse:
    """Compute a deadline and create a pre-filled reminder for it."""
    result = await use_case.execute(
        reference_date=request.reference_date,
        category=request.category,
        delivered_by_mail=request.delivered_by_mail,
        case_reference=request.case_reference,
        priority=request.priority,
        lead_days=request.lead_days,
    )
    return DeadlineReminderResponse(
        deadline=DeadlineResponse.from_result(result.deadline),
        reminder=ReminderResponse.from_entity(
            result.reminder,
            countdown(result.reminder.deadline_date, clock.today()),
        ),
    )


@router.get(
    "/history",
    response_model=CalculationHistoryResponse,
)
async def calculation_history(
    history: CalculationHistory = Depends(get_history),
) -> CalculationHistoryResponse:
    """Recent calculations, newest first."""
    entries = await history.entries()
    return CalculationHistoryResponse(
        entries=[CalculationRecordResponse.from_entity(e) for e in entries],
        total=len(entries),
    )
