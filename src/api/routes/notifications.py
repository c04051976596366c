"""
Notification dispatch endpoints.
"""

from fastapi import APIRouter, Depends

from src.api.dependencies import get_dispatch_use_case
from src.application.dto.requests import DispatchNotificationsRequest
from src.application.dto.responses import DispatchReportResponse
from src.application.use_cases import DispatchDueNotificationsUseCase

router = APIRouter(prefix="/api/notifications", tags=["notifications"])


@router.post(
    "/dispatch",
    response_model=DispatchReportResponse,
)
async def dispatch_notifications(
    request: DispatchNotificationsRequest | None = None,
    use_case: DispatchDueNotificationsUseCase = Depends(get_dispatch_use_case),
) -> DispatchReportResponse:
    """
    Notify every active reminder whose trigger date has arrived.

    Repeats are governed by the configured policy (per session or per day).
    """
    today = request.today if request else None
    report = await use_case.execute(today=today)
    return DispatchReportResponse(
        permission=report.permission.value,
        attempted=report.attempted,
        delivered=report.delivered,
        failed=report.failed,
        skipped=report.skipped,
    )
