"""
Health check endpoints.
"""

import time

from fastapi import APIRouter

from src.application.dto.responses import HealthResponse
from src.application.services import get_reminder_store
from src.config import get_logger, get_settings

logger = get_logger(__name__)

router = APIRouter(prefix="/api/health", tags=["health"])

# Track startup time
_start_time = time.time()


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Service status, uptime and configured backends.

    Reports "degraded" when the reminder collection cannot be read.
    """
    settings = get_settings()
    status = "healthy"
    loaded: int | None = None

    try:
        loaded = len(await get_reminder_store().all())
    except Exception as e:
        logger.warning("health_store_check_failed", error=str(e))
        status = "degraded"

    return HealthResponse(
        status=status,
        version=settings.app_version,
        uptime_seconds=time.time() - _start_time,
        storage_backend=settings.storage.backend,
        notification_backend=settings.notifications.backend,
        reminders_loaded=loaded,
    )
