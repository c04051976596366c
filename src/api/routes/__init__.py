"""API route modules."""

from src.api.routes.calendar import router as calendar_router
from src.api.routes.deadlines import router as deadlines_router
from src.api.routes.health import router as health_router
from src.api.routes.notifications import router as notifications_router
from src.api.routes.reminders import router as reminders_router

__all__ = [
    "health_router",
    "deadlines_router",
    "reminders_router",
    "calendar_router",
    "notifications_router",
]
