"""
FastAPI application factory.

Creates and configures the main application instance.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api.middleware import ErrorHandlerMiddleware, LoggingMiddleware
from src.api.middleware.error_handler import setup_exception_handlers
from src.api.routes import (
    calendar_router,
    deadlines_router,
    health_router,
    notifications_router,
    reminders_router,
)
from src.config import configure_logging, get_logger, get_settings

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Application lifespan handler.

    Loads and reconciles the reminder collection on startup, runs one
    notification pass, and closes the storage pool on shutdown.
    """
    settings = get_settings()

    logger.info(
        "application_starting",
        host=settings.api.host,
        port=settings.api.port,
        storage=settings.storage.backend,
        notifications=settings.notifications.backend,
    )

    from src.application.services import get_reminder_store
    from src.application.use_cases import DispatchDueNotificationsUseCase

    store = get_reminder_store()
    reminders = await store.load()
    logger.info("reminders_ready", total=len(reminders))

    # The first notification pass runs once the collection is reconciled
    try:
        await DispatchDueNotificationsUseCase(reminder_store=store).execute()
    except Exception as e:
        logger.warning("startup_dispatch_failed", error=str(e))

    logger.info("application_started")

    yield

    logger.info("application_stopping")

    if settings.storage.backend == "sqlite":
        try:
            from src.infrastructure.storage import close_pool

            await close_pool()
        except Exception as e:
            logger.warning("connection_pool_close_failed", error=str(e))

    logger.info("application_stopped")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()
    configure_logging()

    app = FastAPI(
        title="Fristen-Engine API",
        description="Statutory deadlines, reminders, calendar and notifications",
        version=settings.app_version,
        docs_url="/docs" if settings.api.debug else None,
        redoc_url="/redoc" if settings.api.debug else None,
        lifespan=lifespan,
    )

    # Add middleware
    app.add_middleware(LoggingMiddleware)
    app.add_middleware(ErrorHandlerMiddleware)

    # CORS
    if settings.api.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.api.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    # Setup exception handlers
    setup_exception_handlers(app)

    # Register routers
    app.include_router(health_router)
    app.include_router(deadlines_router)
    app.include_router(reminders_router)
    app.include_router(calendar_router)
    app.include_router(notifications_router)

    return app


# Create app instance
app = create_app()


@app.get("/")
async def root() -> dict[str, str]:
    """API info."""
    settings = get_settings()
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs",
    }


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()

    uvicorn.run(
        "src.api.main:app",
        host=settings.api.host,
        port=settings.api.port,
        reload=settings.api.debug,
    )
