"""Fixtures for API tests: the real app wired to in-memory services."""

from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient

from src.api.dependencies import (
    get_app_clock,
    get_calculator,
    get_calendar,
    get_create_reminder_from_deadline_use_case,
    get_dispatch_use_case,
    get_history,
    get_rem_store,
)
from src.api.main import app
from src.application.use_cases import (
    CreateReminderFromDeadlineUseCase,
    DispatchDueNotificationsUseCase,
)
from src.core.services import (
    CalculationHistory,
    CalendarAggregator,
    DeadlineCalculator,
    NotificationDispatcher,
)
from src.infrastructure.notifications.log_notifier import LogNotifier


@pytest.fixture
def notifier() -> LogNotifier:
    return LogNotifier()


@pytest.fixture
def history(kv_store, clock) -> CalculationHistory:
    return CalculationHistory(kv_store, clock)


@pytest.fixture
async def client(
    reminder_store, history, notifier, clock
) -> AsyncGenerator[AsyncClient, None]:
    """Async client with every service dependency overridden."""
    calculator = DeadlineCalculator(clock)
    calendar = CalendarAggregator()
    dispatcher = NotificationDispatcher(notifier)

    async def _store():
        await reminder_store.reconcile()
        return reminder_store

    app.dependency_overrides.update(
        {
            get_rem_store: _store,
            get_app_clock: lambda: clock,
            get_calculator: lambda: calculator,
            get_history: lambda: history,
            get_calendar: lambda: calendar,
            get_create_reminder_from_deadline_use_case: lambda: CreateReminderFromDeadlineUseCase(
                calculator=calculator, reminder_store=reminder_store, history=history
            ),
            get_dispatch_use_case: lambda: DispatchDueNotificationsUseCase(
                reminder_store=reminder_store, dispatcher=dispatcher, clock=clock
            ),
        }
    )
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
