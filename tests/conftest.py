"""Pytest configuration and fixtures."""

import os
from collections.abc import AsyncGenerator, Callable, Generator
from datetime import date

# Keep the test run off the on-disk database
os.environ.setdefault("STORAGE_BACKEND", "memory")
os.environ.setdefault("NOTIFY_BACKEND", "log")

import pytest  # noqa: E402

from src.config import reset_settings  # noqa: E402
from src.core.entities.reminder import (  # noqa: E402
    Priority,
    RecurrenceInterval,
    Reminder,
    ReminderCategory,
    ReminderStatus,
)
from src.infrastructure.clock import FixedClock  # noqa: E402
from src.infrastructure.storage.memory import InMemoryKeyValueStore  # noqa: E402

# Reference "today" used throughout the suite
TODAY = date(2025, 4, 10)


@pytest.fixture(autouse=True)
def _reset_singletons() -> Generator[None, None, None]:
    """Rebuild settings and service singletons for every test."""
    from src.application.services import reset_services
    from src.infrastructure.notifications import reset_notifier
    from src.infrastructure.storage import reset_kv_store

    reset_settings()
    reset_services()
    reset_kv_store()
    reset_notifier()
    yield
    reset_services()
    reset_kv_store()
    reset_notifier()


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def clock() -> FixedClock:
    """Clock pinned to the suite's reference date."""
    return FixedClock(TODAY)


@pytest.fixture
def kv_store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def make_reminder() -> Callable[..., Reminder]:
    """Factory for valid reminders; keyword arguments override defaults."""

    def _make(
        deadline: date = date(2025, 4, 20),
        lead_days: int = 3,
        status: ReminderStatus = ReminderStatus.AKTIV,
        priority: Priority = Priority.MITTEL,
        category: ReminderCategory = ReminderCategory.ABGABEFRIST,
        interval: RecurrenceInterval | None = None,
        **overrides,
    ) -> Reminder:
        from src.core.services.reminder_lifecycle import trigger_date_for

        data = {
            "title": "Unterlagen einreichen",
            "category": category,
            "deadline_date": deadline,
            "trigger_date": trigger_date_for(deadline, lead_days),
            "lead_days": lead_days,
            "priority": priority,
            "status": status,
            "is_recurring": interval is not None,
            "recurrence_interval": interval,
        }
        if status == ReminderStatus.ERLEDIGT:
            data["completed_at"] = FixedClock(TODAY).now()
        data.update(overrides)
        return Reminder(**data)

    return _make


@pytest.fixture
async def reminder_store(
    kv_store: InMemoryKeyValueStore, clock: FixedClock
) -> AsyncGenerator:
    """Loaded ReminderStore over an empty in-memory blob store."""
    from src.core.services.reminder_store import ReminderStore

    store = ReminderStore(kv_store=kv_store, clock=clock)
    await store.load()
    yield store
