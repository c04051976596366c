"""
Reminder store service.

Owns the canonical in-memory reminder collection and its round trip through
the key-value blob store. Every mutation is followed by an awaited persist;
every load is followed by a reconciliation pass.
"""

from __future__ import annotations

import json
from datetime import date
from typing import Literal

from pydantic import ValidationError as PydanticValidationError

from src.config import get_logger
from src.core.entities.reminder import (
    Priority,
    Reminder,
    ReminderCategory,
    ReminderDraft,
    ReminderPatch,
    ReminderStatus,
)
from src.core.interfaces.clock import IClock
from src.core.interfaces.storage import IKeyValueStore
from src.core.services.recurrence import next_occurrence
from src.core.services.reminder_lifecycle import ReminderLifecycle

logger = get_logger(__name__)

DEFAULT_STORAGE_KEY = "bescheidboxer_erinnerungen"

SortKey = Literal["deadline", "priority", "status"]


def decode_reminders(raw: str | None) -> list[Reminder]:
    """
    Parse the persisted JSON array.

    Fail-open: absent or malformed content yields an empty list, a single
    invalid element is skipped, duplicate ids keep the first occurrence.
    """
    if not raw:
        return []
    try:
        payload = json.loads(raw)
    except (TypeError, ValueError, RecursionError):
        logger.warning("reminders_payload_malformed")
        return []
    if not isinstance(payload, list):
        logger.warning("reminders_payload_not_a_list", kind=type(payload).__name__)
        return []

    reminders: list[Reminder] = []
    seen: set[str] = set()
    for index, element in enumerate(payload):
        if not isinstance(element, dict):
            logger.warning("reminder_element_skipped", index=index, reason="not an object")
            continue
        try:
            reminder = Reminder.from_storage(element)
        except PydanticValidationError as exc:
            logger.warning(
                "reminder_element_skipped",
                index=index,
                reason=str(exc.errors()[0].get("msg", "invalid")),
            )
            continue
        if reminder.id in seen:
            logger.warning("reminder_duplicate_id_skipped", reminder_id=reminder.id)
            continue
        seen.add(reminder.id)
        reminders.append(reminder)
    return reminders


def encode_reminders(reminders: list[Reminder]) -> str:
    """Serialize the collection to the persisted JSON array."""
    return json.dumps([r.to_storage() for r in reminders], ensure_ascii=False)


class ReminderStore:
    """
    Single owner of the reminder collection.

    Consumers get copies and issue commands (create, update, remove,
    set_status); nothing outside this class mutates the collection.
    """

    def __init__(
        self,
        kv_store: IKeyValueStore,
        clock: IClock,
        storage_key: str = DEFAULT_STORAGE_KEY,
        lifecycle: ReminderLifecycle | None = None,
    ) -> None:
        self._kv = kv_store
        self._clock = clock
        self._key = storage_key
        self._lifecycle = lifecycle or ReminderLifecycle(clock)
        self._reminders: list[Reminder] = []
        self._loaded = False

    @property
    def lifecycle(self) -> ReminderLifecycle:
        return self._lifecycle

    # Persistence

    async def load_all(self) -> list[Reminder]:
        """Read the raw collection from storage without reconciling."""
        try:
            raw = await self._kv.get(self._key)
        except Exception:
            logger.warning("reminders_read_failed", key=self._key, exc_info=True)
            return []
        return decode_reminders(raw)

    async def load(self) -> list[Reminder]:
        """
        Load the collection and run the reconciliation pass.

        Must complete before any derived view is computed.
        """
        self._reminders = await self.load_all()
        self._loaded = True
        changed = await self.reconcile()
        logger.info("reminders_loaded", total=len(self._reminders), reconciled=changed)
        return self._snapshot()

    async def persist(self) -> bool:
        """
        Write the whole collection back.

        Returns False if the write failed; the in-memory state is kept.
        """
        try:
            await self._kv.set(self._key, encode_reminders(self._reminders))
        except Exception:
            logger.error("reminders_persist_failed", key=self._key, exc_info=True)
            return False
        return True

    async def _ensure_loaded(self) -> None:
        if not self._loaded:
            await self.load()

    # Queries

    def _snapshot(self) -> list[Reminder]:
        return [r.model_copy() for r in self._reminders]

    def _index_of(self, reminder_id: str) -> int | None:
        for index, reminder in enumerate(self._reminders):
            if reminder.id == reminder_id:
                return index
        return None

    async def all(self) -> list[Reminder]:
        """Copy of the collection in storage order."""
        await self._ensure_loaded()
        return self._snapshot()

    async def get(self, reminder_id: str) -> Reminder | None:
        await self._ensure_loaded()
        index = self._index_of(reminder_id)
        if index is None:
            return None
        return self._reminders[index].model_copy()

    async def list_reminders(
        self,
        sort_by: SortKey = "deadline",
        category: ReminderCategory | None = None,
        status: ReminderStatus | None = None,
        priority: Priority | None = None,
    ) -> list[Reminder]:
        """List reminders with structured filters and a stable sort."""
        reminders = await self.all()
        if category is not None:
            reminders = [r for r in reminders if r.category == category]
        if status is not None:
            reminders = [r for r in reminders if r.status == status]
        if priority is not None:
            reminders = [r for r in reminders if r.priority == priority]

        if sort_by == "priority":
            reminders.sort(key=lambda r: r.priority.rank)
        elif sort_by == "status":
            reminders.sort(key=lambda r: r.status.rank)
        else:
            reminders.sort(key=lambda r: r.deadline_date)
        return reminders

    async def suggest_next_occurrence(self, reminder_id: str) -> date | None:
        """Suggested next deadline for a recurring reminder."""
        reminder = await self.get(reminder_id)
        if reminder is None or reminder.recurrence_interval is None:
            return None
        return next_occurrence(reminder.deadline_date, reminder.recurrence_interval)

    # Commands

    async def create(self, draft: ReminderDraft) -> Reminder:
        """Create and persist a new active reminder."""
        await self._ensure_loaded()
        reminder = self._lifecycle.build(draft)
        self._reminders.append(reminder)
        await self.persist()
        logger.info(
            "reminder_created",
            reminder_id=reminder.id,
            category=reminder.category.value,
            deadline_date=reminder.deadline_date.isoformat(),
        )
        return reminder.model_copy()

    async def update(self, reminder_id: str, patch: ReminderPatch) -> Reminder | None:
        """Apply an edit. Returns None (no-op) for an unknown id."""
        await self._ensure_loaded()
        index = self._index_of(reminder_id)
        if index is None:
            logger.info("reminder_update_unknown_id", reminder_id=reminder_id)
            return None
        updated = self._lifecycle.apply_patch(self._reminders[index], patch)
        self._reminders[index] = updated
        await self.persist()
        logger.info("reminder_updated", reminder_id=reminder_id)
        return updated.model_copy()

    async def remove(self, reminder_id: str) -> bool:
        """Delete a reminder. Idempotent; returns whether anything was removed."""
        await self._ensure_loaded()
        index = self._index_of(reminder_id)
        if index is None:
            return False
        del self._reminders[index]
        await self.persist()
        logger.info("reminder_deleted", reminder_id=reminder_id)
        return True

    async def set_status(
        self, reminder_id: str, status: ReminderStatus
    ) -> Reminder | None:
        """
        Apply a user-initiated status change.

        Returns None for an unknown id.

        Raises:
            InvalidTransitionError: If the transition is not defined; the
                reminder is left unchanged.
        """
        await self._ensure_loaded()
        index = self._index_of(reminder_id)
        if index is None:
            return None
        current = self._reminders[index]
        updated = self._lifecycle.transition(current, status)
        if updated is not current:
            self._reminders[index] = updated
            await self.persist()
            logger.info(
                "reminder_status_changed",
                reminder_id=reminder_id,
                previous=current.status.value,
                status=updated.status.value,
            )
        return updated.model_copy()

    async def mark_complete(self, reminder_id: str) -> Reminder | None:
        return await self.set_status(reminder_id, ReminderStatus.ERLEDIGT)

    async def toggle_mute(self, reminder_id: str) -> Reminder | None:
        """Flip aktiv <-> stummgeschaltet; missed and done reminders stay as they are."""
        await self._ensure_loaded()
        index = self._index_of(reminder_id)
        if index is None:
            return None
        current = self._reminders[index]
        updated = self._lifecycle.toggle_mute(current)
        if updated is not current:
            self._reminders[index] = updated
            await self.persist()
        return updated.model_copy()

    async def reconcile(self, today: date | None = None) -> int:
        """
        Mark overdue open reminders as missed and persist if anything changed.

        Returns the number of reminders that changed.
        """
        await self._ensure_loaded()
        today = today or self._clock.today()
        self._reminders, changed = self._lifecycle.reconcile(self._reminders, today)
        if changed:
            await self.persist()
            logger.info("reminders_reconciled", changed=changed, today=today.isoformat())
        return changed
