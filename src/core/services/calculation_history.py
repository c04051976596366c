"""Recent deadline calculations, newest first."""

import json

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from src.config import get_logger
from src.core.entities.deadline import CalculationRecord, DeadlineResult
from src.core.interfaces.clock import IClock
from src.core.interfaces.storage import IKeyValueStore

logger = get_logger(__name__)

DEFAULT_HISTORY_KEY = "bescheidboxer_rechner_verlauf"

_records_adapter = TypeAdapter(list[CalculationRecord])


class CalculationHistory:
    """Keeps the last ``limit`` calculator results under their own key."""

    def __init__(
        self,
        kv_store: IKeyValueStore,
        clock: IClock,
        storage_key: str = DEFAULT_HISTORY_KEY,
        limit: int = 50,
    ) -> None:
        self._kv = kv_store
        self._clock = clock
        self._key = storage_key
        self._limit = limit

    async def entries(self) -> list[CalculationRecord]:
        """Stored entries; unreadable history reads as empty."""
        try:
            raw = await self._kv.get(self._key)
        except Exception:
            logger.warning("history_read_failed", key=self._key, exc_info=True)
            return []
        if not raw:
            return []
        try:
            return _records_adapter.validate_json(raw)
        except PydanticValidationError:
            logger.warning("history_payload_malformed", key=self._key)
            return []

    async def record(self, result: DeadlineResult) -> CalculationRecord:
        """Prepend a result and trim the history to the limit."""
        entry = CalculationRecord(
            calculated_at=self._clock.now(),
            category=result.category,
            reference_date=result.reference_date,
            delivered_by_mail=result.delivered_by_mail,
            deadline_date=result.deadline_date,
            legal_basis_label=result.legal_basis_label,
        )
        entries = [entry, *await self.entries()][: self._limit]
        payload = json.dumps([e.model_dump(mode="json") for e in entries])
        try:
            await self._kv.set(self._key, payload)
        except Exception:
            logger.error("history_persist_failed", key=self._key, exc_info=True)
        return entry
