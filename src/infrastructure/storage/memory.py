"""In-process key-value store."""

from src.core.interfaces.storage import IKeyValueStore


class InMemoryKeyValueStore(IKeyValueStore):
    """Dict-backed store; contents are lost when the process exits."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._data: dict[str, str] = dict(initial or {})

    async def get(self, key: str) -> str | None:
        return self._data.get(key)

    async def set(self, key: str, value: str) -> None:
        self._data[key] = value

    async def delete(self, key: str) -> bool:
        return self._data.pop(key, None) is not None
