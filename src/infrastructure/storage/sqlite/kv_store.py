"""
SQLite-backed key-value store.

One row per key; writes replace the whole value (last writer wins).
"""

import aiosqlite

from src.config import get_logger
from src.core.exceptions import DatabaseError
from src.core.interfaces.storage import IKeyValueStore
from src.infrastructure.storage.sqlite.connection import ConnectionPool, get_pool

logger = get_logger(__name__)


class SQLiteKeyValueStore(IKeyValueStore):
    """
    Key-value store on top of the aiosqlite connection pool.

    Pass a pool explicitly in tests; otherwise the global pool is used.
    """

    def __init__(self, pool: ConnectionPool | None = None):
        self._pool = pool

    async def _get_pool(self) -> ConnectionPool:
        if self._pool is None:
            self._pool = await get_pool()
        return self._pool

    async def get(self, key: str) -> str | None:
        pool = await self._get_pool()
        try:
            async with pool.acquire() as conn:
                cursor = await conn.execute(
                    "SELECT value FROM kv_store WHERE key = ?", (key,)
                )
                row = await cursor.fetchone()
        except aiosqlite.Error as e:
            raise DatabaseError("get", str(e)) from e
        return row["value"] if row else None

    async def set(self, key: str, value: str) -> None:
        pool = await self._get_pool()
        try:
            async with pool.transaction() as conn:
                await conn.execute(
                    """
                    INSERT INTO kv_store (key, value, updated_at)
                    VALUES (?, ?, datetime('now'))
                    ON CONFLICT(key) DO UPDATE SET
                        value = excluded.value,
                        updated_at = excluded.updated_at
                    """,
                    (key, value),
                )
        except aiosqlite.Error as e:
            raise DatabaseError("set", str(e)) from e
        logger.debug("kv_value_written", key=key, size=len(value))

    async def delete(self, key: str) -> bool:
        pool = await self._get_pool()
        try:
            async with pool.transaction() as conn:
                cursor = await conn.execute("DELETE FROM kv_store WHERE key = ?", (key,))
                removed = cursor.rowcount > 0
        except aiosqlite.Error as e:
            raise DatabaseError("delete", str(e)) from e
        return removed
