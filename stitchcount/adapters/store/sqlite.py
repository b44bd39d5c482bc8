"""SQLite state store adapter.

Implements PersistencePort as a key-value table in SQLite, using
aiosqlite for async access. The counter record lives under a single
fixed key.
"""

import asyncio
import logging
from pathlib import Path

import aiosqlite

from stitchcount.core.models import CounterState
from stitchcount.core.ports import PersistencePort

from .record import decode_record, encode_record

logger = logging.getLogger(__name__)


class SQLiteStateStore(PersistencePort):
    """SQLite-backed key-value slot holding the counter record."""

    def __init__(self, db_path: str, key: str = "stitchCounter"):
        """Initialize SQLite store.

        Args:
            db_path: Path to SQLite database file. Parent directories are
                created if missing.
            key: Key of the slot holding the counter record.
        """
        self.db_path = Path(db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self.key = key
        self._conn: aiosqlite.Connection | None = None
        self._lock = asyncio.Lock()

    async def _get_connection(self) -> aiosqlite.Connection:
        """Open the connection and create the schema on first use."""
        if self._conn is None:
            conn = await aiosqlite.connect(str(self.db_path))
            await conn.execute(
                """
                CREATE TABLE IF NOT EXISTS kv_store (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL,
                    updated_at TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP
                )
                """
            )
            await conn.commit()
            self._conn = conn
        return self._conn

    async def close(self) -> None:
        """Close the connection if open."""
        async with self._lock:
            if self._conn is not None:
                await self._conn.close()
                self._conn = None

    async def load(self) -> CounterState | None:
        async with self._lock:
            conn = await self._get_connection()
            try:
                async with conn.execute(
                    "SELECT value FROM kv_store WHERE key = ?", (self.key,)
                ) as cursor:
                    row = await cursor.fetchone()
            except aiosqlite.OperationalError as e:
                # Raised for TEXT values that are not valid UTF-8.
                logger.warning(f"Stored record for {self.key!r} is unreadable, ignoring it: {e}")
                return None

        if row is None:
            return None
        return decode_record(row[0])

    async def save(self, state: CounterState) -> None:
        async with self._lock:
            conn = await self._get_connection()
            await conn.execute(
                """
                INSERT INTO kv_store (key, value, updated_at)
                VALUES (?, ?, CURRENT_TIMESTAMP)
                ON CONFLICT(key) DO UPDATE SET
                    value = excluded.value,
                    updated_at = excluded.updated_at
                """,
                (self.key, encode_record(state)),
            )
            await conn.commit()
