"""Durable key-value storage."""

from pathlib import Path

import aiosqlite

from ..errors import PersistenceError
from .engine import get_db_path


class KeyValueStore:
    """String blobs addressed by key, stored in SQLite."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def get(self, key: str) -> str | None:
        """Get the value stored under a key."""
        try:
            async with aiosqlite.connect(self.db_path) as db:
                cursor = await db.execute(
                    "SELECT value FROM kv_store WHERE key = ?", (key,)
                )
                row = await cursor.fetchone()
        except aiosqlite.Error as e:
            raise PersistenceError("get", str(e)) from e

        if row is None:
            return None
        return row[0]

    async def set(self, key: str, value: str) -> None:
        """Store a value, replacing any previous one."""
        try:
            async with aiosqlite.connect(self.db_path) as db:
                await db.execute(
                    """
                    INSERT INTO kv_store (key, value) VALUES (?, ?)
                    ON CONFLICT(key) DO UPDATE SET
                        value = excluded.value,
                        updated_at = CURRENT_TIMESTAMP
                    """,
                    (key, value),
                )
                await db.commit()
        except aiosqlite.Error as e:
            raise PersistenceError("set", str(e)) from e

    async def delete(self, key: str) -> None:
        """Remove a key. Missing keys are ignored."""
        try:
            async with aiosqlite.connect(self.db_path) as db:
                await db.execute("DELETE FROM kv_store WHERE key = ?", (key,))
                await db.commit()
        except aiosqlite.Error as e:
            raise PersistenceError("delete", str(e)) from e
