"""Fire-and-forget persistence of the session snapshot.

Writes are spawned as asyncio tasks on the running loop and never awaited by
the engine. A failed write is logged and dropped; the in-memory state stays
authoritative. Writes are applied in the order they were scheduled.
"""

import asyncio
import json
import logging

from ..db.store import KeyValueStore
from ..errors import PersistenceError

logger = logging.getLogger(__name__)

AUTH_STORAGE_KEY = "habitforge_auth_state_v1"


class SnapshotWriter:
    """Schedules snapshot writes to a key-value store."""

    def __init__(self, store: KeyValueStore, key: str = AUTH_STORAGE_KEY):
        self.store = store
        self.key = key
        self._pending: set[asyncio.Task] = set()
        self._lock = asyncio.Lock()

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    async def load(self) -> dict | None:
        """Read the stored snapshot, or None if missing or unreadable."""
        try:
            raw = await self.store.get(self.key)
        except PersistenceError as e:
            logger.error(f"Failed to restore session snapshot: {e}")
            return None

        if not raw:
            return None

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.error(f"Stored session snapshot is not valid JSON: {e}")
            return None

        return data if isinstance(data, dict) else None

    def schedule(self, snapshot: dict) -> asyncio.Task | None:
        """Queue a write of the snapshot and return immediately.

        The snapshot is serialized now, so later mutations do not leak into
        this write. Without a running event loop the write is logged and
        dropped.
        """
        payload = json.dumps(snapshot)
        return self._spawn(self._write(payload))

    def schedule_clear(self) -> asyncio.Task | None:
        """Queue removal of the stored snapshot."""
        return self._spawn(self._clear())

    async def flush(self) -> None:
        """Wait for every queued write to finish."""
        while self._pending:
            await asyncio.gather(*list(self._pending))

    def _spawn(self, coro) -> asyncio.Task | None:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            coro.close()
            logger.error("No running event loop, session snapshot not persisted")
            return None
        task = loop.create_task(coro)
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    async def _write(self, payload: str) -> None:
        async with self._lock:
            try:
                await self.store.set(self.key, payload)
            except PersistenceError as e:
                logger.error(f"Failed to persist session snapshot: {e}")

    async def _clear(self) -> None:
        async with self._lock:
            try:
                await self.store.delete(self.key)
            except PersistenceError as e:
                logger.error(f"Failed to clear session snapshot: {e}")
