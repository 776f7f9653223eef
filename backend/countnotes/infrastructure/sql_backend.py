"""SQL Key-Value Backend — KeyValueBackend over the kv_entries table.

Invariants:
    - One row per key; write_string upserts, remove deletes (missing key is fine)
    - Every call runs in its own short session and commits before returning
    - Failures raise DatabaseError (via DatabaseSessionManager) or ValueError
      for a non-integer read_int; callers map them to StorageFailure
"""

import logging

from sqlalchemy import delete

from countnotes.infrastructure.database import DatabaseSessionManager
from countnotes.models.kv_entry import KeyValueEntry

logger = logging.getLogger(__name__)


class SqlKeyValueBackend:
    """Stores each key as a KeyValueEntry row."""

    def __init__(self, manager: DatabaseSessionManager):
        self._manager = manager

    async def read_string(self, key: str) -> str | None:
        async with self._manager.session() as db:
            entry = await db.get(KeyValueEntry, key)
            return entry.value if entry else None

    async def write_string(self, key: str, value: str) -> None:
        async with self._manager.session() as db:
            entry = await db.get(KeyValueEntry, key)
            if entry is None:
                db.add(KeyValueEntry(key=key, value=value))
            else:
                entry.value = value
            await db.commit()
        logger.debug(f"Wrote {len(value)} chars", extra={"storage_key": key})

    async def remove(self, key: str) -> None:
        async with self._manager.session() as db:
            await db.execute(delete(KeyValueEntry).where(KeyValueEntry.key == key))
            await db.commit()

    async def read_int(self, key: str) -> int | None:
        raw = await self.read_string(key)
        return None if raw is None else int(raw)

    async def write_int(self, key: str, value: int) -> None:
        await self.write_string(key, str(value))
