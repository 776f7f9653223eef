"""Persisted Notes — write-through container for the ordered note collection.

Invariants:
    - Note ids are unique within the collection
    - Validation runs before any backend IO; a ValidationFailure never writes
    - Every structural mutation rewrites the whole entry (no diffs)
    - Absent or empty entry -> () or the 2-note seed set, per seed_on_empty;
      the seed is not written until the first mutation
    - A stored "[]" is an emptied collection and is never re-seeded
    - remove_by_id() on a missing id writes nothing
    - On a failed write the in-memory collection keeps the attempted mutation
      and the caller gets Err(StorageFailure)
    - One asyncio.Lock per collection

Design Decisions:
    - Insert position, seeding, length limit and strict removal are
      constructor options, fixed for the lifetime of the collection
    - id_factory/clock injected; default ids are uuid4 hex strings
"""

import asyncio
import logging

from countnotes.core.codec import dumps_notes, loads_notes
from countnotes.core.domain_types import (
    NOTES_KEY, NOTE_MAX_LENGTH, ContainerState, InsertPosition, NoteId,
)
from countnotes.core.errors import (
    DecodeError, ErrorContext, NotFoundFailure, StorageFailure, UnexpectedFailure,
)
from countnotes.core.note import (
    Clock, IdFactory, Note, create_note, new_note_id, seed_notes, utc_now,
    validate_content, with_content,
)
from countnotes.core.repository_protocols import KeyValueBackend
from countnotes.core.result import Err, Ok, Result, map_ok
from countnotes.services.storage_guard import guarded

logger = logging.getLogger(__name__)

_MAX_ID_ATTEMPTS = 8


class PersistedNotes:
    """Note collection mirrored to one backend key as a JSON array."""

    def __init__(
        self,
        backend: KeyValueBackend,
        key: str = NOTES_KEY,
        *,
        seed_on_empty: bool = False,
        insert_position: InsertPosition = InsertPosition.APPEND,
        max_length: int | None = NOTE_MAX_LENGTH,
        strict_remove: bool = False,
        id_factory: IdFactory = new_note_id,
        clock: Clock = utc_now,
        timeout_seconds: float | None = None,
    ):
        self._backend = backend
        self._key = key
        self._seed_on_empty = seed_on_empty
        self._insert_position = InsertPosition(insert_position)
        self._max_length = max_length
        self._strict_remove = strict_remove
        self._id_factory = id_factory
        self._clock = clock
        self._timeout = timeout_seconds
        self._notes: tuple[Note, ...] = ()
        self._state = ContainerState.UNINITIALIZED
        self._lock = asyncio.Lock()

    @property
    def notes(self) -> tuple[Note, ...]:
        return self._notes

    @property
    def state(self) -> ContainerState:
        return self._state

    async def load_all(self) -> Result[tuple[Note, ...]]:
        """Read and decode the stored collection."""
        async with self._lock:
            return await self._load_locked()

    async def get_by_id(self, note_id: str) -> Result[Note]:
        async with self._lock:
            loaded = await self._ensure_loaded()
            if isinstance(loaded, Err):
                return loaded
            index = self._index_of(note_id)
            if index is None:
                return Err(self._not_found(note_id))
            return Ok(self._notes[index])

    async def add(self, content: str) -> Result[Note]:
        """Validate, create and store a new note."""
        checked = validate_content(content, self._max_length)
        if isinstance(checked, Err):
            return checked
        async with self._lock:
            loaded = await self._ensure_loaded()
            if isinstance(loaded, Err):
                return loaded
            note_id = self._unique_id()
            if isinstance(note_id, Err):
                return note_id
            created = create_note(
                checked.value, note_id.value, self._clock(), self._max_length,
            )
            if isinstance(created, Err):
                return created
            note = created.value
            if self._insert_position == InsertPosition.PREPEND:
                updated = (note,) + self._notes
            else:
                updated = self._notes + (note,)
            committed = await self._commit(updated, "add", note.id)
            return map_ok(committed, lambda _: note)

    async def remove_by_id(self, note_id: str) -> Result[None]:
        async with self._lock:
            loaded = await self._ensure_loaded()
            if isinstance(loaded, Err):
                return loaded
            index = self._index_of(note_id)
            if index is None:
                if self._strict_remove:
                    return Err(self._not_found(note_id))
                logger.debug(
                    f"Note {note_id} not found, nothing removed",
                    extra={"storage_key": self._key, "note_id": note_id},
                )
                return Ok(None)
            updated = self._notes[:index] + self._notes[index + 1:]
            return await self._commit(updated, "remove", NoteId(note_id))

    async def clear(self) -> Result[None]:
        async with self._lock:
            return await self._commit((), "clear")

    async def update_content(self, note_id: str, new_content: str) -> Result[Note]:
        """Replace a note's content, keeping its id and created_at."""
        checked = validate_content(new_content, self._max_length)
        if isinstance(checked, Err):
            return checked
        async with self._lock:
            loaded = await self._ensure_loaded()
            if isinstance(loaded, Err):
                return loaded
            index = self._index_of(note_id)
            if index is None:
                return Err(self._not_found(note_id))
            changed = with_content(self._notes[index], checked.value, self._max_length)
            if isinstance(changed, Err):
                return changed
            note = changed.value
            updated = self._notes[:index] + (note,) + self._notes[index + 1:]
            committed = await self._commit(updated, "update", note.id)
            return map_ok(committed, lambda _: note)

    # ─── internals (caller holds the lock) ──────────────────────

    async def _ensure_loaded(self) -> Result[tuple[Note, ...]]:
        if self._state == ContainerState.READY:
            return Ok(self._notes)
        return await self._load_locked()

    async def _load_locked(self) -> Result[tuple[Note, ...]]:
        self._state = ContainerState.LOADING
        raw = await guarded(
            self._backend.read_string(self._key),
            operation="read", key=self._key, timeout_seconds=self._timeout,
        )
        if isinstance(raw, Err):
            self._state = ContainerState.UNINITIALIZED
            return raw
        if not raw.value:
            notes = seed_notes(self._clock) if self._seed_on_empty else ()
            logger.info(
                f"No notes stored, starting with {len(notes)} note(s)",
                extra={"storage_key": self._key, "operation": "load"},
            )
        else:
            try:
                notes = loads_notes(raw.value, self._max_length)
            except DecodeError as e:
                self._state = ContainerState.UNINITIALIZED
                logger.error(
                    f"Stored notes are corrupt: {e.message}",
                    extra={"storage_key": self._key, "error_code": e.code},
                )
                return Err(StorageFailure(
                    e.message, "decode", context=ErrorContext(storage_key=self._key),
                ))
            logger.info(
                f"Loaded {len(notes)} note(s)",
                extra={"storage_key": self._key, "operation": "load"},
            )
        self._notes = notes
        self._state = ContainerState.READY
        return Ok(notes)

    async def _commit(
        self, notes: tuple[Note, ...], operation: str, note_id: NoteId | None = None,
    ) -> Result[None]:
        self._notes = notes
        self._state = ContainerState.READY
        written = await guarded(
            self._backend.write_string(self._key, dumps_notes(notes)),
            operation="write", key=self._key, timeout_seconds=self._timeout,
        )
        if isinstance(written, Err):
            written.error.context.note_id = note_id
            return written
        logger.info(
            f"Notes {operation}: {len(notes)} note(s) stored",
            extra={"storage_key": self._key, "operation": operation, "note_id": note_id},
        )
        return Ok(None)

    def _index_of(self, note_id: str) -> int | None:
        for i, note in enumerate(self._notes):
            if note.id == note_id:
                return i
        return None

    def _unique_id(self) -> Result[str]:
        taken = {n.id for n in self._notes}
        for _ in range(_MAX_ID_ATTEMPTS):
            candidate = str(self._id_factory())
            if candidate and candidate not in taken:
                return Ok(candidate)
        return Err(UnexpectedFailure(
            f"Could not generate a unique note id after {_MAX_ID_ATTEMPTS} attempts",
            context=ErrorContext(storage_key=self._key),
        ))

    def _not_found(self, note_id: str) -> NotFoundFailure:
        return NotFoundFailure(
            "Note", note_id, context=ErrorContext(storage_key=self._key, note_id=note_id),
        )
