"""Note Entity — immutable note record plus validating factories.

Invariants:
    - content is trimmed and never empty after validation
    - content length <= max_length when a limit is configured
    - with_content() keeps id and created_at
    - Factories return Result; nothing here raises on bad input

Design Decisions:
    - Plain frozen dataclass, serialization lives in codec.py
    - id_factory and clock injected so tests get deterministic notes
"""

from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import Callable
from uuid import uuid4

from countnotes.core.domain_types import NoteId, NOTE_MAX_LENGTH
from countnotes.core.errors import ValidationFailure
from countnotes.core.result import Err, Ok, Result

IdFactory = Callable[[], str]
Clock = Callable[[], datetime]

SEED_CONTENTS = (
    "Welcome to Counter Notes App!",
    "Notes are saved locally and survive restarts",
)


@dataclass(frozen=True)
class Note:
    id: NoteId
    content: str
    created_at: datetime


def new_note_id() -> str:
    return uuid4().hex


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def validate_content(
    raw: str, max_length: int | None = NOTE_MAX_LENGTH,
) -> Result[str]:
    """Trim and check content. Returns the trimmed text on success."""
    if not isinstance(raw, str):
        return Err(ValidationFailure("Note content must be a string", field="content"))
    text = raw.strip()
    if not text:
        return Err(ValidationFailure("Note content cannot be empty", field="content"))
    if max_length is not None and len(text) > max_length:
        return Err(ValidationFailure(
            f"Note content cannot exceed {max_length} characters",
            field="content",
        ))
    return Ok(text)


def create_note(
    content: str,
    note_id: str,
    created_at: datetime,
    max_length: int | None = NOTE_MAX_LENGTH,
) -> Result[Note]:
    """Validating factory for a new note."""
    checked = validate_content(content, max_length)
    if isinstance(checked, Err):
        return checked
    return Ok(Note(id=NoteId(note_id), content=checked.value, created_at=created_at))


def with_content(
    note: Note, new_content: str, max_length: int | None = NOTE_MAX_LENGTH,
) -> Result[Note]:
    """Return a copy with new content; identity and timestamp preserved."""
    checked = validate_content(new_content, max_length)
    if isinstance(checked, Err):
        return checked
    return Ok(replace(note, content=checked.value))


def seed_notes(clock: Clock = utc_now) -> tuple[Note, ...]:
    """Default notes shown on first run when seeding is enabled."""
    now = clock()
    return tuple(
        Note(id=NoteId(str(i)), content=text, created_at=now)
        for i, text in enumerate(SEED_CONTENTS, start=1)
    )
