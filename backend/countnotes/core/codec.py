"""Serialization Codec — entity <-> plain JSON-compatible structures.

Invariants:
    - encode_* are total for well-formed entities
    - decode_* raise DecodeError on missing fields or wrong types; they never
      default silently (a numeric string is not a counter, a timestamp int
      is not a createdAt)
    - decode_notes rejects duplicate ids
    - decoded notes satisfy the Note invariants: non-empty id, trimmed
      non-blank content within the configured length limit
    - Nesting too deep to parse is a DecodeError, like any malformed JSON
    - Round-trip: decode_note(encode_note(n)) == n at microsecond precision
    - All functions are PURE: no IO, no async

Design Decisions:
    - pydantic records with strict scalar types do the structural checks;
      entities stay plain dataclasses
    - createdAt stored as datetime.isoformat(), parsed with datetime.fromisoformat
"""

import json
from datetime import datetime
from typing import Any, Iterable

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr
from pydantic import ValidationError, field_validator

from countnotes.core.counter_value import CounterValue
from countnotes.core.domain_types import NOTE_MAX_LENGTH, NoteId
from countnotes.core.errors import DecodeError
from countnotes.core.note import Note, validate_content
from countnotes.core.result import Err


class CounterRecord(BaseModel):
    """Stored shape of the counter: {"value": N}."""
    model_config = ConfigDict(extra="ignore")

    value: StrictInt


class NoteRecord(BaseModel):
    """Stored shape of one note: {"id", "content", "createdAt"}."""
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: StrictStr
    content: StrictStr
    created_at: datetime = Field(alias="createdAt")

    @field_validator("created_at", mode="before")
    @classmethod
    def parse_iso_timestamp(cls, v: Any) -> datetime:
        if not isinstance(v, str):
            raise ValueError("createdAt must be an ISO-8601 string")
        return datetime.fromisoformat(v)


def _decode_error(exc: ValidationError, what: str) -> DecodeError:
    first = exc.errors()[0]
    field = ".".join(str(loc) for loc in first["loc"]) or None
    return DecodeError(f"Invalid {what}: {field}: {first['msg']}", field=field)


# ─── Counter ─────────────────────────────────────────────────────

def encode_counter(counter: CounterValue) -> dict:
    return {"value": counter.value}


def decode_counter(plain: Any) -> CounterValue:
    if not isinstance(plain, dict):
        raise DecodeError("Counter must be an object with a 'value' field")
    try:
        record = CounterRecord.model_validate(plain)
    except ValidationError as e:
        raise _decode_error(e, "counter")
    return CounterValue(record.value)


def dumps_counter(counter: CounterValue) -> str:
    return json.dumps(encode_counter(counter))


def loads_counter(text: str) -> CounterValue:
    return decode_counter(_loads(text, "counter"))


# ─── Notes ───────────────────────────────────────────────────────

def encode_note(note: Note) -> dict:
    return {
        "id": note.id,
        "content": note.content,
        "createdAt": note.created_at.isoformat(),
    }


def decode_note(plain: Any, max_length: int | None = NOTE_MAX_LENGTH) -> Note:
    """Decode one note; the stored id and content must satisfy the Note invariants."""
    if not isinstance(plain, dict):
        raise DecodeError("Note must be an object")
    try:
        record = NoteRecord.model_validate(plain)
    except ValidationError as e:
        raise _decode_error(e, "note")
    if not record.id.strip():
        raise DecodeError("Note id cannot be empty", field="id")
    checked = validate_content(record.content, max_length)
    if isinstance(checked, Err):
        raise DecodeError(f"Invalid note: {checked.error.message}", field="content")
    return Note(
        id=NoteId(record.id), content=checked.value, created_at=record.created_at,
    )


def encode_notes(notes: Iterable[Note]) -> list[dict]:
    return [encode_note(n) for n in notes]


def decode_notes(
    plain: Any, max_length: int | None = NOTE_MAX_LENGTH,
) -> tuple[Note, ...]:
    """Decode a list of notes; ids must be unique."""
    if not isinstance(plain, list):
        raise DecodeError("Notes must be a JSON array")
    notes = tuple(decode_note(item, max_length) for item in plain)
    seen: set[str] = set()
    for note in notes:
        if note.id in seen:
            raise DecodeError(f"Duplicate note id '{note.id}'", field="id")
        seen.add(note.id)
    return notes


def dumps_notes(notes: Iterable[Note]) -> str:
    return json.dumps(encode_notes(notes), ensure_ascii=False)


def loads_notes(
    text: str, max_length: int | None = NOTE_MAX_LENGTH,
) -> tuple[Note, ...]:
    return decode_notes(_loads(text, "notes"), max_length)


def _loads(text: str, what: str) -> Any:
    try:
        return json.loads(text)
    except (TypeError, ValueError, RecursionError) as e:
        raise DecodeError(f"Stored {what} is not valid JSON: {e}")
