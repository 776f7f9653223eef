"""Note Schemas — Pydantic models for the notes endpoints.

Invariants:
    - NoteCreate/NoteUpdate only check the type and a hard upper bound;
      trimming and the configured length limit are enforced by the domain
    - NoteResponse mirrors the Note entity
"""

from datetime import datetime

from pydantic import BaseModel, Field

from countnotes.core.note import Note


class NoteCreate(BaseModel):
    content: str = Field(max_length=10_000)


class NoteUpdate(BaseModel):
    content: str = Field(max_length=10_000)


class NoteResponse(BaseModel):
    id: str
    content: str
    created_at: datetime

    @classmethod
    def from_note(cls, note: Note) -> "NoteResponse":
        return cls(id=note.id, content=note.content, created_at=note.created_at)


class NoteListResponse(BaseModel):
    notes: list[NoteResponse]
    count: int

    @classmethod
    def from_notes(cls, notes: tuple[Note, ...]) -> "NoteListResponse":
        return cls(
            notes=[NoteResponse.from_note(n) for n in notes], count=len(notes),
        )
