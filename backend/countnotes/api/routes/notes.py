"""Notes Routes — list, add, update and delete persisted notes.

Invariants:
    - Empty/over-length content -> 400 (ValidationFailure), nothing written
    - Unknown id on GET/PATCH -> 404; DELETE of an unknown id is 204 unless
      strict removal is configured
"""

from fastapi import APIRouter, Depends, Response, status

from countnotes.api.deps import get_notes
from countnotes.core.domain_types import ContainerState
from countnotes.core.result import unwrap
from countnotes.schemas.note import NoteCreate, NoteListResponse, NoteResponse, NoteUpdate
from countnotes.services.persisted_notes import PersistedNotes

router = APIRouter(prefix="/api/v1/notes", tags=["notes"])


@router.get("", response_model=NoteListResponse)
async def list_notes(notes: PersistedNotes = Depends(get_notes)):
    if notes.state == ContainerState.READY:
        return NoteListResponse.from_notes(notes.notes)
    return NoteListResponse.from_notes(unwrap(await notes.load_all()))


@router.post(
    "", response_model=NoteResponse, status_code=status.HTTP_201_CREATED,
)
async def add_note(body: NoteCreate, notes: PersistedNotes = Depends(get_notes)):
    return NoteResponse.from_note(unwrap(await notes.add(body.content)))


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
async def clear_notes(notes: PersistedNotes = Depends(get_notes)):
    unwrap(await notes.clear())
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{note_id}", response_model=NoteResponse)
async def get_note(note_id: str, notes: PersistedNotes = Depends(get_notes)):
    return NoteResponse.from_note(unwrap(await notes.get_by_id(note_id)))


@router.patch("/{note_id}", response_model=NoteResponse)
async def update_note(
    note_id: str, body: NoteUpdate, notes: PersistedNotes = Depends(get_notes),
):
    return NoteResponse.from_note(
        unwrap(await notes.update_content(note_id, body.content)),
    )


@router.delete("/{note_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_note(note_id: str, notes: PersistedNotes = Depends(get_notes)):
    unwrap(await notes.remove_by_id(note_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
