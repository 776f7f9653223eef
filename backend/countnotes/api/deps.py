"""Route Dependencies — hand the app-owned containers to route handlers.

Invariants:
    - Containers and backend are created once in the lifespan and stored on app.state
    - Routes never construct containers or backends themselves
"""

from fastapi import Request

from countnotes.core.repository_protocols import KeyValueBackend
from countnotes.services.persisted_counter import PersistedCounter
from countnotes.services.persisted_notes import PersistedNotes


def get_backend(request: Request) -> KeyValueBackend:
    return request.app.state.backend


def get_counter(request: Request) -> PersistedCounter:
    return request.app.state.counter


def get_notes(request: Request) -> PersistedNotes:
    return request.app.state.notes
