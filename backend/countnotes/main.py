"""CountNotes API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map CountNotesError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Backend and containers built once in the lifespan and passed explicitly

Design Decisions:
    - Lifespan over @app.on_event
    - storage_backend=memory skips the database entirely
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from countnotes.api.error_handlers import register_error_handlers
from countnotes.api.routes import counter, health, notes
from countnotes.config import Settings, get_settings
from countnotes.core.repository_protocols import KeyValueBackend
from countnotes.db.session import create_all
from countnotes.infrastructure.database import init_db
from countnotes.infrastructure.memory_backend import InMemoryBackend
from countnotes.infrastructure.observability import setup_logging
from countnotes.infrastructure.sql_backend import SqlKeyValueBackend
from countnotes.services.persisted_counter import PersistedCounter
from countnotes.services.persisted_notes import PersistedNotes

logger = logging.getLogger(__name__)


def build_counter(backend: KeyValueBackend, settings: Settings) -> PersistedCounter:
    return PersistedCounter(
        backend,
        key=settings.counter_key,
        decrement_policy=settings.decrement_policy,
        timeout_seconds=settings.storage_timeout_seconds,
    )


def build_notes(backend: KeyValueBackend, settings: Settings) -> PersistedNotes:
    return PersistedNotes(
        backend,
        key=settings.notes_key,
        seed_on_empty=settings.seed_on_empty,
        insert_position=settings.insert_position,
        max_length=settings.note_max_length,
        strict_remove=settings.strict_remove,
        timeout_seconds=settings.storage_timeout_seconds,
    )


def attach_state(app: FastAPI, backend: KeyValueBackend, settings: Settings) -> None:
    """Store backend and containers on app.state for the route dependencies."""
    app.state.backend = backend
    app.state.counter = build_counter(backend, settings)
    app.state.notes = build_notes(backend, settings)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = None
    if settings.storage_backend == "memory":
        backend: KeyValueBackend = InMemoryBackend()
    else:
        manager = init_db(
            settings.database_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
        )
        if settings.database_create_tables:
            await create_all(manager.engine)
        backend = SqlKeyValueBackend(manager)
    attach_state(app, backend, settings)
    logger.info(f"CountNotes API started ({settings.storage_backend} storage)")
    yield
    if manager is not None:
        await manager.dispose()
    logger.info("CountNotes API shutting down")


app = FastAPI(
    title="CountNotes API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(counter.router)
app.include_router(notes.router)

register_error_handlers(app)
