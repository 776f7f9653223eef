"""API test fixtures — FastAPI app wired to an in-memory backend.

Invariants:
    - ASGITransport does not run the lifespan; attach_state() wires app.state directly
    - Every test gets a fresh backend and fresh containers
"""

import pytest
from httpx import ASGITransport, AsyncClient

from countnotes.config import Settings
from countnotes.main import app, attach_state


@pytest.fixture
def settings() -> Settings:
    return Settings(storage_backend="memory", storage_timeout_seconds=None)


@pytest.fixture
async def client(backend, settings):
    attach_state(app, backend, settings)
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
