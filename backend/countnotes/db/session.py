"""Schema Bootstrap — creates tables outside of Alembic.

Invariants:
    - Uses the engine owned by DatabaseSessionManager
    - Meant for local SQLite files, test fixtures and first-run startup
"""

from sqlalchemy.ext.asyncio import AsyncEngine

from countnotes.db.base import Base
import countnotes.models  # noqa: F401


async def create_all(engine: AsyncEngine) -> None:
    """Create every table registered on Base.metadata (no-op if present)."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
