"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Every option has a working default; nothing is required to start locally
    - get_settings() is cached (lru_cache), one instance per process
    - Container policies (decrement, insert position, seeding) are fixed at startup

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
"""

from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache

from countnotes.core.domain_types import (
    COUNTER_KEY, NOTES_KEY, NOTE_MAX_LENGTH, DecrementPolicy, InsertPosition,
)


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Storage
    storage_backend: Literal["sql", "memory"] = "sql"
    database_url: str = "sqlite+aiosqlite:///./countnotes.db"

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosted providers hand out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 5
    database_max_overflow: int = 5
    database_create_tables: bool = True
    storage_timeout_seconds: float | None = 5.0

    # Keys
    counter_key: str = COUNTER_KEY
    notes_key: str = NOTES_KEY

    # Counter
    decrement_policy: DecrementPolicy = DecrementPolicy.UNBOUNDED

    # Notes
    seed_on_empty: bool = False
    insert_position: InsertPosition = InsertPosition.APPEND
    note_max_length: int | None = NOTE_MAX_LENGTH
    strict_remove: bool = False

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
