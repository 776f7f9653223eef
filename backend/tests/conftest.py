"""Root conftest — shared test configuration and fake backends."""

import asyncio
import os

import pytest

from countnotes.infrastructure.memory_backend import InMemoryBackend

# Tests never touch a real database file unless they ask for one
os.environ.setdefault("STORAGE_BACKEND", "memory")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_FORMAT", "text")


class FlakyBackend(InMemoryBackend):
    """InMemoryBackend with switchable failures, delays and a write log."""

    def __init__(self, initial: dict[str, str] | None = None):
        super().__init__(initial)
        self.fail_reads = False
        self.fail_writes = False
        self.delay_seconds = 0.0
        self.reads: list[str] = []
        self.writes: list[tuple[str, str]] = []

    async def read_string(self, key: str) -> str | None:
        self.reads.append(key)
        if self.delay_seconds:
            await asyncio.sleep(self.delay_seconds)
        if self.fail_reads:
            raise PermissionError("permission denied")
        return await super().read_string(key)

    async def write_string(self, key: str, value: str) -> None:
        if self.delay_seconds:
            await asyncio.sleep(self.delay_seconds)
        if self.fail_writes:
            raise OSError("disk full")
        self.writes.append((key, value))
        await super().write_string(key, value)


@pytest.fixture
def backend() -> FlakyBackend:
    return FlakyBackend()


@pytest.fixture
def make_backend():
    """Factory for a FlakyBackend pre-filled with stored entries."""
    return FlakyBackend
