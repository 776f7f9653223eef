"""Boundary Protocols — contract between the containers and the storage shell.

Invariants:
    - Core NEVER imports from services/, infrastructure/ or api/
    - The key-value store is reached only through KeyValueBackend
    - Implementations are provided by the host and passed in explicitly
    - Implementations raise on failure; they never swallow errors

Design Decisions:
    - Protocol over ABC: structural subtyping, adapters need no base class
    - Async methods: every implementation may do IO
"""

from typing import Protocol


class KeyValueBackend(Protocol):
    """String key-value store supplied by the hosting environment."""
    async def read_string(self, key: str) -> str | None: ...
    async def write_string(self, key: str, value: str) -> None: ...
    async def remove(self, key: str) -> None: ...
    async def read_int(self, key: str) -> int | None: ...
    async def write_int(self, key: str, value: int) -> None: ...
