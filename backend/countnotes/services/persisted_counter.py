"""Persisted Counter — write-through container for the single counter value.

Invariants:
    - State: UNINITIALIZED -> LOADING -> READY; READY is never left
    - load() on an absent key yields 0 and writes nothing
    - Every mutation writes {"value": N} before it reports success
    - On a failed write the in-memory value keeps the attempted mutation
      and the caller gets Err(StorageFailure)
    - A mutation on an uninitialized cell loads first; a failed load aborts it
    - One asyncio.Lock per cell: read-modify-write sequences never interleave

Design Decisions:
    - Decrement policy fixed per cell (UNBOUNDED or CLAMP_AT_ZERO)
    - load() surfaces failures; load_or_default() is the explicit
      swallow-and-default path for callers that want it
"""

import asyncio
import logging
from typing import Callable

from countnotes.core.codec import dumps_counter, loads_counter
from countnotes.core.counter_value import (
    ZERO, CounterValue, decremented, incremented, make_counter,
)
from countnotes.core.domain_types import COUNTER_KEY, ContainerState, DecrementPolicy
from countnotes.core.errors import DecodeError, ErrorContext, StorageFailure
from countnotes.core.repository_protocols import KeyValueBackend
from countnotes.core.result import Err, Ok, Result, is_ok
from countnotes.services.storage_guard import guarded

logger = logging.getLogger(__name__)


class PersistedCounter:
    """Counter cell mirrored to one backend key."""

    def __init__(
        self,
        backend: KeyValueBackend,
        key: str = COUNTER_KEY,
        decrement_policy: DecrementPolicy = DecrementPolicy.UNBOUNDED,
        timeout_seconds: float | None = None,
    ):
        self._backend = backend
        self._key = key
        self._policy = DecrementPolicy(decrement_policy)
        self._timeout = timeout_seconds
        self._value = ZERO
        self._state = ContainerState.UNINITIALIZED
        self._lock = asyncio.Lock()

    @property
    def value(self) -> CounterValue:
        return self._value

    @property
    def state(self) -> ContainerState:
        return self._state

    @property
    def decrement_policy(self) -> DecrementPolicy:
        return self._policy

    async def load(self) -> Result[CounterValue]:
        """Read the stored value (0 when absent)."""
        async with self._lock:
            return await self._load_locked()

    async def load_or_default(self) -> CounterValue:
        """Load, substituting 0 and logging when the read fails."""
        async with self._lock:
            result = await self._load_locked()
            if is_ok(result):
                return result.value
            logger.warning(
                f"Counter load failed, using default: {result.error.message}",
                extra={"storage_key": self._key, "error_code": result.error.code},
            )
            self._value = ZERO
            self._state = ContainerState.READY
            return ZERO

    async def increment(self) -> Result[CounterValue]:
        return await self._mutate(incremented, "increment")

    async def decrement(self) -> Result[CounterValue]:
        return await self._mutate(
            lambda c: decremented(c, self._policy), "decrement",
            write_if_unchanged=False,
        )

    async def reset(self) -> Result[CounterValue]:
        return await self._mutate(lambda _: ZERO, "reset")

    async def _mutate(
        self,
        fn: Callable[[CounterValue], CounterValue],
        operation: str,
        write_if_unchanged: bool = True,
    ) -> Result[CounterValue]:
        async with self._lock:
            if self._state != ContainerState.READY:
                loaded = await self._load_locked()
                if isinstance(loaded, Err):
                    return loaded
            previous = self._value
            updated = fn(previous)
            self._value = updated
            if updated == previous and not write_if_unchanged:
                return Ok(updated)
            written = await guarded(
                self._backend.write_string(self._key, dumps_counter(updated)),
                operation="write", key=self._key, timeout_seconds=self._timeout,
            )
            if isinstance(written, Err):
                return written
            logger.info(
                f"Counter {operation}: {previous.value} -> {updated.value}",
                extra={"storage_key": self._key, "operation": operation},
            )
            return Ok(updated)

    async def _load_locked(self) -> Result[CounterValue]:
        self._state = ContainerState.LOADING
        raw = await guarded(
            self._backend.read_string(self._key),
            operation="read", key=self._key, timeout_seconds=self._timeout,
        )
        if isinstance(raw, Err):
            self._state = ContainerState.UNINITIALIZED
            return raw
        if raw.value is None:
            counter = ZERO
        else:
            decoded = self._decode(raw.value)
            if isinstance(decoded, Err):
                self._state = ContainerState.UNINITIALIZED
                return decoded
            counter = decoded.value
        self._value = counter
        self._state = ContainerState.READY
        logger.info(
            f"Counter loaded: {counter.value}",
            extra={"storage_key": self._key, "operation": "load"},
        )
        return Ok(counter)

    def _decode(self, text: str) -> Result[CounterValue]:
        try:
            counter = loads_counter(text)
        except DecodeError as e:
            logger.error(
                f"Stored counter is corrupt: {e.message}",
                extra={"storage_key": self._key, "error_code": e.code},
            )
            return Err(StorageFailure(
                e.message, "decode", context=ErrorContext(storage_key=self._key),
            ))
        checked = make_counter(counter.value, self._policy)
        if isinstance(checked, Err):
            return Err(StorageFailure(
                checked.error.message, "decode",
                context=ErrorContext(storage_key=self._key),
            ))
        return checked
