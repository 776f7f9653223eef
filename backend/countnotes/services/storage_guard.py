"""Storage Guard — turns backend calls into Result values.

Invariants:
    - Every backend exception becomes Err(StorageFailure), logged with the key
    - A timeout becomes Err(StorageFailure) with timed_out=True, never a default
    - Cancellation (BaseException) is not intercepted
"""

import asyncio
import logging
from typing import Awaitable, TypeVar

from countnotes.core.errors import ErrorContext, StorageFailure
from countnotes.core.result import Err, Ok, Result

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def guarded(
    call: Awaitable[T],
    *,
    operation: str,
    key: str,
    timeout_seconds: float | None = None,
) -> Result[T]:
    """Await a backend call, mapping any failure to StorageFailure."""
    try:
        if timeout_seconds is None:
            value = await call
        else:
            value = await asyncio.wait_for(call, timeout_seconds)
    except asyncio.TimeoutError:
        logger.error(
            f"Storage {operation} timed out after {timeout_seconds}s",
            extra={"storage_key": key, "operation": operation, "timed_out": True},
        )
        return Err(StorageFailure(
            f"timed out after {timeout_seconds}s", operation,
            timed_out=True, context=ErrorContext(storage_key=key),
        ))
    except Exception as e:
        logger.error(
            f"Storage {operation} failed: {e}",
            extra={"storage_key": key, "operation": operation},
            exc_info=True,
        )
        return Err(StorageFailure(
            str(e) or type(e).__name__, operation,
            context=ErrorContext(storage_key=key),
        ))
    return Ok(value)
