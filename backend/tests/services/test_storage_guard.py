"""Storage Guard — backend exceptions and timeouts become StorageFailure."""

import asyncio

from countnotes.core.errors import StorageFailure
from countnotes.core.result import Err, Ok
from countnotes.services.storage_guard import guarded


async def _value():
    return "v"


async def _boom():
    raise OSError("disk full")


async def _slow():
    await asyncio.sleep(1)


async def test_success_is_ok():
    assert await guarded(_value(), operation="read", key="k") == Ok("v")


async def test_exception_is_storage_failure():
    result = await guarded(_boom(), operation="write", key="k")
    assert isinstance(result, Err)
    assert isinstance(result.error, StorageFailure)
    assert result.error.context.storage_key == "k"
    assert "disk full" in result.error.message


async def test_timeout_is_storage_failure():
    result = await guarded(_slow(), operation="read", key="k", timeout_seconds=0.01)
    assert isinstance(result, Err)
    assert result.error.timed_out
    assert result.error.operation == "read"
