"""In-Memory Backend — dictionary contract checks."""

import pytest

from countnotes.infrastructure.memory_backend import InMemoryBackend


async def test_round_trip_and_remove():
    backend = InMemoryBackend()
    assert await backend.read_string("k") is None
    await backend.write_string("k", "v")
    assert await backend.read_string("k") == "v"
    await backend.remove("k")
    await backend.remove("k")
    assert await backend.read_string("k") is None


async def test_initial_contents_are_copied():
    seed = {"k": "v"}
    backend = InMemoryBackend(seed)
    await backend.write_string("k", "changed")
    assert seed == {"k": "v"}


async def test_int_helpers():
    backend = InMemoryBackend()
    await backend.write_int("n", 3)
    assert backend.data["n"] == "3"
    assert await backend.read_int("n") == 3


async def test_read_int_rejects_non_integer():
    backend = InMemoryBackend({"n": "x"})
    with pytest.raises(ValueError):
        await backend.read_int("n")
