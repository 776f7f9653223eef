"""SQL Key-Value Backend — kv_entries round trips on a SQLite file.

Invariants:
    - Each test gets its own database file under tmp_path
    - A second DatabaseSessionManager on the same file simulates a restart
"""

import pytest

from countnotes.core.counter_value import CounterValue
from countnotes.core.result import Ok
from countnotes.db.session import create_all
from countnotes.infrastructure.database import DatabaseSessionManager
from countnotes.infrastructure.sql_backend import SqlKeyValueBackend
from countnotes.services.persisted_counter import PersistedCounter
from countnotes.services.persisted_notes import PersistedNotes


@pytest.fixture
def database_url(tmp_path):
    return f"sqlite+aiosqlite:///{tmp_path / 'kv.db'}"


@pytest.fixture
async def manager(database_url):
    mgr = DatabaseSessionManager(database_url)
    await create_all(mgr.engine)
    yield mgr
    await mgr.dispose()


@pytest.fixture
def sql_backend(manager):
    return SqlKeyValueBackend(manager)


async def test_read_absent_key_is_none(sql_backend):
    assert await sql_backend.read_string("missing") is None


async def test_write_then_read(sql_backend):
    await sql_backend.write_string("k", "v1")
    assert await sql_backend.read_string("k") == "v1"


async def test_write_overwrites(sql_backend):
    await sql_backend.write_string("k", "v1")
    await sql_backend.write_string("k", "v2")
    assert await sql_backend.read_string("k") == "v2"


async def test_remove_deletes_and_tolerates_missing(sql_backend):
    await sql_backend.write_string("k", "v")
    await sql_backend.remove("k")
    await sql_backend.remove("k")
    assert await sql_backend.read_string("k") is None


async def test_int_helpers(sql_backend):
    assert await sql_backend.read_int("n") is None
    await sql_backend.write_int("n", -12)
    assert await sql_backend.read_int("n") == -12


async def test_read_int_rejects_non_integer(sql_backend):
    await sql_backend.write_string("n", "twelve")
    with pytest.raises(ValueError):
        await sql_backend.read_int("n")


async def test_containers_survive_restart(manager, database_url):
    counter = PersistedCounter(SqlKeyValueBackend(manager))
    notes = PersistedNotes(SqlKeyValueBackend(manager))
    await counter.increment()
    await counter.increment()
    await notes.add("persisted")
    await manager.dispose()

    reopened = DatabaseSessionManager(database_url)
    try:
        backend = SqlKeyValueBackend(reopened)
        assert await PersistedCounter(backend).load() == Ok(CounterValue(2))
        loaded = await PersistedNotes(backend).load_all()
        assert [n.content for n in loaded.value] == ["persisted"]
    finally:
        await reopened.dispose()


async def test_missing_table_is_storage_failure(tmp_path):
    mgr = DatabaseSessionManager(f"sqlite+aiosqlite:///{tmp_path / 'empty.db'}")
    try:
        result = await PersistedCounter(SqlKeyValueBackend(mgr)).load()
        assert not isinstance(result, Ok)
        assert result.error.code == "STORAGE_ERROR"
    finally:
        await mgr.dispose()
