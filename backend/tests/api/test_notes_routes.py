"""Notes Routes — HTTP surface over PersistedNotes."""

from countnotes.core.domain_types import NOTES_KEY


async def _add(client, content: str) -> dict:
    res = await client.post("/api/v1/notes", json={"content": content})
    assert res.status_code == 201
    return res.json()


async def test_list_starts_empty(client):
    res = await client.get("/api/v1/notes")
    assert res.status_code == 200
    assert res.json() == {"notes": [], "count": 0}


async def test_add_and_list(client):
    created = await _add(client, "  hello  ")
    assert created["content"] == "hello"
    assert "created_at" in created

    listing = (await client.get("/api/v1/notes")).json()
    assert listing["count"] == 1
    assert listing["notes"][0]["id"] == created["id"]


async def test_add_blank_is_400_and_not_written(client, backend):
    res = await client.post("/api/v1/notes", json={"content": "   "})
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"
    assert NOTES_KEY not in backend.data


async def test_add_missing_body_field_is_400(client):
    res = await client.post("/api/v1/notes", json={})
    assert res.status_code == 400
    assert res.json()["error"]["details"][0]["field"] == "body.content"


async def test_get_update_delete_note(client):
    created = await _add(client, "draft")
    note_url = f"/api/v1/notes/{created['id']}"

    assert (await client.get(note_url)).json()["content"] == "draft"

    patched = await client.patch(note_url, json={"content": "final"})
    assert patched.status_code == 200
    assert patched.json()["content"] == "final"
    assert patched.json()["created_at"] == created["created_at"]

    assert (await client.delete(note_url)).status_code == 204
    assert (await client.get(note_url)).status_code == 404


async def test_unknown_note_is_404(client):
    res = await client.get("/api/v1/notes/nope")
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "RESOURCE_NOT_FOUND"
    assert (await client.patch("/api/v1/notes/nope", json={"content": "x"})).status_code == 404


async def test_delete_unknown_note_is_silent(client):
    assert (await client.delete("/api/v1/notes/nope")).status_code == 204


async def test_clear_notes(client, backend):
    await _add(client, "a")
    await _add(client, "b")
    assert (await client.delete("/api/v1/notes")).status_code == 204
    assert (await client.get("/api/v1/notes")).json()["count"] == 0
    assert backend.data[NOTES_KEY] == "[]"


async def test_add_storage_failure_is_503(client, backend):
    backend.fail_writes = True
    res = await client.post("/api/v1/notes", json={"content": "x"})
    assert res.status_code == 503
    assert res.json()["error"]["category"] == "storage"
