"""Note Entity — content validation, factories and seed set."""

from datetime import datetime, timezone

from countnotes.core.errors import ValidationFailure
from countnotes.core.note import (
    Note, create_note, new_note_id, seed_notes, validate_content, with_content,
)
from countnotes.core.result import Err, Ok

NOW = datetime(2026, 1, 2, 3, 4, 5, 678901, tzinfo=timezone.utc)


def test_validate_content_trims():
    assert validate_content("  hello  ") == Ok("hello")


def test_validate_content_rejects_empty():
    result = validate_content("")
    assert isinstance(result, Err)
    assert isinstance(result.error, ValidationFailure)
    assert result.error.field == "content"


def test_validate_content_rejects_whitespace_only():
    assert isinstance(validate_content("   \n\t"), Err)


def test_validate_content_accepts_exactly_500_chars():
    assert isinstance(validate_content("x" * 500), Ok)


def test_validate_content_rejects_501_chars():
    result = validate_content("x" * 501)
    assert isinstance(result, Err)
    assert "500" in result.error.message


def test_length_checked_after_trimming():
    assert isinstance(validate_content("  " + "x" * 500 + "  "), Ok)


def test_no_limit_when_max_length_is_none():
    assert isinstance(validate_content("x" * 5000, max_length=None), Ok)


def test_validate_content_rejects_non_string():
    assert isinstance(validate_content(None), Err)


def test_create_note_builds_trimmed_note():
    result = create_note(" hi ", "n1", NOW)
    assert result == Ok(Note(id="n1", content="hi", created_at=NOW))


def test_create_note_invalid_content():
    assert isinstance(create_note("  ", "n1", NOW), Err)


def test_with_content_keeps_identity_and_timestamp():
    note = Note(id="n1", content="old", created_at=NOW)
    updated = with_content(note, " new ")
    assert updated == Ok(Note(id="n1", content="new", created_at=NOW))


def test_with_content_rejects_empty():
    note = Note(id="n1", content="old", created_at=NOW)
    assert isinstance(with_content(note, ""), Err)


def test_seed_notes_has_two_notes():
    seeds = seed_notes(lambda: NOW)
    assert [n.id for n in seeds] == ["1", "2"]
    assert all(n.created_at == NOW for n in seeds)
    assert seeds[0].content == "Welcome to Counter Notes App!"


def test_new_note_id_is_unique_hex():
    a, b = new_note_id(), new_note_id()
    assert a != b
    assert len(a) == 32
