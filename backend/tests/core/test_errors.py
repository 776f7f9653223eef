"""Error Hierarchy — codes, categories, statuses and the REST envelope."""

from countnotes.core.errors import (
    DecodeError, ErrorCategory, ErrorContext, NotFoundFailure,
    StorageFailure, UnexpectedFailure, ValidationFailure,
)


def test_validation_failure_is_400():
    e = ValidationFailure("Note content cannot be empty", field="content")
    assert e.http_status == 400
    assert e.code == "VALIDATION_ERROR"
    assert e.category == ErrorCategory.VALIDATION
    assert e.field == "content"


def test_not_found_failure_names_resource():
    e = NotFoundFailure("Note", "abc")
    assert e.http_status == 404
    assert e.message == "Note 'abc' not found"


def test_storage_failure_records_operation():
    e = StorageFailure("disk full", "write", context=ErrorContext(storage_key="notes_list"))
    assert e.http_status == 503
    assert e.operation == "write"
    assert e.context.operation == "write"
    assert e.context.storage_key == "notes_list"
    assert not e.timed_out
    assert "disk full" in e.message


def test_storage_failure_timeout_flag():
    assert StorageFailure("slow", "read", timed_out=True).timed_out


def test_decode_error_keeps_field():
    e = DecodeError("bad value", field="value")
    assert e.category == ErrorCategory.DECODE
    assert e.field == "value"


def test_unexpected_failure_is_500():
    assert UnexpectedFailure("boom").http_status == 500


def test_to_response_envelope():
    e = NotFoundFailure("Note", "7", context=ErrorContext(note_id="7"))
    body = e.to_response()["error"]
    assert body["code"] == "RESOURCE_NOT_FOUND"
    assert body["category"] == "resource_not_found"
    assert body["severity"] == "warning"
    assert body["context"]["note_id"] == "7"
    assert "timestamp" in body
