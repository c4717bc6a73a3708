"""Error Hierarchy — codes, statuses and response envelopes.

Tests:
    - Each concrete error maps to the documented code and HTTP status
    - to_response() envelope shape
    - Client vs server classification
"""

from app.core.errors import (
    DatabaseError, ErrorCategory, FieldValidationError,
    JournalEntryExistsError, ResourceNotFoundError,
)


def test_not_found_is_404_with_resource_context():
    err = ResourceNotFoundError("Goal", "abc")
    assert err.http_status == 404
    assert err.code == "RESOURCE_NOT_FOUND"
    assert err.message == "Goal 'abc' not found"
    context = err.to_response()["error"]["context"]
    assert context == {"resource_type": "Goal", "resource_id": "abc"}


def test_journal_exists_is_400_conflict():
    err = JournalEntryExistsError("2024-06-03")
    assert err.http_status == 400
    assert err.category == ErrorCategory.CONFLICT
    assert err.message == "Journal entry already exists for this week"
    assert err.is_client_error


def test_field_validation_error_keeps_field():
    err = FieldValidationError("Content is required", field="content")
    assert err.field == "content"
    assert err.to_response()["error"]["code"] == "VALIDATION_ERROR"


def test_database_error_is_server_error():
    err = DatabaseError("timeout", "execute")
    assert err.http_status == 500
    assert not err.is_client_error
    assert err.operation == "execute"


def test_response_envelope_fields():
    body = ResourceNotFoundError("JournalEntry", "x").to_response()["error"]
    assert set(body) == {"code", "message", "category", "severity", "timestamp", "context"}
    assert body["category"] == "resource_not_found"
