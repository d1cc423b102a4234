"""Error Hierarchy — codes, HTTP statuses and response envelopes.

Tests cover:
    - TaskNotFoundError message contains the id and maps to 404
    - StoreError is critical and maps to a 5xx status
    - to_response() exposes a top-level message
"""

from ticktask.core.errors import (
    ErrorCategory, ErrorSeverity, StoreError, TaskNotFoundError,
    TaskValidationError, TickTaskError,
)


def test_not_found_message_contains_id():
    err = TaskNotFoundError(999)
    assert str(err) == "Task not found with id: 999"
    assert "999" in err.message
    assert err.task_id == 999
    assert err.context.task_id == 999


def test_not_found_maps_to_404():
    err = TaskNotFoundError(1)
    assert err.http_status == 404
    assert err.code == "TASK_NOT_FOUND"
    assert err.category is ErrorCategory.RESOURCE_NOT_FOUND


def test_validation_error_maps_to_400():
    err = TaskValidationError("bad filter", field="query")
    assert err.http_status == 400
    assert err.field == "query"
    assert isinstance(err, TickTaskError)


def test_store_error_is_critical_server_error():
    err = StoreError("Connection or operational error", "execute")
    assert err.http_status >= 500
    assert err.severity is ErrorSeverity.CRITICAL
    assert err.message.startswith("Database execute failed")


def test_to_response_has_flat_message_field():
    body = TaskNotFoundError(42).to_response()
    assert body["message"] == "Task not found with id: 42"
    assert body["status"] == 404
    assert body["code"] == "TASK_NOT_FOUND"
    assert body["category"] == "resource_not_found"
    assert "timestamp" in body
