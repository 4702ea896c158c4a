"""Error Hierarchy — status codes and the REST error envelope.

Tests:
    - Each subclass maps to its HTTP status and code
    - to_response() exposes code/message/category/context, nothing internal
"""

import pytest

from eureka.core.errors import (
    BadRequestError, ConflictError, DatabaseError, ErrorCategory,
    ErrorContext, ForbiddenError, ResourceNotFoundError, UnauthorizedError,
)


@pytest.mark.parametrize("error,status,code", [
    (BadRequestError("bad"), 400, "BAD_REQUEST"),
    (UnauthorizedError(), 401, "UNAUTHORIZED"),
    (ForbiddenError("no"), 403, "FORBIDDEN"),
    (ResourceNotFoundError("Question", "q1"), 404, "RESOURCE_NOT_FOUND"),
    (ConflictError("taken"), 409, "CONFLICT"),
    (DatabaseError("boom", "commit"), 500, "DATABASE_ERROR"),
])
def test_status_and_code(error, status, code):
    assert error.http_status == status
    assert error.code == code


def test_not_found_message_and_context():
    err = ResourceNotFoundError("Answer", "a-9")
    body = err.to_response()["error"]
    assert body["message"] == "Answer 'a-9' not found"
    assert body["category"] == ErrorCategory.RESOURCE_NOT_FOUND.value
    assert body["context"]["resource_type"] == "Answer"
    assert body["context"]["resource_id"] == "a-9"


def test_bad_request_records_field():
    body = BadRequestError("title is required", field="title").to_response()
    assert body["error"]["context"]["field"] == "title"


def test_debug_info_never_leaks():
    ctx = ErrorContext(debug_info={"sql": "SELECT secret"})
    body = DatabaseError("boom", "query", ctx).to_response()
    assert "debug_info" not in body["error"]["context"]
    assert "SELECT secret" not in str(body)
