"""Error Hierarchy — tests for application error envelopes.

Tests cover:
    - MalformedRequestError is a 400 validation error with the SY03 text
    - InternalFaultError is a 500 with a generic message; detail stays internal
"""

from payment_instructions.core.errors import (
    ErrorCategory,
    ErrorContext,
    InternalFaultError,
    MalformedRequestError,
)


def test_malformed_request_error_shape():
    error = MalformedRequestError()
    assert error.http_status == 400
    body = error.to_response()["error"]
    assert body["code"] == "VALIDATION_ERROR"
    assert body["category"] == ErrorCategory.VALIDATION.value
    assert body["message"] == "Malformed instruction: unable to parse keywords"


def test_internal_fault_never_leaks_detail():
    error = InternalFaultError(
        "Account 'a' has non-numeric balance",
        ErrorContext(stage="execute", debug_info={"account_id": "a"}),
    )
    assert error.http_status == 500
    body = error.to_response()["error"]
    assert body["message"] == "Internal server error"
    assert "non-numeric" not in str(body)
    assert "debug_info" not in body["context"]
    assert body["context"]["stage"] == "execute"
