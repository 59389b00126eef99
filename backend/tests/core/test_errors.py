"""Error Hierarchy — status codes and public envelope.

Tests cover:
    - each error class maps to its HTTP status
    - to_response() exposes only {"error": message}
    - StoreError keeps the operation for logs but not in the response
"""

from account_service.core.errors import (
    AccountServiceError,
    AuthenticationError,
    ConflictError,
    ErrorCategory,
    InputValidationError,
    ResourceNotFoundError,
    StoreError,
)


def test_status_codes():
    assert InputValidationError("bad").http_status == 400
    assert AuthenticationError().http_status == 401
    assert ResourceNotFoundError().http_status == 404
    assert ConflictError().http_status == 409
    assert StoreError("insert").http_status == 500


def test_all_errors_share_the_base_class():
    for exc in (
        InputValidationError("bad"), AuthenticationError(),
        ResourceNotFoundError(), ConflictError(), StoreError("x"),
    ):
        assert isinstance(exc, AccountServiceError)


def test_default_messages():
    assert AuthenticationError().message == "Invalid email or password"
    assert ResourceNotFoundError().message == "User not found"
    assert ConflictError().message == (
        "User with this email or mobile number already exists"
    )
    assert StoreError("find_by_id").message == "Internal server error"


def test_response_envelope_has_only_error_key():
    assert InputValidationError("Name too short").to_response() == {
        "error": "Name too short",
    }


def test_store_error_hides_operation_from_response():
    exc = StoreError("insert", "Failed to create user")
    assert exc.to_response() == {"error": "Failed to create user"}
    assert exc.log_extra()["operation"] == "insert"
    assert exc.category == ErrorCategory.DATABASE
