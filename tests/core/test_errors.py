"""Error Hierarchy — response envelopes and status codes."""

from courses_api.core.errors import (
    ForbiddenError,
    PersistenceError,
    RequestRejectedError,
    ResourceNotFoundError,
    UnauthenticatedError,
    ValidationFailedError,
    internal_error_response,
)


def test_message_envelope_for_auth_and_not_found():
    for error in (
        UnauthenticatedError(), ForbiddenError("nope"),
        ResourceNotFoundError("Course", "9"),
    ):
        assert set(error.to_response()) == {"message"}


def test_validation_envelope_keeps_order():
    error = ValidationFailedError(["b", "a", "b"])
    assert error.to_response() == {"errors": ["b", "a", "b"]}


def test_status_codes():
    assert UnauthenticatedError().http_status == 401
    assert ForbiddenError("x").http_status == 403
    assert ValidationFailedError([]).http_status == 400
    assert ResourceNotFoundError("Course", "1").http_status == 404


def test_persistence_error_is_not_a_client_rejection():
    assert not isinstance(PersistenceError("boom", "insert"), RequestRejectedError)


def test_internal_error_response_shape():
    body = internal_error_response(KeyError("userId"))
    assert body == {
        "message": "Sorry, there was an error",
        "name": "KeyError",
        "description": "'userId'",
    }


def test_errors_carry_only_logging_metadata():
    error = ResourceNotFoundError("Course", "9")
    assert (error.code, error.category, error.severity) == (
        "RESOURCE_NOT_FOUND", "resource_not_found", "info",
    )
    assert not hasattr(error, "context")
