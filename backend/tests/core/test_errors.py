"""Error Hierarchy — status codes and response envelopes."""

from participant_api.core.errors import (
    CollectionOperationError, ErrorCategory, ParticipantNotFoundError,
    ParticipantServiceError, ParticipantValidationError, StoreFailureError,
    UnauthorizedError,
)


def test_all_errors_share_the_base_class():
    for exc in (
        ParticipantValidationError("bad", "dob"),
        ParticipantNotFoundError("a@b.com"),
        UnauthorizedError(),
        CollectionOperationError("boom", "scan"),
        StoreFailureError("Failed"),
    ):
        assert isinstance(exc, ParticipantServiceError)


def test_http_statuses():
    assert ParticipantValidationError("bad").http_status == 400
    assert UnauthorizedError().http_status == 401
    assert ParticipantNotFoundError("a@b.com").http_status == 404
    assert StoreFailureError("Failed").http_status == 500
    assert CollectionOperationError("boom", "put").http_status == 500


def test_response_envelope_without_details():
    assert ParticipantNotFoundError("a@b.com").to_response() == {
        "error": "Participant not found or is deleted",
    }


def test_response_envelope_with_details():
    exc = StoreFailureError("Failed to retrieve participants", details="boom")
    assert exc.to_response() == {
        "error": "Failed to retrieve participants", "details": "boom",
    }


def test_collection_error_names_operation_and_category():
    exc = CollectionOperationError("timed out after 1s", "scan", timed_out=True)
    assert exc.operation == "scan"
    assert exc.category is ErrorCategory.TIMEOUT
    assert "scan" in exc.message
    assert CollectionOperationError("x", "put").category is ErrorCategory.DATABASE
