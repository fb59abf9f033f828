"""
Unit tests for error categories and error responses.
"""

from driftmind_web.domain.errors import (
    ApplicationError,
    DomainError,
    ErrorCategory,
    FileTooLargeError,
    ValidationError,
    create_error_response,
)


def test_validation_error_is_domain_error():
    error = ValidationError("documentId is required")

    assert isinstance(error, DomainError)
    assert error.message == "documentId is required"
    assert issubclass(FileTooLargeError, ValidationError)


def test_application_error_default_message():
    error = ApplicationError(ErrorCategory.DOWNLOAD_FAILED)

    assert error.to_dict() == {
        "success": False,
        "message": "download failed — token invalid or expired",
    }


def test_application_error_custom_message():
    error = ApplicationError(ErrorCategory.UPSTREAM_FAILURE, "search failed")
    assert error.message == "search failed"


def test_create_error_response():
    body, status = create_error_response(ErrorCategory.TRANSPORT_FAILURE, status_code=500)

    assert status == 500
    assert body == {"success": False, "message": "internal server error"}


def test_create_error_response_defaults_to_400():
    body, status = create_error_response(ErrorCategory.TOKEN_NOT_GENERATED)

    assert status == 400
    assert body["message"] == "token could not be generated"


def test_create_error_response_custom_message():
    body, status = create_error_response(
        ErrorCategory.VALIDATION_ERROR, "documentId is required", status_code=400
    )

    assert status == 400
    assert body == {"success": False, "message": "documentId is required"}


def test_domain_error_carries_only_message():
    error = FileTooLargeError("file exceeds the maximum upload size")

    assert str(error) == error.message
    assert vars(error) == {"message": "file exceeds the maximum upload size"}
