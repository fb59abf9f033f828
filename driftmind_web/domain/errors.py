"""
Error Handling Module

Request validation raises domain exceptions before any upstream call is
made. Everything the HTTP layer reports is classified by an ErrorCategory,
which also selects the user-facing message. Upstream status codes and
transport details never reach a response body.
"""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorCategory(Enum):
    """Classification of every failure reported to API clients."""

    VALIDATION_ERROR = "validation_error"
    TOKEN_NOT_GENERATED = "token_not_generated"
    DOWNLOAD_FAILED = "download_failed"
    UPSTREAM_FAILURE = "upstream_failure"
    TRANSPORT_FAILURE = "transport_failure"
    FILE_TOO_LARGE = "file_too_large"
    SYSTEM_ERROR = "system_error"


ERROR_MESSAGES: Dict[ErrorCategory, str] = {
    ErrorCategory.VALIDATION_ERROR: "invalid request",
    ErrorCategory.TOKEN_NOT_GENERATED: "token could not be generated",
    ErrorCategory.DOWNLOAD_FAILED: "download failed — token invalid or expired",
    ErrorCategory.UPSTREAM_FAILURE: "the DriftMind API rejected the request",
    ErrorCategory.TRANSPORT_FAILURE: "internal server error",
    ErrorCategory.FILE_TOO_LARGE: "file exceeds the maximum upload size",
    ErrorCategory.SYSTEM_ERROR: "internal server error",
}


class DomainError(Exception):
    """Base class of the gateway's domain exceptions."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(DomainError):
    """A required request field is missing, blank or of the wrong type.

    The message is shown to the API client as-is.
    """


class FileTooLargeError(ValidationError):
    """An upload exceeds the configured maximum size."""


class ApplicationError(Exception):
    """
    Failure of an application operation, tagged with its ErrorCategory.

    Attributes:
        category: Selects the default message and, in the API layer, the
            HTTP status
        message: User-facing message, the category default unless given
    """

    def __init__(self, category: ErrorCategory, message: Optional[str] = None):
        self.category = category
        self.message = message or ERROR_MESSAGES.get(
            category, ERROR_MESSAGES[ErrorCategory.SYSTEM_ERROR]
        )
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {"success": False, "message": self.message}


def create_error_response(
    category: ErrorCategory,
    message: Optional[str] = None,
    status_code: int = 400,
) -> tuple[Dict[str, Any], int]:
    """
    Build the (body, status) tuple a flask-restx resource returns on failure.

    The body is always {"success": false, "message": ...}.
    """
    return ApplicationError(category, message).to_dict(), status_code
