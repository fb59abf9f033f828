"""
Download Result Value Objects

Outcomes of the gateway's token issuance and redemption operations.
Failures are explicit: a success flag plus a typed failure reason, checked
by the caller rather than caught.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from driftmind_web.domain.downloads import FailureReason
from driftmind_web.domain.errors import ERROR_MESSAGES, ErrorCategory


@dataclass(frozen=True)
class TokenIssueResult:
    """
    Result of a token issuance.

    Attributes:
        success: Whether a token was issued
        token: Opaque token (if successful)
        document_id: Document the token is scoped to
        expires_at: Expiry reported upstream (if successful)
        expiration_minutes: Effective lifetime sent upstream
        failure_reason: Why issuance failed (if failed)
        error_message: User-facing error message (if failed)
    """
    success: bool
    document_id: str
    expiration_minutes: int
    token: Optional[str] = None
    expires_at: Optional[datetime] = None
    failure_reason: Optional[FailureReason] = None
    error_message: Optional[str] = None

    @classmethod
    def failure(
        cls, document_id: str, expiration_minutes: int, reason: FailureReason
    ) -> "TokenIssueResult":
        return cls(
            success=False,
            document_id=document_id,
            expiration_minutes=expiration_minutes,
            failure_reason=reason,
            error_message=ERROR_MESSAGES[ErrorCategory.TOKEN_NOT_GENERATED],
        )


@dataclass(frozen=True)
class FileDeliveryResult:
    """
    Result of a token redemption, ready to be written as an HTTP response.

    Attributes:
        success: Whether the file was delivered
        file_bytes: File content (empty on failure)
        content_type: Content type to send
        content_disposition: Full Content-Disposition header value
        file_name: Upstream filename, or None when upstream sent none
        failure_reason: Why redemption failed (if failed)
        error_message: User-facing error message (if failed)
    """
    success: bool
    file_bytes: bytes = field(default=b"", repr=False)
    content_type: Optional[str] = None
    content_disposition: Optional[str] = None
    file_name: Optional[str] = None
    failure_reason: Optional[FailureReason] = None
    error_message: Optional[str] = None

    @classmethod
    def failure(cls, reason: FailureReason) -> "FileDeliveryResult":
        return cls(
            success=False,
            failure_reason=reason,
            error_message=ERROR_MESSAGES[ErrorCategory.DOWNLOAD_FAILED],
        )
