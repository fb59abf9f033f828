"""
Download Value Objects

Immutable value objects for the token issuance and redemption flow.
Tokens are opaque: they are carried and forwarded, never inspected.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional


MAX_EXPIRATION_MINUTES = 60
DEFAULT_EXPIRATION_MINUTES = 15
DEFAULT_CONTENT_TYPE = "application/octet-stream"


def clamp_expiration_minutes(requested: int) -> int:
    """
    Bound a requested token lifetime.

    The upper bound is applied first; anything that then falls below one
    minute collapses to the default lifetime rather than to one.

    Args:
        requested: Lifetime requested by the caller, in minutes

    Returns:
        Effective lifetime in minutes, always within [1, 60]
    """
    effective = min(requested, MAX_EXPIRATION_MINUTES)
    if effective < 1:
        effective = DEFAULT_EXPIRATION_MINUTES
    return effective


class FailureReason(Enum):
    """Why an upstream call did not produce a usable result."""

    UPSTREAM_FAILURE = "upstream_failure"
    TRANSPORT_FAILURE = "transport_failure"


@dataclass(frozen=True)
class DownloadTokenRequest:
    """Token issuance request sent upstream."""

    document_id: str
    expiration_minutes: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "documentId": self.document_id,
            "expirationMinutes": self.expiration_minutes,
        }


@dataclass(frozen=True)
class DownloadTokenResponse:
    """Token issued by the upstream API."""

    token: str
    document_id: str
    expires_at: Optional[datetime]
    success: bool


@dataclass(frozen=True)
class DownloadFileRequest:
    """Redemption request sent upstream."""

    token: str

    def to_dict(self) -> Dict[str, Any]:
        return {"token": self.token}


@dataclass(frozen=True)
class DownloadFileResponse:
    """
    File returned by the upstream API for a redeemed token.

    Attributes:
        file_bytes: Full file content, held in memory
        file_name: Filename from the upstream Content-Disposition, if any
        content_type: Upstream Content-Type, if any
        success: Whether the upstream accepted the token
    """

    file_bytes: bytes = field(repr=False)
    file_name: Optional[str]
    content_type: Optional[str]
    success: bool


@dataclass(frozen=True)
class TokenResult:
    """Outcome of an upstream token issuance call."""

    success: bool
    response: Optional[DownloadTokenResponse] = None
    failure_reason: Optional[FailureReason] = None

    @classmethod
    def ok(cls, response: DownloadTokenResponse) -> "TokenResult":
        return cls(success=True, response=response)

    @classmethod
    def failed(cls, reason: FailureReason) -> "TokenResult":
        return cls(success=False, failure_reason=reason)


@dataclass(frozen=True)
class FileResult:
    """Outcome of an upstream file redemption call."""

    success: bool
    response: Optional[DownloadFileResponse] = None
    failure_reason: Optional[FailureReason] = None

    @classmethod
    def ok(cls, response: DownloadFileResponse) -> "FileResult":
        return cls(success=True, response=response)

    @classmethod
    def failed(cls, reason: FailureReason) -> "FileResult":
        return cls(
            success=False,
            response=DownloadFileResponse(
                file_bytes=b"", file_name=None, content_type=None, success=False
            ),
            failure_reason=reason,
        )
