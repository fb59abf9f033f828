"""
Downloads Domain

Token issuance and redemption value objects plus the Content-Disposition
filename rule.
"""

from .content_disposition import ascii_fallback, build_content_disposition, percent_encode
from .value_objects import (
    DEFAULT_CONTENT_TYPE,
    DEFAULT_EXPIRATION_MINUTES,
    MAX_EXPIRATION_MINUTES,
    DownloadFileRequest,
    DownloadFileResponse,
    DownloadTokenRequest,
    DownloadTokenResponse,
    FailureReason,
    FileResult,
    TokenResult,
    clamp_expiration_minutes,
)

__all__ = [
    "DEFAULT_CONTENT_TYPE",
    "DEFAULT_EXPIRATION_MINUTES",
    "MAX_EXPIRATION_MINUTES",
    "DownloadFileRequest",
    "DownloadFileResponse",
    "DownloadTokenRequest",
    "DownloadTokenResponse",
    "FailureReason",
    "FileResult",
    "TokenResult",
    "ascii_fallback",
    "build_content_disposition",
    "clamp_expiration_minutes",
    "percent_encode",
]
