"""
Domain Events

Immutable records of significant outcomes in the gateway.
Events decouple side effects (logging) from the request handling logic.
"""

from abc import ABC
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional


def token_prefix(token: str) -> str:
    """Loggable prefix of an opaque token."""
    return f"{token[:8]}..."


@dataclass(frozen=True)
class DomainEvent(ABC):
    """
    Base class for all domain events.

    Attributes:
        aggregate_id: ID of the entity the event is about (document ID or
            token prefix)
        occurred_at: Timestamp when the event occurred
    """
    aggregate_id: str
    occurred_at: datetime

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert event to dictionary for serialization.

        Returns:
            Dictionary representation of the event
        """
        return {
            "event_type": self.__class__.__name__,
            "aggregate_id": self.aggregate_id,
            "occurred_at": self.occurred_at.isoformat(),
        }


@dataclass(frozen=True)
class DownloadTokenIssuedEvent(DomainEvent):
    """
    Event emitted when the upstream API issued a download token.

    Attributes:
        aggregate_id: Document ID
        expiration_minutes: Effective lifetime sent upstream
        expires_at: Expiry reported by the upstream API
    """
    expiration_minutes: int
    expires_at: Optional[datetime]

    def to_dict(self) -> Dict[str, Any]:
        base_dict = super().to_dict()
        base_dict.update({
            "expiration_minutes": self.expiration_minutes,
            "expires_at": self.expires_at.isoformat() if self.expires_at else None,
        })
        return base_dict


@dataclass(frozen=True)
class DownloadTokenRejectedEvent(DomainEvent):
    """
    Event emitted when no token could be obtained for a document.

    Attributes:
        aggregate_id: Document ID
        reason: Failure reason value
    """
    reason: str

    def to_dict(self) -> Dict[str, Any]:
        base_dict = super().to_dict()
        base_dict["reason"] = self.reason
        return base_dict


@dataclass(frozen=True)
class FileRedeemedEvent(DomainEvent):
    """
    Event emitted when a token was exchanged for file bytes.

    Attributes:
        aggregate_id: Token prefix
        file_name: Upstream filename, if any
        file_size: Number of bytes delivered
    """
    file_name: Optional[str]
    file_size: int

    def to_dict(self) -> Dict[str, Any]:
        base_dict = super().to_dict()
        base_dict.update({
            "file_name": self.file_name,
            "file_size": self.file_size,
        })
        return base_dict


@dataclass(frozen=True)
class FileRedemptionFailedEvent(DomainEvent):
    """
    Event emitted when a token could not be redeemed.

    Attributes:
        aggregate_id: Token prefix
        reason: Failure reason value
    """
    reason: str

    def to_dict(self) -> Dict[str, Any]:
        base_dict = super().to_dict()
        base_dict["reason"] = self.reason
        return base_dict


@dataclass(frozen=True)
class DocumentUploadedEvent(DomainEvent):
    """
    Event emitted after a successful upload.

    Attributes:
        aggregate_id: Document ID assigned upstream
        file_name: Uploaded filename
        chunks_created: Number of chunks the upstream API created
    """
    file_name: str
    chunks_created: int

    def to_dict(self) -> Dict[str, Any]:
        base_dict = super().to_dict()
        base_dict.update({
            "file_name": self.file_name,
            "chunks_created": self.chunks_created,
        })
        return base_dict


@dataclass(frozen=True)
class DocumentDeletedEvent(DomainEvent):
    """Event emitted after a document was deleted upstream."""
    pass
