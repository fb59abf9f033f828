"""
Download Gateway

Application service for the token-gated file download flow.

Validates and bounds token issuance requests, forwards redemptions to the
DriftMind API, and reshapes the upstream file into content type and
Content-Disposition values ready for an HTTP response. Tokens are opaque and
only ever forwarded.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from driftmind_web.application.download_result import FileDeliveryResult, TokenIssueResult
from driftmind_web.application.event_publisher import EventPublisher
from driftmind_web.domain.downloads import (
    DEFAULT_CONTENT_TYPE,
    DEFAULT_EXPIRATION_MINUTES,
    FailureReason,
    build_content_disposition,
    clamp_expiration_minutes,
)
from driftmind_web.domain.errors import ValidationError
from driftmind_web.domain.events import (
    DomainEvent,
    DownloadTokenIssuedEvent,
    DownloadTokenRejectedEvent,
    FileRedeemedEvent,
    FileRedemptionFailedEvent,
    token_prefix,
)
from driftmind_web.infrastructure.driftmind_api_client import DriftMindApiClient

logger = logging.getLogger(__name__)


class DownloadGateway:
    """
    Front door of the secure download flow.

    Holds no mutable state between calls; each operation performs at most
    one upstream call and never retries.
    """

    def __init__(
        self,
        api_client: DriftMindApiClient,
        event_publisher: Optional[EventPublisher] = None,
    ):
        """
        Initialize DownloadGateway.

        Args:
            api_client: Client for the upstream DriftMind API
            event_publisher: Optional publisher for domain events
        """
        self.api_client = api_client
        self.event_publisher = event_publisher

    def issue_token(
        self, document_id: str, requested_expiration_minutes: int = DEFAULT_EXPIRATION_MINUTES
    ) -> TokenIssueResult:
        """
        Obtain a short-lived download token for a document.

        Args:
            document_id: Document to scope the token to
            requested_expiration_minutes: Requested lifetime; bounded before use

        Returns:
            TokenIssueResult with the token, expiry and effective lifetime, or a
            failure carrying the reason

        Raises:
            ValidationError: If document_id is empty or whitespace
        """
        if not document_id or not document_id.strip():
            raise ValidationError("documentId is required")

        expiration_minutes = clamp_expiration_minutes(requested_expiration_minutes)
        if expiration_minutes != requested_expiration_minutes:
            logger.debug(
                f"Expiration for document {document_id} bounded from "
                f"{requested_expiration_minutes} to {expiration_minutes} minutes"
            )

        result = self.api_client.request_download_token(document_id, expiration_minutes)

        if result is None or not result.success or result.response is None:
            reason = (
                result.failure_reason
                if result is not None and result.failure_reason is not None
                else FailureReason.UPSTREAM_FAILURE
            )
            self._publish(DownloadTokenRejectedEvent(
                aggregate_id=document_id,
                occurred_at=_now(),
                reason=reason.value,
            ))
            return TokenIssueResult.failure(document_id, expiration_minutes, reason)

        token_response = result.response
        self._publish(DownloadTokenIssuedEvent(
            aggregate_id=token_response.document_id,
            occurred_at=_now(),
            expiration_minutes=expiration_minutes,
            expires_at=token_response.expires_at,
        ))

        return TokenIssueResult(
            success=True,
            document_id=token_response.document_id,
            expiration_minutes=expiration_minutes,
            token=token_response.token,
            expires_at=token_response.expires_at,
        )

    def redeem_token(self, token: str) -> FileDeliveryResult:
        """
        Exchange a download token for the file it grants access to.

        The failure message does not say whether the token was unknown,
        expired or whether the upstream API was unreachable; the reason is
        kept on the result for the HTTP layer to pick a status code.

        Args:
            token: Opaque token issued by issue_token

        Returns:
            FileDeliveryResult with bytes, content type and Content-Disposition

        Raises:
            ValidationError: If token is empty or whitespace
        """
        if not token or not token.strip():
            raise ValidationError("token is required")

        result = self.api_client.fetch_file(token)

        if result is None or not result.success or result.response is None:
            reason = (
                result.failure_reason
                if result is not None and result.failure_reason is not None
                else FailureReason.UPSTREAM_FAILURE
            )
            self._publish(FileRedemptionFailedEvent(
                aggregate_id=token_prefix(token),
                occurred_at=_now(),
                reason=reason.value,
            ))
            return FileDeliveryResult.failure(reason)

        file_response = result.response
        self._publish(FileRedeemedEvent(
            aggregate_id=token_prefix(token),
            occurred_at=_now(),
            file_name=file_response.file_name,
            file_size=len(file_response.file_bytes),
        ))

        return FileDeliveryResult(
            success=True,
            file_bytes=file_response.file_bytes,
            content_type=file_response.content_type or DEFAULT_CONTENT_TYPE,
            content_disposition=build_content_disposition(file_response.file_name),
            file_name=file_response.file_name or None,
        )

    def _publish(self, event: DomainEvent) -> None:
        if self.event_publisher is not None:
            self.event_publisher.publish(event)


def _now() -> datetime:
    return datetime.now(timezone.utc)
