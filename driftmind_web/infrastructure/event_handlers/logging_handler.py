"""
Logging Event Handler

Infrastructure event handler for logging domain events.
Domain layer remains unaware of logging infrastructure.
"""

import logging

from driftmind_web.domain.events import (
    DocumentDeletedEvent,
    DocumentUploadedEvent,
    DomainEvent,
    DownloadTokenIssuedEvent,
    DownloadTokenRejectedEvent,
    FileRedeemedEvent,
    FileRedemptionFailedEvent,
)


class LoggingEventHandler:
    """
    Infrastructure event handler for logging domain events.
    """

    def __init__(self, logger: logging.Logger):
        self.logger = logger

    def handle(self, event: DomainEvent) -> None:
        """
        Handle domain event by logging it.

        Args:
            event: Domain event to log
        """
        try:
            if isinstance(event, DownloadTokenIssuedEvent):
                self._handle_token_issued(event)
            elif isinstance(event, DownloadTokenRejectedEvent):
                self._handle_token_rejected(event)
            elif isinstance(event, FileRedeemedEvent):
                self._handle_file_redeemed(event)
            elif isinstance(event, FileRedemptionFailedEvent):
                self._handle_redemption_failed(event)
            elif isinstance(event, DocumentUploadedEvent):
                self._handle_document_uploaded(event)
            elif isinstance(event, DocumentDeletedEvent):
                self.logger.info(f"Document deleted: {event.aggregate_id}")
            else:
                self.logger.debug(
                    f"Unhandled event: {event.__class__.__name__} "
                    f"(aggregate_id={event.aggregate_id})"
                )
        except Exception as e:
            self.logger.error(
                f"Error in logging event handler for {event.__class__.__name__}: {e}",
                exc_info=True,
            )

    def _handle_token_issued(self, event: DownloadTokenIssuedEvent) -> None:
        self.logger.info(
            f"Download token issued: document_id={event.aggregate_id}, "
            f"expiration_minutes={event.expiration_minutes}, "
            f"expires_at={event.expires_at}"
        )

    def _handle_token_rejected(self, event: DownloadTokenRejectedEvent) -> None:
        self.logger.warning(
            f"Failed to generate download token for document {event.aggregate_id} "
            f"({event.reason})"
        )

    def _handle_file_redeemed(self, event: FileRedeemedEvent) -> None:
        self.logger.info(
            f"File downloaded successfully: {event.file_name} "
            f"({event.file_size} bytes, token {event.aggregate_id})"
        )

    def _handle_redemption_failed(self, event: FileRedemptionFailedEvent) -> None:
        self.logger.warning(
            f"Failed to download file with token {event.aggregate_id} ({event.reason})"
        )

    def _handle_document_uploaded(self, event: DocumentUploadedEvent) -> None:
        self.logger.info(
            f"Document uploaded: document_id={event.aggregate_id}, "
            f"file_name={event.file_name}, chunks={event.chunks_created}"
        )
