"""
Document Application Service

Coordinates the document use cases that are proxied to the DriftMind API:
uploads, free-text notes, semantic search, listing and deletion.
"""

import logging
from datetime import datetime, timezone
from typing import BinaryIO, Optional

from driftmind_web.application.event_publisher import EventPublisher
from driftmind_web.config.settings import DriftMindApiConfig
from driftmind_web.domain.documents import (
    DocumentListResponse,
    FileUploadResponse,
    SearchRequest,
    SearchResponse,
)
from driftmind_web.domain.errors import (
    ApplicationError,
    ErrorCategory,
    FileTooLargeError,
    ValidationError,
)
from driftmind_web.domain.events import DocumentDeletedEvent, DocumentUploadedEvent
from driftmind_web.infrastructure.driftmind_api_client import DriftMindApiClient

logger = logging.getLogger(__name__)

MAX_SEARCH_RESULTS = 50
MAX_LIST_RESULTS = 100


def _bound(value: int, lower: int, upper: int) -> int:
    return max(lower, min(value, upper))


class DocumentService:
    """
    Application service for document operations.

    Validates input before any upstream call and turns a missing upstream
    result into an ApplicationError with the UPSTREAM_FAILURE category.
    """

    def __init__(
        self,
        api_client: DriftMindApiClient,
        config: DriftMindApiConfig,
        event_publisher: Optional[EventPublisher] = None,
    ):
        self.api_client = api_client
        self.config = config
        self.event_publisher = event_publisher

    def upload_file(
        self,
        file_stream: BinaryIO,
        file_name: str,
        size: int,
        document_id: Optional[str] = None,
        metadata: Optional[str] = None,
        chunk_size: int = 1000,
        chunk_overlap: int = 200,
    ) -> FileUploadResponse:
        """
        Upload a file to the DriftMind API.

        Args:
            file_stream: Readable binary stream
            file_name: Original filename
            size: Size of the stream in bytes
            document_id: Optional document ID to upload under
            metadata: Optional free-form metadata string
            chunk_size: Chunk size used upstream for indexing
            chunk_overlap: Overlap between consecutive chunks

        Raises:
            ValidationError: If the filename is blank
            FileTooLargeError: If size exceeds the configured maximum
            ApplicationError: If the upstream call failed
        """
        if not file_name or not file_name.strip():
            raise ValidationError("file is required")
        if size > self.config.max_upload_size_bytes:
            raise FileTooLargeError(
                f"file exceeds the maximum upload size of {self.config.max_upload_size_mb} MB"
            )

        response = self.api_client.upload_file(
            file_stream, file_name, document_id or None, metadata or None,
            chunk_size, chunk_overlap,
        )
        return self._uploaded(response)

    def upload_text(
        self,
        text: str,
        document_id: Optional[str] = None,
        metadata: Optional[str] = None,
    ) -> FileUploadResponse:
        """Upload free text as a quick note file."""
        if not text or not text.strip():
            raise ValidationError("text is required")

        size = len(text.encode("utf-8"))
        if size > self.config.max_upload_size_bytes:
            raise FileTooLargeError(
                f"text exceeds the maximum upload size of {self.config.max_upload_size_mb} MB"
            )

        response = self.api_client.upload_text_as_file(text, document_id or None, metadata or None)
        return self._uploaded(response)

    def search(
        self,
        query: str,
        max_results: int = 10,
        use_semantic_search: bool = True,
        document_id: Optional[str] = None,
        include_answer: bool = True,
    ) -> SearchResponse:
        if not query or not query.strip():
            raise ValidationError("query is required")

        request = SearchRequest(
            query=query.strip(),
            max_results=_bound(max_results, 1, MAX_SEARCH_RESULTS),
            use_semantic_search=use_semantic_search,
            document_id=document_id or None,
            include_answer=include_answer,
        )

        response = self.api_client.search(request)
        if response is None:
            raise ApplicationError(ErrorCategory.UPSTREAM_FAILURE, "search failed")
        return response

    def list_documents(
        self,
        max_results: int = 50,
        skip: int = 0,
        document_id_filter: Optional[str] = None,
    ) -> DocumentListResponse:
        response = self.api_client.get_documents(
            _bound(max_results, 1, MAX_LIST_RESULTS),
            max(skip, 0),
            document_id_filter or None,
        )
        if response is None:
            raise ApplicationError(ErrorCategory.UPSTREAM_FAILURE, "documents could not be loaded")
        return response

    def delete_document(self, document_id: str) -> None:
        """
        Delete a document and all of its chunks upstream.

        Raises:
            ValidationError: If document_id is blank
            ApplicationError: If the upstream API did not confirm the deletion
        """
        if not document_id or not document_id.strip():
            raise ValidationError("documentId is required")

        if not self.api_client.delete_document(document_id):
            raise ApplicationError(
                ErrorCategory.UPSTREAM_FAILURE, "document could not be deleted"
            )

        if self.event_publisher is not None:
            self.event_publisher.publish(
                DocumentDeletedEvent(aggregate_id=document_id, occurred_at=datetime.now(timezone.utc))
            )

    def _uploaded(self, response: Optional[FileUploadResponse]) -> FileUploadResponse:
        if response is None:
            raise ApplicationError(ErrorCategory.UPSTREAM_FAILURE, "upload failed")

        if response.success and self.event_publisher is not None:
            self.event_publisher.publish(DocumentUploadedEvent(
                aggregate_id=response.document_id,
                occurred_at=datetime.now(timezone.utc),
                file_name=response.file_name,
                chunks_created=response.chunks_created,
            ))
        elif not response.success:
            logger.warning(f"Upload was not accepted upstream: {response.message}")
        return response
