"""
Value Object Factories

Factory functions for upstream results and DTOs with sensible defaults.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

from driftmind_web.domain.documents import (
    DocumentInfo,
    DocumentListResponse,
    FileUploadResponse,
    SearchResponse,
    SearchResult,
)
from driftmind_web.domain.downloads import (
    DownloadFileResponse,
    DownloadTokenResponse,
    FailureReason,
    FileResult,
    TokenResult,
)

FIXED_EXPIRY = datetime(2026, 1, 1, 12, 15, tzinfo=timezone.utc)


def create_token_result(
    token: str = "abc",
    document_id: str = "doc-1",
    expires_at: Optional[datetime] = FIXED_EXPIRY,
) -> TokenResult:
    return TokenResult.ok(
        DownloadTokenResponse(
            token=token, document_id=document_id, expires_at=expires_at, success=True
        )
    )


def create_file_result(
    file_bytes: bytes = b"%PDF-1.4 test",
    file_name: Optional[str] = "report.pdf",
    content_type: Optional[str] = "application/pdf",
) -> FileResult:
    return FileResult.ok(
        DownloadFileResponse(
            file_bytes=file_bytes,
            file_name=file_name,
            content_type=content_type,
            success=True,
        )
    )


def create_upload_response(
    document_id: str = "doc-1",
    file_name: str = "report.pdf",
    chunks_created: int = 3,
    success: bool = True,
) -> FileUploadResponse:
    return FileUploadResponse(
        document_id=document_id,
        chunks_created=chunks_created,
        success=success,
        message="File uploaded" if success else "rejected",
        file_name=file_name,
        file_type=".pdf",
        file_size_in_bytes=1024,
    )


def create_search_response(query: str = "drift", count: int = 2) -> SearchResponse:
    created = FIXED_EXPIRY - timedelta(days=1)
    results = [
        SearchResult(
            id=f"chunk-{i}",
            content=f"content {i}",
            document_id="doc-1",
            chunk_index=i,
            score=0.9 - i * 0.1,
            created_at=created,
        )
        for i in range(count)
    ]
    return SearchResponse(
        query=query,
        results=results,
        generated_answer="An answer",
        success=True,
        total_results=count,
    )


def create_document_list(count: int = 2) -> DocumentListResponse:
    documents = [
        DocumentInfo(document_id=f"doc-{i}", chunk_count=i + 1, file_name=f"file-{i}.txt")
        for i in range(count)
    ]
    return DocumentListResponse(
        documents=documents,
        total_documents=count,
        returned_documents=count,
        success=True,
        message="ok",
    )


def failed_token_result(reason: FailureReason = FailureReason.UPSTREAM_FAILURE) -> TokenResult:
    return TokenResult.failed(reason)


def failed_file_result(reason: FailureReason = FailureReason.UPSTREAM_FAILURE) -> FileResult:
    return FileResult.failed(reason)
