"""
Documents Domain

DTOs for uploads, semantic search and document management.
"""

from .value_objects import (
    DocumentInfo,
    DocumentListRequest,
    DocumentListResponse,
    FileUploadResponse,
    SearchRequest,
    SearchResponse,
    SearchResult,
)

__all__ = [
    "DocumentInfo",
    "DocumentListRequest",
    "DocumentListResponse",
    "FileUploadResponse",
    "SearchRequest",
    "SearchResponse",
    "SearchResult",
]
