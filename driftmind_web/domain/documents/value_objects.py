"""
Document Value Objects

DTOs exchanged with the DriftMind API for uploads, search and document
management. Parsed case-insensitively from upstream JSON.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional

from driftmind_web.domain.json_fields import format_timestamp, lower_keys, parse_timestamp


@dataclass(frozen=True)
class FileUploadResponse:
    document_id: str = ""
    chunks_created: int = 0
    success: bool = False
    message: str = ""
    file_name: str = ""
    file_type: str = ""
    file_size_in_bytes: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "FileUploadResponse":
        d = lower_keys(data)
        return cls(
            document_id=d.get("documentid") or "",
            chunks_created=int(d.get("chunkscreated") or 0),
            success=bool(d.get("success", False)),
            message=d.get("message") or "",
            file_name=d.get("filename") or "",
            file_type=d.get("filetype") or "",
            file_size_in_bytes=int(d.get("filesizeinbytes") or 0),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "documentId": self.document_id,
            "chunksCreated": self.chunks_created,
            "success": self.success,
            "message": self.message,
            "fileName": self.file_name,
            "fileType": self.file_type,
            "fileSizeInBytes": self.file_size_in_bytes,
        }


@dataclass(frozen=True)
class SearchRequest:
    query: str
    max_results: int = 10
    use_semantic_search: bool = True
    document_id: Optional[str] = None
    include_answer: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return {
            "query": self.query,
            "maxResults": self.max_results,
            "useSemanticSearch": self.use_semantic_search,
            "documentId": self.document_id,
            "includeAnswer": self.include_answer,
        }


@dataclass(frozen=True)
class SearchResult:
    id: str = ""
    content: str = ""
    document_id: str = ""
    chunk_index: int = 0
    score: float = 0.0
    metadata: Optional[str] = None
    created_at: Optional[datetime] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SearchResult":
        d = lower_keys(data)
        return cls(
            id=d.get("id") or "",
            content=d.get("content") or "",
            document_id=d.get("documentid") or "",
            chunk_index=int(d.get("chunkindex") or 0),
            score=float(d.get("score") or 0.0),
            metadata=d.get("metadata"),
            created_at=parse_timestamp(d.get("createdat")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "content": self.content,
            "documentId": self.document_id,
            "chunkIndex": self.chunk_index,
            "score": self.score,
            "metadata": self.metadata,
            "createdAt": format_timestamp(self.created_at),
        }


@dataclass(frozen=True)
class SearchResponse:
    query: str = ""
    results: List[SearchResult] = field(default_factory=list)
    generated_answer: Optional[str] = None
    success: bool = False
    total_results: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SearchResponse":
        d = lower_keys(data)
        return cls(
            query=d.get("query") or "",
            results=[SearchResult.from_dict(r) for r in d.get("results") or []],
            generated_answer=d.get("generatedanswer"),
            success=bool(d.get("success", False)),
            total_results=int(d.get("totalresults") or 0),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "query": self.query,
            "results": [r.to_dict() for r in self.results],
            "generatedAnswer": self.generated_answer,
            "success": self.success,
            "totalResults": self.total_results,
        }


@dataclass(frozen=True)
class DocumentListRequest:
    max_results: int = 50
    skip: int = 0
    document_id_filter: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "maxResults": self.max_results,
            "skip": self.skip,
            "documentIdFilter": self.document_id_filter,
        }


@dataclass(frozen=True)
class DocumentInfo:
    document_id: str = ""
    chunk_count: int = 0
    file_name: Optional[str] = None
    file_type: Optional[str] = None
    file_size_in_bytes: Optional[int] = None
    metadata: Optional[str] = None
    created_at: Optional[datetime] = None
    last_updated: Optional[datetime] = None
    sample_content: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DocumentInfo":
        d = lower_keys(data)
        size = d.get("filesizeinbytes")
        return cls(
            document_id=d.get("documentid") or "",
            chunk_count=int(d.get("chunkcount") or 0),
            file_name=d.get("filename"),
            file_type=d.get("filetype"),
            file_size_in_bytes=int(size) if size is not None else None,
            metadata=d.get("metadata"),
            created_at=parse_timestamp(d.get("createdat")),
            last_updated=parse_timestamp(d.get("lastupdated")),
            sample_content=list(d.get("samplecontent") or []),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "documentId": self.document_id,
            "chunkCount": self.chunk_count,
            "fileName": self.file_name,
            "fileType": self.file_type,
            "fileSizeInBytes": self.file_size_in_bytes,
            "metadata": self.metadata,
            "createdAt": format_timestamp(self.created_at),
            "lastUpdated": format_timestamp(self.last_updated),
            "sampleContent": list(self.sample_content),
        }


@dataclass(frozen=True)
class DocumentListResponse:
    documents: List[DocumentInfo] = field(default_factory=list)
    total_documents: int = 0
    returned_documents: int = 0
    success: bool = False
    message: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DocumentListResponse":
        d = lower_keys(data)
        return cls(
            documents=[DocumentInfo.from_dict(doc) for doc in d.get("documents") or []],
            total_documents=int(d.get("totaldocuments") or 0),
            returned_documents=int(d.get("returneddocuments") or 0),
            success=bool(d.get("success", False)),
            message=d.get("message") or "",
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "documents": [doc.to_dict() for doc in self.documents],
            "totalDocuments": self.total_documents,
            "returnedDocuments": self.returned_documents,
            "success": self.success,
            "message": self.message,
        }
