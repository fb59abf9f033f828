"""
DriftMind API Client

Typed HTTP client for the upstream DriftMind API. Every call is a single
request with no retries. Failures never raise: the download calls return
explicit failure results, the document calls return None or False. Each
failure is logged here, at the client boundary.
"""

import io
import logging
import re
import uuid
from typing import BinaryIO, Optional
from urllib.parse import quote

import requests
from werkzeug.http import parse_options_header

from driftmind_web.config.settings import DriftMindApiConfig
from driftmind_web.domain.documents import (
    DocumentListRequest,
    DocumentListResponse,
    FileUploadResponse,
    SearchRequest,
    SearchResponse,
)
from driftmind_web.domain.downloads import (
    DownloadFileRequest,
    DownloadFileResponse,
    DownloadTokenRequest,
    DownloadTokenResponse,
    FailureReason,
    FileResult,
    TokenResult,
)
from driftmind_web.domain.json_fields import lower_keys, parse_timestamp

logger = logging.getLogger(__name__)

_EXTENDED_FILENAME_RE = re.compile(r"filename\*\s*=\s*([^;]+)", re.IGNORECASE)


def filename_from_content_disposition(header_value: Optional[str]) -> Optional[str]:
    """
    Extract the filename from a Content-Disposition header.

    The RFC 6266 extended filename* parameter is decoded and takes
    precedence over the plain filename parameter.
    """
    if not header_value:
        return None

    _, params = parse_options_header(header_value)
    filename = params.get("filename")

    # parse_options_header keeps whichever parameter came last
    extended = _EXTENDED_FILENAME_RE.search(header_value)
    if extended:
        _, extended_params = parse_options_header(
            f"attachment; filename*={extended.group(1).strip()}"
        )
        filename = extended_params.get("filename") or filename

    return filename or None


class DriftMindApiClient:
    """
    Synchronous client for the DriftMind REST API.

    Holds a requests.Session for connection pooling and no other state, so
    one instance is safely shared between concurrent requests.
    """

    def __init__(self, config: DriftMindApiConfig, session: Optional[requests.Session] = None):
        """
        Initialize the client.

        Args:
            config: Upstream API configuration
            session: Optional pre-built session (tests inject a mock here)
        """
        self.config = config
        self._session = session or self._build_session()

    @staticmethod
    def _build_session() -> requests.Session:
        session = requests.Session()
        session.headers["Accept"] = "application/json"
        return session

    # =========================================================================
    # Secure downloads
    # =========================================================================

    def request_download_token(self, document_id: str, expiration_minutes: int) -> TokenResult:
        """
        Ask the upstream API to issue a download token.

        Args:
            document_id: Document the token is scoped to
            expiration_minutes: Token lifetime, already bounded by the caller

        Returns:
            TokenResult, failed with UPSTREAM_FAILURE on a non-success status or
            a malformed body, and with TRANSPORT_FAILURE on a network error
        """
        url = self.config.url_for(self.config.endpoints.download_token)
        payload = DownloadTokenRequest(document_id, expiration_minutes).to_dict()

        try:
            response = self._session.post(url, json=payload, timeout=self.config.timeout_seconds)
        except requests.RequestException as e:
            logger.error(f"Error requesting download token for document {document_id}: {e}")
            return TokenResult.failed(FailureReason.TRANSPORT_FAILURE)

        if not response.ok:
            logger.error(
                f"Download token request failed with status code: {response.status_code}"
            )
            return TokenResult.failed(FailureReason.UPSTREAM_FAILURE)

        try:
            data = lower_keys(response.json())
            token_response = DownloadTokenResponse(
                token=data.get("token") or "",
                document_id=data.get("documentid") or document_id,
                expires_at=parse_timestamp(data.get("expiresat")),
                success=bool(data.get("success", False)),
            )
        except (ValueError, TypeError, AttributeError) as e:
            logger.error(f"Malformed download token response for document {document_id}: {e}")
            return TokenResult.failed(FailureReason.UPSTREAM_FAILURE)

        if not token_response.success or not token_response.token:
            logger.warning(f"DriftMind API declined to issue a token for document {document_id}")
            return TokenResult.failed(FailureReason.UPSTREAM_FAILURE)

        return TokenResult.ok(token_response)

    def fetch_file(self, token: str) -> FileResult:
        """
        Redeem a download token for the file it grants access to.

        Args:
            token: Opaque token, forwarded as-is

        Returns:
            FileResult carrying bytes, content type and filename on success,
            or empty content and a failure reason otherwise
        """
        url = self.config.url_for(self.config.endpoints.download_file)

        try:
            response = self._session.post(
                url,
                json=DownloadFileRequest(token).to_dict(),
                timeout=self.config.timeout_seconds,
            )
        except requests.RequestException as e:
            logger.error(f"Error downloading file with token {token[:8]}...: {e}")
            return FileResult.failed(FailureReason.TRANSPORT_FAILURE)

        if not response.ok:
            logger.error(f"File download failed with status code: {response.status_code}")
            return FileResult.failed(FailureReason.UPSTREAM_FAILURE)

        try:
            content = response.content
        except requests.RequestException as e:
            logger.error(f"Error reading file body for token {token[:8]}...: {e}")
            return FileResult.failed(FailureReason.TRANSPORT_FAILURE)

        return FileResult.ok(
            DownloadFileResponse(
                file_bytes=content,
                file_name=filename_from_content_disposition(
                    response.headers.get("Content-Disposition")
                ),
                content_type=response.headers.get("Content-Type") or None,
                success=True,
            )
        )

    # =========================================================================
    # Documents
    # =========================================================================

    def upload_file(
        self,
        file_stream: BinaryIO,
        file_name: str,
        document_id: Optional[str] = None,
        metadata: Optional[str] = None,
        chunk_size: int = 1000,
        chunk_overlap: int = 200,
    ) -> Optional[FileUploadResponse]:
        """
        Upload a file as multipart form data.

        Returns:
            Parsed upload response, or None on any failure
        """
        url = self.config.url_for(self.config.endpoints.upload)

        data = {"chunkSize": str(chunk_size), "chunkOverlap": str(chunk_overlap)}
        if document_id:
            data["documentId"] = document_id
        if metadata:
            data["metadata"] = metadata

        files = {"file": (file_name, file_stream, "application/octet-stream")}

        try:
            response = self._session.post(
                url, data=data, files=files, timeout=self.config.timeout_seconds
            )
            if not response.ok:
                logger.error(f"File upload failed with status code: {response.status_code}")
                return None
            return FileUploadResponse.from_dict(response.json())
        except (requests.RequestException, ValueError, TypeError, AttributeError) as e:
            logger.error(f"Error uploading file {file_name}: {e}")
            return None

    def upload_text_as_file(
        self,
        text: str,
        document_id: Optional[str] = None,
        metadata: Optional[str] = None,
        chunk_size: int = 1000,
        chunk_overlap: int = 200,
    ) -> Optional[FileUploadResponse]:
        """Upload free text as a UTF-8 file named QuickNotes-<id>.txt."""
        file_name = f"QuickNotes-{uuid.uuid4().hex[:8]}.txt"
        stream = io.BytesIO(text.encode("utf-8"))
        return self.upload_file(stream, file_name, document_id, metadata, chunk_size, chunk_overlap)

    def search(self, request: SearchRequest) -> Optional[SearchResponse]:
        url = self.config.url_for(self.config.endpoints.search)

        try:
            response = self._session.post(
                url, json=request.to_dict(), timeout=self.config.timeout_seconds
            )
            if not response.ok:
                logger.error(f"Search failed with status code: {response.status_code}")
                return None
            return SearchResponse.from_dict(response.json())
        except (requests.RequestException, ValueError, TypeError, AttributeError) as e:
            logger.error(f"Error performing search: {e}")
            return None

    def get_documents(
        self,
        max_results: int = 50,
        skip: int = 0,
        document_id_filter: Optional[str] = None,
    ) -> Optional[DocumentListResponse]:
        url = self.config.url_for(self.config.endpoints.documents)
        request = DocumentListRequest(max_results, skip, document_id_filter)

        try:
            response = self._session.post(
                url, json=request.to_dict(), timeout=self.config.timeout_seconds
            )
            if not response.ok:
                logger.error(f"Get documents failed with status code: {response.status_code}")
                return None
            return DocumentListResponse.from_dict(response.json())
        except (requests.RequestException, ValueError, TypeError, AttributeError) as e:
            logger.error(f"Error getting documents: {e}")
            return None

    def delete_document(self, document_id: str) -> bool:
        url = self.config.url_for(
            self.config.endpoints.documents, quote(document_id, safe="")
        )

        try:
            response = self._session.delete(url, timeout=self.config.timeout_seconds)
        except requests.RequestException as e:
            logger.error(f"Error deleting document with ID {document_id}: {e}")
            return False

        if not response.ok:
            logger.error(f"Delete document failed with status code: {response.status_code}")
            return False
        return True
