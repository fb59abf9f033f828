"""
API Namespaces - Organized endpoint groups
"""

import os

from flask import Response, current_app, request
from flask_restx import Namespace, Resource
from werkzeug.exceptions import RequestEntityTooLarge

from driftmind_web.api.health import get_health_status
from driftmind_web.api.v1.models import (
    document_list_response,
    download_file_request,
    download_token_request,
    download_token_response,
    error_response,
    health_response,
    search_request,
    search_response,
    text_upload_request,
    upload_response,
)
from driftmind_web.application.document_service import DocumentService
from driftmind_web.application.download_gateway import DownloadGateway
from driftmind_web.domain.downloads import DEFAULT_EXPIRATION_MINUTES, FailureReason
from driftmind_web.domain.errors import (
    ApplicationError,
    ErrorCategory,
    FileTooLargeError,
    ValidationError,
    create_error_response,
)
from driftmind_web.domain.json_fields import format_timestamp, lower_keys

# Status codes for document failures by category
_CATEGORY_STATUS = {
    ErrorCategory.UPSTREAM_FAILURE: 502,
    ErrorCategory.FILE_TOO_LARGE: 413,
    ErrorCategory.VALIDATION_ERROR: 400,
}


# =============================================================================
# Download Namespace - Secure token-gated downloads
# =============================================================================

download_ns = Namespace("download", description="Secure file download operations")


@download_ns.route("/token")
class DownloadToken(Resource):
    """Issue download tokens"""

    @download_ns.doc("issue_download_token")
    @download_ns.expect(download_token_request)
    @download_ns.response(200, "Token issued", download_token_response)
    @download_ns.response(400, "Bad Request", error_response)
    @download_ns.response(500, "Internal Server Error", error_response)
    def post(self):
        """
        Generate a secure download token for a document

        The expiration is bounded to at most 60 minutes; values below one
        minute fall back to 15.
        """
        data = _json_body()
        document_id = data.get("documentid")

        try:
            expiration_minutes = _int_field(
                data, "expirationminutes", "expirationMinutes", DEFAULT_EXPIRATION_MINUTES
            )
            if document_id is not None and not isinstance(document_id, str):
                raise ValidationError("documentId must be a string")

            gateway = current_app.container.resolve(DownloadGateway)
            result = gateway.issue_token(document_id or "", expiration_minutes)

            if not result.success:
                if result.failure_reason is FailureReason.TRANSPORT_FAILURE:
                    return create_error_response(
                        ErrorCategory.TRANSPORT_FAILURE, status_code=500
                    )
                return create_error_response(
                    ErrorCategory.TOKEN_NOT_GENERATED, status_code=400
                )

            return {
                "success": True,
                "token": result.token,
                "documentId": result.document_id,
                "expiresAt": format_timestamp(result.expires_at),
                "downloadUrl": self.api.url_for(DownloadFile),
                "expirationMinutes": result.expiration_minutes,
            }, 200

        except ValidationError as e:
            return create_error_response(
                ErrorCategory.VALIDATION_ERROR, e.message, status_code=400
            )
        except Exception as e:
            current_app.logger.exception(
                f"Error generating download token for document {document_id}: {e}"
            )
            return create_error_response(ErrorCategory.SYSTEM_ERROR, status_code=500)


@download_ns.route("/file")
class DownloadFile(Resource):
    """Redeem download tokens"""

    @download_ns.doc("download_file")
    @download_ns.expect(download_file_request)
    @download_ns.response(200, "File content")
    @download_ns.response(400, "Invalid or expired token", error_response)
    @download_ns.response(500, "Internal Server Error", error_response)
    def post(self):
        """
        Download a file using a secure token in the request body
        """
        token = _json_body().get("token")
        if token is not None and not isinstance(token, str):
            return create_error_response(
                ErrorCategory.VALIDATION_ERROR, "token must be a string", status_code=400
            )
        return _deliver_file(token or "")

    @download_ns.doc("download_file_via_get", params={"token": "Download token"})
    @download_ns.response(200, "File content")
    @download_ns.response(400, "Invalid or expired token")
    @download_ns.response(500, "Internal Server Error", error_response)
    def get(self):
        """
        Download a file using a secure token in the query string

        Same behavior as the POST variant, except that a missing token is
        reported as a plain-text body.
        """
        token = request.args.get("token", "")
        if not token.strip():
            return Response("token is required", status=400, mimetype="text/plain")
        return _deliver_file(token)


def _deliver_file(token: str):
    """
    Redeem a token and write the file as an attachment response.

    Shared by both redemption endpoints so their behavior cannot diverge.
    """
    try:
        gateway = current_app.container.resolve(DownloadGateway)
        result = gateway.redeem_token(token)

        if not result.success:
            if result.failure_reason is FailureReason.TRANSPORT_FAILURE:
                return create_error_response(
                    ErrorCategory.TRANSPORT_FAILURE, status_code=500
                )
            return create_error_response(ErrorCategory.DOWNLOAD_FAILED, status_code=400)

        # WSGI writes header values as Latin-1
        try:
            result.content_disposition.encode("latin-1")
        except UnicodeEncodeError:
            current_app.logger.error(
                f"Content-Disposition for {result.file_name!r} is not Latin-1 encodable"
            )
            return create_error_response(ErrorCategory.SYSTEM_ERROR, status_code=500)

        response = Response(result.file_bytes, status=200, content_type=result.content_type)
        response.headers["Content-Disposition"] = result.content_disposition
        return response

    except ValidationError as e:
        return create_error_response(
            ErrorCategory.VALIDATION_ERROR, e.message, status_code=400
        )
    except Exception as e:
        current_app.logger.exception(f"Error downloading file: {e}")
        return create_error_response(ErrorCategory.SYSTEM_ERROR, status_code=500)


# =============================================================================
# Document Namespace - Upload, list and delete
# =============================================================================

document_ns = Namespace("documents", description="Document management operations")


@document_ns.route("")
class DocumentList(Resource):
    """List documents"""

    @document_ns.doc(
        "list_documents",
        params={
            "maxResults": "Maximum documents to return (1-100)",
            "skip": "Number of documents to skip",
            "documentIdFilter": "Only documents whose ID matches",
        },
    )
    @document_ns.response(200, "Success", document_list_response)
    @document_ns.response(502, "Upstream failure", error_response)
    def get(self):
        """List indexed documents"""
        return _handle_document_call(
            lambda service: service.list_documents(
                max_results=request.args.get("maxResults", 50, type=int),
                skip=request.args.get("skip", 0, type=int),
                document_id_filter=request.args.get("documentIdFilter"),
            ).to_dict()
        )


@document_ns.route("/<string:document_id>")
@document_ns.param("document_id", "The document identifier")
class Document(Resource):
    """Single document operations"""

    @document_ns.doc("delete_document")
    @document_ns.response(204, "Document deleted")
    @document_ns.response(400, "Bad Request", error_response)
    @document_ns.response(502, "Upstream failure", error_response)
    def delete(self, document_id):
        """Delete a document and all of its chunks"""

        def remove(service: DocumentService):
            service.delete_document(document_id)
            return "", 204

        return _handle_document_call(remove, raw=True)


@document_ns.route("/upload")
class DocumentUpload(Resource):
    """Upload files"""

    @document_ns.doc(
        "upload_document",
        params={
            "file": {"in": "formData", "type": "file", "required": True},
            "documentId": {"in": "formData", "type": "string"},
            "metadata": {"in": "formData", "type": "string"},
            "chunkSize": {"in": "formData", "type": "integer", "default": 1000},
            "chunkOverlap": {"in": "formData", "type": "integer", "default": 200},
        },
    )
    @document_ns.response(200, "Uploaded", upload_response)
    @document_ns.response(400, "Bad Request", error_response)
    @document_ns.response(413, "File Too Large", error_response)
    @document_ns.response(502, "Upstream failure", error_response)
    def post(self):
        """Upload a file for indexing"""

        def send(service: DocumentService):
            upload = request.files.get("file")
            if upload is None or not upload.filename:
                raise ValidationError("file is required")

            upload.stream.seek(0, os.SEEK_END)
            size = upload.stream.tell()
            upload.stream.seek(0)

            return service.upload_file(
                upload.stream,
                upload.filename,
                size,
                document_id=request.form.get("documentId"),
                metadata=request.form.get("metadata"),
                chunk_size=request.form.get("chunkSize", 1000, type=int),
                chunk_overlap=request.form.get("chunkOverlap", 200, type=int),
            ).to_dict()

        return _handle_document_call(send)


@document_ns.route("/text")
class TextUpload(Resource):
    """Upload free text"""

    @document_ns.doc("upload_text")
    @document_ns.expect(text_upload_request)
    @document_ns.response(200, "Uploaded", upload_response)
    @document_ns.response(400, "Bad Request", error_response)
    @document_ns.response(502, "Upstream failure", error_response)
    def post(self):
        """Store free text as a quick note document"""
        data = _json_body()
        return _handle_document_call(
            lambda service: service.upload_text(
                _str_field(data, "text", "text"),
                document_id=_str_field(data, "documentid", "documentId"),
                metadata=_str_field(data, "metadata", "metadata"),
            ).to_dict()
        )


# =============================================================================
# Search Namespace
# =============================================================================

search_ns = Namespace("search", description="Semantic search operations")


@search_ns.route("")
class Search(Resource):
    """Search documents"""

    @search_ns.doc("search")
    @search_ns.expect(search_request)
    @search_ns.response(200, "Success", search_response)
    @search_ns.response(400, "Bad Request", error_response)
    @search_ns.response(502, "Upstream failure", error_response)
    def post(self):
        """Run a semantic search, optionally with a generated answer"""
        data = _json_body()
        return _handle_document_call(
            lambda service: service.search(
                _str_field(data, "query", "query"),
                max_results=_int_field(data, "maxresults", "maxResults", 10),
                use_semantic_search=_bool_field(
                    data, "usesemanticsearch", "useSemanticSearch", True
                ),
                document_id=_str_field(data, "documentid", "documentId"),
                include_answer=_bool_field(data, "includeanswer", "includeAnswer", True),
            ).to_dict()
        )


# =============================================================================
# System Namespace - System health and monitoring
# =============================================================================

system_ns = Namespace("system", description="System health and monitoring operations")


@system_ns.route("/health")
class Health(Resource):
    """System health check"""

    @system_ns.doc("health_check")
    @system_ns.response(200, "Healthy", health_response)
    @system_ns.response(503, "Service Degraded", health_response)
    def get(self):
        """
        Check gateway health and realtime transport configuration
        """
        return get_health_status(current_app)


# =============================================================================
# Helper Functions
# =============================================================================

def _json_body() -> dict:
    """Request JSON with lower-cased keys; property names bind case-insensitively."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return {}
    return lower_keys(data)


def _int_field(data: dict, key: str, name: str, default: int) -> int:
    value = data.get(key)
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{name} must be an integer")
    return value


def _bool_field(data: dict, key: str, name: str, default: bool) -> bool:
    value = data.get(key)
    if value is None:
        return default
    if not isinstance(value, bool):
        raise ValidationError(f"{name} must be a boolean")
    return value


def _str_field(data: dict, key: str, name: str):
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise ValidationError(f"{name} must be a string")
    return value


def _handle_document_call(call, raw: bool = False):
    """
    Run a DocumentService call and map its errors to responses.

    Args:
        call: Callable receiving the DocumentService
        raw: When True the callable returns the full response tuple itself
    """
    try:
        service = current_app.container.resolve(DocumentService)
        result = call(service)
        return result if raw else (result, 200)

    except FileTooLargeError as e:
        return create_error_response(ErrorCategory.FILE_TOO_LARGE, e.message, status_code=413)
    except RequestEntityTooLarge:
        return create_error_response(ErrorCategory.FILE_TOO_LARGE, status_code=413)
    except ValidationError as e:
        return create_error_response(ErrorCategory.VALIDATION_ERROR, e.message, status_code=400)
    except ApplicationError as e:
        return create_error_response(
            e.category, e.message, status_code=_CATEGORY_STATUS.get(e.category, 500)
        )
    except Exception as e:
        current_app.logger.exception(f"Unexpected error in document operation: {e}")
        return create_error_response(ErrorCategory.SYSTEM_ERROR, status_code=500)
