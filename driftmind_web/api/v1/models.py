"""
API Models for request/response validation and Swagger documentation
"""

from flask_restx import Model, fields

# =============================================================================
# Request Models
# =============================================================================

download_token_request = Model(
    "DownloadTokenRequest",
    {
        "documentId": fields.String(
            required=True, description="Document to issue a token for", example="doc-1"
        ),
        "expirationMinutes": fields.Integer(
            description="Token lifetime in minutes (bounded to 1-60)",
            default=15,
            example=15,
        ),
    },
)

download_file_request = Model(
    "DownloadFileRequest",
    {
        "token": fields.String(required=True, description="Download token"),
    },
)

search_request = Model(
    "SearchRequest",
    {
        "query": fields.String(required=True, description="Search query"),
        "maxResults": fields.Integer(description="Maximum results (1-50)", default=10),
        "useSemanticSearch": fields.Boolean(description="Use semantic search", default=True),
        "documentId": fields.String(description="Restrict to one document", allow_null=True),
        "includeAnswer": fields.Boolean(description="Generate an answer", default=True),
    },
)

text_upload_request = Model(
    "TextUploadRequest",
    {
        "text": fields.String(required=True, description="Text to store as a quick note"),
        "documentId": fields.String(description="Optional document ID", allow_null=True),
        "metadata": fields.String(description="Optional metadata", allow_null=True),
    },
)

# =============================================================================
# Response Models
# =============================================================================

download_token_response = Model(
    "DownloadTokenResponse",
    {
        "success": fields.Boolean(description="Always true on 200"),
        "token": fields.String(description="Opaque download token"),
        "documentId": fields.String(description="Document the token is scoped to"),
        "expiresAt": fields.String(description="Token expiry (ISO timestamp)", allow_null=True),
        "downloadUrl": fields.String(description="URL of the file download endpoint"),
        "expirationMinutes": fields.Integer(description="Effective token lifetime"),
    },
)

upload_response = Model(
    "FileUploadResponse",
    {
        "documentId": fields.String,
        "chunksCreated": fields.Integer,
        "success": fields.Boolean,
        "message": fields.String,
        "fileName": fields.String,
        "fileType": fields.String,
        "fileSizeInBytes": fields.Integer,
    },
)

search_result = Model(
    "SearchResult",
    {
        "id": fields.String,
        "content": fields.String,
        "documentId": fields.String,
        "chunkIndex": fields.Integer,
        "score": fields.Float,
        "metadata": fields.String(allow_null=True),
        "createdAt": fields.String(allow_null=True),
    },
)

search_response = Model(
    "SearchResponse",
    {
        "query": fields.String,
        "results": fields.List(fields.Nested(search_result)),
        "generatedAnswer": fields.String(allow_null=True),
        "success": fields.Boolean,
        "totalResults": fields.Integer,
    },
)

document_info = Model(
    "DocumentInfo",
    {
        "documentId": fields.String,
        "chunkCount": fields.Integer,
        "fileName": fields.String(allow_null=True),
        "fileType": fields.String(allow_null=True),
        "fileSizeInBytes": fields.Integer(allow_null=True),
        "metadata": fields.String(allow_null=True),
        "createdAt": fields.String(allow_null=True),
        "lastUpdated": fields.String(allow_null=True),
        "sampleContent": fields.List(fields.String),
    },
)

document_list_response = Model(
    "DocumentListResponse",
    {
        "documents": fields.List(fields.Nested(document_info)),
        "totalDocuments": fields.Integer,
        "returnedDocuments": fields.Integer,
        "success": fields.Boolean,
        "message": fields.String,
    },
)

error_response = Model(
    "ErrorResponse",
    {
        "success": fields.Boolean(description="Always false", default=False),
        "message": fields.String(description="User-facing error message"),
    },
)

realtime_transport = Model(
    "RealtimeTransport",
    {
        "mode": fields.String(description="Transport description"),
        "managed": fields.Boolean(description="Whether a message queue is used"),
        "applicationName": fields.String(description="Application / channel name"),
    },
)

health_response = Model(
    "HealthResponse",
    {
        "status": fields.String(description="Overall health status", enum=["ok", "degraded"]),
        "message": fields.String(description="Health message"),
        "upstream": fields.String(description="Configured DriftMind API base URL"),
        "socketio": fields.String(description="SocketIO availability status"),
        "messageQueue": fields.String(
            description="Redis message queue status",
            enum=["connected", "disconnected", "not_configured"],
        ),
        "transport": fields.Nested(realtime_transport),
    },
)

ALL_MODELS = [
    download_token_request,
    download_file_request,
    search_request,
    text_upload_request,
    download_token_response,
    upload_response,
    search_result,
    search_response,
    document_info,
    document_list_response,
    error_response,
    realtime_transport,
    health_response,
]
