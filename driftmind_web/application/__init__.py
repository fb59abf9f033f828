"""
Application Layer

Application services that orchestrate the domain and the upstream API client.
"""

from .dependency_container import DependencyContainer, DependencyNotFoundError
from .document_service import DocumentService
from .download_gateway import DownloadGateway
from .download_result import FileDeliveryResult, TokenIssueResult
from .event_publisher import EventPublisher

__all__ = [
    "DependencyContainer",
    "DependencyNotFoundError",
    "DocumentService",
    "DownloadGateway",
    "EventPublisher",
    "FileDeliveryResult",
    "TokenIssueResult",
]
