"""
API v1 - DriftMind Web REST API

Versioned gateway endpoints with OpenAPI/Swagger documentation.
"""

from flask import Blueprint
from flask_restx import Api

from .models import ALL_MODELS
from .namespaces import document_ns, download_ns, search_ns, system_ns


def create_api_blueprint(url_prefix: str = "/api") -> Blueprint:
    """
    Build the API blueprint with all namespaces registered.

    A new Blueprint and Api are created per call so several applications
    (one per test, for instance) never share routing state.

    Args:
        url_prefix: Mount point of the API

    Returns:
        Blueprint ready to be registered on a Flask app
    """
    blueprint = Blueprint("api", __name__, url_prefix=url_prefix)

    api = Api(
        blueprint,
        version="1.0",
        title="DriftMind Web API",
        description="Gateway for DriftMind document upload, search and secure downloads",
        doc="/docs",  # Swagger UI at /api/docs
    )

    for model in ALL_MODELS:
        api.models[model.name] = model

    api.add_namespace(download_ns, path="/download")
    api.add_namespace(document_ns, path="/documents")
    api.add_namespace(search_ns, path="/search")
    api.add_namespace(system_ns, path="/system")

    return blueprint
