"""
Application Factory

Creates and configures the Flask application with all dependencies.
Configuration is resolved once and injected into every component, and the
upstream API client can be replaced for tests.
"""

import logging
from typing import Optional

from flask import Flask, jsonify
from flask_cors import CORS

from driftmind_web.api.health import get_health_status
from driftmind_web.api.websocket_events import register_socketio_events
from driftmind_web.application.dependency_container import DependencyContainer
from driftmind_web.application.document_service import DocumentService
from driftmind_web.application.download_gateway import DownloadGateway
from driftmind_web.application.event_publisher import EventPublisher
from driftmind_web.config.settings import AppConfig, DriftMindApiConfig
from driftmind_web.config.socketio_config import init_socketio, reset_socketio
from driftmind_web.infrastructure.driftmind_api_client import DriftMindApiClient

logger = logging.getLogger(__name__)


def create_app(
    config: Optional[AppConfig] = None,
    api_client: Optional[DriftMindApiClient] = None,
) -> Flask:
    """
    Create and configure Flask application.

    Args:
        config: Application configuration, loaded from the environment if None
        api_client: Upstream API client, built from config if None

    Returns:
        Configured Flask application
    """
    if config is None:
        config = AppConfig.from_env()

    app = Flask(__name__)
    app.config["MAX_CONTENT_LENGTH"] = config.api.max_upload_size_bytes
    app.app_config = config

    CORS(
        app,
        resources={
            r"/*": {
                "origins": "*",
                "methods": ["GET", "POST", "DELETE", "OPTIONS"],
                "allow_headers": ["Content-Type", "Authorization"],
                "expose_headers": ["Content-Type", "Content-Disposition"],
                "max_age": 3600,
            }
        },
    )

    _initialize_realtime(app, config)
    _initialize_services(app, config, api_client)
    _register_blueprints(app)
    _register_health_endpoint(app)

    return app


def _initialize_realtime(app: Flask, config: AppConfig) -> None:
    """
    Initialize SocketIO for the resolved transport (optional).

    Args:
        app: Flask application
        config: Application configuration
    """
    reset_socketio()

    if not config.socketio_enabled:
        logger.info("SocketIO disabled")
        return

    try:
        app.socketio = init_socketio(app, config.transport)
        register_socketio_events(app)
        logger.info("SocketIO initialized successfully")
    except Exception as e:
        logger.warning(f"Could not initialize SocketIO: {e}")


def _initialize_services(
    app: Flask, config: AppConfig, api_client: Optional[DriftMindApiClient]
) -> None:
    """
    Register application services in a DependencyContainer attached to the app.

    API resources resolve services with current_app.container.resolve().

    Args:
        app: Flask application
        config: Application configuration
        api_client: Optional pre-built upstream client
    """
    container = DependencyContainer()

    container.register_singleton(AppConfig, config)
    container.register_singleton(DriftMindApiConfig, config.api)

    if api_client is None:
        api_client = DriftMindApiClient(config.api)
    container.register_singleton(DriftMindApiClient, api_client)

    event_publisher = EventPublisher()
    container.setup_event_handlers(event_publisher)
    container.register_singleton(EventPublisher, event_publisher)

    container.register_singleton(
        DownloadGateway, DownloadGateway(api_client, event_publisher)
    )
    container.register_singleton(
        DocumentService, DocumentService(api_client, config.api, event_publisher)
    )

    app.container = container
    logger.info(f"Application services initialized, upstream API at {config.api.base_url}")


def _register_blueprints(app: Flask) -> None:
    """
    Register API blueprints.

    Args:
        app: Flask application
    """
    from driftmind_web.api.v1 import create_api_blueprint

    app.register_blueprint(create_api_blueprint())
    logger.info("API registered at /api with Swagger UI at /api/docs")


def _register_health_endpoint(app: Flask) -> None:
    """
    Register health check endpoint.

    Args:
        app: Flask application
    """

    @app.route("/health", methods=["GET"])
    def health():
        """
        Health check endpoint.
        Returns gateway status and the realtime transport configuration.
        """
        health_status, status_code = get_health_status(app)
        return jsonify(health_status), status_code
