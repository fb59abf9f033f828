"""
WebSocket Event Handlers

Announces the realtime transport to connecting clients so they know whether
events are shared across workers.
"""

import logging

from flask import request
from flask_socketio import emit

from driftmind_web.config.socketio_config import get_socketio

logger = logging.getLogger(__name__)


def register_socketio_events(app):
    """
    Register WebSocket event handlers with the Flask-SocketIO instance.

    Args:
        app: Flask application instance
    """
    socketio = get_socketio()

    if socketio is None:
        logger.warning("SocketIO not initialized, skipping event registration")
        return

    transport = app.app_config.transport.to_dict()

    @socketio.on("connect")
    def handle_connect():
        """Handle client connection."""
        client_id = request.sid
        logger.info(f"Client connected: {client_id}")
        emit(
            "connected",
            {"message": "Connected to server", "client_id": client_id, "transport": transport},
        )

    @socketio.on("disconnect")
    def handle_disconnect(*args):
        """Handle client disconnection."""
        logger.info(f"Client disconnected: {request.sid}")

    @socketio.on("get_transport")
    def handle_get_transport():
        """Reply with the transport description."""
        emit("transport", transport)
