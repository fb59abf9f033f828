"""
SocketIO Configuration

Configures Flask-SocketIO for the resolved realtime transport. The local
transport keeps all events in-process; the managed transport attaches a
message queue so multiple workers share one event stream.
"""

import logging
from typing import Optional

from flask_socketio import SocketIO

from driftmind_web.config.transport_config import TransportConfig

logger = logging.getLogger(__name__)

# Global SocketIO instance
socketio: Optional[SocketIO] = None


def init_socketio(app, transport: TransportConfig) -> SocketIO:
    """
    Initialize Flask-SocketIO for the given transport.

    Args:
        app: Flask application instance
        transport: Resolved realtime transport configuration

    Returns:
        SocketIO instance
    """
    global socketio

    options = {
        "cors_allowed_origins": "*",
        "async_mode": "threading",
        "logger": False,
        "engineio_logger": False,
        "ping_timeout": 60,
        "ping_interval": 25,
    }

    if transport.is_managed:
        options["message_queue"] = transport.connection_string
        options["channel"] = transport.application_name

    try:
        socketio = SocketIO(app, **options)
    except Exception as e:
        logger.error(f"Failed to initialize SocketIO: {e}")
        raise

    logger.info(
        f"SocketIO mode: {transport.mode.description}, "
        f"application: {transport.application_name}"
    )
    return socketio


def get_socketio() -> Optional[SocketIO]:
    """
    Get the global SocketIO instance.

    Returns:
        SocketIO instance or None if not initialized
    """
    return socketio


def is_socketio_enabled() -> bool:
    """
    Check if SocketIO has been initialized.

    Returns:
        bool: True if SocketIO is available
    """
    return socketio is not None


def reset_socketio() -> None:
    """Forget the global instance (used between application factories in tests)."""
    global socketio
    socketio = None
