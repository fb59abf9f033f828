"""
Health status shared by the /health route and the system namespace.
"""

from typing import Any, Dict, Tuple

from flask import Flask

from driftmind_web.config.redis_config import message_queue_health_check
from driftmind_web.config.socketio_config import is_socketio_enabled


def get_health_status(app: Flask) -> Tuple[Dict[str, Any], int]:
    """
    Get health status of the gateway.

    The upstream DriftMind API is not contacted. The Redis message queue is
    pinged only when the managed realtime transport is configured.

    Args:
        app: Flask application instance

    Returns:
        Tuple of (health_status_dict, http_status_code)
    """
    config = getattr(app, "app_config", None)

    health_status: Dict[str, Any] = {
        "status": "ok",
        "message": "gateway ready",
        "upstream": config.api.base_url if config else "unknown",
        "socketio": "available" if is_socketio_enabled() else "not_configured",
        "messageQueue": "not_configured",
        "transport": config.transport.to_dict() if config else None,
    }

    if config is not None:
        queue_ok = message_queue_health_check(config.transport)
        if queue_ok is True:
            health_status["messageQueue"] = "connected"
        elif queue_ok is False:
            health_status["messageQueue"] = "disconnected"
            health_status["status"] = "degraded"

    if getattr(app, "container", None) is None:
        health_status["status"] = "degraded"
        health_status["message"] = "services not initialized"

    status_code = 200 if health_status["status"] == "ok" else 503
    return health_status, status_code
