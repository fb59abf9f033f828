"""
main.py

Flask gateway in front of the DriftMind API: document upload, semantic
search, document management and secure token-gated downloads.

Dependencies:
  - Python packages: Flask, flask-restx, flask-cors, flask-socketio, requests, redis
  - Infrastructure: DriftMind API; Redis only for the managed realtime transport

Notes:
  - API endpoints available at /api/ with Swagger docs at /api/docs
  - Uses application factory pattern for better testability
"""

import logging
import os

from app_factory import create_app
from driftmind_web.config.settings import AppConfig
from driftmind_web.config.socketio_config import get_socketio, is_socketio_enabled

config = AppConfig.from_env()

logging.basicConfig(
    level=config.log_level,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)

app = create_app(config)

if __name__ == "__main__":
    host = os.getenv("FLASK_HOST", "0.0.0.0")
    port = int(os.getenv("FLASK_PORT", 8000))
    debug = os.getenv("FLASK_DEBUG", "false").lower() == "true" and not config.is_production

    # Use SocketIO.run if available, otherwise fall back to app.run
    if is_socketio_enabled():
        socketio = get_socketio()
        socketio.run(app, host=host, port=port, debug=debug, allow_unsafe_werkzeug=True)
    else:
        app.run(host=host, port=port, debug=debug)
