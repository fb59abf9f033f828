"""
Unit tests for the health endpoints.
"""

from unittest.mock import patch

from driftmind_web.api.health import get_health_status


def test_root_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    data = response.get_json()
    assert data["status"] == "ok"
    assert data["upstream"] == "http://driftmind.test"
    assert data["socketio"] == "not_configured"
    assert data["messageQueue"] == "not_configured"
    assert data["transport"] == {
        "mode": "Local Socket.IO (in-memory)",
        "managed": False,
        "applicationName": "DriftMindWeb",
    }


def test_system_health_matches_root(client):
    assert client.get("/api/system/health").get_json() == client.get("/health").get_json()


def test_degraded_without_container(app):
    app.container = None

    health, status = get_health_status(app)

    assert status == 503
    assert health["status"] == "degraded"


@patch("driftmind_web.api.health.message_queue_health_check", return_value=False)
def test_degraded_when_message_queue_unreachable(mock_check, app):
    health, status = get_health_status(app)

    assert status == 503
    assert health["messageQueue"] == "disconnected"
