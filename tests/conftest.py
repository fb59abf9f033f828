"""
Shared pytest fixtures and configuration for the DriftMind Web test suite.

This module provides:
- Hypothesis configuration for property-based testing
- A mocked upstream API client
- Application and test client fixtures built through the app factory
"""

from unittest.mock import Mock

import pytest
from hypothesis import HealthCheck, Phase, settings

from app_factory import create_app
from driftmind_web.config.settings import AppConfig, DriftMindApiConfig
from driftmind_web.config.socketio_config import reset_socketio
from driftmind_web.infrastructure.driftmind_api_client import DriftMindApiClient

from tests.fixtures.value_object_fixtures import create_file_result, create_token_result

# Register Hypothesis profiles
settings.register_profile(
    "default",
    max_examples=100,
    deadline=None,
    suppress_health_check=[HealthCheck.too_slow],
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.target, Phase.shrink],
)
settings.register_profile(
    "ci",
    max_examples=200,
    deadline=None,
    suppress_health_check=[HealthCheck.too_slow],
)
settings.register_profile(
    "dev",
    max_examples=10,
    deadline=None,
    suppress_health_check=[HealthCheck.too_slow],
)
settings.load_profile("default")


# =============================================================================
# Configuration Fixtures
# =============================================================================

@pytest.fixture
def api_config() -> DriftMindApiConfig:
    """Upstream API configuration pointing at a fake host."""
    return DriftMindApiConfig(base_url="http://driftmind.test", max_upload_size_mb=1)


@pytest.fixture
def app_config(api_config) -> AppConfig:
    """Application configuration with SocketIO disabled."""
    return AppConfig(api=api_config, socketio_enabled=False)


# =============================================================================
# Upstream Client Fixtures
# =============================================================================

@pytest.fixture
def mock_api_client():
    """
    Provide a mock DriftMindApiClient.

    Token issuance and redemption succeed by default.
    """
    client = Mock(spec=DriftMindApiClient)
    client.request_download_token.return_value = create_token_result()
    client.fetch_file.return_value = create_file_result()
    return client


# =============================================================================
# Application Fixtures
# =============================================================================

@pytest.fixture
def app(app_config, mock_api_client):
    """Create the Flask app with the mocked upstream client."""
    application = create_app(app_config, api_client=mock_api_client)
    application.config["TESTING"] = True
    yield application
    reset_socketio()


@pytest.fixture
def client(app):
    """Create test client."""
    return app.test_client()
