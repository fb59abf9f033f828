"""
Application Settings

Environment-based configuration for the DriftMind web gateway.
All settings are resolved once at process start into frozen dataclasses
and injected by reference into the components that need them.
"""

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

from driftmind_web.config.transport_config import TransportConfig


DEFAULT_API_BASE_URL = "http://localhost:5175"


@dataclass(frozen=True)
class EndpointPaths:
    """Upstream endpoint paths, each overridable from the environment."""

    upload: str = "/uploads"
    search: str = "/search"
    documents: str = "/documents"
    download_token: str = "/download/token"
    download_file: str = "/download/file"


@dataclass(frozen=True)
class DriftMindApiConfig:
    """
    Upstream DriftMind API configuration.

    Attributes:
        base_url: Base URL of the upstream API (no trailing slash)
        endpoints: Endpoint paths appended to base_url
        timeout_seconds: Transport timeout for every outbound call
        max_upload_size_mb: Largest accepted upload, in megabytes
    """

    base_url: str = DEFAULT_API_BASE_URL
    endpoints: EndpointPaths = field(default_factory=EndpointPaths)
    timeout_seconds: float = 100.0
    max_upload_size_mb: int = 3

    @property
    def max_upload_size_bytes(self) -> int:
        return self.max_upload_size_mb * 1024 * 1024

    def url_for(self, endpoint: str, *segments: str) -> str:
        """Join base_url, an endpoint path and optional extra path segments."""
        url = f"{self.base_url}{endpoint}"
        for segment in segments:
            url = f"{url}/{segment}"
        return url

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "DriftMindApiConfig":
        """
        Load upstream API configuration from environment variables.

        Args:
            environ: Mapping to read from, defaults to os.environ

        Returns:
            DriftMindApiConfig instance
        """
        env = os.environ if environ is None else environ
        defaults = EndpointPaths()

        endpoints = EndpointPaths(
            upload=env.get("DRIFTMIND_API_UPLOAD_ENDPOINT", defaults.upload),
            search=env.get("DRIFTMIND_API_SEARCH_ENDPOINT", defaults.search),
            documents=env.get("DRIFTMIND_API_DOCUMENTS_ENDPOINT", defaults.documents),
            download_token=env.get(
                "DRIFTMIND_API_DOWNLOAD_TOKEN_ENDPOINT", defaults.download_token
            ),
            download_file=env.get(
                "DRIFTMIND_API_DOWNLOAD_FILE_ENDPOINT", defaults.download_file
            ),
        )

        base_url = env.get("DRIFTMIND_API_BASE_URL") or DEFAULT_API_BASE_URL

        return cls(
            base_url=base_url.rstrip("/"),
            endpoints=endpoints,
            timeout_seconds=float(env.get("DRIFTMIND_API_TIMEOUT_SECONDS", "100")),
            max_upload_size_mb=int(env.get("DRIFTMIND_MAX_UPLOAD_SIZE_MB", "3")),
        )


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    api: DriftMindApiConfig = field(default_factory=DriftMindApiConfig)
    transport: TransportConfig = field(default_factory=TransportConfig.local)
    flask_env: str = "development"
    socketio_enabled: bool = True
    log_level: str = "INFO"

    @property
    def is_production(self) -> bool:
        return self.flask_env == "production"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "AppConfig":
        env = os.environ if environ is None else environ
        return cls(
            api=DriftMindApiConfig.from_env(env),
            transport=TransportConfig.from_env(env),
            flask_env=env.get("FLASK_ENV", "development"),
            socketio_enabled=env.get("SOCKETIO_ENABLED", "true").lower() == "true",
            log_level=env.get("LOG_LEVEL", "INFO").upper(),
        )
