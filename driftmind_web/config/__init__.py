"""Configuration package."""

from driftmind_web.config.settings import AppConfig, DriftMindApiConfig, EndpointPaths
from driftmind_web.config.transport_config import TransportConfig, TransportMode

__all__ = [
    "AppConfig",
    "DriftMindApiConfig",
    "EndpointPaths",
    "TransportConfig",
    "TransportMode",
]
