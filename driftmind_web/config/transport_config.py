"""
Realtime Transport Configuration

Two-variant configuration for the Socket.IO transport: a local in-memory
transport, or a managed transport backed by a message queue so that several
worker processes can share one event stream.
"""

import os
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Optional


DEFAULT_APPLICATION_NAME = "DriftMindWeb"


class TransportMode(Enum):
    """Resolved realtime transport mode."""

    LOCAL = "local"
    MANAGED = "managed"

    @property
    def description(self) -> str:
        if self is TransportMode.MANAGED:
            return "Managed Socket.IO (message queue)"
        return "Local Socket.IO (in-memory)"


@dataclass(frozen=True)
class TransportConfig:
    """
    Realtime transport settings resolved once at startup.

    A LOCAL config carries no connection string. A MANAGED config always
    carries a non-empty connection string and an application name, which is
    used as the message queue channel.
    """

    mode: TransportMode
    connection_string: Optional[str] = None
    application_name: str = DEFAULT_APPLICATION_NAME

    def __post_init__(self):
        if self.mode is TransportMode.MANAGED and not self.connection_string:
            raise ValueError("Managed transport requires a connection string")

    @classmethod
    def local(cls, application_name: str = DEFAULT_APPLICATION_NAME) -> "TransportConfig":
        return cls(TransportMode.LOCAL, None, application_name)

    @classmethod
    def managed(
        cls, connection_string: str, application_name: str = DEFAULT_APPLICATION_NAME
    ) -> "TransportConfig":
        return cls(TransportMode.MANAGED, connection_string, application_name)

    @property
    def is_managed(self) -> bool:
        return self.mode is TransportMode.MANAGED

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "TransportConfig":
        """
        Resolve the transport mode from environment variables.

        The managed transport is selected only when REALTIME_MANAGED_ENABLED is
        true and REALTIME_CONNECTION_STRING is non-empty; anything else falls
        back to the local transport.
        """
        env = os.environ if environ is None else environ

        enabled = env.get("REALTIME_MANAGED_ENABLED", "false").lower() == "true"
        connection_string = (env.get("REALTIME_CONNECTION_STRING") or "").strip()
        application_name = (
            env.get("REALTIME_APPLICATION_NAME") or DEFAULT_APPLICATION_NAME
        )

        if enabled and connection_string:
            return cls.managed(connection_string, application_name)
        return cls.local(application_name)

    def to_dict(self) -> Dict[str, Any]:
        """Public description of the transport, never includes the connection string."""
        return {
            "mode": self.mode.description,
            "managed": self.is_managed,
            "applicationName": self.application_name,
        }
