"""
Redis Configuration

Health check for the Redis message queue behind the managed realtime
transport. The local transport does not use Redis.
"""

import logging
from typing import Optional

import redis

from driftmind_web.config.transport_config import TransportConfig

logger = logging.getLogger(__name__)

HEALTH_CHECK_TIMEOUT_SECONDS = 2


def message_queue_health_check(transport: TransportConfig) -> Optional[bool]:
    """
    Check the message queue of a managed transport.

    Args:
        transport: Resolved realtime transport configuration

    Returns:
        None for the local transport, otherwise whether Redis answered a PING
    """
    if not transport.is_managed:
        return None

    try:
        client = redis.Redis.from_url(
            transport.connection_string,
            socket_connect_timeout=HEALTH_CHECK_TIMEOUT_SECONDS,
            socket_timeout=HEALTH_CHECK_TIMEOUT_SECONDS,
        )
        try:
            return bool(client.ping())
        finally:
            client.close()
    except (redis.RedisError, ValueError) as e:
        logger.warning(f"Message queue health check failed: {e}")
        return False
