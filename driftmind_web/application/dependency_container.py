"""
Service registry for the gateway.

app_factory registers every service once at startup and API resources look
them up with current_app.container.resolve(ServiceType).
"""

import logging
import threading
from typing import Any, Callable, Dict, Iterable, Optional, Type, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

EVENTS_LOGGER_NAME = "driftmind_web.events"


class DependencyNotFoundError(LookupError):
    """No service is registered under the requested type."""


class DependencyContainer:
    """
    Type-keyed registry of shared service instances, guarded by one lock.
    """

    def __init__(self):
        self._instances: Dict[type, Any] = {}
        self._lock = threading.Lock()

    def register_singleton(self, service_type: Type[T], instance: T) -> None:
        """Share one instance for every resolve() of service_type."""
        with self._lock:
            self._instances[service_type] = instance
        logger.debug(f"Registered shared {service_type.__name__}")

    def resolve(self, service_type: Type[T]) -> T:
        """
        Look up the service registered for service_type.

        Raises:
            DependencyNotFoundError: If nothing is registered for the type
        """
        with self._lock:
            try:
                return self._instances[service_type]
            except KeyError:
                raise DependencyNotFoundError(
                    f"{service_type.__name__} is not registered"
                ) from None

    def setup_event_handlers(
        self,
        event_publisher,
        handler_factories: Optional[Iterable[Callable[[], Any]]] = None,
    ) -> None:
        """
        Subscribe event handlers to every domain event.

        Args:
            event_publisher: EventPublisher to subscribe to
            handler_factories: Callables returning objects with a handle(event)
                method. Defaults to a LoggingEventHandler writing to the
                "driftmind_web.events" logger.
        """
        from driftmind_web.domain.events import DomainEvent
        from driftmind_web.infrastructure.event_handlers import LoggingEventHandler

        if handler_factories is None:
            handler_factories = [
                lambda: LoggingEventHandler(logging.getLogger(EVENTS_LOGGER_NAME))
            ]

        for factory in handler_factories:
            name = getattr(factory, "__name__", repr(factory))
            try:
                handler = factory()
            except Exception as e:
                logger.error(f"Skipping event handler {name}: {e}")
                continue
            event_publisher.subscribe(DomainEvent, handler.handle)
            logger.debug(f"Subscribed event handler {type(handler).__name__}")
