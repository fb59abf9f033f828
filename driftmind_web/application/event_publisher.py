"""
Event Publisher

Synchronous in-process dispatch of domain events to subscribed callables.
"""

import logging
from threading import Lock
from typing import Callable, Dict, List, Type

from driftmind_web.domain.events import DomainEvent

logger = logging.getLogger(__name__)

EventHandler = Callable[[DomainEvent], None]


def _handler_name(handler: EventHandler) -> str:
    return getattr(handler, "__qualname__", None) or repr(handler)


class EventPublisher:
    """
    Dispatches each published event to the handlers subscribed to its class
    or to any of its base classes, most specific class first.

    A failing handler is logged and skipped; the request that published the
    event is never affected. Safe to share between request threads.
    """

    def __init__(self):
        self._subscriptions: Dict[Type[DomainEvent], List[EventHandler]] = {}
        self._lock = Lock()

    def subscribe(self, event_type: Type[DomainEvent], handler: EventHandler) -> None:
        """
        Call handler for every event that is an instance of event_type.

        Subscribing to DomainEvent receives all events.
        """
        with self._lock:
            self._subscriptions.setdefault(event_type, []).append(handler)
        logger.debug(f"{_handler_name(handler)} subscribed to {event_type.__name__}")

    def publish(self, event: DomainEvent) -> None:
        event_name = type(event).__name__

        with self._lock:
            handlers = [
                handler
                for event_class in type(event).__mro__
                for handler in self._subscriptions.get(event_class, ())
            ]

        if not handlers:
            logger.debug(f"{event_name} published with no subscribers")
            return

        for handler in handlers:
            try:
                handler(event)
            except Exception as e:
                logger.error(
                    f"Event handler {_handler_name(handler)} failed on {event_name}: {e}",
                    exc_info=True,
                )
