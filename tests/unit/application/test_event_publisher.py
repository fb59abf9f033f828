"""
Unit tests for EventPublisher
"""

from datetime import datetime, timezone
from unittest.mock import Mock

from driftmind_web.application.event_publisher import EventPublisher
from driftmind_web.domain.events import (
    DocumentDeletedEvent,
    DomainEvent,
    DownloadTokenRejectedEvent,
)

NOW = datetime(2026, 1, 1, tzinfo=timezone.utc)


def _deleted() -> DocumentDeletedEvent:
    return DocumentDeletedEvent(aggregate_id="doc-1", occurred_at=NOW)


def test_handler_receives_event_of_its_type():
    publisher = EventPublisher()
    handler = Mock()
    publisher.subscribe(DocumentDeletedEvent, handler)

    event = _deleted()
    publisher.publish(event)

    handler.assert_called_once_with(event)


def test_base_class_subscription_receives_subclass_events():
    publisher = EventPublisher()
    handler = Mock()
    publisher.subscribe(DomainEvent, handler)

    publisher.publish(_deleted())
    publisher.publish(
        DownloadTokenRejectedEvent(aggregate_id="doc-1", occurred_at=NOW, reason="x")
    )

    assert handler.call_count == 2


def test_unrelated_handler_not_called():
    publisher = EventPublisher()
    handler = Mock()
    publisher.subscribe(DownloadTokenRejectedEvent, handler)

    publisher.publish(_deleted())

    handler.assert_not_called()


def test_failing_handler_does_not_stop_others():
    publisher = EventPublisher()
    failing = Mock(side_effect=RuntimeError("boom"))
    healthy = Mock()
    publisher.subscribe(DocumentDeletedEvent, failing)
    publisher.subscribe(DocumentDeletedEvent, healthy)

    publisher.publish(_deleted())

    failing.assert_called_once()
    healthy.assert_called_once()


def test_publish_without_handlers():
    EventPublisher().publish(_deleted())
