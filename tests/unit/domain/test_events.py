"""
Unit tests for domain events.
"""

import dataclasses
from datetime import datetime, timezone

import pytest

from driftmind_web.domain.events import (
    DocumentDeletedEvent,
    DownloadTokenIssuedEvent,
    FileRedeemedEvent,
    token_prefix,
)

NOW = datetime(2026, 1, 1, tzinfo=timezone.utc)


def test_token_prefix_hides_remainder():
    assert token_prefix("abcdefghijklmnop") == "abcdefgh..."


def test_events_are_frozen():
    event = DocumentDeletedEvent(aggregate_id="doc-1", occurred_at=NOW)

    with pytest.raises(dataclasses.FrozenInstanceError):
        event.aggregate_id = "other"


def test_token_issued_to_dict():
    event = DownloadTokenIssuedEvent(
        aggregate_id="doc-1", occurred_at=NOW, expiration_minutes=15, expires_at=None
    )

    assert event.to_dict() == {
        "event_type": "DownloadTokenIssuedEvent",
        "aggregate_id": "doc-1",
        "occurred_at": NOW.isoformat(),
        "expiration_minutes": 15,
        "expires_at": None,
    }


def test_file_redeemed_to_dict():
    event = FileRedeemedEvent(
        aggregate_id="abc...", occurred_at=NOW, file_name="a.pdf", file_size=10
    )
    data = event.to_dict()

    assert data["file_name"] == "a.pdf"
    assert data["file_size"] == 10
