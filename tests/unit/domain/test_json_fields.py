"""
Unit tests for JSON field helpers.
"""

from datetime import datetime, timedelta, timezone

import pytest

from driftmind_web.domain.json_fields import format_timestamp, lower_keys, parse_timestamp


def test_lower_keys():
    assert lower_keys({"DocumentId": "a", "TOKEN": "b"}) == {"documentid": "a", "token": "b"}


class TestParseTimestamp:

    @pytest.mark.parametrize("value", [None, ""])
    def test_missing(self, value):
        assert parse_timestamp(value) is None

    def test_zulu_suffix_is_utc(self):
        parsed = parse_timestamp("2026-01-01T12:15:00Z")
        assert parsed == datetime(2026, 1, 1, 12, 15, tzinfo=timezone.utc)

    def test_seven_fraction_digits(self):
        parsed = parse_timestamp("2026-01-01T12:15:00.1234567+00:00")
        assert parsed.microsecond == 123456

    def test_offset_preserved(self):
        parsed = parse_timestamp("2026-01-01T12:15:00+02:00")
        assert parsed.utcoffset() == timedelta(hours=2)

    @pytest.mark.parametrize("value", ["not a date", 42])
    def test_malformed(self, value):
        with pytest.raises(ValueError):
            parse_timestamp(value)


class TestFormatTimestamp:

    def test_none(self):
        assert format_timestamp(None) is None

    def test_utc_rendered_with_z(self):
        value = datetime(2026, 1, 1, 12, 15, tzinfo=timezone.utc)
        assert format_timestamp(value) == "2026-01-01T12:15:00Z"

    def test_other_offset_kept(self):
        value = datetime(2026, 1, 1, 12, 15, tzinfo=timezone(timedelta(hours=2)))
        assert format_timestamp(value) == "2026-01-01T12:15:00+02:00"

    def test_naive(self):
        assert format_timestamp(datetime(2026, 1, 1)) == "2026-01-01T00:00:00"
