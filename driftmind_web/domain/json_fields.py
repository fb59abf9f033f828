"""
JSON field helpers shared by the value objects.

The upstream API speaks camelCase JSON; property names are matched
case-insensitively when reading it.
"""

import re
from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional

# Upstream timestamps may carry up to 7 fractional digits.
_FRACTION_RE = re.compile(r"(\.\d{6})\d+")


def lower_keys(data: Mapping[str, Any]) -> Dict[str, Any]:
    return {str(key).lower(): value for key, value in data.items()}


def parse_timestamp(value: Any) -> Optional[datetime]:
    """
    Parse an ISO 8601 timestamp as sent by the upstream API.

    Returns None for missing values and raises ValueError for malformed ones.
    A trailing "Z" is read as UTC.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str):
        raise ValueError(f"Invalid timestamp: {value!r}")

    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    text = _FRACTION_RE.sub(r"\1", text)
    return datetime.fromisoformat(text)


def format_timestamp(value: Optional[datetime]) -> Optional[str]:
    """Format a timestamp for JSON output, rendering UTC as "Z"."""
    if value is None:
        return None
    if value.tzinfo is not None and value.utcoffset() == timezone.utc.utcoffset(None):
        return value.replace(tzinfo=None).isoformat() + "Z"
    return value.isoformat()
