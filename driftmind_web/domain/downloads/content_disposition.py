"""
Content-Disposition Header Construction

Builds RFC 6266 attachment headers that carry both a quoted ASCII fallback
filename for legacy clients and a UTF-8 extended filename.
"""

from typing import Optional
from urllib.parse import quote

# Exact substitutions, case-sensitive. No other transliteration is applied.
_UMLAUT_REPLACEMENTS = (
    ("ä", "ae"),
    ("ö", "oe"),
    ("ü", "ue"),
    ("Ä", "Ae"),
    ("Ö", "Oe"),
    ("Ü", "Ue"),
    ("ß", "ss"),
)


def ascii_fallback(filename: str) -> str:
    """Replace German umlauts and sharp s with their two-letter forms."""
    for original, replacement in _UMLAUT_REPLACEMENTS:
        filename = filename.replace(original, replacement)
    return filename


def percent_encode(filename: str) -> str:
    """
    Percent-encode a filename using its UTF-8 bytes.

    Only RFC 3986 unreserved characters (letters, digits, "-", "_", ".", "~")
    are left as-is.
    """
    return quote(filename, safe="", encoding="utf-8")


def build_content_disposition(filename: Optional[str]) -> str:
    """
    Build an attachment Content-Disposition header value.

    Args:
        filename: Upstream filename, may contain non-ASCII characters

    Returns:
        "attachment" when there is no filename, otherwise the attachment
        disposition with both filename and filename* parameters
    """
    if not filename:
        return "attachment"

    return (
        f'attachment; filename="{ascii_fallback(filename)}"; '
        f"filename*=UTF-8''{percent_encode(filename)}"
    )
