"""
Property-based tests for the expiration bounds and the filename header rule.
"""

from urllib.parse import unquote

from hypothesis import given
from hypothesis import strategies as st

from driftmind_web.domain.downloads import (
    ascii_fallback,
    build_content_disposition,
    clamp_expiration_minutes,
    percent_encode,
)

from tests.property.strategies import UMLAUTS, expiration_minutes, filenames


@given(expiration_minutes())
def test_clamped_value_always_in_range(requested):
    assert 1 <= clamp_expiration_minutes(requested) <= 60


@given(st.integers(min_value=1, max_value=60))
def test_in_range_values_unchanged(requested):
    assert clamp_expiration_minutes(requested) == requested


@given(st.integers(max_value=0))
def test_values_below_one_collapse_to_default(requested):
    assert clamp_expiration_minutes(requested) == 15


@given(st.integers(min_value=61))
def test_values_above_sixty_capped(requested):
    assert clamp_expiration_minutes(requested) == 60


@given(filenames())
def test_percent_encoding_round_trips(filename):
    assert unquote(percent_encode(filename), encoding="utf-8") == filename


@given(filenames())
def test_percent_encoding_is_ascii(filename):
    assert percent_encode(filename).isascii()


@given(filenames())
def test_fallback_contains_no_umlauts(filename):
    assert not any(ch in UMLAUTS for ch in ascii_fallback(filename))


@given(st.text(alphabet="abcXYZ019-_.", min_size=1))
def test_ascii_names_appear_unchanged_in_both_parameters(filename):
    assert build_content_disposition(filename) == (
        f"attachment; filename=\"{filename}\"; filename*=UTF-8''{filename}"
    )
