"""Tests for duration parsing and canonical formatting."""

from __future__ import annotations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from faasreport.duration import (
    HOUR,
    MILLISECOND,
    MINUTE,
    SECOND,
    DurationError,
    format_duration,
    parse_duration,
    to_minutes,
)


class TestParseDuration:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("0", 0),
            ("30s", 30 * SECOND),
            ("2m", 2 * MINUTE),
            ("1h30m", HOUR + 30 * MINUTE),
            ("1.5s", 1500 * MILLISECOND),
            (".5s", 500 * MILLISECOND),
            ("1.s", SECOND),
            ("250ms", 250 * MILLISECOND),
            ("10us", 10_000),
            ("10µs", 10_000),
            ("10μs", 10_000),
            ("15ns", 15),
            ("+5s", 5 * SECOND),
            ("-5s", -5 * SECOND),
            ("1h0m0s", HOUR),
        ],
    )
    def test_valid(self, text: str, expected: int) -> None:
        assert parse_duration(text) == expected

    @pytest.mark.parametrize("text", ["", "30", "s", "1x", "1.5.3s", ".s", "-", "abc", "5 m"])
    def test_invalid(self, text: str) -> None:
        with pytest.raises(DurationError):
            parse_duration(text)

    def test_error_names_value(self) -> None:
        with pytest.raises(DurationError) as exc_info:
            parse_duration("10y")
        assert exc_info.value.value == "10y"
        assert "10y" in str(exc_info.value)

    def test_overflow(self) -> None:
        with pytest.raises(DurationError):
            parse_duration("9999999999h")


class TestFormatDuration:
    @pytest.mark.parametrize(
        ("nanoseconds", "expected"),
        [
            (0, "0s"),
            (15, "15ns"),
            (1500, "1.5µs"),
            (250 * MILLISECOND, "250ms"),
            (30 * SECOND, "30s"),
            (1500 * MILLISECOND, "1.5s"),
            (2 * MINUTE, "2m0s"),
            (HOUR + 30 * MINUTE, "1h30m0s"),
            (-30 * SECOND, "-30s"),
        ],
    )
    def test_canonical_form(self, nanoseconds: int, expected: str) -> None:
        assert format_duration(nanoseconds) == expected

    def test_minutes(self) -> None:
        assert to_minutes(parse_duration("2m30s")) == 2.5


# ---------------------------------------------------------------------------
# Hypothesis strategies
# ---------------------------------------------------------------------------

_MAX_DURATION = (1 << 63) - 1

_durations = st.integers(min_value=-_MAX_DURATION, max_value=_MAX_DURATION)

# Small values exercise the ns / µs / ms forms
_short_durations = st.integers(min_value=-SECOND, max_value=SECOND)


class TestDurationProperties:
    @given(nanoseconds=_durations)
    @settings(max_examples=200)
    def test_canonical_form_parses_back(self, nanoseconds: int) -> None:
        assert parse_duration(format_duration(nanoseconds)) == nanoseconds

    @given(nanoseconds=_short_durations)
    @settings(max_examples=200)
    def test_short_canonical_form_parses_back(self, nanoseconds: int) -> None:
        assert parse_duration(format_duration(nanoseconds)) == nanoseconds

    @given(nanoseconds=_durations)
    @settings(max_examples=100)
    def test_canonical_form_is_stable(self, nanoseconds: int) -> None:
        text = format_duration(nanoseconds)
        assert format_duration(parse_duration(text)) == text
