"""Tests for duration parsing."""

from __future__ import annotations

import pytest

from logshade.utils import parse_duration


class TestParseDuration:
    def test_bare_seconds(self) -> None:
        assert parse_duration("2") == 2.0
        assert parse_duration("0.5") == 0.5

    def test_seconds_suffix(self) -> None:
        assert parse_duration("2s") == 2.0

    def test_milliseconds(self) -> None:
        assert parse_duration("500ms") == pytest.approx(0.5)

    def test_minutes_and_hours(self) -> None:
        assert parse_duration("1m") == 60.0
        assert parse_duration("1h") == 3600.0

    def test_compound(self) -> None:
        assert parse_duration("1m30s") == 90.0

    def test_fractional_with_unit(self) -> None:
        assert parse_duration("1.5s") == 1.5

    def test_case_and_whitespace(self) -> None:
        assert parse_duration("  2S ") == 2.0

    @pytest.mark.parametrize("value", ["", "abc", "2x", "s", "2s junk", "5 s"])
    def test_invalid(self, value: str) -> None:
        with pytest.raises(ValueError, match="Cannot parse duration"):
            parse_duration(value)

    @pytest.mark.parametrize("value", ["0", "0s", "-1", "inf", "nan"])
    def test_non_positive(self, value: str) -> None:
        with pytest.raises(ValueError, match="must be positive"):
            parse_duration(value)
