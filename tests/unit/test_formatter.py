"""Unit tests for duration formatting."""

import pytest

from chronify.core.durations import parse_duration
from chronify.core.exceptions import InvalidArgument
from chronify.core.formatter import format_clock_duration, format_duration
from chronify.core.types import DurationStyle


class TestFormatDuration:
    @pytest.mark.parametrize(
        "style,expected",
        [
            ("dhm", "1d2h30m"),
            ("hm", "26:30"),
            ("m", "1590m"),
            ("clock", "26:30:00"),
            ("natural", "1 day, 2 hours, 30 minutes"),
        ],
    )
    def test_styles(self, style, expected):
        assert format_duration(95400, style) == expected

    def test_enum_style(self):
        assert format_duration(2700, DurationStyle.DHM) == "45m"

    def test_default_style_is_dhm(self):
        assert format_duration(7200) == "2h"

    def test_dhm_round_trips_with_parse_duration(self):
        assert parse_duration(format_duration(95400, "dhm")) == 95400

    def test_zero(self):
        assert format_duration(0, "dhm") == "0m"
        assert format_duration(0, "natural") == "0 minutes"
        assert format_duration(0, "clock") == "00:00:00"
        assert format_duration(0, "hm") == "0:00"

    def test_natural_singular(self):
        assert format_duration(86400 + 3600 + 60, "natural") == "1 day, 1 hour, 1 minute"

    def test_natural_skips_zero_parts(self):
        assert format_duration(2 * 86400 + 5 * 60, "natural") == "2 days, 5 minutes"

    def test_leftover_seconds(self):
        assert format_duration(3725, "dhm") == "1h2m"
        assert format_duration(3725, "clock") == "01:02:05"

    def test_negative_rejected(self):
        with pytest.raises(InvalidArgument):
            format_duration(-1, "dhm")

    def test_unknown_style_rejected(self):
        with pytest.raises(InvalidArgument):
            format_duration(60, "fortnights")

    def test_invalid_argument_is_value_error(self):
        with pytest.raises(ValueError):
            format_duration(-60)


class TestFormatClockDuration:
    def test_reformats(self):
        assert format_clock_duration("26:30:00", "natural") == "1 day, 2 hours, 30 minutes"
        assert format_clock_duration("00:45:00") == "45m"
