"""Unit tests for duration parsing."""

import pytest

from chronify.core.durations import parse_clock_duration, parse_duration
from chronify.core.exceptions import MalformedDuration


class TestParseDuration:
    def test_compound(self):
        assert parse_duration("1d2h30m") == 1 * 86400 + 2 * 3600 + 30 * 60 == 95400

    def test_minutes(self):
        assert parse_duration("45m") == 2700

    def test_bare_number_is_minutes(self):
        assert parse_duration("45") == 2700

    def test_clock_quantity(self):
        assert parse_duration("1:30") == 5400
        assert parse_duration(" 0:05 ") == 300

    def test_decimal_hours_and_days(self):
        assert parse_duration("1.5h") == 90 * 60
        assert parse_duration("1.5d") == 36 * 3600

    def test_decimal_hours_round_to_nearest_minute(self):
        # 0.01h is 0.6 minutes
        assert parse_duration("0.01h") == 60

    def test_decimal_minutes_round(self):
        assert parse_duration("2.5m") == 180
        assert parse_duration("2.4m") == 120

    def test_case_insensitive_units(self):
        assert parse_duration("1H20M") == 80 * 60

    def test_terms_separated_by_spaces(self):
        assert parse_duration("1h 20m") == 80 * 60

    def test_unmatched_is_zero(self):
        assert parse_duration("") == 0
        assert parse_duration("a while") == 0


class TestParseClockDuration:
    def test_hms(self):
        assert parse_clock_duration("01:02:03") == 3723

    def test_hours_over_a_day(self):
        assert parse_clock_duration("26:30:00") == 95400

    @pytest.mark.parametrize("value", ["", "1:30", "abc", "1h30m"])
    def test_malformed(self, value):
        with pytest.raises(MalformedDuration):
            parse_clock_duration(value)
