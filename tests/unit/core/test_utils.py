"""Unit tests for core utilities."""

from datetime import datetime, timedelta, timezone

from appctl.core.utils import ZERO_INSTANT, format_instant


class TestFormatInstant:
    """Tests for format_instant."""

    def test_utc(self):
        assert format_instant(datetime(2014, 1, 1, tzinfo=timezone.utc)) == "2014-01-01 00:00:00 +0000 UTC"

    def test_naive_is_utc(self):
        assert format_instant(datetime(2014, 1, 1, 12, 30, 5)) == "2014-01-01 12:30:05 +0000 UTC"

    def test_positive_offset(self):
        tz = timezone(timedelta(hours=2))
        assert format_instant(datetime(2014, 1, 1, 10, tzinfo=tz)) == "2014-01-01 10:00:00 +0200 +0200"

    def test_negative_offset_with_minutes(self):
        tz = timezone(-timedelta(hours=3, minutes=30))
        assert format_instant(datetime(2014, 1, 1, tzinfo=tz)) == "2014-01-01 00:00:00 -0330 -0330"

    def test_fraction_trims_trailing_zeros(self):
        value = datetime(2014, 1, 1, 0, 0, 0, 120000, tzinfo=timezone.utc)
        assert format_instant(value) == "2014-01-01 00:00:00.12 +0000 UTC"

    def test_zero_instant_keeps_year_padding(self):
        assert format_instant(ZERO_INSTANT) == "0001-01-01 00:00:00 +0000 UTC"
