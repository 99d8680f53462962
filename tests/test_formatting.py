"""Tests for date, value and status formatting (brainmode.formatting)."""

from __future__ import annotations

from datetime import datetime

from brainmode.constants import Mode
from brainmode.formatting import format_date, format_time, status_line, truncate_value

WHEN = datetime(2015, 1, 1, 9, 5, 7)


class TestDateTime:
    def test_format_date(self):
        assert format_date(WHEN) == "2015-01-01"

    def test_format_time(self):
        assert format_time(WHEN) == "09:05"

    def test_format_time_with_seconds(self):
        assert format_time(WHEN, seconds=True) == "09:05:07"

    def test_epoch_milliseconds(self):
        """Creation times arrive as milliseconds and render in local time."""
        millis = 1420070400000
        local = datetime.fromtimestamp(millis / 1000)

        assert format_date(millis) == local.strftime("%Y-%m-%d")
        assert format_time(millis, seconds=True) == local.strftime("%H:%M:%S")


class TestTruncateValue:
    def test_short_value_untouched(self):
        assert truncate_value("short", 10) == "short"

    def test_exact_length_untouched(self):
        assert truncate_value("x" * 10, 10) == "x" * 10

    def test_long_value_cut(self):
        assert truncate_value("abcdefghij", 4) == "abcd [...]"

    def test_non_positive_cutoff_disables(self):
        assert truncate_value("abcdefghij", 0) == "abcdefghij"


class TestStatusLine:
    def test_default_context(self, ctx):
        assert status_line(ctx) == (
            "readonly forward h=2 s=[0.25,1.00]:0.50 w=[0.00,1.00]:0.50"
        )

    def test_missing_default(self, ctx):
        ctx.mode = Mode.READWRITE
        ctx.default_sharability = None
        line = status_line(ctx)

        assert line.startswith("readwrite ")
        assert "s=[0.25,1.00]:-" in line
