#!/usr/bin/env python3
"""Tests for the import date format table."""

from datetime import date, datetime, timezone

import pytest

from tximport.core.dates import (
    DATE_FORMATS,
    date_format_names,
    parse_date_string,
    to_neutral_datetime,
)


class TestDateFormats:
    """Test date parsing per format selector."""

    def test_format_names(self):
        """Test the selector order of the date format table."""
        assert date_format_names() == ["y-m-d", "d-m-y", "m-d-y", "d-m", "m-d"]
        assert len(DATE_FORMATS) == 5

    @pytest.mark.parametrize(
        "text,date_format,expected",
        [
            ("2024-01-15", 0, date(2024, 1, 15)),
            ("2024/1/5", 0, date(2024, 1, 5)),
            ("20240115", 0, date(2024, 1, 15)),
            ("15.01.2024", 1, date(2024, 1, 15)),
            ("15-01-24", 1, date(2024, 1, 15)),
            ("15012024", 1, date(2024, 1, 15)),
            ("01/15/2024", 2, date(2024, 1, 15)),
            ("1/15/99", 2, date(1999, 1, 15)),
            ("01152024", 2, date(2024, 1, 15)),
        ],
        ids=["ymd", "ymd_short_parts", "ymd_compact", "dmy", "dmy_two_digit_year", "dmy_compact",
             "mdy", "mdy_1900s", "mdy_compact"],
    )
    def test_dates_with_year(self, text, date_format, expected):
        """Test formats that include a year."""
        assert parse_date_string(text, date_format) == expected

    @pytest.mark.parametrize("text,date_format", [("15.01", 3), ("01/15", 4)])
    def test_dates_without_year_use_current_year(self, text, date_format):
        """Test year-less formats default to the current year."""
        assert parse_date_string(text, date_format) == date(date.today().year, 1, 15)

    @pytest.mark.parametrize(
        "text,date_format",
        [
            ("2024-01-15", 1),
            ("15/01/2024", 0),
            ("2024-01", 0),
            ("yesterday", 0),
            ("", 0),
        ],
    )
    def test_mismatched_layout_fails(self, text, date_format):
        """Test strings not laid out per the selected format."""
        with pytest.raises(ValueError, match="selected date format"):
            parse_date_string(text, date_format)

    @pytest.mark.parametrize("text", ["2023-02-29", "2024-13-01", "2024-04-31"])
    def test_impossible_dates_fail(self, text):
        """Test well formed strings naming dates that don't exist."""
        with pytest.raises(ValueError, match="not a valid date"):
            parse_date_string(text, 0)

    def test_unknown_selector(self):
        """Test an out of range format selector."""
        with pytest.raises(IndexError):
            parse_date_string("2024-01-15", 9)


class TestNeutralTime:
    """Test conversion to neutral time of day."""

    def test_neutral_datetime(self):
        """Test dates become 10:59 UTC on the same day."""
        assert to_neutral_datetime(date(2024, 1, 15)) == datetime(2024, 1, 15, 10, 59, tzinfo=timezone.utc)
