#!/usr/bin/env python3
"""
Import Date Formats

Fixed table of date layouts accepted in import files, plus conversion of
calendar dates to the neutral time of day used for posted and reconcile
dates.
"""

import re
from dataclasses import dataclass
from datetime import date, datetime, time, timezone

_SEP = r"[-/.' ]+"

# Neutral time of day: 10:59 UTC falls on the same calendar day in every
# timezone between UTC-10 and UTC+13.
NEUTRAL_TIME = time(10, 59, tzinfo=timezone.utc)


@dataclass(frozen=True)
class DateFormat:
    """One accepted date layout."""

    name: str
    patterns: tuple[re.Pattern, ...]

    def match(self, text: str) -> re.Match | None:
        """Return the first pattern fully matching text."""
        for pattern in self.patterns:
            found = pattern.fullmatch(text)
            if found:
                return found
        return None


def _fmt(name: str, *patterns: str) -> DateFormat:
    return DateFormat(name=name, patterns=tuple(re.compile(p) for p in patterns))


DATE_FORMATS: tuple[DateFormat, ...] = (
    _fmt(
        "y-m-d",
        rf"(?P<year>[0-9]+){_SEP}(?P<month>[0-9]{{1,2}}){_SEP}(?P<day>[0-9]{{1,2}})",
        r"(?P<year>[0-9]{4})(?P<month>[0-9]{2})(?P<day>[0-9]{2})",
    ),
    _fmt(
        "d-m-y",
        rf"(?P<day>[0-9]{{1,2}}){_SEP}(?P<month>[0-9]{{1,2}}){_SEP}(?P<year>[0-9]+)",
        r"(?P<day>[0-9]{2})(?P<month>[0-9]{2})(?P<year>[0-9]{4})",
    ),
    _fmt(
        "m-d-y",
        rf"(?P<month>[0-9]{{1,2}}){_SEP}(?P<day>[0-9]{{1,2}}){_SEP}(?P<year>[0-9]+)",
        r"(?P<month>[0-9]{2})(?P<day>[0-9]{2})(?P<year>[0-9]{4})",
    ),
    _fmt(
        "d-m",
        rf"(?P<day>[0-9]{{1,2}}){_SEP}(?P<month>[0-9]{{1,2}})",
        r"(?P<day>[0-9]{2})(?P<month>[0-9]{2})",
    ),
    _fmt(
        "m-d",
        rf"(?P<month>[0-9]{{1,2}}){_SEP}(?P<day>[0-9]{{1,2}})",
        r"(?P<month>[0-9]{2})(?P<day>[0-9]{2})",
    ),
)


def date_format_names() -> list[str]:
    """Get the display names of all date formats, in selector order."""
    return [fmt.name for fmt in DATE_FORMATS]


def _expand_year(year_str: str) -> int:
    year = int(year_str)
    if len(year_str) <= 2:
        # Same window as strptime's %y
        return year + (1900 if year >= 69 else 2000)
    return year


def parse_date_string(text: str, date_format: int) -> date:
    """
    Parse a date string laid out according to a date format selector.

    Args:
        text: Date string like "2024-01-15", "15/01/2024" or "15.01"
        date_format: Index into DATE_FORMATS

    Returns:
        Calendar date; formats without a year use the current year

    Raises:
        ValueError: If text doesn't match the layout or is not a real date
        IndexError: If date_format is not a valid selector

    Examples:
        parse_date_string("2024-01-15", 0) -> date(2024, 1, 15)
        parse_date_string("15.01.24", 1) -> date(2024, 1, 15)
    """
    if not 0 <= date_format < len(DATE_FORMATS):
        raise IndexError(f"Unknown date format: {date_format}")

    fmt = DATE_FORMATS[date_format]
    found = fmt.match(text.strip())
    if not found:
        raise ValueError(f"Value can't be parsed into a date using the selected date format ({fmt.name}).")

    parts = found.groupdict()
    year = _expand_year(parts["year"]) if parts.get("year") else date.today().year
    try:
        return date(year, int(parts["month"]), int(parts["day"]))
    except ValueError as e:
        raise ValueError(f"Value is not a valid date: {e}.") from e


def to_neutral_datetime(day: date) -> datetime:
    """Convert a calendar date to a timestamp at the neutral time of day."""
    return datetime.combine(day, NEUTRAL_TIME)
