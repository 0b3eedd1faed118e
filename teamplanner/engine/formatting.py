"""Date and time display formatting for teamplanner.

Two modes are provided. The full mode ("Jan 1, 2024", "1:00 PM") is used on
detail panels; the compact mode ("Jan 1", "2:30pm") is used on cards.
All formatters return an empty string for missing or unreadable input.
"""

import logging
from datetime import date, datetime, time
from typing import Optional, Union

from dateutil import parser as date_parser

from teamplanner.config import current_date

logger = logging.getLogger(__name__)

DateLike = Union[date, datetime, str, None]
TimeLike = Union[time, str, None]


def parse_date(value: DateLike) -> Optional[date]:
    """Coerce a date, datetime or ISO-8601 string into a calendar date.

    Timestamps keep the calendar day they were written with; no timezone
    conversion happens here.

    Returns:
        The date, or None if the value is empty or unparseable
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date_parser.isoparse(value.strip()).date()
    except (ValueError, OverflowError, AttributeError):
        logger.debug(f"Unparseable date value: {value!r}")
        return None


def parse_time(value: TimeLike) -> Optional[time]:
    """Coerce a time or "HH:MM[:SS]" string into a time of day.

    Returns:
        The time, or None if the value is empty or unparseable
    """
    if value is None or value == "":
        return None
    if isinstance(value, time):
        return value
    try:
        parts = value.strip().split(":")
        hours = int(parts[0])
        minutes = int(parts[1]) if len(parts) > 1 else 0
        return time(hour=hours, minute=minutes)
    except (ValueError, IndexError, AttributeError):
        logger.debug(f"Unparseable time value: {value!r}")
        return None


_MONTH_ABBR = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def _month_day(d: date) -> str:
    # en-US month abbreviation regardless of process locale
    return f"{_MONTH_ABBR[d.month - 1]} {d.day}"


def _hour_minute(t: time) -> tuple:
    display_hour = t.hour % 12 or 12
    meridiem = "PM" if t.hour >= 12 else "AM"
    return display_hour, f"{t.minute:02d}", meridiem


def format_date(value: DateLike) -> str:
    """Format a date as "Jan 1, 2024"."""
    d = parse_date(value)
    if d is None:
        return ""
    return f"{_month_day(d)}, {d.year}"


def format_time(value: TimeLike) -> str:
    """Format a time of day as "1:00 PM"."""
    t = parse_time(value)
    if t is None:
        return ""
    hour, minute, meridiem = _hour_minute(t)
    return f"{hour}:{minute} {meridiem}"


def format_compact_date(value: DateLike, today: Optional[date] = None) -> str:
    """Format a date as "Jan 1", adding the year only outside the current year.

    Args:
        value: Date to format
        today: Reference day for "current year" (defaults to the planner clock)
    """
    d = parse_date(value)
    if d is None:
        return ""
    if today is None:
        today = current_date()
    if d.year == today.year:
        return _month_day(d)
    return f"{_month_day(d)}, {d.year}"


def format_compact_time(value: TimeLike) -> str:
    """Format a time of day as "2:30pm"."""
    t = parse_time(value)
    if t is None:
        return ""
    hour, minute, meridiem = _hour_minute(t)
    return f"{hour}:{minute}{meridiem.lower()}"
