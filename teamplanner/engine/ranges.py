"""Date range and duration strings for teamplanner.

Range strings come in a full flavour (detail panels) and a compact flavour
(cards). Both follow the same precedence:

1. Same-day period with a time range
2. Multi-day period
3. Same-day period without a full time range
4. Start date only
5. Legacy due date
6. Nothing to show (empty string)
"""

import math
from datetime import date, datetime, time, timedelta
from typing import Optional

from teamplanner.config import current_datetime, to_local_naive
from teamplanner.engine.formatting import (
    DateLike,
    TimeLike,
    format_compact_date,
    format_compact_time,
    format_date,
    format_time,
    parse_date,
    parse_time,
)
from teamplanner.models.constants import MS_PER_DAY, MS_PER_HOUR, MS_PER_MINUTE
from teamplanner.models.item import PlannerItem


def format_range(item: PlannerItem) -> str:
    """Format an item's time period for a detail panel.

    Examples: "Jan 1, 2024, 9:00 AM - 5:00 PM", "Jan 1, 2024 - Jan 3, 2024",
    "From Jan 1, 2024", "Due Jan 5, 2024".
    """
    start, end = item.start_date, item.end_date
    has_time_range = item.start_time is not None and item.end_time is not None

    if start and end:
        if start == end and has_time_range:
            return f"{format_date(start)}, {format_time(item.start_time)} - {format_time(item.end_time)}"

        if start != end:
            result = f"{format_date(start)} - {format_date(end)}"
            if has_time_range:
                result += f" ({format_time(item.start_time)} - {format_time(item.end_time)})"
            return result

        if item.start_time:
            return f"{format_date(start)} at {format_time(item.start_time)}"
        return format_date(start)

    if start:
        if item.start_time:
            return f"{format_date(start)} at {format_time(item.start_time)}"
        return f"From {format_date(start)}"

    if item.due_date:
        return f"Due {format_date(item.due_date)}"

    return ""


def format_range_compact(item: PlannerItem, today: Optional[date] = None) -> str:
    """Format an item's time period for a card.

    Examples: "Jan 1 • 9:00am-5:00pm", "Jan 1 - Jan 3", "Jan 1 • 9:00am".

    Args:
        item: Task or event
        today: Reference day for omitting the current year
    """
    start, end = item.start_date, item.end_date
    has_time_range = item.start_time is not None and item.end_time is not None

    if start and end:
        start_label = format_compact_date(start, today)
        if start == end and has_time_range:
            return f"{start_label} • {format_compact_time(item.start_time)}-{format_compact_time(item.end_time)}"

        if start != end:
            end_label = format_compact_date(end, today)
            if has_time_range:
                return (
                    f"{start_label} {format_compact_time(item.start_time)} - "
                    f"{end_label} {format_compact_time(item.end_time)}"
                )
            return f"{start_label} - {end_label}"

        if item.start_time:
            return f"{start_label} • {format_compact_time(item.start_time)}"
        return start_label

    if start:
        start_label = format_compact_date(start, today)
        if item.start_time:
            return f"{start_label} • {format_compact_time(item.start_time)}"
        return start_label

    if item.due_date:
        return format_compact_date(item.due_date, today)

    return ""


def format_event_range(item: PlannerItem) -> str:
    """Format an event's schedule, keeping times attached to each day.

    Examples: "Jan 1, 2024, 9:00 AM - 5:00 PM",
    "Jan 1, 2024 9:00 AM - Jan 3, 2024 5:00 PM".
    """
    if not item.start_date:
        return ""

    start_label = format_date(item.start_date)
    start_time = format_time(item.start_time)

    if not item.end_date or item.end_date == item.start_date:
        if start_time and item.end_time:
            return f"{start_label}, {start_time} - {format_time(item.end_time)}"
        if start_time:
            return f"{start_label} at {start_time}"
        return start_label

    end_label = format_date(item.end_date)
    if start_time and item.end_time:
        return f"{start_label} {start_time} - {end_label} {format_time(item.end_time)}"
    return f"{start_label} - {end_label}"


def _ceil_div(numerator: int, denominator: int) -> int:
    return -(-numerator // denominator)


def _combine(day: date, at: Optional[time]) -> datetime:
    return datetime.combine(day, at or time(0, 0))


def duration(
    start_date: DateLike,
    end_date: DateLike = None,
    start_time: TimeLike = None,
    end_time: TimeLike = None,
) -> str:
    """Describe the length of a time period.

    The largest unit that fits more than once is used, and the value is
    rounded up: "3 days", "5 hours", "45 minutes". A period of exactly one
    day renders as "24 hours" and exactly one hour as "60 minutes".
    End-before-start periods are not rejected and render as negative minutes.

    Args:
        start_date: First day
        end_date: Last day (empty string returned when missing)
        start_time: Optional time of day applied to start_date
        end_time: Optional time of day applied to end_date

    Returns:
        Duration string, or "" when either date is missing
    """
    start_day = parse_date(start_date)
    end_day = parse_date(end_date)
    if start_day is None or end_day is None:
        return ""

    start = _combine(start_day, parse_time(start_time))
    end = _combine(end_day, parse_time(end_time))
    diff_ms = (end - start) // timedelta(milliseconds=1)

    if diff_ms // MS_PER_DAY > 1:
        return f"{_ceil_div(diff_ms, MS_PER_DAY)} days"
    if diff_ms // MS_PER_HOUR > 1:
        return f"{_ceil_div(diff_ms, MS_PER_HOUR)} hours"
    return f"{_ceil_div(diff_ms, MS_PER_MINUTE)} minutes"


def round_half_up(value: float) -> int:
    # Matches the browser's Math.round (halves go towards +infinity)
    return math.floor(value + 0.5)


def relative_time(target_date: DateLike, target_time: TimeLike = None, now: Optional[datetime] = None) -> str:
    """Describe a moment relative to now: "in 5 min", "3h ago", "in 2 days".

    Args:
        target_date: Day of the moment
        target_time: Optional time of day (midnight when omitted)
        now: Reference instant (defaults to the planner clock)
    """
    day = parse_date(target_date)
    if day is None:
        return ""
    now = current_datetime() if now is None else to_local_naive(now)

    target = _combine(day, parse_time(target_time))
    diff_ms = (target - now) / timedelta(milliseconds=1)
    minutes = round_half_up(diff_ms / MS_PER_MINUTE)
    hours = round_half_up(diff_ms / MS_PER_HOUR)
    days = round_half_up(diff_ms / MS_PER_DAY)

    if abs(minutes) < 60:
        if minutes > 0:
            return f"in {minutes} min"
        return f"{abs(minutes)} min ago"

    if abs(hours) < 24:
        if hours > 0:
            return f"in {hours}h"
        return f"{abs(hours)}h ago"

    if days > 0:
        return f"in {days} days"
    return f"{abs(days)} days ago"
