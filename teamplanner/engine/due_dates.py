"""Effective due date resolution for teamplanner.

An item is due either at the end of its time period or on its legacy
due date. Every piece of code that needs "when is this due" (sorting,
overdue flags, date-range filtering, dashboard widgets) goes through
effective_due_date().
"""

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Optional

from teamplanner.engine.formatting import DateLike, format_date, parse_date
from teamplanner.models.item import PlannerItem, TaskStatus


@dataclass(frozen=True)
class DueDateInfo:
    """Due date label plus urgency flags for task cards."""

    text: str
    is_urgent: bool
    is_today: bool
    is_tomorrow: bool


def effective_due_date(item: PlannerItem) -> Optional[date]:
    """Resolve the single canonical due date of an item.

    A time period (start and end date both present) is due at its end.
    Otherwise the legacy due date is used.

    Args:
        item: Task or event to inspect

    Returns:
        The due date, or None when the item has no due date
    """
    if item.start_date and item.end_date:
        return item.end_date
    return item.due_date


def describe_due_date(value: DateLike, today: date) -> Optional[DueDateInfo]:
    """Build a "Due: Jan 1, 2024" label with today/tomorrow urgency flags.

    Args:
        value: Due date (date, datetime or ISO string)
        today: Reference day

    Returns:
        DueDateInfo, or None if there is no usable due date
    """
    due = parse_date(value)
    if due is None:
        return None

    is_today = due == today
    is_tomorrow = due == today + timedelta(days=1)
    return DueDateInfo(
        text=f"Due: {format_date(due)}",
        is_urgent=is_today or is_tomorrow,
        is_today=is_today,
        is_tomorrow=is_tomorrow,
    )


def is_overdue(item: PlannerItem, today: date) -> bool:
    """Check if an unfinished item is past its effective due date."""
    if item.status == TaskStatus.DONE:
        return False
    due = effective_due_date(item)
    return due is not None and due < today
