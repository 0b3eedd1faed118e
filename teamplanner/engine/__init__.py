"""Scheduling engine for teamplanner."""

from teamplanner.engine.formatting import format_date, format_time, format_compact_date, format_compact_time
from teamplanner.engine.due_dates import effective_due_date, describe_due_date, is_overdue, DueDateInfo
from teamplanner.engine.ranges import format_range, format_range_compact, format_event_range, duration, relative_time
from teamplanner.engine.activity import is_active, active_items
from teamplanner.engine.ranking import sort_items, UnknownSortKeyError
from teamplanner.engine.filtering import (
    filter_items,
    filter_events_by_period,
    collect_assignees,
    search_stats,
    highlight_search_term,
    SearchStats,
    UnknownEventPeriodError,
)
from teamplanner.engine.dashboard import event_progress, upcoming_deadlines, EventProgress

__all__ = [
    "format_date",
    "format_time",
    "format_compact_date",
    "format_compact_time",
    "effective_due_date",
    "describe_due_date",
    "is_overdue",
    "DueDateInfo",
    "format_range",
    "format_range_compact",
    "format_event_range",
    "duration",
    "relative_time",
    "is_active",
    "active_items",
    "sort_items",
    "UnknownSortKeyError",
    "filter_items",
    "filter_events_by_period",
    "collect_assignees",
    "search_stats",
    "highlight_search_term",
    "SearchStats",
    "UnknownEventPeriodError",
    "event_progress",
    "upcoming_deadlines",
    "EventProgress",
]
