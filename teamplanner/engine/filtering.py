"""Filtering logic for teamplanner.

filter_items() applies the search box and filter panel selections to a
task or event list. All predicates must hold for an item to be kept.
Inputs are never modified; a new list is returned.
"""

import logging
import re
from dataclasses import dataclass
from datetime import datetime, time, timedelta
from typing import Iterable, List, Optional, Set, Tuple, Union

from dateutil.relativedelta import relativedelta

from teamplanner.config import current_datetime, to_local_naive
from teamplanner.engine.due_dates import effective_due_date
from teamplanner.engine.ranges import round_half_up
from teamplanner.engine.ranking import collation_key
from teamplanner.models.constants import HIGHLIGHT_CLOSE_TAG, HIGHLIGHT_OPEN_TAG
from teamplanner.models.filters import DateRange, EventPeriod, FilterOptions
from teamplanner.models.item import PlannerItem, TaskStatus

logger = logging.getLogger(__name__)

END_OF_DAY = time(23, 59, 59, 999000)


class UnknownEventPeriodError(ValueError):
    """Raised when a period selection is not one of EventPeriod."""


@dataclass(frozen=True)
class SearchStats:
    """How many items survived filtering."""

    showing: int
    total: int
    percentage: int


def filter_items(
    items: Iterable[PlannerItem],
    search_term: str = "",
    options: Union[FilterOptions, dict, None] = None,
) -> List[PlannerItem]:
    """Filter tasks or events by search text and filter selections.

    Args:
        items: Items to filter (left untouched)
        search_term: Case-insensitive text matched against title, description,
            assignees and location
        options: FilterOptions (or an equivalent dict)

    Returns:
        New list of matching items in input order

    Raises:
        pydantic.ValidationError: if options contain unknown status/priority values
    """
    if options is None:
        options = FilterOptions()
    elif isinstance(options, dict):
        options = FilterOptions.model_validate(options)

    items = list(items)
    query = (search_term or "").lower()
    window = _date_window(options.date_range)
    status_set = set(options.status)
    priority_set = set(options.priority)
    assignee_set = set(options.assignees)

    kept = []
    for item in items:
        if query and not _matches_search(item, query):
            continue
        if status_set and item.status not in status_set:
            continue
        if priority_set and item.priority not in priority_set:
            continue
        if assignee_set and not _matches_assignees(item, assignee_set):
            continue
        if window is not None and not _overlaps_window(item, window):
            continue
        if options.show_completed is False and item.status == TaskStatus.DONE:
            continue
        if options.show_personal is False and item.is_personal:
            continue
        kept.append(item)

    logger.debug(f"Filtered {len(items)} items down to {len(kept)} (search={search_term!r})")
    return kept


def _matches_search(item: PlannerItem, query: str) -> bool:
    if query in item.title.lower():
        return True
    if item.description and query in item.description.lower():
        return True
    if item.location and query in item.location.lower():
        return True
    return any(
        query in key.lower()
        for assignee in item.assignees
        for key in assignee.search_keys()
    )


def _matches_assignees(item: PlannerItem, wanted: Set[str]) -> bool:
    return any(
        key in wanted
        for assignee in item.assignees
        for key in assignee.search_keys()
    )


def _date_window(date_range: Optional[DateRange]) -> Optional[Tuple[datetime, datetime]]:
    """Expand a DateRange to [from 00:00, to 23:59:59.999]; None when inactive."""
    if date_range is None or date_range.from_date is None:
        return None
    to_date = date_range.to_date or date_range.from_date
    return (
        datetime.combine(date_range.from_date, time(0, 0)),
        datetime.combine(to_date, END_OF_DAY),
    )


def _overlaps_window(item: PlannerItem, window: Tuple[datetime, datetime]) -> bool:
    window_start, window_end = window

    if item.start_date:
        # Time periods only need to touch the window
        start = datetime.combine(item.start_date, time(0, 0))
        end = datetime.combine(item.end_date or item.start_date, time(0, 0))
        return start <= window_end and end >= window_start

    due = effective_due_date(item)
    if due is None:
        return False
    due_at = datetime.combine(due, time(0, 0))
    return window_start <= due_at <= window_end


def _coerce_periods(periods: Iterable[Union[EventPeriod, str]]) -> Set[EventPeriod]:
    resolved = set()
    for period in periods:
        try:
            resolved.add(EventPeriod(period))
        except ValueError:
            raise UnknownEventPeriodError(f"Unknown event period: {period!r}") from None
    return resolved


def filter_events_by_period(
    items: Iterable[PlannerItem],
    periods: Iterable[Union[EventPeriod, str]],
    now: Optional[datetime] = None,
) -> List[PlannerItem]:
    """Filter events by relative period (past, this week, this month, upcoming).

    An item is kept if it matches ANY selected period. Selecting no period,
    or every period, keeps everything.

    Args:
        items: Events to filter
        periods: Selected EventPeriod values
        now: Reference instant (defaults to the planner clock)

    Raises:
        UnknownEventPeriodError: if a period is not a valid EventPeriod
    """
    selected = _coerce_periods(periods)
    items = list(items)
    if not selected or selected == set(EventPeriod):
        return items

    now = current_datetime() if now is None else to_local_naive(now)
    week_ago = now - timedelta(days=7)
    month_ago = now - relativedelta(months=1)

    def matches(item: PlannerItem) -> bool:
        if item.start_date is None:
            return False
        start = datetime.combine(item.start_date, item.start_time or time(0, 0))
        end = datetime.combine(item.end_date or item.start_date, item.end_time or END_OF_DAY)

        if EventPeriod.PAST in selected and end < now:
            return True
        if EventPeriod.UPCOMING in selected and start > now:
            return True
        if EventPeriod.THIS_WEEK in selected and week_ago <= start <= now:
            return True
        if EventPeriod.THIS_MONTH in selected and month_ago <= start <= now:
            return True
        return False

    return [item for item in items if matches(item)]


def collect_assignees(items: Iterable[PlannerItem]) -> List[str]:
    """Collect the distinct participant names across tasks and events, sorted."""
    names = {assignee.display_name() for item in items for assignee in item.assignees}
    return sorted(names, key=collation_key)


def search_stats(total: int, showing: int) -> SearchStats:
    """Summarize a filtered list as showing/total plus a whole percentage."""
    percentage = round_half_up(showing / total * 100) if total > 0 else 0
    return SearchStats(showing=showing, total=total, percentage=percentage)


def highlight_search_term(
    text: str,
    search_term: str,
    open_tag: str = HIGHLIGHT_OPEN_TAG,
    close_tag: str = HIGHLIGHT_CLOSE_TAG,
) -> str:
    """Wrap every case-insensitive occurrence of search_term in highlight tags."""
    if not search_term or not text:
        return text
    pattern = re.compile(f"({re.escape(search_term)})", re.IGNORECASE)
    return pattern.sub(lambda m: f"{open_tag}{m.group(1)}{close_tag}", text)
