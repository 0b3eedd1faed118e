"""Sorting logic for teamplanner.

Orders task and event lists by date, name, progress/priority or status.
Sorting is stable (equal keys keep their input order) and never mutates
the input list.
"""

import logging
import unicodedata
from datetime import datetime, time
from typing import Callable, Dict, Iterable, List, Union

from teamplanner.engine.due_dates import effective_due_date
from teamplanner.models.constants import PRIORITY_RANK, STATUS_ORDER
from teamplanner.models.filters import SortKey
from teamplanner.models.item import PlannerItem

logger = logging.getLogger(__name__)


class UnknownSortKeyError(ValueError):
    """Raised when a sort key is not one of SortKey."""


def sort_items(items: Iterable[PlannerItem], key: Union[SortKey, str]) -> List[PlannerItem]:
    """Sort tasks or events by the selected key.

    - date: tasks by effective due date, events by start; undated items last
    - name: locale-aware, case-insensitive title order
    - progress: tasks by priority rank (Urgent first), events by completion
      percentage (highest first)
    - status: To Do, In Progress, Done

    Args:
        items: Items to sort (left untouched)
        key: SortKey or its string value

    Returns:
        New sorted list

    Raises:
        UnknownSortKeyError: if key is not a valid SortKey
    """
    try:
        sort_key = SortKey(key)
    except ValueError:
        raise UnknownSortKeyError(f"Unknown sort key: {key!r}") from None

    key_func = _KEY_FUNCS[sort_key]
    ranked = sorted(items, key=key_func)
    logger.debug(f"Sorted {len(ranked)} items by {sort_key.value}")
    return ranked


def collation_key(text: str) -> tuple:
    """Get a locale-aware sort key for display text.

    Accents and case are ignored first; the raw text breaks ties so the
    order stays deterministic.

    Args:
        text: Text to collate

    Returns:
        Tuple for sorting: (folded text, original text)
    """
    decomposed = unicodedata.normalize("NFKD", text or "")
    folded = "".join(ch for ch in decomposed if not unicodedata.combining(ch)).casefold()
    return (folded, text or "")


def _date_sort_key(item: PlannerItem) -> tuple:
    """Get sort key for date order.

    Tasks sort by their effective due date. Events sort by when they start.
    Items without a date go after all dated items.

    Args:
        item: Item to get sort key for

    Returns:
        Tuple for sorting: (has_date: 0 or 1, moment or max)
    """
    if item.is_event:
        if item.start_date:
            return (0, datetime.combine(item.start_date, item.start_time or time(0, 0)))
        return (1, datetime.max)

    due = effective_due_date(item)
    if due:
        return (0, datetime.combine(due, time(0, 0)))
    return (1, datetime.max)


def _name_sort_key(item: PlannerItem) -> tuple:
    return collation_key(item.title)


def _progress_sort_key(item: PlannerItem) -> tuple:
    """Get sort key for the progress column.

    Tasks use the fixed priority rank (Urgent=0 ... Low=3). Events use
    completion percentage, highest first.

    Args:
        item: Item to get sort key for

    Returns:
        Tuple for sorting: (has_value: 0 or 1, rank)
    """
    if item.is_event:
        if item.progress is None:
            return (1, 0)
        return (0, -item.progress)

    if item.priority is None:
        return (1, 0)
    return (0, PRIORITY_RANK[item.priority])


def _status_sort_key(item: PlannerItem) -> tuple:
    if item.status is None:
        return (1, 0)
    return (0, STATUS_ORDER[item.status])


_KEY_FUNCS: Dict[SortKey, Callable[[PlannerItem], tuple]] = {
    SortKey.DATE: _date_sort_key,
    SortKey.NAME: _name_sort_key,
    SortKey.PROGRESS: _progress_sort_key,
    SortKey.STATUS: _status_sort_key,
}
