"""Activity window detection for teamplanner.

An item is "happening now" when today falls inside its date span and,
for a single-day item with a full time range, the current minute falls
inside that range too.
"""

from datetime import datetime
from typing import Iterable, List, Optional

from teamplanner.config import current_datetime, to_local_naive
from teamplanner.models.item import PlannerItem


def is_active(item: PlannerItem, now: Optional[datetime] = None) -> bool:
    """Check if an item is currently ongoing.

    Args:
        item: Task or event to check
        now: Reference instant (defaults to the planner clock)

    Returns:
        True if now falls within the item's active window
    """
    start = item.start_date
    if start is None:
        return False
    end = item.end_date or start

    now = current_datetime() if now is None else to_local_naive(now)
    today = now.date()
    if not (start <= today <= end):
        return False

    if start == end and item.start_time is not None and item.end_time is not None:
        # Minute resolution, both bounds inclusive
        current_minute = now.time().replace(second=0, microsecond=0)
        start_minute = item.start_time.replace(second=0, microsecond=0)
        end_minute = item.end_time.replace(second=0, microsecond=0)
        return start_minute <= current_minute <= end_minute

    return True


def active_items(items: Iterable[PlannerItem], now: Optional[datetime] = None) -> List[PlannerItem]:
    """Return the items that are ongoing at `now`, in input order."""
    if now is None:
        now = current_datetime()
    return [item for item in items if is_active(item, now)]
