"""Dashboard aggregates for teamplanner.

Backs the "Progress Overview" and "Upcoming Deadlines" widgets.
"""

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterable, List, Optional

from teamplanner import config
from teamplanner.engine.due_dates import effective_due_date
from teamplanner.engine.ranges import round_half_up
from teamplanner.engine.ranking import sort_items
from teamplanner.models.filters import SortKey
from teamplanner.models.item import PlannerItem, TaskStatus


@dataclass(frozen=True)
class EventProgress:
    """Task completion for one event."""

    total: int
    done: int
    progress: int


def event_progress(event_id: str, tasks: Iterable[PlannerItem]) -> EventProgress:
    """Compute how many of an event's tasks are done.

    Args:
        event_id: Event to summarize
        tasks: Any task list; tasks of other events are ignored

    Returns:
        EventProgress with a whole-number percentage (0 when the event has no tasks)
    """
    related = [task for task in tasks if task.event_id == event_id]
    total = len(related)
    done = sum(1 for task in related if task.status == TaskStatus.DONE)
    progress = round_half_up(done / total * 100) if total else 0
    return EventProgress(total=total, done=done, progress=progress)


def upcoming_deadlines(
    items: Iterable[PlannerItem],
    today: date,
    days: Optional[int] = None,
    limit: Optional[int] = None,
) -> List[PlannerItem]:
    """Unfinished items due between today and `days` days from now.

    Args:
        items: Tasks to scan
        today: Reference day
        days: Look-ahead in days (defaults to PLANNER_UPCOMING_DAYS)
        limit: Maximum number of items returned (defaults to PLANNER_UPCOMING_LIMIT)

    Returns:
        Items ordered by effective due date, earliest first
    """
    days = config.PLANNER_UPCOMING_DAYS if days is None else days
    limit = config.PLANNER_UPCOMING_LIMIT if limit is None else limit
    horizon = today + timedelta(days=days)

    upcoming = []
    for item in items:
        if item.status == TaskStatus.DONE:
            continue
        due = effective_due_date(item)
        if due is not None and today <= due <= horizon:
            upcoming.append(item)

    return sort_items(upcoming, SortKey.DATE)[:limit]
