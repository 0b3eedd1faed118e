"""PlannerItem creation from external records.

This module is the only place that knows about persistence-layer field
names. Supabase rows (`start_at`/`end_at` timestamps, `task_status`, ...)
and camelCase client records (`startDate`, `date`/`time`, `dueDate`, ...)
are translated into the normalized PlannerItem shape here, so the engine
never has to guess what kind of record it was handed.

Bad data never raises: unreadable dates, times, statuses or priorities and
non-text titles, descriptions or ids are dropped with a warning (numbers are
kept as text) so a single corrupt record cannot break a list.
"""

import logging
from datetime import date, datetime, time
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from dateutil import parser as date_parser

from teamplanner.config import to_local_naive
from teamplanner.engine.formatting import parse_date, parse_time
from teamplanner.models.item import Assignee, ItemKind, PlannerItem, TaskPriority, TaskStatus

logger = logging.getLogger(__name__)


def split_timestamp(value: Union[str, datetime, None]) -> Tuple[Optional[date], Optional[time]]:
    """Split an ISO timestamp into planner-local date and "HH:MM" time.

    Offset-bearing timestamps are converted to the planner timezone first.

    Args:
        value: ISO-8601 timestamp string or datetime

    Returns:
        (date, time) tuple, or (None, None) if the value is empty or unreadable
    """
    if value is None or value == "":
        return None, None
    if isinstance(value, datetime):
        moment = value
    else:
        try:
            moment = date_parser.isoparse(str(value).strip())
        except (ValueError, OverflowError):
            logger.warning(f"Ignoring unreadable timestamp {value!r}")
            return None, None

    moment = to_local_naive(moment)
    return moment.date(), time(moment.hour, moment.minute)


def _enum_or_none(enum_cls, value: Any, record_id: str, field: str):
    if value is None or value == "":
        return None
    try:
        return enum_cls(value)
    except (TypeError, ValueError):
        logger.warning(f"Ignoring unknown {field} {value!r} on record {record_id}")
        return None


def _date_or_none(value: Any, record_id: str, field: str) -> Optional[date]:
    parsed = parse_date(value)
    if parsed is None and value not in (None, ""):
        logger.warning(f"Ignoring unreadable {field} {value!r} on record {record_id}")
    return parsed


def _time_or_none(value: Any, record_id: str, field: str) -> Optional[time]:
    parsed = parse_time(value)
    if parsed is None and value not in (None, ""):
        logger.warning(f"Ignoring unreadable {field} {value!r} on record {record_id}")
    return parsed


def _text_or_none(value: Any, record_id: str, field: str) -> Optional[str]:
    if value is None or value == "":
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    logger.warning(f"Ignoring non-text {field} {value!r} on record {record_id}")
    return None


def _personal_flag(explicit: Any, event_id: Optional[str]) -> bool:
    # Personal means "belongs to no event" unless the record says otherwise
    if isinstance(explicit, bool):
        return explicit
    return event_id is None


def _assignees_from(raw: Any) -> List[Assignee]:
    """Build Assignee objects from user-id strings or user dicts (snake or camel case)."""
    assignees = []
    for entry in raw or []:
        if isinstance(entry, str):
            assignees.append(Assignee(user_id=entry))
        elif isinstance(entry, Mapping):
            user_id = entry.get("user_id") or entry.get("userId")
            if not user_id:
                logger.warning(f"Skipping assignee without user id: {entry!r}")
                continue
            assignees.append(
                Assignee(
                    user_id=str(user_id),
                    username=_text_or_none(entry.get("username"), str(user_id), "username"),
                    email=_text_or_none(entry.get("email"), str(user_id), "email"),
                )
            )
        else:
            logger.warning(f"Skipping unrecognized assignee entry: {entry!r}")
    return assignees


def create_item_base(record_id: str, kind: ItemKind, fields: Dict[str, Any]) -> PlannerItem:
    """Create a PlannerItem, enforcing the end >= start invariant softly.

    An end date before the start date is dropped (with its end time) instead
    of failing validation.

    Args:
        record_id: Identifier used in log messages and as the item id
        kind: Task or event
        fields: Already-normalized PlannerItem fields

    Returns:
        PlannerItem
    """
    start, end = fields.get("start_date"), fields.get("end_date")
    if start is not None and end is not None and end < start:
        logger.warning(f"Dropping end date {end} before start date {start} on record {record_id}")
        fields = {**fields, "end_date": None, "end_time": None}
    return PlannerItem(id=record_id, kind=kind, **fields)


def item_from_task_row(row: Mapping[str, Any]) -> PlannerItem:
    """Translate a `tasks` table row into a PlannerItem.

    The row's `end_at` doubles as the due date, so a task with only an end
    timestamp is still due on that day.
    """
    record_id = str(row.get("task_id") or row.get("id") or "")
    start_date, start_time = split_timestamp(row.get("start_at"))
    end_date, end_time = split_timestamp(row.get("end_at"))
    event_id = _text_or_none(row.get("event_id"), record_id, "event_id")

    return create_item_base(record_id, ItemKind.TASK, {
        "title": _text_or_none(row.get("title"), record_id, "title") or "",
        "description": _text_or_none(row.get("description"), record_id, "description"),
        "start_date": start_date,
        "start_time": start_time,
        "end_date": end_date,
        "end_time": end_time,
        "due_date": end_date,
        "status": _enum_or_none(TaskStatus, row.get("task_status"), record_id, "status"),
        "priority": _enum_or_none(TaskPriority, row.get("task_priority"), record_id, "priority"),
        "assignees": _assignees_from(row.get("assignees")),
        "event_id": event_id,
        "is_personal": _personal_flag(row.get("is_personal"), event_id),
    })


def item_from_event_row(row: Mapping[str, Any], progress: Optional[int] = None) -> PlannerItem:
    """Translate an `events` table row into a PlannerItem.

    Args:
        row: Event row
        progress: Completion percentage computed from the event's tasks, if known
    """
    record_id = str(row.get("event_id") or row.get("id") or "")
    start_date, start_time = split_timestamp(row.get("start_at"))
    end_date, end_time = split_timestamp(row.get("end_at"))

    return create_item_base(record_id, ItemKind.EVENT, {
        "title": _text_or_none(row.get("title"), record_id, "title") or "",
        "description": _text_or_none(row.get("description"), record_id, "description"),
        "location": _text_or_none(row.get("location"), record_id, "location"),
        "start_date": start_date,
        "start_time": start_time,
        "end_date": end_date,
        "end_time": end_time,
        "assignees": _assignees_from(row.get("members")),
        "progress": progress,
    })


def item_from_record(record: Mapping[str, Any], kind: Union[ItemKind, str]) -> PlannerItem:
    """Translate a camelCase client record into a PlannerItem.

    Tasks carry `startDate`/`endDate`/`startTime`/`endTime`/`dueDate`;
    events carry `date`/`time`/`endDate`/`endTime`. The caller states which
    one it has.
    """
    kind = ItemKind(kind)
    record_id = str(record.get("id") or record.get("taskId") or record.get("eventId") or "")

    if kind == ItemKind.EVENT:
        start_date = _date_or_none(record.get("date"), record_id, "date")
        start_time = _time_or_none(record.get("time"), record_id, "time")
        participants = record.get("members")
    else:
        start_date = _date_or_none(record.get("startDate"), record_id, "startDate")
        start_time = _time_or_none(record.get("startTime"), record_id, "startTime")
        participants = record.get("assignees")

    progress = record.get("progress")
    if progress is not None:
        try:
            progress = max(0, min(100, int(progress)))
        except (TypeError, ValueError, OverflowError):
            logger.warning(f"Ignoring unreadable progress {progress!r} on record {record_id}")
            progress = None

    event_id = _text_or_none(record.get("eventId"), record_id, "eventId")
    title = record.get("title")
    if title is None or title == "":
        title = record.get("name")

    return create_item_base(record_id, kind, {
        "title": _text_or_none(title, record_id, "title") or "",
        "description": _text_or_none(record.get("description"), record_id, "description"),
        "location": _text_or_none(record.get("location"), record_id, "location"),
        "start_date": start_date,
        "start_time": start_time,
        "end_date": _date_or_none(record.get("endDate"), record_id, "endDate"),
        "end_time": _time_or_none(record.get("endTime"), record_id, "endTime"),
        "due_date": _date_or_none(record.get("dueDate"), record_id, "dueDate"),
        "status": _enum_or_none(TaskStatus, record.get("status") or record.get("taskStatus"), record_id, "status"),
        "priority": _enum_or_none(TaskPriority, record.get("priority") or record.get("taskPriority"), record_id, "priority"),
        "assignees": _assignees_from(participants),
        "progress": progress,
        "event_id": event_id,
        "is_personal": kind == ItemKind.TASK and _personal_flag(record.get("isPersonal"), event_id),
    })
