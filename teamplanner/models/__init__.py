"""Data models for teamplanner."""

from teamplanner.models.item import PlannerItem, Assignee, ItemKind, TaskStatus, TaskPriority
from teamplanner.models.filters import FilterOptions, DateRange, SortKey, EventPeriod

__all__ = [
    "PlannerItem",
    "Assignee",
    "ItemKind",
    "TaskStatus",
    "TaskPriority",
    "FilterOptions",
    "DateRange",
    "SortKey",
    "EventPeriod",
]
