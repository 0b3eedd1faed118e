"""Filter and sort selection models for teamplanner.

These are plain value objects. The UI layer owns the current selection and
passes it into the engine on every interaction.
"""

from datetime import date, datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from teamplanner.models.item import TaskPriority, TaskStatus


class SortKey(str, Enum):
    """Sort key enumeration."""
    DATE = "date"
    NAME = "name"
    PROGRESS = "progress"  # priority rank for tasks, completion for events
    STATUS = "status"


class EventPeriod(str, Enum):
    """Relative period buckets for the events page."""
    PAST = "past"
    THIS_WEEK = "this_week"
    THIS_MONTH = "this_month"
    UPCOMING = "upcoming"


class DateRange(BaseModel):
    """Inclusive calendar-day range picked in the filter panel."""

    from_date: Optional[date] = Field(None, alias="from", description="First day of the range")
    to_date: Optional[date] = Field(None, alias="to", description="Last day of the range (defaults to from)")

    @field_validator("from_date", "to_date", mode="before")
    @classmethod
    def _strip_time(cls, v):
        # Date pickers hand back datetimes; only the calendar day matters
        if isinstance(v, datetime):
            return v.date()
        return v

    class Config:
        """Pydantic configuration."""
        populate_by_name = True
        frozen = True


class FilterOptions(BaseModel):
    """Active filter selections.

    Empty lists mean "no constraint". The toggles only exclude when
    explicitly set to False.
    """

    status: List[TaskStatus] = Field(default_factory=list, description="Allowed statuses")
    priority: List[TaskPriority] = Field(default_factory=list, description="Allowed priorities")
    assignees: List[str] = Field(default_factory=list, description="Username, email or user id to match")
    date_range: Optional[DateRange] = Field(None, description="Calendar range the item must overlap")
    show_completed: Optional[bool] = Field(None, description="False hides Done items")
    show_personal: Optional[bool] = Field(None, description="False hides personal tasks")

    class Config:
        """Pydantic configuration."""
        populate_by_name = True
        frozen = True
