"""Planner item data model for teamplanner.

A PlannerItem is the single normalized shape for both tasks and events.
Persistence-layer records are translated into it once, in item_factory.
"""

from datetime import date, time
from enum import Enum
from typing import Iterator, List, Optional

from pydantic import BaseModel, Field, field_validator


class ItemKind(str, Enum):
    """Item kind enumeration."""
    TASK = "task"
    EVENT = "event"


class TaskStatus(str, Enum):
    """Task status enumeration."""
    TO_DO = "To Do"
    IN_PROGRESS = "In Progress"
    DONE = "Done"


class TaskPriority(str, Enum):
    """Task priority enumeration."""
    URGENT = "Urgent"
    HIGH = "High"
    NORMAL = "Normal"
    LOW = "Low"


class Assignee(BaseModel):
    """A participant on a task (assignee) or event (member)."""

    user_id: str = Field(..., description="User identifier")
    username: Optional[str] = Field(None, description="Display username")
    email: Optional[str] = Field(None, description="User email address")

    def search_keys(self) -> Iterator[str]:
        """Yield every non-empty identifier a search or filter may match."""
        for key in (self.username, self.email, self.user_id):
            if key:
                yield key

    def display_name(self) -> str:
        return self.username or self.email or self.user_id

    class Config:
        """Pydantic configuration."""
        frozen = True


class PlannerItem(BaseModel):
    """Canonical schedulable item (task or event)."""

    id: str = Field(..., description="Task or event identifier")
    kind: ItemKind = Field(ItemKind.TASK, description="Whether this is a task or an event")
    title: str = Field("", description="Title used for search and name sorting")
    description: Optional[str] = Field(None, description="Free-text description")
    location: Optional[str] = Field(None, description="Event location")

    start_date: Optional[date] = Field(None, description="First day of the time period")
    end_date: Optional[date] = Field(None, description="Last day of the time period")
    start_time: Optional[time] = Field(None, description="Start time of day (paired with start_date)")
    end_time: Optional[time] = Field(None, description="End time of day (paired with end_date)")
    due_date: Optional[date] = Field(None, description="Legacy discrete deadline")

    status: Optional[TaskStatus] = Field(None, description="Workflow status")
    priority: Optional[TaskPriority] = Field(None, description="Task priority (tasks only)")
    assignees: List[Assignee] = Field(default_factory=list, description="Task assignees or event members")
    progress: Optional[int] = Field(None, ge=0, le=100, description="Event completion percentage")
    event_id: Optional[str] = Field(None, description="Owning event for a task")
    is_personal: bool = Field(False, description="Task that belongs to no event")

    @field_validator("assignees", mode="before")
    @classmethod
    def _coerce_assignees(cls, v):
        if v is None:
            return []
        # Bare strings are user ids (event members are stored that way)
        return [{"user_id": a} if isinstance(a, str) else a for a in v]

    @field_validator("end_date")
    @classmethod
    def _validate_end_date(cls, v, info):
        start = info.data.get("start_date")
        if v is not None and start is not None and v < start:
            raise ValueError("end_date must be >= start_date")
        return v

    @property
    def is_task(self) -> bool:
        return self.kind == ItemKind.TASK

    @property
    def is_event(self) -> bool:
        return self.kind == ItemKind.EVENT

    class Config:
        """Pydantic configuration."""
        frozen = True
