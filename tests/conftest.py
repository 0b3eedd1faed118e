"""Pytest fixtures and configuration for teamplanner tests."""

import pytest
import uuid
from datetime import date, datetime

from teamplanner import config
from teamplanner.models.item import PlannerItem, ItemKind, TaskStatus, TaskPriority


@pytest.fixture(autouse=True)
def planner_timezone_utc(monkeypatch):
    """Pin the planner clock to UTC regardless of the developer's .env."""
    monkeypatch.setattr(config, "PLANNER_TIMEZONE", "UTC")


@pytest.fixture
def today():
    """Fixed reference day used instead of the wall clock."""
    return date(2025, 6, 15)


@pytest.fixture
def now():
    """Fixed reference instant (2025-06-15 10:00)."""
    return datetime(2025, 6, 15, 10, 0)


@pytest.fixture
def sample_item_base():
    """Base task data for creating test items.

    Returns a dict with default item attributes that can be overridden.
    """
    return {
        "id": str(uuid.uuid4()),
        "kind": ItemKind.TASK,
        "title": "Test Task",
        "description": "Test description",
        "location": None,
        "start_date": None,
        "end_date": None,
        "start_time": None,
        "end_time": None,
        "due_date": None,
        "status": TaskStatus.TO_DO,
        "priority": TaskPriority.NORMAL,
        "assignees": [],
        "progress": None,
        "event_id": "event-1",
        "is_personal": False,
    }


@pytest.fixture
def make_item(sample_item_base):
    """Factory fixture: build a PlannerItem with a fresh id and overrides."""
    def _make(**overrides):
        return PlannerItem(**{**sample_item_base, "id": str(uuid.uuid4()), **overrides})
    return _make


@pytest.fixture
def make_event(sample_item_base):
    """Factory fixture: build an event-kind PlannerItem."""
    def _make(**overrides):
        base = {
            **sample_item_base,
            "id": str(uuid.uuid4()),
            "kind": ItemKind.EVENT,
            "title": "Test Event",
            "status": None,
            "priority": None,
            "event_id": None,
        }
        return PlannerItem(**{**base, **overrides})
    return _make


@pytest.fixture
def sample_task(make_item):
    """Create a sample task."""
    return make_item()


@pytest.fixture
def period_task(make_item):
    """Task spanning 2025-06-10 .. 2025-06-20 with no times."""
    return make_item(title="Sprint", start_date=date(2025, 6, 10), end_date=date(2025, 6, 20))


@pytest.fixture
def workday_task(make_item):
    """Single-day task on 2025-06-15 from 09:00 to 17:00."""
    return make_item(
        title="Workshop",
        start_date=date(2025, 6, 15),
        end_date=date(2025, 6, 15),
        start_time="09:00",
        end_time="17:00",
    )
