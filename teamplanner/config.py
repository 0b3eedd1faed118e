"""Runtime configuration for teamplanner.

Values come from the environment (optionally a local `.env` file).
"""

import logging
import os
from datetime import date, datetime, timezone, tzinfo
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

# Timezone used for "now" and for converting offset-bearing timestamps
PLANNER_TIMEZONE = os.getenv("PLANNER_TIMEZONE", "UTC")

# Upcoming-deadlines dashboard widget
PLANNER_UPCOMING_DAYS = int(os.getenv("PLANNER_UPCOMING_DAYS", "7"))
PLANNER_UPCOMING_LIMIT = int(os.getenv("PLANNER_UPCOMING_LIMIT", "3"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
DEBUG = os.getenv("DEBUG", "False").lower() == "true"


def get_timezone(name: Optional[str] = None) -> tzinfo:
    """Return the planner timezone, falling back to UTC for unknown names."""
    tz_name = name or PLANNER_TIMEZONE
    if tz_name.upper() == "UTC":
        return timezone.utc
    try:
        return ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning(f"Unknown timezone {tz_name!r}; using UTC")
        return timezone.utc


def to_local_naive(dt: datetime) -> datetime:
    """Convert an aware datetime to naive planner-local time; naive values pass through."""
    if dt.tzinfo is None:
        return dt
    return dt.astimezone(get_timezone()).replace(tzinfo=None)


def current_datetime() -> datetime:
    """Naive wall-clock time in the planner timezone."""
    return datetime.now(get_timezone()).replace(tzinfo=None)


def current_date() -> date:
    return current_datetime().date()


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging once for scripts and tests."""
    resolved = "DEBUG" if DEBUG else (level or LOG_LEVEL)
    logging.basicConfig(
        level=getattr(logging, resolved, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
