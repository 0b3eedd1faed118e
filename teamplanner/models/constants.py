"""Constants for teamplanner.

This module centralizes rank tables and display defaults used throughout the engine.
"""

from teamplanner.models.item import TaskPriority, TaskStatus


# Priority sort (lower rank first)
PRIORITY_RANK = {
    TaskPriority.URGENT: 0,
    TaskPriority.HIGH: 1,
    TaskPriority.NORMAL: 2,
    TaskPriority.LOW: 3,
}

# Kanban column order
STATUS_ORDER = {
    TaskStatus.TO_DO: 0,
    TaskStatus.IN_PROGRESS: 1,
    TaskStatus.DONE: 2,
}

# Duration units
MS_PER_MINUTE = 60 * 1000
MS_PER_HOUR = 60 * MS_PER_MINUTE
MS_PER_DAY = 24 * MS_PER_HOUR

# Dashboard defaults
DEFAULT_UPCOMING_DAYS = 7
DEFAULT_UPCOMING_LIMIT = 3

# Search highlighting
HIGHLIGHT_OPEN_TAG = '<mark class="bg-yellow-200 px-0.5 rounded">'
HIGHLIGHT_CLOSE_TAG = "</mark>"
