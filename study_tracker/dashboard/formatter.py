"""
Display text helpers for Study Tracker views.

Plain strings only; how they are laid out and styled is up to the
presentation layer.
"""

from datetime import datetime
from typing import Optional

from study_tracker.core.models import Task
from study_tracker.dashboard.aggregator import days_until
from study_tracker.dashboard.progress import ActivityEntry

EMPTY_STATES = {
    "tasks": "No tasks found matching your filters.",
    "dashboard": "No pending tasks. Great job!",
    "subjects": "No pending tasks",
    "activity": "No activity yet",
}

ACTIVITY_ICONS = {
    "completed": "✅",
    "created": "📝",
}


def deadline_text(task: Task, now: datetime) -> str:
    """Deadline proximity, e.g. 'Due tomorrow' or 'Overdue by 2 day(s)'."""
    remaining = days_until(task.deadline, now)

    if remaining < 0:
        return f"Overdue by {abs(remaining)} day(s)"
    elif remaining == 0:
        return "Due today"
    elif remaining == 1:
        return "Due tomorrow"
    else:
        return f"Due in {remaining} days"


def estimated_time_text(task: Task) -> str:
    """Estimated hours as '2.5h', or 'N/A' when not given."""
    if task.estimated_time is None:
        return "N/A"
    return f"{task.estimated_time:g}h"


def activity_text(entry: ActivityEntry) -> str:
    """Timeline line such as 'Completed: Read chapter 3'."""
    return f"{entry.action.capitalize()}: {entry.task.title}"


def activity_icon(entry: ActivityEntry) -> str:
    return ACTIVITY_ICONS.get(entry.action, "")


def empty_state(view: str) -> Optional[str]:
    """Placeholder message for an empty view, or None for unknown views."""
    return EMPTY_STATES.get(view)
