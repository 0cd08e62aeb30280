"""
Task list filtering for Study Tracker.

Maps a task snapshot and optional subject/priority/status criteria to the
matching tasks, ordered by deadline.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional

from study_tracker.core.models import STATUSES, Task


@dataclass
class FilterCriteria:
    """Task list filter; empty or None fields impose no constraint."""
    subject: Optional[str] = None
    priority: Optional[str] = None
    status: Optional[str] = None  # 'pending', 'completed' or None for both

    def is_empty(self) -> bool:
        return not (self.subject or self.priority or self.status)


def filter_tasks(
    tasks: Iterable[Task],
    criteria: Optional[FilterCriteria] = None,
    *,
    subject: Optional[str] = None,
    priority: Optional[str] = None,
    status: Optional[str] = None,
) -> List[Task]:
    """
    Filter tasks and sort them by deadline.

    Criteria may be passed as a FilterCriteria or as keywords; keywords
    override the matching FilterCriteria field.

    Args:
        tasks: Task snapshot (not modified)
        criteria: Bundled filter criteria
        subject: Exact subject match
        priority: Exact priority match
        status: 'pending' excludes completed tasks, 'completed' excludes
            pending ones

    Returns:
        Matching tasks, earliest deadline first (ties keep input order)

    Raises:
        ValueError: status is not 'pending', 'completed' or empty
    """
    if criteria is None:
        criteria = FilterCriteria()
    subject = subject or criteria.subject
    priority = priority or criteria.priority
    status = status or criteria.status

    if status and status not in STATUSES:
        raise ValueError(f"Unknown status filter: {status}")

    matched = [
        task for task in tasks
        if (not subject or task.subject == subject)
        and (not priority or task.priority == priority)
        and (not status or task.status == status)
    ]
    matched.sort(key=lambda t: t.deadline)
    return matched


def list_subjects(tasks: Iterable[Task]) -> List[str]:
    """Distinct subjects, sorted, for the subject filter options."""
    return sorted({task.subject for task in tasks})
