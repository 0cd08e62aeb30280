"""
Progress statistics for Study Tracker.

Completion rate, the spread of pending work across subjects, and a short
timeline of the most recently created tasks.
"""

import math
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Iterable, List, Optional

from study_tracker.core.config import Config
from study_tracker.core.models import Task

DEFAULT_ACTIVITY_LIMIT = 5


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up (not banker's rounding)."""
    return int(math.floor(value + 0.5))


def completion_rate(total: int, completed: int) -> int:
    """Completed share of all tasks as a whole percentage; 0 with no tasks."""
    if total <= 0:
        return 0
    return round_half_up(completed / total * 100)


@dataclass
class SubjectShare:
    """Pending tasks for one subject."""
    subject: str
    count: int
    percentage: int


@dataclass
class ActivityEntry:
    """
    Timeline entry for a task.

    Completion time is not recorded, so the entry is stamped with the
    creation time and reads "completed" whenever the task is currently
    completed.
    """
    task: Task
    action: str  # 'completed' or 'created'
    timestamp: datetime


@dataclass
class ProgressReport:
    """Progress view data."""
    total: int = 0
    completed: int = 0
    pending: int = 0
    completion_rate: int = 0
    subject_distribution: List[SubjectShare] = field(default_factory=list)
    recent_activity: List[ActivityEntry] = field(default_factory=list)


class ProgressAnalyzer:
    """Computes the progress view from a task snapshot."""

    def __init__(self, config: Optional[Config] = None):
        self.config = config

    @property
    def activity_limit(self) -> int:
        if self.config is None:
            return DEFAULT_ACTIVITY_LIMIT
        return int(self.config.get("activity_limit", "preferences", DEFAULT_ACTIVITY_LIMIT))

    def subject_distribution(self, tasks: Iterable[Task]) -> List[SubjectShare]:
        """
        Group pending tasks by subject, largest group first.

        Groups with equal counts keep the order in which their subject first
        appears. Percentages are of all pending tasks and are rounded per
        group, so they need not sum to exactly 100.
        """
        counts: Dict[str, int] = {}
        for task in tasks:
            if not task.completed:
                counts[task.subject] = counts.get(task.subject, 0) + 1

        total_pending = sum(counts.values())
        if total_pending == 0:
            return []

        ordered = sorted(counts.items(), key=lambda item: item[1], reverse=True)
        return [
            SubjectShare(
                subject=subject,
                count=count,
                percentage=round_half_up(count / total_pending * 100),
            )
            for subject, count in ordered
        ]

    def recent_activity(self, tasks: Iterable[Task]) -> List[ActivityEntry]:
        """Newest tasks first, capped at the activity limit."""
        newest = sorted(tasks, key=lambda t: t.created_at, reverse=True)
        return [
            ActivityEntry(
                task=task,
                action="completed" if task.completed else "created",
                timestamp=task.created_at,
            )
            for task in newest[:self.activity_limit]
        ]

    def analyze(self, tasks: Iterable[Task]) -> ProgressReport:
        """
        Build the progress report.

        Args:
            tasks: Task snapshot (not modified)

        Returns:
            ProgressReport with rate, subject distribution and timeline
        """
        tasks = list(tasks)
        completed = sum(1 for t in tasks if t.completed)

        return ProgressReport(
            total=len(tasks),
            completed=completed,
            pending=len(tasks) - completed,
            completion_rate=completion_rate(len(tasks), completed),
            subject_distribution=self.subject_distribution(tasks),
            recent_activity=self.recent_activity(tasks),
        )
