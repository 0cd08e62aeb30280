"""
Data aggregation module for the Study Tracker dashboard.

Counts urgent, upcoming and completed tasks and picks the pending tasks
with the nearest deadlines.
"""

import math
from dataclasses import dataclass, field
from datetime import date, datetime, time, timezone
from typing import Iterable, List, Optional, Union

from study_tracker.core.config import Config
from study_tracker.core.models import Task

SECONDS_PER_DAY = 24 * 60 * 60

DEFAULT_URGENT_WINDOW_DAYS = 3
DEFAULT_PENDING_LIMIT = 5


def days_until(deadline: date, now: Union[datetime, date]) -> int:
    """
    Whole days from now until the start of the deadline day, rounded up.

    The difference is taken on real-valued days and passed through ceil,
    so a deadline that starts right now gives 0, one 25 hours away gives 2,
    and a deadline earlier today gives 0 as well.

    Args:
        deadline: Calendar date the task is due
        now: Current instant; a bare date means its midnight

    Returns:
        Signed day count, negative when overdue
    """
    if not isinstance(now, datetime):
        now = datetime.combine(now, time.min)
    deadline_start = datetime.combine(deadline, time.min, tzinfo=now.tzinfo)
    delta = (deadline_start - now).total_seconds() / SECONDS_PER_DAY
    return math.ceil(delta)


def is_urgent(deadline: date, now: Union[datetime, date],
              window_days: int = DEFAULT_URGENT_WINDOW_DAYS) -> bool:
    """Due within the window from today; overdue tasks are not urgent."""
    remaining = days_until(deadline, now)
    return 0 <= remaining <= window_days


@dataclass
class DashboardSummary:
    """Complete dashboard data structure."""
    generated_at: datetime

    # Counts
    urgent_count: int = 0
    upcoming_count: int = 0
    completed_count: int = 0
    total_count: int = 0

    # Task lists
    urgent: List[Task] = field(default_factory=list)
    upcoming: List[Task] = field(default_factory=list)
    recent_pending: List[Task] = field(default_factory=list)


class DashboardAggregator:
    """
    Dashboard counts and the short list of nearest pending tasks.

    "Upcoming" is every incomplete task that is not urgent, which includes
    overdue tasks; there is no separate overdue bucket.
    """

    def __init__(self, config: Optional[Config] = None):
        """
        Initialize aggregator.

        Args:
            config: Configuration for the urgency window and list length
                (built-in defaults if not provided)
        """
        self.config = config

    def _preference(self, key: str, default: int) -> int:
        if self.config is None:
            return default
        return int(self.config.get(key, "preferences", default))

    @property
    def urgent_window_days(self) -> int:
        return self._preference("urgent_window_days", DEFAULT_URGENT_WINDOW_DAYS)

    @property
    def pending_limit(self) -> int:
        return self._preference("dashboard_pending_limit", DEFAULT_PENDING_LIMIT)

    def aggregate(self, tasks: Iterable[Task],
                  now: Optional[datetime] = None) -> DashboardSummary:
        """
        Aggregate dashboard data.

        Args:
            tasks: Task snapshot (not modified)
            now: Current datetime (defaults to UTC now)

        Returns:
            DashboardSummary with counts and task lists
        """
        if now is None:
            now = datetime.now(timezone.utc)

        tasks = list(tasks)
        window = self.urgent_window_days

        pending = [t for t in tasks if not t.completed]
        urgent = [t for t in pending if is_urgent(t.deadline, now, window)]
        urgent_ids = {t.id for t in urgent}
        upcoming = [t for t in pending if t.id not in urgent_ids]
        completed_count = len(tasks) - len(pending)

        recent_pending = sorted(pending, key=lambda t: t.deadline)[:self.pending_limit]

        return DashboardSummary(
            generated_at=now,
            urgent_count=len(urgent),
            upcoming_count=len(upcoming),
            completed_count=completed_count,
            total_count=len(tasks),
            urgent=urgent,
            upcoming=upcoming,
            recent_pending=recent_pending,
        )
