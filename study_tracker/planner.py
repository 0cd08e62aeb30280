"""
Study Tracker - application facade

Wires configuration, logging, storage and the dashboard views together and
holds the UI state the views depend on (calendar month, task list filter).
A front end calls the mutation methods in response to user actions and
renders the PlannerView each one returns.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, List, Mapping, Optional, Union

from study_tracker.core import (
    BlobStore,
    Config,
    Task,
    TaskDraft,
    TaskStore,
    configure_logging,
    get_blob_store,
)
from study_tracker.dashboard import (
    CalendarBuilder,
    CalendarGrid,
    DashboardAggregator,
    DashboardSummary,
    FilterCriteria,
    ProgressAnalyzer,
    ProgressReport,
    filter_tasks,
    list_subjects,
    shift_month,
)

logger = logging.getLogger(__name__)


def _local_now() -> datetime:
    return datetime.now().astimezone()


@dataclass
class PlannerView:
    """Everything a front end needs to redraw after a change."""
    generated_at: datetime
    tasks: List[Task]
    criteria: FilterCriteria
    subjects: List[str]
    dashboard: DashboardSummary
    calendar: CalendarGrid
    progress: ProgressReport
    total_tasks: int = 0

    @property
    def no_matches(self) -> bool:
        """Tasks exist but none pass the current filter"""
        return self.total_tasks > 0 and not self.tasks


class Planner:
    """
    Application controller for the task tracker.

    Mutations go through the TaskStore (which persists immediately); every
    mutation is followed by a full refresh of all views.
    """

    def __init__(self, config: Optional[Config] = None,
                 blob_store: Optional[BlobStore] = None,
                 clock: Optional[Callable[[], datetime]] = None):
        """
        Initialize the planner.

        Args:
            config: Configuration (creates default if not provided)
            blob_store: Storage backend (built from config if not provided)
            clock: Returns the current time (defaults to local now)
        """
        self.config = config if config else Config()
        configure_logging(self.config.get("log_level", default="INFO"))

        self.clock = clock or _local_now
        self.blob_store = blob_store if blob_store is not None else get_blob_store(self.config)
        self.store = TaskStore(
            self.blob_store,
            key=self.config.get("storage_key", default="tasks"),
            clock=self.clock,
        )

        self.aggregator = DashboardAggregator(self.config)
        self.calendar_builder = CalendarBuilder(self.config)
        self.analyzer = ProgressAnalyzer(self.config)

        self.criteria = FilterCriteria()
        self.year = 0
        self.month = 0
        self.go_to_today()

    # =========================================================================
    # Navigation and filter state
    # =========================================================================

    def go_to_today(self) -> None:
        today = self.clock()
        self.year, self.month = today.year, today.month - 1

    def previous_month(self) -> CalendarGrid:
        self.year, self.month = shift_month(self.year, self.month, -1)
        return self.build_calendar()

    def next_month(self) -> CalendarGrid:
        self.year, self.month = shift_month(self.year, self.month, 1)
        return self.build_calendar()

    def set_filter(self, subject: Optional[str] = None, priority: Optional[str] = None,
                   status: Optional[str] = None) -> List[Task]:
        """Replace the task list filter and return the filtered list"""
        criteria = FilterCriteria(subject=subject or None, priority=priority or None,
                                  status=status or None)
        # Validate before committing the new state
        tasks = filter_tasks(self.store.all(), criteria)
        self.criteria = criteria
        return tasks

    # =========================================================================
    # Mutations
    # =========================================================================

    def add_task(self, draft: Union[TaskDraft, Mapping[str, Any]]) -> PlannerView:
        task = self.store.add(draft)
        logger.debug(f"Refreshing views after adding task {task.id}")
        return self.refresh()

    def toggle_task(self, task_id: int) -> PlannerView:
        self.store.toggle_complete(task_id)
        return self.refresh()

    def delete_task(self, task_id: int) -> PlannerView:
        self.store.delete(task_id)
        return self.refresh()

    # =========================================================================
    # Views
    # =========================================================================

    def build_calendar(self, now: Optional[datetime] = None) -> CalendarGrid:
        now = now or self.clock()
        return self.calendar_builder.build(self.store.all(), self.year, self.month, today=now)

    def refresh(self, now: Optional[datetime] = None) -> PlannerView:
        """
        Recompute every view from the current task snapshot.

        Args:
            now: Current datetime (defaults to the planner clock)

        Returns:
            PlannerView with filtered list, dashboard, calendar and progress
        """
        now = now or self.clock()
        snapshot = self.store.all()

        return PlannerView(
            generated_at=now,
            tasks=filter_tasks(snapshot, self.criteria),
            criteria=self.criteria,
            subjects=list_subjects(snapshot),
            dashboard=self.aggregator.aggregate(snapshot, now),
            calendar=self.build_calendar(now),
            progress=self.analyzer.analyze(snapshot),
            total_tasks=len(snapshot),
        )
