"""
Dashboard module for Study Tracker.

Derived views over the task list: filtered task list, dashboard summary,
month calendar and progress statistics, plus display text helpers.
"""

from .filters import (
    FilterCriteria,
    filter_tasks,
    list_subjects,
)
from .aggregator import (
    DashboardAggregator,
    DashboardSummary,
    days_until,
    is_urgent,
)
from .calendar_view import (
    CalendarBuilder,
    CalendarCell,
    CalendarGrid,
    month_title,
    shift_month,
)
from .progress import (
    ProgressAnalyzer,
    ProgressReport,
    SubjectShare,
    ActivityEntry,
    completion_rate,
)
from .formatter import (
    deadline_text,
    estimated_time_text,
    activity_text,
    activity_icon,
    empty_state,
)

__all__ = [
    # Filters
    'FilterCriteria',
    'filter_tasks',
    'list_subjects',
    # Aggregator
    'DashboardAggregator',
    'DashboardSummary',
    'days_until',
    'is_urgent',
    # Calendar
    'CalendarBuilder',
    'CalendarCell',
    'CalendarGrid',
    'month_title',
    'shift_month',
    # Progress
    'ProgressAnalyzer',
    'ProgressReport',
    'SubjectShare',
    'ActivityEntry',
    'completion_rate',
    # Formatter
    'deadline_text',
    'estimated_time_text',
    'activity_text',
    'activity_icon',
    'empty_state',
]
