"""
Month calendar grid for Study Tracker.

Lays out a Sunday-first month view: weekday headers, the tail of the
previous month, every day of the month with the pending tasks due on it,
and the head of the next month to fill the grid.
"""

import calendar
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import Dict, Iterable, List, Optional, Tuple, Union

from study_tracker.core.config import Config
from study_tracker.core.models import Task

WEEKDAY_HEADERS = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")
MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

DEFAULT_TOTAL_CELLS = 42
DEFAULT_MAX_TRAILING_DAYS = 14


@dataclass
class CalendarCell:
    """One day in the grid."""
    day: int
    date: date
    in_month: bool = True
    is_today: bool = False
    tasks: List[Task] = field(default_factory=list)


@dataclass
class CalendarGrid:
    """Month view; `month` is 0-indexed like the navigation state."""
    year: int
    month: int
    first_day_of_week: int  # 0=Sun .. 6=Sat
    days_in_month: int
    days_in_prev_month: int
    headers: Tuple[str, ...] = WEEKDAY_HEADERS
    leading: List[CalendarCell] = field(default_factory=list)
    days: List[CalendarCell] = field(default_factory=list)
    trailing: List[CalendarCell] = field(default_factory=list)

    @property
    def title(self) -> str:
        return month_title(self.year, self.month)

    @property
    def cells(self) -> List[CalendarCell]:
        """Day cells in display order (headers excluded)"""
        return self.leading + self.days + self.trailing

    def cell_for(self, day: int) -> CalendarCell:
        """Current-month cell for a 1-based day number"""
        if not 1 <= day <= self.days_in_month:
            raise ValueError(f"Day {day} outside {self.title}")
        return self.days[day - 1]


def _check_month(month: int) -> None:
    if not 0 <= month <= 11:
        raise ValueError(f"Month must be 0-11, got {month}")


def month_title(year: int, month: int) -> str:
    """'February 2024' for (2024, 1)"""
    _check_month(month)
    return f"{MONTH_NAMES[month]} {year}"


def shift_month(year: int, month: int, delta: int) -> Tuple[int, int]:
    """Move a (year, 0-indexed month) pair by delta months."""
    _check_month(month)
    index = year * 12 + month + delta
    return index // 12, index % 12


class CalendarBuilder:
    """Builds month grids from a task snapshot."""

    def __init__(self, config: Optional[Config] = None):
        self.config = config

    def _preference(self, key: str, default: int) -> int:
        if self.config is None:
            return default
        return int(self.config.get(key, "preferences", default))

    def build(
        self,
        tasks: Iterable[Task],
        year: int,
        month: int,
        today: Optional[Union[date, datetime]] = None,
        total_cells: Optional[int] = None,
    ) -> CalendarGrid:
        """
        Build the grid for one month.

        Args:
            tasks: Task snapshot (not modified); only pending tasks are placed
            year: Calendar year
            month: Month, 0-indexed (0=January)
            today: Date flagged as today (defaults to the local date)
            total_cells: Grid size the trailing fill targets (default 42)

        Returns:
            CalendarGrid for the month
        """
        _check_month(month)
        if today is None:
            today = date.today()
        elif isinstance(today, datetime):
            today = today.date()
        if total_cells is None:
            total_cells = self._preference("calendar_total_cells", DEFAULT_TOTAL_CELLS)
        max_trailing = self._preference("calendar_max_trailing_days", DEFAULT_MAX_TRAILING_DAYS)

        first = date(year, month + 1, 1)
        # date.weekday() is Monday-first; the grid is Sunday-first
        first_day_of_week = (first.weekday() + 1) % 7
        days_in_month = calendar.monthrange(year, month + 1)[1]
        prev_last = first - timedelta(days=1)
        days_in_prev_month = prev_last.day

        by_date: Dict[date, List[Task]] = {}
        for task in tasks:
            if not task.completed:
                by_date.setdefault(task.deadline, []).append(task)

        grid = CalendarGrid(
            year=year,
            month=month,
            first_day_of_week=first_day_of_week,
            days_in_month=days_in_month,
            days_in_prev_month=days_in_prev_month,
        )

        for offset in range(first_day_of_week, 0, -1):
            cell_date = first - timedelta(days=offset)
            grid.leading.append(CalendarCell(day=cell_date.day, date=cell_date, in_month=False))

        for day in range(1, days_in_month + 1):
            cell_date = first + timedelta(days=day - 1)
            grid.days.append(CalendarCell(
                day=day,
                date=cell_date,
                is_today=cell_date == today,
                tasks=list(by_date.get(cell_date, [])),
            ))

        remaining = total_cells - (first_day_of_week + days_in_month)
        next_first = first + timedelta(days=days_in_month)
        for day in range(1, max(0, min(remaining, max_trailing)) + 1):
            cell_date = next_first + timedelta(days=day - 1)
            grid.trailing.append(CalendarCell(day=day, date=cell_date, in_month=False))

        return grid
