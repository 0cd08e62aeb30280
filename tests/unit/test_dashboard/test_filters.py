"""
Unit tests for the filters module.
Tests criteria matching, deadline ordering and subject listing.
"""

import pytest
from datetime import date

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent.parent.parent))

from study_tracker.dashboard.filters import FilterCriteria, filter_tasks, list_subjects


@pytest.fixture
def tasks(make_task):
    """Mixed subjects, priorities and statuses, deliberately out of deadline order."""
    return [
        make_task(title="Essay", subject="English", priority="high",
                  deadline=date(2024, 1, 20)),
        make_task(title="Derivatives", subject="Math", priority="medium",
                  deadline=date(2024, 1, 12), completed=True),
        make_task(title="Lab", subject="Physics", priority="high",
                  deadline=date(2024, 1, 15)),
        make_task(title="Integrals", subject="Math", priority="low",
                  deadline=date(2024, 1, 10)),
    ]


class TestFilterTasks:
    """Tests for filter_tasks."""

    def test_no_criteria_returns_all_sorted_by_deadline(self, tasks):
        result = filter_tasks(tasks)

        assert [t.title for t in result] == ["Integrals", "Derivatives", "Lab", "Essay"]

    def test_input_is_not_reordered(self, tasks):
        """The snapshot passed in keeps its order."""
        before = list(tasks)
        filter_tasks(tasks)
        assert tasks == before

    def test_subject_exact_match(self, tasks):
        result = filter_tasks(tasks, subject="Math")
        assert [t.title for t in result] == ["Integrals", "Derivatives"]

    def test_subject_match_is_case_sensitive(self, tasks):
        assert filter_tasks(tasks, subject="math") == []

    def test_priority_match(self, tasks):
        result = filter_tasks(tasks, priority="high")
        assert [t.title for t in result] == ["Lab", "Essay"]

    def test_pending_excludes_completed(self, tasks):
        result = filter_tasks(tasks, status="pending")
        assert all(not t.completed for t in result)
        assert len(result) == 3

    def test_completed_excludes_pending(self, tasks):
        result = filter_tasks(tasks, status="completed")
        assert [t.title for t in result] == ["Derivatives"]

    def test_combined_criteria(self, tasks):
        result = filter_tasks(tasks, FilterCriteria(subject="Math", status="pending"))
        assert [t.title for t in result] == ["Integrals"]

    def test_disjoint_criteria_give_empty_result(self, tasks):
        """No Physics task is low priority."""
        assert filter_tasks(tasks, subject="Physics", priority="low") == []

    def test_empty_strings_mean_no_constraint(self, tasks):
        result = filter_tasks(tasks, FilterCriteria(subject="", priority="", status=""))
        assert len(result) == len(tasks)

    def test_keywords_override_criteria(self, tasks):
        criteria = FilterCriteria(subject="English")
        result = filter_tasks(tasks, criteria, subject="Physics")
        assert [t.title for t in result] == ["Lab"]

    def test_ties_keep_input_order(self, make_task):
        same_day = date(2024, 3, 1)
        tasks = [make_task(title=name, deadline=same_day) for name in ("a", "b", "c")]

        assert [t.title for t in filter_tasks(tasks)] == ["a", "b", "c"]

    def test_unknown_status_raises(self, tasks):
        with pytest.raises(ValueError):
            filter_tasks(tasks, status="archived")

    def test_empty_input(self):
        assert filter_tasks([]) == []


class TestFilterCriteria:
    """Tests for FilterCriteria."""

    def test_is_empty(self):
        assert FilterCriteria().is_empty()
        assert FilterCriteria(subject="").is_empty()
        assert not FilterCriteria(status="pending").is_empty()


class TestListSubjects:
    """Tests for list_subjects."""

    def test_sorted_distinct_subjects(self, tasks):
        assert list_subjects(tasks) == ["English", "Math", "Physics"]

    def test_no_tasks(self):
        assert list_subjects([]) == []
