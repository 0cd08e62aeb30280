"""
Unit tests for the progress module.
Tests completion rate, subject distribution and the activity timeline.
"""

import pytest
from datetime import datetime, timezone

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent.parent.parent))

from study_tracker.dashboard.progress import (
    ProgressAnalyzer,
    SubjectShare,
    completion_rate,
    round_half_up,
)


@pytest.fixture
def analyzer():
    return ProgressAnalyzer()


class TestCompletionRate:
    """Tests for completion_rate."""

    def test_no_tasks_is_zero(self):
        assert completion_rate(0, 0) == 0

    def test_one_of_three_is_33(self):
        assert completion_rate(3, 1) == 33

    def test_two_of_three_rounds_up(self):
        assert completion_rate(3, 2) == 67

    def test_all_done(self):
        assert completion_rate(4, 4) == 100


class TestRoundHalfUp:
    """Halves round up, unlike the built-in round."""

    @pytest.mark.parametrize("value,expected", [(0.5, 1), (2.5, 3), (12.5, 13), (2.4, 2), (2.6, 3)])
    def test_values(self, value, expected):
        assert round_half_up(value) == expected


class TestSubjectDistribution:
    """Tests for ProgressAnalyzer.subject_distribution."""

    def test_counts_and_percentages(self, analyzer, make_task):
        tasks = [
            make_task(subject="Physics"),
            make_task(subject="Math"),
            make_task(subject="Math"),
            make_task(subject="Math"),
            make_task(subject="Chemistry", completed=True),
        ]

        shares = analyzer.subject_distribution(tasks)

        assert shares == [
            SubjectShare(subject="Math", count=3, percentage=75),
            SubjectShare(subject="Physics", count=1, percentage=25),
        ]
        assert sum(s.percentage for s in shares) == 100

    def test_ties_keep_first_appearance_order(self, analyzer, make_task):
        tasks = [make_task(subject=s) for s in ("Biology", "Art", "Art", "Biology", "Music")]

        shares = analyzer.subject_distribution(tasks)

        assert [s.subject for s in shares] == ["Biology", "Art", "Music"]
        assert [s.percentage for s in shares] == [40, 40, 20]

    def test_percentages_round_per_group(self, analyzer, make_task):
        """Three equal groups each round to 33."""
        tasks = [make_task(subject=s) for s in ("A", "B", "C")]
        assert [s.percentage for s in analyzer.subject_distribution(tasks)] == [33, 33, 33]

    def test_nothing_pending(self, analyzer, make_task):
        assert analyzer.subject_distribution([make_task(completed=True)]) == []


class TestRecentActivity:
    """Tests for ProgressAnalyzer.recent_activity."""

    def test_newest_five_first(self, analyzer, make_task):
        tasks = [make_task(title=f"t{i}",
                           created_at=datetime(2024, 1, i, tzinfo=timezone.utc))
                 for i in range(1, 8)]

        entries = analyzer.recent_activity(tasks)

        assert [e.task.title for e in entries] == ["t7", "t6", "t5", "t4", "t3"]
        assert entries[0].timestamp == datetime(2024, 1, 7, tzinfo=timezone.utc)

    def test_action_follows_completed_flag(self, analyzer, make_task):
        """Completed tasks read as completed even though only creation time is known."""
        tasks = [make_task(title="open"), make_task(title="done", completed=True)]

        entries = analyzer.recent_activity(tasks)

        assert {e.task.title: e.action for e in entries} == {"open": "created", "done": "completed"}
        done = next(e for e in entries if e.task.title == "done")
        assert done.timestamp == done.task.created_at

    def test_limit_from_config(self, make_task):
        class Prefs:
            def get(self, key, section="settings", default=None):
                return {"activity_limit": 2}.get(key, default)

        tasks = [make_task() for _ in range(4)]

        assert len(ProgressAnalyzer(Prefs()).recent_activity(tasks)) == 2


class TestAnalyze:
    """Tests for ProgressAnalyzer.analyze."""

    def test_empty(self, analyzer):
        report = analyzer.analyze([])

        assert report.total == 0
        assert report.completion_rate == 0
        assert report.subject_distribution == []
        assert report.recent_activity == []

    def test_full_report(self, analyzer, make_task):
        tasks = [
            make_task(subject="Math", completed=True),
            make_task(subject="Math"),
            make_task(subject="Physics"),
        ]

        report = analyzer.analyze(tasks)

        assert (report.total, report.completed, report.pending) == (3, 1, 2)
        assert report.completion_rate == 33
        assert [(s.subject, s.percentage) for s in report.subject_distribution] == [
            ("Math", 50), ("Physics", 50)
        ]
        assert len(report.recent_activity) == 3

    def test_accepts_generator(self, analyzer, make_task):
        tasks = (make_task() for _ in range(2))
        report = analyzer.analyze(tasks)
        assert report.total == 2
        assert len(report.recent_activity) == 2
