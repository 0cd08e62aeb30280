"""
Shared fixtures for Study Tracker unit tests.
"""

import logging
import sys
from datetime import date, datetime, timezone
from itertools import count
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from study_tracker.core.models import Task


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop the console handler configure_logging attaches, so it never outlives a test."""
    yield
    package_logger = logging.getLogger("study_tracker")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)


@pytest.fixture
def make_task():
    """
    Factory for Task objects with sensible defaults.

    Ids increase per call; creation times increase by one minute per call
    so ordering by created_at matches call order.
    """
    ids = count(1)

    def _make(**overrides) -> Task:
        task_id = next(ids)
        fields = {
            "id": task_id,
            "title": f"Task {task_id}",
            "subject": "Math",
            "priority": "medium",
            "deadline": date(2024, 1, 15),
            "difficulty": "medium",
            "created_at": datetime(2024, 1, 1, 9, task_id % 60, tzinfo=timezone.utc),
            "estimated_time": None,
            "notes": "",
            "completed": False,
        }
        fields.update(overrides)
        return Task(**fields)

    return _make
