"""
Data models for Study Tracker
Defines the Task record and its persisted JSON shape
"""

from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Any, Dict, Optional, Tuple

from dateutil import parser as date_parser

from .errors import DeserializationError


PRIORITIES = ("low", "medium", "high")
DIFFICULTIES = ("easy", "medium", "hard")
STATUSES = ("pending", "completed")

# Persisted key order of a stored task record
FIELD_NAMES = (
    "id", "title", "subject", "priority", "deadline", "difficulty",
    "estimatedTime", "notes", "completed", "createdAt",
)


@dataclass
class Task:
    """Task data model"""
    id: int
    title: str
    subject: str
    priority: str  # 'low', 'medium', 'high'
    deadline: date
    difficulty: str  # 'easy', 'medium', 'hard'
    created_at: datetime
    estimated_time: Optional[float] = None  # hours
    notes: str = ""
    completed: bool = False

    @property
    def status(self) -> str:
        return "completed" if self.completed else "pending"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Task':
        """
        Create Task from a persisted record

        Raises:
            DeserializationError: a required field is missing or unparseable
        """
        if not isinstance(data, dict):
            raise DeserializationError(f"Task record must be an object, got {type(data).__name__}")

        missing = [name for name in ("id", "title", "subject", "priority", "deadline",
                                     "difficulty", "createdAt")
                   if data.get(name) in (None, "")]
        if missing:
            raise DeserializationError(f"Task record missing fields: {', '.join(missing)}")

        return cls(
            id=cls._parse_id(data["id"]),
            title=str(data["title"]),
            subject=str(data["subject"]),
            priority=cls._parse_label("priority", data["priority"], PRIORITIES),
            deadline=cls._parse_date(data["deadline"]),
            difficulty=cls._parse_label("difficulty", data["difficulty"], DIFFICULTIES),
            created_at=cls._parse_datetime(data["createdAt"]),
            estimated_time=cls._parse_hours(data.get("estimatedTime")),
            notes=str(data.get("notes") or ""),
            completed=bool(data.get("completed", False)),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert task to its persisted record"""
        return {
            "id": self.id,
            "title": self.title,
            "subject": self.subject,
            "priority": self.priority,
            "deadline": self.deadline.isoformat(),
            "difficulty": self.difficulty,
            "estimatedTime": self.estimated_time,
            "notes": self.notes,
            "completed": self.completed,
            "createdAt": format_timestamp(self.created_at),
        }

    @staticmethod
    def _parse_id(raw: Any) -> int:
        if isinstance(raw, bool):
            raise DeserializationError(f"Invalid task id: {raw!r}")
        try:
            return int(raw)
        except (TypeError, ValueError):
            raise DeserializationError(f"Invalid task id: {raw!r}")

    @staticmethod
    def _parse_label(name: str, raw: Any, allowed: Tuple[str, ...]) -> str:
        if raw not in allowed:
            raise DeserializationError(f"Invalid {name}: {raw!r}")
        return raw

    @staticmethod
    def _parse_date(raw: Any) -> date:
        """Parse a deadline; datetimes are truncated to their calendar date"""
        if isinstance(raw, datetime):
            return raw.date()
        if isinstance(raw, date):
            return raw
        try:
            return date_parser.isoparse(str(raw)).date()
        except (ValueError, OverflowError):
            raise DeserializationError(f"Invalid deadline: {raw!r}")

    @staticmethod
    def _parse_datetime(raw: Any) -> datetime:
        """Parse a creation timestamp; naive values are taken as UTC"""
        if isinstance(raw, datetime):
            value = raw
        else:
            try:
                value = date_parser.isoparse(str(raw))
            except (ValueError, OverflowError):
                raise DeserializationError(f"Invalid createdAt: {raw!r}")
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value

    @staticmethod
    def _parse_hours(raw: Any) -> Optional[float]:
        """Parse estimated hours; older records stored the raw form string"""
        if raw is None or raw == "" or isinstance(raw, bool):
            return None
        try:
            hours = float(raw)
        except (TypeError, ValueError):
            return None
        return hours if hours > 0 else None


def format_timestamp(value: datetime) -> str:
    """ISO-8601 in UTC with millisecond precision and a trailing Z"""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    stamp = value.astimezone(timezone.utc).isoformat(timespec="milliseconds")
    return stamp.replace("+00:00", "Z")
