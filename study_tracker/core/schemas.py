"""
Pydantic schemas for task drafts.

A draft is what the task form submits before the store assigns an id and
creation time. Validation here is the only gate between user input and the
persisted task list.
"""

from datetime import date, datetime
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


# =============================================================================
# Task Schemas
# =============================================================================

class TaskDraft(BaseModel):
    """Request body for creating a task."""
    model_config = ConfigDict(str_strip_whitespace=True, populate_by_name=True)

    title: str = Field(..., min_length=1, max_length=500)
    subject: str = Field(..., min_length=1, max_length=200)
    priority: Literal["low", "medium", "high"]
    deadline: date
    difficulty: Literal["easy", "medium", "hard"]
    estimated_time: Optional[float] = Field(default=None, gt=0, alias="estimatedTime")
    notes: str = ""

    @field_validator("deadline", mode="before")
    @classmethod
    def deadline_to_date(cls, value: Any) -> Any:
        if isinstance(value, datetime):
            return value.date()
        return value

    @field_validator("estimated_time", mode="before")
    @classmethod
    def blank_time_is_none(cls, value: Any) -> Any:
        # The form submits an empty string when no estimate is given
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("notes", mode="before")
    @classmethod
    def none_notes_is_empty(cls, value: Any) -> Any:
        return "" if value is None else value
