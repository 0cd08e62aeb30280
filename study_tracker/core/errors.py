"""
Error types for Study Tracker
Typed rejections raised by the task store and the task model
"""

from typing import List, Optional


class TaskStoreError(Exception):
    """Base class for task store failures"""


class ValidationError(TaskStoreError, ValueError):
    """A task draft is missing a required field or carries an invalid value"""

    def __init__(self, message: str, fields: Optional[List[str]] = None):
        super().__init__(message)
        self.fields = fields or []


class NotFoundError(TaskStoreError, LookupError):
    """No task with the given id exists in the store"""

    def __init__(self, task_id: int):
        super().__init__(f"Task not found: {task_id}")
        self.task_id = task_id


class DeserializationError(TaskStoreError):
    """The persisted task blob (or one of its records) could not be decoded"""
