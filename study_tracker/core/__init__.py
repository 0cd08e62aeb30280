"""
Core module for Study Tracker
Contains task storage, configuration, and model definitions
"""

from .config import Config
from .errors import TaskStoreError, ValidationError, NotFoundError, DeserializationError
from .models import Task, PRIORITIES, DIFFICULTIES, STATUSES
from .schemas import TaskDraft
from .blob_store import BlobStore, MemoryBlobStore, FileBlobStore, get_blob_store
from .task_store import TaskStore
from .logging_setup import configure_logging

__all__ = [
    'Config', 'Task', 'TaskDraft', 'TaskStore',
    'BlobStore', 'MemoryBlobStore', 'FileBlobStore', 'get_blob_store',
    'TaskStoreError', 'ValidationError', 'NotFoundError', 'DeserializationError',
    'PRIORITIES', 'DIFFICULTIES', 'STATUSES', 'configure_logging',
]
