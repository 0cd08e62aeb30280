"""
Task store for Study Tracker
Owns the in-memory task list and persists it as a single JSON blob.

Every mutation (add, toggle, delete) writes the complete list back to the
blob store exactly once before returning. There is no incremental
persistence: the blob always holds a whole, consistent list.
"""

import json
import logging
from dataclasses import replace
from datetime import datetime, timezone
from typing import Any, Callable, List, Mapping, Optional, Tuple, Union

from pydantic import ValidationError as SchemaValidationError

from .blob_store import BlobStore
from .errors import DeserializationError, NotFoundError, ValidationError
from .models import Task
from .schemas import TaskDraft

logger = logging.getLogger(__name__)

DEFAULT_KEY = "tasks"

Clock = Callable[[], datetime]


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class TaskStore:
    """
    In-memory task list backed by a blob store.

    The list has no meaningful order; views sort it themselves. Tasks are
    never edited in place: a mutation swaps in a new Task object, so
    snapshots returned by all() stay valid after later changes.
    """

    def __init__(self, blob_store: BlobStore, key: str = DEFAULT_KEY,
                 clock: Optional[Clock] = None):
        """
        Initialize the store and load any persisted tasks.

        Args:
            blob_store: Backend holding the serialized list
            key: Blob key the list is stored under
            clock: Returns the current time (defaults to UTC now)
        """
        self.blob_store = blob_store
        self.key = key
        self.clock = clock or _utc_now
        self._tasks: List[Task] = []
        self.load()

    # =========================================================================
    # Persistence
    # =========================================================================

    def load(self) -> List[Task]:
        """
        Replace the in-memory list with the persisted one.

        Never raises: an absent or corrupt blob yields an empty list, and a
        corrupt record inside an otherwise valid list is skipped.

        Returns:
            The loaded tasks
        """
        try:
            raw = self._read()
            if raw is None:
                logger.debug(f"No persisted tasks under key '{self.key}'")
                self._tasks = []
                return list(self._tasks)
            self._tasks = self._decode(raw)
        except DeserializationError as e:
            logger.warning(f"Discarding persisted tasks under key '{self.key}': {e}")
            self._tasks = []

        logger.info(f"Loaded {len(self._tasks)} task(s) from '{self.key}'")
        return list(self._tasks)

    def _read(self) -> Optional[str]:
        try:
            return self.blob_store.get(self.key)
        except UnicodeDecodeError as e:
            raise DeserializationError(f"Blob is not valid UTF-8: {e}")
        except OSError as e:
            raise DeserializationError(f"Unreadable blob: {e}")

    def _decode(self, raw: str) -> List[Task]:
        try:
            records = json.loads(raw)
        except (json.JSONDecodeError, TypeError) as e:
            raise DeserializationError(f"Malformed JSON: {e}")
        except RecursionError:
            raise DeserializationError("JSON nested too deeply")
        if not isinstance(records, list):
            raise DeserializationError(f"Expected a JSON array, got {type(records).__name__}")

        tasks: List[Task] = []
        seen_ids = set()
        for index, record in enumerate(records):
            try:
                task = Task.from_dict(record)
            except DeserializationError as e:
                logger.warning(f"Skipping task record {index}: {e}")
                continue
            if task.id in seen_ids:
                logger.warning(f"Skipping task record {index}: duplicate id {task.id}")
                continue
            seen_ids.add(task.id)
            tasks.append(task)
        return tasks

    def _save(self) -> None:
        """Persist the full task list as one blob write"""
        payload = json.dumps([task.to_dict() for task in self._tasks])
        self.blob_store.set(self.key, payload)

    # =========================================================================
    # Queries
    # =========================================================================

    def all(self) -> Tuple[Task, ...]:
        """Read-only snapshot of the current tasks"""
        return tuple(self._tasks)

    def find(self, task_id: int) -> Optional[Task]:
        """Fetch a single task by ID"""
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def __len__(self) -> int:
        return len(self._tasks)

    def _index_of(self, task_id: int) -> int:
        for index, task in enumerate(self._tasks):
            if task.id == task_id:
                return index
        logger.info(f"Task {task_id} not found")
        raise NotFoundError(task_id)

    # =========================================================================
    # Mutations
    # =========================================================================

    def add(self, draft: Union[TaskDraft, Mapping[str, Any]]) -> Task:
        """
        Validate a draft, create the task and persist.

        Args:
            draft: TaskDraft or mapping with title, subject, priority,
                deadline, difficulty and optional estimatedTime/notes

        Returns:
            The created task

        Raises:
            ValidationError: a required field is missing or invalid
        """
        if not isinstance(draft, TaskDraft):
            try:
                draft = TaskDraft.model_validate(dict(draft))
            except SchemaValidationError as e:
                fields = sorted({str(err["loc"][0]) for err in e.errors() if err.get("loc")})
                logger.debug(f"Rejected task draft: {e}")
                raise ValidationError(
                    f"Invalid task: {', '.join(fields) or 'draft'}", fields=fields
                )
            except (TypeError, ValueError):
                raise ValidationError("Task draft must be a mapping")

        now = self.clock()
        # Persisted timestamps load as aware UTC; keep new ones comparable
        if now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)
        task = Task(
            id=self._next_id(now),
            title=draft.title,
            subject=draft.subject,
            priority=draft.priority,
            deadline=draft.deadline,
            difficulty=draft.difficulty,
            created_at=now,
            estimated_time=draft.estimated_time,
            notes=draft.notes,
            completed=False,
        )

        self._tasks.append(task)
        self._save()
        logger.info(f"Added task {task.id}: {task.title}")
        return task

    def _next_id(self, now: datetime) -> int:
        """Creation time in ms, bumped past existing ids to stay unique"""
        candidate = int(now.timestamp() * 1000)
        if self._tasks:
            highest = max(task.id for task in self._tasks)
            if candidate <= highest:
                candidate = highest + 1
        return candidate

    def toggle_complete(self, task_id: int) -> Task:
        """
        Flip the completed flag on a task and persist.

        Raises:
            NotFoundError: no task has this id
        """
        index = self._index_of(task_id)
        updated = replace(self._tasks[index], completed=not self._tasks[index].completed)
        self._tasks[index] = updated
        self._save()
        logger.info(f"Task {task_id} marked {updated.status}")
        return updated

    def delete(self, task_id: int) -> None:
        """
        Remove a task and persist.

        Raises:
            NotFoundError: no task has this id
        """
        index = self._index_of(task_id)
        removed = self._tasks.pop(index)
        self._save()
        logger.info(f"Deleted task {task_id}: {removed.title}")
