# src/smart_tasks/tasks/task_store.py

from __future__ import annotations

import logging
import uuid
from collections.abc import Callable, Iterable, Mapping
from dataclasses import asdict
from datetime import datetime, timedelta, timezone
from typing import Any

from ..errors import TaskNotFound, TaskValidationError
from .task_models import (
    EDITABLE_FIELDS,
    Task,
    TaskCategory,
    TaskDraft,
    TaskPriority,
    TaskStatus,
)

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]

_TICK = timedelta(microseconds=1)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _coerce_fields(data: Mapping[str, Any]) -> dict[str, Any]:
    """Validate a partial field mapping and convert enum fields."""
    unknown = set(data) - set(EDITABLE_FIELDS)
    if unknown:
        raise TaskValidationError(f"Unknown or read-only task field(s): {', '.join(sorted(unknown))}")

    out: dict[str, Any] = {}
    for name, raw in data.items():
        if name == "status":
            out[name] = TaskStatus.parse(raw)
        elif name == "priority":
            out[name] = TaskPriority.parse(raw)
        elif name == "category":
            out[name] = TaskCategory.parse(raw)
        else:
            out[name] = "" if raw is None else str(raw)
    return out


class TaskStore:
    """
    In-memory task collection.

    Order is newest first: create() prepends, load() keeps the given order.
    Lookups by an unknown id are silent no-ops (update/set_status return None,
    delete does nothing); use require() where a missing task is an error.

    Single-threaded: each call is one mutation of the list, no locking.
    """

    def __init__(self, *, clock: Clock | None = None) -> None:
        self._clock: Clock = clock or utc_now
        self._tasks: list[Task] = []
        # Every id ever handed out, including deleted ones.
        self._issued_ids: set[str] = set()
        logger.info("TaskStore ready (in-memory)")

    # ---- low-level helpers ----

    def _new_id(self) -> str:
        while True:
            task_id = uuid.uuid4().hex
            if task_id not in self._issued_ids:
                self._issued_ids.add(task_id)
                return task_id

    def _index_of(self, task_id: str) -> int | None:
        for i, t in enumerate(self._tasks):
            if t.id == task_id:
                return i
        return None

    def _touch(self, task: Task) -> None:
        now = self._clock()
        # Keep updated_at strictly increasing even if the clock has not moved.
        if now <= task.updated_at:
            now = task.updated_at + _TICK
        task.updated_at = now

    # ---- public API ----

    def load(self, tasks: Iterable[Task]) -> None:
        """Append existing tasks (e.g. a seed list) in the given order."""
        for task in tasks:
            if task.id in self._issued_ids:
                raise TaskValidationError(f"Duplicate task id: {task.id}")
            self._issued_ids.add(task.id)
            self._tasks.append(task)
        logger.debug("TaskStore loaded total=%s", len(self._tasks))

    def count_tasks(self) -> int:
        return len(self._tasks)

    def count_by_status(self, status: TaskStatus | str) -> int:
        wanted = TaskStatus.parse(status)
        return sum(1 for t in self._tasks if t.status == wanted)

    def list_all(self) -> list[Task]:
        return list(self._tasks)

    def get(self, task_id: str) -> Task | None:
        idx = self._index_of(task_id)
        return None if idx is None else self._tasks[idx]

    def require(self, task_id: str) -> Task:
        task = self.get(task_id)
        if task is None:
            raise TaskNotFound(task_id)
        return task

    def create(self, data: TaskDraft | Mapping[str, Any]) -> Task:
        fields = asdict(data) if isinstance(data, TaskDraft) else dict(data)
        fields = _coerce_fields(fields)

        now = self._clock()
        task = Task(
            id=self._new_id(),
            title=fields.get("title", ""),
            description=fields.get("description", ""),
            status=fields.get("status", TaskStatus.PENDING),
            priority=fields.get("priority", TaskPriority.MEDIUM),
            category=fields.get("category", TaskCategory.OTHER),
            created_at=now,
            updated_at=now,
        )
        self._tasks.insert(0, task)
        logger.debug(
            "Task created id=%s status=%s priority=%s category=%s",
            task.id,
            task.status,
            task.priority,
            task.category,
        )
        return task

    def update(self, task_id: str, data: Mapping[str, Any]) -> Task | None:
        task = self.get(task_id)
        if task is None:
            logger.debug("update ignored, task_id=%s not found", task_id)
            return None

        # Validate everything before touching the record.
        fields = _coerce_fields(data)
        for name, value in fields.items():
            setattr(task, name, value)
        self._touch(task)
        logger.debug("Task updated id=%s fields=%s", task_id, sorted(fields))
        return task

    def set_status(self, task_id: str, status: TaskStatus | str) -> Task | None:
        return self.update(task_id, {"status": status})

    def delete(self, task_id: str) -> None:
        idx = self._index_of(task_id)
        if idx is None:
            logger.debug("delete ignored, task_id=%s not found", task_id)
            return
        del self._tasks[idx]
        logger.debug("Task deleted id=%s", task_id)
