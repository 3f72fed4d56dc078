# src/smart_tasks/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from typing import Any, TypeVar

from ..errors import TaskValidationError

_E = TypeVar("_E", bound=StrEnum)


def _parse_enum(enum_cls: type[_E], raw: Any, label: str) -> _E:
    if isinstance(raw, enum_cls):
        return raw
    value = str(raw or "").strip().lower()
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)
        raise TaskValidationError(f"Invalid {label} {raw!r} (expected one of: {allowed})") from None


class TaskStatus(StrEnum):
    """Task lifecycle status."""

    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"

    @classmethod
    def parse(cls, raw: Any) -> TaskStatus:
        # Accept the underscore spelling users tend to type.
        if isinstance(raw, str):
            raw = raw.replace("_", "-")
        return _parse_enum(cls, raw, "status")

    @property
    def label(self) -> str:
        return self.value.replace("-", " ")


class TaskPriority(StrEnum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @classmethod
    def parse(cls, raw: Any) -> TaskPriority:
        return _parse_enum(cls, raw, "priority")


class TaskCategory(StrEnum):
    WORK = "work"
    PERSONAL = "personal"
    STUDY = "study"
    HEALTH = "health"
    SHOPPING = "shopping"
    OTHER = "other"

    @classmethod
    def parse(cls, raw: Any) -> TaskCategory:
        return _parse_enum(cls, raw, "category")


@dataclass(slots=True)
class TaskDraft:
    """User-editable fields of a task, before the store assigns id and timestamps."""

    title: str
    description: str = ""
    status: TaskStatus = TaskStatus.PENDING
    priority: TaskPriority = TaskPriority.MEDIUM
    category: TaskCategory = TaskCategory.OTHER


@dataclass(slots=True)
class Task:
    id: str
    title: str
    description: str
    status: TaskStatus
    priority: TaskPriority
    category: TaskCategory
    created_at: datetime
    updated_at: datetime

    def to_dict(self) -> dict[str, Any]:
        """Plain-data view in the dashboard's camelCase shape."""
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "status": self.status.value,
            "priority": self.priority.value,
            "category": self.category.value,
            "createdAt": self.created_at.isoformat(),
            "updatedAt": self.updated_at.isoformat(),
        }


# Fields a caller may change after creation.
EDITABLE_FIELDS: tuple[str, ...] = ("title", "description", "status", "priority", "category")
