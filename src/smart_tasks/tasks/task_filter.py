# src/smart_tasks/tasks/task_filter.py

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, replace
from typing import Any

from .task_models import Task, TaskCategory, TaskPriority, TaskStatus

ALL = "all"


def _normalize(raw: Any, parse) -> str:
    """Map a filter value to "all" or a validated enum value."""
    if raw is None:
        return ALL
    value = str(raw).strip().lower()
    if value in ("", ALL):
        return ALL
    return parse(value).value


def filter_tasks(
    tasks: Iterable[Task],
    query: str = "",
    status_filter: str = ALL,
    priority_filter: str = ALL,
    category_filter: str = ALL,
) -> list[Task]:
    """
    Return the tasks that match every active criterion, in input order.

    The query matches case-insensitively against title or description;
    each categorical filter is either "all" or an exact value.
    """
    needle = (query or "").lower()
    status = _normalize(status_filter, TaskStatus.parse)
    priority = _normalize(priority_filter, TaskPriority.parse)
    category = _normalize(category_filter, TaskCategory.parse)

    out: list[Task] = []
    for task in tasks:
        if needle and needle not in task.title.lower() and needle not in task.description.lower():
            continue
        if status != ALL and task.status != status:
            continue
        if priority != ALL and task.priority != priority:
            continue
        if category != ALL and task.category != category:
            continue
        out.append(task)
    return out


@dataclass(frozen=True, slots=True)
class TaskFilter:
    """Current search/filter state of the task list view."""

    query: str = ""
    status: str = ALL
    priority: str = ALL
    category: str = ALL

    def __post_init__(self) -> None:
        object.__setattr__(self, "status", _normalize(self.status, TaskStatus.parse))
        object.__setattr__(self, "priority", _normalize(self.priority, TaskPriority.parse))
        object.__setattr__(self, "category", _normalize(self.category, TaskCategory.parse))

    def apply(self, tasks: Iterable[Task]) -> list[Task]:
        return filter_tasks(tasks, self.query, self.status, self.priority, self.category)

    def is_active(self) -> bool:
        return bool(self.query) or any(
            v != ALL for v in (self.status, self.priority, self.category)
        )

    def with_changes(self, **changes: Any) -> TaskFilter:
        return replace(self, **changes)

    def cleared(self) -> TaskFilter:
        return TaskFilter()
