# src/smart_tasks/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The service layer depends on Protocols instead of concrete implementations,
so the presentation side can swap notifiers/stores and tests can use fakes.
"""

from collections.abc import Mapping
from typing import Any, Literal, Protocol

from ..tasks.task_models import Task, TaskDraft

NotifyVariant = Literal["default", "destructive"]


class Notifier(Protocol):
    """
    Fire-and-forget sink for human-readable operation summaries
    (e.g. "Task created successfully!").
    """

    def notify(self, title: str, message: str, *, variant: NotifyVariant = "default") -> None: ...


class TaskRepo(Protocol):
    def create(self, data: TaskDraft | Mapping[str, Any]) -> Task: ...
    def update(self, task_id: str, data: Mapping[str, Any]) -> Task | None: ...
    def set_status(self, task_id: str, status: Any) -> Task | None: ...
    def delete(self, task_id: str) -> None: ...
    def get(self, task_id: str) -> Task | None: ...
    def list_all(self) -> list[Task]: ...
    def count_by_status(self, status: Any) -> int: ...
