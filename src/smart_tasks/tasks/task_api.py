# src/smart_tasks/tasks/task_api.py

from __future__ import annotations

import logging
from typing import Any

from ..core.ports import NotifyVariant
from ..core.state import AppState
from ..errors import TaskValidationError
from .classifier import classify
from .task_models import Task, TaskDraft, TaskStatus

logger = logging.getLogger(__name__)

# Short ids like the seed "1".."4" must never fall through to a prefix match.
MIN_ID_PREFIX_LEN = 4


def _notify(state: AppState, title: str, message: str, variant: NotifyVariant = "default") -> None:
    notifier = state.notifier
    if notifier is None:
        return
    try:
        notifier.notify(title, message, variant=variant)
    except Exception:
        logger.exception("Notifier failed (title=%r)", title)


def _require_title(raw: Any) -> str:
    title = str(raw or "").strip()
    if not title:
        raise TaskValidationError("Title is required")
    return title


def create_task(
    state: AppState,
    *,
    title: str,
    description: str = "",
    status: TaskStatus | str = TaskStatus.PENDING,
) -> Task:
    """
    Create a task with auto-assigned priority and category.

    Priority/category are not accepted here: new tasks always go through the
    keyword classifier. They can be changed afterwards with update_task().
    """
    title = _require_title(title)
    description = (description or "").strip()
    analyzed = classify(title, description)

    task = state.task_store.create(
        TaskDraft(
            title=title,
            description=description,
            status=TaskStatus.parse(status),
            priority=analyzed.priority,
            category=analyzed.category,
        )
    )
    logger.info("Task created id=%s priority=%s category=%s", task.id, task.priority, task.category)
    _notify(
        state,
        "Task created successfully!",
        f'"{task.title}" has been added with {task.priority} priority in {task.category} category.',
    )
    return task


def update_task(state: AppState, task_id: str, **fields: Any) -> Task | None:
    """
    Apply edits to an existing task. No re-classification happens on edit.
    Returns None (and notifies nothing) if the task no longer exists.
    """
    if not fields:
        return state.task_store.get(task_id)
    if "title" in fields:
        fields["title"] = _require_title(fields["title"])
    if "description" in fields:
        fields["description"] = (fields["description"] or "").strip()

    task = state.task_store.update(task_id, fields)
    if task is None:
        return None
    _notify(state, "Task updated successfully!", f'"{task.title}" has been updated.')
    return task


def change_status(state: AppState, task_id: str, status: TaskStatus | str) -> Task | None:
    task = state.task_store.set_status(task_id, status)
    if task is None:
        return None
    _notify(state, "Task status updated!", f'"{task.title}" is now {task.status.label}.')
    return task


def delete_task(state: AppState, task_id: str) -> Task | None:
    """Delete a task; returns the removed task, or None if it was already gone."""
    task = state.task_store.get(task_id)
    state.task_store.delete(task_id)
    if task is None:
        return None
    _notify(state, "Task deleted", f'"{task.title}" has been removed.', variant="destructive")
    return task


def visible_tasks(state: AppState) -> list[Task]:
    return state.filters.apply(state.task_store.list_all())


def status_counts(state: AppState) -> dict[TaskStatus, int]:
    return {s: state.task_store.count_by_status(s) for s in TaskStatus}


def resolve_task_id(state: AppState, prefix: str) -> str | None:
    """
    Resolve a full id or a unique id prefix (the console shows short ids).
    Inputs shorter than MIN_ID_PREFIX_LEN only match an id exactly.
    Returns None when nothing or more than one task matches.
    """
    prefix = (prefix or "").strip()
    if not prefix:
        return None
    if state.task_store.get(prefix) is not None:
        return prefix
    if len(prefix) < MIN_ID_PREFIX_LEN:
        return None
    matches = [t.id for t in state.task_store.list_all() if t.id.startswith(prefix)]
    return matches[0] if len(matches) == 1 else None
