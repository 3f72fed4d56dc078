# src/smart_tasks/connectors/render.py

"""Plain-text rendering of tasks for the console connector."""

from __future__ import annotations

from collections.abc import Mapping

from ..tasks.task_filter import ALL, TaskFilter
from ..tasks.task_models import Task, TaskStatus

SHORT_ID_LEN = 8

STATUS_MARKERS: dict[TaskStatus, str] = {
    TaskStatus.PENDING: "[ ]",
    TaskStatus.IN_PROGRESS: "[>]",
    TaskStatus.COMPLETED: "[x]",
}


def short_id(task: Task) -> str:
    return task.id[:SHORT_ID_LEN]


def _clamp(text: str, limit: int) -> str:
    text = " ".join(text.split())
    if len(text) <= limit:
        return text
    return text[: limit - 3].rstrip() + "..."


def render_task_card(task: Task, *, preview_chars: int = 120) -> str:
    lines = [f"{STATUS_MARKERS[task.status]} {task.title}  (#{short_id(task)})"]
    if task.description:
        lines.append(f"    {_clamp(task.description, preview_chars)}")
    lines.append(f"    {task.priority} | {task.category} | {task.created_at.date().isoformat()}")
    return "\n".join(lines)


def render_task_detail(task: Task) -> str:
    return "\n".join(
        [
            f"{STATUS_MARKERS[task.status]} {task.title}",
            f"  id:          {task.id}",
            f"  status:      {task.status.label}",
            f"  priority:    {task.priority}",
            f"  category:    {task.category}",
            f"  created:     {task.created_at.isoformat()}",
            f"  updated:     {task.updated_at.isoformat()}",
            f"  description: {task.description or '-'}",
        ]
    )


def render_filters(filters: TaskFilter) -> str:
    parts = []
    if filters.query:
        parts.append(f'search="{filters.query}"')
    for name in ("status", "priority", "category"):
        value = getattr(filters, name)
        if value != ALL:
            parts.append(f"{name}={value}")
    return ", ".join(parts) if parts else "none"


def render_task_list(tasks: list[Task], filters: TaskFilter, *, preview_chars: int = 120) -> str:
    if not tasks:
        hint = (
            "Try adjusting your search or filters (/clear resets them)."
            if filters.is_active()
            else "Create your first task to get started: /add <title>"
        )
        return f"No tasks found. {hint}"

    header = f"Tasks ({len(tasks)}), filters: {render_filters(filters)}"
    cards = [render_task_card(t, preview_chars=preview_chars) for t in tasks]
    return header + "\n" + "\n".join(cards)


def render_stats(counts: Mapping[TaskStatus, int]) -> str:
    return "  ".join(f"{status.label.title()}: {counts.get(status, 0)}" for status in TaskStatus)
