# src/smart_tasks/tasks/seed.py

"""Demo tasks the store starts with (newest first)."""

from __future__ import annotations

from datetime import datetime, timezone

from .task_models import Task, TaskCategory, TaskPriority, TaskStatus


def _ts(raw: str) -> datetime:
    return datetime.fromisoformat(raw).replace(tzinfo=timezone.utc)


def demo_tasks() -> list[Task]:
    # Fresh objects on every call: the store mutates tasks in place.
    return [
        Task(
            id="1",
            title="Complete urgent project proposal",
            description=(
                "Need to finish the important client project proposal by end of day. "
                "This is critical for the meeting tomorrow."
            ),
            status=TaskStatus.IN_PROGRESS,
            priority=TaskPriority.HIGH,
            category=TaskCategory.WORK,
            created_at=_ts("2024-01-15T10:00:00"),
            updated_at=_ts("2024-01-15T10:00:00"),
        ),
        Task(
            id="2",
            title="Buy groceries for the week",
            description="Get milk, bread, eggs, and vegetables from the grocery store",
            status=TaskStatus.PENDING,
            priority=TaskPriority.MEDIUM,
            category=TaskCategory.SHOPPING,
            created_at=_ts("2024-01-14T15:30:00"),
            updated_at=_ts("2024-01-14T15:30:00"),
        ),
        Task(
            id="3",
            title="Study machine learning course",
            description="Review homework and learn about neural networks for tomorrow's class",
            status=TaskStatus.PENDING,
            priority=TaskPriority.HIGH,
            category=TaskCategory.STUDY,
            created_at=_ts("2024-01-13T09:15:00"),
            updated_at=_ts("2024-01-13T09:15:00"),
        ),
        Task(
            id="4",
            title="Schedule doctor appointment",
            description="Call the health center to schedule a routine checkup",
            status=TaskStatus.COMPLETED,
            priority=TaskPriority.MEDIUM,
            category=TaskCategory.HEALTH,
            created_at=_ts("2024-01-12T11:00:00"),
            updated_at=_ts("2024-01-15T14:00:00"),
        ),
    ]
