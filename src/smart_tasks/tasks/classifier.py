# src/smart_tasks/tasks/classifier.py

"""
Keyword heuristic that picks a default priority and category for a new task.

Rules are evaluated top to bottom and the first group with a matching
substring wins. Order matters: "urgent ... maybe later" is high priority,
"work out at the gym" is work.
"""

from __future__ import annotations

from typing import NamedTuple, TypeVar

from .task_models import TaskCategory, TaskPriority

PRIORITY_RULES: tuple[tuple[TaskPriority, tuple[str, ...]], ...] = (
    (TaskPriority.HIGH, ("urgent", "asap", "important", "critical")),
    (TaskPriority.LOW, ("later", "someday", "maybe", "low priority")),
)

CATEGORY_RULES: tuple[tuple[TaskCategory, tuple[str, ...]], ...] = (
    (TaskCategory.WORK, ("work", "meeting", "project", "office")),
    (TaskCategory.STUDY, ("study", "homework", "learn", "course")),
    (TaskCategory.HEALTH, ("exercise", "doctor", "health", "gym")),
    (TaskCategory.SHOPPING, ("buy", "shop", "purchase", "grocery")),
    (TaskCategory.PERSONAL, ("family", "friend", "personal", "home")),
)


_V = TypeVar("_V")


class Classification(NamedTuple):
    priority: TaskPriority
    category: TaskCategory


def _first_match(text: str, rules: tuple[tuple[_V, tuple[str, ...]], ...], default: _V) -> _V:
    for value, keywords in rules:
        if any(k in text for k in keywords):
            return value
    return default


def classify(title: str, description: str = "") -> Classification:
    text = f"{title or ''} {description or ''}".lower()
    return Classification(
        priority=_first_match(text, PRIORITY_RULES, TaskPriority.MEDIUM),
        category=_first_match(text, CATEGORY_RULES, TaskCategory.OTHER),
    )
