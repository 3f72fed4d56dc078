# src/smart_tasks/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..tasks.task_filter import TaskFilter
from .ports import Notifier, TaskRepo


@dataclass
class AppState:
    # Settings object (config.Settings or a test double with the same attributes).
    settings: Any

    task_store: TaskRepo
    notifier: Notifier | None = None

    # Filter state of the list view; replaced wholesale on every change.
    filters: TaskFilter = field(default_factory=TaskFilter)
