# src/smart_tasks/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local (gitignored) log directory exists,
- wires the in-memory store, seed data and notifier into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..connectors.console_connector import ConsoleNotifier
from ..core.ports import Notifier
from ..core.state import AppState
from ..tasks.seed import demo_tasks
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None, notifier: Notifier | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    store = TaskStore()
    if settings.seed_demo_tasks:
        store.load(demo_tasks())
        logger.info("Loaded %d demo tasks", store.count_tasks())

    if notifier is None and settings.notifications_enabled:
        notifier = ConsoleNotifier()

    return AppState(settings=settings, task_store=store, notifier=notifier)
