# tests/conftest.py

from __future__ import annotations

from types import SimpleNamespace

import pytest

from smart_tasks.core.state import AppState
from smart_tasks.tasks.seed import demo_tasks
from smart_tasks.tasks.task_store import TaskStore

from .fakes import FakeClock, RecordingNotifier


@pytest.fixture()
def settings(tmp_path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the console layer.

    A SimpleNamespace rather than the real config keeps tests independent of
    the process environment and any local .env file.
    """
    return SimpleNamespace(
        app_name="smart-tasks-test",
        log_level="DEBUG",
        data_dir=tmp_path,
        seed_demo_tasks=True,
        notifications_enabled=True,
        description_preview_chars=120,
    )


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def store(clock: FakeClock) -> TaskStore:
    return TaskStore(clock=clock)


@pytest.fixture()
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore, notifier: RecordingNotifier) -> AppState:
    """AppState with the demo tasks loaded and a recording notifier."""
    store.load(demo_tasks())
    return AppState(settings=settings, task_store=store, notifier=notifier)
