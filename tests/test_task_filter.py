# tests/test_task_filter.py

from __future__ import annotations

import pytest

from smart_tasks.errors import TaskValidationError
from smart_tasks.tasks.seed import demo_tasks
from smart_tasks.tasks.task_filter import ALL, TaskFilter, filter_tasks
from smart_tasks.tasks.task_models import TaskCategory, TaskDraft, TaskPriority, TaskStatus
from smart_tasks.tasks.task_store import TaskStore


@pytest.fixture()
def tasks(store: TaskStore):
    store.load(demo_tasks())
    store.create(
        TaskDraft(
            title="Pick up dry cleaning",
            description="near the GROCERY on main street",
            category=TaskCategory.SHOPPING,
            status=TaskStatus.COMPLETED,
        )
    )
    return store.list_all()


def test_neutral_filters_are_identity(tasks) -> None:
    assert filter_tasks(tasks, "", ALL, ALL, ALL) == tasks


def test_query_matches_title_or_description_case_insensitively(tasks) -> None:
    result = filter_tasks(tasks, "grocery", ALL, ALL, ALL)

    expected = [
        t for t in tasks if "grocery" in t.title.lower() or "grocery" in t.description.lower()
    ]
    assert result == expected
    assert [t.title for t in result] == ["Pick up dry cleaning", "Buy groceries for the week"]


def test_query_is_lowercased_too(tasks) -> None:
    assert [t.id for t in filter_tasks(tasks, "DOCTOR")] == ["4"]


def test_filters_are_conjunctive(tasks) -> None:
    result = filter_tasks(tasks, "", "pending", ALL, "shopping")

    assert [t.id for t in result] == ["2"]
    assert all(t.status == TaskStatus.PENDING and t.category == TaskCategory.SHOPPING for t in result)


def test_priority_filter(tasks) -> None:
    result = filter_tasks(tasks, priority_filter="high")
    assert [t.id for t in result] == ["1", "3"]


def test_no_match_returns_empty(tasks) -> None:
    assert filter_tasks(tasks, "nothing like this") == []
    assert filter_tasks(tasks, "", "completed", "low", ALL) == []


def test_output_is_subsequence_in_input_order(tasks) -> None:
    result = filter_tasks(tasks, "", ALL, "medium", ALL)
    positions = [tasks.index(t) for t in result]
    assert positions == sorted(positions)


def test_invalid_filter_value_raises(tasks) -> None:
    with pytest.raises(TaskValidationError):
        filter_tasks(tasks, "", "archived", ALL, ALL)


def test_task_filter_state() -> None:
    f = TaskFilter()
    assert not f.is_active()

    f = f.with_changes(status="PENDING", category="shopping")
    assert f.status == "pending"
    assert f.is_active()

    f = f.with_changes(status="all", category="")
    assert f.category == ALL
    assert not f.is_active()

    assert f.with_changes(query="milk").is_active()
    assert f.with_changes(query="milk").cleared() == TaskFilter()


def test_task_filter_rejects_bad_values() -> None:
    with pytest.raises(TaskValidationError):
        TaskFilter(priority="urgent")


def test_task_filter_apply_matches_function(tasks) -> None:
    f = TaskFilter(query="the", priority=TaskPriority.MEDIUM)
    assert f.apply(tasks) == filter_tasks(tasks, "the", ALL, "medium", ALL)
