# tests/test_commands.py

from __future__ import annotations

import pytest

from smart_tasks.cli.commands import CommandRegistry, registry, split_args
from smart_tasks.core.state import AppState
from smart_tasks.errors import TaskValidationError
from smart_tasks.tasks.seed import demo_tasks
from smart_tasks.tasks.task_models import Task, TaskCategory, TaskPriority, TaskStatus


def test_command_registry_routes_and_aliases(state: AppState) -> None:
    reg = CommandRegistry()
    called: list[list[str]] = []

    def handler(state, args):
        called.append(args)
        return "ok"

    reg.register("a", handler, "a", aliases=["alpha"])

    assert reg.handle(state, "/a x 'y z'") == "ok"
    assert reg.handle(state, "/ALPHA") == "ok"
    assert called == [["x", "y z"], []]
    assert "/a - a" in reg.build_help()


def test_command_registry_unknown_and_non_command(state: AppState) -> None:
    reg = CommandRegistry()
    assert reg.handle(state, "hello") is None
    assert "Unknown command" in (reg.handle(state, "/nope") or "")
    assert "Empty command" in (reg.handle(state, "/") or "")


def test_split_args_falls_back_on_bad_quotes() -> None:
    assert split_args("tomorrow's class") == ["tomorrow's", "class"]


def test_add_with_description(state: AppState) -> None:
    reply = registry.handle(state, "/add Team meeting notes :: send them ASAP")

    task = state.task_store.list_all()[0]
    assert task.title == "Team meeting notes"
    assert task.description == "send them ASAP"
    assert task.priority == TaskPriority.HIGH
    assert task.category == TaskCategory.WORK
    assert "Team meeting notes" in reply
    assert task.id[:8] in reply


def test_add_without_title_is_rejected(state: AppState) -> None:
    with pytest.raises(TaskValidationError):
        registry.handle(state, "/add :: only a description")


def test_status_shortcuts(state: AppState) -> None:
    registry.handle(state, "/start 2")
    assert state.task_store.get("2").status == TaskStatus.IN_PROGRESS
    registry.handle(state, "/done #2")
    assert state.task_store.get("2").status == TaskStatus.COMPLETED
    registry.handle(state, "/reopen 2")
    assert state.task_store.get("2").status == TaskStatus.PENDING
    registry.handle(state, "/status 2 in_progress")
    assert state.task_store.get("2").status == TaskStatus.IN_PROGRESS


def test_status_with_unknown_id(state: AppState) -> None:
    assert "No single task matches" in registry.handle(state, "/done 99")


def test_edit_fields(state: AppState) -> None:
    reply = registry.handle(state, '/edit 3 title="ML course, week 2" category=study priority=low')

    task = state.task_store.get("3")
    assert task.title == "ML course, week 2"
    assert task.category == TaskCategory.STUDY
    assert task.priority == TaskPriority.LOW
    assert "ML course, week 2" in reply


def test_edit_rejects_unknown_field(state: AppState) -> None:
    reply = registry.handle(state, "/edit 3 id=42")
    assert "Unknown field" in reply
    assert state.task_store.get("3") is not None


def test_edit_rejects_bad_enum(state: AppState) -> None:
    with pytest.raises(TaskValidationError):
        registry.handle(state, "/edit 3 priority=urgent")


def test_rm_twice(state: AppState) -> None:
    assert registry.handle(state, "/rm 4") == "Removed #4."
    assert "No single task matches" in registry.handle(state, "/rm 4")


def test_search_filter_and_clear(state: AppState) -> None:
    reply = registry.handle(state, "/search grocery")
    assert "Buy groceries for the week" in reply
    assert "Study machine learning course" not in reply
    assert 'search="grocery"' in reply

    reply = registry.handle(state, "/filter status=completed")
    assert "No tasks found. Try adjusting your search or filters" in reply

    reply = registry.handle(state, "/clear")
    assert reply.startswith("Tasks (4), filters: none")


def test_filter_conjunction(state: AppState) -> None:
    reply = registry.handle(state, "/filter status=pending category=shopping")
    assert "Buy groceries for the week" in reply
    assert "Study machine learning course" not in reply
    assert registry.handle(state, "/filter") == "Active filters: status=pending, category=shopping"


def test_filter_unknown_dimension(state: AppState) -> None:
    assert "Unknown filter" in registry.handle(state, "/filter color=red")


def test_empty_store_hint(state: AppState) -> None:
    for task in state.task_store.list_all():
        state.task_store.delete(task.id)
    assert "Create your first task" in registry.handle(state, "/list")


def test_stats_and_show(state: AppState) -> None:
    assert registry.handle(state, "/stats") == "Pending: 2  In Progress: 1  Completed: 1"

    detail = registry.handle(state, "/show 1")
    assert "status:      in progress" in detail
    assert "priority:    high" in detail


def test_help_lists_commands(state: AppState) -> None:
    text = registry.handle(state, "/help")
    for name in ("add", "edit", "done", "rm", "search", "filter", "stats"):
        assert f"/{name} -" in text


def test_add_keeps_title_as_typed(state: AppState) -> None:
    registry.handle(state, "/add Call Bob's and Ann's office")
    assert state.task_store.list_all()[0].title == "Call Bob's and Ann's office"

    registry.handle(state, '/add  Read "Dune"  twice :: chapter  one')
    task = state.task_store.list_all()[0]
    assert task.title == 'Read "Dune"  twice'
    assert task.description == "chapter  one"


def test_search_keeps_query_as_typed(state: AppState) -> None:
    registry.handle(state, "/search tomorrow's class")
    assert state.filters.query == "tomorrow's class"
    assert "Study machine learning course" in registry.handle(state, "/list")


def _task_with_id(task_id: str, title: str) -> Task:
    task = demo_tasks()[1]
    task.id = task_id
    task.title = title
    return task


def test_repeated_rm_of_short_id_leaves_other_tasks_alone(state: AppState) -> None:
    other_id = "4b77a6ab34f3422aa1d779b5a71b14ef"
    state.task_store.load([_task_with_id(other_id, "Unrelated task")])

    assert registry.handle(state, "/rm 4") == "Removed #4."
    assert "No single task matches" in registry.handle(state, "/rm 4")
    assert "No single task matches" in registry.handle(state, "/done 4")
    assert state.task_store.get(other_id).status == TaskStatus.PENDING

    # A prefix long enough to be a short id still resolves.
    assert registry.handle(state, "/rm 4b77a6ab") == f"Removed #{other_id}."
