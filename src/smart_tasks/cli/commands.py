# src/smart_tasks/cli/commands.py

from __future__ import annotations

import logging
import shlex
from collections.abc import Callable

from ..connectors.render import (
    render_filters,
    render_stats,
    render_task_card,
    render_task_detail,
    render_task_list,
)
from ..core.state import AppState
from ..errors import TaskValidationError
from ..tasks import task_api
from ..tasks.task_models import EDITABLE_FIELDS, Task, TaskStatus

CommandHandler = Callable[[AppState, list[str]], str]

logger = logging.getLogger(__name__)

DESCRIPTION_SEP = "::"


def split_args(raw: str) -> list[str]:
    """Shell-like split so values can be quoted; falls back to whitespace on bad quoting."""
    try:
        return shlex.split(raw)
    except ValueError:
        return raw.split()


class CommandRegistry:
    """Slash-command registry used by the console connector (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}
        # Handlers that take the text after the command name verbatim.
        self._raw: set[CommandHandler] = set()

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
        raw_args: bool = False,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        if raw_args:
            self._raw.add(handler)
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.

        Raw-args handlers get the remainder as a single argument (or none);
        the others get it shell-split.
        """
        if not line.startswith("/"):
            return None

        name, _, rest = line[1:].strip().partition(" ")
        if not name:
            return "Empty command. Use /help to list available commands."

        name = name.lower()
        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        if handler in self._raw:
            rest = rest.strip()
            args = [rest] if rest else []
        else:
            args = split_args(rest)
        logger.debug("Command /%s args=%s", name, args)
        return handler(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _preview_chars(state: AppState) -> int:
    return int(getattr(state.settings, "description_preview_chars", 120))


def _parse_assignments(args: list[str]) -> dict[str, str]:
    out: dict[str, str] = {}
    for arg in args:
        key, sep, value = arg.partition("=")
        if not sep or not key.strip():
            raise TaskValidationError(f"Expected field=value, got {arg!r}")
        out[key.strip().lower()] = value.strip()
    return out


def _lookup(state: AppState, raw: str) -> str | None:
    return task_api.resolve_task_id(state, raw.lstrip("#"))


def _no_match(raw: str) -> str:
    return f"No single task matches id {raw!r}. Use /list to see ids."


def _card(state: AppState, task: Task) -> str:
    return render_task_card(task, preview_chars=_preview_chars(state))


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_add(state: AppState, args: list[str]) -> str:
    """
    /add <title>
    /add <title> :: <description>
    """
    text = " ".join(args)
    title, _, description = text.partition(DESCRIPTION_SEP)
    task = task_api.create_task(state, title=title, description=description)
    return _card(state, task)


def cmd_edit(state: AppState, args: list[str]) -> str:
    """/edit <id> title=... description=... status=... priority=... category=..."""
    if len(args) < 2:
        return "Usage: /edit <id> field=value [field=value ...]"
    task_id = _lookup(state, args[0])
    if task_id is None:
        return _no_match(args[0])
    fields = _parse_assignments(args[1:])
    unknown = set(fields) - set(EDITABLE_FIELDS)
    if unknown:
        return f"Unknown field(s): {', '.join(sorted(unknown))}. Use {', '.join(EDITABLE_FIELDS)}."
    task = task_api.update_task(state, task_id, **fields)
    if task is None:
        return _no_match(args[0])
    return _card(state, task)


def _set_status(state: AppState, args: list[str], status: TaskStatus) -> str:
    if not args:
        return f"Usage: /<command> <id> (marks the task as {status.label})"
    task_id = _lookup(state, args[0])
    if task_id is None:
        return _no_match(args[0])
    task = task_api.change_status(state, task_id, status)
    if task is None:
        return _no_match(args[0])
    return _card(state, task)


def cmd_start(state: AppState, args: list[str]) -> str:
    return _set_status(state, args, TaskStatus.IN_PROGRESS)


def cmd_done(state: AppState, args: list[str]) -> str:
    return _set_status(state, args, TaskStatus.COMPLETED)


def cmd_reopen(state: AppState, args: list[str]) -> str:
    return _set_status(state, args, TaskStatus.PENDING)


def cmd_status(state: AppState, args: list[str]) -> str:
    if len(args) != 2:
        return "Usage: /status <id> pending|in-progress|completed"
    return _set_status(state, args[:1], TaskStatus.parse(args[1]))


def cmd_rm(state: AppState, args: list[str]) -> str:
    if not args:
        return "Usage: /rm <id>"
    task_id = _lookup(state, args[0])
    if task_id is None:
        return _no_match(args[0])
    task = task_api.delete_task(state, task_id)
    if task is None:
        return _no_match(args[0])
    return f"Removed #{task.id}."


def cmd_show(state: AppState, args: list[str]) -> str:
    if not args:
        return "Usage: /show <id>"
    task_id = _lookup(state, args[0])
    task = state.task_store.get(task_id) if task_id else None
    if task is None:
        return _no_match(args[0])
    return render_task_detail(task)


def cmd_list(state: AppState, args: list[str]) -> str:
    return render_task_list(
        task_api.visible_tasks(state), state.filters, preview_chars=_preview_chars(state)
    )


def cmd_search(state: AppState, args: list[str]) -> str:
    """
    /search <text>  -> filter by text in title/description
    /search         -> clear the text filter
    """
    state.filters = state.filters.with_changes(query=" ".join(args).strip())
    return cmd_list(state, [])


def cmd_filter(state: AppState, args: list[str]) -> str:
    """
    /filter                      -> show active filters
    /filter status=pending category=shopping
    /filter priority=all         -> reset one dimension
    """
    if not args:
        return f"Active filters: {render_filters(state.filters)}"

    changes = _parse_assignments(args)
    unknown = set(changes) - {"status", "priority", "category"}
    if unknown:
        return f"Unknown filter(s): {', '.join(sorted(unknown))}. Use status, priority, category."

    state.filters = state.filters.with_changes(**changes)
    return cmd_list(state, [])


def cmd_clear(state: AppState, args: list[str]) -> str:
    state.filters = state.filters.cleared()
    return cmd_list(state, [])


def cmd_stats(state: AppState, args: list[str]) -> str:
    return render_stats(task_api.status_counts(state))


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register(
    "add",
    cmd_add,
    help_text="Create a task: /add <title> [:: description].",
    aliases=["new"],
    raw_args=True,
)
registry.register(
    "edit",
    cmd_edit,
    help_text="Edit a task: /edit <id> title=... description=... priority=... category=... status=...",
)
registry.register("start", cmd_start, help_text="Mark a task as in progress: /start <id>.")
registry.register("done", cmd_done, help_text="Mark a task as completed: /done <id>.")
registry.register("reopen", cmd_reopen, help_text="Mark a task as pending: /reopen <id>.")
registry.register("status", cmd_status, help_text="Set status: /status <id> <status>.")
registry.register("rm", cmd_rm, help_text="Delete a task: /rm <id>.", aliases=["delete", "del"])
registry.register("show", cmd_show, help_text="Show all fields of a task: /show <id>.")
registry.register("list", cmd_list, help_text="List visible tasks.", aliases=["ls"])
registry.register(
    "search", cmd_search, help_text="Search title/description: /search [text].", raw_args=True
)
registry.register(
    "filter", cmd_filter, help_text="Filter: /filter status=... priority=... category=..."
)
registry.register("clear", cmd_clear, help_text="Reset search and filters.")
registry.register("stats", cmd_stats, help_text="Show task counts by status.")
