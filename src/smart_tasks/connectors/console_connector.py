# src/smart_tasks/connectors/console_connector.py

from __future__ import annotations

import logging
from datetime import datetime

from ..cli.commands import DESCRIPTION_SEP
from ..cli.commands import registry as command_registry
from ..core.ports import NotifyVariant
from ..core.state import AppState
from ..errors import TaskError
from ..tasks import task_api
from .render import render_stats, render_task_card

logger = logging.getLogger(__name__)


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}")


class ConsoleNotifier:
    """Prints operation summaries as timestamped console lines."""

    def notify(self, title: str, message: str, *, variant: NotifyVariant = "default") -> None:
        mark = "!" if variant == "destructive" else "*"
        _print_ts(f"{mark} {title} {message}")


def handle_line(state: AppState, line: str) -> str | None:
    """
    Turn one line of user input into a reply.

    Slash commands go through the registry; any other text creates a task
    ("title :: description"). Returns None for blank input.
    """
    line = line.strip()
    if not line:
        return None

    try:
        reply = command_registry.handle(state, line)
        if reply is not None:
            return reply

        title, _, description = line.partition(DESCRIPTION_SEP)
        task = task_api.create_task(state, title=title, description=description)
        return render_task_card(
            task, preview_chars=int(getattr(state.settings, "description_preview_chars", 120))
        )
    except TaskError as e:
        logger.debug("Rejected input %r: %s", line, e.message)
        return f"Error: {e.message}"
    except Exception:
        logger.exception("Command handler crashed.")
        return "Internal error while handling a command."


def run_console_loop(state: AppState) -> None:
    logger.info("Console connector started (tasks=%s).", len(state.task_store.list_all()))
    app_name = str(getattr(state.settings, "app_name", "smart-tasks"))

    _print_ts(f"[{app_name}] Type a task title to add it. Use /help for commands, /exit to quit.")
    _print_ts(render_stats(task_api.status_counts(state)))

    while True:
        try:
            user_input = input(">>> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        reply = handle_line(state, user_input)
        if reply is not None:
            print(reply)

    logger.info("Console connector finished.")
