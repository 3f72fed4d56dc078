# src/smart_tasks/errors.py

from __future__ import annotations


class TaskError(Exception):
    """Base class for errors the presentation layer reports to the user."""

    def __init__(self, code: str, message: str) -> None:
        self.code = code
        self.message = message
        super().__init__(message)


class TaskNotFound(TaskError):
    def __init__(self, task_id: str) -> None:
        self.task_id = task_id
        super().__init__("TASK_NOT_FOUND", f"Task not found: {task_id}")


class TaskValidationError(TaskError):
    def __init__(self, message: str) -> None:
        super().__init__("VALIDATION_ERROR", message)
