"""
Error types raised by the Todo domain and storage layers.

Each error carries a short machine-readable ``code`` and a human-readable
message; the HTTP layer turns both into the JSON error body.
"""
from __future__ import annotations

from typing import Optional


class TodoError(Exception):
    """Base class for expected, caller-recoverable Todo errors."""

    code: str = "TodoError"
    default_message: str = "Todo operation failed"

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class TodoValidationError(TodoError):
    """A Todo item failed its construction-time checks."""

    code = "ValidationError"
    default_message = "Todo validation failed"


class EmptyTitleError(TodoValidationError):
    code = "EmptyTitle"
    default_message = "Title cannot be empty"


class PastDueDateError(TodoValidationError):
    code = "PastDueDate"
    default_message = "Due date must be in the future"


class InvalidDueDateError(TodoValidationError):
    code = "InvalidDueDate"
    default_message = "Invalid due date format"


class TodoNotFoundError(TodoError):
    code = "NotFound"

    def __init__(self, todo_id: int) -> None:
        self.todo_id = todo_id
        super().__init__(f"Todo with ID {todo_id} not found")
