"""
Todo API package.

Exposes the core Todo types for convenience imports. The FastAPI application
factory lives in todo_api.main so that the core can be imported without the
web stack.
"""

from .errors import (
    EmptyTitleError,
    InvalidDueDateError,
    PastDueDateError,
    TodoError,
    TodoNotFoundError,
    TodoValidationError,
)
from .models import TodoItem, new_todo, parse_due_date, validate_todo
from .repositories import InMemoryTodoRepository, TodoRepository

__all__ = [
    "EmptyTitleError",
    "InMemoryTodoRepository",
    "InvalidDueDateError",
    "PastDueDateError",
    "TodoError",
    "TodoItem",
    "TodoNotFoundError",
    "TodoRepository",
    "TodoValidationError",
    "new_todo",
    "parse_due_date",
    "validate_todo",
]
