from __future__ import annotations

from .errors import EmptyTitleError
from .models import Clock, TodoItem, new_todo, parse_due_date, system_clock
from .repositories import TodoRepository


# PUBLIC_INTERFACE
class TodoService:
    """
    Glue between the HTTP layer and the core: parses the due date, builds a
    validated TodoItem and hands it to the repository.
    """

    def __init__(self, repository: TodoRepository, clock: Clock = system_clock) -> None:
        self._repository = repository
        self._clock = clock

    def create(self, title: str, due_date: str) -> TodoItem:
        """
        Create a TodoItem from raw request values.

        Raises:
            EmptyTitleError, InvalidDueDateError, PastDueDateError
        """
        # An empty title wins over an unparseable date.
        if title == "":
            raise EmptyTitleError()
        item = new_todo(title, parse_due_date(due_date), self._clock)
        return self._repository.create(item)

    def get_by_id(self, todo_id: int) -> TodoItem:
        return self._repository.get_by_id(todo_id)
