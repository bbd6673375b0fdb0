from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import replace
from threading import RLock

from .errors import TodoNotFoundError
from .models import TodoItem


# PUBLIC_INTERFACE
class TodoRepository(ABC):
    """Abstract repository contract for todo storage backends."""

    @abstractmethod
    def create(self, item: TodoItem) -> TodoItem:
        """
        Store a new TodoItem under a freshly assigned id and return the stored item.

        Any id already present on the given item is ignored.
        """

    @abstractmethod
    def get_by_id(self, todo_id: int) -> TodoItem:
        """Return the TodoItem with the given id, or raise TodoNotFoundError."""


class InMemoryTodoRepository(TodoRepository):
    """
    Thread-safe in-memory repository. Lives for the lifetime of the process.
    """

    def __init__(self) -> None:
        self._lock = RLock()
        self._items: dict[int, TodoItem] = {}
        self._next_id = 1

    def create(self, item: TodoItem) -> TodoItem:
        with self._lock:
            stored = replace(item, id=self._next_id)
            self._items[stored.id] = stored
            # Only advance once the item is in the map.
            self._next_id += 1
            return stored

    def get_by_id(self, todo_id: int) -> TodoItem:
        with self._lock:
            item = self._items.get(todo_id)
        if item is None:
            raise TodoNotFoundError(todo_id)
        return item
