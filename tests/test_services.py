from datetime import datetime, timedelta, timezone

import pytest

from todo_api.errors import EmptyTitleError, InvalidDueDateError, PastDueDateError, TodoNotFoundError
from todo_api.repositories import InMemoryTodoRepository
from todo_api.services import TodoService

NOW = datetime(2030, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


def make_service() -> TodoService:
    return TodoService(InMemoryTodoRepository(), clock=lambda: NOW)


class TestTodoService:
    def test_create_and_get(self):
        service = make_service()
        created = service.create("Buy milk", "2030-01-02T12:00:00Z")
        assert created.id == 1
        assert created.due_date == NOW + timedelta(days=1)
        assert service.get_by_id(1) == created

    def test_errors(self):
        service = make_service()
        with pytest.raises(EmptyTitleError):
            service.create("", "garbage")
        with pytest.raises(InvalidDueDateError):
            service.create("Task", "garbage")
        with pytest.raises(PastDueDateError):
            service.create("Task", "2029-12-31T12:00:00Z")
        with pytest.raises(TodoNotFoundError):
            service.get_by_id(1)
