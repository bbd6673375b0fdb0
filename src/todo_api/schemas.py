from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from .models import TodoItem


# PUBLIC_INTERFACE
class TodoCreate(BaseModel):
    """
    Schema for creating a new Todo item.

    Both fields are taken verbatim; the title/due date rules are enforced by the
    domain validator so that they map to their own error codes.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Buy milk",
                "due_date": "2030-02-01T09:00:00Z",
            }
        }
    )

    title: str = Field(..., description="Short title for the todo item; must not be empty")
    due_date: str = Field(
        ...,
        description="Due date/time as an RFC 3339 timestamp with offset; must be in the future",
    )


# PUBLIC_INTERFACE
class TodoOut(BaseModel):
    """
    Schema returned by the API for a Todo item.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": 1,
                "title": "Buy milk",
                "due_date": "2030-02-01T09:00:00Z",
            }
        }
    )

    id: int = Field(..., description="Unique identifier of the todo item")
    title: str = Field(..., description="Short title for the todo item")
    due_date: datetime = Field(..., description="Due date/time of the todo item as an RFC 3339 timestamp")

    @classmethod
    def from_item(cls, item: TodoItem) -> "TodoOut":
        return cls(id=item.id, title=item.title, due_date=item.due_date)


# PUBLIC_INTERFACE
class ErrorOut(BaseModel):
    """
    Body returned for rejected requests and missing items.
    """

    error: str = Field(..., description="Machine-readable error code, e.g. EmptyTitle or NotFound")
    message: str = Field(..., description="Human-readable description of the error")
