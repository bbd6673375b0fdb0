from __future__ import annotations

from fastapi import APIRouter, Depends, Request, status

from ..errors import TodoNotFoundError, TodoValidationError
from ..log import logger
from ..schemas import ErrorOut, TodoCreate, TodoOut
from ..services import TodoService

router = APIRouter(
    prefix="/todo",
    tags=["todos"],
)


def _get_service(request: Request) -> TodoService:
    """
    Dependency returning the TodoService wired into the application by create_app.
    """
    return request.app.state.todo_service


# PUBLIC_INTERFACE
@router.post(
    "",
    response_model=TodoOut,
    status_code=status.HTTP_201_CREATED,
    summary="Create Todo",
    description="Create a new Todo item and return the created resource.",
    responses={
        201: {"description": "Todo created successfully"},
        400: {"model": ErrorOut, "description": "Empty title, malformed or past due date"},
    },
)
def create_todo(payload: TodoCreate, service: TodoService = Depends(_get_service)) -> TodoOut:
    """
    Create a new Todo.
    """
    try:
        created = service.create(payload.title, payload.due_date)
    except TodoValidationError as e:
        logger.info("Rejected todo: %s", e.code)
        raise
    logger.info("Created todo %d", created.id)
    return TodoOut.from_item(created)


# PUBLIC_INTERFACE
@router.get(
    "/{todo_id}",
    response_model=TodoOut,
    summary="Get Todo",
    description="Get a single Todo item by ID.",
    responses={
        200: {"description": "Todo found"},
        404: {"model": ErrorOut, "description": "Todo not found"},
    },
)
def get_todo(todo_id: int, service: TodoService = Depends(_get_service)) -> TodoOut:
    """
    Retrieve a single Todo item by its ID.
    """
    try:
        item = service.get_by_id(todo_id)
    except TodoNotFoundError:
        logger.info("Todo %d not found", todo_id)
        raise
    return TodoOut.from_item(item)
