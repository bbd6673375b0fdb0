from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .errors import TodoError, TodoNotFoundError
from .log import configure_logging, logger
from .models import Clock, system_clock
from .repositories import InMemoryTodoRepository, TodoRepository
from .routers import todos as todos_router
from .services import TodoService
from .settings import Settings, get_settings

openapi_tags = [
    {"name": "health", "description": "Service health and status endpoints."},
    {
        "name": "todos",
        "description": "Create and retrieve Todo items.",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    logger.info("Starting todo API (port %d)", settings.port)
    try:
        yield
    finally:
        logger.info("Stopping todo API")


async def todo_error_handler(request: Request, exc: TodoError) -> JSONResponse:
    """
    Return the domain error as JSON.

    Response format:
        {
            "error": "EmptyTitle" | "PastDueDate" | "InvalidDueDate" | "NotFound",
            "message": "..."
        }
    """
    status_code = 404 if isinstance(exc, TodoNotFoundError) else 400
    return JSONResponse(
        status_code=status_code,
        content={"error": exc.code, "message": exc.message},
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Return a consistent JSON structure for request validation errors.

    Response format:
        {
            "error": "ValidationError",
            "detail": [... pydantic/fastapi error details ...],
            "message": "Request validation failed"
        }
    """
    logger.info("Request validation failed for %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=422,
        content={
            "error": "ValidationError",
            "message": "Request validation failed",
            "detail": exc.errors(),
        },
    )


# PUBLIC_INTERFACE
def create_app(
    settings: Optional[Settings] = None,
    repository: Optional[TodoRepository] = None,
    clock: Clock = system_clock,
) -> FastAPI:
    """
    Build the FastAPI application.

    The repository is constructed here once (unless one is passed in) and shared
    by every request through app.state; there is no module-level store.
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Todo API",
        description="Backend API service for creating and retrieving todos.",
        version="0.1.0",
        openapi_tags=openapi_tags,
        lifespan=lifespan,
    )
    app.state.settings = settings
    if repository is None:
        repository = InMemoryTodoRepository()
    app.state.todo_service = TodoService(repository, clock)

    allow_all = (settings.cors_allow_origins == ["*"]) or (len(settings.cors_allow_origins) == 0)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if allow_all else settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(TodoError, todo_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, validation_exception_handler)  # type: ignore[arg-type]

    # PUBLIC_INTERFACE
    @app.get("/", summary="Health Check", tags=["health"])
    def health_check():
        """
        Health check endpoint.

        Returns:
            A JSON object indicating service health.
        """
        return {"message": "Healthy"}

    app.include_router(todos_router.router)
    return app
