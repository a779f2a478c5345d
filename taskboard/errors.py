"""Domain errors and the handlers that turn them into ``{"error": ...}`` bodies."""
import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import DBAPIError, SQLAlchemyError

logger = logging.getLogger(__name__)

SCHEMA_MISSING_MESSAGE = (
    "Tasks table does not exist. Please run the database migration script first."
)

# Driver messages for a missing table: SQLite, then PostgreSQL.
_MISSING_TABLE_MARKERS = ("no such table: tasks", 'relation "tasks" does not exist')


class TaskboardError(Exception):
    """Base class for errors reported to API clients."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    @property
    def message(self) -> str:
        return str(self)


class TaskNotFoundError(TaskboardError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, task_id: int):
        super().__init__("Task not found")
        self.task_id = task_id


class SchemaNotProvisionedError(TaskboardError):
    def __init__(self):
        super().__init__(SCHEMA_MISSING_MESSAGE)


class PersistenceError(TaskboardError):
    def __init__(self, detail: str):
        super().__init__(f"Database error: {detail}")
        self.detail = detail


def translate_db_error(exc: SQLAlchemyError) -> TaskboardError:
    """Map a SQLAlchemy failure onto the schema-missing / generic split."""
    detail = str(exc.orig) if isinstance(exc, DBAPIError) and exc.orig is not None else str(exc)
    if any(marker in detail for marker in _MISSING_TABLE_MARKERS):
        return SchemaNotProvisionedError()
    return PersistenceError(detail)


async def taskboard_error_handler(request: Request, exc: TaskboardError) -> JSONResponse:
    if isinstance(exc, TaskNotFoundError):
        logger.info("%s %s: task %s not found", request.method, request.url.path, exc.task_id)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content={"error": "Invalid request", "details": jsonable_encoder(exc.errors())},
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(TaskboardError, taskboard_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
