from typing import Annotated, List

from fastapi import APIRouter, Depends, Path
from sqlalchemy.orm import Session

from .. import crud
from ..database import get_db
from ..schemas.task import ErrorResponse, Task as TaskSchema, TaskCreate, TaskDeleted, TaskStats, TaskUpdate
from ..stats import compute_stats

router = APIRouter()

# Ids outside a signed 64-bit integer cannot be bound by the drivers.
TaskId = Annotated[int, Path(ge=-(2**63), le=2**63 - 1)]

_NOT_FOUND = {404: {"model": ErrorResponse, "description": "Task not found"}}
_SERVER_ERROR = {500: {"model": ErrorResponse, "description": "Database error"}}


@router.get("/tasks", response_model=List[TaskSchema], responses=_SERVER_ERROR)
def get_tasks(db: Session = Depends(get_db)):
    """Get all tasks, newest first."""
    return crud.list_tasks(db)


@router.get("/tasks/stats", response_model=TaskStats, responses=_SERVER_ERROR)
def get_task_stats(db: Session = Depends(get_db)):
    """Counts by status, priority, assignee and due date for the dashboard charts."""
    return compute_stats(crud.list_tasks(db))


@router.post("/tasks", response_model=TaskSchema, responses=_SERVER_ERROR)
def create_task(task: TaskCreate, db: Session = Depends(get_db)):
    """Create a new task.

    Missing ``status`` and ``priority`` default to ``pending`` and ``medium``.
    """
    return crud.create_task(db, task)


@router.get("/tasks/{task_id}", response_model=TaskSchema, responses={**_NOT_FOUND, **_SERVER_ERROR})
def get_task(task_id: TaskId, db: Session = Depends(get_db)):
    """Get a specific task by ID."""
    return crud.get_task(db, task_id)


@router.put("/tasks/{task_id}", response_model=TaskSchema, responses={**_NOT_FOUND, **_SERVER_ERROR})
def update_task(task_id: TaskId, task_update: TaskUpdate, db: Session = Depends(get_db)):
    """Replace every field of a task.

    Fields left out of the body are cleared, not kept.
    """
    return crud.update_task(db, task_id, task_update)


@router.delete("/tasks/{task_id}", response_model=TaskDeleted, responses={**_NOT_FOUND, **_SERVER_ERROR})
def delete_task(task_id: TaskId, db: Session = Depends(get_db)):
    """Delete a specific task."""
    crud.delete_task(db, task_id)
    return TaskDeleted()
