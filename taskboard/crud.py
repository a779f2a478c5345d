"""Task persistence: each function runs exactly one SQL statement against ``tasks``."""
import logging
from contextlib import contextmanager
from typing import List

from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from .errors import TaskNotFoundError, translate_db_error
from .models import Task as TaskModel, TaskPriority, TaskStatus, utcnow
from .schemas.task import Task, TaskCreate, TaskUpdate

logger = logging.getLogger(__name__)

tasks_table = TaskModel.__table__


@contextmanager
def _statement(db: Session, action: str):
    try:
        yield
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Error %s", action)
        raise translate_db_error(exc) from exc


def _to_task(row) -> Task:
    return Task.model_validate(dict(row))


def list_tasks(db: Session) -> List[Task]:
    """Return every task, newest first."""
    stmt = select(tasks_table).order_by(tasks_table.c.created_at.desc(), tasks_table.c.id.desc())
    with _statement(db, "fetching tasks"):
        rows = db.execute(stmt).mappings().all()
    logger.debug("Fetched %d tasks", len(rows))
    return [_to_task(row) for row in rows]


def count_tasks(db: Session) -> int:
    stmt = select(func.count()).select_from(tasks_table)
    with _statement(db, "counting tasks"):
        return db.execute(stmt).scalar_one()


def get_task(db: Session, task_id: int) -> Task:
    stmt = select(tasks_table).where(tasks_table.c.id == task_id)
    with _statement(db, f"fetching task {task_id}"):
        row = db.execute(stmt).mappings().first()
    if row is None:
        raise TaskNotFoundError(task_id)
    return _to_task(row)


def create_task(db: Session, payload: TaskCreate) -> Task:
    """Insert a task and return it with its generated id and timestamps."""
    now = utcnow()
    status = payload.status if payload.status is not None else TaskStatus.PENDING
    priority = payload.priority if payload.priority is not None else TaskPriority.MEDIUM
    stmt = (
        insert(tasks_table)
        .values(
            title=payload.title,
            description=payload.description,
            status=status.value,
            priority=priority.value,
            assigned_to=payload.assigned_to,
            due_date=payload.due_date,
            created_at=now,
            updated_at=now,
        )
        .returning(*tasks_table.c)
    )
    with _statement(db, "creating task"):
        row = db.execute(stmt).mappings().one()
        db.commit()
    task = _to_task(row)
    logger.info("Created task %d (%s)", task.id, task.title)
    return task


def update_task(db: Session, task_id: int, payload: TaskUpdate) -> Task:
    """Overwrite every mutable field of a task and refresh ``updated_at``.

    This is a full replace: optional fields missing from ``payload`` are
    stored as null. Raises :class:`TaskNotFoundError` when no row has
    ``task_id``.
    """
    stmt = (
        update(tasks_table)
        .where(tasks_table.c.id == task_id)
        .values(
            title=payload.title,
            description=payload.description,
            status=payload.status.value,
            priority=payload.priority.value,
            assigned_to=payload.assigned_to,
            due_date=payload.due_date,
            updated_at=utcnow(),
        )
        .returning(*tasks_table.c)
    )
    with _statement(db, f"updating task {task_id}"):
        row = db.execute(stmt).mappings().first()
        if row is None:
            db.rollback()
            raise TaskNotFoundError(task_id)
        db.commit()
    logger.info("Updated task %d", task_id)
    return _to_task(row)


def delete_task(db: Session, task_id: int) -> None:
    stmt = delete(tasks_table).where(tasks_table.c.id == task_id).returning(tasks_table.c.id)
    with _statement(db, f"deleting task {task_id}"):
        row = db.execute(stmt).first()
        if row is None:
            db.rollback()
            raise TaskNotFoundError(task_id)
        db.commit()
    logger.info("Deleted task %d", task_id)
