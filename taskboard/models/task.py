from sqlalchemy import DateTime
from sqlmodel import SQLModel, Field
from datetime import date, datetime, timezone
from typing import Optional
import enum


class TaskStatus(str, enum.Enum):
    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"


class TaskPriority(str, enum.Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


def utcnow() -> datetime:
    """Current UTC time as a naive datetime, the way the store keeps timestamps."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Task(SQLModel, table=True):
    """Task model for the team dashboard.

    ``sqlite_autoincrement`` keeps SQLite from handing out the id of a
    deleted row again.
    """
    __tablename__ = "tasks"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str
    description: Optional[str] = None
    status: str = Field(default=TaskStatus.PENDING.value)
    priority: str = Field(default=TaskPriority.MEDIUM.value)
    assigned_to: Optional[str] = None
    due_date: Optional[date] = None
    created_at: datetime = Field(default_factory=utcnow, sa_type=DateTime(timezone=False), index=True)
    updated_at: datetime = Field(default_factory=utcnow, sa_type=DateTime(timezone=False))
