from pydantic import BaseModel, ConfigDict, Field
from datetime import date, datetime
from typing import List, Optional

from ..models import TaskPriority, TaskStatus


class TaskCreate(BaseModel):
    """Schema for creating new tasks.

    ``status`` and ``priority`` fall back to ``pending`` and ``medium``
    when they are missing or null.
    """
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    status: Optional[TaskStatus] = None
    priority: Optional[TaskPriority] = None
    assigned_to: Optional[str] = None
    due_date: Optional[date] = None


class TaskUpdate(BaseModel):
    """Schema for replacing every mutable field of a task.

    Optional fields left out of the body are written as null.
    """
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    status: TaskStatus
    priority: TaskPriority
    assigned_to: Optional[str] = None
    due_date: Optional[date] = None


class Task(BaseModel):
    """Complete task schema with all fields."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: Optional[str] = None
    status: str
    priority: str
    assigned_to: Optional[str] = None
    due_date: Optional[date] = None
    created_at: datetime
    updated_at: datetime


class TaskDeleted(BaseModel):
    message: str = "Task deleted successfully"


class ErrorResponse(BaseModel):
    error: str


class AssigneeStats(BaseModel):
    name: str
    total: int
    completed: int
    completion_rate: int


class DueDateStats(BaseModel):
    due_date: date
    tasks: int


class PriorityStats(BaseModel):
    high: int = 0
    medium: int = 0
    low: int = 0


class TaskStats(BaseModel):
    """Aggregates the dashboard charts are drawn from."""
    total: int
    completed: int
    in_progress: int
    pending: int
    completion_rate: int
    by_priority: PriorityStats
    by_assignee: List[AssigneeStats]
    by_due_date: List[DueDateStats]
