"""Dashboard aggregates computed from a task list."""
from collections import Counter
from typing import Dict, Iterable

from .models import TaskPriority, TaskStatus
from .schemas.task import AssigneeStats, DueDateStats, PriorityStats, Task, TaskStats

UNASSIGNED = "Unassigned"


def _rate(completed: int, total: int) -> int:
    return round(completed / total * 100) if total else 0


def compute_stats(tasks: Iterable[Task]) -> TaskStats:
    """Summarize tasks by status, priority, assignee and due date.

    Assignees are ordered by task count, busiest first; due dates are
    ascending and tasks without one are left out.
    """
    tasks = list(tasks)
    statuses = Counter(task.status for task in tasks)
    priorities = Counter(task.priority for task in tasks)

    assignees: Dict[str, AssigneeStats] = {}
    for task in tasks:
        name = task.assigned_to or UNASSIGNED
        entry = assignees.setdefault(name, AssigneeStats(name=name, total=0, completed=0, completion_rate=0))
        entry.total += 1
        if task.status == TaskStatus.COMPLETED.value:
            entry.completed += 1
    for entry in assignees.values():
        entry.completion_rate = _rate(entry.completed, entry.total)

    due_dates = Counter(task.due_date for task in tasks if task.due_date is not None)

    completed = statuses[TaskStatus.COMPLETED.value]
    return TaskStats(
        total=len(tasks),
        completed=completed,
        in_progress=statuses[TaskStatus.IN_PROGRESS.value],
        pending=statuses[TaskStatus.PENDING.value],
        completion_rate=_rate(completed, len(tasks)),
        by_priority=PriorityStats(
            high=priorities[TaskPriority.HIGH.value],
            medium=priorities[TaskPriority.MEDIUM.value],
            low=priorities[TaskPriority.LOW.value],
        ),
        by_assignee=sorted(assignees.values(), key=lambda entry: entry.total, reverse=True),
        by_due_date=[DueDateStats(due_date=day, tasks=count) for day, count in sorted(due_dates.items())],
    )
