from datetime import date, datetime

from taskboard.schemas.task import Task
from taskboard.stats import compute_stats

_STAMP = datetime(2025, 1, 6, 9, 0, 0)


def _task(task_id: int, status: str = "pending", priority: str = "medium", assigned_to=None, due_date=None) -> Task:
    return Task(
        id=task_id,
        title=f"Task {task_id}",
        status=status,
        priority=priority,
        assigned_to=assigned_to,
        due_date=due_date,
        created_at=_STAMP,
        updated_at=_STAMP,
    )


def test_empty_list() -> None:
    stats = compute_stats([])

    assert stats.total == 0
    assert stats.completion_rate == 0
    assert stats.by_priority.model_dump() == {"high": 0, "medium": 0, "low": 0}
    assert stats.by_assignee == []
    assert stats.by_due_date == []


def test_status_counts_and_rate() -> None:
    tasks = [
        _task(1, status="completed"),
        _task(2, status="completed"),
        _task(3, status="in-progress"),
        _task(4, status="pending"),
        _task(5, status="pending"),
        _task(6, status="pending"),
    ]

    stats = compute_stats(tasks)

    assert (stats.total, stats.completed, stats.in_progress, stats.pending) == (6, 2, 1, 3)
    assert stats.completion_rate == 33


def test_assignees_sorted_by_total_with_unassigned_bucket() -> None:
    tasks = [
        _task(1, assigned_to="Ana"),
        _task(2, assigned_to=""),
        _task(3, assigned_to="Ben", status="completed"),
        _task(4, assigned_to="Ben", status="completed"),
        _task(5, assigned_to="Ben"),
        _task(6),
    ]

    stats = compute_stats(tasks)

    assert [(entry.name, entry.total, entry.completed, entry.completion_rate) for entry in stats.by_assignee] == [
        ("Ben", 3, 2, 67),
        ("Unassigned", 2, 0, 0),
        ("Ana", 1, 0, 0),
    ]


def test_due_dates_ascending_and_skip_missing() -> None:
    tasks = [
        _task(1, due_date=date(2025, 3, 10)),
        _task(2, due_date=date(2025, 1, 2)),
        _task(3, due_date=date(2025, 3, 10)),
        _task(4),
    ]

    stats = compute_stats(tasks)

    assert [(entry.due_date, entry.tasks) for entry in stats.by_due_date] == [
        (date(2025, 1, 2), 1),
        (date(2025, 3, 10), 2),
    ]


def test_priority_counts() -> None:
    stats = compute_stats([_task(1, priority="high"), _task(2, priority="high"), _task(3, priority="low")])

    assert stats.by_priority.model_dump() == {"high": 2, "medium": 0, "low": 1}
