# src/tasktrack/tasks/task_queries.py

from __future__ import annotations

"""
Read-only views over a project's tasks.

Nothing here mutates a project: sorting and filtering always build new lists.
All deadline maths goes through diff_days(), which rounds up to whole days.
"""

import math
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Literal

from .task_models import Project, Task, TaskStatus, as_utc

SortOrder = Literal["asc", "desc"]

ONE_DAY = timedelta(days=1)
CRITICAL_WINDOW_DAYS = 3


def utc_now() -> datetime:
    return datetime.now(UTC)


def _resolve_now(now: datetime | None) -> datetime:
    return utc_now() if now is None else as_utc(now)


@dataclass(slots=True, frozen=True)
class ProjectSummary:
    name: str
    pending: int
    in_progress: int
    completed: int

    @property
    def total(self) -> int:
        return self.pending + self.in_progress + self.completed

    @property
    def text(self) -> str:
        return (
            f"Summary of project {self.name}:   pending: {self.pending}, "
            f"in progress: {self.in_progress}, completed: {self.completed}"
        )

    def as_dict(self) -> dict[str, int]:
        return {
            "pending": self.pending,
            "inProgress": self.in_progress,
            "completed": self.completed,
        }


def project_summary(project: Project) -> ProjectSummary:
    pending = in_progress = completed = 0
    for task in project.tasks:
        match task.status:
            case TaskStatus.PENDING:
                pending += 1
            case TaskStatus.IN_PROGRESS:
                in_progress += 1
            case _:
                completed += 1
    return ProjectSummary(
        name=project.name, pending=pending, in_progress=in_progress, completed=completed
    )


def sort_tasks(project: Project, order: SortOrder = "asc") -> list[Task]:
    """
    Return the project's tasks ordered by limit_date.

    Ties keep their input order in both directions.
    """
    if order not in ("asc", "desc"):
        raise ValueError(f"order must be 'asc' or 'desc', got {order!r}")
    return sorted(project.tasks, key=lambda t: t.limit_date, reverse=(order == "desc"))


def filter_tasks(tasks: Iterable[Task], predicate: Callable[[Task], bool]) -> list[Task]:
    return [t for t in tasks if predicate(t)]


def diff_days(a: datetime, b: datetime) -> int:
    """Whole days from b to a, rounded up (negative when a is before b)."""
    return math.ceil((a - b) / ONE_DAY)


def _is_open(task: Task) -> bool:
    return task.status != TaskStatus.COMPLETED


def remaining_time(project: Project, now: datetime | None = None) -> int:
    """
    Sum of days left across open tasks.

    Overdue tasks add nothing (they are skipped, never counted negative).
    """
    now = _resolve_now(now)
    total = 0
    for task in filter_tasks(project.tasks, _is_open):
        if task.limit_date > now:
            total += diff_days(task.limit_date, now)
    return total


def critical_tasks(project: Project, now: datetime | None = None) -> list[Task]:
    """Open tasks due within the next 1-2 days (by rounded-up day count)."""
    now = _resolve_now(now)

    def is_critical(task: Task) -> bool:
        days = diff_days(task.limit_date, now)
        return _is_open(task) and 0 < days < CRITICAL_WINDOW_DAYS

    return filter_tasks(project.tasks, is_critical)


def overdue_tasks(project: Project, now: datetime | None = None) -> list[Task]:
    now = _resolve_now(now)
    return filter_tasks(project.tasks, lambda t: _is_open(t) and t.limit_date <= now)
