# src/tasktrack/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import StrEnum


class TaskStatus(StrEnum):
    """
    Task lifecycle status.

    Values keep the camelCase spelling ("inProgress") used in event payloads
    and summaries.
    """

    PENDING = "pending"
    IN_PROGRESS = "inProgress"
    COMPLETED = "completed"

    @classmethod
    def parse(cls, raw: str | TaskStatus) -> TaskStatus:
        try:
            return cls(raw)
        except ValueError:
            allowed = ", ".join(s.value for s in cls)
            raise ValueError(f"invalid task status {raw!r} (expected one of: {allowed})") from None


def as_utc(value: datetime) -> datetime:
    # Naive datetimes are taken to be UTC.
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


@dataclass(slots=True, frozen=True)
class TaskDraft:
    """Input of "add task": everything except the id."""

    description: str
    status: TaskStatus
    limit_date: datetime


@dataclass(slots=True)
class Task:
    id: int
    description: str
    status: TaskStatus
    limit_date: datetime

    def __post_init__(self) -> None:
        self.limit_date = as_utc(self.limit_date)

    def __setattr__(self, name: str, value: object) -> None:
        # Status is checked on every write, including the one in __init__.
        if name == "status":
            value = TaskStatus.parse(value)  # type: ignore[arg-type]
        object.__setattr__(self, name, value)


@dataclass(slots=True)
class Project:
    id: int
    name: str
    tasks: list[Task] = field(default_factory=list)
