# src/tasktrack/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- wires the store, event bus and simulated remote service into AppState,
- populates the demo projects shown by the console.
"""

from __future__ import annotations

import calendar
import logging
from datetime import datetime, timedelta

from ..config import Settings, get_settings
from ..core.state import AppState
from ..tasks.task_events import EventBus
from ..tasks.task_models import TaskDraft, TaskStatus
from ..tasks.task_queries import utc_now
from ..tasks.task_remote import TaskRemote
from ..tasks.task_store import ProjectStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings: Settings | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    store = ProjectStore()
    bus = EventBus()

    fail_transport = bool(settings.simulate_transport_failure)
    if fail_transport:
        logger.warning("Transport failure simulation is ON: every remote call will fail.")

    remote = TaskRemote(
        store,
        bus,
        load_delay=settings.load_delay_seconds,
        status_delay=settings.status_delay_seconds,
        transport_failure=lambda: fail_transport,
    )
    return AppState(settings=settings, store=store, bus=bus, remote=remote)


def _add_months(dt: datetime, months: int) -> datetime:
    """Shift by calendar months, clamping the day to the target month's length."""
    month_index = dt.month - 1 + months
    year = dt.year + month_index // 12
    month = month_index % 12 + 1
    day = min(dt.day, calendar.monthrange(year, month)[1])
    return dt.replace(year=year, month=month, day=day)


def demo_deadlines(now: datetime) -> list[datetime]:
    days = timedelta(days=1)
    return [
        _add_months(now, -1),
        _add_months(now, 1),
        now + 2 * days,
        now + 3 * days,
        now - 2 * days,
        now + 15 * days,
        now - 15 * days,
        now + 2 * days,
        now + 1 * days,
        now - 1 * days,
    ]


_ALPHA_TASKS = [
    ("Task A", TaskStatus.PENDING, 0),
    ("Task B", TaskStatus.IN_PROGRESS, 1),
    ("Task C", TaskStatus.COMPLETED, 2),
    ("Task D", TaskStatus.PENDING, 3),
    ("Task E", TaskStatus.IN_PROGRESS, 4),
    ("Task F", TaskStatus.COMPLETED, 5),
    ("Task G", TaskStatus.PENDING, 6),
    ("Task EG", TaskStatus.IN_PROGRESS, 7),
    ("Task Fh", TaskStatus.IN_PROGRESS, 8),
    ("Task GJ", TaskStatus.PENDING, 9),
]

_BETA_TASKS = [
    ("Task H", TaskStatus.IN_PROGRESS, 6),
    ("Task I", TaskStatus.IN_PROGRESS, 1),
    ("Task J", TaskStatus.PENDING, 4),
    ("Task K", TaskStatus.IN_PROGRESS, 0),
    ("Task L", TaskStatus.IN_PROGRESS, 3),
    ("Task M", TaskStatus.COMPLETED, 5),
    ("Task N", TaskStatus.COMPLETED, 2),
]


def seed_demo_projects(store: ProjectStore, now: datetime | None = None) -> None:
    """Create "Project Alpha" (id 1) and "Project Beta" (id 2) with deadlines around now."""
    dates = demo_deadlines(now or utc_now())

    for project_id, name, rows in ((1, "Project Alpha", _ALPHA_TASKS), (2, "Project Beta", _BETA_TASKS)):
        project = store.create_project(project_id, name)
        for description, status, date_idx in rows:
            store.add_task(
                project,
                TaskDraft(description=description, status=status, limit_date=dates[date_idx]),
            )

    logger.info("Seeded %d demo projects.", store.count_projects())
