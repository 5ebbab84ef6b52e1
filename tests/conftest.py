# tests/conftest.py

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import pytest

from tasktrack.config import Settings
from tasktrack.tasks.task_events import EventBus
from tasktrack.tasks.task_models import Project, TaskDraft, TaskStatus
from tasktrack.tasks.task_remote import TaskRemote
from tasktrack.tasks.task_store import ProjectStore

from .fakes import NOW, EventRecorder, RecordingSleeper, days


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    """
    Settings built by hand (not from env) so tests stay deterministic.
    Remote delays are zero; nothing waits on a real clock.
    """
    return Settings(
        app_name="tasktrack-test",
        log_level="DEBUG",
        data_dir=tmp_path / "data",
        load_delay_seconds=0.0,
        status_delay_seconds=0.0,
        simulate_transport_failure=False,
        seed_demo=False,
    )


@pytest.fixture()
def now() -> datetime:
    return NOW


@pytest.fixture()
def store() -> ProjectStore:
    return ProjectStore()


@pytest.fixture()
def bus() -> EventBus:
    return EventBus()


@pytest.fixture()
def events(bus: EventBus) -> EventRecorder:
    return EventRecorder.attach(bus)


@pytest.fixture()
def sleeper() -> RecordingSleeper:
    return RecordingSleeper()


@pytest.fixture()
def remote(store: ProjectStore, bus: EventBus, sleeper: RecordingSleeper) -> TaskRemote:
    return TaskRemote(store, bus, load_delay=1.5, status_delay=2.5, sleep=sleeper)


@pytest.fixture()
def project(store: ProjectStore, now: datetime) -> Project:
    """Three tasks due in -2, +2 and +15 days: pending, inProgress, completed."""
    p = store.create_project(1, "Project Alpha")
    store.add_task(p, TaskDraft("overdue", TaskStatus.PENDING, now - days(2)))
    store.add_task(p, TaskDraft("soon", TaskStatus.IN_PROGRESS, now + days(2)))
    store.add_task(p, TaskDraft("later", TaskStatus.COMPLETED, now + days(15)))
    return p
