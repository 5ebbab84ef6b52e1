# src/tasktrack/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..tasks.task_events import EventBus
from ..tasks.task_queries import utc_now
from ..tasks.task_remote import TaskRemote
from ..tasks.task_store import ProjectStore
from .ports import Clock

if TYPE_CHECKING:
    from ..config import Settings


@dataclass
class AppState:
    # Store Settings on the state for easy access in command handlers.
    settings: Settings

    store: ProjectStore
    bus: EventBus
    remote: TaskRemote

    clock: Clock = utc_now
