# src/tasktrack/tasks/task_events.py

from __future__ import annotations

"""
Task notification bus.

Two channels:
- task-updated:   payload TaskUpdated(task_id, new_status)
- task-completed: payload is the task id (int)

Subscribers run synchronously, in registration order, inside publish().
Nothing is buffered: a subscriber only sees events published after it
registered.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from ..core.ports import EventHandler, Unsubscribe
from .task_models import TaskStatus

logger = logging.getLogger(__name__)

TASK_UPDATED = "task-updated"
TASK_COMPLETED = "task-completed"

CHANNELS: tuple[str, ...] = (TASK_UPDATED, TASK_COMPLETED)


@dataclass(slots=True, frozen=True)
class TaskUpdated:
    task_id: int
    new_status: TaskStatus


class EventBus:
    def __init__(self) -> None:
        self._subscribers: dict[str, list[EventHandler]] = {ch: [] for ch in CHANNELS}

    def _handlers(self, channel: str) -> list[EventHandler]:
        try:
            return self._subscribers[channel]
        except KeyError:
            raise ValueError(f"unknown channel: {channel!r}") from None

    def subscribe(self, channel: str, handler: EventHandler) -> Unsubscribe:
        handlers = self._handlers(channel)
        handlers.append(handler)

        def unsubscribe() -> None:
            if handler in handlers:
                handlers.remove(handler)

        return unsubscribe

    def on_task_updated(self, handler: Callable[[TaskUpdated], None]) -> Unsubscribe:
        return self.subscribe(TASK_UPDATED, handler)

    def on_task_completed(self, handler: Callable[[int], None]) -> Unsubscribe:
        return self.subscribe(TASK_COMPLETED, handler)

    def subscriber_count(self, channel: str) -> int:
        return len(self._handlers(channel))

    def publish(self, channel: str, payload: Any) -> int:
        """
        Deliver payload to every current subscriber of channel.

        A failing subscriber is logged and skipped; the rest still run.
        Returns the number of subscribers invoked.
        """
        # Snapshot so a handler that unsubscribes does not shift the iteration.
        handlers = list(self._handlers(channel))
        logger.debug("publish channel=%s payload=%r subscribers=%d", channel, payload, len(handlers))

        for handler in handlers:
            try:
                handler(payload)
            except Exception:
                logger.exception("Subscriber failed channel=%s handler=%r", channel, handler)

        return len(handlers)
