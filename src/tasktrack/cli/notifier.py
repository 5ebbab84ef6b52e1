# src/tasktrack/cli/notifier.py

from __future__ import annotations

from collections.abc import Callable

from ..core.ports import Unsubscribe
from ..tasks.task_events import EventBus, TaskUpdated


def attach_console_notifier(bus: EventBus, emit: Callable[[str], None]) -> Unsubscribe:
    """Render task events as console lines. Returns a callable that detaches both subscriptions."""

    def on_updated(event: TaskUpdated) -> None:
        emit(f"updated task {event.task_id} with status {event.new_status.value}")

    def on_completed(task_id: int) -> None:
        emit(f"task {task_id} completed")

    detach_updated = bus.on_task_updated(on_updated)
    detach_completed = bus.on_task_completed(on_completed)

    def detach() -> None:
        detach_updated()
        detach_completed()

    return detach
