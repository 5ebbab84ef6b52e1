# src/tasktrack/tasks/task_remote.py

from __future__ import annotations

"""
Simulated remote calls.

Two operations model a slow backend:
- load_project_detail: resolve a project by id after load_delay seconds
- set_status:          validate and apply a status transition after status_delay seconds

Each call is an independent attempt. Validation runs after the delay, against
whatever state the store holds at that moment, and there is no locking between
concurrent calls: of two identical in-flight transitions, the one validated
first wins and the other is rejected as "already has the status".

The *_detail / update_* wrappers log a rejection and re-raise it as
OperationFailedError; nothing is retried.
"""

import asyncio
import logging

from ..core.errors import (
    InvalidTransitionError,
    NotFoundError,
    OperationFailedError,
    TaskTrackerError,
    TransportFailureError,
)
from ..core.ports import EventPublisher, Sleeper, TransportFailureHook
from .task_events import TASK_COMPLETED, TASK_UPDATED, TaskUpdated
from .task_models import Project, Task, TaskStatus
from .task_store import ProjectStore

logger = logging.getLogger(__name__)


def _never_fails() -> bool:
    return False


class TaskRemote:
    def __init__(
        self,
        store: ProjectStore,
        bus: EventPublisher,
        *,
        load_delay: float = 1.5,
        status_delay: float = 2.5,
        sleep: Sleeper = asyncio.sleep,
        transport_failure: TransportFailureHook | None = None,
    ) -> None:
        self._store = store
        self._bus = bus
        self._load_delay = max(0.0, float(load_delay))
        self._status_delay = max(0.0, float(status_delay))
        self._sleep = sleep
        self._transport_failure = transport_failure or _never_fails

    # ---- project detail ----

    async def load_project_detail(self, project_id: int) -> Project:
        await self._sleep(self._load_delay)

        project = self._store.find_project(project_id)
        if self._transport_failure():
            raise TransportFailureError(f"Error getting data from {project_id}")
        if project is None:
            raise NotFoundError(f"project with ID: {project_id} not found")
        return project

    async def get_project_detail(self, project_id: int) -> Project:
        try:
            return await self.load_project_detail(project_id)
        except TaskTrackerError as e:
            logger.warning("Loading project %s failed: %s", project_id, e)
            raise OperationFailedError(str(e)) from e

    # ---- status updates ----

    async def set_status(
        self, project: Project, task_id: int, new_status: TaskStatus | str
    ) -> Task:
        """
        Apply new_status to the task after the simulated delay.

        Rejections, checked in this order:
        - NotFoundError:          no task with task_id in the project
        - TransportFailureError:  the injected failure hook fired
        - InvalidTransitionError: the task already has new_status

        On success the status is stored first, then exactly one event goes out:
        task-completed (payload: task id) for COMPLETED, otherwise
        task-updated (payload: TaskUpdated).
        """
        status = TaskStatus.parse(new_status)

        await self._sleep(self._status_delay)

        task = self._store.find_task(project, task_id)
        if task is None:
            raise NotFoundError(f"task {task_id} not found in project {project.name} id: {project.id}")
        if self._transport_failure():
            raise TransportFailureError(f"Error getting data for taskId {task_id}")
        if task.status == status:
            raise InvalidTransitionError(f"task {task_id} already has the status {status.value}")

        previous = task.status
        task.status = status
        logger.info(
            "Task %s in project %s: %s -> %s", task_id, project.id, previous.value, status.value
        )

        if status == TaskStatus.COMPLETED:
            self._bus.publish(TASK_COMPLETED, task_id)
        else:
            self._bus.publish(TASK_UPDATED, TaskUpdated(task_id=task_id, new_status=status))
        return task

    async def update_status_task(
        self, project: Project, task_id: int, new_status: TaskStatus | str
    ) -> Task:
        try:
            return await self.set_status(project, task_id, new_status)
        except TaskTrackerError as e:
            logger.warning("Status update rejected: %s", e)
            raise OperationFailedError(str(e)) from e
