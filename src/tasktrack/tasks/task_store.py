# src/tasktrack/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..core.errors import DuplicateProjectError
from .task_models import Project, Task, TaskDraft

logger = logging.getLogger(__name__)


class ProjectStore:
    """
    In-memory project registry.

    - projects are keyed by id and kept in creation order
    - task ids are assigned per project as len(tasks) + 1 (append-only)
    - there is no delete operation

    Not thread-safe: all access is expected from one event loop.
    """

    def __init__(self) -> None:
        self._projects: dict[int, Project] = {}

    # ---- projects ----

    def create_project(
        self,
        project_id: int,
        name: str,
        initial_tasks: Iterable[Task] | None = None,
    ) -> Project:
        pid = int(project_id)
        if pid in self._projects:
            raise DuplicateProjectError(f"project with ID: {pid} already exists")

        tasks = list(initial_tasks or [])
        ids = [t.id for t in tasks]
        if ids != list(range(1, len(tasks) + 1)):
            raise ValueError(f"initial task ids must be 1..{len(tasks)} in order, got {ids}")

        project = Project(id=pid, name=name, tasks=tasks)
        self._projects[project.id] = project
        logger.debug(
            "Project created id=%s name=%r tasks=%d", project.id, project.name, len(project.tasks)
        )
        return project

    def find_project(self, project_id: int) -> Project | None:
        return self._projects.get(project_id)

    def list_projects(self) -> list[Project]:
        return list(self._projects.values())

    def count_projects(self) -> int:
        return len(self._projects)

    # ---- tasks ----

    def add_task(self, project: Project, draft: TaskDraft) -> Task:
        """Append a task to the project; its id follows the current task count."""
        task = Task(
            id=len(project.tasks) + 1,
            description=draft.description,
            status=draft.status,
            limit_date=draft.limit_date,
        )
        project.tasks.append(task)
        logger.debug(
            "Task added project=%s id=%s status=%s limit_date=%s",
            project.id,
            task.id,
            task.status.value,
            task.limit_date.isoformat(),
        )
        return task

    @staticmethod
    def find_task(project: Project, task_id: int) -> Task | None:
        return next((t for t in project.tasks if t.id == task_id), None)
