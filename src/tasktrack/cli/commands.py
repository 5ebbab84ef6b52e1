# src/tasktrack/cli/commands.py

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

from ..core.errors import OperationFailedError
from ..core.state import AppState
from ..tasks.task_models import Project, Task, TaskStatus
from ..tasks.task_queries import (
    critical_tasks,
    overdue_tasks,
    project_summary,
    remaining_time,
    sort_tasks,
)

CommandHandler = Callable[[AppState, list[str]], str]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console (/help, /summary, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        return handler(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _format_task(task: Task) -> str:
    due = task.limit_date.astimezone().strftime("%Y-%m-%d %H:%M")
    return f"  #{task.id} [{task.status.value}] {task.description} (due {due})"


def _format_tasks(title: str, tasks: list[Task]) -> str:
    if not tasks:
        return f"{title}: none."
    return "\n".join([f"{title}:"] + [_format_task(t) for t in tasks])


def _resolve_project(state: AppState, args: list[str]) -> Project | str:
    """Return the project named by args[0], or an error message for the user."""
    if not args:
        return "Missing project id."
    try:
        project_id = int(args[0])
    except ValueError:
        return f"Project id must be a number, got {args[0]!r}."
    project = state.store.find_project(project_id)
    if project is None:
        return f"project with ID: {project_id} not found"
    return project


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_projects(state: AppState, args: list[str]) -> str:
    projects = state.store.list_projects()
    if not projects:
        return "No projects."
    lines = ["Projects:"]
    for p in projects:
        lines.append(f"  {p.id}: {p.name} ({len(p.tasks)} tasks)")
    return "\n".join(lines)


def cmd_show(state: AppState, args: list[str]) -> str:
    project = _resolve_project(state, args)
    if isinstance(project, str):
        return project
    return _format_tasks(f"Project {project.name} (id {project.id})", project.tasks)


def cmd_summary(state: AppState, args: list[str]) -> str:
    project = _resolve_project(state, args)
    if isinstance(project, str):
        return project
    return project_summary(project).text


def cmd_sort(state: AppState, args: list[str]) -> str:
    """
    /sort <project>        -> tasks by deadline, earliest first
    /sort <project> desc   -> latest first
    """
    project = _resolve_project(state, args)
    if isinstance(project, str):
        return project
    order = args[1].lower() if len(args) > 1 else "asc"
    if order not in ("asc", "desc"):
        return "Usage: /sort <project> [asc|desc]."
    return _format_tasks(f"Tasks of {project.name} by date ({order})", sort_tasks(project, order))


def cmd_remaining(state: AppState, args: list[str]) -> str:
    project = _resolve_project(state, args)
    if isinstance(project, str):
        return project
    days = remaining_time(project, now=state.clock())
    return f"Remaining time for not completed tasks of {project.name}: {days} days"


def cmd_critical(state: AppState, args: list[str]) -> str:
    project = _resolve_project(state, args)
    if isinstance(project, str):
        return project
    return _format_tasks("Critical tasks", critical_tasks(project, now=state.clock()))


def cmd_overdue(state: AppState, args: list[str]) -> str:
    project = _resolve_project(state, args)
    if isinstance(project, str):
        return project
    return _format_tasks("Overdue tasks", overdue_tasks(project, now=state.clock()))


def cmd_load(state: AppState, args: list[str]) -> str:
    """/load <project> -> fetch project detail through the simulated remote call."""
    if not args or not args[0].isdigit():
        return "Usage: /load <project id>."
    try:
        project = asyncio.run(state.remote.get_project_detail(int(args[0])))
    except OperationFailedError as e:
        return str(e)
    return _format_tasks(f"Project Details id: {project.id} ({project.name})", project.tasks)


def cmd_set(state: AppState, args: list[str]) -> str:
    """/set <project> <task> <status> -> change a task status through the simulated remote call."""
    usage = "Usage: /set <project id> <task id> <pending|inProgress|completed>."
    if len(args) != 3 or not args[1].isdigit():
        return usage
    project = _resolve_project(state, args)
    if isinstance(project, str):
        return project
    try:
        status = TaskStatus.parse(args[2])
    except ValueError:
        return usage

    try:
        task = asyncio.run(state.remote.update_status_task(project, int(args[1]), status))
    except OperationFailedError as e:
        return str(e)
    return f"Task {task.id} is now {task.status.value}."


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("projects", cmd_projects, help_text="List projects.", aliases=["ls"])
registry.register("show", cmd_show, help_text="Show the tasks of a project: /show <project>.")
registry.register("summary", cmd_summary, help_text="Status counts: /summary <project>.")
registry.register("sort", cmd_sort, help_text="Tasks by deadline: /sort <project> [asc|desc].")
registry.register("remaining", cmd_remaining, help_text="Days left on open tasks: /remaining <project>.")
registry.register("critical", cmd_critical, help_text="Open tasks due in 1-2 days: /critical <project>.")
registry.register("overdue", cmd_overdue, help_text="Open tasks past their deadline: /overdue <project>.")
registry.register("load", cmd_load, help_text="Simulated remote fetch: /load <project>.")
registry.register("set", cmd_set, help_text="Simulated status update: /set <project> <task> <status>.")
