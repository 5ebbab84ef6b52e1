# tests/test_commands.py

from __future__ import annotations

from datetime import datetime

import pytest

from tasktrack.cli.bootstrap import create_initial_state, seed_demo_projects
from tasktrack.cli.commands import CommandRegistry, registry
from tasktrack.cli.notifier import attach_console_notifier
from tasktrack.config import Settings
from tasktrack.core.state import AppState
from tasktrack.tasks.task_models import TaskStatus


@pytest.fixture()
def state(settings: Settings, now: datetime) -> AppState:
    st = create_initial_state(settings=settings)
    st.clock = lambda: now
    seed_demo_projects(st.store, now=now)
    return st


def test_command_registry_routes_and_aliases(state: AppState) -> None:
    reg = CommandRegistry()
    called: list[list[str]] = []

    def handler(state, args):
        called.append(args)
        return "ok"

    reg.register("ping", handler, "ping", aliases=["p"])

    assert reg.handle(state, "/ping a b") == "ok"
    assert reg.handle(state, "/P c") == "ok"
    assert called == [["a", "b"], ["c"]]
    assert "/ping - ping" in reg.build_help()


def test_command_registry_unknown_and_non_command(state: AppState) -> None:
    reg = CommandRegistry()
    assert reg.handle(state, "hello") is None
    assert "Empty command" in (reg.handle(state, "/") or "")
    assert "Unknown command" in (reg.handle(state, "/nope") or "")


def test_projects_and_show(state: AppState) -> None:
    listing = registry.handle(state, "/projects") or ""
    assert "1: Project Alpha (10 tasks)" in listing
    assert "2: Project Beta (7 tasks)" in listing

    shown = registry.handle(state, "/show 2") or ""
    assert "#1 [inProgress] Task H" in shown


def test_summary_command(state: AppState) -> None:
    assert registry.handle(state, "/summary 1") == (
        "Summary of project Project Alpha:   pending: 4, in progress: 4, completed: 2"
    )


def test_project_lookup_errors(state: AppState) -> None:
    assert registry.handle(state, "/summary") == "Missing project id."
    assert "must be a number" in (registry.handle(state, "/summary x") or "")
    assert registry.handle(state, "/summary 4") == "project with ID: 4 not found"


def test_sort_command(state: AppState) -> None:
    asc = (registry.handle(state, "/sort 1") or "").splitlines()
    desc = (registry.handle(state, "/sort 1 desc") or "").splitlines()

    # -1 month is the earliest deadline, +1 month the latest
    assert "Task A" in asc[1]
    assert "Task B" in desc[1]
    assert "Usage" in (registry.handle(state, "/sort 1 up") or "")


def test_deadline_commands(state: AppState) -> None:
    # open tasks in the future: B (+1 month), D (+3), EG (+2), Fh (+1)
    remaining = registry.handle(state, "/remaining 1") or ""
    assert remaining.startswith("Remaining time for not completed tasks of Project Alpha:")

    critical = registry.handle(state, "/critical 1") or ""
    assert "Task EG" in critical
    assert "Task Fh" in critical
    assert "Task C" not in critical  # completed
    assert "Task D" not in critical  # 3 days out

    overdue = registry.handle(state, "/overdue 1") or ""
    for name in ("Task A", "Task E", "Task G", "Task GJ"):
        assert name in overdue


def test_load_command(state: AppState) -> None:
    assert "Project Details id: 1" in (registry.handle(state, "/load 1") or "")
    assert registry.handle(state, "/load 4") == "project with ID: 4 not found"
    assert "Usage" in (registry.handle(state, "/load") or "")


def test_set_command_updates_and_notifies(state: AppState) -> None:
    lines: list[str] = []
    detach = attach_console_notifier(state.bus, lines.append)

    assert registry.handle(state, "/set 1 1 completed") == "Task 1 is now completed."
    assert registry.handle(state, "/set 1 8 pending") == "Task 8 is now pending."
    assert registry.handle(state, "/set 1 21 completed") == (
        "task 21 not found in project Project Alpha id: 1"
    )
    assert registry.handle(state, "/set 1 10 pending") == "task 10 already has the status pending"

    assert lines == ["task 1 completed", "updated task 8 with status pending"]
    assert state.store.find_project(1).tasks[0].status == TaskStatus.COMPLETED

    detach()
    registry.handle(state, "/set 1 1 pending")
    assert len(lines) == 2


def test_set_command_usage(state: AppState) -> None:
    assert "Usage" in (registry.handle(state, "/set 1 1") or "")
    assert "Usage" in (registry.handle(state, "/set 1 1 done") or "")
