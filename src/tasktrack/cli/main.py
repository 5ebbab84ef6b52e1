# src/tasktrack/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, seeds the demo projects, subscribes the
console notifier to the event bus, then runs the console REPL.
"""

from __future__ import annotations

import logging
from datetime import datetime

from ..cli.bootstrap import create_initial_state, seed_demo_projects
from ..cli.commands import registry as command_registry
from ..cli.notifier import attach_console_notifier
from ..config import get_settings
from ..core.state import AppState
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}", flush=True)


def run_console_loop(state: AppState) -> None:
    logger.info("Console started (projects=%d).", state.store.count_projects())
    _print_ts("[CONSOLE] Use /help for commands. Use /exit to quit.\n")

    while True:
        try:
            line = input(">>> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not line:
            continue

        if line.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        try:
            reply = command_registry.handle(state, line)
        except Exception:
            logger.exception("Command handler crashed.")
            reply = "Internal error while handling a command."

        if reply is None:
            reply = "Commands start with '/'. Use /help to list them."
        _print_ts(reply)

    logger.info("Console finished.")


def main() -> None:
    settings = get_settings()

    level_name = str(settings.log_level).upper()
    console_level = getattr(logging, level_name, logging.INFO)
    setup_logging(log_dir=settings.data_dir, console_level=console_level)

    logger.info("Starting %s...", settings.app_name)

    state = create_initial_state(settings=settings)
    if settings.seed_demo:
        seed_demo_projects(state.store, now=state.clock())

    detach = attach_console_notifier(state.bus, _print_ts)
    try:
        run_console_loop(state)
    finally:
        detach()
        logger.info("Bye.")


if __name__ == "__main__":
    main()
