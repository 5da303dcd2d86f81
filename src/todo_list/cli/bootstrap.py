# src/todo_list/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- loads the saved task list into a TaskStore,
- wires the store and a console into AppState,
- writes the task list back on exit.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..config import get_settings
from ..connectors.console_connector import StdConsole
from ..core.ports import Console
from ..core.state import AppState
from ..tasks.persistence import load_tasks, save_tasks
from ..tasks.task_models import Task
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def load_task_list(settings) -> list[Task]:
    """Tasks saved by the previous session (empty when there is nothing usable)."""
    return load_tasks(Path(settings.data_path))


def create_initial_state(*, settings=None, console: Console | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings and console injectable makes the app easy to test.
    If settings is None, falls back to get_settings(); if console is None, a
    StdConsole is used.
    """
    if settings is None:
        settings = get_settings()

    if console is None:
        console = StdConsole(clear_screen=bool(getattr(settings, "clear_screen", True)))

    return AppState(
        settings=settings,
        task_store=TaskStore(load_task_list(settings)),
        console=console,
    )


def save_task_list(state: AppState) -> bool:
    """Write the task list to settings.data_path. Returns False (and logs) on failure."""
    path = Path(state.settings.data_path)  # type: ignore[attr-defined]
    try:
        save_tasks(path, state.task_store)
    except (OSError, UnicodeError):
        logger.exception("Failed to save tasks to %s", path)
        return False
    return True
