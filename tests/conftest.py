# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_list.core.state import AppState
from todo_list.tasks.task_models import Task
from todo_list.tasks.task_store import TaskStore

from .fakes import FakeConsole


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment and any local .env.
    """
    return SimpleNamespace(
        app_name="todo-test",
        log_level="ERROR",
        log_dir=tmp_path / "logs",
        data_path=tmp_path / "save.csv",
        clear_screen=False,
    )


@pytest.fixture()
def console() -> FakeConsole:
    return FakeConsole()


@pytest.fixture()
def state(settings: SimpleNamespace, console: FakeConsole) -> AppState:
    """AppState with an empty in-memory store and the scripted console."""
    return AppState(settings=settings, task_store=TaskStore(), console=console)


@pytest.fixture()
def sample_tasks() -> list[Task]:
    return [
        Task(title="Buy milk", description="2%", due_date="5/3/2024"),
        Task(title="Pay rent", description="", due_date="1/4/2024", completed=True),
        Task(title="Call mom", description="Sunday", due_date="7/4/2024"),
    ]
