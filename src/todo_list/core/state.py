# src/todo_list/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_store import TaskStore
from .ports import Console


@dataclass
class AppState:
    """
    Session context passed explicitly to every task operation.

    settings is the Settings object (or any object with the same attributes, tests
    use a SimpleNamespace).
    """

    settings: object
    task_store: TaskStore
    console: Console
