# src/todo_list/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Task:
    """
    One to-do entry.

    Notes:
    - title non-emptiness is checked by the add/edit operations, not here
    - due_date is kept as canonical "D/M/YYYY" text (see tasks.dates)
    """

    title: str
    description: str
    due_date: str
    completed: bool = False
