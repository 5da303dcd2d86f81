# src/todo_list/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from .task_models import Task

logger = logging.getLogger(__name__)


class TaskStore:
    """
    In-memory ordered task list.

    Tasks are addressed only by their zero-based position; removing a task
    shifts every later task down by one. Out-of-range positions raise
    IndexError like a plain list would.
    """

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = list(tasks or [])
        logger.debug("TaskStore ready total=%d", len(self._tasks))

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def is_empty(self) -> bool:
        return not self._tasks

    def list_tasks(self) -> list[Task]:
        """Snapshot of all tasks in display order."""
        return list(self._tasks)

    def add_task(self, task: Task) -> int:
        """Append a task; return its zero-based position."""
        self._tasks.append(task)
        logger.info("Task added position=%d title=%r", len(self._tasks) - 1, task.title)
        return len(self._tasks) - 1

    def get_task(self, position: int) -> Task:
        self._check_position(position)
        return self._tasks[position]

    def update_task(self, position: int, task: Task) -> None:
        """Replace the task at `position` wholesale."""
        self._check_position(position)
        self._tasks[position] = task
        logger.info("Task updated position=%d title=%r", position, task.title)

    def remove_task(self, position: int) -> Task:
        self._check_position(position)
        task = self._tasks.pop(position)
        logger.info("Task removed position=%d title=%r", position, task.title)
        return task

    def _check_position(self, position: int) -> None:
        # Negative positions would silently address from the end of a list.
        if not 0 <= position < len(self._tasks):
            raise IndexError(f"task position {position} out of range (size={len(self._tasks)})")
