# src/todo_list/tasks/operations.py

"""
The five menu operations (add/view/mark/edit/delete).

Each one takes the session AppState, talks to the user through state.console
and reads/mutates state.task_store. Aborting (empty title, 0 at the task
number prompt, anything but "y" at the delete confirmation) is a normal
outcome: nothing is changed and a short message is printed.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from ..core.state import AppState
from .dates import read_date
from .task_models import Task

logger = logging.getLogger(__name__)

ABORT_MESSAGE = "Abort task."
DETAILS_HEADER = "Enter task details (Empty to abort operation): "


def select_task_position(state: AppState, action: str) -> int | None:
    """
    Ask for a 1-based task number; return the zero-based position or None on abort.

    Loops until the user enters 0 or a number in [1, len(store)], so with an
    empty list the only way out is 0.
    """
    console = state.console
    prompt = f"Enter task number to {action} (0 to abort operation): "

    while True:
        raw = console.read_line(prompt).strip()
        try:
            number = int(raw)
        except ValueError:
            console.write("What you've entered is not a number.")
            continue

        if number == 0:
            console.write(ABORT_MESSAGE)
            return None

        if 1 <= number <= len(state.task_store):
            return number - 1

        console.write("Task number is out of range.")


def add_task(state: AppState) -> None:
    console = state.console
    console.write(DETAILS_HEADER)

    title = console.read_line("Title: ")
    if not title:
        console.write(ABORT_MESSAGE)
        return

    description = console.read_line("Description: ")
    due_date = read_date(console, "Due Date (DD/MM/YYYY): ")

    state.task_store.add_task(Task(title=title, description=description, due_date=due_date))
    console.write("Task added successfully")


def view_tasks(state: AppState) -> None:
    console = state.console
    console.write("All Tasks")

    if state.task_store.is_empty():
        console.write()
        console.write("No tasks yet.")
        return

    for number, task in enumerate(state.task_store, start=1):
        console.write()
        console.write(f"{number:<3d}Title: {task.title}")
        console.write(f"   Desc: {task.description}")
        console.write(f"   Due Date: {task.due_date}")
        console.write(f"   Completed: {'Yes' if task.completed else 'No'}")


def mark_task(state: AppState) -> None:
    position = select_task_position(state, "mark")
    if position is None:
        return

    task = state.task_store.get_task(position)
    if task.completed:
        state.console.write("Task is already marked as completed.")
        return

    state.task_store.update_task(position, replace(task, completed=True))
    state.console.write("Task marked as completed.")


def edit_task(state: AppState) -> None:
    """
    Replace the selected task's title, description and due date.

    Nothing is written to the store until every field has been collected, so
    aborting on the title leaves the task untouched. The completion flag is kept.
    """
    position = select_task_position(state, "edit")
    if position is None:
        return

    console = state.console
    old = state.task_store.get_task(position)
    console.write(DETAILS_HEADER)

    title = console.read_line(f"Title (was {old.title}): ")
    if not title:
        console.write(ABORT_MESSAGE)
        return

    description = console.read_line(f"Description (was {old.description}): ")
    due_date = read_date(console, f"Due Date (DD/MM/YYYY, was {old.due_date}): ")

    state.task_store.update_task(
        position, replace(old, title=title, description=description, due_date=due_date)
    )
    console.write("Task edited successfully")


def delete_task(state: AppState) -> None:
    position = select_task_position(state, "delete")
    if position is None:
        return

    console = state.console
    task = state.task_store.get_task(position)
    answer = console.read_line(f'Confirm to delete "{task.title}"? [y/n]: ').strip()

    # Only the first character counts ("yes" confirms too).
    if answer[:1] in ("y", "Y"):
        state.task_store.remove_task(position)
        console.write("Task deleted successfully.")
    else:
        logger.debug("Delete cancelled position=%d answer=%r", position, answer)
        console.write("Delete operation cancelled.")
