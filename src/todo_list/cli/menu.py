# src/todo_list/cli/menu.py

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from ..core.state import AppState
from ..tasks.operations import add_task, delete_task, edit_task, mark_task, view_tasks
from .bootstrap import save_task_list

MenuHandler = Callable[[AppState], None]

logger = logging.getLogger(__name__)

MENU_TITLE = "-To Do List-"
EXIT_KEY = "6"
EXIT_LABEL = "Exit"

CHOICE_PROMPT = "Enter a number 1-6: "
INVALID_CHOICE_PROMPT = "Invalid input. Please enter a number within range 1-6: "
CONTINUE_PROMPT = "\nPress enter to continue ..."
EXIT_PROMPT = "Press enter to exit ..."
FAREWELL = "Thanks for using the application, have a nice day!"


@dataclass(frozen=True, slots=True)
class MenuEntry:
    key: str
    label: str
    handler: MenuHandler


class MenuRegistry:
    """Numbered menu entries ("1" -> Add Task, ...) in display order."""

    def __init__(self) -> None:
        self._entries: dict[str, MenuEntry] = {}

    def register(self, key: str, label: str, handler: MenuHandler) -> None:
        if key in self._entries or key == EXIT_KEY:
            raise ValueError(f"menu key already taken: {key!r}")
        self._entries[key] = MenuEntry(key=key, label=label, handler=handler)

    def get(self, key: str) -> MenuEntry | None:
        return self._entries.get(key)

    def is_choice(self, key: str) -> bool:
        return key in self._entries or key == EXIT_KEY

    def build_menu(self) -> str:
        lines = [MENU_TITLE]
        for entry in self._entries.values():
            lines.append(f"{entry.key}. {entry.label}")
        lines.append(f"{EXIT_KEY}. {EXIT_LABEL}")
        lines.append("")
        return "\n".join(lines)


registry = MenuRegistry()
registry.register("1", "Add Task", add_task)
registry.register("2", "View Tasks", view_tasks)
registry.register("3", "Mark Task as Completed", mark_task)
registry.register("4", "Edit Task", edit_task)
registry.register("5", "Delete Task", delete_task)


def read_choice(state: AppState, menu: MenuRegistry) -> str:
    """
    Read a menu choice: the first non-blank character of the line.

    The rest of the line is ignored. Re-asks (without redrawing the menu)
    until the character is a valid menu key. A blank line counts as invalid
    input and gets the "Invalid input" prompt; it is not silently skipped.
    """
    prompt = CHOICE_PROMPT
    while True:
        line = state.console.read_line(prompt).strip()
        choice = line[:1]
        if choice and menu.is_choice(choice):
            return choice
        prompt = INVALID_CHOICE_PROMPT


def _exit(state: AppState) -> int:
    if not save_task_list(state):
        path = getattr(state.settings, "data_path", "?")
        state.console.write(f"Warning: could not save tasks to {path} (details in the log).")

    state.console.write(FAREWELL)
    state.console.read_line(EXIT_PROMPT)
    state.console.clear()
    logger.info("Exit requested, tasks=%d", len(state.task_store))
    return 0


def run_menu_loop(state: AppState, menu: MenuRegistry | None = None) -> int:
    """
    Menu -> operation -> pause, until "6" is chosen. Returns the exit status.

    The task list is only saved on that "6" path.
    """
    menu = menu or registry
    console = state.console
    logger.info("Menu loop started (tasks=%d).", len(state.task_store))

    console.clear()
    while True:
        console.write(menu.build_menu())
        choice = read_choice(state, menu)
        console.write()
        console.clear()

        if choice == EXIT_KEY:
            return _exit(state)

        entry = menu.get(choice)
        if entry is None:
            # is_choice() already filtered unknown keys
            continue

        logger.debug("Dispatching menu choice %s (%s)", entry.key, entry.label)
        try:
            entry.handler(state)
        except EOFError:
            raise
        except Exception:
            logger.exception("Menu handler crashed: %s", entry.label)
            console.write("Internal error while handling the command.")

        # Pause so the operation's output does not scroll away.
        console.read_line(CONTINUE_PROMPT)
        console.clear()
