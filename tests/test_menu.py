# tests/test_menu.py

from __future__ import annotations

from pathlib import Path

import pytest

from todo_list.cli.menu import (
    CHOICE_PROMPT,
    CONTINUE_PROMPT,
    EXIT_PROMPT,
    FAREWELL,
    INVALID_CHOICE_PROMPT,
    MenuRegistry,
    registry,
    run_menu_loop,
)
from todo_list.core.state import AppState
from todo_list.tasks.persistence import load_tasks
from todo_list.tasks.task_models import Task


def test_menu_lists_six_options_in_order() -> None:
    assert registry.build_menu().splitlines() == [
        "-To Do List-",
        "1. Add Task",
        "2. View Tasks",
        "3. Mark Task as Completed",
        "4. Edit Task",
        "5. Delete Task",
        "6. Exit",
    ]


def test_registry_rejects_duplicate_and_exit_keys() -> None:
    menu = MenuRegistry()
    menu.register("1", "One", lambda state: None)
    with pytest.raises(ValueError):
        menu.register("1", "Again", lambda state: None)
    with pytest.raises(ValueError):
        menu.register("6", "Not exit", lambda state: None)


def test_full_session_add_view_mark_save_reload(state: AppState) -> None:
    state.console.feed(
        "1", "Buy milk", "2%", "5/3/2024", "",  # add + pause
        "2", "",  # view
        "3", "1", "",  # mark
        "2", "",  # view
        "6", "",  # exit
    )

    assert run_menu_loop(state) == 0

    lines = state.console.lines
    first_no = lines.index("   Completed: No")
    first_yes = lines.index("   Completed: Yes")
    assert first_no < lines.index("Task marked as completed.") < first_yes
    assert lines[-1] == FAREWELL
    assert state.console.prompts[-1] == EXIT_PROMPT

    reloaded = load_tasks(Path(state.settings.data_path))
    assert reloaded == [Task(title="Buy milk", description="2%", due_date="5/3/2024", completed=True)]


def test_invalid_choices_reprompt_without_redrawing(state: AppState) -> None:
    state.console.feed("9", "", "abc", "0", "2", "", "6", "")
    run_menu_loop(state)

    prompts = state.console.prompts
    assert prompts[:5] == [
        CHOICE_PROMPT,
        INVALID_CHOICE_PROMPT,
        INVALID_CHOICE_PROMPT,
        INVALID_CHOICE_PROMPT,
        INVALID_CHOICE_PROMPT,
    ]
    assert prompts[5] == CONTINUE_PROMPT
    # Menu drawn once before the view and once after it.
    assert state.console.lines.count("-To Do List-") == 2


def test_only_first_character_of_choice_counts(state: AppState) -> None:
    state.console.feed("2 please", "", "6xyz", "")
    assert run_menu_loop(state) == 0
    assert "All Tasks" in state.console.lines


def test_operations_pause_and_clear_between_screens(state: AppState) -> None:
    state.console.feed("2", "", "6", "")
    run_menu_loop(state)

    # start, after choice, after pause, after exit choice, after exit prompt
    assert state.console.clears == 5
    assert state.console.prompts.count(CONTINUE_PROMPT) == 1


def test_nothing_saved_without_exit(state: AppState) -> None:
    state.console.feed("1", "Buy milk", "", "1/1/2024", "")
    with pytest.raises(EOFError):
        run_menu_loop(state)

    assert not Path(state.settings.data_path).exists()


def test_crashing_handler_is_reported_and_loop_continues(state: AppState) -> None:
    def boom(_state: AppState) -> None:
        raise RuntimeError("boom")

    menu = MenuRegistry()
    menu.register("1", "Explode", boom)
    state.console.feed("1", "", "6", "")

    assert run_menu_loop(state, menu) == 0
    assert "Internal error while handling the command." in state.console.lines


def test_save_failure_warns_but_still_exits(state: AppState, tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", "utf-8")
    state.settings.data_path = blocker / "save.csv"

    state.console.feed("6", "")
    assert run_menu_loop(state) == 0

    assert any(line.startswith("Warning: could not save tasks") for line in state.console.lines)
    assert state.console.lines[-1] == FAREWELL


def test_unencodable_task_warns_on_exit_instead_of_crashing(state: AppState) -> None:
    state.task_store.add_task(Task(title="lone \ud800 surrogate", description="", due_date="1/1/2024"))
    state.console.feed("6", "")

    assert run_menu_loop(state) == 0
    assert any(line.startswith("Warning: could not save tasks") for line in state.console.lines)
