# src/todo_list/connectors/console_connector.py

from __future__ import annotations

import sys

# ESC[3J (scrollback), ESC[H (home), ESC[2J (screen), ESC[H (home)
CLEAR_SEQUENCE = "\033[3J\033[H\033[2J\033[H"


class StdConsole:
    """Console backed by stdin/stdout (input() and print())."""

    def __init__(self, *, clear_screen: bool = True) -> None:
        self.clear_screen = clear_screen

    def read_line(self, prompt: str = "") -> str:
        return input(prompt)

    def write(self, text: str = "") -> None:
        print(text)

    def clear(self) -> None:
        """Best-effort: only clears a real terminal, pipes and logs are left alone."""
        if not self.clear_screen:
            return
        if sys.stdout.isatty():
            print(CLEAR_SEQUENCE, end="", flush=True)
