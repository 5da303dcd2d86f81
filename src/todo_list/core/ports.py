# src/todo_list/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the task operations and the menu loop.

Operations depend on a Console Protocol instead of input()/print() directly.
This keeps them testable with a scripted console and no real terminal.
"""

from typing import Protocol


class Console(Protocol):
    """Blocking line-oriented terminal I/O."""

    def read_line(self, prompt: str = "") -> str:
        """Show `prompt`, block until a line is entered and return it without the newline."""
        ...

    def write(self, text: str = "") -> None:
        """Print `text` followed by a newline."""
        ...

    def clear(self) -> None:
        """Clear the screen (may be a no-op)."""
        ...
