# src/todo_list/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path


class _ConsoleNoiseFilter(logging.Filter):
    """
    Keep the interactive menu readable:
    - allow todo_list logs (already gated by the handler level)
    - suppress Python warnings (captured as 'py.warnings') unless ERROR+
    - suppress third-party noise unless ERROR+
    """

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name

        if name.startswith("todo_list."):
            return True

        # py.warnings and third-party loggers
        return record.levelno >= logging.ERROR


LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

CONSOLE_HANDLER_NAME = "todo_list.console"
FILE_HANDLER_NAME = "todo_list.file"


def _replace_handler(root: logging.Logger, handler: logging.Handler) -> None:
    """Install `handler`, dropping a previous one with the same name (so repeat calls don't duplicate)."""
    for h in list(root.handlers):
        if h.get_name() == handler.get_name():
            root.removeHandler(h)
            h.close()
    root.addHandler(handler)


def setup_logging(
    *,
    log_dir: str | Path = ".local/todo",
    console_level: int = logging.ERROR,
    file_level: int = logging.DEBUG,
    log_name: str = "todo.log",
) -> Path:
    """
    Configure root logging and return the log file path.

    - stderr: quiet by default (ERROR) so log lines do not mix into the menu
    - <log_dir>/<log_name>: everything from file_level up, for debugging

    Only handlers installed by a previous call are replaced; anything else
    already attached to the root logger is left alone.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / log_name

    root = logging.getLogger()
    root.setLevel(min(console_level, file_level))

    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console = logging.StreamHandler(sys.stderr)
    console.set_name(CONSOLE_HANDLER_NAME)
    console.setLevel(console_level)
    console.setFormatter(fmt)
    console.addFilter(_ConsoleNoiseFilter())
    _replace_handler(root, console)

    file_handler = logging.FileHandler(str(log_file), encoding="utf-8")
    file_handler.set_name(FILE_HANDLER_NAME)
    file_handler.setLevel(file_level)
    file_handler.setFormatter(fmt)
    _replace_handler(root, file_handler)

    # warnings.warn(...) -> 'py.warnings' logger
    logging.captureWarnings(True)
    return log_file
