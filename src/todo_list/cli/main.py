# src/todo_list/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState (loading the saved tasks), then runs the
interactive menu in the main thread until the user picks "Exit".
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state
from ..cli.menu import run_menu_loop
from ..config import get_settings
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> int:
    settings = get_settings()

    # choose console log level from settings.log_level
    level_name = str(getattr(settings, "log_level", "ERROR")).upper()
    console_level = getattr(logging, level_name, logging.ERROR)
    if not isinstance(console_level, int):
        console_level = logging.ERROR

    log_file = setup_logging(log_dir=settings.log_dir, console_level=console_level)
    logger.info("Starting %s (data=%s, log=%s)...", settings.app_name, settings.data_path, log_file)

    state = create_initial_state(settings=settings)

    try:
        status = run_menu_loop(state)
    except EOFError:
        logger.info("Console EOF received, exiting without saving.")
        print()
        return 1
    except KeyboardInterrupt:
        logger.info("Console KeyboardInterrupt, exiting without saving.")
        print()
        return 1

    logger.info("Bye.")
    return status


if __name__ == "__main__":
    raise SystemExit(main())
