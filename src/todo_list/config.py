# src/todo_list/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- With nothing configured the app behaves like the classic fixed-path tool
  (tasks in ./save.csv next to where it is started).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TODO"

DEFAULT_DATA_PATH = Path("./save.csv")
DEFAULT_LOG_DIR = Path(".local/todo")


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


# Real environment wins over .env values.
load_dotenv(override=False)


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_dir: Path

    # ---- Storage ----
    data_path: Path

    # ---- Terminal ----
    clear_screen: bool

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "todo").strip() or "todo"
        log_level = _env(_k("LOG_LEVEL"), "ERROR").strip().upper() or "ERROR"

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_dir=_env_path(_k("LOG_DIR"), DEFAULT_LOG_DIR),
            data_path=_env_path(_k("DATA_PATH"), DEFAULT_DATA_PATH),
            clear_screen=_env_bool(_k("CLEAR_SCREEN"), True),
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
