# src/taskapp/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

- One Settings object for the whole app.
- Stores never read settings; the composition root passes paths to them.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASKAPP"

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


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

    # ---- Record files ----
    data_dir: Path
    users_path: Path
    tasks_path: Path
    logs_path: Path

    @staticmethod
    def from_env() -> Settings:
        app_name = _env(_k("APP_NAME"), "taskapp").strip() or "taskapp"
        log_level = _env(_k("LOG_LEVEL"), "INFO").strip().upper() or "INFO"

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/taskapp"))
        log_dir = _env_path(_k("LOG_DIR"), data_dir)
        users_path = _env_path(_k("USERS_PATH"), data_dir / "users.csv")
        tasks_path = _env_path(_k("TASKS_PATH"), data_dir / "tasks.csv")
        logs_path = _env_path(_k("LOGS_PATH"), data_dir / "logs.csv")

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_dir=log_dir,
            data_dir=data_dir,
            users_path=users_path,
            tasks_path=tasks_path,
            logs_path=logs_path,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
