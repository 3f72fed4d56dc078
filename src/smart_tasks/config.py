# src/smart_tasks/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

- One Settings object for the whole app.
- Nothing is required at import time; every value has a default.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "SMART_TASKS"

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


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

    # ---- Local data (log file only; tasks are never persisted) ----
    data_dir: Path

    # ---- Behaviour ----
    seed_demo_tasks: bool
    notifications_enabled: bool

    # ---- Rendering ----
    description_preview_chars: int

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "smart-tasks").strip() or "smart-tasks"
        log_level = _env(_k("LOG_LEVEL"), "INFO")

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/smart-tasks"))

        seed_demo_tasks = _env_bool(_k("SEED_DEMO_TASKS"), True)
        notifications_enabled = _env_bool(_k("NOTIFICATIONS_ENABLED"), True)

        # A non-positive clamp would hide every description.
        description_preview_chars = max(
            16, _env_int(_k("DESCRIPTION_PREVIEW_CHARS"), 120)
        )

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            seed_demo_tasks=seed_demo_tasks,
            notifications_enabled=notifications_enabled,
            description_preview_chars=description_preview_chars,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
