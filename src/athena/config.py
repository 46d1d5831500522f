# src/athena/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing is read from disk except the optional .env file.
- Tests build their own settings and never touch this module's instance.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "ATHENA"

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None or v.strip() == "" else v.strip()


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw.strip()).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_to_file: bool
    log_dir: Path

    # ---- Save file ----
    data_dir: Path
    save_filename: str
    save_path: Path

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "Athena")
        log_level = _env(_k("LOG_LEVEL"), "WARNING").upper()
        log_to_file = _env_bool(_k("LOG_TO_FILE"), True)
        log_dir = _env_path(_k("LOG_DIR"), Path(".local/athena"))

        data_dir = _env_path(_k("DATA_DIR"), Path("data"))
        save_filename = _env(_k("SAVE_FILENAME"), "athena.txt")
        # An explicit save path wins over data_dir + save_filename.
        save_path = _env_path(_k("SAVE_PATH"), data_dir / save_filename)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_to_file=log_to_file,
            log_dir=log_dir,
            data_dir=data_dir,
            save_filename=save_filename,
            save_path=save_path,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
