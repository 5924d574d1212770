from __future__ import annotations

import os
from dataclasses import dataclass


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    # Backing file for the demo entry point
    db_path: str

    # Logging
    log_level: str
    debug: bool


def get_settings() -> Settings:
    db_path = os.getenv("FILEDB_PATH", "test.data").strip() or "test.data"

    debug = _env_bool("FILEDB_DEBUG", False)
    # FILEDB_DEBUG wins over an explicit level.
    log_level = "DEBUG" if debug else os.getenv("FILEDB_LOG_LEVEL", "INFO").strip().upper()

    return Settings(
        db_path=db_path,
        log_level=log_level,
        debug=debug,
    )
