"""
Process configuration.

`Settings.from_env()` is called once at startup (see `api/main.py`) and the
resulting value is passed to whatever needs it. Nothing else reads the
environment.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field

DEFAULT_POOL_MIN_SIZE = 1
DEFAULT_POOL_MAX_SIZE = 5
DEFAULT_COMMAND_TIMEOUT = 30.0


def _env_str(name: str, default: str = "") -> str:
    return os.environ.get(name, "").strip() or default


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(name: str, default: float | None) -> float | None:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_list(name: str, default: tuple[str, ...]) -> tuple[str, ...]:
    raw = os.environ.get(name, "")
    items = tuple(item.strip() for item in raw.split(",") if item.strip())
    return items or default


@dataclass(frozen=True)
class Settings:
    database_url: str = ""
    db_pool_min_size: int = DEFAULT_POOL_MIN_SIZE
    db_pool_max_size: int = DEFAULT_POOL_MAX_SIZE
    db_command_timeout: float = DEFAULT_COMMAND_TIMEOUT
    # None waits for a free connection indefinitely.
    db_acquire_timeout: float | None = None
    log_level: str = "INFO"
    cors_origins: tuple[str, ...] = field(default=("*",))

    @classmethod
    def from_env(cls) -> Settings:
        return cls(
            database_url=_env_str("DATABASE_URL"),
            db_pool_min_size=_env_int("DB_POOL_MIN_SIZE", DEFAULT_POOL_MIN_SIZE),
            db_pool_max_size=_env_int("DB_POOL_MAX_SIZE", DEFAULT_POOL_MAX_SIZE),
            db_command_timeout=_env_float("DB_COMMAND_TIMEOUT", DEFAULT_COMMAND_TIMEOUT),
            db_acquire_timeout=_env_float("DB_ACQUIRE_TIMEOUT", None),
            log_level=_env_str("LOG_LEVEL", "INFO").upper(),
            cors_origins=_env_list("CORS_ORIGINS", ("*",)),
        )
