"""
Environment-backed settings helpers.

Settings are read on demand from the process environment so tests (and
operators) can change them without reloading modules.
"""

from __future__ import annotations

import os

DEFAULT_PORT = 5000


def env_str(name: str, default: str = "") -> str:
    return os.environ.get(name, default).strip() or default


def env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def env_list(name: str, default: list[str] | None = None) -> list[str]:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return list(default or [])
    return [part.strip() for part in raw.split(",") if part.strip()]


def app_env() -> str:
    return env_str("APP_ENV", "development").lower()


def is_production() -> bool:
    return app_env() == "production"


def log_level() -> str:
    return env_str("LOG_LEVEL", "INFO").upper()


def port() -> int:
    return env_int("PORT", DEFAULT_PORT)


def cors_origins() -> list[str]:
    return env_list("CORS_ORIGINS", ["*"])
