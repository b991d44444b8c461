"""
Environment-driven configuration.

Values are read lazily through these helpers so tests can patch the
environment without reloading modules.
"""

from __future__ import annotations

import os

DEFAULT_TRELLO_BASE_URL = "https://api.trello.com/1"


def env_str(name: str, default: str = "") -> str:
    return os.environ.get(name, "").strip() or default


def env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def env_float(name: str, default: float | None) -> float | None:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def trello_base_url() -> str:
    return env_str("TRELLO_BASE_URL", DEFAULT_TRELLO_BASE_URL).rstrip("/")


def trello_timeout_s() -> float | None:
    # Unset means no client-side timeout.
    return env_float("TRELLO_TIMEOUT_S", None)


def api_key() -> str:
    """
    Bearer key for the whole API. Empty disables auth.
    """
    return env_str("API_KEY")


def log_level() -> str:
    return env_str("LOG_LEVEL", "INFO").upper()


def cors_origins() -> list[str]:
    raw = env_str("CORS_ORIGINS", "*")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]
