"""
Environment-driven settings for the Notes UI.

Every setting has a sensible default so the app runs with no environment at
all. Values are read on each call so tests can monkeypatch the environment.
"""

from __future__ import annotations

import os
from typing import List

DEFAULT_CORS_ORIGINS = "http://localhost:3000"
DEFAULT_SESSION_COOKIE = "notes_session"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_MAX_SESSIONS = 1000


def get_cors_origins() -> List[str]:
    """Origins allowed to call the JSON API, from NOTES_CORS_ORIGINS (comma separated)."""
    raw = os.getenv("NOTES_CORS_ORIGINS", DEFAULT_CORS_ORIGINS)
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def get_session_cookie_name() -> str:
    return os.getenv("NOTES_SESSION_COOKIE", DEFAULT_SESSION_COOKIE)


def get_log_level() -> str:
    return os.getenv("NOTES_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()


def seed_enabled() -> bool:
    """Whether new sessions start with the two demo notes (NOTES_SEED, default on)."""
    return os.getenv("NOTES_SEED", "1").strip().lower() not in ("0", "false", "no", "off")


def get_max_sessions() -> int:
    """How many sessions are kept in memory (NOTES_MAX_SESSIONS); least recently used go first."""
    return int(os.getenv("NOTES_MAX_SESSIONS", str(DEFAULT_MAX_SESSIONS)))
