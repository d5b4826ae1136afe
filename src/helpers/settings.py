"""Application settings helpers.

Backend URL and active session accessors over the settings table.
Uses SQLite database for storage; a few values can be overridden from the
environment.
"""

from __future__ import annotations

import os

from db import init_db
from db.settings import (
    delete_setting,
    get_backend_url,
    set_backend_url,
    get_active_session_id,
    set_active_session_id,
    ACTIVE_SESSION_KEY,
    BACKEND_URL_KEY,
)


DEFAULT_BACKEND_URL = "http://localhost:7860"

BACKEND_URL_ENV = "MODELTRAINER_BACKEND_URL"
SESSION_ID_ENV = "MODELTRAINER_SESSION_ID"


def load_backend_url() -> str:
    """Resolve the backend base URL: environment, then database, then default.

    Trailing slashes are stripped so endpoint paths can be appended directly.
    """
    env_value = (os.getenv(BACKEND_URL_ENV) or "").strip()
    if env_value:
        return env_value.rstrip("/")
    init_db()
    stored = (get_backend_url() or "").strip()
    return (stored or DEFAULT_BACKEND_URL).rstrip("/")


def save_backend_url(url: str) -> None:
    init_db()
    set_backend_url((url or "").strip().rstrip("/"))


def reset_backend_url() -> None:
    """Forget the stored URL so the default (or environment) value applies."""
    init_db()
    delete_setting(BACKEND_URL_KEY)


def load_active_session() -> str:
    """Return the active dataset session id ("" when there is none)."""
    env_value = (os.getenv(SESSION_ID_ENV) or "").strip()
    if env_value:
        return env_value
    init_db()
    return (get_active_session_id() or "").strip()


def save_active_session(session_id: str) -> None:
    init_db()
    set_active_session_id(session_id)


def clear_active_session() -> None:
    init_db()
    delete_setting(ACTIVE_SESSION_KEY)
