"""Settings storage using SQLite.

Settings are stored as key-value pairs with JSON values.
"""

from __future__ import annotations

import json
from typing import Any, Optional

from .core import get_connection, init_db


BACKEND_URL_KEY = "backend.base_url"
ACTIVE_SESSION_KEY = "session.active_id"


def get_setting(key: str, default: Any = None, db_path: Optional[str] = None) -> Any:
    """Get a setting value by key.

    Args:
        key: Setting key (e.g., "backend.base_url", "session.active_id")
        default: Default value if key doesn't exist
        db_path: Optional database path

    Returns:
        The setting value (parsed from JSON) or default
    """
    init_db(db_path)
    conn = get_connection(db_path)
    cursor = conn.cursor()

    cursor.execute("SELECT value FROM settings WHERE key = ?", (key,))
    row = cursor.fetchone()

    if row is None:
        return default

    try:
        return json.loads(row["value"])
    except (json.JSONDecodeError, TypeError):
        return row["value"]


def set_setting(key: str, value: Any, db_path: Optional[str] = None) -> None:
    """Set a setting value.

    Args:
        key: Setting key
        value: Value to store (will be JSON-encoded)
        db_path: Optional database path
    """
    init_db(db_path)
    conn = get_connection(db_path)
    cursor = conn.cursor()

    json_value = json.dumps(value, ensure_ascii=False)

    cursor.execute("""
        INSERT INTO settings (key, value, updated_at)
        VALUES (?, ?, datetime('now'))
        ON CONFLICT(key) DO UPDATE SET
            value = excluded.value,
            updated_at = datetime('now')
    """, (key, json_value))

    conn.commit()


def delete_setting(key: str, db_path: Optional[str] = None) -> bool:
    """Delete a setting.

    Returns:
        True if setting was deleted, False if it didn't exist
    """
    init_db(db_path)
    conn = get_connection(db_path)
    cursor = conn.cursor()

    cursor.execute("DELETE FROM settings WHERE key = ?", (key,))
    conn.commit()

    return cursor.rowcount > 0


# Convenience functions for common settings

def get_backend_url(db_path: Optional[str] = None) -> str:
    """Get the stored training backend base URL ("" when unset)."""
    return get_setting(BACKEND_URL_KEY, "", db_path) or ""


def set_backend_url(url: str, db_path: Optional[str] = None) -> None:
    """Set the training backend base URL."""
    set_setting(BACKEND_URL_KEY, (url or "").strip(), db_path)


def get_active_session_id(db_path: Optional[str] = None) -> str:
    """Get the session id of the last prepared dataset ("" when unset)."""
    return get_setting(ACTIVE_SESSION_KEY, "", db_path) or ""


def set_active_session_id(session_id: str, db_path: Optional[str] = None) -> None:
    """Set the session id of the prepared dataset."""
    set_setting(ACTIVE_SESSION_KEY, (session_id or "").strip(), db_path)
