"""SQLite file location, per-thread connections and schema setup."""

from __future__ import annotations

import os
import sqlite3
import threading
from typing import Dict, Optional

_DB_NAME = "modeltrainer.db"

# Tests point storage elsewhere with _DB_PATH_OVERRIDE["path"] = <file>
_DB_PATH_OVERRIDE: dict = {}

_local = threading.local()

_SCHEMA = (
    """
    CREATE TABLE IF NOT EXISTS settings (
        key TEXT PRIMARY KEY,
        value TEXT NOT NULL,
        updated_at TEXT DEFAULT (datetime('now'))
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS app_logs (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        timestamp TEXT DEFAULT (datetime('now')),
        level TEXT NOT NULL,
        logger TEXT,
        message TEXT NOT NULL,
        module TEXT,
        func_name TEXT,
        line_no INTEGER,
        exc_info TEXT
    )
    """,
    "CREATE INDEX IF NOT EXISTS idx_app_logs_timestamp ON app_logs(timestamp)",
    "CREATE INDEX IF NOT EXISTS idx_app_logs_level ON app_logs(level)",
)


def get_db_path(project_root: Optional[str] = None) -> str:
    if "path" in _DB_PATH_OVERRIDE:
        return _DB_PATH_OVERRIDE["path"]
    root = project_root or os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "..")
    return os.path.join(root, _DB_NAME)


def _connections() -> Dict[str, sqlite3.Connection]:
    if not hasattr(_local, "connections"):
        _local.connections = {}
    return _local.connections


def get_connection(db_path: Optional[str] = None) -> sqlite3.Connection:
    """Return this thread's connection to ``db_path``, opening it on first use."""
    path = os.path.abspath(db_path or get_db_path())
    conns = _connections()
    if path not in conns:
        conn = sqlite3.connect(path, check_same_thread=False)
        conn.row_factory = sqlite3.Row
        conns[path] = conn
    return conns[path]


def close_all_connections() -> None:
    conns = _connections()
    for conn in conns.values():
        try:
            conn.close()
        except sqlite3.Error:
            pass
    conns.clear()


def init_db(db_path: Optional[str] = None) -> None:
    """Create the settings and log tables when missing. Idempotent."""
    conn = get_connection(db_path)
    for statement in _SCHEMA:
        conn.execute(statement)
    conn.commit()
