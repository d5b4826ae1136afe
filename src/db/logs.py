"""Application log table: logging handler plus query/maintenance helpers."""

from __future__ import annotations

import logging
import traceback
from datetime import datetime
from typing import List, Optional

from db.core import get_connection, get_db_path, init_db


class DatabaseHandler(logging.Handler):
    """Logging handler that writes log records to the ``app_logs`` table."""

    def __init__(self, level: int = logging.NOTSET):
        super().__init__(level)
        self._initialized_path: Optional[str] = None

    def emit(self, record: logging.LogRecord) -> None:
        try:
            # Schema is checked once per database path
            path = get_db_path()
            if self._initialized_path != path:
                init_db()
                self._initialized_path = path

            exc_info = None
            if record.exc_info:
                exc_info = "".join(traceback.format_exception(*record.exc_info))

            conn = get_connection()
            conn.execute(
                """
                INSERT INTO app_logs (timestamp, level, logger, message, module, func_name, line_no, exc_info)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    datetime.fromtimestamp(record.created).isoformat(),
                    record.levelname,
                    record.name,
                    record.getMessage(),
                    record.module,
                    record.funcName,
                    record.lineno,
                    exc_info,
                ),
            )
            conn.commit()
        except Exception:
            self.handleError(record)


def get_logs(
    level: Optional[str] = None,
    logger: Optional[str] = None,
    limit: int = 100,
    offset: int = 0,
    db_path: Optional[str] = None,
) -> List[dict]:
    """Retrieve logs, newest first.

    Args:
        level: Filter by log level (e.g., "ERROR", "WARNING")
        logger: Filter by logger name (substring match)
        limit: Maximum number of logs to return
        offset: Offset for pagination
    """
    init_db(db_path)
    conn = get_connection(db_path)

    query = "SELECT * FROM app_logs WHERE 1=1"
    params: list = []

    if level:
        query += " AND level = ?"
        params.append(level)

    if logger:
        query += " AND logger LIKE ?"
        params.append(f"%{logger}%")

    query += " ORDER BY timestamp DESC, id DESC LIMIT ? OFFSET ?"
    params.extend([limit, offset])

    rows = conn.execute(query, params).fetchall()
    return [dict(row) for row in rows]


def clear_logs(before_date: Optional[str] = None, db_path: Optional[str] = None) -> int:
    """Delete logs, optionally only those older than ``before_date`` (ISO string).

    Returns:
        Number of logs deleted
    """
    init_db(db_path)
    conn = get_connection(db_path)

    if before_date:
        cursor = conn.execute("DELETE FROM app_logs WHERE timestamp < ?", (before_date,))
    else:
        cursor = conn.execute("DELETE FROM app_logs")

    deleted = cursor.rowcount
    conn.commit()
    return deleted


def get_log_count(level: Optional[str] = None, db_path: Optional[str] = None) -> int:
    init_db(db_path)
    conn = get_connection(db_path)

    if level:
        row = conn.execute("SELECT COUNT(*) FROM app_logs WHERE level = ?", (level,)).fetchone()
    else:
        row = conn.execute("SELECT COUNT(*) FROM app_logs").fetchone()

    return row[0]
