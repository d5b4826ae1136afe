"""ModelTrainer Studio SQLite database module.

Provides storage for application settings (backend URL, active session)
and the application log table written by the logging handler.
"""

from .core import (
    get_db_path,
    get_connection,
    init_db,
    close_all_connections,
)
from .settings import (
    get_setting,
    set_setting,
    delete_setting,
)
from .logs import (
    get_logs,
    get_log_count,
    clear_logs,
)

__all__ = [
    # Core
    "get_db_path",
    "get_connection",
    "init_db",
    "close_all_connections",
    # Settings
    "get_setting",
    "set_setting",
    "delete_setting",
    # Logs
    "get_logs",
    "get_log_count",
    "clear_logs",
]
