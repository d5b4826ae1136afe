"""Centralized logging configuration for ModelTrainer Studio.

This module provides a unified logging setup with:
- Database logging (SQLite ``app_logs`` table)
- Optional console output
- Configurable log levels
"""

import logging
import os

from db.logs import DatabaseHandler


# Log format for console output
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LOGGER_PREFIX = "modeltrainer"


def setup_logger(
    name: str,
    level: int = logging.INFO,
    console_output: bool = True,
) -> logging.Logger:
    """Set up a logger with database and optional console handlers.

    Args:
        name: Logger name (typically __name__ from calling module)
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        console_output: Whether to also log to console

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Avoid duplicate handlers if logger already configured
    if logger.handlers:
        return logger

    logger.setLevel(level)
    # Each logger carries its own handlers; the parent would write every record again
    logger.propagate = False
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    db_handler = DatabaseHandler(level)
    logger.addHandler(db_handler)

    if console_output:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get or create a logger with default configuration.

    Module loggers are created under the ``modeltrainer`` namespace so that
    :func:`set_global_log_level` can find them.
    """
    debug_mode = os.getenv("MODELTRAINER_DEBUG", "").lower() in {"1", "true", "yes", "on"}
    level = logging.DEBUG if debug_mode else logging.INFO

    if not name.startswith(LOGGER_PREFIX):
        name = f"{LOGGER_PREFIX}.{name}"
    return setup_logger(name, level=level)


app_logger = get_logger(LOGGER_PREFIX)


def set_global_log_level(level: int):
    """Set log level for all existing ``modeltrainer`` loggers and their handlers."""
    for logger_name in list(logging.root.manager.loggerDict):
        if logger_name.startswith(LOGGER_PREFIX):
            logger = logging.getLogger(logger_name)
            logger.setLevel(level)
            for handler in logger.handlers:
                handler.setLevel(level)
