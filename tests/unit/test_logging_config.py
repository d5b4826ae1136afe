import logging

from db import get_log_count
from helpers import logging_config


def test_get_logger_returns_consistent_logger():
    logger1 = logging_config.get_logger(__name__)
    logger2 = logging_config.get_logger(__name__)

    assert logger1 is logger2
    assert logger1.name == f"modeltrainer.{__name__}"


def test_get_logger_keeps_existing_prefix():
    logger = logging_config.get_logger("modeltrainer.test")
    assert logger.name == "modeltrainer.test"


def test_get_logger_has_stream_and_database_handlers():
    logger = logging_config.get_logger("modeltrainer.test_handlers")
    kinds = {type(h) for h in logger.handlers}
    assert logging.StreamHandler in kinds
    assert logging_config.DatabaseHandler in kinds


def test_debug_env_enables_debug_level(monkeypatch):
    name = "modeltrainer.test_debug_env"
    logging.getLogger(name).handlers.clear()
    monkeypatch.setenv("MODELTRAINER_DEBUG", "1")

    logger = logging_config.get_logger(name)

    assert logger.level == logging.DEBUG


def test_module_logger_records_are_stored_once():
    name = "modeltrainer.helpers.test_single_write"
    logging.getLogger(name).handlers.clear()
    logger = logging_config.get_logger(name)

    logger.warning("written once")

    assert logger.propagate is False
    assert get_log_count() == 1
