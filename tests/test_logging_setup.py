import io
import logging

import pytest

import logging_setup
from logging_setup import configure_logging, get_logger


@pytest.fixture
def fresh_logger(monkeypatch):
    logger = logging.getLogger("expenso")
    saved = (list(logger.handlers), logger.level, logger.propagate)
    monkeypatch.setattr(logging_setup, "_CONFIGURED", False)
    logger.handlers = []
    yield logger
    logger.handlers, level, logger.propagate = saved
    logger.setLevel(level)


def test_configure_logging_routes_module_loggers(fresh_logger):
    stream = io.StringIO()
    configure_logging("debug", stream=stream)

    get_logger("expenso.ledger").debug("added %d", 1)

    assert fresh_logger.level == logging.DEBUG
    assert "expenso.ledger DEBUG added 1" in stream.getvalue()


def test_configure_logging_runs_once(fresh_logger):
    configure_logging("INFO", stream=io.StringIO())
    configure_logging("INFO", stream=io.StringIO())
    assert len(fresh_logger.handlers) == 1


def test_unknown_level_falls_back_to_info(fresh_logger):
    configure_logging("chatty", stream=io.StringIO())
    assert fresh_logger.level == logging.INFO
