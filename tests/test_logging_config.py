"""Tests for logging setup."""

import logging

import pytest

from jsonreflow.logging_config import PACKAGE_LOGGER_NAME, get_logger, resolve_env_log_level, setup_logging


@pytest.fixture(autouse=True)
def restore_package_logger():
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    handlers, level, propagate = logger.handlers[:], logger.level, logger.propagate
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate


@pytest.mark.parametrize(
    "value,expected",
    [("DEBUG", logging.DEBUG), ("info", logging.INFO), ("warn", logging.WARNING), ("10", 10), ("bogus", None)],
)
def test_resolve_env_log_level(monkeypatch, value, expected):
    monkeypatch.setenv("JSONREFLOW_LOG_LEVEL", value)
    assert resolve_env_log_level() == expected


def test_resolve_env_log_level_unset(monkeypatch):
    monkeypatch.delenv("JSONREFLOW_LOG_LEVEL", raising=False)
    assert resolve_env_log_level() is None


def test_setup_logging_defaults_to_warning(monkeypatch):
    monkeypatch.delenv("JSONREFLOW_LOG_LEVEL", raising=False)
    setup_logging()
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    assert logger.level == logging.WARNING
    assert len(logger.handlers) == 1
    assert not logger.propagate


def test_setup_logging_is_repeatable():
    setup_logging(logging.DEBUG)
    setup_logging(logging.DEBUG)
    assert len(logging.getLogger(PACKAGE_LOGGER_NAME).handlers) == 1


def test_module_loggers_are_package_children():
    logger = get_logger("jsonreflow.engine.formatter")
    assert logger.name == "jsonreflow.engine.formatter"
    assert logger.name.startswith(PACKAGE_LOGGER_NAME + ".")


def test_fallback_is_logged_at_debug(caplog):
    from jsonreflow import format_json

    logging.getLogger(PACKAGE_LOGGER_NAME).propagate = True
    with caplog.at_level(logging.DEBUG, logger=PACKAGE_LOGGER_NAME):
        format_json("[" + "x" * 100 + "]")
    assert any("does not fit on one line" in record.getMessage() for record in caplog.records)


def test_setup_logging_env_level(monkeypatch):
    monkeypatch.setenv("JSONREFLOW_LOG_LEVEL", "info")
    setup_logging()
    assert logging.getLogger(PACKAGE_LOGGER_NAME).level == logging.INFO


def test_setup_logging_env_notset(monkeypatch):
    """Test that level 0 from the environment is honoured rather than treated as unset."""
    monkeypatch.setenv("JSONREFLOW_LOG_LEVEL", "0")
    setup_logging()
    assert logging.getLogger(PACKAGE_LOGGER_NAME).level == logging.NOTSET
