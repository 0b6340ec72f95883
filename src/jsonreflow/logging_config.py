"""Logging setup for jsonreflow.

Every module obtains its logger through ``get_logger(__name__)``, so all records
flow through the ``jsonreflow`` package logger. Formatted documents are written to
stdout by the CLI, hence log records always go to stderr.
"""

import logging
import os
import sys
from typing import Optional

PACKAGE_LOGGER_NAME = "jsonreflow"

LOG_FORMAT = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT = "[%(levelname)s] [%(filename)s:%(lineno)d] [%(funcName)s] %(message)s"

_LEVEL_NAMES = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def resolve_env_log_level() -> Optional[int]:
    """Return the logging level named by ``JSONREFLOW_LOG_LEVEL``, or None if unset or unknown.

    Accepts level names (``DEBUG``, ``info``, ...) as well as numeric levels (``10``).
    """
    value = os.environ.get("JSONREFLOW_LOG_LEVEL", "").strip().upper()
    if not value:
        return None
    if value.isdigit():
        return int(value)
    return _LEVEL_NAMES.get(value)


def setup_logging(level: Optional[int] = None) -> None:
    """Configure the package logger with a single stderr handler.

    Args:
        level: Logging level to apply. If None, ``JSONREFLOW_LOG_LEVEL`` is consulted,
            falling back to WARNING.
    """
    if level is None:
        level = resolve_env_log_level()
    if level is None:
        level = logging.WARNING

    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    logger.setLevel(level)

    # Replace handlers from earlier calls so repeated setup does not duplicate records
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a jsonreflow module.

    Args:
        name: Module name, normally ``__name__``.

    Returns:
        The named logger, a child of the package logger.
    """
    return logging.getLogger(name)
