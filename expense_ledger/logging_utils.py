"""
logging_utils.py - shared logger setup

Every module calls get_logger(__name__). A single StreamHandler is attached to
the package logger the first time, so reloading modules under Streamlit does
not duplicate output.
"""

import logging
import os

_PACKAGE_LOGGER = "expense_ledger"
_FORMAT = "%(asctime)s %(levelname)s %(message)s"


def _configure_package_logger() -> logging.Logger:
    logger = logging.getLogger(_PACKAGE_LOGGER)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(handler)
        level = (os.getenv("EXPENSE_LEDGER_LOG_LEVEL") or "INFO").strip().upper()
        logger.setLevel(getattr(logging, level, logging.INFO))
    return logger


def get_logger(name: str) -> logging.Logger:
    """Return a child logger of the package logger (configured once)."""
    _configure_package_logger()
    return logging.getLogger(name)


def set_level(level: str):
    """Adjust the package log level at runtime (the dashboard applies Settings.log_level)."""
    logger = _configure_package_logger()
    logger.setLevel(getattr(logging, level.strip().upper(), logging.INFO))
