"""
Logging setup shared by the ``cpg_hmm`` and ``hmm_core`` packages.
"""

import logging
import sys

from cpg_hmm.config import get_config

LOGGER_NAMES = ("cpg_hmm", "hmm_core")


def configure_logging(level=None):
    """
    Attach a stderr handler to the package loggers.

    Level and format come from the ``logging`` config section unless
    ``level`` is given. Safe to call more than once.
    """
    level = (level or get_config("logging", "level") or "INFO").upper()
    numeric_level = getattr(logging, level, None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level}")
    formatter = logging.Formatter(get_config("logging", "format"))

    for name in LOGGER_NAMES:
        package_logger = logging.getLogger(name)
        package_logger.setLevel(numeric_level)
        package_logger.handlers.clear()
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)
        package_logger.propagate = False


def get_logger(name: str = "main") -> logging.Logger:
    full_name = name if name.startswith("cpg_hmm") else f"cpg_hmm.{name}"
    return logging.getLogger(full_name)


def set_log_level(level: str) -> None:
    """Change the level of the package loggers and their handlers."""
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level}")
    for name in LOGGER_NAMES:
        package_logger = logging.getLogger(name)
        package_logger.setLevel(numeric_level)
        for handler in package_logger.handlers:
            handler.setLevel(numeric_level)
