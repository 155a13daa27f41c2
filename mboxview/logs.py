"""Logging setup.

The TUI owns the terminal, so records only ever go to a file.
Without a configured file the package logger stays silent.
"""

from __future__ import annotations

import logging
from pathlib import Path

LOGGER_NAME = "mboxview"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())


def _level_from_name(name: str | None) -> int:
    if not name:
        return logging.INFO
    level = logging.getLevelName(str(name).strip().upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(log_file: Path | None, level_name: str | None = None) -> logging.Logger:
    """Attach a file handler to the package logger when ``log_file`` is set.

    Calling this again replaces any handler added by a previous call.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if isinstance(handler, logging.FileHandler):
            logger.removeHandler(handler)
            handler.close()
    if log_file is None:
        return logger

    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(_level_from_name(level_name))
    logger.propagate = False
    return logger


__all__ = ["LOGGER_NAME", "configure_logging"]
