"""Logging set-up for the command line.

Modules inside the package log through ``logging.getLogger(__name__)``,
so every module logger sits below the ``job_tracker`` package logger.
Configuring that one logger is enough to route all of them.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

PACKAGE_LOGGER = "job_tracker"

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Handler installed by configure_logging, if any
_handler: logging.Handler | None = None


def configure_logging(level: str = "INFO", stream: TextIO | None = None) -> logging.Logger:
    """Route package logs at ``level`` and above to a stream.

    Repeated calls only change the level; the handler is installed once.
    Records stop at the package logger so the CLI's stdout stays clean.

    Args:
        level: Level name, case-insensitive.
        stream: Destination of log lines. Defaults to stderr.

    Returns:
        The package logger.
    """
    global _handler

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level.upper())

    if _handler is None:
        _handler = logging.StreamHandler(stream or sys.stderr)
        _handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(_handler)
        logger.propagate = False

    return logger


def reset_logging() -> None:
    """Remove the installed handler and restore propagation."""
    global _handler

    logger = logging.getLogger(PACKAGE_LOGGER)
    if _handler is not None:
        logger.removeHandler(_handler)
        _handler = None
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
