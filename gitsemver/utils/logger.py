"""
Logging utilities for gitsemver.

All diagnostic output goes through loggers in the ``gitsemver`` namespace.
The version itself is written to stdout by the commands, so log records
always go to stderr and never pollute captured output such as
``VERSION=$(gitsemver)``.
"""

from __future__ import annotations

import os
import sys
import copy
import logging
import threading
from typing import IO, Optional

from gitsemver.constants import (
    LOG_DATE_FORMAT,
    LOG_DEFAULT_FORMAT,
    LOG_VERBOSE_FORMAT,
)

_ROOT_NAME = "gitsemver"

_logging_configured: bool = False
_lock = threading.Lock()


class ColoredFormatter(logging.Formatter):
    """Formatter that colors the level name when writing to a terminal."""

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def __init__(
        self,
        fmt: str,
        *,
        datefmt: Optional[str] = None,
        use_color: bool = True,
        stream: Optional[IO[str]] = None,
    ) -> None:
        super().__init__(fmt=fmt, datefmt=datefmt)
        self.use_color = use_color
        self.stream = stream

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname)
        if color and self.use_color and self._should_use_color(self.stream):
            # Other handlers may share the record
            record = copy.copy(record)
            record.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(record)

    @staticmethod
    def _should_use_color(stream: Optional[IO[str]] = None) -> bool:
        """Return True when ANSI colors make sense for ``stream``."""
        if os.environ.get("NO_COLOR") or os.environ.get("CI"):
            return False
        target = stream if stream is not None else sys.stderr
        try:
            return bool(target.isatty())
        except (AttributeError, OSError, ValueError):
            return False


def level_for_verbosity(verbose: int) -> int:
    """Map a ``-v`` count to a logging level.

    0 → WARNING, 1 → INFO, 2 or more → DEBUG.
    """
    if verbose <= 0:
        return logging.WARNING
    if verbose == 1:
        return logging.INFO
    return logging.DEBUG


def setup_logging(
    *,
    level: int = logging.WARNING,
    verbose: bool = False,
    stream: Optional[IO[str]] = None,
) -> None:
    """Install a single stderr handler on the ``gitsemver`` logger.

    Calling it again replaces the previous handler, so repeated CLI
    invocations in one process (tests, embedding) never duplicate output.

    Args:
        level: Logging level for the package logger and its handler.
        verbose: Use the timestamped format that includes logger names.
        stream: Output stream; defaults to ``sys.stderr``.
    """
    global _logging_configured

    target = stream or sys.stderr

    with _lock:
        root_logger = logging.getLogger(_ROOT_NAME)
        root_logger.handlers.clear()
        root_logger.setLevel(level)

        handler = logging.StreamHandler(target)
        handler.setLevel(level)
        handler.setFormatter(
            ColoredFormatter(
                LOG_VERBOSE_FORMAT if verbose else LOG_DEFAULT_FORMAT,
                datefmt=LOG_DATE_FORMAT,
                use_color=not os.environ.get("NO_COLOR"),
                stream=target,
            )
        )

        root_logger.addHandler(handler)
        root_logger.propagate = False
        _logging_configured = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger inside the ``gitsemver`` namespace.

    ``get_logger("core.parser")`` and ``get_logger("gitsemver.core.parser")``
    return the same logger.
    """
    if not name or name == _ROOT_NAME:
        logger = logging.getLogger(_ROOT_NAME)
    elif name.startswith(f"{_ROOT_NAME}."):
        logger = logging.getLogger(name)
    else:
        logger = logging.getLogger(f"{_ROOT_NAME}.{name}")

    # Stay silent when used as a library without configuration
    if not logger.handlers and (not logger.parent or not logger.parent.handlers):
        logger.addHandler(logging.NullHandler())

    return logger


def is_logging_configured() -> bool:
    """Return True if :func:`setup_logging` has run."""
    return _logging_configured


def disable_logging() -> None:
    """Drop all gitsemver handlers and silence the package logger."""
    global _logging_configured

    with _lock:
        root_logger = logging.getLogger(_ROOT_NAME)
        root_logger.handlers.clear()
        root_logger.addHandler(logging.NullHandler())
        root_logger.setLevel(logging.NOTSET)
        _logging_configured = False
