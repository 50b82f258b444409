"""
Console output utilities for gitsemver using Rich.

User-facing status lines go through this module; diagnostics go through
:mod:`gitsemver.utils.logger`. The computed version is written with
``click.echo`` by the commands so it stays free of markup.

Two consoles are kept:

- stdout for success messages,
- stderr for warnings and errors, so scripts capturing stdout only ever
  see the version.
"""

from __future__ import annotations

import os
import sys
import threading
from typing import Optional, TextIO

from rich.theme import Theme
from rich.console import Console

GITSEMVER_THEME = Theme(
    {
        "success": "bold green",
        "error": "bold red",
        "warning": "bold yellow",
        "info": "bold cyan",
        "version": "bold magenta",
    }
)

_console: Optional[Console] = None
_error_console: Optional[Console] = None
_console_lock = threading.Lock()


def _should_use_color(stream: Optional[TextIO] = None) -> bool:
    """Return True if colored output should be enabled for ``stream``."""
    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("CI"):
        return False
    target = stream if stream is not None else sys.stdout
    try:
        return target.isatty()
    except (AttributeError, OSError, ValueError):
        return False


def _build_console(stderr: bool) -> Console:
    use_color = _should_use_color(sys.stderr if stderr else sys.stdout)
    return Console(
        theme=GITSEMVER_THEME,
        no_color=not use_color,
        highlight=False,
        soft_wrap=True,
        stderr=stderr,
    )


def _get_console() -> Console:
    """Return the singleton stdout console."""
    global _console

    if _console is None:
        with _console_lock:
            if _console is None:
                _console = _build_console(stderr=False)
    return _console


def _get_error_console() -> Console:
    """Return the singleton stderr console."""
    global _error_console

    if _error_console is None:
        with _console_lock:
            if _error_console is None:
                _error_console = _build_console(stderr=True)
    return _error_console


def reconfigure_console() -> None:
    """Reset both console instances.

    Needed after ``NO_COLOR`` changes at runtime (``--no-color``) and
    between tests that swap ``sys.stdout``.
    """
    global _console, _error_console
    with _console_lock:
        _console = None
        _error_console = None


def print_success(message: str, *, prefix: str = "[OK]") -> None:
    """Print a success message to stdout."""
    _get_console().print(f"{prefix} {message}", style="success", markup=False)


def print_error(message: str, *, prefix: str = "[ERROR]") -> None:
    """Print an error message to stderr."""
    _get_error_console().print(f"{prefix} {message}", style="error", markup=False)


def print_warning(message: str, *, prefix: str = "[WARNING]") -> None:
    """Print a warning message to stderr."""
    _get_error_console().print(f"{prefix} {message}", style="warning", markup=False)


def get_raw_console() -> Console:
    """Return the underlying stdout Console instance."""
    return _get_console()
