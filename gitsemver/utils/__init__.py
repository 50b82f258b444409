"""
Utility helpers for gitsemver.

- Console output helpers (Rich-based)
- Logging configuration and retrieval
- PEP 440 conversion of semantic versions

Only symbols listed in ``__all__`` are considered part of the public API.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Logging utilities
# ---------------------------------------------------------------------------

from gitsemver.utils.logger import (
    disable_logging,
    get_logger,
    is_logging_configured,
    level_for_verbosity,
    setup_logging,
)

# ---------------------------------------------------------------------------
# Console utilities
# ---------------------------------------------------------------------------

from gitsemver.utils.console import (
    get_raw_console,
    print_error,
    print_success,
    print_warning,
    reconfigure_console,
)

# ---------------------------------------------------------------------------
# Version utilities
# ---------------------------------------------------------------------------

from gitsemver.utils.pep440 import to_pep440

__all__ = [
    # Console
    "print_error",
    "print_success",
    "print_warning",
    "get_raw_console",
    "reconfigure_console",
    # Logging
    "get_logger",
    "setup_logging",
    "disable_logging",
    "is_logging_configured",
    "level_for_verbosity",
    # Versions
    "to_pep440",
]
