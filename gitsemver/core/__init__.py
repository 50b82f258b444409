"""
Core functionality exports for gitsemver.

Importing from here keeps user-facing imports clean and stable:

    from gitsemver.core import parse_version, compose, validate
"""

from __future__ import annotations

from gitsemver.core.parser import is_valid_version, parse_version
from gitsemver.core.comparator import compare, is_older
from gitsemver.core.validator import ValidationResult, check, validate
from gitsemver.core.composer import compose, current_version, sanitize_identifier
from gitsemver.core.repository import GitRepository

__all__ = [
    "parse_version",
    "is_valid_version",
    "compare",
    "is_older",
    "validate",
    "check",
    "ValidationResult",
    "compose",
    "current_version",
    "sanitize_identifier",
    "GitRepository",
]
