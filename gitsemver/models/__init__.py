"""
Data model exports for gitsemver.

Example:
    >>> from gitsemver.models import SemanticVersion, RepositorySnapshot
"""

from __future__ import annotations

from gitsemver.models.version import Ordering, SemanticVersion
from gitsemver.models.snapshot import RepositorySnapshot

__all__ = [
    "Ordering",
    "SemanticVersion",
    "RepositorySnapshot",
]
