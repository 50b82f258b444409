"""
gitsemver: semantic versions derived from git history.

gitsemver computes the Semantic Versioning 2.0.0 string of a working tree
from the latest version tag, the number of commits since that tag, the
current branch and the abbreviated commit hash::

    v1.2.3, 4 commits later on feature-x  ->  1.2.3-dev.4+feature-x.deadbee

It also validates candidate versions against the semver grammar and makes
sure they never go backwards relative to a prior tag.

Example:
    >>> from gitsemver import parse_version, compose, RepositorySnapshot
    >>> base = parse_version("1.2.3-beta")
    >>> compose(base, RepositorySnapshot("v1.2.3-beta", 4, "feature-x", "deadbe"))
    '1.2.3-beta.dev.4+feature-x.deadbe'
"""

from __future__ import annotations

from gitsemver.__version__ import __version__
from gitsemver.models import Ordering, RepositorySnapshot, SemanticVersion
from gitsemver.core import (
    GitRepository,
    ValidationResult,
    check,
    compare,
    compose,
    current_version,
    is_valid_version,
    parse_version,
    validate,
)

# ---------------------------------------------------------------------------
# Package Metadata
# ---------------------------------------------------------------------------

__author__ = "gitsemver Contributors"
__license__ = "Apache-2.0"
__description__ = "Semantic versions derived from git tags, branches and commits."

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

__all__ = [
    "__version__",
    "Ordering",
    "SemanticVersion",
    "RepositorySnapshot",
    "GitRepository",
    "ValidationResult",
    "parse_version",
    "is_valid_version",
    "compare",
    "compose",
    "current_version",
    "validate",
    "check",
]
