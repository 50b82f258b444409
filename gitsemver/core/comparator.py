"""
Version ordering by major.minor.patch.

Only the numeric core takes part in the comparison. Pre-release and build
metadata are ignored, so ``1.2.3-alpha`` and ``1.2.3+build`` compare EQUAL
to ``1.2.3``. This is enough to keep released versions monotonic; it is not
full semver precedence.
"""

from __future__ import annotations

from gitsemver.models.version import Ordering, SemanticVersion


def compare(a: SemanticVersion, b: SemanticVersion) -> Ordering:
    """Compare ``a`` against ``b``.

    Fields are compared in the fixed order major, minor, patch; the first
    one that differs decides.

    Examples:
        >>> compare(SemanticVersion(1, 2, 3), SemanticVersion(1, 2, 4))
        <Ordering.LESS: -1>
    """
    for left, right in zip(a.core, b.core):
        if left < right:
            return Ordering.LESS
        if left > right:
            return Ordering.GREATER
    return Ordering.EQUAL


def is_older(a: SemanticVersion, b: SemanticVersion) -> bool:
    """Return True if ``a`` precedes ``b``."""
    return compare(a, b) is Ordering.LESS
