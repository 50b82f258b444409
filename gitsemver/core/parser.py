"""
Semantic version grammar parser.

Decomposes a string into :class:`SemanticVersion` using an anchored
Semantic Versioning 2.0.0 pattern::

    major.minor.patch[-prerelease][+build]

The ``-prerelease`` and ``+build`` groups are bracketed independently, so
build metadata is captured only when introduced by ``+`` no matter what the
pre-release part contains. Numeric pre-release identifiers must not have
leading zeros; numeric build identifiers may.

Parsing never raises for bad input: :func:`parse_version` returns ``None``.
Use :meth:`SemanticVersion.parse` when an exception is preferred.
"""

from __future__ import annotations

import re
from typing import Any, Optional

from gitsemver.constants import SEMVER_PATTERN
from gitsemver.models.version import SemanticVersion
from gitsemver.utils.logger import get_logger

logger = get_logger("core.parser")

SEMVER_RE = re.compile(SEMVER_PATTERN)


def parse_version(text: Any) -> Optional[SemanticVersion]:
    """Decompose ``text`` into a :class:`SemanticVersion`.

    The whole string must match, so surrounding whitespace or a trailing
    newline is rejected. Anything that does not match the complete grammar (missing components, leading zeros, illegal identifier
    characters, empty identifiers) yields ``None``.

    Args:
        text: Candidate version string.

    Returns:
        The parsed version, or ``None`` if ``text`` is not valid semver.

    Examples:
        >>> parse_version("1.2.3-beta.1+build.5")
        SemanticVersion(major=1, minor=2, patch=3, prerelease='beta.1', build='build.5')
        >>> parse_version("01.2.3") is None
        True
    """
    if not isinstance(text, str):
        logger.debug("Rejecting non-string version %r", text)
        return None

    match = SEMVER_RE.fullmatch(text)
    if match is None:
        logger.debug("Not a valid semantic version: %r", text)
        return None

    return SemanticVersion(
        major=int(match.group("major")),
        minor=int(match.group("minor")),
        patch=int(match.group("patch")),
        prerelease=match.group("prerelease"),
        build=match.group("build"),
    )


def is_valid_version(text: Any) -> bool:
    """Return True if ``text`` is a valid semantic version."""
    return parse_version(text) is not None
