"""
gitsemver version information.

This module provides a single source of truth for the package version.
The string is itself a semantic version, checked at import time with the
package's own grammar parser.
"""

from __future__ import annotations

__version__ = "0.3.0"


def _version_info(version: str):
    """Break ``version`` into a dict of its semver components.

    Raises:
        ValueError: ``version`` is not a valid semantic version.
    """
    from gitsemver.core.parser import parse_version

    parsed = parse_version(version)
    if parsed is None:
        raise ValueError(f"Invalid version string: {version}")

    return {
        "major": parsed.major,
        "minor": parsed.minor,
        "patch": parsed.patch,
        "prerelease": parsed.prerelease,
        "build": parsed.build,
    }


VERSION_INFO = _version_info(__version__)
