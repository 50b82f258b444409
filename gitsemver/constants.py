"""
Centralized constants for gitsemver.

This module defines immutable values used across gitsemver, including the
Semantic Versioning 2.0.0 grammar, git defaults, configuration defaults,
and logging formats. All values are intended to be treated as read-only.
"""

from typing import Final, Tuple

# ---------------------------------------------------------------------------
# Semantic Versioning grammar
# ---------------------------------------------------------------------------

#: Numeric core identifier: ``0`` or a number without leading zeros.
NUMERIC_IDENTIFIER: Final[str] = r"0|[1-9][0-9]*"

#: Single pre-release identifier (alphanumeric, or numeric without leading zeros).
PRERELEASE_IDENTIFIER: Final[str] = r"(?:0|[1-9][0-9]*|[0-9]*[a-zA-Z-][0-9a-zA-Z-]*)"

#: Single build metadata identifier.
BUILD_IDENTIFIER: Final[str] = r"[0-9a-zA-Z-]+"

#: Anchored full-string semver pattern with named groups.
SEMVER_PATTERN: Final[str] = (
    rf"^(?P<major>{NUMERIC_IDENTIFIER})"
    rf"\.(?P<minor>{NUMERIC_IDENTIFIER})"
    rf"\.(?P<patch>{NUMERIC_IDENTIFIER})"
    rf"(?:-(?P<prerelease>{PRERELEASE_IDENTIFIER}(?:\.{PRERELEASE_IDENTIFIER})*))?"
    rf"(?:\+(?P<build>{BUILD_IDENTIFIER}(?:\.{BUILD_IDENTIFIER})*))?\Z"
)

#: Version used as the base when the repository has no tags yet.
FALLBACK_BASE_VERSION: Final[str] = "0.0.0"

# ---------------------------------------------------------------------------
# Git defaults
# ---------------------------------------------------------------------------

#: Name or path of the git executable.
DEFAULT_GIT_EXECUTABLE: Final[str] = "git"

#: Prefix stripped from tags before parsing (``v1.2.3`` -> ``1.2.3``).
DEFAULT_TAG_PREFIX: Final[str] = "v"

#: Length of the abbreviated commit hash.
DEFAULT_HASH_LENGTH: Final[int] = 7

#: Allowed range for the abbreviated commit hash length.
HASH_LENGTH_RANGE: Final[Tuple[int, int]] = (4, 40)

#: Pre-release label inserted before the commit distance.
DEFAULT_DEV_LABEL: Final[str] = "dev"

#: Which tag (1 = most recent) candidates are validated against.
DEFAULT_REFERENCE_TAG: Final[int] = 1

#: Build identifier used when the branch name sanitizes to nothing.
DETACHED_BRANCH_LABEL: Final[str] = "detached"

# ---------------------------------------------------------------------------
# Configuration files
# ---------------------------------------------------------------------------

#: Dedicated configuration file name (settings under ``[gitsemver]``).
CONFIG_FILE_NAME: Final[str] = "gitsemver.toml"

#: Shared project file (settings under ``[tool.gitsemver]``).
PYPROJECT_FILE_NAME: Final[str] = "pyproject.toml"

# ---------------------------------------------------------------------------
# Output formats
# ---------------------------------------------------------------------------

#: Formats accepted by ``gitsemver get --format``.
OUTPUT_FORMATS: Final[Tuple[str, ...]] = ("semver", "pep440")

# ---------------------------------------------------------------------------
# Logging configuration
# ---------------------------------------------------------------------------

#: Timestamp format for verbose logging.
LOG_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

#: Default log format (non-verbose).
LOG_DEFAULT_FORMAT: Final[str] = "%(levelname)s: %(message)s"

#: Verbose log format including timestamp and logger name.
LOG_VERBOSE_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
