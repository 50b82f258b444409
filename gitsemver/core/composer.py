"""
Derived version composition.

Builds the effective version of a working tree from its latest tag and the
distance metadata in a :class:`RepositorySnapshot`:

1. Commits since the tag extend the pre-release with ``dev.<n>``
   (``1.2.3-beta`` -> ``1.2.3-beta.dev.4``, ``1.2.3`` -> ``1.2.3-dev.4``).
   An existing pre-release label is always kept.
2. Branch and short hash are always appended as build metadata, after any
   metadata the tag already carried (``1.2.3+build5`` ->
   ``1.2.3-dev.2+build5.main.cafe01``).
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, List

from gitsemver.constants import (
    DEFAULT_DEV_LABEL,
    DETACHED_BRANCH_LABEL,
    FALLBACK_BASE_VERSION,
)
from gitsemver.core.parser import parse_version
from gitsemver.core.validator import validate
from gitsemver.exceptions import ReferenceMalformedError
from gitsemver.models import RepositorySnapshot, SemanticVersion
from gitsemver.utils.logger import get_logger

if TYPE_CHECKING:
    from gitsemver.core.repository import GitRepository

logger = get_logger("core.composer")

_ILLEGAL_BUILD_CHARS = re.compile(r"[^0-9A-Za-z-]")


def sanitize_identifier(value: str) -> str:
    """Turn an arbitrary string (usually a branch name) into one build identifier.

    Every character outside ``[0-9A-Za-z-]`` becomes ``-``, so
    ``feature/login`` yields ``feature-login``. An empty result falls back
    to ``detached``.
    """
    cleaned = _ILLEGAL_BUILD_CHARS.sub("-", value.strip())
    return cleaned or DETACHED_BRANCH_LABEL


def compose(
    base: SemanticVersion,
    snapshot: RepositorySnapshot,
    *,
    dev_label: str = DEFAULT_DEV_LABEL,
) -> str:
    """Compose the derived version string for ``snapshot`` on top of ``base``.

    Args:
        base: Version decoded from the latest tag.
        snapshot: Distance, branch and hash of the working tree.
        dev_label: Identifier placed before the commit count.

    Returns:
        ``major.minor.patch[-prerelease]+[metadata.]branch.hash``

    Examples:
        >>> snap = RepositorySnapshot("1.2.3-beta", 4, "feature-x", "deadbe")
        >>> compose(SemanticVersion(1, 2, 3, "beta"), snap)
        '1.2.3-beta.dev.4+feature-x.deadbe'
    """
    prerelease = base.prerelease

    if snapshot.commits_since_tag >= 1:
        distance = f"{dev_label}.{snapshot.commits_since_tag}"
        prerelease = f"{prerelease}.{distance}" if prerelease else distance

    metadata: List[str] = []
    if base.build:
        metadata.append(base.build)
    metadata.append(sanitize_identifier(snapshot.branch))
    metadata.append(snapshot.short_hash)

    result = f"{base.major}.{base.minor}.{base.patch}"
    if prerelease:
        result += f"-{prerelease}"
    result += "+" + ".".join(metadata)

    logger.debug("Composed %s from base %s and %s", result, base, snapshot.to_log_dict())
    return result


def current_version(
    repository: "GitRepository",
    *,
    dev_label: str = DEFAULT_DEV_LABEL,
) -> str:
    """Return the effective version of the repository's working tree.

    The latest tag is parsed as the base version; without any tag the base
    is ``0.0.0`` and every commit on HEAD counts as distance. The composed
    string is validated against the tag before it is returned.

    Raises:
        ReferenceMalformedError: The latest tag is not a semantic version.
        RepositoryError: git metadata could not be read.
    """
    snapshot = repository.snapshot()
    logger.info("Repository snapshot: %s", snapshot.to_log_dict())

    if snapshot.latest_tag is None:
        logger.warning("No tag reachable from HEAD, using base %s", FALLBACK_BASE_VERSION)
        tag_version = FALLBACK_BASE_VERSION
        reference = None
    else:
        tag_version = repository.strip_prefix(snapshot.latest_tag)
        reference = tag_version

    base = parse_version(tag_version)
    if base is None:
        raise ReferenceMalformedError(
            f"Latest tag is not a valid semantic version: {snapshot.latest_tag}",
            reference=snapshot.latest_tag,
        )

    composed = compose(base, snapshot, dev_label=dev_label)
    validate(composed, reference)
    return composed
