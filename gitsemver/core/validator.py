"""
Candidate version validation.

:func:`validate` answers one question: is ``candidate`` a well-formed
semantic version that does not go backwards relative to ``reference``?
Failures raise a :class:`~gitsemver.exceptions.VersionError` subclass;
:func:`check` returns the same outcome as a :class:`ValidationResult`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from gitsemver.core.comparator import compare
from gitsemver.core.parser import parse_version
from gitsemver.exceptions import (
    MalformedVersionError,
    NotMonotonicError,
    ReferenceMalformedError,
    VersionError,
)
from gitsemver.models.version import Ordering, SemanticVersion
from gitsemver.utils.logger import get_logger

logger = get_logger("core.validator")


@dataclass(frozen=True)
class ValidationResult:
    """
    Outcome of validating one candidate.

    Attributes:
        candidate: The string that was validated.
        version: Parsed candidate when validation succeeded.
        error: The failure when validation did not succeed.
    """

    candidate: str
    version: Optional[SemanticVersion] = None
    error: Optional[VersionError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def message(self) -> str:
        if self.error is not None:
            return str(self.error)
        return f"{self.candidate} is a valid semantic version"


def validate(candidate: str, reference: Optional[str] = None) -> SemanticVersion:
    """Validate ``candidate`` and make sure it is not older than ``reference``.

    Args:
        candidate: Version string to check.
        reference: Version string of the prior tag, or ``None`` when the
            repository has no tag to compare against.

    Returns:
        The parsed candidate.

    Raises:
        MalformedVersionError: ``candidate`` is not valid semver.
        ReferenceMalformedError: ``reference`` is not valid semver.
        NotMonotonicError: ``candidate`` is older than ``reference``.
    """
    version = parse_version(candidate)
    if version is None:
        raise MalformedVersionError(
            f"Not a valid semantic version: {candidate!r}",
            version=str(candidate),
        )

    if reference is None:
        logger.debug("No reference tag, accepting %s without comparison", version)
        return version

    reference_version = parse_version(reference)
    if reference_version is None:
        raise ReferenceMalformedError(
            f"Reference tag is not a valid semantic version: {reference!r}",
            reference=reference,
            version=candidate,
        )

    if compare(version, reference_version) is Ordering.LESS:
        raise NotMonotonicError(
            f"Version {candidate} is older than reference tag {reference}",
            reference=reference,
            version=candidate,
        )

    logger.debug("%s is not older than reference %s", version, reference_version)
    return version


def check(candidate: str, reference: Optional[str] = None) -> ValidationResult:
    """Run :func:`validate` and return the outcome instead of raising."""
    try:
        version = validate(candidate, reference)
    except VersionError as exc:
        logger.debug("Validation of %r failed: %s", candidate, exc)
        return ValidationResult(candidate=candidate, error=exc)
    return ValidationResult(candidate=candidate, version=version)
