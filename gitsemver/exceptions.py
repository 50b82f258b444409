"""
Custom exception hierarchy for gitsemver.

This module defines structured exception types used across gitsemver.
All exceptions inherit from :class:`GitSemverError` and support optional
structured metadata via the ``details`` attribute to improve diagnostics
and logging.
"""

from __future__ import annotations

from typing import Any, Mapping, MutableMapping, Optional, Sequence


class GitSemverError(Exception):
    """Base exception for all gitsemver errors.

    All gitsemver-specific exceptions should inherit from this class.
    It supports structured metadata via ``details`` for richer error
    reporting and debugging.

    Args:
        message: Human-readable error message.
        details: Optional structured metadata describing the error.
    """

    __slots__ = ("message", "details")

    def __init__(
        self,
        message: str,
        details: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self.message: str = message
        # Internally normalize to a mutable dict
        self.details: MutableMapping[str, Any] = dict(details) if details else {}
        super().__init__(message)

    def __str__(self) -> str:
        if not self.details:
            return self.message
        formatted = ", ".join(f"{k}={v}" for k, v in self.details.items())
        return f"{self.message} ({formatted})"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, details={dict(self.details)!r})"
        )


def _add_if(details: MutableMapping[str, Any], key: str, value: Any) -> None:
    """Add a key to ``details`` only if ``value`` is not ``None``."""
    if value is not None:
        details[key] = value


def _truncate(text: str, max_length: int = 200) -> str:
    """Truncate long text for safe logging or error reporting."""
    if len(text) <= max_length:
        return text
    return text[:max_length] + "..."


class ConfigError(GitSemverError):
    """Raised when a configuration file is missing, unreadable or invalid.

    Args:
        message: Error description.
        config_path: Path to the configuration file involved.
        option: Name of the offending option, if any.
    """

    __slots__ = ("config_path", "option")

    def __init__(
        self,
        message: str,
        *,
        config_path: Optional[str] = None,
        option: Optional[str] = None,
    ) -> None:
        details: MutableMapping[str, Any] = {}
        _add_if(details, "path", config_path)
        _add_if(details, "option", option)

        super().__init__(message, details)

        self.config_path = config_path
        self.option = option


class RepositoryError(GitSemverError):
    """Raised when repository metadata cannot be read from git.

    Args:
        message: Error description.
        command: The git command line that failed.
        returncode: Exit status of the git process, if it ran.
        stderr: Captured standard error, truncated for safety.
    """

    __slots__ = ("command", "returncode", "stderr")

    def __init__(
        self,
        message: str,
        *,
        command: Optional[Sequence[str]] = None,
        returncode: Optional[int] = None,
        stderr: Optional[str] = None,
    ) -> None:
        details: MutableMapping[str, Any] = {}
        _add_if(details, "command", " ".join(command) if command else None)
        _add_if(details, "returncode", returncode)

        if stderr:
            details["stderr"] = _truncate(stderr.strip())

        super().__init__(message, details)

        self.command = list(command) if command else None
        self.returncode = returncode
        self.stderr = stderr


class NoTagFoundError(RepositoryError):
    """Raised when no tag, or not enough tags, are reachable from HEAD.

    Args:
        message: Error description.
        tags_found: Number of tags that were reachable.
    """

    __slots__ = ("tags_found",)

    def __init__(self, message: str, *, tags_found: int = 0, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.details["tags_found"] = tags_found
        self.tags_found = tags_found


class VersionError(GitSemverError):
    """Base class for version grammar and ordering failures.

    Args:
        message: Error description.
        version: The version string involved.
        details: Additional structured metadata.
    """

    __slots__ = ("version",)

    def __init__(
        self,
        message: str,
        *,
        version: Optional[str] = None,
        details: Optional[Mapping[str, Any]] = None,
    ) -> None:
        merged: MutableMapping[str, Any] = {}
        _add_if(merged, "version", version)
        if details:
            merged.update(details)

        super().__init__(message, merged)

        self.version = version


class MalformedVersionError(VersionError):
    """Raised when a candidate string does not match the semver grammar."""


class ReferenceMalformedError(VersionError):
    """Raised when the reference tag itself is not a valid semantic version.

    This points at corrupt repository history rather than a bad candidate.
    """

    __slots__ = ("reference",)

    def __init__(
        self,
        message: str,
        *,
        reference: Optional[str] = None,
        version: Optional[str] = None,
    ) -> None:
        details: MutableMapping[str, Any] = {}
        _add_if(details, "reference", reference)

        super().__init__(message, version=version, details=details)

        self.reference = reference


class NotMonotonicError(VersionError):
    """Raised when a candidate version is older than its reference tag."""

    __slots__ = ("reference",)

    def __init__(
        self,
        message: str,
        *,
        reference: Optional[str] = None,
        version: Optional[str] = None,
    ) -> None:
        details: MutableMapping[str, Any] = {}
        _add_if(details, "reference", reference)

        super().__init__(message, version=version, details=details)

        self.reference = reference


class ConversionError(GitSemverError):
    """Raised when a semantic version has no PEP 440 equivalent.

    Args:
        message: Error description.
        version: The version string that could not be converted.
    """

    __slots__ = ("version",)

    def __init__(self, message: str, *, version: Optional[str] = None) -> None:
        details: MutableMapping[str, Any] = {}
        _add_if(details, "version", version)

        super().__init__(message, details)

        self.version = version
