"""
Semantic version data model for gitsemver.

:class:`SemanticVersion` is the decomposed form of a Semantic Versioning
2.0.0 string. Instances are immutable; composing a derived version always
produces a new string.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional, Tuple


class Ordering(enum.Enum):
    """Result of comparing two versions by major.minor.patch."""

    LESS = -1
    EQUAL = 0
    GREATER = 1


@dataclass(frozen=True)
class SemanticVersion:
    """
    A version decomposed into its semver components.

    Attributes:
        major: Major version number.
        minor: Minor version number.
        patch: Patch version number.
        prerelease: Dot-separated pre-release identifiers, or ``None``.
        build: Dot-separated build metadata identifiers, or ``None``.
    """

    major: int
    minor: int
    patch: int
    prerelease: Optional[str] = None
    build: Optional[str] = None

    def __post_init__(self) -> None:
        for name in ("major", "minor", "patch"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ValueError(f"{name} must be a non-negative integer, got {value!r}")
        # Empty optional parts are stored as absent
        if self.prerelease == "":
            object.__setattr__(self, "prerelease", None)
        if self.build == "":
            object.__setattr__(self, "build", None)

    @classmethod
    def parse(cls, text: str) -> "SemanticVersion":
        """
        Parse ``text`` or raise.

        Raises:
            MalformedVersionError: ``text`` is not a valid semantic version.
        """
        from gitsemver.core.parser import parse_version
        from gitsemver.exceptions import MalformedVersionError

        parsed = parse_version(text)
        if parsed is None:
            raise MalformedVersionError(
                f"Not a valid semantic version: {text!r}",
                version=str(text),
            )
        return parsed

    @property
    def core(self) -> Tuple[int, int, int]:
        """The ``(major, minor, patch)`` triple."""
        return (self.major, self.minor, self.patch)

    @property
    def prerelease_identifiers(self) -> Tuple[str, ...]:
        return tuple(self.prerelease.split(".")) if self.prerelease else ()

    @property
    def build_identifiers(self) -> Tuple[str, ...]:
        return tuple(self.build.split(".")) if self.build else ()

    @property
    def is_prerelease(self) -> bool:
        return self.prerelease is not None

    def to_string(self) -> str:
        """Render ``major.minor.patch[-prerelease][+build]``."""
        result = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            result += f"-{self.prerelease}"
        if self.build:
            result += f"+{self.build}"
        return result

    def __str__(self) -> str:
        return self.to_string()
