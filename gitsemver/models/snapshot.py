"""
Repository snapshot data model for gitsemver.

A :class:`RepositorySnapshot` captures the repository metadata a derived
version depends on. It is built fresh for every invocation and never cached.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class RepositorySnapshot:
    """
    Read-only view of the repository state at HEAD.

    Attributes:
        latest_tag: Most recent tag reachable from HEAD, or ``None``.
        commits_since_tag: Commits on HEAD not reachable from the tag.
        branch: Current branch name (``HEAD`` when detached).
        short_hash: Abbreviated commit hash of HEAD.
    """

    latest_tag: Optional[str]
    commits_since_tag: int
    branch: str
    short_hash: str

    def __post_init__(self) -> None:
        if self.commits_since_tag < 0:
            raise ValueError(
                f"commits_since_tag must be >= 0, got {self.commits_since_tag}"
            )

    @property
    def has_tag(self) -> bool:
        return self.latest_tag is not None

    @property
    def is_tagged_commit(self) -> bool:
        """True when HEAD is exactly the latest tag."""
        return self.has_tag and self.commits_since_tag == 0

    def to_log_dict(self) -> Dict[str, Any]:
        """Return the snapshot as a dictionary for debug logging."""
        return {
            "latest_tag": self.latest_tag,
            "commits_since_tag": self.commits_since_tag,
            "branch": self.branch,
            "short_hash": self.short_hash,
        }
