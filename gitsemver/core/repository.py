"""
Git repository metadata provider.

:class:`GitRepository` is the only place gitsemver talks to git. Every
query runs a fresh ``git`` subprocess; nothing is cached between calls, so a
snapshot always reflects the repository at the moment it is taken.

Typical usage::

    repo = GitRepository(Path("."))
    snapshot = repo.snapshot()
    snapshot.latest_tag, snapshot.commits_since_tag
"""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import List, Optional, Sequence, Union

from gitsemver.constants import (
    DEFAULT_GIT_EXECUTABLE,
    DEFAULT_HASH_LENGTH,
    DEFAULT_TAG_PREFIX,
)
from gitsemver.exceptions import NoTagFoundError, RepositoryError
from gitsemver.models import RepositorySnapshot
from gitsemver.utils.logger import get_logger

logger = get_logger("core.repository")

PathLike = Union[str, Path]


class GitRepository:
    """Read-only access to the tag, branch and commit metadata of a repository.

    Args:
        path: Working directory inside the repository. Defaults to the
            current directory.
        tag_prefix: Prefix removed by :meth:`strip_prefix` (``v1.2.3``).
        hash_length: Length of the abbreviated commit hash.
        git: git executable to run.
    """

    def __init__(
        self,
        path: Optional[PathLike] = None,
        *,
        tag_prefix: str = DEFAULT_TAG_PREFIX,
        hash_length: int = DEFAULT_HASH_LENGTH,
        git: str = DEFAULT_GIT_EXECUTABLE,
    ) -> None:
        self.path: Optional[Path] = Path(path) if path is not None else None
        self.tag_prefix = tag_prefix
        self.hash_length = hash_length
        self.git = git

    def __repr__(self) -> str:
        return (
            f"GitRepository(path={self.path!r}, tag_prefix={self.tag_prefix!r}, "
            f"hash_length={self.hash_length!r})"
        )

    # ------------------------------------------------------------------
    # Process plumbing
    # ------------------------------------------------------------------

    def _run(self, *args: str) -> str:
        """Run ``git <args>`` and return its stripped stdout.

        Raises:
            RepositoryError: git is missing or exits non-zero.
        """
        command: Sequence[str] = [self.git, *args]
        logger.debug("Running %s", " ".join(command))

        try:
            completed = subprocess.run(
                command,
                cwd=str(self.path) if self.path is not None else None,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                check=False,
            )
        except OSError as exc:
            raise RepositoryError(
                f"Unable to run git: {exc}",
                command=command,
            ) from exc

        if completed.returncode != 0:
            raise RepositoryError(
                f"git {args[0]} failed",
                command=command,
                returncode=completed.returncode,
                stderr=completed.stderr,
            )

        return completed.stdout.strip()

    # ------------------------------------------------------------------
    # Metadata queries
    # ------------------------------------------------------------------

    def tags(self) -> List[str]:
        """Return tags reachable from HEAD, newest version first."""
        output = self._run("tag", "--merged", "HEAD", "--sort=-v:refname")
        return [line.strip() for line in output.splitlines() if line.strip()]

    def latest_tag(self) -> str:
        """Return the most recent tag reachable from HEAD.

        Raises:
            NoTagFoundError: The repository has no reachable tags.
        """
        return self.nth_most_recent_tag(1)

    def nth_most_recent_tag(self, n: int) -> str:
        """Return the ``n``-th most recent tag (1 is the latest).

        Raises:
            ValueError: ``n`` is smaller than 1.
            NoTagFoundError: Fewer than ``n`` tags are reachable.
        """
        if n < 1:
            raise ValueError(f"n must be >= 1, got {n}")

        tags = self.tags()
        if len(tags) < n:
            raise NoTagFoundError(
                f"No tag #{n} reachable from HEAD ({len(tags)} found)",
                command=[self.git, "tag", "--merged", "HEAD"],
                tags_found=len(tags),
            )
        return tags[n - 1]

    def current_branch(self) -> str:
        """Return the checked-out branch name, or ``HEAD`` when detached."""
        return self._run("rev-parse", "--abbrev-ref", "HEAD")

    def commits_since(self, tag: Optional[str]) -> int:
        """Count commits on HEAD that are not reachable from ``tag``.

        With ``tag=None`` every commit on HEAD is counted.
        """
        revision = f"{tag}..HEAD" if tag else "HEAD"
        output = self._run("rev-list", "--count", revision)
        try:
            return int(output)
        except ValueError as exc:
            raise RepositoryError(
                f"Unexpected commit count from git: {output!r}",
                command=[self.git, "rev-list", "--count", revision],
            ) from exc

    def short_commit_hash(self) -> str:
        """Return the abbreviated hash of HEAD."""
        return self._run("rev-parse", f"--short={self.hash_length}", "HEAD")

    def snapshot(self) -> RepositorySnapshot:
        """Query all metadata needed to compose a version.

        A repository without tags yields ``latest_tag=None`` and counts every
        commit on HEAD instead of raising.
        """
        try:
            tag: Optional[str] = self.latest_tag()
        except NoTagFoundError:
            logger.info("No tags reachable from HEAD")
            tag = None

        return RepositorySnapshot(
            latest_tag=tag,
            commits_since_tag=self.commits_since(tag),
            branch=self.current_branch(),
            short_hash=self.short_commit_hash(),
        )

    def strip_prefix(self, tag: str) -> str:
        """Remove the configured tag prefix, if present."""
        if self.tag_prefix and tag.startswith(self.tag_prefix):
            return tag[len(self.tag_prefix):]
        return tag
