"""
CLI subcommands for gitsemver.

Helpers shared by the subcommands live here; each command is defined in its
own module and registered in :mod:`gitsemver.cli`.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from gitsemver.context import GitSemverContext
from gitsemver.core.repository import GitRepository


def build_repository(
    ctx: GitSemverContext,
    repo: Optional[Path],
    tag_prefix: Optional[str],
) -> GitRepository:
    """Create the repository collaborator from config plus CLI overrides."""
    config = ctx.effective_config()
    return GitRepository(
        repo,
        tag_prefix=config.tag_prefix if tag_prefix is None else tag_prefix,
        hash_length=config.hash_length,
    )
