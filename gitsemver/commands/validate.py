"""Validate command implementation for gitsemver.

Checks that a candidate version is valid semver and is not older than a
prior tag, typically before it is used as a release tag::

    $ gitsemver validate -v 1.5.0
    [OK] 1.5.0 is a valid version (reference tag v1.4.2)

    # Compare against the tag before the latest one
    $ gitsemver validate -v 1.4.2 --against 2
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import click

from gitsemver.commands import build_repository
from gitsemver.context import GitSemverContext, pass_context
from gitsemver.core.validator import check
from gitsemver.exceptions import GitSemverError, NoTagFoundError
from gitsemver.utils import get_logger, print_error, print_success, print_warning

logger = get_logger("commands.validate")


@click.command()
@click.option(
    "--version",
    "-v",
    "candidate",
    required=True,
    help="Version string to validate.",
)
@click.option(
    "--repo",
    "-C",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Run against the repository at this path instead of the current directory.",
)
@click.option(
    "--against",
    "-n",
    type=click.IntRange(min=1),
    default=None,
    help=(
        "Compare with the N-th most recent tag (1 = latest, default from config). "
        "Fails if fewer than N tags are reachable."
    ),
)
@click.option(
    "--tag-prefix",
    default=None,
    help="Prefix stripped from tags before parsing (overrides config).",
)
@pass_context
def validate(
    ctx: GitSemverContext,
    candidate: str,
    repo: Optional[Path],
    against: Optional[int],
    tag_prefix: Optional[str],
) -> None:
    """Validate a version against the semver grammar and a prior tag.

    Exits:
        0 if the version is valid and not older than the reference tag,
        1 otherwise.
    """
    repository = build_repository(ctx, repo, tag_prefix)
    index = against if against is not None else ctx.effective_config().reference_tag

    try:
        try:
            tag: Optional[str] = repository.nth_most_recent_tag(index)
        except NoTagFoundError as exc:
            # Only an untagged repository skips the comparison
            if exc.tags_found:
                raise
            print_warning(f"{exc.message}; skipping monotonicity check")
            tag = None

        reference = repository.strip_prefix(tag) if tag is not None else None
        result = check(candidate.strip(), reference)

    except GitSemverError as e:
        print_error(f"{e}")
        sys.exit(1)
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        logger.exception("Error in validate command")
        sys.exit(1)

    if not result.ok:
        print_error(result.message)
        sys.exit(1)

    if tag is None:
        print_success(f"{result.version} is a valid version")
    else:
        print_success(f"{result.version} is a valid version (reference tag {tag})")
