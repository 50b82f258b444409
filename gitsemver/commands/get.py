"""Get command implementation for gitsemver.

Prints the effective version of the working tree: the latest tag plus the
commit distance, branch and short hash::

    $ gitsemver get
    1.4.0-dev.3+main.1a2b3c4

    # Python packaging friendly output
    $ gitsemver get --format pep440
    1.4.0.dev3+main.1a2b3c4

    # Release builds pin the version explicitly; it is still validated
    $ GITSEMVER_FORCE_VERSION=1.5.0 gitsemver get
    1.5.0

Only the version goes to stdout. Diagnostics go to stderr and any failure
exits with status 1.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import click

from gitsemver.commands import build_repository
from gitsemver.constants import OUTPUT_FORMATS
from gitsemver.context import GitSemverContext, pass_context
from gitsemver.core.composer import current_version
from gitsemver.core.repository import GitRepository
from gitsemver.core.validator import validate as validate_version
from gitsemver.exceptions import GitSemverError, NoTagFoundError
from gitsemver.utils import get_logger, print_error, to_pep440

logger = get_logger("commands.get")


@click.command()
@click.option(
    "--repo",
    "-C",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Run against the repository at this path instead of the current directory.",
)
@click.option(
    "--force-version",
    envvar="GITSEMVER_FORCE_VERSION",
    default=None,
    help="Print this version instead of the computed one (validated first).",
)
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS, case_sensitive=False),
    default="semver",
    help="Output format.",
)
@click.option(
    "--tag-prefix",
    default=None,
    help="Prefix stripped from tags before parsing (overrides config).",
)
@pass_context
def get(
    ctx: GitSemverContext,
    repo: Optional[Path],
    force_version: Optional[str],
    output_format: str,
    tag_prefix: Optional[str],
) -> None:
    """Print the semantic version of the current repository state.

    Exits:
        0 on success, 1 if git metadata cannot be read, the latest tag is
        not a semantic version, or a forced version is invalid.
    """
    repository = build_repository(ctx, repo, tag_prefix)

    try:
        if force_version:
            version = _forced_version(repository, force_version)
        else:
            version = current_version(
                repository,
                dev_label=ctx.effective_config().dev_label,
            )

        if output_format.lower() == "pep440":
            version = to_pep440(version)

    except GitSemverError as e:
        print_error(f"{e}")
        sys.exit(1)
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        logger.exception("Error in get command")
        sys.exit(1)

    click.echo(version)


def _forced_version(repository: GitRepository, candidate: str) -> str:
    """Validate a forced version against the latest tag and return it."""
    try:
        reference: Optional[str] = repository.strip_prefix(repository.latest_tag())
    except NoTagFoundError:
        logger.info("No tags found, accepting forced version without comparison")
        reference = None

    logger.info("Using forced version %s (reference %s)", candidate, reference)
    return str(validate_version(candidate.strip(), reference))
