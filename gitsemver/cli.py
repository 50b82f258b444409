"""
Command-line interface for gitsemver.

This module provides the main CLI entry point and handles global options,
configuration loading, and command registration. Running ``gitsemver``
without a subcommand behaves like ``gitsemver get``.
"""

from __future__ import annotations

import os
import sys
import logging
from pathlib import Path
from typing import Optional

import click

from gitsemver.config import load_config
from gitsemver.commands.get import get
from gitsemver.commands.validate import validate
from gitsemver.__version__ import __version__
from gitsemver.context import GitSemverContext
from gitsemver.exceptions import ConfigError, GitSemverError
from gitsemver.utils.logger import get_logger, level_for_verbosity, setup_logging
from gitsemver.utils.console import print_error, print_warning, reconfigure_console

logger = get_logger("cli")


@click.group(
    invoke_without_command=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to configuration file.",
    envvar="GITSEMVER_CONFIG",
)
@click.option(
    "--verbose",
    "-v",
    count=True,
    help="Increase verbosity (can be repeated: -v, -vv).",
)
@click.option(
    "--color/--no-color",
    default=True,
    help="Enable or disable colored output.",
    envvar="GITSEMVER_COLOR",
)
@click.version_option(
    version=__version__,
    prog_name="gitsemver",
    message="%(prog)s %(version)s",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[Path],
    verbose: int,
    color: bool,
) -> None:
    """gitsemver: semantic versions derived from git tags.

    \b
    Available commands:
      gitsemver get                Print the version of the working tree
      gitsemver validate -v X      Check X against the latest tag

    \b
    Examples:
      gitsemver
      gitsemver get --format pep440
      gitsemver validate -v 1.4.0
      gitsemver -vv get

    Use ``gitsemver COMMAND --help`` for command-specific options.
    """
    _configure_logging(verbose)

    # Respect NO_COLOR for rich and the log formatter
    if color:
        os.environ.pop("NO_COLOR", None)
    else:
        os.environ["NO_COLOR"] = "1"
    reconfigure_console()

    try:
        loaded_config = load_config(config)
    except ConfigError as exc:
        print_error(str(exc))
        raise SystemExit(1) from exc

    gitsemver_ctx = GitSemverContext()
    gitsemver_ctx.config_path = loaded_config.source_path
    gitsemver_ctx.color = color
    gitsemver_ctx.verbose = verbose
    gitsemver_ctx.config = loaded_config
    ctx.obj = gitsemver_ctx

    logger.debug("gitsemver v%s", __version__)
    logger.debug("Config path: %s", gitsemver_ctx.config_path)
    logger.debug("Configuration: %s", loaded_config.to_log_dict())
    logger.debug("Verbosity: %s | Color: %s", verbose, color)

    if ctx.invoked_subcommand is None:
        # A real sub-context so get's envvar-backed options are resolved
        with get.make_context("get", [], parent=ctx) as sub_ctx:
            get.invoke(sub_ctx)


def _configure_logging(verbose: int) -> None:
    """Configure logging level based on verbosity flags."""
    level = level_for_verbosity(verbose)
    setup_logging(level=level, verbose=verbose >= 2)
    logger.debug("Logging initialized at %s level", logging.getLevelName(level))


# Register CLI subcommands
cli.add_command(get)
cli.add_command(validate)


def main(args: Optional[list] = None) -> int:
    """Main entry point for the gitsemver CLI.

    Returns:
        Exit code:
            0   Success
            1   Invalid version, git failure or other application error
            2   Usage error (Click), including unknown commands
            130 Interrupted by user (Ctrl+C)
    """
    try:
        rv = cli(args=args, standalone_mode=False)
        return rv if isinstance(rv, int) else 0

    except click.ClickException as exc:
        exc.show()
        return exc.exit_code

    except SystemExit as exc:
        # Commands exit with sys.exit(); keep their status
        if exc.code is None:
            return 0
        return exc.code if isinstance(exc.code, int) else 1

    except GitSemverError as exc:
        print_error(str(exc))
        logger.debug(
            "GitSemverError details: %s",
            exc.details or "<none>",
            exc_info=True,
        )
        return 1

    except (click.exceptions.Abort, KeyboardInterrupt):
        print_warning("\nOperation cancelled by user")
        return 130

    except Exception as exc:
        print_error(f"Unexpected error: {exc}")
        logger.exception("Unhandled exception in CLI")
        return 1


if __name__ == "__main__":
    sys.exit(main())
