"""
Executable module for gitsemver.

Running:
    python -m gitsemver

is equivalent to:
    gitsemver

This module forwards execution to the CLI entrypoint in `gitsemver.cli`.
"""

from __future__ import annotations

import sys


def _print_startup_error(exc: ImportError) -> None:
    """Explain on stderr why the CLI could not be loaded."""
    sys.stderr.write("gitsemver CLI could not be loaded.\n")
    sys.stderr.write(f"Python version   : {sys.version}\n")
    try:
        from gitsemver.__version__ import __version__

        sys.stderr.write(f"gitsemver version: {__version__}\n")
    except ImportError:
        sys.stderr.write("gitsemver version: <unknown>\n")
    sys.stderr.write("\n")
    sys.stderr.write(f"ImportError: {exc}\n")


def main() -> int:
    """
    Main entrypoint when executing `python -m gitsemver`.

    Returns:
        Exit code returned by the CLI, or 1 if it cannot be imported.
    """
    try:
        # Import lazily so click and rich load only for CLI use
        from gitsemver.cli import main as cli_main
    except ImportError as exc:
        _print_startup_error(exc)
        return 1

    return cli_main()


if __name__ == "__main__":
    sys.exit(main())
