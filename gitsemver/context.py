"""
Shared context object for gitsemver CLI commands.

An instance is created once per invocation by the ``cli`` group and handed
to subcommands through Click's context mechanism.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import click

from gitsemver.config import GitSemverConfig


class GitSemverContext:
    """Global context object for gitsemver CLI commands.

    Attributes:
        config_path: Path to the configuration file in use, if any.
        verbose: Verbosity level (0=WARNING, 1=INFO, 2+=DEBUG).
        color: Whether colored terminal output is enabled.
        config: Loaded configuration; ``None`` until the group callback runs.
    """

    __slots__ = ("config_path", "verbose", "color", "config")

    def __init__(self) -> None:
        self.config_path: Optional[Path] = None
        self.verbose: int = 0
        self.color: bool = True
        self.config: Optional[GitSemverConfig] = None

    def effective_config(self) -> GitSemverConfig:
        """Return the loaded configuration, or defaults when none was loaded."""
        return self.config if self.config is not None else GitSemverConfig()


#: Click decorator for injecting :class:`GitSemverContext` into commands.
pass_context = click.make_pass_decorator(GitSemverContext, ensure=True)
