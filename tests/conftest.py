from __future__ import annotations

import logging
import subprocess
from typing import Dict, Generator, List, Optional, Sequence
from unittest.mock import patch

import pytest

from gitsemver.utils.console import reconfigure_console


class FakeGit:
    """Stand-in for ``subprocess.run`` answering the git queries gitsemver makes.

    Every call is recorded in ``calls`` so tests can assert on the exact
    command lines.
    """

    def __init__(
        self,
        *,
        tags: Sequence[str] = (),
        branch: str = "main",
        short_hash: str = "abc1234",
        commits: Optional[Dict[str, int]] = None,
        failures: Optional[Dict[str, str]] = None,
    ) -> None:
        self.tags = list(tags)
        self.branch = branch
        self.short_hash = short_hash
        self.commits = commits or {}
        self.failures = failures or {}
        self.calls: List[List[str]] = []

    def __call__(self, command: Sequence[str], **kwargs) -> subprocess.CompletedProcess:
        args = list(command)
        self.calls.append(args)
        subcommand = args[1]

        if subcommand in self.failures:
            return subprocess.CompletedProcess(args, 128, stdout="", stderr=self.failures[subcommand])

        if subcommand == "tag":
            stdout = "\n".join(self.tags) + ("\n" if self.tags else "")
        elif subcommand == "rev-list":
            stdout = f"{self.commits.get(args[-1], 0)}\n"
        elif args[1:3] == ["rev-parse", "--abbrev-ref"]:
            stdout = f"{self.branch}\n"
        elif subcommand == "rev-parse":
            length = int(args[2].split("=", 1)[1])
            stdout = f"{self.short_hash[:length]}\n"
        else:
            return subprocess.CompletedProcess(args, 1, stdout="", stderr=f"unexpected {args}")

        return subprocess.CompletedProcess(args, 0, stdout=stdout, stderr="")


@pytest.fixture
def fake_git() -> Generator[FakeGit, None, None]:
    """Patch git subprocess calls with a configurable :class:`FakeGit`."""
    fake = FakeGit()
    with patch("gitsemver.core.repository.subprocess.run", side_effect=fake):
        yield fake


@pytest.fixture(autouse=True)
def clean_gitsemver_state(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Isolate tests from ambient env vars, console singletons and log handlers."""
    for name in ("GITSEMVER_CONFIG", "GITSEMVER_COLOR", "GITSEMVER_FORCE_VERSION"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("NO_COLOR", "1")
    reconfigure_console()

    yield

    reconfigure_console()
    root_logger = logging.getLogger("gitsemver")
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)
