"""Tests for the ``gitsemver get`` command and the bare ``gitsemver`` call.

git is faked with the ``fake_git`` fixture; every test runs in an empty
temporary directory so no configuration file is discovered by accident.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from gitsemver.cli import cli


@pytest.fixture
def runner(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> CliRunner:
    monkeypatch.chdir(tmp_path)
    return CliRunner()


def _last_line(output: str) -> str:
    return output.strip().splitlines()[-1]


@pytest.mark.unit
class TestGetCommand:
    """Tests for computing the effective version."""

    def test_no_arguments_behaves_like_get(self, runner: CliRunner, fake_git) -> None:
        fake_git.tags = ["v1.2.3"]

        result = runner.invoke(cli, [])

        assert result.exit_code == 0
        assert result.output == "1.2.3+main.abc1234\n"

    def test_no_arguments_reads_forced_version_from_environment(
        self, runner: CliRunner, fake_git
    ) -> None:
        fake_git.tags = ["v1.1.0"]
        env = {"GITSEMVER_FORCE_VERSION": "1.5.0"}

        bare = runner.invoke(cli, [], env=env)
        explicit = runner.invoke(cli, ["get"], env=env)

        assert bare.exit_code == 0
        assert bare.output == "1.5.0\n"
        assert bare.output == explicit.output

    def test_get_on_tagged_commit(self, runner: CliRunner, fake_git) -> None:
        fake_git.tags = ["v1.2.3"]

        result = runner.invoke(cli, ["get"])

        assert result.exit_code == 0
        assert result.output == "1.2.3+main.abc1234\n"

    def test_get_with_distance_and_prerelease(self, runner: CliRunner, fake_git) -> None:
        fake_git.tags = ["v1.2.3-beta"]
        fake_git.commits = {"v1.2.3-beta..HEAD": 4}
        fake_git.branch = "feature-x"

        result = runner.invoke(cli, ["get"])

        assert result.exit_code == 0
        assert result.output == "1.2.3-beta.dev.4+feature-x.abc1234\n"

    def test_get_pep440_format(self, runner: CliRunner, fake_git) -> None:
        fake_git.tags = ["v1.2.3"]
        fake_git.commits = {"v1.2.3..HEAD": 2}

        result = runner.invoke(cli, ["get", "--format", "pep440"])

        assert result.exit_code == 0
        assert result.output == "1.2.3.dev2+main.abc1234\n"

    def test_get_pep440_unmappable(self, runner: CliRunner, fake_git) -> None:
        fake_git.tags = ["v1.2.3-snapshot"]

        result = runner.invoke(cli, ["get", "-f", "pep440"])

        assert result.exit_code == 1
        assert "[ERROR]" in result.output
        assert "PEP 440" in result.output

    def test_get_without_tags(self, runner: CliRunner, fake_git) -> None:
        fake_git.tags = []
        fake_git.commits = {"HEAD": 3}

        result = runner.invoke(cli, ["get"])

        assert result.exit_code == 0
        assert _last_line(result.output) == "0.0.0-dev.3+main.abc1234"
        assert "No tag reachable from HEAD" in result.output

    def test_get_malformed_tag(self, runner: CliRunner, fake_git) -> None:
        fake_git.tags = ["v1.2"]

        result = runner.invoke(cli, ["get"])

        assert result.exit_code == 1
        assert "[ERROR] Latest tag is not a valid semantic version" in result.output

    def test_get_outside_repository(self, runner: CliRunner, fake_git) -> None:
        fake_git.failures = {"tag": "fatal: not a git repository"}

        result = runner.invoke(cli, ["get"])

        assert result.exit_code == 1
        assert "not a git repository" in result.output

    def test_get_tag_prefix_option(self, runner: CliRunner, fake_git) -> None:
        fake_git.tags = ["rel-2.0.0"]

        result = runner.invoke(cli, ["get", "--tag-prefix", "rel-"])

        assert result.exit_code == 0
        assert result.output == "2.0.0+main.abc1234\n"

    def test_get_uses_config_file(self, runner: CliRunner, fake_git, tmp_path: Path) -> None:
        (tmp_path / "gitsemver.toml").write_text(
            "[gitsemver]\ntag_prefix = 'rel-'\ndev_label = 'pre'\nhash_length = 4\n",
            encoding="utf-8",
        )
        fake_git.tags = ["rel-2.0.0"]
        fake_git.commits = {"rel-2.0.0..HEAD": 1}

        result = runner.invoke(cli, ["get"])

        assert result.exit_code == 0
        assert result.output == "2.0.0-pre.1+main.abc1\n"

    def test_get_repo_option_runs_git_there(self, runner: CliRunner, fake_git, tmp_path: Path) -> None:
        other = tmp_path / "other"
        other.mkdir()
        fake_git.tags = ["v1.0.0"]

        result = runner.invoke(cli, ["get", "--repo", str(other)])

        assert result.exit_code == 0
        assert result.output == "1.0.0+main.abc1234\n"


@pytest.mark.unit
class TestGetForcedVersion:
    """Tests for --force-version."""

    def test_forced_version_is_printed(self, runner: CliRunner, fake_git) -> None:
        fake_git.tags = ["v1.1.0"]

        result = runner.invoke(cli, ["get", "--force-version", "1.2.0"])

        assert result.exit_code == 0
        assert result.output == "1.2.0\n"

    def test_forced_version_from_environment(self, runner: CliRunner, fake_git) -> None:
        fake_git.tags = ["v1.1.0"]

        result = runner.invoke(cli, ["get"], env={"GITSEMVER_FORCE_VERSION": "1.1.0-rc.2"})

        assert result.exit_code == 0
        assert result.output == "1.1.0-rc.2\n"

    def test_forced_regression_fails(self, runner: CliRunner, fake_git) -> None:
        fake_git.tags = ["v1.1.0"]

        result = runner.invoke(cli, ["get", "--force-version", "1.0.0"])

        assert result.exit_code == 1
        assert "older than reference tag 1.1.0" in result.output

    def test_forced_malformed_fails(self, runner: CliRunner, fake_git) -> None:
        fake_git.tags = ["v1.1.0"]

        result = runner.invoke(cli, ["get", "--force-version", "1.2"])

        assert result.exit_code == 1
        assert "Not a valid semantic version" in result.output

    def test_forced_without_tags(self, runner: CliRunner, fake_git) -> None:
        fake_git.tags = []

        result = runner.invoke(cli, ["get", "--force-version", "0.1.0"])

        assert result.exit_code == 0
        assert result.output == "0.1.0\n"

    def test_forced_version_in_pep440(self, runner: CliRunner, fake_git) -> None:
        fake_git.tags = ["v1.1.0"]

        result = runner.invoke(cli, ["get", "--force-version", "1.2.0-rc.1", "--format", "pep440"])

        assert result.exit_code == 0
        assert result.output == "1.2.0rc1\n"
