"""Tests for the CLI module."""

import json
import re
from unittest.mock import MagicMock, patch

from click.testing import CliRunner

from versionvine import __version__
from versionvine.cli import main
from versionvine.errors import GitError


def _mock_git(branch: str = "develop", tags: list[str] | None = None) -> MagicMock:
    repo = MagicMock()
    repo.current_branch.return_value = branch
    repo.reachable_tags.return_value = ["1.2.3"] if tags is None else tags
    repo.short_hash.return_value = "56c1976"
    repo.count_commits.return_value = 10
    repo.tags_at_head.return_value = []
    return repo


def test_main_help() -> None:
    """Test that --help works."""
    runner = CliRunner()
    result = runner.invoke(main, ["--help"])
    assert result.exit_code == 0
    assert "version-vine" in result.output
    assert "--app-name" in result.output


def test_version() -> None:
    """Test that --version works."""
    runner = CliRunner()
    result = runner.invoke(main, ["--version"])
    assert result.exit_code == 0
    assert re.search(r"\d+\.\d+\.\d+", result.output)
    assert __version__ in result.output


def test_json_output() -> None:
    """Test the default JSON record."""
    repo = _mock_git()
    with patch("versionvine.cli.GitClient", return_value=repo):
        result = CliRunner().invoke(main, ["--skip-fetch"])

    assert result.exit_code == 0
    assert json.loads(result.stdout) == {
        "app_version": "1.2.4-beta.10+56c1976",
        "container_tag": "1.2.4.beta.10.56c1976",
        "git_branch": "develop",
        "git_rev": "56c1976",
        "rev_count": "10",
    }
    repo.fetch_tags.assert_not_called()


def test_options() -> None:
    """Test app name and build number reach the pipeline."""
    repo = _mock_git(branch="release/app-2.0.0", tags=["app-1.0.0"])
    with patch("versionvine.cli.GitClient", return_value=repo):
        result = CliRunner().invoke(main, ["-a", "app", "-b", "7"])

    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["app_version"] == "2.0.0-rc.7+56c1976"
    assert data["rev_count"] == "7"
    repo.fetch_tags.assert_called_once()


def test_env_vars() -> None:
    """Test options can come from the environment."""
    repo = _mock_git(tags=["app-1.0.0"])
    env = {"VERSION_VINE_APP_NAME": "app", "VERSION_VINE_BUILD_NUMBER": "3"}
    with patch("versionvine.cli.GitClient", return_value=repo):
        result = CliRunner().invoke(main, ["-s"], env=env)

    assert result.exit_code == 0
    assert json.loads(result.stdout)["app_version"] == "1.0.1-beta.3+56c1976"


def test_env_format() -> None:
    """Test KEY=value output."""
    with patch("versionvine.cli.GitClient", return_value=_mock_git(branch="main")):
        result = CliRunner().invoke(main, ["-s", "--format", "env"])

    assert result.exit_code == 0
    assert "APP_VERSION=1.2.3+56c1976" in result.stdout.splitlines()


def test_text_format() -> None:
    """Test the table output."""
    with patch("versionvine.cli.GitClient", return_value=_mock_git(branch="main")):
        result = CliRunner().invoke(main, ["-s", "-f", "text"])

    assert result.exit_code == 0
    assert "1.2.3+56c1976" in result.stdout


def test_unsupported_branch_exits_nonzero() -> None:
    """Test an unsupported branch fails without a record."""
    with patch("versionvine.cli.GitClient", return_value=_mock_git(branch="chore/cleanup")):
        result = CliRunner().invoke(main, ["-s"])

    assert result.exit_code == 1
    assert "app_version" not in result.stdout
    assert "chore/cleanup" in result.output


def test_git_failure_exits_nonzero() -> None:
    """Test a failing fetch stops the run."""
    repo = _mock_git()
    repo.fetch_tags.side_effect = GitError("Git command failed: no remote")
    with patch("versionvine.cli.GitClient", return_value=repo):
        result = CliRunner().invoke(main, [])

    assert result.exit_code == 1
    assert "no remote" in result.output


def test_invalid_app_name() -> None:
    """Test a malformed app name is a usage error."""
    result = CliRunner().invoke(main, ["--app-name", "my app"])
    assert result.exit_code == 2


def test_negative_build_number() -> None:
    """Test a negative build number is a usage error."""
    result = CliRunner().invoke(main, ["--build-number", "-1"])
    assert result.exit_code == 2
