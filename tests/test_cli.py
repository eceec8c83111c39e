"""Tests for autogit.cli module."""

from unittest.mock import MagicMock

import pytest
from typer.testing import CliRunner

from autogit.cli import app
from autogit.config import EmptyMessagePolicy
from autogit.exceptions import UsageError
from autogit.git import GitError
from autogit.result import Err, ErrorKind, Ok


runner = CliRunner()

CONTENT = "/*#COMMIT_MESSAGE\nUpdate notes\n#*/\nnotes\n"


@pytest.fixture
def cli_env(mocker, config, work_dir):
    """Patch configuration and git lookups used by the CLI."""
    mocker.patch("autogit.cli.main.load_dotenv")
    mocker.patch("autogit.cli.main.build_config", return_value=config)
    mocker.patch("autogit.cli.main.get_repo_root", return_value=work_dir)
    committer = MagicMock()
    committer.stage_and_commit.return_value = Ok("abc123")
    committer_cls = mocker.patch("autogit.cli.main.GitCommitter", return_value=committer)
    return committer, committer_cls


class TestMainCommand:
    """Tests for the autogit command."""

    def test_no_paths_prints_usage(self):
        """Test that running without paths prints usage and fails."""
        result = runner.invoke(app, [])

        assert result.exit_code == 1
        assert "Usage: autogit" in result.output

    def test_missing_tmpdir(self, mocker):
        """Test that a missing TMPDIR fails before touching files."""
        mocker.patch("autogit.cli.main.load_dotenv")
        mocker.patch("autogit.cli.main.build_config", side_effect=UsageError("TMPDIR not set"))

        result = runner.invoke(app, ["notes.txt"])

        assert result.exit_code == 1
        assert "TMPDIR not set" in result.output

    def test_not_a_repository(self, mocker, config):
        """Test that running outside a repository fails."""
        mocker.patch("autogit.cli.main.load_dotenv")
        mocker.patch("autogit.cli.main.build_config", return_value=config)
        mocker.patch("autogit.cli.main.get_repo_root", side_effect=GitError("not a repo"))

        result = runner.invoke(app, ["notes.txt"])

        assert result.exit_code == 1
        assert "git error" in result.output.lower()

    def test_commits_file(self, cli_env, work_dir):
        """Test a successful commit."""
        committer, committer_cls = cli_env
        (work_dir / "notes.txt").write_text(CONTENT)

        result = runner.invoke(app, ["./notes.txt"])

        assert result.exit_code == 0
        assert "Commit successful!" in result.output
        assert "abc123" in result.output
        assert (work_dir / "notes.txt").read_text() == "notes\n"
        committer_cls.assert_called_once_with(work_dir, allow_empty_message=False)
        paths, message = committer.stage_and_commit.call_args[0]
        assert paths == [str(work_dir / "notes.txt")]
        assert "Update notes" in message

    def test_commit_failure_restores_and_exits_nonzero(self, cli_env, work_dir):
        """Test that a failed commit restores the file and exits with 1."""
        committer, _ = cli_env
        committer.stage_and_commit.return_value = Err(ErrorKind.COMMIT, "hook rejected")
        (work_dir / "notes.txt").write_text(CONTENT)

        result = runner.invoke(app, ["notes.txt"])

        assert result.exit_code == 1
        assert "hook rejected" in result.output
        assert "Commit failed!" in result.output
        assert (work_dir / "notes.txt").read_text() == CONTENT

    def test_no_message_block_under_fail_policy(self, cli_env, work_dir):
        """Test that a missing message block is reported without a restore."""
        committer, _ = cli_env
        (work_dir / "notes.txt").write_text("plain\n")

        result = runner.invoke(app, ["notes.txt"])

        assert result.exit_code == 1
        assert "No /*#COMMIT_MESSAGE block found" in result.output
        assert "restored" not in result.output
        assert (work_dir / "notes.txt").read_text() == "plain\n"
        committer.stage_and_commit.assert_not_called()

    def test_skipped_when_no_message(self, mocker, cli_env, config, work_dir):
        """Test the skip policy end to end."""
        committer, _ = cli_env
        skip_config = config.model_copy(update={"empty_message": EmptyMessagePolicy.SKIP})
        mocker.patch("autogit.cli.main.build_config", return_value=skip_config)
        (work_dir / "notes.txt").write_text("plain\n")

        result = runner.invoke(app, ["notes.txt"])

        assert result.exit_code == 0
        assert "Nothing was committed" in result.output
        committer.stage_and_commit.assert_not_called()

    def test_debug_shows_steps(self, cli_env, work_dir):
        """Test that --debug prints pipeline steps."""
        (work_dir / "notes.txt").write_text(CONTENT)

        result = runner.invoke(app, ["--debug", "notes.txt"])

        assert result.exit_code == 0
        assert "Snapshotting 1 file(s)" in result.output

    def test_version(self):
        """Test the --version flag."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert "autogit" in result.output
