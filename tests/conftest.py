"""Shared test fixtures and configuration."""

import tempfile
from pathlib import Path

import pytest

from autogit.config import AutoGitConfig
from autogit.result import Err, ErrorKind, Ok


class FakeCommitter:
    """Committer that records what it was asked to commit."""

    def __init__(self, result=None):
        self.result = result if result is not None else Ok("abc123")
        self.calls = []
        self.contents_at_commit = {}

    def stage_and_commit(self, paths, message):
        self.calls.append((list(paths), message))
        for path in paths:
            self.contents_at_commit[path] = Path(path).read_bytes()
        return self.result


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def work_dir(temp_dir):
    """Working directory that relative paths resolve against."""
    path = temp_dir / "work"
    path.mkdir()
    return path


@pytest.fixture
def config(temp_dir, work_dir):
    """Configuration pointing at the temporary test directories."""
    return AutoGitConfig(
        work_dir=work_dir,
        tmp_dir=temp_dir / "tmp",
        home_dir=temp_dir / "home",
    )


@pytest.fixture
def global_config_dir(mocker, temp_dir):
    """Redirect ~/.autogit to a temporary directory."""
    config_dir = temp_dir / ".autogit"
    mocker.patch("autogit.global_config._CONFIG_DIR", config_dir)
    return config_dir


@pytest.fixture
def fake_committer():
    """Committer that always succeeds."""
    return FakeCommitter()


@pytest.fixture
def failing_committer():
    """Committer that always fails."""
    return FakeCommitter(Err(ErrorKind.COMMIT, "Failed to commit: hook rejected"))


@pytest.fixture
def sample_text():
    """File content with one commit message block."""
    return "a\n/*#COMMIT_MESSAGE\nline1\n\nline2\n#*/\nb"
