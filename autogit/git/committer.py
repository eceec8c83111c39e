"""Staging and committing files.

Contains:
- Committer: Interface the pipeline uses to commit files
- stage_paths: Stage exactly the given paths
- unstage_paths: Reset the given paths in the index to HEAD
- commit_paths: Commit exactly the given paths with a message
- get_head_commit: Get the current HEAD commit id
- GitCommitter: Committer backed by the git command line
"""

from pathlib import Path
from typing import Optional, Protocol

from autogit.git.exceptions import CommitError, GitError
from autogit.git.runner import _run_git_command
from autogit.result import Err, ErrorKind, Ok, Result


class Committer(Protocol):
    """Stages a set of paths and commits them with a message."""

    def stage_and_commit(self, paths: list[str], message: str) -> Result:
        """Stage exactly paths and create one commit.

        Returns:
            Ok with the new commit id (None if it cannot be read), or Err(COMMIT).
        """
        ...


def stage_paths(paths: list[str], cwd: Optional[Path] = None) -> None:
    """Stage the given paths.

    Raises:
        CommitError: If git add fails.
    """
    try:
        _run_git_command(["add", "--"] + paths, cwd=cwd)
    except GitError as e:
        raise CommitError(f"Failed to stage files: {e}")


def unstage_paths(paths: list[str], cwd: Optional[Path] = None) -> None:
    """Reset the given paths in the index to their HEAD state.

    Raises:
        GitError: If git reset fails.
    """
    _run_git_command(["reset", "-q", "--"] + paths, cwd=cwd)


def commit_paths(
    paths: list[str],
    message: str,
    cwd: Optional[Path] = None,
    allow_empty_message: bool = False,
) -> None:
    """Commit the given paths, and nothing else, with message.

    The message is passed on stdin so it is never split or quoted by a shell.

    Raises:
        CommitError: If git commit fails.
    """
    args = ["commit", "-F", "-"]
    if allow_empty_message:
        args.append("--allow-empty-message")
    args += ["--"] + paths

    try:
        _run_git_command(args, cwd=cwd, input_text=message)
    except GitError as e:
        raise CommitError(f"Failed to commit: {e}")


def get_head_commit(cwd: Optional[Path] = None) -> str:
    """Get the id of the HEAD commit."""
    return _run_git_command(["rev-parse", "HEAD"], cwd=cwd)


class GitCommitter:
    """Committer that runs git in a working directory."""

    def __init__(self, repo_dir: Path, allow_empty_message: bool = False):
        self.repo_dir = Path(repo_dir)
        self.allow_empty_message = allow_empty_message

    def stage_and_commit(self, paths: list[str], message: str) -> Result:
        try:
            stage_paths(paths, cwd=self.repo_dir)
        except GitError as e:
            return Err(ErrorKind.COMMIT, str(e))

        try:
            commit_paths(
                paths,
                message,
                cwd=self.repo_dir,
                allow_empty_message=self.allow_empty_message,
            )
        except GitError as e:
            detail = str(e)
            # Leave no stripped content in the index
            try:
                unstage_paths(paths, cwd=self.repo_dir)
            except GitError as reset_error:
                detail += f"\nAlso failed to unstage files: {reset_error}"
            return Err(ErrorKind.COMMIT, detail)

        # The commit exists even if HEAD cannot be read
        try:
            return Ok(get_head_commit(cwd=self.repo_dir))
        except GitError:
            return Ok(None)
