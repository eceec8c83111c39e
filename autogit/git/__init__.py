"""Git access for autogit.

This package provides:
- exceptions: GitError, CommitError
- runner: _run_git_command, get_repo_root
- committer: Committer, GitCommitter, stage_paths, unstage_paths, commit_paths,
             get_head_commit
"""

# Exceptions
from autogit.git.exceptions import (
    CommitError,
    GitError,
)

# Runner utilities
from autogit.git.runner import (
    _run_git_command,
    get_repo_root,
)

# Committing
from autogit.git.committer import (
    Committer,
    GitCommitter,
    commit_paths,
    get_head_commit,
    stage_paths,
    unstage_paths,
)


__all__ = [
    # Exceptions
    "CommitError",
    "GitError",
    # Runner
    "_run_git_command",
    "get_repo_root",
    # Committing
    "Committer",
    "GitCommitter",
    "commit_paths",
    "get_head_commit",
    "stage_paths",
    "unstage_paths",
]
