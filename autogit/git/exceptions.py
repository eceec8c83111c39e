"""Git-related exception classes.

Contains all exception classes for Git operations:
- GitError: Base exception for git-related errors
- CommitError: Raised when staging or committing fails
"""


class GitError(Exception):
    """Custom exception for git-related errors."""

    pass


class CommitError(GitError):
    """Raised when files cannot be staged or committed."""

    pass
