"""Exception classes for autogit.

Contains:
- AutoGitError: Base exception for autogit errors
- UsageError: Raised for missing arguments or environment settings
- ConfigError: Raised when the configuration cannot be assembled
"""


class AutoGitError(Exception):
    """Base exception for autogit errors."""

    pass


class UsageError(AutoGitError):
    """Raised when the tool is invoked without what it needs to run."""

    pass


class ConfigError(AutoGitError):
    """Raised when the configuration is invalid."""

    pass
