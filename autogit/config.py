"""Runtime configuration for autogit.

The working directory, temporary directory and home directory are read from
the process once, in build_config(), and passed to the pipeline as an
AutoGitConfig instead of being looked up deep inside the pipeline.
"""

import os
from enum import Enum
from pathlib import Path
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from autogit import global_config
from autogit.exceptions import ConfigError, UsageError


class EmptyMessagePolicy(Enum):
    """What to do when none of the files carries a commit message block."""

    FAIL = "fail"  # Abort before touching any file
    SKIP = "skip"  # Leave files untouched and make no commit
    ALLOW = "allow"  # Commit with an empty message


# ============================================================
# DEFAULT FALLBACK VALUES
# ============================================================

TMPDIR_ENV_VAR = "TMPDIR"
DEFAULT_EMPTY_MESSAGE_POLICY = EmptyMessagePolicy.FAIL
DEFAULT_HEADER_TEMPLATE = "File: {label}:"


class AutoGitConfig(BaseModel):
    """Configuration for a single autogit invocation."""

    model_config = ConfigDict(frozen=True)

    work_dir: Path
    tmp_dir: Path
    home_dir: Path
    empty_message: EmptyMessagePolicy = DEFAULT_EMPTY_MESSAGE_POLICY
    header_template: str = DEFAULT_HEADER_TEMPLATE

    @field_validator("header_template")
    @classmethod
    def header_must_name_label(cls, v: str) -> str:
        if "{label}" not in v:
            raise ValueError("header_template must contain '{label}'")
        return v


def build_config(
    work_dir: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> AutoGitConfig:
    """Assemble the configuration from the environment and global config.

    Args:
        work_dir: Directory relative paths are resolved against. Defaults to
            the process working directory.
        environ: Environment mapping. Defaults to os.environ.

    Returns:
        The configuration for this invocation.

    Raises:
        UsageError: If the temporary directory setting is absent.
        ConfigError: If the global configuration holds invalid values.
    """
    environ = os.environ if environ is None else environ

    tmp_dir = environ.get(TMPDIR_ENV_VAR)
    if not tmp_dir:
        raise UsageError(f"{TMPDIR_ENV_VAR} not set")

    home = environ.get("HOME")
    home_dir = Path(home) if home else Path.home()

    values = {
        "work_dir": work_dir or Path.cwd(),
        "tmp_dir": Path(tmp_dir),
        "home_dir": home_dir,
    }

    policy = global_config.get_empty_message_policy()
    if policy:
        values["empty_message"] = policy

    header = global_config.get_header_template()
    if header:
        values["header_template"] = header

    try:
        return AutoGitConfig(**values)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}")
