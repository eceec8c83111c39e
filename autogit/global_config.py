"""Global configuration management for autogit.

Handles user-level configuration stored in ~/.autogit/config.yaml:
- empty_message: What to do when no file carries a commit message block
- header_template: Header line written above each file's message section
"""

from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from autogit.exceptions import ConfigError


class GlobalConfigError(ConfigError):
    """Raised when there's an error with global configuration."""
    pass


_CONFIG_DIR = Path.home() / ".autogit"


def get_global_config_dir() -> Path:
    """Get the global autogit configuration directory.

    Returns:
        Path to ~/.autogit/
    """
    return _CONFIG_DIR


def get_config_file_path() -> Path:
    """Get path to config.yaml file.

    Returns:
        Path to ~/.autogit/config.yaml
    """
    return get_global_config_dir() / "config.yaml"


def load_global_config() -> Dict[str, Any]:
    """Load global configuration from ~/.autogit/config.yaml.

    Returns:
        Dictionary with configuration values. Empty dict if file doesn't exist.
    """
    config_file = get_config_file_path()

    if not config_file.exists():
        return {}

    try:
        with open(config_file, "r") as f:
            config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise GlobalConfigError(f"Failed to load config from {config_file}: {e}")

    if not isinstance(config, dict):
        raise GlobalConfigError(f"Config file {config_file} must contain a mapping")
    return config


def get_empty_message_policy() -> Optional[str]:
    """Get the empty commit message policy from global config.

    Returns:
        Policy name string, or None if not configured.
    """
    config = load_global_config()
    return config.get("empty_message")


def get_header_template() -> Optional[str]:
    """Get the message section header template from global config.

    Returns:
        Template string, or None if not configured.
    """
    config = load_global_config()
    return config.get("header_template")
