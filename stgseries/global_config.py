"""Global configuration management for stgseries.

Handles user-level configuration stored in ~/.stgseries/config.yaml:
- stg_executable: Name or path of the stg executable
- color: Whether the series is printed with ANSI styling
- theme: Per style tag overrides (see stgseries.series.config)
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


class GlobalConfigError(Exception):
    """Raised when there's an error with global configuration."""
    pass


_CONFIG_DIR = Path.home() / ".stgseries"

DEFAULT_STG_EXECUTABLE = "stg"

# Environment variable overriding the configured stg executable
STG_EXECUTABLE_ENV = "STGSERIES_STG"

# Keys cleared by `stgseries config reset`
RESETTABLE_KEYS = ("stg_executable", "color", "theme")


def get_global_config_dir() -> Path:
    """Get the global stgseries configuration directory.

    Returns:
        Path to ~/.stgseries/
    """
    return _CONFIG_DIR


def ensure_global_config_dir() -> Path:
    """Ensure the global config directory exists.

    Returns:
        Path to ~/.stgseries/
    """
    config_dir = get_global_config_dir()
    config_dir.mkdir(exist_ok=True)
    return config_dir


def get_config_file_path() -> Path:
    """Get path to config.yaml file.

    Returns:
        Path to ~/.stgseries/config.yaml
    """
    return get_global_config_dir() / "config.yaml"


def load_global_config() -> Dict[str, Any]:
    """Load global configuration from ~/.stgseries/config.yaml.

    Returns:
        Dictionary with configuration values. Empty dict if file doesn't exist.

    Raises:
        GlobalConfigError: If the file exists but cannot be read or is not a
            mapping.
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
        raise GlobalConfigError(f"Config in {config_file} must be a mapping")
    return config


def save_global_config(config: Dict[str, Any]) -> None:
    """Save global configuration to ~/.stgseries/config.yaml.

    Args:
        config: Configuration dictionary to save.
    """
    ensure_global_config_dir()
    config_file = get_config_file_path()

    try:
        with open(config_file, "w") as f:
            yaml.dump(config, f, default_flow_style=False, sort_keys=False)
    except OSError as e:
        raise GlobalConfigError(f"Failed to save config to {config_file}: {e}")


def get_stg_executable() -> str:
    """Get the stg executable to run.

    Priority: STGSERIES_STG environment variable > global config > "stg".

    Returns:
        Executable name or path.
    """
    env_value = os.environ.get(STG_EXECUTABLE_ENV)
    if env_value:
        return env_value
    config = load_global_config()
    return config.get("stg_executable") or DEFAULT_STG_EXECUTABLE


def set_stg_executable(executable: str) -> None:
    """Set the stg executable in global config.

    Args:
        executable: Executable name or path.
    """
    config = load_global_config()
    config["stg_executable"] = executable
    save_global_config(config)


def reset_global_config() -> None:
    """Remove the stg executable, color and theme settings from global config."""
    config = load_global_config()
    for key in RESETTABLE_KEYS:
        config.pop(key, None)
    save_global_config(config)


def get_color_preference() -> Optional[bool]:
    """Get the color preference from global config.

    Returns:
        True/False if set, None otherwise.
    """
    config = load_global_config()
    return config.get("color")


def get_theme_config() -> dict:
    """Get the theme section from global config.

    Returns:
        Dictionary mapping style tag names to style attributes.
    """
    config = load_global_config()
    return config.get("theme") or {}


def is_configured() -> bool:
    """Check if stgseries has a global config file.

    Returns:
        True if config.yaml exists, False otherwise.
    """
    return get_config_file_path().exists()
