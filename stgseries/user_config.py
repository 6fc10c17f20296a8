"""Repository configuration and state for stgseries.

Handles the .stgseries/ directory in each repository:
- config.yaml: Repository overrides (stg_executable, color, theme)
- state.yaml: View state kept between invocations (the marked patch)
"""

from pathlib import Path
from typing import Optional

import yaml


# Default configuration values
DEFAULT_CONFIG = {
    "stg_executable": None,
    "color": None,
    "theme": {},
}

CONFIG_DIR_NAME = ".stgseries"


def get_config_dir(repo_root: Path) -> Path:
    """Get the repository config directory.

    Args:
        repo_root: The root directory of the git repository.

    Returns:
        Path to .stgseries/
    """
    return repo_root / CONFIG_DIR_NAME


def get_config_file(repo_root: Path) -> Path:
    """Return path to the config.yaml file."""
    return get_config_dir(repo_root) / "config.yaml"


def get_state_file(repo_root: Path) -> Path:
    """Return path to the state.yaml file."""
    return get_config_dir(repo_root) / "state.yaml"


def _load_yaml(path: Path) -> Optional[dict]:
    if not path.exists():
        return None
    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError):
        return None
    if not isinstance(data, dict):
        return None
    return data


def _save_yaml(path: Path, data: dict) -> None:
    # Ensure directory exists
    path.parent.mkdir(exist_ok=True)

    with open(path, "w") as f:
        yaml.dump(
            data,
            f,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        )


def load_config(repo_root: Path) -> dict:
    """Load the repository configuration from config.yaml.

    Missing keys are filled from DEFAULT_CONFIG. A missing or corrupted file
    yields the defaults.

    Args:
        repo_root: The root directory of the git repository.

    Returns:
        Configuration dictionary.
    """
    config = _load_yaml(get_config_file(repo_root))
    if config is None:
        return {key: (value.copy() if isinstance(value, dict) else value)
                for key, value in DEFAULT_CONFIG.items()}

    for key, value in DEFAULT_CONFIG.items():
        if key not in config:
            config[key] = value.copy() if isinstance(value, dict) else value
    return config


def save_config(repo_root: Path, config: dict) -> None:
    """Save the configuration to config.yaml.

    Args:
        repo_root: The root directory of the git repository.
        config: Configuration dictionary to save.
    """
    _save_yaml(get_config_file(repo_root), config)


def get_repo_stg_executable(repo_root: Path) -> Optional[str]:
    """Get the stg executable override for this repository, if any."""
    return load_config(repo_root).get("stg_executable")


def set_repo_stg_executable(repo_root: Path, executable: Optional[str]) -> None:
    """Set or clear the stg executable override for this repository.

    Args:
        repo_root: The root directory of the git repository.
        executable: Executable name or path, or None to clear.
    """
    config = load_config(repo_root)
    config["stg_executable"] = executable
    save_config(repo_root, config)


def reset_config(repo_root: Path) -> None:
    """Reset the repository configuration to DEFAULT_CONFIG.

    The marked patch in state.yaml is left alone.
    """
    save_config(repo_root, {key: (value.copy() if isinstance(value, dict) else value)
                            for key, value in DEFAULT_CONFIG.items()})


def load_state(repo_root: Path) -> dict:
    """Load the view state from state.yaml.

    Args:
        repo_root: The root directory of the git repository.

    Returns:
        State dictionary, empty if missing or unreadable.
    """
    return _load_yaml(get_state_file(repo_root)) or {}


def get_marked_patch(repo_root: Path) -> Optional[str]:
    """Get the marked patch name for this repository.

    Returns:
        The marked patch name, or None if no patch is marked.
    """
    marked = load_state(repo_root).get("marked_patch")
    return str(marked) if marked else None


def set_marked_patch(repo_root: Path, patch: Optional[str]) -> None:
    """Set or clear the marked patch for this repository.

    Args:
        repo_root: The root directory of the git repository.
        patch: Patch name to mark, or None to clear the mark.
    """
    state = load_state(repo_root)
    state["marked_patch"] = patch
    _save_yaml(get_state_file(repo_root), state)
