"""Global configuration management for commithelper.

Handles user-level configuration stored in ~/.commithelper/config.yaml:
- max_subject_length: Upper bound on the subject line typed by the user
- confirm: Whether to ask for confirmation before committing
- git_executable: The git binary to run
"""

from pathlib import Path
from typing import Any, Dict

import yaml

from commithelper.styles import MAX_SUBJECT_LENGTH


class GlobalConfigError(Exception):
    """Raised when there's an error with global configuration."""
    pass


_CONFIG_DIR = Path.home() / ".commithelper"

DEFAULT_CONFIG: Dict[str, Any] = {
    "max_subject_length": MAX_SUBJECT_LENGTH,
    "confirm": True,
    "git_executable": "git",
}

_TRUE_VALUES = ("true", "yes", "y", "1", "on")
_FALSE_VALUES = ("false", "no", "n", "0", "off")


def get_global_config_dir() -> Path:
    """Get the global commithelper configuration directory.

    Returns:
        Path to ~/.commithelper/
    """
    return _CONFIG_DIR


def ensure_global_config_dir() -> Path:
    """Ensure the global config directory exists.

    Returns:
        Path to ~/.commithelper/
    """
    config_dir = get_global_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_config_file_path() -> Path:
    """Get path to config.yaml file.

    Returns:
        Path to ~/.commithelper/config.yaml
    """
    return get_global_config_dir() / "config.yaml"


def load_global_config() -> Dict[str, Any]:
    """Load global configuration, filling missing keys with defaults.

    Returns:
        Dictionary with configuration values. Defaults if the file doesn't exist.

    Raises:
        GlobalConfigError: If the file exists but cannot be read or parsed,
            or a known key holds a value of the wrong type.
    """
    config = DEFAULT_CONFIG.copy()
    config_file = get_config_file_path()

    if not config_file.exists():
        return config

    try:
        with open(config_file, "r") as f:
            loaded = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise GlobalConfigError(f"Failed to load config from {config_file}: {e}")

    if not isinstance(loaded, dict):
        raise GlobalConfigError(f"Config file {config_file} must contain a mapping")

    config.update(loaded)
    for key in DEFAULT_CONFIG:
        _check_value(key, config[key])
    return config


def save_global_config(config: Dict[str, Any]) -> None:
    """Save global configuration to ~/.commithelper/config.yaml.

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


def _check_value(key: str, value: Any) -> None:
    """Ensure a value read from the config file has the type of the key's default."""
    default = DEFAULT_CONFIG[key]

    if isinstance(default, bool):
        if not isinstance(value, bool):
            raise GlobalConfigError(f"{key} must be true or false, got {value!r}")
    elif isinstance(default, int):
        # bool is a subclass of int
        if isinstance(value, bool) or not isinstance(value, int):
            raise GlobalConfigError(f"{key} must be an integer, got {value!r}")
        if value <= 0:
            raise GlobalConfigError(f"{key} must be positive")
    elif not isinstance(value, str) or not value.strip():
        raise GlobalConfigError(f"{key} must be a non-empty string, got {value!r}")


def _coerce_value(key: str, raw_value: str) -> Any:
    """Convert a string from the command line to the type of the key's default."""
    default = DEFAULT_CONFIG[key]

    if isinstance(default, bool):
        lowered = raw_value.strip().lower()
        if lowered in _TRUE_VALUES:
            return True
        if lowered in _FALSE_VALUES:
            return False
        raise GlobalConfigError(f"Invalid boolean for {key}: {raw_value}")

    if isinstance(default, int):
        try:
            value = int(raw_value)
        except ValueError:
            raise GlobalConfigError(f"Invalid integer for {key}: {raw_value}")
        if value <= 0:
            raise GlobalConfigError(f"{key} must be positive")
        return value

    value = raw_value.strip()
    if not value:
        raise GlobalConfigError(f"{key} cannot be empty")
    return value


def set_config_value(key: str, raw_value: str) -> Any:
    """Set a single configuration key and persist it.

    Args:
        key: One of the keys in DEFAULT_CONFIG.
        raw_value: The value as typed on the command line.

    Returns:
        The coerced value that was stored.

    Raises:
        GlobalConfigError: If the key is unknown or the value is invalid.
    """
    if key not in DEFAULT_CONFIG:
        valid = ", ".join(DEFAULT_CONFIG)
        raise GlobalConfigError(f"Unknown config key: {key} (valid keys: {valid})")

    value = _coerce_value(key, raw_value)
    config = load_global_config()
    config[key] = value
    save_global_config(config)
    return value
