"""
Configuration loading with multi-layer merging.

Implements the configuration precedence chain:
    defaults < user config < project config < env vars
"""

import json
import logging
import os
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from deptboard.core.errors import ConfigError

from .models import DeskConfig

logger = logging.getLogger(__name__)

# Global cache to avoid reloading config multiple times per session
_config_cache: DeskConfig | None = None


def get_xdg_config_home() -> Path:
    """
    Get XDG config home directory.

    Returns:
        Path to config directory (defaults to ~/.config)
    """
    if xdg_home := os.environ.get("XDG_CONFIG_HOME"):
        return Path(xdg_home)
    return Path.home() / ".config"


def get_user_config_path() -> Path:
    """
    Get path to user configuration file.

    Returns:
        Path to ~/.config/deptboard/config.json (or XDG equivalent)
    """
    return get_xdg_config_home() / "deptboard" / "config.json"


def get_project_config_path(cwd: Path | None = None) -> Path:
    """
    Get path to project configuration file.

    Args:
        cwd: Working directory to search from (defaults to current directory)

    Returns:
        Path to .deptboard.json in the working directory
    """
    if cwd is None:
        cwd = Path.cwd()
    return cwd / ".deptboard.json"


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """
    Deep merge two dictionaries.

    Values in `override` take precedence over values in `base`.
    Nested dicts are merged, not replaced.

    Example:
        >>> base = {"a": 1, "b": {"x": 10, "y": 20}}
        >>> override = {"b": {"y": 30, "z": 40}, "c": 3}
        >>> deep_merge(base, override)
        {'a': 1, 'b': {'x': 10, 'y': 30, 'z': 40}, 'c': 3}
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def load_json_file(path: Path) -> dict[str, Any] | None:
    """
    Load a JSON file, returning None if it doesn't exist or is invalid.

    Args:
        path: Path to JSON file

    Returns:
        Parsed JSON as dict, or None if file doesn't exist or can't be parsed
    """
    if not path.exists():
        return None

    try:
        with path.open() as f:
            data = json.load(f)
            if isinstance(data, dict):
                return data
            return None
    except (json.JSONDecodeError, OSError) as e:
        logger.warning("Failed to parse config at %s: %s", path, e)
        return None


def apply_env_overrides(config_dict: dict[str, Any]) -> dict[str, Any]:
    """
    Apply environment variable overrides to configuration.

    Env vars have the highest precedence and override all config files.

    Supported env vars:
        DEPTBOARD_BASE_URL - overrides base_url
        DEPTBOARD_API_PATH - overrides api_path
        DEPTBOARD_TIMEOUT - overrides request_timeout (seconds)

    Args:
        config_dict: Configuration dictionary to override

    Returns:
        Configuration dictionary with env var overrides applied
    """
    result = config_dict.copy()

    if base_url := os.environ.get("DEPTBOARD_BASE_URL"):
        result["base_url"] = base_url

    # An empty DEPTBOARD_API_PATH is meaningful: endpoints at the root
    api_path = os.environ.get("DEPTBOARD_API_PATH")
    if api_path is not None:
        result["api_path"] = api_path

    if timeout_str := os.environ.get("DEPTBOARD_TIMEOUT"):
        try:
            timeout = float(timeout_str)
            if timeout <= 0:
                logger.warning("DEPTBOARD_TIMEOUT must be > 0, got %s, ignoring", timeout_str)
            else:
                result["request_timeout"] = timeout
        except ValueError:
            logger.warning("Invalid DEPTBOARD_TIMEOUT value '%s', ignoring", timeout_str)

    return result


def get_default_config() -> dict[str, Any]:
    """
    Get hardcoded default configuration.

    Returns:
        Dictionary with default configuration values
    """
    return {
        "base_url": "http://localhost:8000",
        "api_path": "tables",
        "limits": {"users": 100, "tasks": 100, "comments": 50},
    }


def load_config(project_dir: Path | None = None, use_cache: bool = True) -> DeskConfig:
    """
    Load configuration with multi-layer merging.

    Configuration precedence (highest to lowest):
        1. Environment variables (DEPTBOARD_*)
        2. Project config (.deptboard.json)
        3. User config (~/.config/deptboard/config.json)
        4. Hardcoded defaults

    Args:
        project_dir: Directory to load .deptboard.json from (defaults to cwd)
        use_cache: If True, return cached config from previous load

    Returns:
        Validated DeskConfig instance

    Raises:
        ConfigError: If the merged config fails validation
    """
    global _config_cache

    if use_cache and _config_cache is not None:
        return _config_cache

    merged = get_default_config()

    if user_config := load_json_file(get_user_config_path()):
        merged = deep_merge(merged, user_config)

    if project_config := load_json_file(get_project_config_path(project_dir)):
        merged = deep_merge(merged, project_config)

    merged = apply_env_overrides(merged)

    try:
        config = DeskConfig(**merged)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e

    _config_cache = config

    return config


def clear_cache() -> None:
    """
    Clear the cached configuration.

    Useful for testing or when config files change during execution.
    """
    global _config_cache
    _config_cache = None
