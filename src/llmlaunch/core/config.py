"""Configuration loader for llmlaunch."""

from __future__ import annotations

import copy
import logging
import os
from pathlib import Path

import yaml

log = logging.getLogger(__name__)

DEFAULTS: dict = {
    "provider": "claude",
    # "browser" opens the provider URL; "command" hands the payload to search_command.
    "dispatch": "browser",
    "search_command": ["search"],
    "context_command": ["contextualize", "cat", "--output", "clipboard"],
    "clipboard": {
        "strategies": ["native", "wl-paste", "xclip"],
    },
    "log_level": "warning",
}


def config_path() -> Path:
    """Resolve config.yaml: LLMLAUNCH_CONFIG env var > ~/.config/llmlaunch/config.yaml."""
    env_path = os.environ.get("LLMLAUNCH_CONFIG")
    if env_path:
        return Path(env_path).expanduser()
    return Path("~/.config/llmlaunch/config.yaml").expanduser()


def load_config(path: Path | None = None) -> dict:
    """Load config.yaml and merge with defaults.

    Args:
        path: Explicit path to config.yaml. If None, uses default location.

    Returns:
        Merged configuration dict.
    """
    if path is None:
        path = config_path()

    user_config: dict = {}
    if path.exists():
        try:
            raw = path.read_text(encoding="utf-8")
            user_config = yaml.safe_load(raw) or {}
        except Exception as e:
            log.warning("Failed to read config at %s, using defaults: %s", path, e)

    if not isinstance(user_config, dict):
        log.warning("Config at %s is not a mapping, using defaults", path)
        user_config = {}

    return _reset_mismatched(_deep_merge(DEFAULTS, user_config), DEFAULTS)


def _deep_merge(base: dict, override: dict) -> dict:
    """Recursively merge override into base, returning a new dict."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


# Command lists may also be written as a single space-separated string.
_ACCEPTED_TYPES: dict[type, tuple[type, ...]] = {list: (list, str)}


def _reset_mismatched(config: dict, defaults: dict, prefix: str = "") -> dict:
    """Replace values whose type does not match DEFAULTS with the default."""
    result = config.copy()
    for key, default in defaults.items():
        value = result.get(key)
        name = f"{prefix}{key}"
        if isinstance(default, dict) and isinstance(value, dict):
            result[key] = _reset_mismatched(value, default, f"{name}.")
            continue
        accepted = _ACCEPTED_TYPES.get(type(default), (type(default),))
        if not isinstance(value, accepted):
            log.warning(
                "Config key %r should be %s, got %s; using default",
                name, type(default).__name__, type(value).__name__,
            )
            result[key] = copy.deepcopy(default)
    return result
