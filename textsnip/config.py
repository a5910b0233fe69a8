"""
Configuration — loads settings from .textsnip.yaml, environment variables,
and built-in defaults (in that priority order: CLI args > env > YAML > defaults).
"""

from __future__ import annotations

import logging
import os

import yaml

logger = logging.getLogger(__name__)

_DEFAULTS = {
    "encoding": "utf-8",
    "dry_run": False,
    "verbose": False,
    "log_dir": "",
}

_ENV_PREFIX = "TEXTSNIP_"

# Config file search locations
_CONFIG_FILENAMES = [".textsnip.yaml", ".textsnip.yml"]


def _find_config_file(explicit_path: str | None = None) -> str | None:
    """Find the config file. Checks explicit path, CWD, then user home."""
    if explicit_path:
        if os.path.isfile(explicit_path):
            return explicit_path
        return None

    search_dirs = [os.getcwd(), os.path.expanduser("~")]
    for d in search_dirs:
        for name in _CONFIG_FILENAMES:
            path = os.path.join(d, name)
            if os.path.isfile(path):
                return path
    return None


def _load_yaml(path: str) -> dict:
    """Load YAML file, returns empty dict on failure."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
        return data if isinstance(data, dict) else {}
    except (OSError, yaml.YAMLError) as exc:
        logger.warning("[Config] Ignoring unreadable config %s: %s", path, exc)
        return {}


class Config:
    """Application configuration.

    Settings are resolved in priority order:
    1. CLI arguments (handled by caller)
    2. Environment variables (``TEXTSNIP_ENCODING``, ``TEXTSNIP_DRY_RUN``, ...)
    3. .textsnip.yaml config file
    4. Built-in defaults
    """

    def __init__(self, yaml_data: dict | None = None):
        yd = yaml_data or {}

        # Helper: env var > yaml > default
        def _get(key: str, default, cast=str):
            env_val = os.getenv(_ENV_PREFIX + key.upper())
            if env_val is not None:
                return cast(env_val)
            yaml_val = yd.get(key)
            if yaml_val is not None:
                return cast(yaml_val)
            return default

        def _get_bool(key: str, default: bool) -> bool:
            env_val = os.getenv(_ENV_PREFIX + key.upper())
            if env_val is not None:
                return env_val.lower() in ("1", "true", "yes", "on")
            yaml_val = yd.get(key)
            if yaml_val is not None:
                return bool(yaml_val)
            return default

        self.ENCODING = _get("encoding", _DEFAULTS["encoding"])
        self.DRY_RUN = _get_bool("dry_run", _DEFAULTS["dry_run"])
        self.VERBOSE = _get_bool("verbose", _DEFAULTS["verbose"])

        # Directory for log files; empty disables file logging
        self.LOG_DIR = _get("log_dir", _DEFAULTS["log_dir"])

    @classmethod
    def load(cls, config_path: str | None = None) -> "Config":
        """Load config from YAML file (if found) + env vars + defaults."""
        path = _find_config_file(config_path)
        if config_path and path is None:
            logger.warning("[Config] Config file not found: %s", config_path)
        yaml_data = _load_yaml(path) if path else {}
        return cls(yaml_data)
