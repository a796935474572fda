"""
Configuration for the CpG-island sequence generator.

Defaults below, overridden by a JSON file named in ``CPG_HMM_CONFIG`` and
then by individual ``CPG_HMM_*`` environment variables.
"""

import copy
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = {
    "generation": {
        "length": 30,
        "seed": None,
    },
    "logging": {
        "level": "INFO",
        "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    },
}

ENV_OVERRIDES = {
    "CPG_HMM_LENGTH": ("generation", "length", int),
    "CPG_HMM_SEED": ("generation", "seed", int),
    "CPG_HMM_LOG_LEVEL": ("logging", "level", str),
}


class ConfigManager:
    """Holds configuration sections with file and environment overrides."""

    def __init__(self):
        self._config = copy.deepcopy(DEFAULT_CONFIG)
        self._load_environment_overrides()

    def _load_environment_overrides(self):
        config_file = os.getenv("CPG_HMM_CONFIG")
        if config_file and Path(config_file).exists():
            self.load_from_file(config_file)

        for env_var, (section, key, type_func) in ENV_OVERRIDES.items():
            value = os.getenv(env_var)
            if value is None:
                continue
            try:
                self._config[section][key] = type_func(value)
            except ValueError:
                logger.warning(f"Ignoring invalid {env_var}={value!r}")

    def get(self, section: str, key: Optional[str] = None) -> Any:
        if key is None:
            return self._config.get(section, {})
        return self._config.get(section, {}).get(key)

    def set(self, section: str, key: str, value: Any) -> None:
        self._config.setdefault(section, {})[key] = value

    def update(self, config_dict: Dict[str, Any]) -> None:
        """Merge ``{section: {key: value}}`` into the current settings."""
        for section, values in config_dict.items():
            if isinstance(values, dict):
                self._config.setdefault(section, {}).update(values)
            else:
                self._config[section] = values

    def load_from_file(self, config_path: str) -> None:
        try:
            with open(config_path, "r") as f:
                file_config = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ValueError(f"Failed to load config from {config_path}: {e}")
        self.update(file_config)

    def reset(self) -> None:
        self._config = copy.deepcopy(DEFAULT_CONFIG)


_config_manager = ConfigManager()


def get_config(section: str, key: Optional[str] = None) -> Any:
    """Get one value, or a whole section when ``key`` is omitted."""
    return _config_manager.get(section, key)


def set_config(section: str, key: str, value: Any) -> None:
    _config_manager.set(section, key, value)


def update_config(config_dict: Dict[str, Any]) -> None:
    _config_manager.update(config_dict)


def load_config_file(config_path: str) -> None:
    _config_manager.load_from_file(config_path)


def reset_config() -> None:
    """Restore defaults (environment overrides are not re-read)."""
    _config_manager.reset()
