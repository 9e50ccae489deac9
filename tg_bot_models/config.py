"""
Configuration management for tg-bot-models.

This module provides a layered configuration system with priority:
1. Environment variables
2. TOML config file (~/.config/tg-bot-models/config.toml)
3. Defaults

Configuration only affects tooling (logging, CLI output). The projection
of models to JSON never depends on it.
"""

import os
from copy import deepcopy
from pathlib import Path
from typing import Any, ClassVar

import toml

from tg_bot_models.constants import (
    DEFAULT_CONFIG_PATH,
    DEFAULT_LOG_BACKUP_COUNT,
    DEFAULT_LOG_FORMAT,
    DEFAULT_LOG_LEVEL,
    DEFAULT_LOG_MAX_BYTES,
)
from tg_bot_models.models.config import AppConfig


def _parse_bool(value: str) -> bool:
    return value.lower() in ("true", "1", "yes")


class Config:
    """
    Configuration manager with layered priority system.

    Configuration is loaded from multiple sources with the following priority:
    1. Environment variables (highest priority)
    2. TOML config file
    3. Defaults (lowest priority)
    """

    DEFAULTS: ClassVar[dict[str, Any]] = {
        "logging": {
            "level": DEFAULT_LOG_LEVEL,
            "format": DEFAULT_LOG_FORMAT,
            "file": "",
            "max_bytes": DEFAULT_LOG_MAX_BYTES,
            "backup_count": DEFAULT_LOG_BACKUP_COUNT,
        },
        "output": {
            "indent": 2,
            "ensure_ascii": False,
            "sort_keys": False,
        },
    }

    CONFIG_PATH = DEFAULT_CONFIG_PATH

    # Environment variable -> config key, or (config key, converter)
    ENV_MAPPINGS: ClassVar[dict[str, Any]] = {
        "LOG_LEVEL": "logging.level",
        "LOG_FORMAT": "logging.format",
        "TG_BOT_MODELS_LOG_FILE": "logging.file",
        "TG_BOT_MODELS_INDENT": ("output.indent", int),
        "TG_BOT_MODELS_ENSURE_ASCII": ("output.ensure_ascii", _parse_bool),
    }

    def __init__(self, config_path: Path | None = None):
        """
        Initialize configuration manager.

        Args:
            config_path: Optional path to config file
                (defaults to ~/.config/tg-bot-models/config.toml)
        """
        self.config_path = config_path or self.CONFIG_PATH
        self._config: dict[str, Any] = {}
        self._load()
        self._apply_env_overrides()
        self._expand_paths()

    def _load(self) -> None:
        """
        Load configuration from file.

        If config file doesn't exist, use defaults.
        """
        if self.config_path.exists():
            with self.config_path.open() as f:
                file_config = toml.load(f)
            self._config = self._deep_merge(self.DEFAULTS, file_config)
        else:
            self._config = deepcopy(self.DEFAULTS)

    def _deep_merge(self, base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
        """
        Deep merge two dictionaries.

        Args:
            base: Base dictionary
            update: Dictionary to merge into base

        Returns:
            Merged dictionary
        """
        result = deepcopy(base)

        for key, value in update.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result

    def _apply_env_overrides(self) -> None:
        """
        Apply environment variable overrides to configuration.

        Values that fail conversion are ignored and the lower layer wins.
        """
        for env_var, config_mapping in self.ENV_MAPPINGS.items():
            env_value = os.environ.get(env_var)
            if env_value is None:
                continue

            if isinstance(config_mapping, tuple):
                config_key, converter = config_mapping
                try:
                    env_value = converter(env_value)
                except (ValueError, TypeError):
                    continue
            else:
                config_key = config_mapping

            self.set(config_key, env_value)

    def _expand_paths(self) -> None:
        """Expand ~ and environment variables in the log file path."""
        log_file = self.get("logging.file")
        if log_file and isinstance(log_file, str):
            expanded = str(Path(os.path.expandvars(log_file)).expanduser())
            if expanded != log_file:
                self.set("logging.file", expanded)

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by dot-separated key.

        Args:
            key: Dot-separated key (e.g., "logging.level")
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        value: Any = self._config

        for k in key.split("."):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def set(self, key: str, value: Any) -> None:
        """
        Set configuration value by dot-separated key.

        Args:
            key: Dot-separated key (e.g., "output.indent")
            value: Value to set
        """
        keys = key.split(".")
        config = self._config

        for k in keys[:-1]:
            if k not in config:
                config[k] = {}
            config = config[k]

        config[keys[-1]] = value

    def delete(self, key: str) -> None:
        """
        Delete configuration value by dot-separated key.

        Args:
            key: Dot-separated key (e.g., "logging.file")
        """
        keys = key.split(".")
        config = self._config

        for k in keys[:-1]:
            if k not in config:
                return
            config = config[k]

        if keys[-1] in config:
            del config[keys[-1]]

    def save(self) -> None:
        """
        Save configuration to file.

        Creates parent directories if they don't exist.
        """
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        with self.config_path.open("w") as f:
            toml.dump(self._config, f)

    def as_model(self) -> AppConfig:
        """
        Validate the merged configuration.

        Raises:
            pydantic.ValidationError: If a value has the wrong type or range
        """
        return AppConfig.model_validate(self._config)

    def to_dict(self) -> dict[str, Any]:
        """Return a copy of the merged configuration."""
        return deepcopy(self._config)

    @property
    def logging(self) -> dict[str, Any]:
        """Get logging configuration section."""
        return self._config.get("logging", {})

    @property
    def output(self) -> dict[str, Any]:
        """Get output configuration section."""
        return self._config.get("output", {})


# Global config instance
_config: Config | None = None


def get_config() -> Config:
    """
    Get global configuration instance.

    Returns:
        Global Config instance
    """
    global _config  # noqa: PLW0603
    if _config is None:
        _config = Config()
    return _config


def reset_config() -> None:
    """
    Reset global config singleton for testing.
    """
    global _config  # noqa: PLW0603
    _config = None
