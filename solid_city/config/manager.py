"""Configuration management for the application."""
from __future__ import annotations

import json
import os
import threading
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError as PydanticValidationError

from solid_city.config.schemas import AppConfig
from solid_city.domain.core.exceptions import ConfigurationError

CONFIG_ENV_VAR = "SOLID_CITY_CONFIG"
LOG_LEVEL_ENV_VAR = "SOLID_CITY_LOG_LEVEL"


class ConfigurationManager:
    """
    Single source of truth for application configuration.

    Configuration is resolved lazily from, in order of precedence:
    - environment overrides (``SOLID_CITY_LOG_LEVEL``)
    - the explicit config file, or the file named by ``SOLID_CITY_CONFIG``
    - schema defaults
    """

    def __init__(self, config_file: Optional[str] = None):
        """Initialize configuration manager with lazy loading."""
        self._config_file = config_file or os.environ.get(CONFIG_ENV_VAR) or None
        self._lock = threading.RLock()
        self._app_config: Optional[AppConfig] = None

    @property
    def config_file(self) -> Optional[str]:
        return self._config_file

    def get_app_config(self) -> AppConfig:
        """Load and validate configuration once, then serve the cached copy."""
        with self._lock:
            if self._app_config is None:
                raw = self._load_raw()
                self._apply_env_overrides(raw)
                try:
                    self._app_config = AppConfig.model_validate(raw)
                except PydanticValidationError as e:
                    fields = [".".join(str(p) for p in err["loc"]) for err in e.errors()]
                    raise ConfigurationError(f"Invalid configuration: {e}", fields) from e
            return self._app_config

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value by dotted key, e.g. ``logging.level``."""
        value: Any = self.get_app_config().model_dump()
        for part in key.split("."):
            if not isinstance(value, dict) or part not in value:
                return default
            value = value[part]
        return value

    def reload(self) -> AppConfig:
        """Drop the cached configuration and load it again."""
        with self._lock:
            self._app_config = None
        return self.get_app_config()

    def _load_raw(self) -> Dict[str, Any]:
        if not self._config_file:
            return {}

        path = Path(self._config_file)
        if not path.is_file():
            raise ConfigurationError(f"Configuration file not found: {path}")

        try:
            with open(path, "r") as f:
                if path.suffix in (".yaml", ".yml"):
                    data = yaml.safe_load(f)
                else:
                    data = json.load(f)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to parse configuration file {path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file {path} must contain a mapping")
        return data

    @staticmethod
    def _apply_env_overrides(raw: Dict[str, Any]) -> None:
        level = os.environ.get(LOG_LEVEL_ENV_VAR)
        if level:
            logging_section = raw.setdefault("logging", {})
            if not isinstance(logging_section, dict):
                raise ConfigurationError("'logging' section must be a mapping", ["logging"])
            logging_section["level"] = level


def get_config_manager(config_file: Optional[str] = None) -> ConfigurationManager:
    """Create a configuration manager for the given file."""
    return ConfigurationManager(config_file)
