"""Configuration package with clean public API."""

from .manager import ConfigurationManager, get_config_manager
from .schemas import AppConfig, ConsoleConfig, LoggingConfig

__all__ = [
    "AppConfig",
    "ConsoleConfig",
    "LoggingConfig",
    "ConfigurationManager",
    "get_config_manager",
]
