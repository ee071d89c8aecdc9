"""Configuration schemas."""

from .app_schema import OUTPUT_FORMATS, AppConfig, ConsoleConfig
from .logging_schema import LoggingConfig

__all__ = ["AppConfig", "ConsoleConfig", "LoggingConfig", "OUTPUT_FORMATS"]
