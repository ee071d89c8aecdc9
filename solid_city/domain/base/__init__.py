"""Base domain abstractions."""

from .entity import ConsoleEntity
from .ports import ConsolePort

__all__ = ["ConsoleEntity", "ConsolePort"]
