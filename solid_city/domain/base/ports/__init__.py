"""Domain ports for infrastructure concerns."""

from .console_port import ConsolePort

__all__ = [
    "ConsolePort",
]
