"""Console adapters implementing ConsolePort."""

from .buffered_console import BufferedConsole
from .stdout_console import StdoutConsole

__all__ = ["StdoutConsole", "BufferedConsole"]
