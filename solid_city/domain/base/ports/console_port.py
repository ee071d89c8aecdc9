"""Console port for example output."""

from abc import ABC, abstractmethod


class ConsolePort(ABC):
    """Port for writing example output, one line per invocation."""

    @abstractmethod
    def write_line(self, text: str) -> None:
        """Write a single line of output."""
