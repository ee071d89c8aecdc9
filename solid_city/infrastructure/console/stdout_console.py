"""Console adapter that writes to standard output."""

import sys
from typing import Optional, TextIO

from solid_city.domain.base.ports import ConsolePort


class StdoutConsole(ConsolePort):
    """Write each line to a text stream, standard output by default."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream

    def write_line(self, text: str) -> None:
        # sys.stdout is looked up on every call.
        print(text, file=self._stream or sys.stdout)
