"""Console adapter that records lines in memory."""

from typing import List

from solid_city.domain.base.ports import ConsolePort


class BufferedConsole(ConsolePort):
    """Collects written lines in order so they can be formatted or asserted on."""

    def __init__(self) -> None:
        self._lines: List[str] = []

    @property
    def lines(self) -> List[str]:
        return list(self._lines)

    def write_line(self, text: str) -> None:
        self._lines.append(text)

    def clear(self) -> None:
        self._lines.clear()
