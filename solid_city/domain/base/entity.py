"""Base class for example entities that write to a console."""

from typing import Optional

from solid_city.domain.base.ports import ConsolePort


class ConsoleEntity:
    """
    Stateless example entity.

    Each entity emits its lines through the injected console port. Without a
    port the line goes straight to standard output, which is how the entities
    behave when constructed at the point of use.
    """

    def __init__(self, console: Optional[ConsolePort] = None) -> None:
        self._console = console

    def _emit(self, text: str) -> None:
        if self._console is None:
            print(text)
        else:
            self._console.write_line(text)
