"""Single responsibility example."""

from solid_city.domain.base.entity import ConsoleEntity


# Bad: one class with many jobs


class MultiTasker(ConsoleEntity):
    """Aggregates three unrelated jobs. Anti-pattern."""

    def do_everything(self) -> None:
        self._emit("Guard gates!")
        self._emit("Fix lights!")
        self._emit("Feed bats!")


# Good: one job per class


class Gatekeeper(ConsoleEntity):
    def guard(self) -> None:
        self._emit("Guard gates!")


class Electrician(ConsoleEntity):
    def fix(self) -> None:
        self._emit("Fix lights!")


class Feeder(ConsoleEntity):
    def feed(self) -> None:
        self._emit("Feed bats!")
