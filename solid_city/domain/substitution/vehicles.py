"""
Substitution example.

The anti-pattern is a concrete ``Vehicle`` base class whose ``move`` is
overridden by a subtype that cannot actually move on streets. Callers that
rely on ``Vehicle`` break as soon as a ``FaultyBoat`` is handed to them.

The fix narrows the capability to ``Movable`` and lets every variant
implement it faithfully, so any variant can replace any other.
"""

from abc import ABC, abstractmethod
from typing import Iterable, Union

from solid_city.domain.base.entity import ConsoleEntity
from solid_city.domain.core.exceptions import ContractViolationError


# Bad: substitution fails


class Vehicle(ConsoleEntity):
    """Concrete base class used as a capability. Anti-pattern."""

    def move(self) -> None:
        self._emit("Drives on streets!")


class FaultyBoat(Vehicle):
    """Subtype that breaks the ``move`` contract of its base. Anti-pattern."""

    def move(self) -> None:
        raise ContractViolationError(
            variant=type(self).__name__,
            capability="move",
            message="Can't drive, I'm a boat!",
        )


# Good: substitution works


class Movable(ABC):
    """Capability interface for anything that can move."""

    @abstractmethod
    def move(self) -> None:
        """Move and report how."""
        pass


class BatCar(ConsoleEntity, Movable):
    """Street variant."""

    def move(self) -> None:
        self._emit("Drives on streets!")


class Boat(ConsoleEntity, Movable):
    """Water variant that honours the same contract as ``BatCar``."""

    def move(self) -> None:
        self._emit("Sails on water!")


def move_all(vehicles: Iterable[Union[Movable, Vehicle]]) -> None:
    """Move every vehicle in sequence order. Errors reach the caller."""
    for vehicle in vehicles:
        vehicle.move()
