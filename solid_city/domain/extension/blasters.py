"""
Open/closed example.

``ConditionalBlaster`` must be edited for every new kind of shot.
``CompositeBlaster`` is closed for modification: new behaviour is a new
``Shootable`` attached at runtime.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from solid_city.domain.base.entity import ConsoleEntity
from solid_city.domain.core.exceptions import InvalidMemberError


# Bad: modifying the class for every new feature


class ConditionalBlaster(ConsoleEntity):
    """Single dispatcher with one branch per kind. Anti-pattern."""

    def shoot(self, kind: str) -> None:
        if kind == "Net":
            self._emit("Shoots net!")
        elif kind == "Smoke":
            self._emit("Shoots smoke!")
        elif kind == "Sparks":
            self._emit("Shoots sparks!")


# Good: open for extension, closed for modification


class Shootable(ABC):
    """Capability interface for anything that can shoot."""

    @abstractmethod
    def shoot(self) -> None:
        """Shoot once."""
        pass


class NetLauncher(ConsoleEntity, Shootable):
    def shoot(self) -> None:
        self._emit("Shoots net!")


class SmokeBomber(ConsoleEntity, Shootable):
    def shoot(self) -> None:
        self._emit("Shoots smoke!")


class SparkLauncher(ConsoleEntity, Shootable):
    """Added later without touching ``CompositeBlaster``."""

    def shoot(self) -> None:
        self._emit("Shoots sparks!")


class CompositeBlaster(Shootable):
    """Shootable that delegates to an ordered collection of members."""

    def __init__(self, members: Optional[List[Shootable]] = None) -> None:
        self._members: List[Shootable] = []
        for member in members or []:
            self.attach(member)

    @property
    def members(self) -> Tuple[Shootable, ...]:
        return tuple(self._members)

    def __len__(self) -> int:
        return len(self._members)

    def attach(self, member: Shootable) -> None:
        """Append a member. The same member may be attached more than once."""
        if not isinstance(member, Shootable):
            raise InvalidMemberError(member, "Shootable")
        if isinstance(member, CompositeBlaster) and member._reaches(self):
            raise InvalidMemberError(
                member, "Shootable", "Attaching this CompositeBlaster would create a cycle"
            )
        self._members.append(member)

    def _reaches(self, target: "CompositeBlaster") -> bool:
        """True if ``target`` is this composite or nested anywhere inside it."""
        pending = [self]
        seen = set()
        while pending:
            composite = pending.pop()
            if composite is target:
                return True
            if id(composite) in seen:
                continue
            seen.add(id(composite))
            pending.extend(m for m in composite._members if isinstance(m, CompositeBlaster))
        return False

    def detach(self, member: Shootable) -> None:
        """Remove the first occurrence of ``member``; absent members are ignored."""
        for index, attached in enumerate(self._members):
            if attached is member:
                del self._members[index]
                return

    def shoot(self) -> None:
        for member in list(self._members):
            member.shoot()
