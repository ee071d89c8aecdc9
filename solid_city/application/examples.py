"""
Catalog of runnable examples.

Each example group gets a driver that reproduces the recommended design and
a counter-example driver that runs the anti-pattern next to it. Drivers
build their entities at the point of use and write through the given
console.
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Tuple

from solid_city.domain.base.ports import ConsolePort
from solid_city.domain.core.exceptions import ExampleNotFoundError
from solid_city.domain.extension import (
    CompositeBlaster,
    ConditionalBlaster,
    NetLauncher,
    SmokeBomber,
)
from solid_city.domain.responsibility import Electrician, Feeder, Gatekeeper, MultiTasker
from solid_city.domain.substitution import BatCar, Boat, FaultyBoat, Vehicle, move_all

Driver = Callable[[ConsolePort], None]


@dataclass(frozen=True)
class ExampleDefinition:
    """A runnable example group."""

    name: str
    principle: str
    title: str
    summary: str
    run: Driver
    counter_example: Driver
    aliases: Tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, str]:
        return {
            "name": self.name,
            "principle": self.principle,
            "title": self.title,
            "summary": self.summary,
        }


def run_substitution_example(console: ConsolePort) -> None:
    move_all([BatCar(console), Boat(console)])


def run_substitution_counter_example(console: ConsolePort) -> None:
    # FaultyBoat raises after the street vehicle has moved.
    move_all([Vehicle(console), FaultyBoat(console)])


def run_extension_example(console: ConsolePort) -> None:
    blaster = CompositeBlaster()
    blaster.attach(NetLauncher(console))
    blaster.attach(SmokeBomber(console))
    blaster.shoot()


def run_extension_counter_example(console: ConsolePort) -> None:
    blaster = ConditionalBlaster(console)
    for kind in ("Net", "Smoke", "Sparks", "Unknown"):
        blaster.shoot(kind)


def run_responsibility_example(console: ConsolePort) -> None:
    gatekeeper = Gatekeeper(console)
    electrician = Electrician(console)
    feeder = Feeder(console)

    gatekeeper.guard()
    electrician.fix()
    feeder.feed()


def run_responsibility_counter_example(console: ConsolePort) -> None:
    MultiTasker(console).do_everything()


EXAMPLES: Tuple[ExampleDefinition, ...] = (
    ExampleDefinition(
        name="substitution",
        principle="Liskov substitution",
        title="Vehicles",
        summary="Every Movable can replace any other without breaking callers.",
        run=run_substitution_example,
        counter_example=run_substitution_counter_example,
        aliases=("lsp",),
    ),
    ExampleDefinition(
        name="extension",
        principle="Open/closed",
        title="Blasters",
        summary="New shots are attached to a composite instead of edited into a branch.",
        run=run_extension_example,
        counter_example=run_extension_counter_example,
        aliases=("ocp",),
    ),
    ExampleDefinition(
        name="responsibility",
        principle="Single responsibility",
        title="Workers",
        summary="One job per class instead of one class doing every job.",
        run=run_responsibility_example,
        counter_example=run_responsibility_counter_example,
        aliases=("srp",),
    ),
)

_INDEX: Dict[str, ExampleDefinition] = {}
for _example in EXAMPLES:
    for _key in (_example.name, *_example.aliases):
        _INDEX[_key] = _example


def list_examples() -> List[ExampleDefinition]:
    """Return example definitions in catalog order."""
    return list(EXAMPLES)


def get_example(name: str) -> ExampleDefinition:
    """Resolve an example by name or alias, ignoring case."""
    try:
        return _INDEX[name.strip().lower()]
    except KeyError:
        raise ExampleNotFoundError(name) from None


def example_names() -> List[str]:
    """Names and aliases accepted by ``get_example``."""
    return list(_INDEX)
