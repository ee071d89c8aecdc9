"""Open/closed example group."""

from .blasters import (
    CompositeBlaster,
    ConditionalBlaster,
    NetLauncher,
    Shootable,
    SmokeBomber,
    SparkLauncher,
)

__all__ = [
    "Shootable",
    "NetLauncher",
    "SmokeBomber",
    "SparkLauncher",
    "CompositeBlaster",
    "ConditionalBlaster",
]
