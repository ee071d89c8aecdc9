"""Substitution (Liskov) example group."""

from .vehicles import BatCar, Boat, FaultyBoat, Movable, Vehicle, move_all

__all__ = ["Movable", "BatCar", "Boat", "Vehicle", "FaultyBoat", "move_all"]
