"""Lightweight data models used across the game."""

from dataclasses import dataclass

from .vector import Point


@dataclass(frozen=True)
class SpawnPlan:
    """
    Where a monster enters, where it leaves, and how long it takes.

    Attributes
    ----------
    start : Point
        Entry position just beyond the right edge of the play area.
    end : Point
        Exit position just beyond the left edge, on the same row.
    duration : float
        Seconds spent walking from ``start`` to ``end``.
    """
    start: Point
    end: Point
    duration: float


@dataclass(frozen=True)
class ShotPlan:
    """
    A projectile fired from ``start`` along the unit vector ``direction``.

    Attributes
    ----------
    start : Point
        The player's position when the shot was fired.
    direction : Point
        Unit aim vector towards the touch point.
    destination : Point
        Far point the projectile flies to before it is removed.
    duration : float
        Seconds of flight from ``start`` to ``destination``.
    """
    start: Point
    direction: Point
    destination: Point
    duration: float
