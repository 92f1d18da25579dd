"""2D point arithmetic used for aiming and moving sprites."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """
    An immutable 2D point / vector in scene coordinates.

    Attributes
    ----------
    x : float
        Horizontal component.
    y : float
        Vertical component.
    """
    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Point:
        return Point(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Point:
        # ZeroDivisionError on scalar == 0; callers must check
        return Point(self.x / scalar, self.y / scalar)

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    def normalized(self) -> Point:
        """Unit vector in the same direction. The length must be nonzero."""
        return self / self.length()
