"""Plane points and the small amount of geometry the figures need."""

from __future__ import annotations

import math
from dataclasses import dataclass
from functools import total_ordering


@total_ordering
@dataclass(frozen=True)
class Point:
    """A point (or vector) on the plane.

    Points are ordered by ``y`` first and then by ``x``.
    """

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __lt__(self, other: Point) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return (self.y, self.x) < (other.y, other.x)

    def dot(self, other: Point) -> float:
        """Dot product of two vectors."""
        return self.x * other.x + self.y * other.y

    def cross(self, other: Point) -> float:
        """Z component of the cross product of two vectors."""
        return self.x * other.y - self.y * other.x

    def polar_angle(self) -> float:
        """Angle of the vector from the positive X axis, in radians."""
        return math.atan2(self.y, self.x)

    def __str__(self) -> str:
        return f"( {self.x:g} , {self.y:g} )"


def line_length(a: Point, b: Point) -> float:
    """Distance between two points."""
    return math.hypot(b.x - a.x, b.y - a.y)


def parse_point(text: str) -> Point:
    """Parse coordinates written as ``X;Y``.

    Raises ValueError when the text does not hold exactly two numbers
    separated by a semicolon.
    """
    parts = text.split(";")
    if len(parts) != 2:
        raise ValueError(f"expected coordinates as 'X;Y', got {text!r}")
    try:
        x, y = (float(part.strip()) for part in parts)
    except ValueError:
        raise ValueError(f"coordinates must be numbers, got {text!r}") from None
    return Point(x, y)