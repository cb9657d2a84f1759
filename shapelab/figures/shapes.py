"""Named plane figures and an ordered collection of them."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator

from shapelab.figures.geometry import Point, line_length


def _safe_sqrt(value: float) -> float:
    return math.nan if value < 0 else math.sqrt(value)


def _ieee_divide(numerator: float, denominator: float) -> float:
    if denominator != 0 or math.isnan(denominator):
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    sign = math.copysign(1.0, numerator) * math.copysign(1.0, denominator)
    return math.copysign(math.inf, sign)


class Figure(ABC):
    """A named figure defined by a list of points."""

    def __init__(self, name: str, points: Iterable[Point]) -> None:
        self.name = name
        self.points = list(points)

    @abstractmethod
    def is_valid(self) -> bool:
        """Whether the points describe a proper figure of this kind."""

    @abstractmethod
    def perimeter(self) -> float:
        """Length of the figure's boundary."""

    @abstractmethod
    def describe(self) -> str:
        """Text listing the figure's name and parameters."""

    @abstractmethod
    def describe_perimeter(self) -> str:
        """One line stating the figure's kind and perimeter."""


class Circle(Figure):
    """A circle given by its centre and radius."""

    def __init__(self, name: str, center: Point, radius: float) -> None:
        super().__init__(name, [center])
        self.radius = radius

    @property
    def center(self) -> Point:
        return self.points[0]

    def is_valid(self) -> bool:
        return len(self.points) == 1 and self.radius > 0

    def perimeter(self) -> float:
        return 2 * math.pi * self.radius

    def describe(self) -> str:
        return f"Circle {self.name}\nCenter: {self.center} \nRadius: {self.radius:g}\n"

    def describe_perimeter(self) -> str:
        return f"Circle with perimeter {self.perimeter():g}"


class Rectangle(Figure):
    """An axis-aligned rectangle given by its upper-left and lower-right corners."""

    def is_valid(self) -> bool:
        if len(self.points) != 2:
            return False
        upper_left, lower_right = self.points
        return upper_left.x < lower_right.x and upper_left.y > lower_right.y

    def perimeter(self) -> float:
        a, b = self.points[0], self.points[1]
        return (abs(b.x - a.x) + abs(b.y - a.y)) * 2

    def describe(self) -> str:
        a, b = self.points[0], self.points[1]
        return f"Rectangle {self.name}\nPoint 1: {a} \nPoint 2: {b} \n"

    def describe_perimeter(self) -> str:
        return f"Rectangle with perimeter {self.perimeter():g}"


class Triangle(Figure):
    """A triangle given by its three vertices."""

    def is_valid(self) -> bool:
        if len(self.points) != 3:
            return False
        p1, p2, p3 = self.points
        doubled_area = p1.x * (p2.y - p3.y) + p2.x * (p3.y - p1.y) + p3.x * (p1.y - p2.y)
        return doubled_area != 0

    def perimeter(self) -> float:
        p1, p2, p3 = self.points[:3]
        return line_length(p1, p2) + line_length(p1, p3) + line_length(p2, p3)

    def describe(self) -> str:
        p1, p2, p3 = self.points[:3]
        return f"Triangle {self.name}\nPoint 1: {p1} \nPoint 2: {p2} \nPoint 3: {p3}\n"

    def describe_perimeter(self) -> str:
        return f"Triangle with perimeter {self.perimeter():g}"


class Polygon(Figure):
    """A polygon given by its vertices in order."""

    def validation_problem(self) -> str | None:
        """Describe why the polygon is rejected, or return None if it is accepted."""
        if len(self.points) < 3:
            return "Polygon should have 3 or more vertexes"
        count = len(self.points)
        for i, b in enumerate(self.points):
            a = self.points[i - 1]
            c = self.points[(i + 1) % count]
            numerator = (c.y - a.y) * (b.x - a.x) - (b.y - a.y) * (c.x - a.x)
            denominator = _safe_sqrt((b.x - a.y) * (b.x - a.x)) * _safe_sqrt(
                (c.y - a.y) * (c.x - a.x)
            )
            if _ieee_divide(numerator, denominator) > 0:
                return "Polygon is not convex"
        return None

    def is_valid(self) -> bool:
        return self.validation_problem() is None

    def perimeter(self) -> float:
        sides = sum(line_length(a, b) for a, b in zip(self.points, self.points[1:]))
        return sides + line_length(self.points[0], self.points[-1])

    def describe(self) -> str:
        lines = [f"Polygon {self.name}"]
        lines.extend(f"Point {number} {point} " for number, point in enumerate(self.points, 1))
        return "\n".join(lines)

    def describe_perimeter(self) -> str:
        return f"Polygon with perimeter {self.perimeter():g}"


class FigureCollection:
    """An ordered, mutable collection of figures."""

    def __init__(self) -> None:
        self._figures: list[Figure] = []

    def __len__(self) -> int:
        return len(self._figures)

    def __iter__(self) -> Iterator[Figure]:
        return iter(self._figures)

    def __getitem__(self, index: int) -> Figure:
        return self._figures[index]

    def add(self, figure: Figure) -> None:
        """Append a figure at the end."""
        self._figures.append(figure)

    def remove(self, index: int) -> Figure:
        """Remove and return the figure at a zero-based position."""
        return self._figures.pop(index)

    def sort_by_perimeter(self) -> None:
        """Order the figures by ascending perimeter."""
        self._figures.sort(key=lambda figure: figure.perimeter())

    def total_perimeter(self) -> float:
        """Sum of the perimeters of all figures."""
        return math.fsum(figure.perimeter() for figure in self._figures)

    def remove_longer_than(self, limit: float) -> int:
        """Drop every figure whose perimeter exceeds ``limit``; return how many went."""
        kept = [figure for figure in self._figures if not figure.perimeter() > limit]
        removed = len(self._figures) - len(kept)
        self._figures = kept
        return removed