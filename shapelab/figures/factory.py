"""Interactive construction of figures."""

from __future__ import annotations

from shapelab.figures.prompts import FigureKind, Prompter
from shapelab.figures.shapes import Circle, Figure, Polygon, Rectangle, Triangle


class FigureFactory:
    """Builds figures from values asked of the user."""

    def __init__(self, prompter: Prompter) -> None:
        self.prompter = prompter

    def _read_name(self) -> str:
        return self.prompter.read_line("\nInput name of figure: ")

    def create(self, kind: FigureKind) -> Figure:
        """Build a figure of the given kind."""
        builders = {
            FigureKind.CIRCLE: self.create_circle,
            FigureKind.RECTANGLE: self.create_rectangle,
            FigureKind.TRIANGLE: self.create_triangle,
            FigureKind.POLYGON: self.create_polygon,
        }
        try:
            builder = builders[FigureKind(kind)]
        except ValueError:
            raise ValueError(f"unknown figure kind: {kind!r}") from None
        return builder()

    def create_circle(self) -> Circle:
        name = self._read_name()
        self.prompter.write("Enter center of circle.")
        center = self.prompter.read_point()
        self.prompter.write("Enter radius of circle: ")
        radius = self.prompter.read_positive_float()
        return Circle(name, center, radius)

    def create_rectangle(self) -> Rectangle:
        name = self._read_name()
        self.prompter.write("Enter left upper point coordinates.")
        upper_left = self.prompter.read_point()
        self.prompter.write("Enter right down point coordinates.")
        lower_right = self.prompter.read_point()
        return Rectangle(name, [upper_left, lower_right])

    def create_triangle(self) -> Triangle:
        name = self._read_name()
        return Triangle(name, [self.prompter.read_point() for _ in range(3)])

    def create_polygon(self) -> Polygon:
        name = self._read_name()
        self.prompter.write("How many points does a polygon have?")
        amount = self.prompter.read_positive_int()
        points = [self.prompter.read_point() for _ in range(amount)]
        self.prompter.write("Input is over")
        return Polygon(name, points)