import io

import pytest

from shapelab.figures.factory import FigureFactory
from shapelab.figures.geometry import Point
from shapelab.figures.prompts import FigureKind, Prompter
from shapelab.figures.shapes import Circle, Polygon, Rectangle, Triangle


def make(text):
    out = io.StringIO()
    return FigureFactory(Prompter(io.StringIO(text), out)), out


def test_create_circle():
    factory, out = make("Ring\n1;2\n3\n")
    circle = factory.create_circle()
    assert isinstance(circle, Circle)
    assert circle.name == "Ring"
    assert circle.center == Point(1.0, 2.0)
    assert circle.radius == 3.0
    assert "Enter radius of circle: " in out.getvalue()


def test_create_circle_retries_negative_radius():
    factory, out = make("Ring\n0;0\n-2\n4\n")
    circle = factory.create_circle()
    assert circle.radius == 4.0
    assert "Enter positive float" in out.getvalue()


def test_create_rectangle():
    factory, out = make("Box\n0;5\n4;1\n")
    rect = factory.create_rectangle()
    assert isinstance(rect, Rectangle)
    assert rect.points == [Point(0.0, 5.0), Point(4.0, 1.0)]
    assert rect.is_valid()
    assert "Enter right down point coordinates." in out.getvalue()


def test_create_triangle():
    factory, _ = make("Tri\n0;0\n1;0\n0;1\n")
    tri = factory.create_triangle()
    assert isinstance(tri, Triangle)
    assert tri.name == "Tri"
    assert tri.points == [Point(0, 0), Point(1, 0), Point(0, 1)]


def test_create_polygon_reads_requested_number_of_points():
    factory, out = make("Quad\n0\n4\n0;0\n0;1\n1;1\n1;0\n")
    poly = factory.create_polygon()
    assert isinstance(poly, Polygon)
    assert len(poly.points) == 4
    assert poly.points[2] == Point(1, 1)
    assert "Input is over" in out.getvalue()


def test_create_dispatches_on_kind():
    factory, _ = make("C\n0;0\n2\n")
    figure = factory.create(FigureKind.CIRCLE)
    assert isinstance(figure, Circle)
    assert figure.radius == 2.0


def test_create_rejects_unknown_kind():
    factory, _ = make("")
    with pytest.raises(ValueError):
        factory.create(9)