import math

import pytest

from shapelab.figures.geometry import Point, line_length, parse_point


def test_addition_and_subtraction_are_inverse():
    a = Point(1.5, -2.0)
    b = Point(3.0, 4.25)
    assert (a + b) - b == a
    assert (a + b).x == a.x + b.x
    assert (a - b).y == a.y - b.y


def test_ordering_compares_y_before_x():
    assert Point(10.0, 1.0) < Point(0.0, 2.0)
    assert Point(1.0, 2.0) < Point(3.0, 2.0)
    assert not Point(3.0, 2.0) < Point(1.0, 2.0)
    assert sorted([Point(5, 5), Point(9, 0), Point(0, 5)]) == [
        Point(9, 0),
        Point(0, 5),
        Point(5, 5),
    ]


def test_dot_of_perpendicular_vectors_is_zero():
    assert Point(2.0, 0.0).dot(Point(0.0, 7.0)) == 0.0


def test_dot_is_symmetric_and_cross_is_antisymmetric():
    a = Point(1.0, 2.0)
    b = Point(-3.0, 0.5)
    assert a.dot(b) == b.dot(a)
    assert a.cross(b) == -b.cross(a)
    assert a.cross(a) == 0.0


def test_polar_angle_of_axis_vector():
    assert math.isclose(Point(0.0, 1.0).polar_angle(), math.pi / 2)
    assert Point(1.0, 0.0).polar_angle() == 0.0


def test_line_length_of_right_triangle_hypotenuse():
    assert line_length(Point(0, 0), Point(3, 4)) == pytest.approx(5.0)


def test_line_length_is_symmetric():
    a = Point(-1.0, 2.5)
    b = Point(4.0, -6.0)
    assert line_length(a, b) == line_length(b, a)
    assert line_length(a, a) == 0.0


def test_parse_point_reads_semicolon_separated_pair():
    assert parse_point("1.5;2") == Point(1.5, 2.0)
    assert parse_point(" -3 ; 4.25 ") == Point(-3.0, 4.25)


@pytest.mark.parametrize("text", ["1.5", "1;2;3", "a;2", "", "1,2"])
def test_parse_point_rejects_malformed_text(text):
    with pytest.raises(ValueError):
        parse_point(text)


def test_str_formats_coordinates():
    assert str(Point(1.0, 2.5)) == "( 1 , 2.5 )"