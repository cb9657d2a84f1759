"""Points in space and 4x4 affine transformation matrices."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

_SIZE = 4


@dataclass(frozen=True)
class Point3:
    """A point in three-dimensional space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


class TransformMatrix:
    """A 4x4 matrix acting on points in homogeneous coordinates.

    Without rows the matrix is all zeros.
    """

    def __init__(self, rows: Iterable[Sequence[float]] | None = None) -> None:
        if rows is None:
            self._rows = tuple((0.0,) * _SIZE for _ in range(_SIZE))
            return
        matrix = tuple(tuple(float(value) for value in row) for row in rows)
        if len(matrix) != _SIZE or any(len(row) != _SIZE for row in matrix):
            raise ValueError("a transform matrix must have 4 rows of 4 values")
        self._rows = matrix

    @property
    def rows(self) -> tuple[tuple[float, ...], ...]:
        """The matrix entries, row by row."""
        return self._rows

    def __matmul__(self, other: TransformMatrix) -> TransformMatrix:
        if not isinstance(other, TransformMatrix):
            return NotImplemented
        columns = list(zip(*other._rows))
        return TransformMatrix(
            [sum(a * b for a, b in zip(row, column)) for column in columns]
            for row in self._rows
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TransformMatrix):
            return NotImplemented
        return self._rows == other._rows

    def __hash__(self) -> int:
        return hash(self._rows)

    def __repr__(self) -> str:
        return f"TransformMatrix({[list(row) for row in self._rows]!r})"

    def transform_point(self, point: Point3) -> Point3:
        """Apply the matrix to a point, treating it as (x, y, z, 1)."""
        source = (point.x, point.y, point.z, 1.0)
        x, y, z = (sum(a * b for a, b in zip(row, source)) for row in self._rows[:3])
        return Point3(x, y, z)


def rotation_x(degrees: float) -> TransformMatrix:
    """Rotation about the X axis by an angle in degrees."""
    rad = math.radians(degrees)
    c, s = math.cos(rad), math.sin(rad)
    return TransformMatrix(
        [
            [1, 0, 0, 0],
            [0, c, -s, 0],
            [0, s, c, 0],
            [0, 0, 0, 1],
        ]
    )


def rotation_y(degrees: float) -> TransformMatrix:
    """Rotation about the Y axis by an angle in degrees."""
    rad = math.radians(degrees)
    c, s = math.cos(rad), math.sin(rad)
    return TransformMatrix(
        [
            [c, 0, s, 0],
            [0, 1, 0, 0],
            [-s, 0, c, 0],
            [0, 0, 0, 1],
        ]
    )


def rotation_z(degrees: float) -> TransformMatrix:
    """Rotation about the Z axis by an angle in degrees."""
    rad = math.radians(degrees)
    c, s = math.cos(rad), math.sin(rad)
    return TransformMatrix(
        [
            [c, -s, 0, 0],
            [s, c, 0, 0],
            [0, 0, 1, 0],
            [0, 0, 0, 1],
        ]
    )


def translation(x: float, y: float, z: float) -> TransformMatrix:
    """Shift by the given offsets along each axis."""
    return TransformMatrix(
        [
            [1, 0, 0, x],
            [0, 1, 0, y],
            [0, 0, 1, z],
            [0, 0, 0, 1],
        ]
    )


def scaling(x: float, y: float, z: float) -> TransformMatrix:
    """Scale along each axis; factors are percentages, so 100 keeps the size."""
    return TransformMatrix(
        [
            [x / 100, 0, 0, 0],
            [0, y / 100, 0, 0],
            [0, 0, z / 100, 0],
            [0, 0, 0, 1],
        ]
    )