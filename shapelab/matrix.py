"""A dense two-dimensional matrix with element-wise and matrix arithmetic."""

from __future__ import annotations

import argparse
import numbers
from collections.abc import Iterable, Iterator
from typing import Any


def _format_value(value: Any) -> str:
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


class Matrix:
    """A rectangular matrix stored row by row.

    Elements are addressed with zero-based ``matrix[i, j]`` or with
    one-based ``matrix(i, j)``.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, rows: int = 0, columns: int = 0) -> None:
        if rows < 0 or columns < 0:
            raise ValueError("Matrix dimensions cannot be negative")
        self._rows = rows
        self._columns = columns
        self._data: list[Any] = [0] * (rows * columns)

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[Any]]) -> Matrix:
        """Build a matrix from rows; shorter rows are padded with zeros."""
        materialized = [list(row) for row in rows]
        if not materialized:
            raise ValueError("Matrix cannot be constructed from an empty list of rows")
        if any(not row for row in materialized):
            raise ValueError("Matrix cannot be constructed from a list with empty rows")
        width = max(len(row) for row in materialized)
        result = cls(len(materialized), width)
        result._data = [
            value for row in materialized for value in row + [0] * (width - len(row))
        ]
        return result

    @classmethod
    def _from_flat(cls, rows: int, columns: int, data: Iterable[Any]) -> Matrix:
        result = cls(rows, columns)
        result._data = list(data)
        return result

    def _copy(self) -> Matrix:
        return self._from_flat(self._rows, self._columns, self._data)

    def _offset(self, i: int, j: int) -> int:
        if not (0 <= i < self._rows and 0 <= j < self._columns):
            raise IndexError("Out of matrix bounds")
        return i * self._columns + j

    def __getitem__(self, key: tuple[int, int]) -> Any:
        i, j = key
        return self._data[self._offset(i, j)]

    def __setitem__(self, key: tuple[int, int], value: Any) -> None:
        i, j = key
        self._data[self._offset(i, j)] = value

    def __call__(self, i: int, j: int) -> Any:
        """Element at one-based row ``i`` and column ``j``."""
        return self._data[self._offset(i - 1, j - 1)]

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._data))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return (
            self._rows == other._rows
            and self._columns == other._columns
            and self._data == other._data
        )

    def _same_shape(self, other: Matrix) -> bool:
        return self._rows == other._rows and self._columns == other._columns

    def _map(self, operation) -> Matrix:
        return self._from_flat(
            self._rows, self._columns, (operation(value) for value in self._data)
        )

    def __add__(self, other: Any) -> Matrix:
        if isinstance(other, Matrix):
            if not self._same_shape(other):
                raise ValueError("Cannot add matrices of different sizes")
            result = self._copy()
            result += other
            return result
        if isinstance(other, numbers.Number):
            return self._map(lambda value: value + other)
        return NotImplemented

    def __sub__(self, other: Any) -> Matrix:
        if isinstance(other, Matrix):
            if not self._same_shape(other):
                raise ValueError("Cannot subtract matrices of different sizes")
            result = self._copy()
            result -= other
            return result
        if isinstance(other, numbers.Number):
            return self._map(lambda value: value - other)
        return NotImplemented

    def __mul__(self, other: Any) -> Matrix:
        if isinstance(other, Matrix):
            if self._columns != other._rows:
                raise ValueError("Cannot multiply matrices")
            columns = [
                other._data[j :: other._columns] for j in range(other._columns)
            ]
            rows = [
                self._data[i * self._columns : (i + 1) * self._columns]
                for i in range(self._rows)
            ]
            return self._from_flat(
                self._rows,
                other._columns,
                (
                    sum(a * b for a, b in zip(row, column))
                    for row in rows
                    for column in columns
                ),
            )
        if isinstance(other, numbers.Number):
            return self._map(lambda value: value * other)
        return NotImplemented

    def __rmul__(self, other: Any) -> Matrix:
        if isinstance(other, numbers.Number):
            return self._map(lambda value: other * value)
        return NotImplemented

    def __truediv__(self, number: Any) -> Matrix:
        if not isinstance(number, numbers.Number):
            return NotImplemented
        return self._map(lambda value: value / number)

    def __iadd__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        if not self._same_shape(other):
            raise ValueError("Matrices must have equal dimensions")
        self._data = [a + b for a, b in zip(self._data, other._data)]
        return self

    def __isub__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        if not self._same_shape(other):
            raise ValueError("Matrices must have equal dimensions")
        self._data = [a - b for a, b in zip(self._data, other._data)]
        return self

    def __str__(self) -> str:
        lines = []
        for i in range(self._rows):
            row = self._data[i * self._columns : (i + 1) * self._columns]
            lines.append("".join(_format_value(value) + " " for value in row) + "\n")
        return "".join(lines)

    def __repr__(self) -> str:
        rows = [
            self._data[i * self._columns : (i + 1) * self._columns]
            for i in range(self._rows)
        ]
        return f"Matrix.from_rows({rows!r})"

    def is_square(self) -> bool:
        return self._rows == self._columns

    def row_count(self) -> int:
        return self._rows

    def column_count(self) -> int:
        return self._columns


def main(argv: list[str] | None = None) -> int:
    """Print a walk-through of matrix construction and arithmetic."""
    argparse.ArgumentParser(
        prog="shapelab-matrix", description="Demonstrate matrix operations."
    ).parse_args(argv)

    helper = Matrix.from_rows([[1, 2, 123], [3, 4, 2], [5, 6, 7]])

    a = Matrix.from_rows([[1, 2], [3, 4, 2], [5, 6, 7, 8]])
    print(f"Matrix A initialized from rows\n{a}")
    print("Output A by iteration" + "".join(f"{_format_value(v)} " for v in a))

    b = a._copy()
    print(f"\nMatrix B initialized by copy A\n{b}", end="")

    c = Matrix(2, 3)
    c[1, 1] = 1990
    c[1, 2] = 21
    print(f"\nMatrix C initialized with dimensions and 2 elements set\n{c}", end="")

    d, a = a, Matrix()
    print(f"Matrix D took over A\n{d}\nMatrix A after hand-over\n{a}")

    e = helper._copy()
    print(f"Matrix E initialized by copy\n{e}")

    f = e * d
    print(f"Matrix F after binary operation * matrix's E and D\n{f}")

    p1 = Matrix.from_rows([[1, 2], [3, 4]])
    p2 = Matrix.from_rows([[1, 2], [3, 4]])
    print(f"Matrix p1\n{p1}\nMatrix p2\n{p2}")

    f = p1 + p2
    print(f"Matrix F after binary operation + matrix's p1 and p2\n{f}")
    f = p1 - p2
    print(f"Matrix F after binary operation - matrix's p1 and p2\n{f}")
    f = p1 + 2
    print(f"Matrix F after binary operation + matrix p1 and 2\n{f}")
    f = p1 - 2
    print(f"Matrix F after binary operation - matrix p1 and 2\n{f}")
    f = p1 * 2
    print(f"Matrix F after binary operation * matrix p1 and 2\n{f}")
    f = p1 / 2
    print(f"Matrix F after binary operation / matrix p1 and 2\n{f}")

    print(f"p1 matrix element (0; 0): {p1[0, 0]}")
    print(
        f"\nCheck if F is square {int(f.is_square())} "
        f"and if C is square {int(c.is_square())}"
    )
    print(
        f"\nLet's get row and column count of C: rows - {c.row_count()}, "
        f"columns - {c.column_count()}"
    )
    return 0