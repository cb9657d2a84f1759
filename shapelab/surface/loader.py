"""Reading a height grid from a CSV file and turning it into a wire-mesh scene."""

from __future__ import annotations

import math
import os
import re
from collections.abc import Sequence
from dataclasses import dataclass

from shapelab.surface.geometry import Point3
from shapelab.surface.scene import Edge, Mesh, Scene, Vertex

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


class SceneLoadError(Exception):
    """Raised when a grid file cannot be read or its parameters are unusable."""


@dataclass(frozen=True)
class NormalizationParameters:
    """Target height range and grid spacing for a loaded surface."""

    minimum: float
    maximum: float
    dx_step: float
    dy_step: float


def _parse_value(text: str) -> float:
    """Read the integer that a field starts with, ignoring what follows it."""
    match = _LEADING_INT.match(text)
    if match is None:
        raise SceneLoadError(f"Not an integer value: {text!r}")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise SceneLoadError(f"Value out of range: {text!r}")
    return float(value)


def read_grid(path: str | os.PathLike[str]) -> list[list[float]]:
    """Read comma-separated rows of integer heights from a file."""
    try:
        with open(path, encoding="utf-8") as file:
            lines = [line.rstrip("\n") for line in file]
    except OSError as err:
        raise SceneLoadError("File was not opened!") from err

    data = []
    for line in lines:
        if not line:
            raise SceneLoadError("Line is empty!")
        data.append([_parse_value(field) for field in line.split(",")])
    return data


def normalize(
    data: Sequence[Sequence[float]], parameters: NormalizationParameters
) -> list[list[float]]:
    """Rescale all heights linearly onto the parameters' range.

    When every height is the same the result is NaN throughout.
    """
    values = [value for row in data for value in row]
    if not values:
        return [list(row) for row in data]
    low, high = min(values), max(values)
    span = high - low
    target = parameters.maximum - parameters.minimum

    def rescale(value: float) -> float:
        if span == 0:
            return math.nan
        return parameters.minimum + ((value - low) * target) / span

    return [[rescale(value) for value in row] for row in data]


def make_vertices(
    data: Sequence[Sequence[float]], parameters: NormalizationParameters
) -> list[Vertex]:
    """One vertex per grid cell, row by row, spaced by the parameters' steps."""
    return [
        Vertex(Point3(i * parameters.dx_step, j * parameters.dy_step, value))
        for i, row in enumerate(data)
        for j, value in enumerate(row)
    ]


def make_edges(vertices: Sequence[Vertex], length: int, width: int) -> list[Edge]:
    """Join each grid vertex to its neighbours in the next row and the next column."""
    edges = []
    for i in range(length):
        for j in range(width):
            here = vertices[width * i + j]
            if i + 1 < length:
                edges.append(Edge(here, vertices[width * (i + 1) + j]))
            if j + 1 < width:
                edges.append(Edge(here, vertices[width * i + j + 1]))
    return edges


def read_scene(
    path: str | os.PathLike[str], parameters: NormalizationParameters
) -> Scene | None:
    """Load a square height grid as a scene holding one mesh.

    An empty path gives None.
    """
    if not os.fspath(path):
        return None

    data = read_grid(path)
    if not data or len(data) != len(data[0]) or any(len(row) != len(data[0]) for row in data):
        raise SceneLoadError("Incorrect file!")
    if parameters.maximum <= parameters.minimum:
        raise SceneLoadError("Max should be greater then Min")
    if parameters.dx_step <= 0 and parameters.dy_step <= 0:
        raise SceneLoadError("Steps by X and Y couldn't be <= 0")
    if parameters.dx_step <= 0:
        raise SceneLoadError("Step by X can't be <= 0")
    if parameters.dy_step <= 0:
        raise SceneLoadError("Step by Y can't be <= 0")

    data = normalize(data, parameters)
    vertices = make_vertices(data, parameters)
    edges = make_edges(vertices, len(data), len(data[0]))
    return Scene([Mesh(vertices, edges)])