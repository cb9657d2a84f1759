"""Vertices, edges, wire meshes and the scene that holds them."""

from __future__ import annotations

from dataclasses import dataclass, field

from shapelab.surface.geometry import Point3, TransformMatrix


@dataclass(eq=False)
class Vertex:
    """A movable point of a mesh."""

    position: Point3

    def transform(self, matrix: TransformMatrix) -> None:
        """Move the vertex by applying ``matrix`` to its position."""
        self.position = matrix.transform_point(self.position)


@dataclass(frozen=True, eq=False)
class Edge:
    """A segment joining two vertices; it follows them when they move."""

    begin: Vertex
    end: Vertex


@dataclass
class Mesh:
    """A wire figure made of vertices and the edges between them."""

    vertices: list[Vertex] = field(default_factory=list)
    edges: list[Edge] = field(default_factory=list)

    def transform(self, matrix: TransformMatrix) -> None:
        """Apply ``matrix`` to every vertex."""
        for vertex in self.vertices:
            vertex.transform(matrix)


@dataclass
class Scene:
    """A set of meshes transformed together."""

    figures: list[Mesh] = field(default_factory=list)

    def transform(self, matrix: TransformMatrix) -> None:
        """Apply ``matrix`` to every mesh in the scene."""
        for figure in self.figures:
            figure.transform(matrix)