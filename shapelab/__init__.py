"""Plane figures, a transformable 3D surface mesh and a dense matrix type."""

__version__ = "0.1.0"