"""Loading, transforming and checking the visibility of a surface scene."""

from __future__ import annotations

import math
import os
from dataclasses import dataclass

from shapelab.surface.geometry import (
    Point3,
    rotation_x,
    rotation_y,
    rotation_z,
    scaling,
    translation,
)
from shapelab.surface.loader import NormalizationParameters, SceneLoadError, read_scene
from shapelab.surface.scene import Scene

_SQRT6 = math.sqrt(6)
_SQRT2 = math.sqrt(2)


@dataclass
class OperationResult:
    """Outcome of a scene operation; an empty message means success."""

    error_message: str = ""

    def is_success(self) -> bool:
        return self.error_message == ""


class SceneFacade:
    """Holds the current scene and applies transformations to it."""

    def __init__(self) -> None:
        self.scene: Scene | None = Scene()
        self.scene_is_loaded = False

    def _require_scene(self) -> Scene:
        if self.scene is None:
            raise SceneLoadError("File is not loaded")
        return self.scene

    def load_scene(
        self, path: str | os.PathLike[str], parameters: NormalizationParameters
    ) -> OperationResult:
        """Replace the scene with one read from ``path``."""
        self.scene = read_scene(path, parameters)
        self.scene_is_loaded = True
        if self.scene is None:
            raise SceneLoadError("Scene was not drew!")
        return OperationResult()

    def move_scene(self, x: float, y: float, z: float) -> OperationResult:
        """Shift the scene by the given offsets."""
        self._require_scene().transform(translation(x, y, z))
        return OperationResult()

    def rotate_scene(self, x: float, y: float, z: float) -> OperationResult:
        """Rotate about X, then Y, then Z by the given angles in degrees."""
        scene = self._require_scene()
        for angle, build in ((x, rotation_x), (y, rotation_y), (z, rotation_z)):
            if angle != 0:
                scene.transform(build(angle))
        return OperationResult()

    def scale_scene(self, x: float, y: float, z: float) -> OperationResult:
        """Scale by percentages; non-positive factors are reported but still applied."""
        result = OperationResult()
        if x <= 0 or y <= 0 or z <= 0:
            result.error_message = "Scale should be > 0"
        self._require_scene().transform(scaling(x, y, z))
        return result

    def clear_scene(self) -> None:
        """Forget the current scene."""
        self.scene = None
        self.scene_is_loaded = False


def project_isometric(point: Point3) -> tuple[float, float]:
    """Screen coordinates of a point in isometric projection."""
    return (
        (point.x + 2 * point.y + point.z) / _SQRT6,
        (point.x - point.z) / _SQRT2,
    )


def _truncating_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def scene_is_visible(scene: Scene, height: int, width: int) -> bool:
    """Whether any edge of the scene's first mesh starts inside the drawing area."""
    if not scene.figures:
        return False
    left, right = _truncating_div(-width, 4), _truncating_div(3 * width, 4)
    top, bottom = _truncating_div(-height, 4), _truncating_div(3 * height, 4)
    for edge in scene.figures[0].edges:
        x1, y1 = project_isometric(edge.begin.position)
        x2, y2 = project_isometric(edge.end.position)
        if (left < x1 < right and top < y1 < bottom) or (
            x2 < left and x2 > right and y2 < top and y2 > bottom
        ):
            return True
    return False