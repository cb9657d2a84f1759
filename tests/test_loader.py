import math

import pytest

from shapelab.surface.geometry import Point3, translation
from shapelab.surface.loader import (
    NormalizationParameters,
    SceneLoadError,
    make_edges,
    make_vertices,
    normalize,
    read_grid,
    read_scene,
)

PARAMS = NormalizationParameters(minimum=0.0, maximum=10.0, dx_step=2.0, dy_step=3.0)


def write(tmp_path, text, name="grid.csv"):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_read_grid_parses_rows(tmp_path):
    path = write(tmp_path, "1,2\n3,4\n")
    assert read_grid(path) == [[1.0, 2.0], [3.0, 4.0]]


def test_read_grid_keeps_leading_integer_of_field(tmp_path):
    path = write(tmp_path, "1.7, 2\n")
    assert read_grid(path) == [[1.0, 2.0]]


def test_read_grid_empty_line(tmp_path):
    path = write(tmp_path, "1,2\n\n3,4\n")
    with pytest.raises(SceneLoadError, match="Line is empty!"):
        read_grid(path)


def test_read_grid_missing_file(tmp_path):
    with pytest.raises(SceneLoadError, match="File was not opened!"):
        read_grid(tmp_path / "absent.csv")


def test_read_grid_rejects_non_numbers(tmp_path):
    path = write(tmp_path, "1,abc\n")
    with pytest.raises(SceneLoadError):
        read_grid(path)


def test_read_grid_rejects_empty_field(tmp_path):
    path = write(tmp_path, "1,,2\n")
    with pytest.raises(SceneLoadError):
        read_grid(path)


def test_normalize_maps_onto_range_and_keeps_order():
    data = [[4.0, 1.0], [9.0, 6.0]]
    result = normalize(data, PARAMS)
    flat = [v for row in result for v in row]
    assert min(flat) == pytest.approx(PARAMS.minimum)
    assert max(flat) == pytest.approx(PARAMS.maximum)
    original = [v for row in data for v in row]
    assert sorted(range(4), key=lambda k: flat[k]) == sorted(range(4), key=lambda k: original[k])
    assert data == [[4.0, 1.0], [9.0, 6.0]]


def test_normalize_constant_grid_gives_nan():
    result = normalize([[5.0, 5.0], [5.0, 5.0]], PARAMS)
    nan_flags = [math.isnan(v) for row in result for v in row]
    assert nan_flags == [True, True, True, True]


def test_make_vertices_positions():
    data = [[5.0, 6.0], [7.0, 8.0]]
    vertices = make_vertices(data, PARAMS)
    assert len(vertices) == len(data) * len(data[0])
    assert vertices[0].position == Point3(0.0, 0.0, 5.0)
    assert vertices[3].position == Point3(1 * PARAMS.dx_step, 1 * PARAMS.dy_step, 8.0)


def test_make_edges_joins_neighbours_and_shares_vertices():
    data = [[float(i * 3 + j) for j in range(3)] for i in range(3)]
    vertices = make_vertices(data, PARAMS)
    edges = make_edges(vertices, 3, 3)
    assert len(edges) == 12
    assert edges[0].begin is vertices[0]
    assert edges[0].end is vertices[3]
    assert edges[1].end is vertices[1]
    vertices[0].transform(translation(1.0, 1.0, 1.0))
    assert edges[0].begin.position == vertices[0].position


def test_read_scene_builds_single_mesh(tmp_path):
    path = write(tmp_path, "1,2,3\n4,5,6\n7,8,9\n")
    scene = read_scene(path, PARAMS)
    assert len(scene.figures) == 1
    mesh = scene.figures[0]
    assert len(mesh.vertices) == 3 * 3
    heights = [v.position.z for v in mesh.vertices]
    assert min(heights) == pytest.approx(PARAMS.minimum)
    assert max(heights) == pytest.approx(PARAMS.maximum)


def test_read_scene_empty_path_gives_none():
    assert read_scene("", PARAMS) is None


def test_read_scene_rejects_non_square(tmp_path):
    path = write(tmp_path, "1,2,3\n4,5,6\n")
    with pytest.raises(SceneLoadError, match="Incorrect file!"):
        read_scene(path, PARAMS)


@pytest.mark.parametrize(
    "params, message",
    [
        (NormalizationParameters(5.0, 5.0, 1.0, 1.0), "Max should be greater then Min"),
        (NormalizationParameters(0.0, 1.0, 0.0, -1.0), "Steps by X and Y couldn't be <= 0"),
        (NormalizationParameters(0.0, 1.0, 0.0, 1.0), "Step by X can't be <= 0"),
        (NormalizationParameters(0.0, 1.0, 1.0, 0.0), "Step by Y can't be <= 0"),
    ],
)
def test_read_scene_rejects_bad_parameters(tmp_path, params, message):
    path = write(tmp_path, "1,2\n3,4\n")
    with pytest.raises(SceneLoadError, match=message):
        read_scene(path, params)