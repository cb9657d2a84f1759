import math

from shapelab.surface.geometry import Point3, rotation_z, translation
from shapelab.surface.scene import Edge, Mesh, Scene, Vertex


def _square_mesh() -> Mesh:
    vertices = [
        Vertex(Point3(0.0, 0.0, 0.0)),
        Vertex(Point3(1.0, 0.0, 0.0)),
        Vertex(Point3(1.0, 1.0, 0.0)),
        Vertex(Point3(0.0, 1.0, 0.0)),
    ]
    edges = [Edge(vertices[i], vertices[(i + 1) % 4]) for i in range(4)]
    return Mesh(vertices, edges)


def _edge_length(edge: Edge) -> float:
    a, b = edge.begin.position, edge.end.position
    return math.dist((a.x, a.y, a.z), (b.x, b.y, b.z))


def test_vertex_transform_moves_position():
    vertex = Vertex(Point3(1.0, 2.0, 3.0))
    vertex.transform(translation(4.0, 5.0, 6.0))
    assert vertex.position == translation(4.0, 5.0, 6.0).transform_point(Point3(1.0, 2.0, 3.0))


def test_mesh_transform_moves_every_vertex():
    mesh = _square_mesh()
    before = [v.position for v in mesh.vertices]
    matrix = translation(2.0, -1.0, 0.5)
    mesh.transform(matrix)
    assert [v.position for v in mesh.vertices] == [matrix.transform_point(p) for p in before]


def test_edges_follow_their_vertices():
    mesh = _square_mesh()
    mesh.transform(translation(3.0, 3.0, 3.0))
    for index, edge in enumerate(mesh.edges):
        assert edge.begin.position == mesh.vertices[index].position
        assert edge.end.position == mesh.vertices[(index + 1) % 4].position


def test_rotation_keeps_edge_lengths():
    mesh = _square_mesh()
    before = [_edge_length(edge) for edge in mesh.edges]
    mesh.transform(rotation_z(33))
    after = [_edge_length(edge) for edge in mesh.edges]
    assert all(math.isclose(a, b) for a, b in zip(before, after))


def test_scene_transforms_all_meshes():
    first, second = _square_mesh(), _square_mesh()
    scene = Scene([first, second])
    matrix = translation(0.0, 0.0, 10.0)
    expected = [matrix.transform_point(v.position) for v in first.vertices]
    scene.transform(matrix)
    assert [v.position for v in first.vertices] == expected
    assert [v.position for v in second.vertices] == expected


def test_empty_scene_transform_leaves_it_empty():
    scene = Scene()
    scene.transform(translation(1.0, 1.0, 1.0))
    assert scene.figures == []