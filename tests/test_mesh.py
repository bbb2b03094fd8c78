import pytest

from wireframe_ppm.color import RED, GREEN, BLUE, YELLOW, PURPLE, CYAN
from wireframe_ppm.math_utils import Vec3
from wireframe_ppm.mesh import Mesh, Triangle
from wireframe_ppm.scene import Scene


def test_cube_topology():
    cube = Mesh.cube()
    assert len(cube.vertices) == 8
    assert len(cube.triangles) == 12
    assert cube.vertices[0] == Vec3(1, 1, 1)
    assert cube.vertices[6] == Vec3(-1, -1, -1)
    assert cube.triangles[0] == Triangle((0, 1, 2), RED)
    assert cube.triangles[-1] == Triangle((2, 7, 3), CYAN)
    assert [t.color for t in cube.triangles[::2]] == [RED, GREEN, BLUE, YELLOW, PURPLE, CYAN]


def test_translated_and_scaled_share_topology():
    cube = Mesh.cube()
    moved = cube.translated(3, 0, 1)
    big = cube.scaled(1.5)
    assert moved.vertices[0] == Vec3(4, 1, 2)
    assert big.vertices[6] == Vec3(-1.5, -1.5, -1.5)
    assert moved.triangles == cube.triangles == big.triangles
    # Source mesh is untouched
    assert cube.vertices[0] == Vec3(1, 1, 1)


def test_invalid_index_rejected():
    with pytest.raises(ValueError):
        Mesh([(0, 0, 1), (1, 0, 1)], [((0, 1, 2), RED)])
    with pytest.raises(ValueError):
        Mesh([(0, 0, 1)], [((0, -1, 0), RED)])


def test_vec3_is_immutable():
    v = Vec3(1, 2, 3)
    with pytest.raises(AttributeError):
        v.x = 5
    assert list(v) == [1.0, 2.0, 3.0]
    assert v[2] == 3.0
    assert 2 * v == Vec3(2, 4, 6)
    assert v + Vec3(1, 1, 1) == Vec3(2, 3, 4)


def test_vec3_supports_only_add_and_scale():
    v = Vec3(1, 2, 3)
    with pytest.raises(TypeError):
        v - v
    with pytest.raises(TypeError):
        v / 2


def test_scene_order():
    a, b = Mesh.cube(), Mesh.cube().scaled(2)
    scene = Scene()
    assert scene.add(a) is a
    scene.add(b)
    assert len(scene) == 2
    assert list(scene) == [a, b]
    scene.clear()
    assert len(scene) == 0
