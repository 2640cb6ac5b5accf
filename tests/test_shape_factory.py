import math

import pytest

from perspective_wireframe.factory import box_edges, make_box, make_cube
from perspective_wireframe.math_utils import Vec3
from perspective_wireframe.shape import Shape


CUBE_EDGES = {
    (0, 1), (0, 2), (0, 4),
    (1, 3), (2, 3), (3, 7),
    (1, 5), (4, 5), (5, 7),
    (2, 6), (4, 6), (6, 7),
}


def test_shape_rejects_out_of_range_edge():
    with pytest.raises(ValueError):
        Shape(0, [(0, 0, 0), (1, 0, 0)], [(0, 2)])


def test_shape_rejects_self_loop_and_duplicates():
    with pytest.raises(ValueError):
        Shape(0, [(0, 0, 0), (1, 0, 0)], [(1, 1)])
    with pytest.raises(ValueError):
        Shape(0, [(0, 0, 0), (1, 0, 0)], [(0, 1), (1, 0)])


def test_shape_is_read_only():
    shape = Shape(3, [(0, 0, 0), (1, 0, 0)], [(0, 1)])
    assert shape.index == 3
    assert shape.points == (Vec3(0, 0, 0), Vec3(1, 0, 0))
    with pytest.raises(AttributeError):
        shape.points = ()


def test_box_edges_are_the_cube_edges():
    edges = box_edges()
    assert len(edges) == 12
    assert set(edges) == CUBE_EDGES


@pytest.mark.parametrize("side", [1, 7.5, 100])
def test_cube_edges_all_have_side_length(side):
    cube = make_cube((3, -4, 5), side)
    assert len(cube.points) == 8
    assert len(cube.edges) == 12
    assert len({tuple(sorted(e)) for e in cube.edges}) == 12
    for length in cube.edge_lengths():
        assert length == side


def test_cube_vertex_layout():
    origin = Vec3(10, 20, 30)
    cube = make_cube(origin, 4)
    bottom, top = cube.points[:4], cube.points[4:]
    assert bottom == (Vec3(10, 20, 30), Vec3(14, 20, 30), Vec3(10, 24, 30), Vec3(14, 24, 30))
    for low, high in zip(bottom, top):
        assert high == low + Vec3(0, 0, 4)


def test_centered_cube_matches_corner_cube():
    s = 8
    centered = make_cube((10, 20, 30), s, centered=True)
    corner = make_cube((10 - s / 2, 20 - s / 2, 30 - s / 2), s)
    assert set(centered.points) == set(corner.points)

    origin = Vec3(-3, 2, 1)
    shifted = make_cube(origin + Vec3(s / 2, s / 2, s / 2), s, centered=True)
    assert set(shifted.points) == set(make_cube(origin, s).points)


def test_centering_does_not_touch_origin():
    origin = Vec3(1, 2, 3)
    make_cube(origin, 10, centered=True)
    assert origin == Vec3(1, 2, 3)


def test_box_extents():
    box = make_box((0, 0, 0), (2, 4, 6), index=5)
    assert box.index == 5
    assert sorted(box.edge_lengths()) == [2] * 4 + [4] * 4 + [6] * 4


@pytest.mark.parametrize("side", [0, -1, math.nan, math.inf])
def test_cube_rejects_bad_side(side):
    with pytest.raises(ValueError):
        make_cube((0, 0, 0), side)
