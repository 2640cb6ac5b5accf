import math

import pytest

from perspective_wireframe.camera import Camera, CameraSnapshot
from perspective_wireframe.math_utils import Vec3
from perspective_wireframe.projector import Projector


@pytest.fixture
def projector():
    return Projector(1500, 800)


def test_on_axis_point_lands_on_viewport_centre(projector):
    cam = Camera()
    [(sx, sy)] = projector.convert_points([Vec3(0, 0, 100)], cam)
    assert (sx, sy) == pytest.approx((750, 400))


def test_origin_stays_centred_for_rotated_camera(projector):
    cam = Camera(position=(0, 50, -50))
    assert cam.angle_yz == pytest.approx(math.pi / 4)
    projected = projector.project(Vec3(0, 0, 0), cam)
    assert projected.z == pytest.approx(math.sqrt(50 ** 2 + 50 ** 2))
    assert projector.to_screen(projected) == pytest.approx((750, 400))


def test_zero_angles_do_not_rotate(projector):
    rotated = projector.rotate(Vec3(1, 2, 3), Camera())
    assert tuple(rotated) == pytest.approx((1, 2, 3))


def test_depth_is_distance_to_camera(projector):
    assert projector.depth(Vec3(0, 0, 100), Camera()) == pytest.approx(150)


def test_perspective_formula():
    # tan(45 deg) == 1: 1500 * 100 / (1500 + 2 * 750)
    assert Projector.perspective(100, 1500, 750, 90) == pytest.approx(50)
    assert Projector.perspective(100, 1500, 0, 90) == pytest.approx(100)


def test_perspective_shrinks_with_depth():
    sizes = [abs(Projector.perspective(120, 1500, d, 120)) for d in range(0, 2000, 50)]
    assert all(a > b for a, b in zip(sizes, sizes[1:]))
    negative = [abs(Projector.perspective(-120, 800, d, 60)) for d in range(0, 2000, 50)]
    assert all(a > b for a, b in zip(negative, negative[1:]))


def test_farther_points_move_towards_centre(projector):
    cam = Camera()
    points = [Vec3(30, 20, z) for z in range(0, 1000, 100)]
    offsets = [math.hypot(sx - 750, sy - 400) for sx, sy in projector.convert_points(points, cam)]
    assert all(a > b for a, b in zip(offsets, offsets[1:]))


def test_viewport_mapping_flips_y(projector):
    assert projector.to_screen(Vec3(10, 20, 0)) == pytest.approx((760, 380))
    [(_, sy)] = projector.convert_points([Vec3(0, 100, 0)], Camera())
    assert sy < 400


def test_view_axis_rotation_applies_when_set(projector):
    snapshot = CameraSnapshot(position=Vec3(0, 0, -50), direction=Vec3(), fov=120,
                              angle_yz=0.0, angle_xz=0.0, angle_xy=math.pi / 2)
    rotated = projector.rotate(Vec3(1, 0, 0), snapshot)
    assert tuple(rotated) == pytest.approx((0, 1, 0), abs=1e-12)


def test_non_finite_input_does_not_raise(projector):
    projected = projector.project(Vec3(math.inf, 0, 0), Camera())
    assert not math.isfinite(projected.x)
