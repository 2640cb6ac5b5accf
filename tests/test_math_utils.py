import math

import pytest

from perspective_wireframe.math_utils import Vec3, Mat3, subtract, magnitude, rotate


def test_subtract_is_componentwise():
    assert subtract(Vec3(3, 5, 7), Vec3(1, 2, 3)) == Vec3(2, 3, 4)
    assert Vec3(3, 5, 7) - Vec3(1, 2, 3) == Vec3(2, 3, 4)


def test_magnitude():
    assert magnitude(Vec3(3, 4, 12)) == 13
    assert Vec3(0, 0, 0).magnitude() == 0


def test_vec3_is_immutable():
    v = Vec3(1, 2, 3)
    with pytest.raises(AttributeError):
        v.x = 5
    assert v == Vec3(1, 2, 3)


def test_vec3_value_semantics():
    assert Vec3.of((1, 2, 3)) == Vec3(1.0, 2.0, 3.0)
    assert len({Vec3(1, 2, 3), Vec3(1, 2, 3)}) == 1
    assert list(Vec3(1, 2, 3)) == [1.0, 2.0, 3.0]
    assert Vec3(1, 2, 3)[2] == 3.0
    with pytest.raises(IndexError):
        Vec3()[3]


def test_is_finite():
    assert Vec3(1, 2, 3).is_finite()
    assert not Vec3(math.inf, 0, 0).is_finite()
    assert not Vec3(0, math.nan, 0).is_finite()


@pytest.mark.parametrize(
    "matrix, v, expected",
    [
        (Mat3.rotation_x(math.pi / 2), Vec3(0, 1, 0), (0, 0, 1)),
        (Mat3.rotation_y(math.pi / 2), Vec3(1, 0, 0), (0, 0, -1)),
        (Mat3.rotation_z(math.pi / 2), Vec3(1, 0, 0), (0, 1, 0)),
    ],
)
def test_elemental_rotations(matrix, v, expected):
    result = rotate(matrix, v)
    assert tuple(result) == pytest.approx(expected, abs=1e-12)


def test_identity_and_composition():
    v = Vec3(1, -2, 3)
    assert Mat3.identity() @ v == v

    combined = Mat3.rotation_x(0.3) @ Mat3.rotation_x(0.4)
    expected = Mat3.rotation_x(0.7)
    for row, expected_row in zip(combined.m, expected.m):
        assert row == pytest.approx(expected_row)


def test_rotation_preserves_length():
    v = Vec3(3, -7, 11)
    m = Mat3.rotation_y(1.1) @ Mat3.rotation_x(-0.4)
    assert m.mul_vec3(v).magnitude() == pytest.approx(v.magnitude())
