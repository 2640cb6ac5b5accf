#
# PROJECT: perspective-wireframe
# MODULE: perspective_wireframe/math_utils.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Section 1
# LOG_REF: 2026-10-19
#

import math


class Vec3:
    """Immutable 3-component vector."""
    __slots__ = ('x', 'y', 'z')

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        object.__setattr__(self, 'x', float(x))
        object.__setattr__(self, 'y', float(y))
        object.__setattr__(self, 'z', float(z))

    @classmethod
    def of(cls, value) -> 'Vec3':
        """Coerce a Vec3 or any (x, y, z) sequence into a Vec3."""
        if isinstance(value, Vec3):
            return value
        x, y, z = value
        return cls(x, y, z)

    def __setattr__(self, name, value):
        raise AttributeError("Vec3 is immutable")

    def __delattr__(self, name):
        raise AttributeError("Vec3 is immutable")

    def __repr__(self):
        return f"Vec3({self.x:.2f}, {self.y:.2f}, {self.z:.2f})"

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __getitem__(self, index):
        if index == 0: return self.x
        if index == 1: return self.y
        if index == 2: return self.z
        raise IndexError("Vec3 index out of range")

    def __eq__(self, other):
        if isinstance(other, Vec3):
            return (self.x, self.y, self.z) == (other.x, other.y, other.z)
        return NotImplemented

    def __hash__(self):
        return hash((self.x, self.y, self.z))

    def __add__(self, other):
        if isinstance(other, Vec3):
            return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Vec3):
            return subtract(self, other)
        return NotImplemented

    def __mul__(self, scalar):
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar):
        return Vec3(self.x / scalar, self.y / scalar, self.z / scalar)

    def dot(self, other) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def magnitude(self) -> float:
        return magnitude(self)

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y) and math.isfinite(self.z)


def subtract(a: Vec3, b: Vec3) -> Vec3:
    """Componentwise a - b."""
    return Vec3(a.x - b.x, a.y - b.y, a.z - b.z)


def magnitude(v: Vec3) -> float:
    """Euclidean norm of v."""
    return math.sqrt(v.x * v.x + v.y * v.y + v.z * v.z)


class Mat3:
    """3x3 rotation matrix, stored as a tuple of three row tuples ([row][col])."""
    __slots__ = ('m',)

    def __init__(self, rows=None):
        if rows:
            self.m = tuple(tuple(float(v) for v in row) for row in rows)
        else:
            self.m = ((0.0, 0.0, 0.0),) * 3

    def __repr__(self):
        return f"Mat3({self.m!r})"

    @classmethod
    def identity(cls) -> 'Mat3':
        return cls(((1, 0, 0), (0, 1, 0), (0, 0, 1)))

    @classmethod
    def rotation_x(cls, rad: float) -> 'Mat3':
        c = math.cos(rad)
        s = math.sin(rad)
        return cls(((1, 0, 0),
                    (0, c, -s),
                    (0, s, c)))

    @classmethod
    def rotation_y(cls, rad: float) -> 'Mat3':
        c = math.cos(rad)
        s = math.sin(rad)
        return cls(((c, 0, s),
                    (0, 1, 0),
                    (-s, 0, c)))

    @classmethod
    def rotation_z(cls, rad: float) -> 'Mat3':
        c = math.cos(rad)
        s = math.sin(rad)
        return cls(((c, -s, 0),
                    (s, c, 0),
                    (0, 0, 1)))

    def __matmul__(self, other):
        if isinstance(other, Mat3):
            a, b = self.m, other.m
            return Mat3([[sum(a[r][k] * b[k][c] for k in range(3))
                          for c in range(3)]
                         for r in range(3)])
        if isinstance(other, Vec3):
            return rotate(self, other)
        return NotImplemented

    def mul_vec3(self, v: Vec3) -> Vec3:
        return rotate(self, v)


def rotate(matrix: Mat3, v: Vec3) -> Vec3:
    """Multiply a 3x3 matrix with a vector. Pure rotation, no translation."""
    m = matrix.m
    return Vec3(
        m[0][0] * v.x + m[0][1] * v.y + m[0][2] * v.z,
        m[1][0] * v.x + m[1][1] * v.y + m[1][2] * v.z,
        m[2][0] * v.x + m[2][1] * v.y + m[2][2] * v.z,
    )
