#
# PROJECT: perspective-wireframe
# MODULE: perspective_wireframe/projector.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Section 5
# LOG_REF: 2026-10-19
#

import math

from .math_utils import Vec3, Mat3, rotate, magnitude


class Projector:
    """
    Perspective pipeline from world points to viewport coordinates.

    convert_points(points, camera) runs, per point:
      1. Rotate about the world origin: Rx(angle_yz), then Ry(angle_xz),
         then Rz(angle_xy) (identity while angle_xy is 0).  No translation.
      2. Depth: distance from the rotated point to the camera position.
         This treats the observer as a point; it is not a camera-space z.
      3. Perspective divide per axis:
         proj = E * v / (E + 2 * depth * tan(fov / 2)), E = width or height.
      4. Viewport mapping: origin to the centre, y flipped for raster rows.

    ``camera`` may be a Camera or a CameraSnapshot.  Nothing here raises:
    degenerate inputs yield non-finite coordinates, which callers check
    before drawing.
    """
    __slots__ = ('width', 'height')

    def __init__(self, width: float = 1500, height: float = 800):
        self.width = width
        self.height = height

    @staticmethod
    def rotation_matrix(camera) -> Mat3:
        m = Mat3.rotation_y(camera.angle_xz) @ Mat3.rotation_x(camera.angle_yz)
        if camera.angle_xy:
            m = Mat3.rotation_z(camera.angle_xy) @ m
        return m

    def rotate(self, point: Vec3, camera) -> Vec3:
        return rotate(self.rotation_matrix(camera), point)

    @staticmethod
    def depth(rotated: Vec3, camera) -> float:
        return magnitude(rotated - camera.position)

    @staticmethod
    def perspective(value: float, extent: float, depth: float, fov: float) -> float:
        """Project one lateral coordinate for the given depth and fov (degrees)."""
        return extent * value / (extent + 2 * depth * math.tan(math.radians(fov) / 2))

    def project(self, point: Vec3, camera, matrix: Mat3 = None) -> Vec3:
        """
        Project a world point.  Returns Vec3(proj_x, proj_y, depth) with the
        projected coordinates centred on the origin, y up.
        """
        if matrix is None:
            matrix = self.rotation_matrix(camera)
        rotated = rotate(matrix, point)
        depth = self.depth(rotated, camera)
        return Vec3(
            self.perspective(rotated.x, self.width, depth, camera.fov),
            self.perspective(rotated.y, self.height, depth, camera.fov),
            depth,
        )

    def to_screen(self, projected: Vec3):
        """Map a centred, y-up projected point to (screen_x, screen_y)."""
        return (projected.x + self.width / 2,
                self.height / 2 - projected.y)

    def convert_points(self, points, camera):
        """Project a sequence of world points to screen (x, y) tuples."""
        matrix = self.rotation_matrix(camera)
        return [self.to_screen(self.project(p, camera, matrix)) for p in points]
