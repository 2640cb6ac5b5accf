#
# PROJECT: perspective-wireframe
# MODULE: perspective_wireframe/camera.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Section 4
# LOG_REF: 2026-10-19
#

import logging
import math
from dataclasses import dataclass

from .math_utils import Vec3

logger = logging.getLogger(__name__)


class CameraConfigError(ValueError):
    """Raised for camera settings the projection cannot work with."""


@dataclass(frozen=True)
class CameraSnapshot:
    """Read-only copy of a camera's state."""
    position: Vec3
    direction: Vec3
    fov: float
    angle_yz: float
    angle_xz: float
    angle_xy: float = 0.0


def _view_angle(offset: float, run: float) -> float:
    """atan(offset / run), clamped to +-90 degrees when run is zero."""
    if run == 0:
        return math.copysign(math.pi / 2, offset) if offset else 0.0
    return math.atan(offset / run)


class Camera:
    """
    Camera state for the perspective projector.

    Stores the camera position, the point it looks at (``direction``), the
    field of view in degrees and the two rotation angles derived from them.
    The angles are recomputed whenever position or direction change, so
    they are always consistent with the current state.
    """
    __slots__ = ('_position', '_direction', '_fov', 'angle_yz', 'angle_xz', 'angle_xy')

    def __init__(self, position=None, direction=None, fov: float = 120.0):
        self._position = self._checked(Vec3(0, 0, -50) if position is None else position, 'position')
        self._direction = self._checked(Vec3() if direction is None else direction, 'direction')
        self._fov = self._checked_fov(fov)
        self.angle_yz = 0.0      # Rotation around X axis (radians)
        self.angle_xz = 0.0      # Rotation around Y axis (radians)
        self.angle_xy = 0.0      # Rotation around the view axis, unused
        self.recompute_angles()

    def __repr__(self):
        return (f"Camera(position={self._position!r}, direction={self._direction!r}, "
                f"fov={self._fov:g})")

    @staticmethod
    def _checked(value, name) -> Vec3:
        vec = Vec3.of(value)
        if not vec.is_finite():
            raise CameraConfigError(f"Camera {name} must be finite, got {vec!r}")
        return vec

    @staticmethod
    def _checked_fov(fov) -> float:
        fov = float(fov)
        if not (0 < fov < 180):
            raise CameraConfigError(f"Field of view must be between 0 and 180 degrees (exclusive), got {fov}")
        return fov

    @property
    def position(self) -> Vec3:
        return self._position

    @position.setter
    def position(self, value):
        self._position = self._checked(value, 'position')
        self.recompute_angles()

    @property
    def direction(self) -> Vec3:
        return self._direction

    @direction.setter
    def direction(self, value):
        self._direction = self._checked(value, 'direction')
        self.recompute_angles()

    @property
    def fov(self) -> float:
        return self._fov

    @fov.setter
    def fov(self, value):
        self._fov = self._checked_fov(value)

    def recompute_angles(self):
        """Derive angle_yz / angle_xz from position and direction."""
        pos, target = self._position, self._direction
        run = abs(target.z - pos.z)
        if run == 0:
            logger.warning("Camera at z=%g looks at a target in its own z plane; "
                           "view angles clamped to +-90 degrees", pos.z)
        self.angle_yz = _view_angle(pos.y - target.y, run)
        self.angle_xz = _view_angle(pos.x - target.x, run)
        self.angle_xy = 0.0

    def move(self, dx: float, dy: float, dz: float) -> CameraSnapshot:
        """Translate the camera position by a delta; direction is kept."""
        self.position = self._position + Vec3(dx, dy, dz)
        logger.debug("Camera moved to %r", self._position)
        return self.snapshot()

    def look_at(self, target) -> CameraSnapshot:
        self.direction = target
        return self.snapshot()

    def adjust_fov(self, delta: float) -> float:
        """Adjust field of view by delta degrees, clamped to [10, 170]."""
        self._fov = max(10.0, min(170.0, self._fov + delta))
        return self._fov

    def snapshot(self) -> CameraSnapshot:
        return CameraSnapshot(
            position=self._position,
            direction=self._direction,
            fov=self._fov,
            angle_yz=self.angle_yz,
            angle_xz=self.angle_xz,
            angle_xy=self.angle_xy,
        )
