#
# PROJECT: perspective-wireframe
# MODULE: perspective_wireframe/scene.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Section 7
# LOG_REF: 2026-10-19
#

import logging
import math
from dataclasses import dataclass, field

from .camera import Camera, CameraSnapshot
from .factory import make_box, make_cube
from .projector import Projector
from .shape import Shape
from .surface import DrawingSurface

logger = logging.getLogger(__name__)


@dataclass
class ProjectedShape:
    """Screen-space image of a Shape: one (x, y) per point, same edges."""
    index: int
    points: list
    edges: tuple


@dataclass
class RenderStats:
    shapes: int = 0
    points: int = 0
    edges: int = 0
    skipped_points: int = 0
    skipped_edges: int = 0
    skipped_shapes: list = field(default_factory=list)


def _finite(pt) -> bool:
    return math.isfinite(pt[0]) and math.isfinite(pt[1])


class Scene:
    """
    Shapes plus one camera, drawn onto an injected DrawingSurface.

    The viewport size and point size are fixed for the scene's lifetime.
    render() is always a full redraw; the caller decides when to clear and
    re-render (e.g. after moving the camera).
    """

    def __init__(self, surface: DrawingSurface, width: float = 1500, height: float = 800,
                 point_size: float = 5, camera: Camera = None):
        if not (math.isfinite(width) and math.isfinite(height) and width > 0 and height > 0):
            raise ValueError(f"Viewport size must be positive, got {width}x{height}")
        if not (math.isfinite(point_size) and point_size >= 0):
            raise ValueError(f"Point size must be finite and not negative, got {point_size}")
        self.surface = surface
        self.width = width
        self.height = height
        self.point_size = point_size
        self.camera = camera if camera is not None else Camera()
        self.projector = Projector(width, height)
        self.shapes = []  # list of Shape, shape.index == position

    # ── shapes ──────────────────────────────────────────────────────────
    def add(self, shape: Shape) -> Shape:
        if shape.index != len(self.shapes):
            raise ValueError(f"Shape index {shape.index} does not match next slot {len(self.shapes)}")
        self.shapes.append(shape)
        return shape

    def cube(self, origin, side_length: float, centered: bool = False) -> Shape:
        """Generate a cube with the next shape index and add it to the scene."""
        return self.add(make_cube(origin, side_length, centered=centered, index=len(self.shapes)))

    def box(self, origin, size, centered: bool = False) -> Shape:
        return self.add(make_box(origin, size, centered=centered, index=len(self.shapes)))

    # ── camera ──────────────────────────────────────────────────────────
    def move_camera(self, dx: float, dy: float, dz: float) -> CameraSnapshot:
        return self.camera.move(dx, dy, dz)

    # ── styles ──────────────────────────────────────────────────────────
    def set_stroke_style(self, colour: str = '#000', line_width: float = 1):
        self.surface.set_stroke_style(colour, line_width)

    def set_fill_style(self, colour: str = '#000'):
        self.surface.set_fill_style(colour)

    # ── drawing ─────────────────────────────────────────────────────────
    def clear(self):
        self.surface.clear_rect(0, 0, self.width, self.height)

    def project(self):
        """Project every shape with the current camera state."""
        snapshot = self.camera.snapshot()
        return [
            ProjectedShape(shape.index, self.projector.convert_points(shape.points, snapshot), shape.edges)
            for shape in self.shapes
        ]

    def render(self) -> RenderStats:
        """
        Draw every shape: a filled square per point, then a line per edge.
        Points with a non-finite coordinate, and edges touching them, are
        skipped.
        """
        stats = RenderStats()
        surface = self.surface
        size = self.point_size
        half = size / 2

        for image in self.project():
            stats.shapes += 1
            finite = [_finite(pt) for pt in image.points]

            for ok, (sx, sy) in zip(finite, image.points):
                if ok:
                    surface.fill_rect(sx - half, sy - half, size, size)
                    stats.points += 1
                else:
                    stats.skipped_points += 1

            for i, j in image.edges:
                if finite[i] and finite[j]:
                    (x1, y1), (x2, y2) = image.points[i], image.points[j]
                    surface.stroke_line(x1, y1, x2, y2)
                    stats.edges += 1
                else:
                    stats.skipped_edges += 1

            if not all(finite):
                stats.skipped_shapes.append(image.index)

        if stats.skipped_points:
            logger.warning("Skipped %d non-finite points and %d edges in shapes %s",
                           stats.skipped_points, stats.skipped_edges, stats.skipped_shapes)
        logger.debug("Rendered %d shapes: %d points, %d edges",
                     stats.shapes, stats.points, stats.edges)
        return stats
