#
# PROJECT: perspective-wireframe
# MODULE: perspective_wireframe/factory.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Section 3
# LOG_REF: 2026-10-19
#

import math

from .math_utils import Vec3
from .shape import Shape


def box_edges():
    """
    The 12 edges of a box whose vertex i has x, y, z offsets taken from
    bits 0, 1 and 2 of i.  Each vertex is joined to the vertices that differ
    from it in exactly one bit, each pair listed once (lower index first).
    """
    edges = []
    for i in range(8):
        for bit in (1, 2, 4):
            if not i & bit:
                edges.append((i, i | bit))
    return edges


def make_box(origin, size, centered: bool = False, index: int = 0) -> Shape:
    """
    Generate an axis-aligned box.

    Args:
        origin: minimum-corner vertex, or the centre when ``centered``.
        size: (sx, sy, sz) extents, all finite and > 0.
        centered: treat ``origin`` as the box centre.
        index: index of the shape in its scene.

    The first four vertices form the z = origin.z face, counted as a 2-bit
    (x, y) counter; the last four repeat them one extent further along z.
    """
    origin = Vec3.of(origin)
    sx, sy, sz = (float(v) for v in size)
    for extent in (sx, sy, sz):
        if not math.isfinite(extent) or extent <= 0:
            raise ValueError(f"Box extents must be finite and positive, got {(sx, sy, sz)}")

    if centered:
        origin = origin - Vec3(sx / 2, sy / 2, sz / 2)

    points = [
        Vec3(origin.x + (i & 1) * sx,
             origin.y + ((i >> 1) & 1) * sy,
             origin.z + ((i >> 2) & 1) * sz)
        for i in range(8)
    ]
    return Shape(index, points, box_edges())


def make_cube(origin, side_length: float, centered: bool = False, index: int = 0) -> Shape:
    """Generate a cube; ``centered`` makes ``origin`` the centroid instead of the lowest x,y,z vertex."""
    side_length = float(side_length)
    return make_box(origin, (side_length, side_length, side_length), centered=centered, index=index)
