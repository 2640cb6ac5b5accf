#
# PROJECT: perspective-wireframe
# MODULE: perspective_wireframe/shape.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Section 2
# LOG_REF: 2026-10-19
#

from .math_utils import Vec3


class Shape:
    """
    Wireframe shape: world-space points plus an edge list.

    ``index`` is the shape's position in the owning scene's shape list.
    ``edges`` holds (i, j) index pairs into ``points``; the order of
    ``points`` matters because the edges refer to it.  Shapes are not
    modified after construction.
    """
    __slots__ = ('_index', '_points', '_edges')

    def __init__(self, index: int, points, edges):
        points = tuple(Vec3.of(p) for p in points)
        edges = tuple((int(i), int(j)) for i, j in edges)

        seen = set()
        for i, j in edges:
            if not (0 <= i < len(points) and 0 <= j < len(points)):
                raise ValueError(f"Edge ({i}, {j}) references a point outside 0..{len(points) - 1}")
            if i == j:
                raise ValueError(f"Edge ({i}, {j}) connects a point to itself")
            key = (i, j) if i < j else (j, i)
            if key in seen:
                raise ValueError(f"Duplicate edge ({i}, {j})")
            seen.add(key)

        self._index = int(index)
        self._points = points
        self._edges = edges

    @property
    def index(self) -> int:
        return self._index

    @property
    def points(self):
        return self._points

    @property
    def edges(self):
        return self._edges

    def __repr__(self):
        return f"Shape(index={self._index}, points={len(self._points)}, edges={len(self._edges)})"

    def edge_lengths(self):
        """World-space length of every edge, in edge order."""
        return [(self._points[j] - self._points[i]).magnitude() for i, j in self._edges]
