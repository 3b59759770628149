"""Batched debug line drawing."""

from __future__ import annotations

from dataclasses import dataclass

from enginecore.singleton import Singleton

Vec3 = tuple[float, float, float]
Vec4 = tuple[float, float, float, float]

# Corner pairs of a box, in the order its edges are drawn: bottom face,
# top face, then the vertical edges.
_BOX_EDGES = (
    (0, 1), (1, 2), (2, 3), (3, 0),
    (4, 5), (5, 6), (6, 7), (7, 4),
    (0, 4), (1, 5), (2, 6), (3, 7),
)


@dataclass(frozen=True)
class LineVertex:
    """One end of a debug line."""

    position: Vec3
    color: Vec4


def _box_corners(box_min: Vec3, box_max: Vec3) -> list[Vec3]:
    (x0, y0, z0), (x1, y1, z1) = box_min, box_max
    return [
        (x0, y0, z0),
        (x1, y0, z0),
        (x1, y1, z0),
        (x0, y1, z0),
        (x0, y0, z1),
        (x1, y0, z1),
        (x1, y1, z1),
        (x0, y1, z1),
    ]


class DebugDrawManager(Singleton):
    """Collects debug lines into a vertex and index list until cleared."""

    def __init__(self) -> None:
        self._vertices: list[LineVertex] = []
        self._indices: list[int] = []

    @property
    def vertices(self) -> list[LineVertex]:
        """The line vertices collected so far."""
        return self._vertices

    @property
    def indices(self) -> list[int]:
        """Vertex indices, two per line."""
        return self._indices

    def draw_line(self, start: Vec3, end: Vec3, color: Vec4, life_time: float = 1.0) -> None:
        """Add a line from ``start`` to ``end``."""
        index = len(self._vertices)
        self._vertices.append(LineVertex(tuple(start), tuple(color)))
        self._vertices.append(LineVertex(tuple(end), tuple(color)))
        self._indices.extend((index, index + 1))

    def draw_aabb_box(self, box_min: Vec3, box_max: Vec3, color: Vec4, life_time: float = 1.0) -> None:
        """Add the twelve edges of the axis-aligned box from ``box_min`` to ``box_max``."""
        corners = _box_corners(box_min, box_max)
        for a, b in _BOX_EDGES:
            self.draw_line(corners[a], corners[b], color)

    def clear(self) -> None:
        """Drop every collected line."""
        self._vertices.clear()
        self._indices.clear()