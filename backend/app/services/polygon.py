"""
Polygon data type and edge geometry helpers.

A ``Polygon`` is an ordered, implicitly closed ring of 2D vertices.
The coordinates are copied into a read‑only numpy array on
construction, so a polygon never shares storage with its caller or
with another polygon.  The classifier and intersection solver only
ever read a polygon through ``vertex``/``edge``; nothing in the
analysis pipeline mutates it.

Edge ``i`` runs from vertex ``i`` to vertex ``(i + 1) % side_count``.
The two helpers below operate on an edge identified that way:

- :func:`slope` returns the edge's slope with :data:`INFINITE_SLOPE`
  for vertical edges and exactly ``0.0`` for horizontal ones.
- :func:`lies_on_segment` is a closed bounding‑box test.  It is only
  meaningful as an "on segment" test for points already known to be
  collinear with the edge.

No convexity or winding checks happen here.  Callers pick a validator
from :mod:`validation` before handing polygons to the analysis.
"""

from __future__ import annotations

import math
import sys
from typing import Iterable, Sequence, Tuple

import numpy as np

# Returned by slope() for vertical edges only.  Quotients that overflow
# are clamped to the largest finite float so they never equal it.
INFINITE_SLOPE: float = math.inf

Point = Tuple[float, float]


class Polygon:
    """Convex polygon stored as a ring of ``(x, y)`` vertices.

    Args:
        coordinates: Flat sequence ``x1, y1, x2, y2, ...``.  Must hold
            an even number of values.
        name: Display label used by the presentation layer only.
    """

    def __init__(self, coordinates: Iterable[float], name: str = "Polygon") -> None:
        flat = np.array([float(c) for c in coordinates], dtype=float)
        if flat.size % 2 != 0:
            raise ValueError(
                f"expected an even number of coordinates, got {flat.size}"
            )
        points = flat.reshape(-1, 2)
        points.setflags(write=False)
        self._points = points
        self.name = name

    @classmethod
    def from_points(cls, points: Iterable[Sequence[float]], name: str = "Polygon") -> "Polygon":
        """Build a polygon from ``(x, y)`` pairs instead of a flat list."""
        flat = []
        for p in points:
            flat.extend((p[0], p[1]))
        return cls(flat, name=name)

    @property
    def side_count(self) -> int:
        return int(self._points.shape[0])

    @property
    def vertices(self) -> Tuple[float, ...]:
        """Flat tuple of coordinates in the order they were supplied."""
        return tuple(float(c) for c in self._points.ravel())

    @property
    def points(self) -> np.ndarray:
        """Read‑only ``(side_count, 2)`` view of the vertex array."""
        return self._points

    def vertex(self, index: int) -> Point:
        """Return vertex ``index`` (wrapped around the ring)."""
        x, y = self._points[index % self.side_count]
        return float(x), float(y)

    def edge(self, index: int) -> Tuple[Point, Point]:
        """Return the start and end vertex of edge ``index``."""
        return self.vertex(index), self.vertex(index + 1)

    def __iter__(self):
        for i in range(self.side_count):
            yield self.vertex(i)

    def __len__(self) -> int:
        return self.side_count

    def __repr__(self) -> str:
        return f"Polygon(name={self.name!r}, vertices={list(self)!r})"


def slope(polygon: Polygon, edge_index: int) -> float:
    """Slope of edge ``edge_index`` of ``polygon``.

    Vertical edges return :data:`INFINITE_SLOPE`, horizontal edges
    return ``0.0``; everything else returns ``(y1 - y2) / (x1 - x2)``,
    clamped to a finite value when the quotient overflows.
    """
    (x1, y1), (x2, y2) = polygon.edge(edge_index)
    if x1 == x2:
        return INFINITE_SLOPE
    if y1 == y2:
        return 0.0
    m = (y1 - y2) / (x1 - x2)
    if math.isinf(m):
        return math.copysign(sys.float_info.max, m)
    return m


def lies_on_segment(polygon: Polygon, x: float, y: float, edge_index: int) -> bool:
    """Return True if ``(x, y)`` is inside the closed box of the edge."""
    (x1, y1), (x2, y2) = polygon.edge(edge_index)
    return (
        ((x1 <= x <= x2) or (x2 <= x <= x1))
        and ((y1 <= y <= y2) or (y2 <= y <= y1))
    )


__all__ = [
    "INFINITE_SLOPE",
    "Point",
    "Polygon",
    "slope",
    "lies_on_segment",
]
