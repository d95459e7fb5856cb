"""
Boundary crossing points between candidate edges of two polygons.

The separating‑axis pass leaves each polygon with a handful of edges
that could not be ruled out.  :func:`find_intersections` pairs every
candidate edge of ``a`` with every candidate edge of ``b``, intersects
the two infinite lines and keeps the crossing only when it falls on
both bounded segments.

Each edge is treated as one of three kinds:

- ``vertical`` (equal x, tested first so a zero‑length edge is vertical)
- ``horizontal`` (equal y)
- ``angled`` with a finite slope and intercept ``y1 - slope * x1``

Two vertical or two horizontal edges never produce a point, and
neither do two angled edges with equal slopes.  Overlapping collinear
edges are therefore not reported.

A crossing that coincides with the end vertex of either edge is
dropped so a shared vertex is reported once, by the edge that starts
there.  Vertical/horizontal crossings skip that check and only go
through the on‑segment test.  Apart from that no deduplication takes
place, and points come out in candidate loop order (``a`` outer,
``b`` inner).
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from .polygon import Polygon, lies_on_segment, slope, INFINITE_SLOPE

logger = logging.getLogger(__name__)

VERTICAL = "vertical"
HORIZONTAL = "horizontal"
ANGLED = "angled"


@dataclass(frozen=True)
class IntersectionPoint:
    """A point where the boundaries of two polygons cross."""

    x: float
    y: float

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class EdgeLine:
    """Line through one polygon edge, in the form the solver needs."""

    index: int
    start: Tuple[float, float]
    end: Tuple[float, float]
    kind: str
    slope: float = INFINITE_SLOPE
    intercept: float = 0.0


def edge_line(polygon: Polygon, index: int) -> EdgeLine:
    """Describe edge ``index`` of ``polygon`` as an :class:`EdgeLine`."""
    start, end = polygon.edge(index)
    if start[0] == end[0]:
        return EdgeLine(index, start, end, VERTICAL)
    if start[1] == end[1]:
        return EdgeLine(index, start, end, HORIZONTAL, slope=0.0)
    m = slope(polygon, index)
    return EdgeLine(index, start, end, ANGLED, slope=m, intercept=start[1] - m * start[0])


def line_crossing(ea: EdgeLine, eb: EdgeLine) -> Optional[Tuple[float, float, bool]]:
    """Intersect the infinite lines through two edges.

    Returns:
        ``(x, y, perpendicular)`` where ``perpendicular`` is True for a
        vertical/horizontal pair, or ``None`` when the lines are
        parallel.
    """
    if ea.kind == eb.kind and ea.kind in (VERTICAL, HORIZONTAL):
        return None

    if ea.kind == VERTICAL and eb.kind == HORIZONTAL:
        return ea.start[0], eb.start[1], True
    if ea.kind == HORIZONTAL and eb.kind == VERTICAL:
        return eb.start[0], ea.start[1], True

    # One axis aligned edge against an angled one
    if ea.kind == VERTICAL:
        x = ea.start[0]
        return x, eb.slope * x + eb.intercept, False
    if eb.kind == VERTICAL:
        x = eb.start[0]
        return x, ea.slope * x + ea.intercept, False
    # An angled edge whose slope underflowed to 0 never meets a horizontal
    if ea.kind == HORIZONTAL:
        if eb.slope == 0:
            return None
        y = ea.start[1]
        return (y - eb.intercept) / eb.slope, y, False
    if eb.kind == HORIZONTAL:
        if ea.slope == 0:
            return None
        y = eb.start[1]
        return (y - ea.intercept) / ea.slope, y, False

    # Both angled
    if ea.slope == eb.slope:
        return None
    x = (eb.intercept - ea.intercept) / (ea.slope - eb.slope)
    return x, ea.slope * x + ea.intercept, False


def find_intersections(
    a: Polygon,
    candidates_a: Iterable[int],
    b: Polygon,
    candidates_b: Iterable[int],
) -> List[IntersectionPoint]:
    """Compute the boundary crossings between candidate edges.

    Args:
        a: First polygon.
        candidates_a: Candidate edge indices of ``a``.
        b: Second polygon.
        candidates_b: Candidate edge indices of ``b``.

    Returns:
        Crossing points in loop order.  Coincident points reached via
        different edge pairs may appear more than once.
    """
    debug = bool(os.getenv("OVERLAP_DEBUG"))
    lines_b = [edge_line(b, j) for j in candidates_b]
    points: List[IntersectionPoint] = []

    for i in candidates_a:
        ea = edge_line(a, i)
        for eb in lines_b:
            crossing = line_crossing(ea, eb)
            if crossing is None:
                continue
            x, y, perpendicular = crossing

            if not perpendicular and ((x, y) == ea.end or (x, y) == eb.end):
                continue

            if lies_on_segment(a, x, y, ea.index) and lies_on_segment(b, x, y, eb.index):
                if debug:
                    logger.debug(
                        "crossing %s[%d] x %s[%d] at (%s, %s)",
                        a.name, ea.index, b.name, eb.index, x, y,
                    )
                points.append(IntersectionPoint(x, y))

    return points


__all__ = [
    "IntersectionPoint",
    "EdgeLine",
    "edge_line",
    "line_crossing",
    "find_intersections",
]
