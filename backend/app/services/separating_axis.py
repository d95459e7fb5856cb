"""
Separating‑axis classification of two convex polygons.

:func:`classify` walks the edges of a primary polygon ``a`` and, for
each edge, counts on which side of the edge's line the vertices of the
secondary polygon ``b`` fall.  The side on which ``a`` itself lies is
recomputed for every edge from the sign of the summed dot products of
``a``'s vertices, so winding order does not matter as long as it is
consistent.

Per edge the rules are applied in this order:

1. every vertex of ``b`` strictly outside ``a`` → ``APART``;
2. two vertices of ``b`` on the bounded edge and the rest outside →
   ``ADJACENT`` (otherwise the edge is a candidate);
3. every vertex of ``b`` strictly inside → the edge counts towards
   containment;
4. anything else → the edge is a candidate for a boundary crossing.

If every edge counted towards containment the result is ``CONTAINS``,
otherwise ``INTERSECTING``.  Comparisons are exact; inputs built from
exact rationals classify reliably, inputs with rounding noise may not.

Set ``OVERLAP_DEBUG`` in the environment to log the per‑edge counts.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple

from .polygon import Polygon, lies_on_segment

logger = logging.getLogger(__name__)


class Relationship(str, Enum):
    """Spatial relationship between two convex polygons."""

    APART = "apart"
    ADJACENT = "adjacent"
    CONTAINS = "contains"
    # No simple relationship found: the boundaries cross.
    INTERSECTING = "intersecting"


@dataclass(frozen=True)
class Classification:
    """Result of a single :func:`classify` pass.

    Attributes:
        relationship: Relationship of ``b`` relative to ``a``'s edges.
        candidate_edges: Indices of ``a``'s edges that might take part
            in a boundary crossing, in ascending order.  Only edges
            visited before an early ``APART``/``ADJACENT`` return are
            included.
    """

    relationship: Relationship
    candidate_edges: Tuple[int, ...] = ()


def _dot(rot_x: float, rot_y: float, x1: float, y1: float, x: float, y: float) -> float:
    return rot_x * (x - x1) + rot_y * (y - y1)


def classify(a: Polygon, b: Polygon) -> Classification:
    """Classify ``b`` against the edges of ``a``.

    Args:
        a: Primary polygon whose edges are used as candidate axes.
        b: Secondary polygon.

    Returns:
        Classification: relationship plus ``a``'s candidate edges.
    """
    debug = bool(os.getenv("OVERLAP_DEBUG"))
    b_count = b.side_count
    contain_ct = 0
    candidates: List[int] = []

    for i in range(a.side_count):
        (x1, y1), (x2, y2) = a.edge(i)
        # Edge vector rotated by 90 degrees
        rot_x = y2 - y1
        rot_y = x1 - x2

        sum_a = 0.0
        for x, y in a:
            sum_a += _dot(rot_x, rot_y, x1, y1, x, y)
        side_a = 1 if sum_a > 0 else -1

        sum_b = 0
        adj_ct = 0
        for x, y in b:
            d = _dot(rot_x, rot_y, x1, y1, x, y)
            if d != 0:
                sum_b += 1 if d > 0 else -1
            elif lies_on_segment(a, x, y, i):
                adj_ct += 1

        if debug:
            logger.debug(
                "classify %s/%s edge=%d side_a=%d sum_b=%d adj=%d",
                a.name, b.name, i, side_a, sum_b, adj_ct,
            )

        if sum_b == -side_a * b_count:
            return Classification(Relationship.APART, tuple(candidates))

        if adj_ct == 2:
            side_b = 1 if sum_b > 0 else -1
            if side_b == -side_a:
                return Classification(Relationship.ADJACENT, tuple(candidates))
            candidates.append(i)
        elif sum_b == side_a * b_count:
            contain_ct += 1
        else:
            candidates.append(i)

    if contain_ct == b_count:
        return Classification(Relationship.CONTAINS, tuple(candidates))
    return Classification(Relationship.INTERSECTING, tuple(candidates))


__all__ = ["Relationship", "Classification", "classify"]
