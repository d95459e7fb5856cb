"""
High‑level overlap analysis of two convex polygons.

``resolve`` runs the separating‑axis classifier from ``a``'s edges
and, when that pass cannot settle the relationship, a second time
from ``b``'s edges.  A small polygon sitting inside a larger one
cannot be recognised from its own edges alone; the second pass
catches that case and reports it with ``container_flag == 1``.

``analyze`` adds the boundary crossing points for intersecting pairs
and ``describe`` renders the result as the human readable message
shown to users.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .intersection import IntersectionPoint, find_intersections
from .polygon import Polygon
from .separating_axis import Relationship, classify

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Resolution:
    """Final classification of a polygon pair.

    Attributes:
        relationship: One of the four :class:`Relationship` values.
        container_flag: ``0`` when the result was obtained with the
            roles as given (``CONTAINS`` means ``a`` contains ``b``),
            ``1`` when the roles were swapped (``CONTAINS`` means
            ``b`` contains ``a``).
        candidate_edges_a: Candidate edges of ``a`` from the first pass.
        candidate_edges_b: Candidate edges of ``b`` from the second
            pass; empty when no second pass ran.
    """

    relationship: Relationship
    container_flag: int
    candidate_edges_a: Tuple[int, ...] = ()
    candidate_edges_b: Tuple[int, ...] = ()

    @property
    def container(self) -> Optional[str]:
        """``"a"`` or ``"b"`` for containment results, otherwise None."""
        if self.relationship is not Relationship.CONTAINS:
            return None
        return "b" if self.container_flag else "a"


@dataclass(frozen=True)
class OverlapReport:
    """Resolution plus the boundary crossings of an intersecting pair."""

    resolution: Resolution
    points: List[IntersectionPoint] = field(default_factory=list)

    @property
    def relationship(self) -> Relationship:
        return self.resolution.relationship

    @property
    def container_flag(self) -> int:
        return self.resolution.container_flag

    @property
    def container(self) -> Optional[str]:
        return self.resolution.container


def resolve(a: Polygon, b: Polygon) -> Resolution:
    """Classify the pair, swapping roles if ``a``'s edges are inconclusive."""
    first = classify(a, b)
    if first.relationship is not Relationship.INTERSECTING:
        return Resolution(first.relationship, 0, first.candidate_edges)

    second = classify(b, a)
    return Resolution(
        second.relationship,
        1,
        first.candidate_edges,
        second.candidate_edges,
    )


def analyze(a: Polygon, b: Polygon) -> OverlapReport:
    """Resolve the relationship and, if intersecting, the crossing points."""
    resolution = resolve(a, b)
    points: List[IntersectionPoint] = []
    if resolution.relationship is Relationship.INTERSECTING:
        points = find_intersections(
            a, resolution.candidate_edges_a, b, resolution.candidate_edges_b
        )
    logger.debug(
        "analyze %s/%s -> %s (flag=%d, %d points)",
        a.name,
        b.name,
        resolution.relationship.value,
        resolution.container_flag,
        len(points),
    )
    return OverlapReport(resolution=resolution, points=points)


def format_point(point: IntersectionPoint) -> str:
    """Render a crossing point as ``( x, y )``."""
    return f"( {point.x:g}, {point.y:g} )"


def describe(report: OverlapReport, a: Polygon, b: Polygon) -> str:
    """Return the user facing message for an analysis result."""
    rel = report.relationship
    if rel is Relationship.APART:
        return f"{a.name} A and {b.name} B are well separated."
    if rel is Relationship.ADJACENT:
        return f"{a.name} A and {b.name} B are adjacent."
    if rel is Relationship.CONTAINS:
        if report.container_flag == 0:
            return f"{b.name} B is wholly contained within {a.name} A."
        return f"{a.name} A is wholly contained within {b.name} B."
    lines = [
        f"{a.name} A and {b.name} B intersect. The points of intersection are:"
    ]
    lines.extend(format_point(p) for p in report.points)
    return "\n".join(lines)


__all__ = [
    "Resolution",
    "OverlapReport",
    "resolve",
    "analyze",
    "format_point",
    "describe",
]
