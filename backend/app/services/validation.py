"""
Input parsing and shape validators.

The overlap analysis assumes well formed convex polygons.  This module
is where that assumption is enforced before a polygon reaches the
core.  Coordinates may arrive either as a list of numbers (JSON) or as
the whitespace separated ``x1 y1 x2 y2 ...`` string that
an interactive console prompt would accept.

Validators are plain functions selected by shape kind through
:data:`VALIDATORS`:

- ``"rectangle"``: four vertices, opposite sides parallel and adjacent
  sides perpendicular (axis aligned or rotated).
- ``"polygon"``: at least three vertices, strictly convex and
  consistently wound.

Both raise :class:`ShapeValidationError` on failure.
"""

from __future__ import annotations

import logging
import math
import re
from typing import Callable, Dict, List, Optional, Sequence, Union

import numpy as np

from .polygon import INFINITE_SLOPE, Polygon, slope

logger = logging.getLogger(__name__)

RawCoordinates = Union[str, Sequence[float]]

INVALID_INPUT = "Invalid input. Please try again."
ILL_FORMED_RECTANGLE = (
    "Ill formed rectangle. Coordinates incorrect or non-sequential."
)

_SEPARATORS = re.compile(r"[\s,]+")


class ShapeValidationError(ValueError):
    """Raised when coordinates do not describe an acceptable shape."""


def parse_coordinates(raw: RawCoordinates, side_count: Optional[int] = None) -> List[float]:
    """Convert raw user input into a flat list of floats.

    Args:
        raw: A string of numbers separated by whitespace or commas, or
            a sequence of numbers.
        side_count: When given, exactly ``2 * side_count`` values are
            required.

    Raises:
        ShapeValidationError: If a value is not numeric or not finite,
            or the number of values is wrong.
    """
    if isinstance(raw, str):
        tokens = [t for t in _SEPARATORS.split(raw.strip()) if t]
    else:
        tokens = list(raw)
    try:
        values = [float(t) for t in tokens]
    except (TypeError, ValueError) as exc:
        raise ShapeValidationError(INVALID_INPUT) from exc
    if not all(math.isfinite(v) for v in values):
        raise ShapeValidationError(INVALID_INPUT)
    if len(values) % 2 != 0:
        raise ShapeValidationError(
            f"{INVALID_INPUT} Expected x y pairs, got {len(values)} values."
        )
    if side_count is not None and len(values) != 2 * side_count:
        raise ShapeValidationError(
            f"{INVALID_INPUT} Expected {2 * side_count} values, got {len(values)}."
        )
    return values


def check_rectangle(polygon: Polygon) -> None:
    """Verify that ``polygon`` is a rectangle given in sequential order.

    Opposite sides must have equal slopes and adjacent sides must be
    perpendicular: a horizontal side must be followed by a vertical
    one (and vice versa), and two angled sides must have slopes whose
    product is exactly ``-1``.
    """
    if polygon.side_count != 4:
        raise ShapeValidationError(
            f"{ILL_FORMED_RECTANGLE} A rectangle needs 4 vertices, got {polygon.side_count}."
        )
    s = [slope(polygon, i) for i in range(4)]

    if s[0] != s[2] or s[1] != s[3]:
        raise ShapeValidationError(ILL_FORMED_RECTANGLE)

    if s[0] == 0 or s[0] == INFINITE_SLOPE:
        ok = s[1] == INFINITE_SLOPE if s[0] == 0 else s[1] == 0
    elif s[1] == 0 or s[1] == INFINITE_SLOPE:
        ok = False
    else:
        ok = s[0] * s[1] == -1
    if not ok:
        raise ShapeValidationError(ILL_FORMED_RECTANGLE)


def check_convex(polygon: Polygon) -> None:
    """Verify that ``polygon`` is strictly convex with a consistent winding.

    The z component of the cross product of every pair of consecutive
    edges must be non‑zero and share one sign.
    """
    if polygon.side_count < 3:
        raise ShapeValidationError(
            f"A polygon needs at least 3 vertices, got {polygon.side_count}."
        )
    pts = polygon.points
    edges = np.roll(pts, -1, axis=0) - pts
    nxt = np.roll(edges, -1, axis=0)
    cross = edges[:, 0] * nxt[:, 1] - edges[:, 1] * nxt[:, 0]
    if np.any(cross == 0):
        raise ShapeValidationError(
            "Polygon has repeated or collinear consecutive vertices."
        )
    if not (np.all(cross > 0) or np.all(cross < 0)):
        raise ShapeValidationError(
            "Polygon is not convex or its vertices are not in sequential order."
        )


Validator = Callable[[Polygon], None]

VALIDATORS: Dict[str, Validator] = {
    "rectangle": check_rectangle,
    "polygon": check_convex,
}


def build_polygon(raw: RawCoordinates, shape: str = "polygon", name: Optional[str] = None) -> Polygon:
    """Parse, construct and validate a polygon in one step.

    Args:
        raw: Coordinates in any form accepted by :func:`parse_coordinates`.
        shape: Key into :data:`VALIDATORS`.
        name: Display name; defaults to the capitalised shape kind.

    Raises:
        ShapeValidationError: For unknown shapes or invalid input.
    """
    kind = (shape or "polygon").strip().lower()
    validator = VALIDATORS.get(kind)
    if validator is None:
        raise ShapeValidationError(
            f"Unknown shape '{shape}'. Must be one of {', '.join(sorted(VALIDATORS))}."
        )
    side_count = 4 if kind == "rectangle" else None
    values = parse_coordinates(raw, side_count=side_count)
    polygon = Polygon(values, name=name or kind.capitalize())
    validator(polygon)
    logger.debug("validated %s %s with %d vertices", kind, polygon.name, polygon.side_count)
    return polygon


__all__ = [
    "ShapeValidationError",
    "INVALID_INPUT",
    "ILL_FORMED_RECTANGLE",
    "parse_coordinates",
    "check_rectangle",
    "check_convex",
    "VALIDATORS",
    "build_polygon",
]
