"""Tests for the single-pass separating axis classifier."""

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1]))

from app.services.polygon import Polygon  # type: ignore
from app.services.separating_axis import Relationship, classify  # type: ignore


def test_disjoint_squares_are_apart_and_stop_early() -> None:
    a = Polygon([0, 0, 1, 0, 1, 1, 0, 1])
    b = Polygon([5, 0, 6, 0, 6, 1, 5, 1])
    result = classify(a, b)
    assert result.relationship is Relationship.APART
    # Edge 0 is not separating, edge 1 (x = 1) is
    assert result.candidate_edges == (0,)


def test_shared_edge_is_adjacent() -> None:
    a = Polygon([0, 0, 1, 0, 1, 1, 0, 1])
    b = Polygon([1, 0, 2, 0, 2, 1, 1, 1])
    result = classify(a, b)
    assert result.relationship is Relationship.ADJACENT


def test_large_square_contains_small_square() -> None:
    big = Polygon([0, 0, 4, 0, 4, 4, 0, 4])
    small = Polygon([1, 1, 2, 1, 2, 2, 1, 2])
    result = classify(big, small)
    assert result.relationship is Relationship.CONTAINS
    assert result.candidate_edges == ()


def test_containment_is_not_visible_from_the_inner_polygon() -> None:
    big = Polygon([0, 0, 4, 0, 4, 4, 0, 4])
    small = Polygon([1, 1, 2, 1, 2, 2, 1, 2])
    result = classify(small, big)
    assert result.relationship is Relationship.INTERSECTING
    assert result.candidate_edges == (0, 1, 2, 3)


def test_overlapping_squares_record_crossing_edges() -> None:
    a = Polygon([0, 0, 2, 0, 2, 2, 0, 2])
    b = Polygon([1, 1, 3, 1, 3, 3, 1, 3])
    assert classify(a, b).candidate_edges == (1, 2)
    assert classify(b, a).candidate_edges == (0, 3)
    assert classify(a, b).relationship is Relationship.INTERSECTING


def test_winding_order_does_not_change_the_result() -> None:
    ccw = Polygon([0, 0, 4, 0, 4, 4, 0, 4])
    cw = Polygon([0, 0, 0, 4, 4, 4, 4, 0])
    small = Polygon([1, 1, 2, 1, 2, 2, 1, 2])
    assert classify(ccw, small).relationship is Relationship.CONTAINS
    assert classify(cw, small).relationship is Relationship.CONTAINS


def test_edge_shared_on_the_inside_is_a_candidate() -> None:
    # B shares A's bottom edge but lies on A's side of it
    a = Polygon([0, 0, 2, 0, 2, 2, 0, 2])
    b = Polygon([0, 0, 2, 0, 2, 1, 0, 1])
    result = classify(a, b)
    assert 0 in result.candidate_edges


def test_triangles() -> None:
    big = Polygon([0, 0, 8, 0, 4, 8])
    small = Polygon([3, 1, 5, 1, 4, 3])
    assert classify(big, small).relationship is Relationship.CONTAINS
    square = Polygon([0, 0, 4, 0, 4, 4, 0, 4])
    far = Polygon([10, 10, 12, 10, 11, 12])
    assert classify(square, far).relationship is Relationship.APART


def test_containment_count_uses_vertices_of_the_inner_polygon() -> None:
    # Four containing edges never equal the three vertices of a triangle,
    # so a square does not report containment of a triangle.
    square = Polygon([0, 0, 4, 0, 4, 4, 0, 4])
    triangle = Polygon([1, 1, 3, 1, 2, 3])
    result = classify(square, triangle)
    assert result.relationship is Relationship.INTERSECTING
    assert result.candidate_edges == ()
