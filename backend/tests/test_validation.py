"""Tests for coordinate parsing and the rectangle / convexity validators."""

import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from app.services.polygon import Polygon  # type: ignore
from app.services.validation import (  # type: ignore
    ILL_FORMED_RECTANGLE,
    INVALID_INPUT,
    ShapeValidationError,
    build_polygon,
    check_convex,
    check_rectangle,
    parse_coordinates,
)


def test_parse_console_style_string() -> None:
    assert parse_coordinates("0 0 1 0\n1 1  0 1") == [0.0, 0.0, 1.0, 0.0, 1.0, 1.0, 0.0, 1.0]
    assert parse_coordinates("0,0, 2.5,0, 2.5,1") == [0.0, 0.0, 2.5, 0.0, 2.5, 1.0]


def test_parse_sequence() -> None:
    assert parse_coordinates([0, 0, 1, 0, 1, 1]) == [0.0, 0.0, 1.0, 0.0, 1.0, 1.0]


@pytest.mark.parametrize(
    "raw",
    ["0 0 1 x 1 1", "0 0 1 0 1", "0 0 inf 0 1 1", "0 0 nan 0 1 1", ["a", 1]],
)
def test_parse_rejects_bad_input(raw) -> None:
    with pytest.raises(ShapeValidationError) as excinfo:
        parse_coordinates(raw)
    assert str(excinfo.value).startswith(INVALID_INPUT)


def test_parse_enforces_side_count() -> None:
    with pytest.raises(ShapeValidationError):
        parse_coordinates("0 0 1 0 1 1", side_count=4)


@pytest.mark.parametrize(
    "coords",
    [
        [0, 0, 4, 0, 4, 2, 0, 2],      # axis aligned
        [0, 0, 0, 2, 4, 2, 4, 0],      # axis aligned, clockwise
        [2, 0, 4, 2, 2, 4, 0, 2],      # rotated square
        [0, 0, 2, 1, 1, 3, -1, 2],     # rotated rectangle
    ],
)
def test_rectangle_accepts_valid_rectangles(coords) -> None:
    check_rectangle(Polygon(coords))


@pytest.mark.parametrize(
    "coords",
    [
        [0, 0, 4, 0, 5, 2, 1, 2],      # parallelogram
        [0, 0, 4, 4, 4, 0, 0, 4],      # vertices out of order
        [0, 0, 2, 1, 4, 0, 2, -1],     # rhombus without right angles
        [0, 0, 0, 0, 0, 0, 0, 0],      # degenerate
    ],
)
def test_rectangle_rejects_ill_formed_input(coords) -> None:
    with pytest.raises(ShapeValidationError) as excinfo:
        check_rectangle(Polygon(coords))
    assert str(excinfo.value).startswith(ILL_FORMED_RECTANGLE)


def test_rectangle_needs_four_vertices() -> None:
    with pytest.raises(ShapeValidationError):
        check_rectangle(Polygon([0, 0, 1, 0, 1, 1]))


@pytest.mark.parametrize(
    "coords",
    [
        [0, 0, 1, 0, 1, 1, 0, 1],
        [0, 0, 0, 1, 1, 1, 1, 0],
        [0, 0, 8, 0, 4, 8],
        [2, 0, 4, 1, 4, 3, 2, 4, 0, 3, 0, 1],
    ],
)
def test_convex_accepts_either_winding(coords) -> None:
    check_convex(Polygon(coords))


@pytest.mark.parametrize(
    "coords",
    [
        [0, 0, 4, 0, 2, 1, 4, 4, 0, 4],   # concave
        [0, 0, 1, 0, 2, 0, 2, 2, 0, 2],   # collinear vertices
        [0, 0, 1, 0],                     # too few vertices
    ],
)
def test_convex_rejects(coords) -> None:
    with pytest.raises(ShapeValidationError):
        check_convex(Polygon(coords))


def test_build_polygon_selects_validator() -> None:
    rect = build_polygon("0 0 4 0 4 2 0 2", shape="rectangle")
    assert rect.name == "Rectangle"
    assert rect.side_count == 4

    tri = build_polygon([0, 0, 8, 0, 4, 8], shape="polygon", name="Tri")
    assert tri.name == "Tri"

    with pytest.raises(ShapeValidationError):
        build_polygon("0 0 8 0 4 8", shape="rectangle")
    with pytest.raises(ShapeValidationError):
        build_polygon("0 0 1 0 1 1", shape="hexagon")
