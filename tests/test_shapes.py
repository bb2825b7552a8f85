"""Tests the primitive shape bounding boxes."""

from __future__ import annotations

import pytest

from svg_node_bounds.path_bbox import EMPTY_BBOX, Point
from svg_node_bounds.shapes import (
    DEFAULT_COORDINATE,
    circle_bbox,
    ellipse_bbox,
    line_bbox,
    parse_numeric_attribute,
    parse_points,
    points_bbox,
    polygon_bbox,
    rect_bbox,
)


@pytest.mark.parametrize(
    ("value", "default", "expected"),
    [
        ("100px", 0, 100),
        (" 2.5 ", 0, 2.5),
        (7, 0, 7),
        (1.25, 0, 1.25),
        (None, 3, 3),
        ("auto", 4, 4),
        ("", 5, 5),
    ],
)
def test_parse_numeric_attribute(
    value: str | float | None, default: float, expected: float
) -> None:
    assert parse_numeric_attribute(value, default) == expected


def test_circle() -> None:
    assert circle_bbox(50, 50, 25) == (25, 25, 50, 50)
    assert circle_bbox("50", "50px", "25") == (25, 25, 50, 50)


def test_ellipse() -> None:
    assert ellipse_bbox(100, 50, "40px", 20) == (60, 30, 80, 40)


@pytest.mark.parametrize(
    ("args", "expected"),
    [
        ((0, 0, 10, 20), (0, 0, 10, 20)),
        ((10, 50, 5, 0), (5, 0, 5, 50)),
        (("10", "10", "10", "10"), (10, 10, 0, 0)),
    ],
)
def test_line(args: tuple[float | str, ...], expected: tuple[float, ...]) -> None:
    assert line_bbox(*args) == expected


def test_rect_is_verbatim() -> None:
    assert rect_bbox("10", 20, "30px", None) == (10, 20, 30, 0)


def test_default_for_unparseable_values() -> None:
    assert circle_bbox("abc", 10, 5, default=1) == (-4, 5, 10, 10)
    assert rect_bbox(None, None, None, None) == EMPTY_BBOX


def test_calculators_default_to_zero() -> None:
    assert DEFAULT_COORDINATE == 0
    assert circle_bbox("a", "b", "c") == (0, 0, 0, 0)
    assert ellipse_bbox(None, None, 2, None) == (-2, 0, 4, 0)
    assert line_bbox("x", 4, None, None) == (0, 0, 0, 4)


def test_parse_points() -> None:
    assert parse_points("100,10 40,198 190,78") == [
        Point(100, 10),
        Point(40, 198),
        Point(190, 78),
    ]


@pytest.mark.parametrize(
    ("test_input", "expected"),
    [
        ("10,20 30,40 50", [Point(10, 20), Point(30, 40)]),
        ("10 20,30 40", [Point(10, 20), Point(30, 40)]),
        ("  10,\n20  ", [Point(10, 20)]),
        ("10 abc 20", [Point(10, 20)]),
        ("10", []),
        ("", []),
        (None, []),
    ],
)
def test_parse_points_lenient(test_input: str | None, expected: list[Point]) -> None:
    assert parse_points(test_input) == expected


def test_polygon_bbox() -> None:
    assert polygon_bbox("100,10 40,198 190,78") == (40, 10, 150, 188)


@pytest.mark.parametrize("test_input", ["", "5", None])
def test_polygon_without_pairs(test_input: str | None) -> None:
    assert polygon_bbox(test_input) == EMPTY_BBOX


def test_points_bbox() -> None:
    assert points_bbox([]) == EMPTY_BBOX
    assert points_bbox([Point(3, 4)]) == (3, 4, 0, 0)
    assert points_bbox([Point(-1, 5), Point(3, -2)]) == (-1, -2, 4, 7)
