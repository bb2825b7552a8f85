"""Tests the path data parser."""

from __future__ import annotations

import pytest

from svg_node_bounds.path_bbox.commands import (
    Arc,
    ClosePath,
    CubicBezier,
    HorizontalLineTo,
    LineTo,
    MoveTo,
    QuadraticBezier,
    SmoothCubicBezier,
    SmoothQuadraticBezier,
    VerticalLineTo,
    format_path,
    is_path_command,
)
from svg_node_bounds.path_bbox.parser import (
    create_commands,
    parse_float_prefix,
    parse_numbers,
    parse_path,
    split_into_segments,
)


@pytest.mark.parametrize(
    ("test_input", "expected"),
    [
        ("10 20", [10, 20]),
        ("10,20", [10, 20]),
        (" 10 ,\n20\t", [10, 20]),
        ("-1.5-2.5", [-1.5, -2.5]),
        ("+3 .5", [3, 0.5]),
        ("1e2 1.5E-1 -2e+1", [100, 0.15, -20]),
        ("0.5.5", [0.5, 0.5]),
        ("10px 20%", [10, 20]),
        ("", []),
        ("abc", []),
    ],
)
def test_parse_numbers(test_input: str, expected: list[float]) -> None:
    assert parse_numbers(test_input) == expected


@pytest.mark.parametrize(
    ("test_input", "expected"),
    [
        ("100px", 100),
        ("  -3.5e1x", -35),
        ("50%", 50),
        (".5", 0.5),
        ("px100", None),
        ("", None),
    ],
)
def test_parse_float_prefix(test_input: str, expected: float | None) -> None:
    assert parse_float_prefix(test_input) == expected


def test_split_into_segments() -> None:
    assert split_into_segments("M0,0L 10 10h5 V-5 z") == [
        ("M", "0,0"),
        ("L", "10 10"),
        ("h", "5"),
        ("V", "-5"),
        ("z", ""),
    ]


@pytest.mark.parametrize("test_input", ["", "  \n\t "])
def test_split_empty(test_input: str) -> None:
    assert split_into_segments(test_input) == []


def test_split_ignores_leading_text() -> None:
    assert split_into_segments("10 10 L 5 5") == [("L", "5 5")]


def test_exponent_is_not_a_command() -> None:
    assert parse_path("M 1e1 2E1") == [MoveTo(10, 20)]


@pytest.mark.parametrize(
    ("test_input", "expected"),
    [
        ("M 10 20", [MoveTo(10, 20)]),
        ("m 10 20", [MoveTo(10, 20, relative=True)]),
        ("L 1 2 3 4", [LineTo(1, 2), LineTo(3, 4)]),
        ("H 1 2", [HorizontalLineTo(1), HorizontalLineTo(2)]),
        ("v -3", [VerticalLineTo(-3, relative=True)]),
        ("C 1 2 3 4 5 6", [CubicBezier(1, 2, 3, 4, 5, 6)]),
        ("s 1 2 3 4", [SmoothCubicBezier(1, 2, 3, 4, relative=True)]),
        ("Q 1 2 3 4", [QuadraticBezier(1, 2, 3, 4)]),
        ("T 1 2 3 4", [SmoothQuadraticBezier(1, 2), SmoothQuadraticBezier(3, 4)]),
        ("A 5 6 30 1 0 7 8", [Arc(5, 6, 30, True, False, 7, 8)]),
        ("a 5 6 0 0 2 7 8", [Arc(5, 6, 0, False, True, 7, 8, relative=True)]),
        ("Z", [ClosePath()]),
        ("z", [ClosePath(relative=True)]),
    ],
)
def test_parse_single_commands(test_input: str, expected: list[object]) -> None:
    assert parse_path(test_input) == expected


def test_implicit_line_to_after_move_to() -> None:
    assert parse_path("M 10 20 30 40 50 60") == [
        MoveTo(10, 20),
        LineTo(30, 40),
        LineTo(50, 60),
    ]
    assert parse_path("m 1 2 3 4") == [
        MoveTo(1, 2, relative=True),
        LineTo(3, 4, relative=True),
    ]


@pytest.mark.parametrize(
    ("letter", "numbers", "expected"),
    [
        ("M", [1, 2, 3], [MoveTo(1, 2)]),
        ("L", [1], []),
        ("C", [1, 2, 3, 4, 5, 6, 7, 8], [CubicBezier(1, 2, 3, 4, 5, 6)]),
        ("A", [1, 2, 3, 4, 5, 6], []),
        ("Z", [1, 2], [ClosePath()]),
        ("X", [1, 2], []),
    ],
)
def test_create_commands_drops_remainders(
    letter: str, numbers: list[float], expected: list[object]
) -> None:
    assert create_commands(letter, numbers) == expected


def test_unknown_letters_are_skipped() -> None:
    # the numbers after an unknown letter belong to the previous command
    assert parse_path("M 0 0 X 5 5 L 1 1") == [
        MoveTo(0, 0),
        LineTo(5, 5),
        LineTo(1, 1),
    ]


def test_commands_are_immutable() -> None:
    command = LineTo(1, 2)
    with pytest.raises(AttributeError):
        command.x = 5  # type: ignore[misc]


def test_command_tags() -> None:
    commands = parse_path(
        "M0 0 L1 1 H2 V3 C0 0 0 0 1 1 S0 0 1 1 Q0 0 1 1 T1 1 A1 1 0 0 0 1 1 Z"
    )
    assert [c.type for c in commands] == list("MLHVCSQTAZ")
    assert all(is_path_command(c) for c in commands)
    assert not is_path_command(("M", 0, 0))


def test_format_path() -> None:
    d = "M 10 20 l 5 -5 A 5 5 0 1 0 2.5 3 z"
    assert format_path(parse_path(d)) == d
