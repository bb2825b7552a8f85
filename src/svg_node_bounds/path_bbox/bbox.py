"""Calculate the bounding box of SVG path data."""

from __future__ import annotations

from typing import TYPE_CHECKING, NamedTuple

import numpy as np

from .math import points_extent
from .parser import parse_path

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from .commands import PathCommandType


class Point(NamedTuple):
    """A point in 2D space."""

    x: float
    y: float


class BoundingBox(NamedTuple):
    """An axis-aligned box (x, y, width, height)."""

    x: float
    y: float
    width: float
    height: float


EMPTY_BBOX = BoundingBox(0.0, 0.0, 0.0, 0.0)
"""The bounding box used when there is nothing to measure."""

ORIGIN = Point(0.0, 0.0)


class _WalkState(NamedTuple):
    """Absolute pen position and the start of the current subpath."""

    current: Point
    start: Point


def _resolve(current: Point, x: float, y: float, relative: bool) -> Point:
    """Resolve a coordinate pair against the current position if relative."""
    if relative:
        return Point(current.x + x, current.y + y)
    return Point(x, y)


def _step(  # noqa: PLR0911
    state: _WalkState, command: PathCommandType
) -> tuple[_WalkState, tuple[Point, ...]]:
    """Fold a single command into the walk state.

    Returns:
        The new state and the points to include in the bounding box.
    """
    curr = state.current
    rel = command.relative

    if command.type == "M":
        end = _resolve(curr, command.x, command.y, rel)
        return _WalkState(end, end), (end,)

    if command.type == "L":
        end = _resolve(curr, command.x, command.y, rel)
        return _WalkState(end, state.start), (end,)

    if command.type == "H":
        end = Point(curr.x + command.x if rel else command.x, curr.y)
        return _WalkState(end, state.start), (end,)

    if command.type == "V":
        end = Point(curr.x, curr.y + command.y if rel else command.y)
        return _WalkState(end, state.start), (end,)

    if command.type == "C":
        # a Bezier curve lies within the convex hull of its control points
        control1 = _resolve(curr, command.x1, command.y1, rel)
        control2 = _resolve(curr, command.x2, command.y2, rel)
        end = _resolve(curr, command.x, command.y, rel)
        return _WalkState(end, state.start), (control1, control2, end)

    if command.type == "S":
        # the reflected first control point is not tracked
        control2 = _resolve(curr, command.x2, command.y2, rel)
        end = _resolve(curr, command.x, command.y, rel)
        return _WalkState(end, state.start), (control2, end)

    if command.type == "Q":
        control = _resolve(curr, command.x1, command.y1, rel)
        end = _resolve(curr, command.x, command.y, rel)
        return _WalkState(end, state.start), (control, end)

    if command.type == "T":
        end = _resolve(curr, command.x, command.y, rel)
        return _WalkState(end, state.start), (end,)

    if command.type == "A":
        # ellipse around the start point, ignoring rotation and sweep
        end = _resolve(curr, command.x, command.y, rel)
        rx, ry = command.rx, command.ry
        corners = (
            Point(curr.x - rx, curr.y - ry),
            Point(curr.x + rx, curr.y - ry),
            Point(curr.x - rx, curr.y + ry),
            Point(curr.x + rx, curr.y + ry),
        )
        return _WalkState(end, state.start), (*corners, end)

    if command.type == "Z":
        return _WalkState(state.start, state.start), ()

    return state, ()


def walk_points(commands: Iterable[PathCommandType]) -> list[Point]:
    """Walk the commands and collect the points spanning their bounding box.

    The pen starts at the origin. Bezier curves contribute their control
    points, arcs the corners of the box around the start point with the arc
    radii and close-path commands nothing.
    """
    state = _WalkState(ORIGIN, ORIGIN)
    points: list[Point] = []

    for command in commands:
        state, emitted = _step(state, command)
        points.extend(emitted)

    return points


def get_bbox(points: Sequence[tuple[float, float]]) -> BoundingBox:
    """Calculates the bounding box from multiple points.

    Args:
        points: A sequence of (x, y) pairs.

    Returns:
        The bounding box, or `EMPTY_BBOX` if there are no points.
    """
    if not points:
        return EMPTY_BBOX

    coords = np.array(points, dtype=np.float64).reshape(-1, 2)
    x, y, width, height = points_extent(coords[:, 0], coords[:, 1])

    return BoundingBox(float(x), float(y), float(width), float(height))


def get_commands_with_bbox(d: str) -> tuple[list[PathCommandType], BoundingBox]:
    """Parses the commands of the path data and calculates the bounding box.

    Args:
        d: The path string

    Returns:
        A tuple with the commands of the path data and the bounding box.

    Example:
        >>> commands, bbox = get_commands_with_bbox("M 10 10 L 20 20 L 10 30 Z")
        >>> bbox
        BoundingBox(x=10.0, y=10.0, width=10.0, height=20.0)
    """
    commands = parse_path(d)
    return commands, get_bbox(walk_points(commands))


def get_path_bbox(d: str) -> BoundingBox:
    """Calculate the bounding box of path data.

    Never raises: malformed parts are skipped and path data without any
    points gives `EMPTY_BBOX`.
    """
    return get_commands_with_bbox(d)[1]
