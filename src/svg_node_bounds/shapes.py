"""Bounding boxes of the primitive SVG shapes.

Every coordinate argument accepts a number or an attribute string. Strings
are parsed by their numeric prefix (``"100px"`` is ``100``) and fall back to
``default`` if there is none.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeAlias

from svg_node_bounds.path_bbox import (
    EMPTY_BBOX,
    BoundingBox,
    Point,
    get_bbox,
    parse_float_prefix,
)
from svg_node_bounds.path_bbox.constants import SPLIT_PATTERN
from svg_node_bounds.path_bbox.math import circle_extent, ellipse_extent, line_extent

if TYPE_CHECKING:
    from collections.abc import Sequence

NumericAttr: TypeAlias = str | float | None
"""An attribute value as read from markup, or an already parsed number."""

DEFAULT_COORDINATE = 0.0
"""The value of a coordinate attribute that is missing or not a number."""


def parse_numeric_attribute(
    value: NumericAttr, default: float = DEFAULT_COORDINATE
) -> float:
    """Parse an attribute value into a number.

    Examples:
        >>> parse_numeric_attribute("100px")
        100.0
        >>> parse_numeric_attribute("auto", 5)
        5.0
        >>> parse_numeric_attribute(None)
        0.0
    """
    if value is None:
        return float(default)

    if isinstance(value, (int, float)):
        return float(value)

    parsed = parse_float_prefix(value)
    return float(default) if parsed is None else parsed


def circle_bbox(
    cx: NumericAttr,
    cy: NumericAttr,
    r: NumericAttr,
    default: float = DEFAULT_COORDINATE,
) -> BoundingBox:
    """Get the bounding box of a circle."""
    return BoundingBox(
        *circle_extent(
            parse_numeric_attribute(cx, default),
            parse_numeric_attribute(cy, default),
            parse_numeric_attribute(r, default),
        )
    )


def ellipse_bbox(
    cx: NumericAttr,
    cy: NumericAttr,
    rx: NumericAttr,
    ry: NumericAttr,
    default: float = DEFAULT_COORDINATE,
) -> BoundingBox:
    """Get the bounding box of an ellipse."""
    return BoundingBox(
        *ellipse_extent(
            parse_numeric_attribute(cx, default),
            parse_numeric_attribute(cy, default),
            parse_numeric_attribute(rx, default),
            parse_numeric_attribute(ry, default),
        )
    )


def line_bbox(
    x1: NumericAttr,
    y1: NumericAttr,
    x2: NumericAttr,
    y2: NumericAttr,
    default: float = DEFAULT_COORDINATE,
) -> BoundingBox:
    """Get the bounding box of a line from (x1, y1) to (x2, y2)."""
    return BoundingBox(
        *line_extent(
            parse_numeric_attribute(x1, default),
            parse_numeric_attribute(y1, default),
            parse_numeric_attribute(x2, default),
            parse_numeric_attribute(y2, default),
        )
    )


def rect_bbox(
    x: NumericAttr,
    y: NumericAttr,
    width: NumericAttr,
    height: NumericAttr,
    default: float = DEFAULT_COORDINATE,
) -> BoundingBox:
    """Get the bounding box of a rectangle, which is the rectangle itself."""
    return BoundingBox(
        parse_numeric_attribute(x, default),
        parse_numeric_attribute(y, default),
        parse_numeric_attribute(width, default),
        parse_numeric_attribute(height, default),
    )


def parse_points(points: str | None) -> list[Point]:
    """Parse a ``points`` attribute into a list of points.

    Values that are not numbers are skipped and a trailing unpaired value is
    dropped.

    Example:
        >>> parse_points("10,20 30 40 50")
        [Point(x=10.0, y=20.0), Point(x=30.0, y=40.0)]
    """
    if not points or not points.strip():
        return []

    parsed = [parse_float_prefix(x) for x in SPLIT_PATTERN.split(points.strip())]
    numbers = [x for x in parsed if x is not None]

    return [Point(x, y) for x, y in zip(numbers[::2], numbers[1::2], strict=False)]


def points_bbox(points: Sequence[Point]) -> BoundingBox:
    """Get the bounding box of a list of points."""
    if not points:
        return EMPTY_BBOX
    return get_bbox(points)


def polygon_bbox(points: str | None) -> BoundingBox:
    """Get the bounding box of a polygon or polyline ``points`` attribute."""
    return points_bbox(parse_points(points))
