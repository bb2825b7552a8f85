"""Parse SVG path data and calculate the bounding box."""

from __future__ import annotations

from .bbox import (
    EMPTY_BBOX,
    BoundingBox,
    Point,
    get_bbox,
    get_commands_with_bbox,
    get_path_bbox,
    walk_points,
)
from .commands import PathCommandType, format_path, is_path_command
from .parser import parse_float_prefix, parse_numbers, parse_path

__all__ = [
    "EMPTY_BBOX",
    "BoundingBox",
    "PathCommandType",
    "Point",
    "format_path",
    "get_bbox",
    "get_commands_with_bbox",
    "get_path_bbox",
    "is_path_command",
    "parse_float_prefix",
    "parse_numbers",
    "parse_path",
    "walk_points",
]
