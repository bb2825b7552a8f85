"""Bounding boxes of SVG shapes for design-tool node configs."""

from __future__ import annotations

from svg_node_bounds.path_bbox import (
    EMPTY_BBOX,
    BoundingBox,
    Point,
    get_bbox,
    get_path_bbox,
    parse_path,
)
from svg_node_bounds.shapes import (
    circle_bbox,
    ellipse_bbox,
    line_bbox,
    parse_numeric_attribute,
    parse_points,
    points_bbox,
    polygon_bbox,
    rect_bbox,
)
from svg_node_bounds.utils import build_nodes, find_bounds, read_tree

__all__ = [
    "EMPTY_BBOX",
    "BoundingBox",
    "Point",
    "build_nodes",
    "circle_bbox",
    "ellipse_bbox",
    "find_bounds",
    "get_bbox",
    "get_path_bbox",
    "line_bbox",
    "parse_numeric_attribute",
    "parse_path",
    "parse_points",
    "points_bbox",
    "polygon_bbox",
    "read_tree",
    "rect_bbox",
]
