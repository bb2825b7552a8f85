"""Functions for measuring the shapes of SVG trees."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Protocol, TypeVar
from xml.etree import ElementTree as ET

from defusedxml.ElementTree import fromstring

from svg_node_bounds.path_bbox import EMPTY_BBOX, BoundingBox, Point, get_bbox
from svg_node_bounds.wrappers import ElemSpan, filtered_tag, get_class_from_tag

if TYPE_CHECKING:
    from collections.abc import Iterator

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)

logger = logging.getLogger(__name__)

NOT_RENDERED: set[str] = {"defs", "clipPath", "marker", "mask", "pattern", "symbol"}
"""Containers whose children are not rendered in place."""


def save_parse(data: str) -> ET.Element:
    """Save and parse an SVG string."""
    return fromstring(data)  # type: ignore[no-any-return]


def read_tree(data: str | Path) -> ET.Element:
    """Read an SVG tree.

    Raises:
        defusedxml.ElementTree.ParseError: If the data is not well-formed XML.
    """
    if isinstance(data, Path):
        data = data.read_text("utf-8")

    return save_parse(data)


def _iter_tree(
    elem: ET.Element, ancestors: tuple[ET.Element, ...]
) -> Iterator[ElemSpan]:
    for child in elem:
        if not isinstance(child.tag, str):
            # comments and processing instructions
            continue

        tag = filtered_tag(child.tag)
        if tag in NOT_RENDERED:
            logger.debug("Skipping non-rendered container %r", tag)
            continue

        if cls := get_class_from_tag(tag):
            yield cls(child, ancestors)

        yield from _iter_tree(child, (*ancestors, child))


def iter_shapes(tree: ET.Element) -> Iterator[ElemSpan]:
    """Iterate over all rendered shape elements of an SVG tree in document order."""
    if cls := get_class_from_tag(tree.tag):
        yield cls(tree)
    yield from _iter_tree(tree, (tree,))


def union_bbox(*bboxes: BoundingBox) -> BoundingBox:
    """Get the bounding box containing all given bounding boxes."""
    points = [
        corner
        for x, y, w, h in bboxes
        for corner in (Point(x, y), Point(x + w, y + h))
    ]
    return get_bbox(points)


def find_bounds(tree: ET.Element) -> BoundingBox:
    """Find the bounds of all visible shapes of an SVG tree.

    Returns:
        The union of the transformed bounding boxes, or `EMPTY_BBOX` if the
        tree has no visible shapes. Shapes without points are left out.
    """
    bboxes = [
        obj.get_transformed_bbox()
        for obj in iter_shapes(tree)
        if not obj.hidden and obj.has_geometry
    ]

    if not bboxes:
        return EMPTY_BBOX

    return union_bbox(*bboxes)


class NodeBuilder(Protocol[T_co]):
    """Build a design-tool node config from a shape element."""

    def __call__(self, obj: ElemSpan) -> T_co:
        """Build the node config."""


def position_config(obj: ElemSpan) -> dict[str, float]:
    """Get the position and size fields of a node config for a shape."""
    x, y, width, height = obj.get_transformed_bbox()
    return {"x": x, "y": y, "width": width, "height": height}


def build_nodes(
    tree: ET.Element, fn: NodeBuilder[T] = position_config  # type: ignore[assignment]
) -> list[T]:
    """Build a node config for every visible shape of an SVG tree."""
    return [fn(obj) for obj in iter_shapes(tree) if not obj.hidden]
