"""Wrappers for SVG shape elements."""

from __future__ import annotations

import logging
import re
from abc import ABC, abstractmethod
from functools import cached_property
from typing import TYPE_CHECKING

from typing_extensions import override

from svg_node_bounds.path_bbox import get_commands_with_bbox, walk_points
from svg_node_bounds.shapes import (
    circle_bbox,
    ellipse_bbox,
    line_bbox,
    parse_points,
    polygon_bbox,
    rect_bbox,
)
from svg_node_bounds.transform import parse_transform, transform_bbox

if TYPE_CHECKING:
    from collections.abc import Sequence
    from xml.etree import ElementTree as ET

    from svg_node_bounds.path_bbox import BoundingBox, PathCommandType, Point
    from svg_node_bounds.transform import TransformCommand

logger = logging.getLogger(__name__)


def filtered_tag(tag: str) -> str:
    """Get the tag without the provider.

    Examples:
        >>> filtered_tag("{http://www.w3.org/2000/svg}circle")
        'circle'
        >>> filtered_tag("circle")
        'circle'
    """
    return re.sub(r"\{.*\}", "", tag)


def split_style(style: str) -> dict[str, str]:
    """Split an inline style into its declarations.

    Example:
        >>> split_style("cx: 10px; fill:red;")
        {'cx': '10px', 'fill': 'red'}
    """
    declarations: dict[str, str] = {}
    for item in style.split(";"):
        key, sep, value = item.partition(":")
        if sep and key.strip():
            declarations[key.strip()] = value.strip()
    return declarations


class ElemSpan(ABC):
    """Abstract base class for SVG shape elements."""

    def __init__(
        self, elem: ET.Element, ancestors: Sequence[ET.Element] = ()
    ) -> None:
        """Initialize the element.

        Args:
            elem: The element to wrap. It is not modified.
            ancestors: The ancestors of the element, outermost first.
        """
        self.elem = elem
        self.ancestors = tuple(ancestors)
        self.attr = dict(elem.attrib)
        self.fix_style()

    def fix_style(self) -> None:
        """Move the declarations of the style attribute into the attributes."""
        if "style" not in self.attr:
            return

        style = self.attr.pop("style")
        self.attr.update(split_style(style))

    @override
    def __repr__(self) -> str:
        cls = self.attr.get("class", "")
        cls_suffix = f" ({cls})" if cls else ""
        return f"{self.tag}{cls_suffix}"

    @property
    def tag(self) -> str:
        """The tag of the element without the provider."""
        return filtered_tag(self.elem.tag)

    @property
    def hidden(self) -> bool:
        """If the element or one of its ancestors is not displayed."""
        if self.attr.get("display") == "none":
            return True

        for ancestor in self.ancestors:
            display = ancestor.get("display") or split_style(
                ancestor.get("style", "")
            ).get("display")
            if display == "none":
                return True

        return False

    @cached_property
    def transform_commands(self) -> list[TransformCommand]:
        """The transforms of the ancestors and the element, outermost first."""
        commands: list[TransformCommand] = []
        for elem in (*self.ancestors, self.elem):
            commands.extend(parse_transform(elem.get("transform")))
        return commands

    @property
    def has_geometry(self) -> bool:
        """If the element produces any points.

        Shapes without points report `EMPTY_BBOX`, which is not a point at the
        origin.
        """
        return True

    @abstractmethod
    def get_bbox(self) -> BoundingBox:
        """Get the bounding box in the coordinates of the element."""

    def get_transformed_bbox(self) -> BoundingBox:
        """Get the bounding box in the coordinates of the outermost ancestor."""
        return transform_bbox(self.get_bbox(), self.transform_commands)


class Rect(ElemSpan):
    """Rectangle class."""

    @override
    def get_bbox(self) -> BoundingBox:
        return rect_bbox(*(self.attr.get(k) for k in ("x", "y", "width", "height")))


class Ellipse(ElemSpan):
    """Ellipse class."""

    @override
    def get_bbox(self) -> BoundingBox:
        return ellipse_bbox(*(self.attr.get(k) for k in ("cx", "cy", "rx", "ry")))


class Circle(ElemSpan):
    """Circle class."""

    @override
    def get_bbox(self) -> BoundingBox:
        return circle_bbox(*(self.attr.get(k) for k in ("cx", "cy", "r")))


class Line(ElemSpan):
    """Line class."""

    @override
    def get_bbox(self) -> BoundingBox:
        return line_bbox(*(self.attr.get(k) for k in ("x1", "y1", "x2", "y2")))


class Polygon(ElemSpan):
    """Polygon class."""

    @override
    def get_bbox(self) -> BoundingBox:
        return polygon_bbox(self.attr.get("points"))

    @property
    @override
    def has_geometry(self) -> bool:
        return bool(parse_points(self.attr.get("points")))


class Polyline(Polygon):
    """Polyline class."""


class Path(ElemSpan):
    """Path class."""

    @cached_property
    def commands_with_bbox(self) -> tuple[list[PathCommandType], BoundingBox]:
        """Cached commands with bbox."""
        return get_commands_with_bbox(self.attr.get("d", ""))

    @property
    def commands(self) -> list[PathCommandType]:
        """The parsed commands of the path data."""
        return self.commands_with_bbox[0]

    @cached_property
    def points(self) -> list[Point]:
        """The absolute points the bounding box is calculated from."""
        return walk_points(self.commands)

    @property
    @override
    def has_geometry(self) -> bool:
        return bool(self.points)

    @override
    def get_bbox(self) -> BoundingBox:
        return self.commands_with_bbox[1]


WRAPPED_CLASSES: dict[str, type[ElemSpan]] = {
    "rect": Rect,
    "circle": Circle,
    "ellipse": Ellipse,
    "line": Line,
    "polygon": Polygon,
    "polyline": Polyline,
    "path": Path,
}


def get_class_from_tag(tag: str) -> type[ElemSpan] | None:
    """Get the wrapper class for a tag, or None if it is not a shape."""
    if cls := WRAPPED_CLASSES.get(filtered_tag(tag)):
        return cls

    logger.debug("No shape wrapper for tag %r", tag)
    return None
