"""Parse SVG ``transform`` attributes and apply them to bounding boxes."""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, Literal, TypeAlias

import numpy as np

from svg_node_bounds.path_bbox import BoundingBox, Point, get_bbox
from svg_node_bounds.path_bbox.parser import parse_numbers

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    import numpy.typing as npt

logger = logging.getLogger(__name__)

TRANSFORM_PATTERN = re.compile(r"(\w+)\s*\(([^)]*)\)")
"""A regex pattern to match a transform function with its arguments."""


@dataclass(frozen=True, slots=True)
class Translate:
    """Translation by (tx, ty)."""

    type: ClassVar[Literal["translate"]] = "translate"

    tx: float
    ty: float = 0.0


@dataclass(frozen=True, slots=True)
class Rotate:
    """Rotation by ``angle`` degrees around (cx, cy)."""

    type: ClassVar[Literal["rotate"]] = "rotate"

    angle: float
    cx: float = 0.0
    cy: float = 0.0


@dataclass(frozen=True, slots=True)
class Scale:
    """Scaling by sx along x and sy along y."""

    type: ClassVar[Literal["scale"]] = "scale"

    sx: float
    sy: float


@dataclass(frozen=True, slots=True)
class SkewX:
    """Skew along the x axis by ``angle`` degrees."""

    type: ClassVar[Literal["skewX"]] = "skewX"

    angle: float


@dataclass(frozen=True, slots=True)
class SkewY:
    """Skew along the y axis by ``angle`` degrees."""

    type: ClassVar[Literal["skewY"]] = "skewY"

    angle: float


@dataclass(frozen=True, slots=True)
class Matrix:
    """The matrix ``[[a, c, e], [b, d, f], [0, 0, 1]]``."""

    type: ClassVar[Literal["matrix"]] = "matrix"

    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0
    e: float = 0.0
    f: float = 0.0


TransformCommand: TypeAlias = Translate | Rotate | Scale | SkewX | SkewY | Matrix
"""Union of all transform functions."""


def _arg(args: Sequence[float], ix: int, default: float) -> float:
    return args[ix] if ix < len(args) else default


def create_transform(name: str, args: Sequence[float]) -> TransformCommand | None:
    """Create a transform command, using the SVG defaults for missing args.

    Returns:
        The command, or None if the function name is unknown.
    """
    name = name.lower()

    if name == "translate":
        return Translate(_arg(args, 0, 0.0), _arg(args, 1, 0.0))

    if name == "rotate":
        return Rotate(_arg(args, 0, 0.0), _arg(args, 1, 0.0), _arg(args, 2, 0.0))

    if name == "scale":
        sx = _arg(args, 0, 1.0)
        return Scale(sx, _arg(args, 1, sx))

    if name == "skewx":
        return SkewX(_arg(args, 0, 0.0))

    if name == "skewy":
        return SkewY(_arg(args, 0, 0.0))

    if name == "matrix":
        defaults = (1.0, 0.0, 0.0, 1.0, 0.0, 0.0)
        return Matrix(*(_arg(args, ix, value) for ix, value in enumerate(defaults)))

    logger.debug("Ignoring unknown transform function %r", name)
    return None


def parse_transform(transform: str | None) -> list[TransformCommand]:
    """Parse a transform attribute into commands.

    Example:
        >>> parse_transform("translate(10) scale(2)")
        [Translate(tx=10.0, ty=0.0), Scale(sx=2.0, sy=2.0)]
    """
    if not transform or not transform.strip():
        return []

    commands: list[TransformCommand] = []

    for name, args in TRANSFORM_PATTERN.findall(transform):
        command = create_transform(name, parse_numbers(args))
        if command is not None:
            commands.append(command)

    return commands


def _command_matrix(command: TransformCommand) -> npt.NDArray[np.float64]:
    """Get the 3x3 affine matrix of a single command."""
    if command.type == "translate":
        a, b, c, d, e, f = 1.0, 0.0, 0.0, 1.0, command.tx, command.ty

    elif command.type == "scale":
        a, b, c, d, e, f = command.sx, 0.0, 0.0, command.sy, 0.0, 0.0

    elif command.type == "rotate":
        phi = math.radians(command.angle)
        cos, sin = math.cos(phi), math.sin(phi)
        # rotate around (cx, cy): translate(cx, cy) rotate(angle) translate(-cx, -cy)
        a, b, c, d = cos, sin, -sin, cos
        e = command.cx - cos * command.cx + sin * command.cy
        f = command.cy - sin * command.cx - cos * command.cy

    elif command.type == "skewX":
        tan = math.tan(math.radians(command.angle))
        a, b, c, d, e, f = 1.0, 0.0, tan, 1.0, 0.0, 0.0

    elif command.type == "skewY":
        tan = math.tan(math.radians(command.angle))
        a, b, c, d, e, f = 1.0, tan, 0.0, 1.0, 0.0, 0.0

    else:
        a, b, c, d = command.a, command.b, command.c, command.d
        e, f = command.e, command.f

    return np.array([[a, c, e], [b, d, f], [0.0, 0.0, 1.0]], dtype=np.float64)


def to_matrix(commands: Iterable[TransformCommand]) -> npt.NDArray[np.float64]:
    """Compose the commands into a single affine matrix.

    As in SVG, the rightmost command is applied to the coordinates first.
    """
    matrix = np.identity(3, dtype=np.float64)
    for command in commands:
        matrix = matrix @ _command_matrix(command)
    return matrix


def transform_bbox(
    bbox: BoundingBox, commands: Sequence[TransformCommand]
) -> BoundingBox:
    """Get the axis-aligned bounding box of a transformed bounding box."""
    if not commands:
        return bbox

    x, y, width, height = bbox
    corners = np.array(
        [
            [x, x + width, x, x + width],
            [y, y, y + height, y + height],
            [1.0, 1.0, 1.0, 1.0],
        ],
        dtype=np.float64,
    )
    transformed = to_matrix(commands) @ corners

    return get_bbox([Point(float(px), float(py)) for px, py in transformed[:2].T])


def extract_translation(commands: Iterable[TransformCommand]) -> Point:
    """Sum the offsets of all translate commands, ignoring everything else."""
    tx = ty = 0.0
    for command in commands:
        if command.type == "translate":
            tx += command.tx
            ty += command.ty
    return Point(tx, ty)
