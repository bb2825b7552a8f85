"""Typed records for the commands of SVG path data.

Every command is an immutable value carrying a class-level ``type`` tag (the
upper case SVG letter) and a ``relative`` flag (lower case letter in the
source). Coordinates are stored exactly as written; resolving relative
coordinates happens while walking the commands, never on the records.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar, Literal, TypeAlias, TypeGuard

if TYPE_CHECKING:
    from collections.abc import Iterable


def _format_number(value: float) -> str:
    """Format a number without a trailing ``.0``.

    Examples:
        >>> _format_number(10.0)
        '10'
        >>> _format_number(-2.5)
        '-2.5'
    """
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


@dataclass(frozen=True, slots=True)
class _Command:
    """Shared behaviour of all path commands."""

    type: ClassVar[str]

    @property
    def letter(self) -> str:
        """The command letter as it is written in path data."""
        return self.type.lower() if getattr(self, "relative", False) else self.type

    @property
    def args(self) -> tuple[float, ...]:
        """The numeric parameters in SVG order."""
        return ()

    def __str__(self) -> str:
        return " ".join([self.letter, *(_format_number(x) for x in self.args)])


@dataclass(frozen=True, slots=True)
class MoveTo(_Command):
    """Start a new subpath at (x, y)."""

    type: ClassVar[Literal["M"]] = "M"

    x: float
    y: float
    relative: bool = False

    @property
    def args(self) -> tuple[float, ...]:
        return (self.x, self.y)


@dataclass(frozen=True, slots=True)
class LineTo(_Command):
    """Draw a straight line to (x, y)."""

    type: ClassVar[Literal["L"]] = "L"

    x: float
    y: float
    relative: bool = False

    @property
    def args(self) -> tuple[float, ...]:
        return (self.x, self.y)


@dataclass(frozen=True, slots=True)
class HorizontalLineTo(_Command):
    """Draw a horizontal line to x."""

    type: ClassVar[Literal["H"]] = "H"

    x: float
    relative: bool = False

    @property
    def args(self) -> tuple[float, ...]:
        return (self.x,)


@dataclass(frozen=True, slots=True)
class VerticalLineTo(_Command):
    """Draw a vertical line to y."""

    type: ClassVar[Literal["V"]] = "V"

    y: float
    relative: bool = False

    @property
    def args(self) -> tuple[float, ...]:
        return (self.y,)


@dataclass(frozen=True, slots=True)
class CubicBezier(_Command):
    """Cubic Bezier curve with control points (x1, y1), (x2, y2) to (x, y)."""

    type: ClassVar[Literal["C"]] = "C"

    x1: float
    y1: float
    x2: float
    y2: float
    x: float
    y: float
    relative: bool = False

    @property
    def args(self) -> tuple[float, ...]:
        return (self.x1, self.y1, self.x2, self.y2, self.x, self.y)


@dataclass(frozen=True, slots=True)
class SmoothCubicBezier(_Command):
    """Cubic Bezier curve whose first control point is a reflection."""

    type: ClassVar[Literal["S"]] = "S"

    x2: float
    y2: float
    x: float
    y: float
    relative: bool = False

    @property
    def args(self) -> tuple[float, ...]:
        return (self.x2, self.y2, self.x, self.y)


@dataclass(frozen=True, slots=True)
class QuadraticBezier(_Command):
    """Quadratic Bezier curve with control point (x1, y1) to (x, y)."""

    type: ClassVar[Literal["Q"]] = "Q"

    x1: float
    y1: float
    x: float
    y: float
    relative: bool = False

    @property
    def args(self) -> tuple[float, ...]:
        return (self.x1, self.y1, self.x, self.y)


@dataclass(frozen=True, slots=True)
class SmoothQuadraticBezier(_Command):
    """Quadratic Bezier curve whose control point is a reflection."""

    type: ClassVar[Literal["T"]] = "T"

    x: float
    y: float
    relative: bool = False

    @property
    def args(self) -> tuple[float, ...]:
        return (self.x, self.y)


@dataclass(frozen=True, slots=True)
class Arc(_Command):
    """Elliptical arc to (x, y)."""

    type: ClassVar[Literal["A"]] = "A"

    rx: float
    ry: float
    x_axis_rotation: float
    large_arc_flag: bool
    sweep_flag: bool
    x: float
    y: float
    relative: bool = False

    @property
    def args(self) -> tuple[float, ...]:
        return (
            self.rx,
            self.ry,
            self.x_axis_rotation,
            int(self.large_arc_flag),
            int(self.sweep_flag),
            self.x,
            self.y,
        )


@dataclass(frozen=True, slots=True)
class ClosePath(_Command):
    """Close the current subpath."""

    type: ClassVar[Literal["Z"]] = "Z"

    relative: bool = False


PathCommandType: TypeAlias = (
    MoveTo
    | LineTo
    | HorizontalLineTo
    | VerticalLineTo
    | CubicBezier
    | SmoothCubicBezier
    | QuadraticBezier
    | SmoothQuadraticBezier
    | Arc
    | ClosePath
)
"""Union of all path command records."""

COMMAND_CLASSES: tuple[type[PathCommandType], ...] = (
    MoveTo,
    LineTo,
    HorizontalLineTo,
    VerticalLineTo,
    CubicBezier,
    SmoothCubicBezier,
    QuadraticBezier,
    SmoothQuadraticBezier,
    Arc,
    ClosePath,
)


def is_path_command(obj: Any) -> TypeGuard[PathCommandType]:
    """Check if an object is one of the path command records."""
    return isinstance(obj, COMMAND_CLASSES)


def format_path(commands: Iterable[PathCommandType]) -> str:
    """Serialize commands back into path data.

    Example:
        >>> format_path([MoveTo(10, 10), LineTo(5, 0, relative=True), ClosePath()])
        'M 10 10 l 5 0 Z'
    """
    return " ".join(str(command) for command in commands)
