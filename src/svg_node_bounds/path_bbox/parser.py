"""Split SVG path data into typed commands.

Parsing is permissive: unparseable text is skipped, incomplete argument
groups are dropped and an empty string gives an empty command list.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .commands import (
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
)
from .constants import (
    NUMBER_PATTERN,
    NUMBER_PREFIX_PATTERN,
    PARAM_COUNTS,
    SUBCOMMAND_PATTERN,
    VALID_COMMANDS,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from .commands import PathCommandType

logger = logging.getLogger(__name__)


def parse_numbers(text: str) -> list[float]:
    """Extract all numeric literals from a string.

    Separators may be any mix of whitespace and commas and may be left out
    where the next number starts with a sign or a second decimal point.

    Examples:
        >>> parse_numbers("10,20 -5.5e1")
        [10.0, 20.0, -55.0]
        >>> parse_numbers("0.5.5-1")
        [0.5, 0.5, -1.0]
    """
    return [float(x) for x in NUMBER_PATTERN.findall(text)]


def parse_float_prefix(text: str) -> float | None:
    """Parse the number at the start of a string, ignoring any suffix.

    Examples:
        >>> parse_float_prefix("100px")
        100.0
        >>> parse_float_prefix("px") is None
        True
    """
    match = NUMBER_PREFIX_PATTERN.match(text)
    if match is None:
        return None
    return float(match.group(1))


def split_into_segments(d: str) -> list[tuple[str, str]]:
    """Split path data into (command letter, argument text) pairs.

    Example:
        >>> split_into_segments("M 10 10 l5,5 z")
        [('M', '10 10'), ('l', '5,5'), ('z', '')]
    """
    segments: list[tuple[str, str]] = [
        (letter, args.strip()) for letter, args in SUBCOMMAND_PATTERN.findall(d)
    ]

    if segments and (leading := d[: d.find(segments[0][0])].strip()):
        logger.debug("Ignoring text before the first command: %r", leading)

    return segments


def _grouped(letter: str, numbers: Sequence[float]) -> list[Sequence[float]]:
    """Group numbers by the parameter count of a command."""
    count = PARAM_COUNTS[letter.upper()]  # type: ignore[index]
    n_full = len(numbers) // count
    if remainder := len(numbers) - n_full * count:
        logger.debug(
            "Dropping %d trailing value(s) of command %r", remainder, letter
        )
    return [numbers[i * count : (i + 1) * count] for i in range(n_full)]


def _create_move_to(
    values: Sequence[float], is_first: bool, rel: bool
) -> PathCommandType:
    # coordinate pairs after the first one are implicit line-to commands
    if is_first:
        return MoveTo(values[0], values[1], rel)
    return LineTo(values[0], values[1], rel)


_FACTORIES: dict[str, Callable[[Sequence[float], bool], PathCommandType]] = {
    "L": lambda v, rel: LineTo(v[0], v[1], rel),
    "H": lambda v, rel: HorizontalLineTo(v[0], rel),
    "V": lambda v, rel: VerticalLineTo(v[0], rel),
    "C": lambda v, rel: CubicBezier(*v, relative=rel),
    "S": lambda v, rel: SmoothCubicBezier(*v, relative=rel),
    "Q": lambda v, rel: QuadraticBezier(*v, relative=rel),
    "T": lambda v, rel: SmoothQuadraticBezier(v[0], v[1], rel),
    "A": lambda v, rel: Arc(
        v[0], v[1], v[2], v[3] != 0, v[4] != 0, v[5], v[6], relative=rel
    ),
}


def create_commands(letter: str, numbers: Sequence[float]) -> list[PathCommandType]:
    """Create the commands for a single segment of path data.

    Args:
        letter: The command letter. Lower case means relative coordinates.
        numbers: The numbers following the command letter.

    Returns:
        One command per complete group of arguments. Unknown letters give
        an empty list.
    """
    command = letter.upper()
    relative = letter.islower()

    if command not in VALID_COMMANDS:
        logger.debug("Ignoring unknown command %r", letter)
        return []

    if command == "Z":
        if numbers:
            logger.debug("Ignoring %d value(s) after %r", len(numbers), letter)
        return [ClosePath(relative)]

    groups = _grouped(letter, numbers)

    if command == "M":
        return [
            _create_move_to(values, ix == 0, relative)
            for ix, values in enumerate(groups)
        ]

    factory = _FACTORIES[command]
    return [factory(values, relative) for values in groups]


def parse_path(d: str) -> list[PathCommandType]:
    """Parse path data into a list of commands.

    Example:
        >>> parse_path("M 10 20 30 40")
        [MoveTo(x=10.0, y=20.0, relative=False), LineTo(x=30.0, y=40.0, relative=False)]
    """
    commands: list[PathCommandType] = []

    for letter, args in split_into_segments(d):
        commands.extend(create_commands(letter, parse_numbers(args)))

    return commands
