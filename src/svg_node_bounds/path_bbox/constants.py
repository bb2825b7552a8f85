"""Constants for the SVG path utilities."""

from __future__ import annotations

import re
from typing import Literal, TypeAlias

COMMANDS = r"MLHVCSQTAZmlhvcsqtaz"
"""A string containing all the valid SVG path commands."""

VALID_COMMANDS = set("MLHVCSQTAZ")
"""A set containing all the valid upper case SVG path commands."""

ValidCommand: TypeAlias = Literal["M", "L", "H", "V", "C", "S", "Q", "T", "A", "Z"]
"""A type alias for the valid SVG path commands."""

SUBCOMMAND_PATTERN = re.compile(r"([" + COMMANDS + r"])([^" + COMMANDS + r"]*)")
"""A regex pattern to match SVG path subcommands with their argument text."""

NUMBER_PATTERN = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
"""A regex pattern to match a single numeric literal."""

NUMBER_PREFIX_PATTERN = re.compile(r"\s*(" + NUMBER_PATTERN.pattern + r")")
"""A regex pattern to match a numeric literal at the start of a string."""

SPLIT_PATTERN = re.compile(r"[,\s]+")
"""A regex pattern to split comma or whitespace separated values."""

PARAM_COUNTS: dict[ValidCommand, int] = {
    "M": 2,
    "L": 2,
    "H": 1,
    "V": 1,
    "C": 6,
    "S": 4,
    "Q": 4,
    "T": 2,
    "A": 7,
    "Z": 0,
}
"""The number of values consumed by each SVG path command."""
