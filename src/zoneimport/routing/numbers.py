"""Lenient cell value parsing."""

import re
from typing import Optional, Pattern

# Longest decimal prefix, as accepted by JavaScript's parseFloat
NUMBER_PREFIX_PATTERN: Pattern = re.compile(
    r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)"
)

TRUTHY_VALUES = frozenset({"true", "yes", "1", "y", "permitted"})


def parse_number(value: str) -> Optional[float]:
    """
    Parse the leading number of a cell.

    Leading whitespace is skipped and trailing text ignored, so "5,000"
    gives 5.0 and "12 ft" gives 12.0. Returns None when the cell does not
    start with a number.
    """
    match = NUMBER_PREFIX_PATTERN.match(value.lstrip())
    if match is None:
        return None
    return float(match.group(0))


def parse_permitted(value: str) -> bool:
    """Interpret a cell as a permitted flag; unrecognized text is False."""
    return value.strip().lower() in TRUTHY_VALUES
