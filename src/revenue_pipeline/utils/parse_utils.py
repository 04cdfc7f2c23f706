"""
Fallible numeric conversion for table cells.

Cells are strings; the aggregator needs numbers. These helpers never raise
on bad input. They return a ParseResult that is either ok with a value or
carries the reason the text could not be converted.
"""

import re
from typing import NamedTuple, Optional, Union

# Plain ASCII notation only: no digit grouping ("1_000"), no non-ASCII digits.
FLOAT_PATTERN = re.compile(
    r'[+-]?(?:(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?|inf|infinity|nan)',
    re.ASCII | re.IGNORECASE
)
INT_PATTERN = re.compile(r'[+-]?\d+', re.ASCII)


class ParseResult(NamedTuple):
    """Outcome of converting one cell."""

    ok: bool
    value: Optional[Union[int, float]] = None
    error: Optional[str] = None


def parse_float(text: str) -> ParseResult:
    """
    Convert cell text to a float.

    Surrounding whitespace is accepted; anything else that is not part of a
    number fails the conversion.

    Example:
        >>> parse_float("49.99")
        ParseResult(ok=True, value=49.99, error=None)
        >>> parse_float("1_000").ok
        False
    """
    if not FLOAT_PATTERN.fullmatch(text.strip()):
        return ParseResult(False, error=f"'{text}' is not a valid number")
    return ParseResult(True, float(text))


def parse_int(text: str) -> ParseResult:
    """
    Convert cell text to an int.

    Only integral text is accepted ("80", " 80 ", "-3"); "80.5" fails.

    Example:
        >>> parse_int("150")
        ParseResult(ok=True, value=150, error=None)
        >>> parse_int("80.5").ok
        False
    """
    if not INT_PATTERN.fullmatch(text.strip()):
        return ParseResult(False, error=f"'{text}' is not a valid integer")
    return ParseResult(True, int(text))
