"""
Number rounding and formatting helpers shared by parser and formatter.
"""

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional, Union

THOUSANDS_SEPARATOR = "'"


def round_half_away(value: float, decimals: int = 0) -> float:
    """
    Round to a number of decimals, ties going away from zero.

    Python's round() uses banker's rounding and works on the binary value;
    this rounds the shortest decimal representation instead, so
    round_half_away(2.675, 2) == 2.68 and round_half_away(-0.5) == -1.0.

    Args:
        value: Number to round
        decimals: Number of decimals to keep (>= 0)

    Returns:
        Rounded value, or the input unchanged if it is not finite
    """
    if not math.isfinite(value):
        return value
    quantum = Decimal(1).scaleb(-decimals)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def format_thousands(value: Union[int, float, str], separator: str = THOUSANDS_SEPARATOR) -> str:
    """
    Insert a separator every three digits of the integer part.

    Args:
        value: Number, or an already fixed-decimal string such as '2600000.50'
        separator: Group separator

    Returns:
        Grouped string, e.g. "2'600'000.50"
    """
    text = str(value)
    sign = ""
    if text.startswith("-"):
        sign, text = "-", text[1:]
    integer, dot, fraction = text.partition(".")
    groups = []
    while len(integer) > 3:
        groups.insert(0, integer[-3:])
        integer = integer[:-3]
    groups.insert(0, integer)
    return sign + separator.join(groups) + dot + fraction


def parse_number(token: Optional[str]) -> Optional[float]:
    """
    Parse a numeric token typed by a user.

    Apostrophes (straight or typographic) and spaces used as thousands
    separators are removed and a decimal comma is accepted.

    Args:
        token: Raw text of the number

    Returns:
        The finite float value, or None if the token is not a number
    """
    if token is None:
        return None
    cleaned = token.replace("'", "").replace("’", "").replace(" ", "").replace(",", ".")
    try:
        value = float(cleaned)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value
