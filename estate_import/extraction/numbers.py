"""Lenient number parsing for prices, room counts and areas.

Parsing reads the longest numeric prefix of a string and ignores whatever
follows ("80 m2" -> 80.0, "3 hab" -> 3). Anything without a numeric prefix
degrades to the caller's default instead of raising.
"""

import re

_LEADING_FLOAT_RE = re.compile(r"^\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)")
_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")
_PASTE_PRICE_JUNK_RE = re.compile(r"[^0-9,.\-]")


def leading_float(value: object, default: float = 0.0) -> float:
    if isinstance(value, bool):
        return default
    if isinstance(value, (int, float)):
        if value != value:
            return default
        try:
            return float(value)
        except OverflowError:
            return default
    if not isinstance(value, str):
        return default
    match = _LEADING_FLOAT_RE.match(value)
    if match is None:
        return default
    return float(match.group(1))


def leading_int(value: object, default: int = 0) -> int:
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if value != value:
            return default
        try:
            return int(value)
        except OverflowError:
            return default
    if not isinstance(value, str):
        return default
    match = _LEADING_INT_RE.match(value)
    if match is None:
        return default
    try:
        return int(match.group(1))
    except ValueError:
        # longer than the interpreter's int digit limit
        return default


def strip_thousands(raw: str, periods: bool = False) -> str:
    """Remove comma thousands separators, and periods too when *periods* is set."""
    cleaned = raw.replace(",", "")
    if periods:
        cleaned = cleaned.replace(".", "")
    return cleaned


def parse_european_price(raw: str) -> float:
    """Parse a price where periods group thousands and a comma marks decimals.

    ``"150.000,50 €"`` -> ``150000.5``; unparsable input -> ``0.0``.
    """
    cleaned = _PASTE_PRICE_JUNK_RE.sub("", raw)
    cleaned = cleaned.replace(".", "").replace(",", ".", 1)
    return leading_float(cleaned)


def parse_decimal_comma(raw: str) -> float:
    """Parse ``"85,5"`` or ``"85.5"`` as 85.5."""
    return leading_float(raw.replace(",", ".", 1))
