"""
Value coercion helpers shared by the schema models and the validator.

Submitted values arrive as whatever JSON produced: strings from text inputs,
numbers, booleans, lists. These helpers turn them into numbers and dates the
same way a browser form would, without ever raising.
"""

import math
import re
from collections.abc import Mapping
from datetime import datetime, timedelta, timezone
from typing import Any

# Decimal literal with optional sign, fraction and exponent ("12", "-3.5", ".5", "1e3")
_DECIMAL_LITERAL = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

# Unsigned integer literal with radix prefix ("0x1A", "0o17", "0b101")
_RADIX_LITERAL = re.compile(r"0([xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)")
_RADIX_BASES = {"x": 16, "o": 8, "b": 2}

_INFINITIES = {"Infinity": math.inf, "+Infinity": math.inf, "-Infinity": -math.inf}

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def parse_number(value: Any) -> float | None:
    """
    Coerce a submitted value to a number.

    Blank strings count as zero and booleans as 0/1, matching how form
    inputs are usually coerced. Lists, dicts and non-numeric strings
    are not numbers.

    Args:
        value: Raw payload value.

    Returns:
        The numeric value, or None if the value is not a number.
    """
    if isinstance(value, bool):
        return float(value)

    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return math.inf if value > 0 else -math.inf
        return None if math.isnan(number) else number

    if not isinstance(value, str):
        return None

    text = value.strip()
    if not text:
        return 0.0
    if _DECIMAL_LITERAL.fullmatch(text):
        return float(text)
    if text in _INFINITIES:
        return _INFINITIES[text]

    match = _RADIX_LITERAL.fullmatch(text)
    if match:
        digits = match.group(1)
        return float(int(digits[1:], _RADIX_BASES[digits[0].lower()]))

    return None


def parse_date(value: Any) -> datetime | None:
    """
    Parse a submitted value into a timezone-aware UTC datetime.

    Strings must be ISO-8601 (``2021-01-01`` or a full timestamp). Values
    without an offset are read as UTC so comparisons never depend on the
    host timezone. Plain numbers are epoch milliseconds.

    Args:
        value: Raw payload value or a configured bound.

    Returns:
        The parsed datetime, or None if the value is not a valid date.
    """
    if isinstance(value, bool):
        return None

    if isinstance(value, (int, float)):
        if not math.isfinite(value):
            return None
        try:
            return _EPOCH + timedelta(milliseconds=value)
        except OverflowError:
            return None

    if not isinstance(value, str):
        return None

    text = value.strip()
    if not text:
        return None

    try:
        parsed = datetime.fromisoformat(text)
        if parsed.tzinfo is None:
            return parsed.replace(tzinfo=timezone.utc)
        return parsed.astimezone(timezone.utc)
    except (ValueError, OverflowError):
        return None


def format_number(value: float | int) -> str:
    """Render a numeric bound for messages ("18", not "18.0")."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def to_text(value: Any) -> str:
    """
    Render a submitted value as the text a form input would hold.

    Booleans are lower-case, integral numbers drop the ``.0`` and lists
    are joined with commas (empty slots for nulls), so ``True``, ``1.0``
    and ``["a", "b"]`` become ``"true"``, ``"1"`` and ``"a,b"``.
    """
    if isinstance(value, str):
        return value
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer() and abs(value) < 1e21:
            return str(int(value))
        return repr(value)
    if isinstance(value, (list, tuple)):
        return ",".join("" if item is None else to_text(item) for item in value)
    if isinstance(value, Mapping):
        return "[object Object]"
    return str(value)
