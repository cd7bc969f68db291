"""
utils/query_params.py - Query Parameter Coercion

Query parameters arrive as raw strings. These helpers turn them into typed
values without ever raising: anything malformed comes back as None (or the
supplied default) so the caller can treat it as "not provided".
"""

import re
from typing import Optional

# Optional whitespace, optional sign, then the leading run of ASCII digits.
# Anything after the digits ("5abc", "7.9") is ignored.
_LEADING_INT = re.compile(r"^\s*([+-]?[0-9]+)")


def parse_int(value: Optional[str]) -> Optional[int]:
    """
    Leniently parse an integer from a query string value.

    Examples:
        "10" -> 10, " 7" -> 7, "5abc" -> 5, "7.9" -> 7, "abc" -> None, "" -> None

    Args:
        value: Raw parameter value

    Returns:
        int or None if the value has no leading integer, or too many digits
        to convert
    """
    if value is None:
        return None
    match = _LEADING_INT.match(str(value))
    if not match:
        return None
    try:
        return int(match.group(1))
    except ValueError:
        # Longer than the interpreter's integer string conversion limit
        return None


def parse_positive_int(value: Optional[str], default: int, maximum: Optional[int] = None) -> int:
    """
    Parse a positive integer, falling back to ``default`` when the value is
    missing, malformed or below 1. Values above ``maximum`` are clamped.
    """
    parsed = parse_int(value)
    if parsed is None or parsed < 1:
        return default
    if maximum is not None and parsed > maximum:
        return maximum
    return parsed


def clean_text(value: Optional[str]) -> Optional[str]:
    """Empty strings count as absent"""
    if value is None or value == "":
        return None
    return value
