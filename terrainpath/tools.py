"""Small helpers for reading command-line values."""

from __future__ import annotations

import re

_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


def get_uint(text: str | None) -> int:
    """Convert text to a non-negative integer.

    Parsing is lenient: leading whitespace is skipped, trailing garbage is
    ignored and text without a leading number yields 0. A negative number
    or a missing string raises ValueError.
    """
    if text is None:
        raise ValueError("Invalid string when converting to unsigned int")

    match = _LEADING_INT.match(text)
    answer = int(match.group(1)) if match else 0

    if answer < 0:
        raise ValueError("String is invalid unsigned int")

    return answer