"""Number parsing, formatting and floating-point checks."""

from __future__ import annotations

import math
import re

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_NUMBER = re.compile(r"[ \t\n\x0b\x0c\r]*([+-]?)([0-9]*)")


def _wrap_int32(value: int) -> int:
    return (value - INT_MIN) % 2**32 + INT_MIN


def _parse(text: str) -> tuple[int, int]:
    match = _NUMBER.match(text)
    sign, digits = match.group(1), match.group(2)
    value = int(digits) if digits else 0
    if sign == "-":
        value = -value
    return _wrap_int32(value), match.end()


def is_nan(value: float) -> bool:
    """True if the value is not a number."""
    return math.isnan(value)


def is_inf(value: float) -> bool:
    """True only for positive infinity."""
    return value == math.inf


def is_ninf(value: float) -> bool:
    """True only for negative infinity."""
    return value == -math.inf


def atoi(text: str) -> int:
    """Parse a leading decimal integer, wrapping to a signed 32-bit value.

    Leading whitespace is skipped and one optional sign is accepted;
    parsing stops at the first non-digit. Text with no digits gives 0.
    """
    return _parse(text)[0]


def atoi_skip(text: str) -> tuple[int, str]:
    """Parse like :func:`atoi` and also return the text left unread."""
    value, end = _parse(text)
    return value, text[end:]


def itoa(n: int) -> str:
    """Format a signed 32-bit integer in decimal."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a signed 32-bit integer")
    return str(n)