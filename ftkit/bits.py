"""Byte-order helpers."""

from __future__ import annotations

import sys


def is_little_endian() -> bool:
    """True if this machine stores integers least significant byte first."""
    return sys.byteorder == "little"


def swap_endian32(n: int) -> int:
    """Reverse the byte order of an unsigned 32-bit value."""
    if not 0 <= n <= 0xFFFFFFFF:
        raise OverflowError(f"{n} does not fit in an unsigned 32-bit integer")
    return int.from_bytes(n.to_bytes(4, "little"), "big")