"""Byte-buffer operations: fill, copy, search, compare and reallocate.

Destinations are mutable buffers such as ``bytearray``. Sources may be any
bytes-like object. Where a search would return a pointer, these functions
return an index into the buffer, or ``None`` when nothing is found.
"""

from __future__ import annotations

from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]


def _byte(c: int) -> int:
    """Reduce a character code to the byte value it stands for."""
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int byte value, got {type(c).__name__}")
    return c & 0xFF


def _check_span(data: BytesLike, n: int, name: str = "buffer") -> None:
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")
    if n > len(data):
        raise ValueError(f"{name} holds {len(data)} bytes, {n} requested")


def memset(buf: bytearray, c: int, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buf`` to the byte ``c``; return ``buf``."""
    value = _byte(c)
    _check_span(buf, n)
    buf[:n] = bytes([value]) * n
    return buf


def bzero(buf: bytearray, n: int) -> None:
    """Zero the first ``n`` bytes of ``buf``."""
    memset(buf, 0, n)


def memcpy(dst: bytearray, src: BytesLike, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` to the start of ``dst``; return ``dst``."""
    _check_span(src, n, "source")
    _check_span(dst, n, "destination")
    dst[:n] = bytes(src[:n])
    return dst


def memccpy(dst: bytearray, src: BytesLike, c: int, n: int) -> Optional[int]:
    """Copy bytes from ``src`` to ``dst`` up to and including the first ``c``.

    At most ``n`` bytes are copied. Returns the index in ``dst`` just past
    the copied ``c``, or ``None`` if ``c`` was not among the first ``n``
    bytes (in which case all ``n`` bytes were copied).
    """
    value = _byte(c)
    if n == 0:
        return None
    _check_span(src, n, "source")
    chunk = bytes(src[:n])
    found = chunk.find(value)
    count = n if found < 0 else found + 1
    _check_span(dst, count, "destination")
    dst[:count] = chunk[:count]
    return None if found < 0 else count


def memmove(dst: bytearray, src: BytesLike, n: int) -> bytearray:
    """Copy ``n`` bytes from ``src`` to ``dst``, correct even when they share memory."""
    _check_span(src, n, "source")
    _check_span(dst, n, "destination")
    snapshot = bytes(src[:n])
    dst[:n] = snapshot
    return dst


def memchr(data: BytesLike, c: int, n: int) -> Optional[int]:
    """Index of the first byte ``c`` among the first ``n`` bytes, or ``None``."""
    value = _byte(c)
    _check_span(data, n)
    index = bytes(data[:n]).find(value)
    return None if index < 0 else index


def memrchr(data: BytesLike, c: int, n: int) -> Optional[int]:
    """Index of the last byte ``c`` among the first ``n`` bytes, or ``None``."""
    value = _byte(c)
    _check_span(data, n)
    index = bytes(data[:n]).rfind(value)
    return None if index < 0 else index


def memcmp(a: BytesLike, b: BytesLike, n: int) -> int:
    """Compare the first ``n`` bytes of two buffers.

    Returns the difference between the first pair of bytes that differ,
    or 0 if the spans are equal.
    """
    _check_span(a, n, "first buffer")
    _check_span(b, n, "second buffer")
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def memalloc(size: int) -> bytearray:
    """Return a new zero-filled buffer of ``size`` bytes."""
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    return bytearray(size)


def rememalloc(
    data: Optional[BytesLike], old_size: int, new_size: int
) -> bytearray:
    """Return a zeroed buffer of ``new_size`` bytes holding the start of ``data``.

    The first ``min(old_size, new_size)`` bytes of ``data`` are carried
    over; ``data`` may be ``None``, giving a plain zeroed buffer.
    """
    result = memalloc(new_size)
    if data is not None:
        memcpy(result, data, min(old_size, new_size))
    return result