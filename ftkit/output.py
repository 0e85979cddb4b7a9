"""Writing characters, text and numbers to file descriptors.

Output goes straight to the descriptor with :func:`os.write`, without
passing through Python's buffered streams. The plain functions write to
standard output (descriptor 1). :func:`puterror` writes to standard
error (descriptor 2). Text ends at its first ``"\\0"``, as a C string
does, and is encoded as UTF-8.
"""

from __future__ import annotations

import os
from typing import Optional, Union

from ftkit.numeric import itoa

CharLike = Union[str, int]

STDOUT = 1
STDERR = 2

_ENCODING = "utf-8"


def _write(fd: int, data: bytes) -> None:
    """Write all of ``data`` to ``fd``, retrying after partial writes."""
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def _char_bytes(c: CharLike) -> bytes:
    """Encode one character, given as a string or as a code truncated to a byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c.encode(_ENCODING)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an int, got {type(c).__name__}")
    return bytes([c & 0xFF])


def _text_bytes(s: str) -> bytes:
    """Encode the text of ``s`` up to, not including, its first NUL."""
    if not isinstance(s, str):
        raise TypeError(f"expected a str, got {type(s).__name__}")
    end = s.find("\0")
    text = s if end < 0 else s[:end]
    return text.encode(_ENCODING)


def putchar_fd(c: CharLike, fd: int) -> None:
    """Write one character to ``fd``."""
    _write(fd, _char_bytes(c))


def putstr_fd(s: Optional[str], fd: int) -> None:
    """Write the text of ``s`` to ``fd``; a missing string writes nothing."""
    if s is None:
        return
    _write(fd, _text_bytes(s))


def putendl_fd(s: Optional[str], fd: int) -> None:
    """Write the text of ``s`` and a newline to ``fd``."""
    putstr_fd(s, fd)
    putchar_fd("\n", fd)


def putnbr_fd(n: int, fd: int) -> None:
    """Write a signed 32-bit integer in decimal to ``fd``."""
    _write(fd, itoa(n).encode("ascii"))


def putchar(c: CharLike) -> None:
    """Write one character to standard output."""
    putchar_fd(c, STDOUT)


def putstr(s: Optional[str]) -> None:
    """Write the text of ``s`` to standard output."""
    putstr_fd(s, STDOUT)


def putendl(s: Optional[str]) -> None:
    """Write the text of ``s`` and a newline to standard output."""
    putendl_fd(s, STDOUT)


def putnbr(n: int) -> None:
    """Write a signed 32-bit integer in decimal to standard output."""
    putnbr_fd(n, STDOUT)


def puterror(s: Optional[str]) -> int:
    """Write the text of ``s`` to standard error and return 1, an exit status."""
    putstr_fd(s, STDERR)
    return 1