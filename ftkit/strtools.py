"""Building, slicing, mapping, trimming and splitting NUL-terminated text.

Like :mod:`ftkit.strings`, a string here ends at its first ``"\\0"``.
Where the operation has no input to work on (a missing string or a
missing function), the result is ``None`` rather than an error.
"""

from __future__ import annotations

from typing import Callable, Iterable, Optional, Sequence, Union

from ftkit.strings import strcat, strcmp, strdup

CharLike = Union[str, int]

_TRIM_WHITESPACE = " \n\t"


def _char(c: CharLike) -> str:
    """Turn a one-character string or a character code into a character."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an int, got {type(c).__name__}")
    return chr(c & 0xFF)


def _until_nul(chars: Iterable[str]) -> str:
    """Join characters, stopping at the first NUL among them."""
    return strdup("".join(chars))


def strnew(size: int) -> bytearray:
    """Return a zero-filled buffer with room for ``size`` characters and a NUL."""
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    return bytearray(size + 1)


def strclr(buf: Optional[bytearray]) -> None:
    """Zero every byte of ``buf`` before its first NUL; ignore a missing buffer."""
    if buf is None:
        return
    end = buf.find(0)
    if end < 0:
        end = len(buf)
    buf[:end] = bytes(end)


def striter(s: Optional[str], f: Optional[Callable[[str], object]]) -> None:
    """Call ``f`` on each character of ``s`` in order."""
    if s is None or f is None:
        return
    for ch in strdup(s):
        f(ch)


def striteri(s: Optional[str], f: Optional[Callable[[int, str], object]]) -> None:
    """Call ``f`` with the index and the character for each character of ``s``."""
    if s is None or f is None:
        return
    for index, ch in enumerate(strdup(s)):
        f(index, ch)


def strmap(s: Optional[str], f: Optional[Callable[[str], str]]) -> Optional[str]:
    """Return a new string of ``f`` applied to each character of ``s``.

    An empty or missing string, or a missing function, gives ``None``.
    A NUL produced by ``f`` ends the result.
    """
    if s is None or f is None:
        return None
    text = strdup(s)
    if not text:
        return None
    return _until_nul(f(ch) for ch in text)


def strmapi(
    s: Optional[str], f: Optional[Callable[[int, str], str]]
) -> Optional[str]:
    """Like :func:`strmap`, with ``f`` also given each character's index."""
    if s is None or f is None:
        return None
    text = strdup(s)
    if not text:
        return None
    return _until_nul(f(index, ch) for index, ch in enumerate(text))


def strsub(s: Optional[str], start: int, length: int) -> Optional[str]:
    """Return up to ``length`` characters of ``s`` from index ``start``."""
    if s is None:
        return None
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    text = strdup(s)
    if start > len(text):
        raise IndexError(f"start {start} lies past the end of a {len(text)}-character string")
    return text[start:start + length]


def strjoin(a: Optional[str], b: Optional[str]) -> Optional[str]:
    """Return ``a`` followed by ``b``, or ``None`` if either is missing."""
    if a is None or b is None:
        return None
    return strcat(a, b)


def strtrim(s: Optional[str]) -> Optional[str]:
    """Strip spaces, newlines and tabs from both ends of ``s``."""
    if s is None:
        return None
    return strdup(s).strip(_TRIM_WHITESPACE)


def strtrim_c(s: Optional[str], c: CharLike) -> Optional[str]:
    """Strip every leading and trailing ``c`` from ``s``."""
    if s is None:
        return None
    ch = _char(c)
    text = strdup(s)
    if ch == "\0":
        return text
    return text.strip(ch)


def strsplit(s: Optional[str], c: CharLike) -> Optional[list[str]]:
    """Split ``s`` on ``c``, dropping empty pieces.

    A missing string or a NUL separator gives ``None``.
    """
    if s is None:
        return None
    ch = _char(c)
    if ch == "\0":
        return None
    return [word for word in strdup(s).split(ch) if word]


def findintab(haystack: Iterable[Optional[str]], needle: str) -> int:
    """Index of the first entry equal to ``needle``, or -1.

    The search ends at the end of ``haystack`` or at an entry that is ``None``.
    """
    for index, entry in enumerate(haystack):
        if entry is None:
            break
        if strcmp(entry, needle) == 0:
            return index
    return -1


def findintabn(haystack: Sequence[str], needle: str, length: int) -> int:
    """Index of ``needle`` among the first ``length`` entries, or -1."""
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    if length > len(haystack):
        raise ValueError(f"table holds {len(haystack)} entries, {length} requested")
    for index, entry in enumerate(haystack[:length]):
        if strcmp(entry, needle) == 0:
            return index
    return -1