"""Operations on NUL-terminated text held in Python strings.

A string here ends at its first ``"\\0"``, if it has one, just as a C
string does. Everything after that character is ignored. Functions that
would write into a destination buffer return the text that the buffer
holds afterwards. Searches return an index, or ``None`` when nothing is
found.
"""

from __future__ import annotations

from typing import Optional, Union

CharLike = Union[str, int]


def _cstr(s: str) -> str:
    """Return the text of ``s`` up to, not including, its first NUL."""
    if not isinstance(s, str):
        raise TypeError(f"expected a str, got {type(s).__name__}")
    end = s.find("\0")
    return s if end < 0 else s[:end]


def _char(c: CharLike) -> str:
    """Turn a one-character string or a character code into a character."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an int, got {type(c).__name__}")
    return chr(c & 0xFF)


def _check_count(n: int) -> None:
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")


def strlen(s: str) -> int:
    """Number of characters before the terminating NUL."""
    return len(_cstr(s))


def strdup(s: str) -> str:
    """Return a copy of the text of ``s``."""
    return _cstr(s)


def strcpy(dst: str, src: str) -> str:
    """Return what ``dst`` holds after ``src`` is copied over it: ``src`` itself."""
    _cstr(dst)
    return _cstr(src)


def strncpy(dst: str, src: str, n: int) -> str:
    """Return what ``dst`` holds after ``n`` characters of ``src`` are copied over it.

    If ``src`` is shorter than ``n`` the rest is NUL-filled and the result
    is ``src``. Otherwise no NUL is written, so the text of ``dst`` past
    the first ``n`` characters remains part of the result.
    """
    _check_count(n)
    dst_text = _cstr(dst)
    src_text = _cstr(src)
    if len(src_text) < n:
        return src_text
    return src_text[:n] + dst_text[n:]


def strcat(dst: str, src: str) -> str:
    """Return ``dst`` with ``src`` appended."""
    return _cstr(dst) + _cstr(src)


def strncat(dst: str, src: str, n: int) -> str:
    """Return ``dst`` with at most ``n`` characters of ``src`` appended."""
    _check_count(n)
    return _cstr(dst) + _cstr(src)[:n]


def strlcat(dst: str, src: str, dstsize: int) -> tuple[str, int]:
    """Size-bounded append.

    ``dst`` is taken to live in a buffer of ``dstsize`` characters,
    terminator included. Returns the resulting text and the length of
    the string that was tried to be made: the length of ``dst`` (at most
    ``dstsize``) plus the length of ``src``.
    """
    _check_count(dstsize)
    dst_text = _cstr(dst)
    src_text = _cstr(src)
    dlen = min(len(dst_text), dstsize)
    room = 0 if dlen == dstsize else dstsize - dlen - 1
    return dst_text + src_text[:room], len(src_text) + dlen


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first ``c`` in ``s``; a NUL is found at the terminator."""
    text = _cstr(s)
    ch = _char(c)
    if ch == "\0":
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last ``c`` in ``s``; a NUL is found at the terminator."""
    text = _cstr(s)
    ch = _char(c)
    if ch == "\0":
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` lying wholly within the first ``length`` characters.

    An empty needle is found at index 0.
    """
    _check_count(length)
    hay = _cstr(haystack)
    pin = _cstr(needle)
    if not pin:
        return 0
    index = hay.find(pin, 0, min(length, len(hay)))
    return None if index < 0 else index


def strstr(haystack: str, needle: str) -> Optional[int]:
    """Index of the first ``needle`` in ``haystack``; an empty needle gives 0."""
    hay = _cstr(haystack)
    return strnstr(hay, needle, len(hay))


def _compare(a: str, b: str) -> int:
    for x, y in zip(a, b):
        if x != y:
            return ord(x) - ord(y)
    if len(a) > len(b):
        return ord(a[len(b)])
    if len(b) > len(a):
        return -ord(b[len(a)])
    return 0


def strcmp(a: str, b: str) -> int:
    """Difference of the first differing character codes, or 0 if equal."""
    return _compare(_cstr(a), _cstr(b))


def strncmp(a: str, b: str, n: int) -> int:
    """Like :func:`strcmp` over at most the first ``n`` characters."""
    _check_count(n)
    return _compare(_cstr(a)[:n], _cstr(b)[:n])


def charat(s: Optional[str], c: CharLike) -> int:
    """Index of the first ``c`` in ``s``, or -1.

    A NUL is found at the terminator; a missing string gives -1.
    """
    if s is None:
        return -1
    index = strchr(s, c)
    return -1 if index is None else index


def strequ(a: Optional[str], b: Optional[str]) -> bool:
    """True if both strings are present and equal."""
    if a is None or b is None:
        return False
    return strcmp(a, b) == 0


def strnequ(a: Optional[str], b: Optional[str], n: int) -> bool:
    """True if both strings are present and agree on the first ``n`` characters."""
    if a is None or b is None:
        return False
    return strncmp(a, b, n) == 0