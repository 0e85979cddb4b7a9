"""ASCII character classification and case conversion.

Every function takes either a one-character string or an integer
character code. Classification returns a bool. Case conversion returns
a value of the same kind it was given.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[str, int]

_WHITESPACE_CODES = frozenset({ord(" "), 9, 10, 11, 12, 13})


def _code(c: CharLike) -> int:
    """Return the integer code of a one-character string or an int."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected a character or an int, got {type(c).__name__}")


def is_alpha(c: CharLike) -> bool:
    """True for the ASCII letters A-Z and a-z."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: CharLike) -> bool:
    """True for the ASCII digits 0-9."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_white(c: CharLike) -> bool:
    """True for space, tab, newline, vertical tab, form feed and carriage return."""
    return _code(c) in _WHITESPACE_CODES


def is_ascii(c: CharLike) -> bool:
    """True for codes 0 through 127."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """True for printable ASCII, space through tilde."""
    return ord(" ") <= _code(c) <= ord("~")


def _convert(c: CharLike, low: str, high: str, delta: int) -> CharLike:
    code = _code(c)
    if ord(low) <= code <= ord(high):
        code += delta
    return chr(code) if isinstance(c, str) else code


def to_upper(c: CharLike) -> CharLike:
    """Map an ASCII lower-case letter to upper case; leave anything else alone."""
    return _convert(c, "a", "z", -32)


def to_lower(c: CharLike) -> CharLike:
    """Map an ASCII upper-case letter to lower case; leave anything else alone."""
    return _convert(c, "A", "Z", 32)