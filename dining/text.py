"""String helpers: number parsing and formatting, splitting, trimming and searching.

Search functions return an index into the string, or ``None`` when nothing
is found.  A search for the NUL character finds the end of the string, since
every string is taken to end with one.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Callable, List, Optional, Union

CharLike = Union[str, int]

_WHITESPACE = frozenset("\t\n\v\f\r ")
_NUL = "\0"


def _wrap_int32(n: int) -> int:
    n &= 0xFFFFFFFF
    return n - (1 << 32) if n & 0x80000000 else n


def _as_char(c: CharLike) -> str:
    """Turn a one-character string or an integer code into a character."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int) and not isinstance(c, bool):
        return chr(c & 0xFF)
    raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")


def _non_negative(name: str, value: int) -> int:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def atoi(text: str) -> int:
    """Parse a leading decimal integer, C style.

    Leading whitespace is skipped, one optional sign is read, then digits up
    to the first non-digit.  Text without digits yields 0.  The result wraps
    around like a 32-bit signed integer.
    """
    pos = 0
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    value = 0
    for ch in text[pos:]:
        if not "0" <= ch <= "9":
            break
        value = value * 10 + (ord(ch) - ord("0"))
    return _wrap_int32(value * sign)


def itoa(n: int) -> str:
    """Format an integer in decimal, with a leading minus for negatives."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    return str(n)


def split(text: str, sep: CharLike) -> List[str]:
    """Split on a single separator character, dropping empty words."""
    sep = _as_char(sep)
    return [word for word in text.split(sep) if word]


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    return text.strip(charset) if charset else text


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` starting at ``start``.

    A start at or past the end gives an empty string.
    """
    _non_negative("start", start)
    _non_negative("length", length)
    if start >= len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, limit: int) -> Optional[int]:
    """Find ``needle`` entirely within the first ``limit`` characters.

    An empty needle is found at index 0.
    """
    _non_negative("limit", limit)
    if not needle:
        return 0
    index = haystack[:limit].find(needle)
    return None if index < 0 else index


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` characters; the sign of the result orders the strings.

    The result is the code difference of the first differing characters,
    with the end of a string counting as code 0.
    """
    _non_negative("n", n)
    for x, y in zip_longest(a[:n], b[:n], fillvalue=_NUL):
        if x != y:
            return ord(x) - ord(y)
    return 0


def strcmp(a: Optional[str], b: Optional[str]) -> int:
    """Compare two strings like :func:`strncmp` without a length limit.

    If either string is ``None`` the result is 1.
    """
    if a is None or b is None:
        return 1
    return strncmp(a, b, max(len(a), len(b)) + 1)


def strchr(text: str, char: CharLike) -> Optional[int]:
    """Index of the first occurrence of ``char``, or ``None``."""
    ch = _as_char(char)
    if ch == _NUL:
        index = text.find(_NUL)
        return len(text) if index < 0 else index
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(text: str, char: CharLike) -> Optional[int]:
    """Index of the last occurrence of ``char``, or ``None``."""
    ch = _as_char(char)
    if ch == _NUL:
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` applied to each character."""
    if func is None:
        raise TypeError("func must be callable")
    return "".join(func(i, ch) for i, ch in enumerate(text))