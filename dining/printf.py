"""A small printf-style formatter supporting c, s, d, i, u, x, X, p and %."""

from __future__ import annotations

import sys
from typing import Any, Iterator, Optional, Sequence, TextIO

RESET = "\033[0m"

_DIGITS_LOWER = "0123456789abcdef"
_DIGITS_UPPER = "0123456789ABCDEF"


class FormatError(ValueError):
    """Raised for an unknown conversion, a missing argument or a bad format."""


def _to_base(n: int, base: int, digits: str) -> str:
    if n == 0:
        return digits[0]
    out = []
    while n:
        n, rem = divmod(n, base)
        out.append(digits[rem])
    return "".join(reversed(out))


def _as_int32(value: Any) -> int:
    n = int(value) & 0xFFFFFFFF
    return n - (1 << 32) if n & 0x80000000 else n


def _as_uint32(value: Any) -> int:
    return int(value) & 0xFFFFFFFF


def _convert(spec: str, value: Any) -> str:
    if spec == "c":
        if isinstance(value, str):
            if len(value) != 1:
                raise FormatError(f"%c expects a single character, got {value!r}")
            return value
        return chr(int(value) & 0xFF)
    if spec == "s":
        return "(null)" if value is None else str(value)
    if spec in ("d", "i"):
        n = _as_int32(value)
        sign = "-" if n < 0 else ""
        return sign + _to_base(abs(n), 10, _DIGITS_LOWER)
    if spec == "u":
        return _to_base(_as_uint32(value), 10, _DIGITS_LOWER)
    if spec == "x":
        return _to_base(_as_uint32(value), 16, _DIGITS_LOWER)
    if spec == "X":
        return _to_base(_as_uint32(value), 16, _DIGITS_UPPER)
    if spec == "p":
        if value is None or value == 0:
            return "(nil)"
        address = value if isinstance(value, int) else id(value)
        return "0x" + _to_base(address & 0xFFFFFFFFFFFFFFFF, 16, _DIGITS_LOWER)
    raise FormatError(f"unknown conversion %{spec}")


def _render(fmt: str, args: Sequence[Any]) -> Iterator[str]:
    """Yield the pieces of the formatted output in order."""
    arg_iter = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            yield ch
            continue
        spec = next(chars, None)
        if spec is None:
            raise FormatError("format ends with a lone '%'")
        if spec == "%":
            yield "%"
            continue
        if spec not in "csdiuxXp":
            raise FormatError(f"unknown conversion %{spec}")
        try:
            value = next(arg_iter)
        except StopIteration:
            raise FormatError(f"missing argument for %{spec}") from None
        yield _convert(spec, value)


def format_text(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by ``args``."""
    if fmt is None:
        raise FormatError("format must not be None")
    return "".join(_render(fmt, args))


def print_color(color: str, fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write ``color``, the formatted text and a reset code to ``stream``.

    Returns the number of characters of formatted text written, not counting
    the colour and reset sequences.  On a format error the text written so
    far stays written, no reset follows, and :class:`FormatError` is raised.
    """
    if fmt is None:
        raise FormatError("format must not be None")
    out = stream if stream is not None else sys.stdout
    out.write(color)
    count = 0
    for piece in _render(fmt, args):
        out.write(piece)
        count += len(piece)
    out.write(RESET)
    return count