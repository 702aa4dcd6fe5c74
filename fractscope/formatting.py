"""A small printf-style formatter supporting %c %s %d %i %u %x %X %p and %%."""

from __future__ import annotations

import string
import sys
from typing import Any, Iterator, TextIO

_LOWER_DIGITS = string.digits + string.ascii_lowercase
_UINT32_MASK = 0xFFFFFFFF


def format_int(n: int) -> str:
    """Decimal text of a signed integer."""
    return str(int(n))


def format_base(nbr: int, base: int, uppercase: bool) -> str:
    """Text of a non-negative integer in ``base`` (2 to 36)."""
    if not 2 <= base <= len(_LOWER_DIGITS):
        raise ValueError(f"base must be between 2 and {len(_LOWER_DIGITS)}, got {base}")
    if nbr < 0:
        raise ValueError(f"number must be non-negative, got {nbr}")
    digits = []
    while True:
        nbr, rest = divmod(nbr, base)
        digits.append(_LOWER_DIGITS[rest])
        if nbr == 0:
            break
    text = "".join(reversed(digits))
    return text.upper() if uppercase else text


def _to_int32(value: int) -> int:
    value = int(value) & _UINT32_MASK
    return value - (1 << 32) if value & 0x80000000 else value


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError(f"%c expects a single character, got {value!r}")
        return value
    return chr(int(value) & 0xFF)


def _format_pointer(value: Any) -> str:
    if value is None:
        return "(nil)"
    address = value if isinstance(value, int) else id(value)
    if address == 0:
        return "(nil)"
    return "0x" + format_base(address, 16, False)


def _convert(spec: str, args: Iterator[Any]) -> str:
    def take() -> Any:
        try:
            return next(args)
        except StopIteration:
            raise TypeError(f"not enough arguments for %{spec}") from None

    if spec == "c":
        return _format_char(take())
    if spec == "s":
        value = take()
        return "(null)" if value is None else str(value)
    if spec in ("d", "i"):
        return format_int(_to_int32(take()))
    if spec == "u":
        return format_base(int(take()) & _UINT32_MASK, 10, True)
    if spec == "x":
        return format_base(int(take()) & _UINT32_MASK, 16, False)
    if spec == "X":
        return format_base(int(take()) & _UINT32_MASK, 16, True)
    if spec == "p":
        return _format_pointer(take())
    if spec == "%":
        return "%"
    return ""


def render_format(fmt: str, *args: Any) -> str:
    """Expand ``fmt`` with ``args``.

    Unknown conversions are dropped without consuming an argument, and a
    lone ``%`` at the very end is kept as is.
    """
    if fmt is None:
        raise TypeError("format must not be None")
    values = iter(args)
    chars = iter(fmt)
    out = []
    for ch in chars:
        if ch != "%":
            out.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            out.append("%")
        else:
            out.append(_convert(spec, values))
    return "".join(out)


def print_format(fmt: str, *args: Any, file: TextIO | None = None) -> int:
    """Write the expanded format to ``file`` (stdout by default); return its length."""
    text = render_format(fmt, *args)
    stream = sys.stdout if file is None else file
    stream.write(text)
    return len(text)