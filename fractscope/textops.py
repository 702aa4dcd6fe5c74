"""Building new strings: copies, slices, joins, trims, splits and per-character maps.

Strings end at their first NUL character if they hold one, otherwise at
their end, so text after an embedded NUL is ignored.
"""

from __future__ import annotations

from typing import Callable, MutableSequence

NUL = "\0"


def _text(s: str) -> str:
    """``s`` up to its terminator."""
    if s is None:
        raise TypeError("string must not be None")
    end = s.find(NUL)
    return s if end < 0 else s[:end]


def _separator(sep: int | str) -> str:
    if isinstance(sep, str):
        if len(sep) != 1:
            raise TypeError(f"expected a single character, got {sep!r}")
        return sep
    return chr(int(sep) & 0xFF)


def strdup(s: str) -> str:
    """A copy of ``s`` up to its terminator."""
    return _text(s)


def substr(s: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``s`` beginning at index ``start``.

    A start at or past the end gives an empty string.
    """
    if start < 0:
        raise ValueError(f"start must be non-negative, got {start}")
    if length < 0:
        raise ValueError(f"length must be non-negative, got {length}")
    text = _text(s)
    if start >= len(text):
        return ""
    return text[start : start + length]


def strjoin(s1: str, s2: str) -> str:
    """``s1`` followed by ``s2``."""
    return _text(s1) + _text(s2)


def strtrim(s: str, charset: str) -> str:
    """``s`` with every character found in ``charset`` removed from both ends."""
    trim = _text(charset)
    text = _text(s)
    return text.strip(trim) if trim else text


def split(s: str, sep: int | str) -> list[str]:
    """The non-empty runs of ``s`` between occurrences of ``sep``."""
    separator = _separator(sep)
    text = _text(s)
    if separator == NUL:
        return [text] if text else []
    return [word for word in text.split(separator) if word]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """A new string whose character at each index ``i`` is ``f(i, s[i])``."""
    if f is None:
        raise TypeError("function must not be None")
    return "".join(f(index, ch) for index, ch in enumerate(_text(s)))


def striteri(
    buf: MutableSequence, f: Callable[[int, object], object]
) -> None:
    """Replace each item of ``buf`` before its terminator with ``f(index, item)``.

    ``buf`` may be a bytearray (ending at a 0 byte or its end) or a list of
    characters (ending at NUL or its end); it is changed in place.
    """
    if f is None:
        raise TypeError("function must not be None")
    for index, item in enumerate(buf):
        if item == 0 or item == NUL:
            break
        buf[index] = f(index, item)