"""Length, search, comparison and bounded copy for NUL-terminated style strings.

A string ends at its first NUL character if it holds one, otherwise at its
end. Searches report positions as indexes, or None when nothing is found.
"""

from __future__ import annotations

from itertools import chain, islice
from typing import Iterator

NUL = "\0"


def _char(c: int | str) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got {c!r}")
        return c
    return chr(int(c) & 0xFF)


def _terminated(s: str | bytes) -> Iterator[int]:
    """Character codes of ``s`` followed by a terminating 0."""
    codes = iter(s) if isinstance(s, bytes) else map(ord, s)
    return chain(codes, (0,))


def strlen(s: str) -> int:
    """Number of characters before the terminator."""
    end = s.find(NUL)
    return len(s) if end < 0 else end


def strchr(s: str, c: int | str) -> int | None:
    """Index of the first ``c`` in ``s``; searching for NUL finds the terminator."""
    target = _char(c)
    text = s[: strlen(s)]
    if target == NUL:
        return len(text)
    found = text.find(target)
    return None if found < 0 else found


def strrchr(s: str, c: int | str) -> int | None:
    """Index of the last ``c`` in ``s``; searching for NUL finds the terminator."""
    target = _char(c)
    text = s[: strlen(s)]
    if target == NUL:
        return len(text)
    found = text.rfind(target)
    return None if found < 0 else found


def _compare(s1: str | bytes, s2: str | bytes, limit: int | None) -> int:
    pairs = zip(_terminated(s1), _terminated(s2))
    if limit is not None:
        pairs = islice(pairs, limit)
    for a, b in pairs:
        if a != b:
            return a - b
        if a == 0:
            return 0
    return 0


def strncmp(s1: str | bytes, s2: str | bytes, n: int) -> int:
    """Compare at most ``n`` characters; negative, zero or positive like C."""
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    return _compare(s1, s2, n)


def strcmp(s1: str | bytes, s2: str | bytes) -> int:
    """Compare two strings; negative, zero or positive like C."""
    return _compare(s1, s2, None)


def strnstr(big: str, little: str, length: int) -> int | None:
    """Index of ``little`` lying wholly within the first ``length`` characters of ``big``.

    An empty ``little`` is found at index 0.
    """
    if not little:
        return 0
    if length <= 0:
        return None
    found = big[: strlen(big)].find(little, 0, length)
    return None if found < 0 else found


def strlcpy(dest: str, src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters including the terminator.

    Returns the new buffer contents and the length of ``src``; a truncated
    copy is detected by that length being at least ``size``. With a size
    of 0 the buffer is left as it was.
    """
    if size < 0:
        raise ValueError(f"size must be non-negative, got {size}")
    source = src[: strlen(src)]
    if size == 0:
        return dest, len(source)
    return source[: size - 1], len(source)


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dest`` in a buffer of ``size`` characters.

    Returns the new buffer contents and the length the full result would
    have. When ``dest`` already fills the buffer nothing is appended and
    the length reported is ``size`` plus the length of ``src``.
    """
    if size < 0:
        raise ValueError(f"size must be non-negative, got {size}")
    source = src[: strlen(src)]
    dest_len = min(strlen(dest), size)
    if dest_len >= size:
        return dest, size + len(source)
    appended = source[: size - dest_len - 1]
    return dest[:dest_len] + appended, dest_len + len(source)