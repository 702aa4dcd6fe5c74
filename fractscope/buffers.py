"""Byte-buffer operations: fill, allocate, search, compare and copy.

Buffers are bytearrays (or other mutable byte sequences) changed in
place; counts that reach past the end of a buffer raise IndexError.
"""

from __future__ import annotations

from typing import Sequence


def _check(buf: Sequence[int], n: int, offset: int = 0) -> None:
    if n < 0:
        raise ValueError(f"count must be non-negative, got {n}")
    if offset < 0:
        raise ValueError(f"offset must be non-negative, got {offset}")
    if offset + n > len(buf):
        raise IndexError(
            f"{n} bytes at offset {offset} exceed a buffer of {len(buf)} bytes"
        )


def bzero(buf: bytearray, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    _check(buf, n)
    buf[:n] = bytes(n)


def calloc(nmemb: int, size: int) -> bytearray:
    """A zero-filled buffer of ``nmemb`` items of ``size`` bytes each."""
    if nmemb < 0 or size < 0:
        raise ValueError(f"sizes must be non-negative, got {nmemb} and {size}")
    return bytearray(nmemb * size)


def memchr(buf: Sequence[int], c: int, n: int) -> int | None:
    """Index of the first byte equal to ``c`` among the first ``n``, or None."""
    _check(buf, n)
    target = c & 0xFF
    return next((i for i, byte in enumerate(buf[:n]) if byte == target), None)


def memcmp(a: Sequence[int], b: Sequence[int], n: int) -> int:
    """Difference of the first unequal bytes within ``n``, or 0 when equal."""
    _check(a, n)
    _check(b, n)
    return next((x - y for x, y in zip(a[:n], b[:n]) if x != y), 0)


def memcpy(dest: bytearray, src: Sequence[int], n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` to the start of ``dest``; return ``dest``."""
    _check(dest, n)
    _check(src, n)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buf: bytearray, dst: int, src: int, n: int) -> bytearray:
    """Copy ``n`` bytes from offset ``src`` to offset ``dst`` of ``buf``.

    The regions may overlap; the result is as if the source were copied
    out first. Returns ``buf``.
    """
    _check(buf, n, src)
    _check(buf, n, dst)
    buf[dst : dst + n] = bytes(buf[src : src + n])
    return buf


def memset(buf: bytearray, c: int, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buf`` to the low byte of ``c``; return ``buf``."""
    _check(buf, n)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf