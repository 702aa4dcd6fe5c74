"""Writing characters, strings, lines and integers to raw file descriptors."""

from __future__ import annotations

import os


def _write(fd: int, data: bytes) -> int:
    if fd < 0:
        return 0
    return os.write(fd, data)


def _encode_char(c: int | str) -> bytes:
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got {c!r}")
        return c.encode()
    return bytes([int(c) & 0xFF])


def put_char_fd(c: int | str, fd: int) -> int:
    """Write one character to ``fd``; return the bytes written (0 for a negative fd)."""
    return _write(fd, _encode_char(c))


def put_str_fd(s: str | None, fd: int) -> int:
    """Write ``s`` to ``fd``; nothing is written for None or a negative fd."""
    if s is None:
        return 0
    return _write(fd, s.encode())


def put_endl_fd(s: str | None, fd: int) -> int:
    """Write ``s`` and a newline to ``fd``; nothing for None or a negative fd."""
    if s is None:
        return 0
    return _write(fd, s.encode() + b"\n")


def put_nbr_fd(n: int, fd: int) -> int:
    """Write the decimal text of ``n`` to ``fd``; return the bytes written."""
    return _write(fd, str(int(n)).encode())