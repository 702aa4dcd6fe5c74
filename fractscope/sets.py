"""Escape-time iteration counts for the supported fractal sets."""

from __future__ import annotations

ESCAPE_RADIUS_SQUARED = 4.0


def _escape_count(
    z: complex, c: complex, max_iter: int, *, folded: bool = False
) -> int:
    """Count iterations of z -> z**2 + c until |z|**2 exceeds 4 or max_iter is hit.

    With ``folded`` set, both parts of each new z are replaced by their
    absolute values (the Burning Ship variant).
    """
    zr, zi = z.real, z.imag
    cr, ci = c.real, c.imag
    count = 0
    while count < max_iter and zr * zr + zi * zi <= ESCAPE_RADIUS_SQUARED:
        new_re = zr * zr - zi * zi + cr
        new_im = 2 * zr * zi
        if folded:
            zi = abs(new_im) + ci
            zr = abs(new_re)
        else:
            zi = new_im + ci
            zr = new_re
        count += 1
    return count


def mandelbrot(c: complex, max_iter: int) -> int:
    """Iterations before the Mandelbrot orbit of ``c`` escapes."""
    return _escape_count(0j, complex(c), max_iter)


def julia(z: complex, c: complex, max_iter: int) -> int:
    """Iterations before the Julia orbit starting at ``z`` with parameter ``c`` escapes."""
    return _escape_count(complex(z), complex(c), max_iter)


def burning_ship(c: complex, max_iter: int) -> int:
    """Iterations before the Burning Ship orbit of ``c`` escapes."""
    return _escape_count(0j, complex(c), max_iter, folded=True)