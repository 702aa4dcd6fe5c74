"""Colour palettes mapping iteration counts to 0xRRGGBB values."""

from __future__ import annotations

import math
from typing import Callable

BLACK = 0x000000


def create_trgb(t: int, r: int, g: int, b: int) -> int:
    """Pack transparency and colour channels into one integer."""
    return t << 24 | r << 16 | g << 8 | b


def color_blue_violet(t: float) -> int:
    """Smooth blue-violet palette for ``t`` in [0, 1]."""
    red = int(9 * (1 - t) * t * t * t * 255)
    green = int(15 * (1 - t) * (1 - t) * t * t * 255)
    blue = int(8.5 * (1 - t) * (1 - t) * (1 - t) * t * 255)
    return red << 16 | green << 8 | blue


def color_red_yellow(t: float) -> int:
    """Palette running from blue through red to yellow."""
    return int(t * 255) << 16 | int(t * t * 255) << 8 | int((1 - t) * 255)


def color_blue_gradient(t: float) -> int:
    """Palette fading red into green."""
    return int(t * 255) << 8 | int((1 - t) * 255) << 16


def color_green_turquoise(t: float) -> int:
    """Palette running from blue towards green and yellow."""
    return int(t * 255) << 8 | int(t * t * 255) << 16 | int((1 - t) * 255)


def color_pink_white(t: float) -> int:
    """Palette brightening from black to pink."""
    return int(t * 255) << 16 | int(t * 128) << 8 | int(t * 255)


def color_rainbow(iteration: int) -> int:
    """Cyclic rainbow palette driven directly by the iteration count."""
    red = int(math.sin(0.16 * iteration + 4) * 127 + 128)
    green = int(math.sin(0.16 * iteration + 2) * 127 + 128)
    blue = int(math.sin(0.16 * iteration) * 127 + 128)
    return red << 16 | green << 8 | blue


_PALETTES: tuple[Callable[[float], int], ...] = (
    color_blue_violet,
    color_red_yellow,
    color_blue_gradient,
    color_green_turquoise,
    color_pink_white,
)


def get_color(iteration: int, max_iter: int, scheme: int) -> int:
    """Colour for a pixel that took ``iteration`` steps out of ``max_iter``.

    Points that never escaped are black. Schemes 0 to 4 pick a smooth
    palette; any other scheme uses the rainbow palette.
    """
    if iteration == max_iter:
        return BLACK
    t = iteration / max_iter
    if 0 <= scheme < len(_PALETTES):
        return _PALETTES[scheme](t)
    return color_rainbow(iteration)