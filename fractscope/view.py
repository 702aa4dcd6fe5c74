"""Viewport state for a fractal: mapping pixels to the plane, rendering, input."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from .colors import get_color
from .sets import burning_ship, julia, mandelbrot

WIDTH = 800
HEIGHT = 800

DEFAULT_ZOOM = 1.0
DEFAULT_MAX_ITER = 50
DEFAULT_JULIA_C = complex(-0.7, 0.27015)
PLANE_SPAN = 4.0

PAN_STEP = 0.1
ITER_STEP = 10
ZOOM_IN_FACTOR = 0.9
ZOOM_OUT_FACTOR = 1.1

# X11 keysyms understood by View.handle_key.
KEY_ESCAPE = 65307
KEY_LEFT = 65361
KEY_UP = 65362
KEY_RIGHT = 65363
KEY_DOWN = 65364
KEY_KP_ADD = 65451
KEY_KP_SUBTRACT = 65453
KEY_FIRST_SCHEME = 49  # '1'
KEY_LAST_SCHEME = 54  # '6'

MOUSE_WHEEL_UP = 4
MOUSE_WHEEL_DOWN = 5


class FractalKind(enum.Enum):
    """The fractal sets a view can display."""

    MANDELBROT = "mandelbrot"
    JULIA = "julia"
    BURNING_SHIP = "burning_ship"


@dataclass
class View:
    """A window onto one fractal, with zoom, pan, iteration and palette state."""

    kind: FractalKind
    zoom: float = DEFAULT_ZOOM
    offset_x: float = 0.0
    offset_y: float = 0.0
    max_iter: int = DEFAULT_MAX_ITER
    julia_c: complex = DEFAULT_JULIA_C
    color_scheme: int = 0
    width: int = WIDTH
    height: int = HEIGHT

    @classmethod
    def from_name(cls, name: str) -> View:
        """Build a default view for the fractal called ``name``."""
        try:
            kind = FractalKind(name)
        except ValueError:
            names = " | ".join(k.value for k in FractalKind)
            raise ValueError(f"unknown fractal {name!r}; expected {names}") from None
        return cls(kind=kind)

    def to_complex(self, x: int, y: int) -> complex:
        """Point of the complex plane shown at pixel (x, y)."""
        scale_x = (PLANE_SPAN / self.width) * self.zoom
        scale_y = (PLANE_SPAN / self.height) * self.zoom
        re = (x - self.width // 2) * scale_x + self.offset_x
        im = (y - self.height // 2) * scale_y + self.offset_y
        return complex(re, im)

    def iterations(self, c: complex) -> int:
        """Escape-time count of ``c`` for this view's fractal."""
        if self.kind is FractalKind.MANDELBROT:
            return mandelbrot(c, self.max_iter)
        if self.kind is FractalKind.JULIA:
            return julia(c, self.julia_c, self.max_iter)
        return burning_ship(c, self.max_iter)

    def pixel_color(self, x: int, y: int) -> int:
        """0xRRGGBB colour of pixel (x, y)."""
        count = self.iterations(self.to_complex(x, y))
        return get_color(count, self.max_iter, self.color_scheme)

    def render(self) -> list[list[int]]:
        """Colours of every pixel, as rows from top to bottom."""
        return [
            [self.pixel_color(x, y) for x in range(self.width)]
            for y in range(self.height)
        ]

    def handle_key(self, keycode: int) -> bool:
        """Apply a key press; return True when the key asks to close the view."""
        if keycode == KEY_ESCAPE:
            return True
        step = PAN_STEP * self.zoom
        if keycode == KEY_UP:
            self.offset_y -= step
        elif keycode == KEY_DOWN:
            self.offset_y += step
        elif keycode == KEY_LEFT:
            self.offset_x -= step
        elif keycode == KEY_RIGHT:
            self.offset_x += step
        elif keycode == KEY_KP_ADD:
            self.max_iter += ITER_STEP
        elif keycode == KEY_KP_SUBTRACT:
            if self.max_iter > ITER_STEP:
                self.max_iter -= ITER_STEP
        elif KEY_FIRST_SCHEME <= keycode <= KEY_LAST_SCHEME:
            self.color_scheme = keycode - KEY_FIRST_SCHEME
        return False

    def handle_mouse(self, button: int, x: int, y: int) -> None:
        """Zoom around pixel (x, y) for wheel buttons; other buttons do nothing."""
        if button == MOUSE_WHEEL_UP:
            factor = ZOOM_IN_FACTOR
        elif button == MOUSE_WHEEL_DOWN:
            factor = ZOOM_OUT_FACTOR
        else:
            return
        anchor = self.to_complex(x, y)
        self.zoom *= factor
        self.offset_x = anchor.real - (anchor.real - self.offset_x) * factor
        self.offset_y = anchor.imag - (anchor.imag - self.offset_y) * factor