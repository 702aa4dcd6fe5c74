"""Interactive window that shows a fractal and reacts to keys and the mouse wheel."""

from __future__ import annotations

import os
import sys

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .formatting import print_format  # noqa: E402
from .view import (  # noqa: E402
    KEY_DOWN,
    KEY_ESCAPE,
    KEY_KP_ADD,
    KEY_KP_SUBTRACT,
    KEY_LEFT,
    KEY_RIGHT,
    KEY_UP,
    View,
)

WINDOW_TITLE = "Fract-ol"
USAGE = "Usage: fractscope <fractal_name>\n"
USAGE_NAMES = "Usage: fractscope mandelbrot | julia | burning_ship\n"

_KEYCODES = {
    pygame.K_ESCAPE: KEY_ESCAPE,
    pygame.K_UP: KEY_UP,
    pygame.K_DOWN: KEY_DOWN,
    pygame.K_LEFT: KEY_LEFT,
    pygame.K_RIGHT: KEY_RIGHT,
    pygame.K_KP_PLUS: KEY_KP_ADD,
    pygame.K_KP_MINUS: KEY_KP_SUBTRACT,
    pygame.K_1: ord("1"),
    pygame.K_2: ord("2"),
    pygame.K_3: ord("3"),
    pygame.K_4: ord("4"),
    pygame.K_5: ord("5"),
    pygame.K_6: ord("6"),
}


def keycode_for(key: int) -> int | None:
    """Keycode understood by View.handle_key for a pygame key, or None."""
    return _KEYCODES.get(key)


def _draw(screen: pygame.Surface, view: View) -> None:
    data = b"".join(
        (color & 0xFFFFFF).to_bytes(3, "big") for row in view.render() for color in row
    )
    image = pygame.image.frombuffer(data, (view.width, view.height), "RGB")
    screen.blit(image, (0, 0))
    pygame.display.flip()


def run(view: View) -> int:
    """Show ``view`` in a window until it is closed; return the exit status."""
    try:
        pygame.init()
        screen = pygame.display.set_mode((view.width, view.height))
    except pygame.error:
        pygame.quit()
        return 1
    try:
        pygame.display.set_caption(WINDOW_TITLE)
        _draw(screen, view)
        while True:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                return 0
            if event.type == pygame.KEYDOWN:
                keycode = keycode_for(event.key)
                if keycode is not None and view.handle_key(keycode):
                    return 0
            elif event.type == pygame.MOUSEBUTTONDOWN:
                view.handle_mouse(event.button, *event.pos)
            else:
                continue
            _draw(screen, view)
    finally:
        pygame.quit()


def main(argv: list[str] | None = None) -> int:
    """Command entry point: ``fractscope <fractal_name>``."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print_format(USAGE)
        return 1
    try:
        view = View.from_name(args[0])
    except ValueError:
        return print_format(USAGE_NAMES)
    return run(view)


if __name__ == "__main__":
    sys.exit(main())