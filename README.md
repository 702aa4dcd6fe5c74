# fractscope

An interactive viewer for three escape-time fractals: the Mandelbrot set,
a Julia set and the Burning Ship. Fractals are drawn in an 800 × 800 pygame
window and can be panned, zoomed and recoloured from the keyboard and the
mouse wheel.

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Running the viewer

Start it with the name of the fractal to draw:

```
fractscope mandelbrot
fractscope julia
fractscope burning_ship
```

Give exactly one name. With no name or more than one, a usage line is
printed and the command exits with status 1; an unknown name prints the
list of accepted names and exits with a non-zero status. If the window
cannot be opened, the command exits with status 1.

The Julia set uses the constant c = -0.7 + 0.27015i. Every view starts at
zoom 1.0, centred on the origin, with 50 iterations per point and the
first colour scheme.

### Controls

| Input              | Action                                              |
|--------------------|-----------------------------------------------------|
| Arrow keys         | Pan by a tenth of the current zoom                  |
| Keypad `+`         | Add 10 iterations                                   |
| Keypad `-`         | Remove 10 iterations (only while above 10)          |
| `1` to `6`         | Choose a colour scheme                              |
| Mouse wheel up     | Zoom in around the pointer                          |
| Mouse wheel down   | Zoom out around the pointer                         |
| `Esc` or close box | Quit                                                |

The colour schemes, in key order, are blue-violet, red-yellow, blue
gradient, green-turquoise, pink-white and a sine-based rainbow. Points that
never escape are drawn black.

## Using it as a library

The pieces behind the viewer can be used on their own.

```python
from fractscope.sets import mandelbrot, julia, burning_ship
from fractscope.colors import get_color
from fractscope.view import View

mandelbrot(complex(0, 0), 50)        # 50: the origin never escapes
get_color(50, 50, 0)                 # 0x000000: points that never escape are black

view = View.from_name("julia")
view.handle_mouse(4, 400, 400)       # zoom in around the centre of the window
rows = view.render()                 # 800 rows of 800 0xRRGGBB colours
```

- `fractscope.sets`: `mandelbrot`, `julia` and `burning_ship`, each
  returning the number of iterations before the orbit leaves the radius-2
  disc, capped at `max_iter`.
- `fractscope.colors`: the palettes (`color_blue_violet`,
  `color_red_yellow`, `color_blue_gradient`, `color_green_turquoise`,
  `color_pink_white`, `color_rainbow`), `get_color` to pick one by scheme
  number, and `create_trgb` to pack channels into an integer.
- `fractscope.view`: `FractalKind` and `View`. A `View` maps pixels to
  complex numbers (`to_complex`), counts iterations (`iterations`), colours
  pixels (`pixel_color`, `render`) and reacts to input: `handle_key` takes
  X11 keysyms and returns `True` for Escape; `handle_mouse` zooms for wheel
  buttons 4 and 5. `View.from_name` raises `ValueError` for an unknown name.
- `fractscope.app`: `run(view)` shows a `View` in a pygame window,
  `keycode_for` translates pygame keys, and `main` is the `fractscope`
  command.

The package also ships a set of small, self-contained helpers:

- `fractscope.formatting`: `render_format` and `print_format`, a compact
  printf supporting `%c %s %d %i %u %x %X %p %%`, plus `format_int` and
  `format_base`.
- `fractscope.chars`: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`,
  `is_print`, `to_lower`, `to_upper`, `atol` and `itoa`.
- `fractscope.search`: `strlen`, `strchr`, `strrchr`, `strcmp`, `strncmp`,
  `strnstr`, `strlcpy` and `strlcat`, treating a NUL character as the end
  of a string and returning indexes (or `None`) for searches.
- `fractscope.textops`: `strdup`, `substr`, `strjoin`, `strtrim`, `split`,
  `strmapi` and `striteri`.
- `fractscope.buffers`: byte-buffer operations on bytearrays (`bzero`,
  `calloc`, `memchr`, `memcmp`, `memcpy`, `memmove`, `memset`); counts
  past the end of a buffer raise `IndexError`.
- `fractscope.linked`: a singly linked list (`Node`, `LinkedList`) with
  `push_front`, `push_back`, `last`, `clear`, `each` and `map`.
- `fractscope.fdio`: `put_char_fd`, `put_str_fd`, `put_endl_fd` and
  `put_nbr_fd`, writing to a raw file descriptor.

## What it does not do

The viewer only draws to its window: it does not save images, and the Julia
constant, window size and starting view cannot be changed from the command
line.