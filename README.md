# fractol

An interactive fractal viewer. It draws the Mandelbrot set, a Julia set or
the Burning Ship fractal in an 860 × 640 window, colours each point by how
many iterations it took to escape, and lets you zoom, pan and shift the
colour palette.

## Installing

```
pip install .
```

This installs the `fractol` command. The window is drawn with pygame.

## Running

Mandelbrot set:

```
fractol -m
```

Julia set with the default constant (-0.835, -0.2321):

```
fractol -j
```

Julia set with a constant of your choice (real part, imaginary part):

```
fractol -j 0 0.35
```

Burning Ship fractal:

```
fractol -bs
```

Options are matched by their prefix, so `-m` followed by further letters
also selects the Mandelbrot set. The Julia parameters are read as plain
decimal numbers (optional sign, digits, optional fraction); exponents are
not recognised and text after the number is ignored.

If no option is given, the option is not recognised, or `-j` is followed by
anything other than exactly two numbers, a usage summary is printed and the
program exits with status 1.

## Controls

| Input             | Effect                                                  |
|-------------------|---------------------------------------------------------|
| Mouse wheel       | Scale the view around the mouse pointer (up: ×1.1, down: ×0.9) |
| Arrow keys        | Pan by a twentieth of the visible width                 |
| Space             | Shift the colour palette                                |
| Escape            | Quit                                                    |

Closing the window also quits. Each point is computed with at most 100
iterations.

## Using it from Python

The escape-time functions in `fractol.fractals` can be called directly:

```python
from fractol.fractals import mandelbrot, julia, burning_ship

mandelbrot(0.0, 0.0, 100)                 # 100: the origin never escapes
julia(0.0, 0.0, -0.835, -0.2321, 100)
burning_ship(-1.75, -0.03, 100)
```

`fractol.view` holds the view state and needs no window:

- `View` — the visible region, with `map_pixel`, `iterations`, `color`
  (0xRRGGBBAA) and `render` (a list of rows of colours), plus `zoom_at`,
  `scroll` and `handle_key` for changing the view.
- `FractalSet` and `Key` — the fractals and the keys the viewer knows.
- `parse_args(argv)` — turns the options above into a `View`, raising
  `UsageError` (whose message is `usage_text()`) when they are invalid.
- `atof(text)` — the number parser used for the Julia parameters.

`fractol.app.main(argv=None)` is the entry point of the `fractol` command.

The package also carries small helper modules: `fractol.textutils` (string
parsing, searching and splitting), `fractol.charclass` (ASCII character
classes and case conversion) and `fractol.printf` (`format_printf` and
`printf` with the `c s p d i u x X %` conversions).

## Running the tests

```
pip install ".[test]"
pytest
```