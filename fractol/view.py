"""Viewport state, argument parsing and colouring for the fractal viewer."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum, IntEnum, auto

from .fractals import burning_ship, julia, mandelbrot
from .textutils import strncmp

WIDTH = 860
HEIGHT = 640
MAX_ITER = 100
DEFAULT_JULIA = (-0.835, -0.2321)

_WHITESPACE = "\t\n\v\f\r "
_GRADIENT = 0.15
_SCROLL_OUT = 1.1
_SCROLL_IN = 0.9
_PAN_DIVISOR = 20.0
_COLOR_STEP = 3
_UINT32 = 0xFFFFFFFF

_USAGE = (
    "  !!! INVALID PARAMETERS PROVIDED !!!  \n\n"
    "OPTIONS:\n"
    "---------------------------------------\n"
    '| "-m":                               |\n'
    "| Displays the Mandelbrot set fractal |\n"
    "|                                     |\n"
    '| "-j":                               |\n'
    "| Displays the Julia set fractal      |\n"
    "|                                     |\n"
    '| e.g. "-j 0 0.35"                    |\n'
    "---------------------------------------\n\n"
)


class FractalSet(IntEnum):
    """The fractals the viewer can draw."""

    MANDELBROT = 1
    JULIA = 2
    BURNING_SHIP = 3


class Key(Enum):
    """Keys the viewer reacts to."""

    ESCAPE = auto()
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    SPACE = auto()


class UsageError(Exception):
    """Raised when the command-line arguments do not select a fractal."""

    def __init__(self) -> None:
        super().__init__(usage_text())


def usage_text() -> str:
    """Return the help text shown for invalid arguments."""
    return _USAGE


def atof(text: str) -> float:
    """Parse a leading decimal number with optional sign and fraction.

    Leading whitespace is skipped and parsing stops at the first character
    that does not fit; no digits gives 0.0. Exponents are not recognised.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1.0
    if rest[:1] in ("-", "+"):
        sign = -1.0 if rest[0] == "-" else 1.0
        rest = rest[1:]

    def take_digits(s: str) -> tuple[str, str]:
        count = 0
        for ch in s:
            if not "0" <= ch <= "9":
                break
            count += 1
        return s[:count], s[count:]

    whole, rest = take_digits(rest)
    fraction = ""
    if rest.startswith("."):
        fraction, _ = take_digits(rest[1:])
    digits = whole + fraction
    value = float(int(digits)) if digits else 0.0
    return sign * value / (10.0 ** len(fraction))


@dataclass
class View:
    """The visible region of the complex plane and how it is drawn."""

    fractal_set: FractalSet = FractalSet.MANDELBROT
    julia_r: float = DEFAULT_JULIA[0]
    julia_i: float = DEFAULT_JULIA[1]
    max_iter: int = MAX_ITER
    zoom: float = 1.0
    min_x: float = -2.0
    max_x: float = 1.0
    min_y: float = -1.5
    max_y: float = 1.5
    offset_x: float = 0.0
    offset_y: float = 0.0
    color_shift: int = 0
    width: int = WIDTH
    height: int = HEIGHT

    def map_pixel(self, x: int, y: int) -> tuple[float, float]:
        """Map a pixel position to a point of the complex plane."""
        mapped_x = (
            self.min_x + (x * (self.max_x - self.min_x)) / self.width
        ) / self.zoom + self.offset_x
        mapped_y = (
            self.min_y + (y * (self.max_y - self.min_y)) / self.height
        ) / self.zoom + self.offset_y
        return mapped_x, mapped_y

    def iterations(self, x: int, y: int) -> int:
        """Return the escape step count for the pixel at (x, y)."""
        cx, cy = self.map_pixel(x, y)
        if self.fractal_set is FractalSet.MANDELBROT:
            return mandelbrot(cx, cy, self.max_iter)
        if self.fractal_set is FractalSet.JULIA:
            return julia(cx, cy, self.julia_r, self.julia_i, self.max_iter)
        return burning_ship(cx, cy, self.max_iter)

    def color(self, iterations: int) -> int:
        """Return the 0xRRGGBBAA colour for an escape step count."""
        angle = _GRADIENT * iterations + 0.1 * self.color_shift
        r = int(255 * 0.5 * (1 + math.sin(angle)))
        g = int(255 * 0.5 * (1 + math.sin(angle + 2.094)))
        b = int(255 * 0.5 * (1 + math.sin(angle + 4.188)))
        return (r << 24) | (g << 16) | (b << 8) | 0xFF

    def render(self) -> list[list[int]]:
        """Return the colours of every pixel, one list per row."""
        return [
            [self.color(self.iterations(x, y)) for x in range(self.width)]
            for y in range(self.height)
        ]

    def zoom_at(self, px: int, py: int, factor: float) -> None:
        """Scale the region by factor, keeping the point under (px, py) fixed."""
        mouse_x = self.min_x + (px / self.width) * (self.max_x - self.min_x)
        mouse_y = self.min_y + (py / self.height) * (self.max_y - self.min_y)
        self.min_x = mouse_x + (self.min_x - mouse_x) * factor
        self.max_x = mouse_x + (self.max_x - mouse_x) * factor
        self.min_y = mouse_y + (self.min_y - mouse_y) * factor
        self.max_y = mouse_y + (self.max_y - mouse_y) * factor

    def scroll(self, px: int, py: int, ydelta: float) -> None:
        """React to a scroll wheel movement with the cursor at (px, py)."""
        self.zoom_at(px, py, _SCROLL_OUT if ydelta > 0 else _SCROLL_IN)

    def handle_key(self, key: Key) -> bool:
        """Apply a key press; return False when the viewer should close."""
        if key is Key.ESCAPE:
            return False
        step = (self.max_x - self.min_x) / _PAN_DIVISOR
        if key is Key.UP:
            self.offset_y -= step
        elif key is Key.DOWN:
            self.offset_y += step
        elif key is Key.LEFT:
            self.offset_x -= step
        elif key is Key.RIGHT:
            self.offset_x += step
        elif key is Key.SPACE:
            self.color_shift = (self.color_shift + _COLOR_STEP) & _UINT32
        return True


def parse_args(argv: list[str]) -> View:
    """Build a view from the arguments that follow the program name.

    Raises UsageError when no fractal is selected or the Julia parameters
    are malformed.
    """
    if not argv:
        raise UsageError()
    option = argv[0]
    if strncmp(option, "-m", 2) == 0:
        return View(fractal_set=FractalSet.MANDELBROT)
    if strncmp(option, "-j", 2) == 0:
        if len(argv) == 1:
            return View(fractal_set=FractalSet.JULIA)
        if len(argv) == 3:
            return View(
                fractal_set=FractalSet.JULIA,
                julia_r=atof(argv[1]),
                julia_i=atof(argv[2]),
            )
        raise UsageError()
    if strncmp(option, "-bs", 3) == 0:
        return View(fractal_set=FractalSet.BURNING_SHIP)
    raise UsageError()