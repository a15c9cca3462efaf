"""Escape-time iteration counts for the Mandelbrot, Julia and Burning Ship sets."""

from __future__ import annotations

DEFAULT_MAX_ITER = 100


def mandelbrot(x: float, y: float, max_iter: int = DEFAULT_MAX_ITER) -> int:
    """Return the step at which z -> z^2 + (x + yi), starting at 0, escapes radius 2.

    Points that never escape give max_iter.
    """
    zx = zy = 0.0
    for i in range(max_iter):
        zx, zy = zx * zx - zy * zy + x, 2.0 * zx * zy + y
        if zx * zx + zy * zy > 4:
            return i
    return max(max_iter, 0)


def julia(
    x: float,
    y: float,
    c_real: float,
    c_imag: float,
    max_iter: int = DEFAULT_MAX_ITER,
) -> int:
    """Return the escape step of z -> z^2 + c starting from z = -x + yi."""
    zx, zy = -x, y
    for i in range(max_iter):
        zx, zy = zx * zx - zy * zy + c_real, 2.0 * zx * zy + c_imag
        if zx * zx + zy * zy > 4:
            return i
    return max(max_iter, 0)


def burning_ship(x: float, y: float, max_iter: int = DEFAULT_MAX_ITER) -> int:
    """Return the escape step of the Burning Ship iteration for c = x + yi."""
    zx = zy = 0.0
    for i in range(max_iter):
        nx = zx * zx - zy * zy + x
        ny = 2.0 * abs(zx * zy) + y
        zx, zy = abs(nx), abs(ny)
        if zx * zx + zy * zy > 4:
            return i
    return max(max_iter, 0)