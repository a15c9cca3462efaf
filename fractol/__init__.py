"""Interactive viewer for the Mandelbrot, Julia and Burning Ship fractals."""

__version__ = "0.1.0"