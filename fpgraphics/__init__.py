"""Raster canvas, 2D polygon clipping and BMP/XWD image files."""

__version__ = "1.0.0"

__all__ = ["bmp", "canvas", "clip2d", "xwd"]