"""Viewport mapping and zoom, a 32-bit pixel buffer, colour palettes and an XPM reader for fractal images."""

__version__ = "0.1.0"

__all__ = ["colornames", "colors", "image", "viewport", "xpm"]