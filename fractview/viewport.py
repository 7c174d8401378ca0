"""The region of the complex plane shown in the window, and zooming."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

_ZOOM_IN_FACTOR = 1.48
_ZOOM_OUT_FACTOR = 1.5
_ITER_STEP = 8


class Scroll(IntEnum):
    """Mouse buttons reported for the scroll wheel."""

    UP = 4
    DOWN = 5


@dataclass
class Viewport:
    """Maps window pixels to points of the complex plane."""

    width: int
    height: int
    x_min: float = -2.0
    x_max: float = 2.0
    y_min: float = -2.0
    y_max: float = 2.0
    max_iter: int = 100

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"viewport size must be positive, got {self.width}x{self.height}")

    def pixel_to_real(self, x: int) -> float:
        """Real part of the point under pixel column ``x``."""
        return self.x_min + float(x) * (self.x_max - self.x_min) / self.width

    def pixel_to_imag(self, y: int) -> float:
        """Imaginary part of the point under pixel row ``y``."""
        return self.y_min + float(y) * (self.y_max - self.y_min) / self.height

    def zoom_at(self, scroll: int, x: int, y: int) -> None:
        """Zoom in or out, centring the view on the point under pixel (x, y).

        Zooming in raises the iteration limit by 8, zooming out lowers it by 8.
        Any other button leaves the view as it is.
        """
        if scroll == Scroll.UP:
            factor = 1.0 / _ZOOM_IN_FACTOR
            step = _ITER_STEP
        elif scroll == Scroll.DOWN:
            factor = _ZOOM_OUT_FACTOR
            step = -_ITER_STEP
        else:
            return
        real = self.pixel_to_real(x)
        imag = self.pixel_to_imag(y)
        half_w = (self.x_max - self.x_min) * factor * 0.5
        half_h = (self.y_max - self.y_min) * factor * 0.5
        self.max_iter += step
        self.x_min, self.x_max = real - half_w, real + half_w
        self.y_min, self.y_max = imag - half_h, imag + half_h