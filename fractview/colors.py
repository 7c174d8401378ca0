"""Pixel colours: the iteration palette and visual colour conversion."""

from __future__ import annotations

from dataclasses import dataclass

_MASK32 = 0xFFFFFFFF


@dataclass
class Palette:
    """Maps an iteration count to a 32-bit ARGB colour.

    The alpha channel is stateful: it is reset to 255 whenever a point is
    inside the set and lowered by 5 for every escaped point coloured since.
    """

    alpha: int = 0

    def color(self, iterations: int, max_iter: int) -> int:
        """Return the 0xAARRGGBB colour for ``iterations`` out of ``max_iter``."""
        if iterations == max_iter:
            self.alpha = 255
            return ((self.alpha << 24) | (80 << 16) | (140 << 8) | 125) & _MASK32
        self.alpha -= 5
        red = int(iterations * (iterations * 0.8))
        green = int(iterations * (iterations * 0.5))
        blue = iterations
        return ((self.alpha << 24) | (red << 16) | (green << 8) | blue) & _MASK32


def _mask_shift(mask: int) -> tuple[int, int]:
    if mask <= 0:
        raise ValueError(f"colour mask must be a positive bit field, got {mask!r}")
    shift = 0
    while not mask & 1:
        mask >>= 1
        shift += 1
    width = 0
    while mask & 1:
        mask >>= 1
        width += 1
    return shift, width


def channel_shifts(red_mask: int, green_mask: int, blue_mask: int) -> tuple[int, ...]:
    """Return (shift, width) for the red, green and blue masks, flattened."""
    shifts: list[int] = []
    for mask in (red_mask, green_mask, blue_mask):
        shifts.extend(_mask_shift(mask))
    return tuple(shifts)


def good_color(color: int, depth: int, shifts: tuple[int, ...]) -> int:
    """Convert a 0x00RRGGBB colour to a pixel value for a visual of ``depth`` bits."""
    if depth >= 24:
        return color
    if len(shifts) != 6:
        raise ValueError("shifts must hold six values")
    red = (color >> 8) & 0xFF00
    green = color & 0xFF00
    blue = (color << 8) & 0xFF00
    return (
        ((red >> (16 - shifts[1])) << shifts[0])
        + ((green >> (16 - shifts[3])) << shifts[2])
        + ((blue >> (16 - shifts[5])) << shifts[4])
    )