"""An off-screen 32-bit image with a raw pixel buffer."""

from __future__ import annotations

import struct
from collections.abc import Iterator

_PIXEL = struct.Struct("<I")


class Image:
    """A width x height image stored as little-endian 0xAARRGGBB words."""

    bits_per_pixel = 32
    endian = 0

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"image size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.size_line = width * self.bits_per_pixel // 8
        self.data = bytearray(self.size_line * height)

    def __repr__(self) -> str:
        return f"Image({self.width}, {self.height})"

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return y * self.size_line + x * (self.bits_per_pixel // 8)

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Store ``color`` at (x, y), keeping its low 32 bits."""
        _PIXEL.pack_into(self.data, self._offset(x, y), color & 0xFFFFFFFF)

    def get_pixel(self, x: int, y: int) -> int:
        """Return the 32-bit value stored at (x, y)."""
        return _PIXEL.unpack_from(self.data, self._offset(x, y))[0]

    def clear(self) -> None:
        """Set every pixel to zero."""
        self.data[:] = bytes(len(self.data))

    def rows(self) -> Iterator[bytes]:
        """Yield the raw bytes of each row, top to bottom."""
        for start in range(0, len(self.data), self.size_line):
            yield bytes(self.data[start:start + self.size_line])

    def to_rgb_bytes(self) -> bytes:
        """Return the image as packed R, G, B bytes, alpha dropped."""
        out = bytearray(self.width * self.height * 3)
        out[0::3] = self.data[2::4]
        out[1::3] = self.data[1::4]
        out[2::3] = self.data[0::4]
        return bytes(out)