"""An in-memory raster image with a configurable pixel layout."""

from __future__ import annotations

import math

__all__ = ["Image"]

_SUPPORTED_DEPTHS = (8, 16, 24, 32)


class Image:
    """A width x height raster whose rows are padded to 32-bit boundaries.

    Each pixel holds ``bits_per_pixel // 8`` bytes written in the image's
    byte order. Colours are integers, normally 0xRRGGBB; bits that do not
    fit in a pixel are dropped.
    """

    def __init__(self, width, height, bits_per_pixel=32, big_endian=False):
        if width <= 0 or height <= 0:
            raise ValueError(f"image size must be positive, got {width}x{height}")
        if bits_per_pixel not in _SUPPORTED_DEPTHS:
            raise ValueError(f"unsupported bits per pixel: {bits_per_pixel}")
        self.width = width
        self.height = height
        self.bits_per_pixel = bits_per_pixel
        self.big_endian = big_endian
        self.bytes_per_pixel = bits_per_pixel // 8
        self.size_line = (width * bits_per_pixel + 31) // 32 * 4
        self.data = bytearray(self.size_line * height)
        self._mask = (1 << bits_per_pixel) - 1
        self._order = "big" if big_endian else "little"

    def __repr__(self):
        order = "big" if self.big_endian else "little"
        return (
            f"Image({self.width}x{self.height}, {self.bits_per_pixel} bpp, "
            f"{order} endian)"
        )

    def _offset(self, x, y):
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height}")
        return y * self.size_line + x * self.bytes_per_pixel

    def _encode(self, color):
        return (color & self._mask).to_bytes(self.bytes_per_pixel, self._order)

    def set_pixel(self, x, y, color):
        """Store ``color`` at integer coordinates; raise IndexError outside."""
        start = self._offset(x, y)
        self.data[start:start + self.bytes_per_pixel] = self._encode(color)

    def get_pixel(self, x, y):
        """Return the value stored at integer coordinates."""
        start = self._offset(x, y)
        return int.from_bytes(
            self.data[start:start + self.bytes_per_pixel], self._order
        )

    def fill(self, color):
        """Set every pixel to ``color``."""
        used = self.width * self.bytes_per_pixel
        row = self._encode(color) * self.width + bytes(self.size_line - used)
        self.data[:] = row * self.height

    def contains(self, x, y):
        """Tell whether the point lies inside the image."""
        return 0 <= x < self.width and 0 <= y < self.height

    def plot(self, x, y, color):
        """Draw at real coordinates, rounded to the nearest pixel.

        Points outside the image are silently ignored.
        """
        if not self.contains(x, y):
            return
        px = math.floor(x + 0.5)
        py = math.floor(y + 0.5)
        if self.contains(px, py):
            self.set_pixel(px, py, color)

    def to_rgb_bytes(self):
        """Return the pixels as packed 8-bit R, G, B triples, row by row."""
        if self.bits_per_pixel == 32:
            red, green, blue = (1, 2, 3) if self.big_endian else (2, 1, 0)
            out = bytearray(self.width * self.height * 3)
            out[0::3] = self.data[red::4]
            out[1::3] = self.data[green::4]
            out[2::3] = self.data[blue::4]
            return bytes(out)
        out = bytearray()
        for y in range(self.height):
            for x in range(self.width):
                value = self.get_pixel(x, y)
                out += bytes(((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF))
        return bytes(out)