"""In-memory 32-bit pixel images and colour helpers."""

from __future__ import annotations

from collections.abc import Sequence

TILE_SIZE = 40
"""Edge length, in pixels, of one map tile."""

TRANSPARENT = 0x00FFFFFF
"""Tile colour that is skipped when a tile is drawn onto another image."""

_MASK32 = 0xFFFFFFFF


def rgb_to_int(o: int, r: int, g: int, b: int) -> int:
    """Pack alpha/opacity, red, green and blue bytes into one 32-bit value."""
    return (o << 24 | r << 16 | g << 8 | b) & _MASK32


def good_color(color: int, depth: int, shifts: Sequence[int]) -> int:
    """Convert a 0xRRGGBB colour to a pixel value of a display of ``depth`` bits.

    Displays of 24 bits or more take the colour unchanged. For shallower
    TrueColor displays ``shifts`` holds, for red, green and blue in turn, the
    position of the channel's lowest bit and the channel's width in bits.
    """
    if depth >= 24:
        return color
    if len(shifts) != 6:
        raise ValueError("shifts must hold six values")
    red_pos, red_bits, green_pos, green_bits, blue_pos, blue_bits = shifts
    red = (color >> 8) & 0xFF00
    green = color & 0xFF00
    blue = (color << 8) & 0xFF00
    return (
        ((red >> (16 - red_bits)) << red_pos)
        + ((green >> (16 - green_bits)) << green_pos)
        + ((blue >> (16 - blue_bits)) << blue_pos)
    )


class Image:
    """A width x height image of 32-bit little-endian pixels, all zero at first."""

    bpp = 32
    endian = 0

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"invalid image size {width}x{height}")
        self.width = width
        self.height = height
        self.size_line = width * self.bpp // 8
        self._data = bytearray(self.size_line * height)

    def __repr__(self) -> str:
        return f"Image({self.width}, {self.height})"

    @property
    def data(self) -> bytes:
        """A copy of the raw pixel bytes, row after row."""
        return bytes(self._data)

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return x * self.bpp // 8 + y * self.size_line

    def get_pixel(self, x: int, y: int) -> int:
        """Return the unsigned 32-bit value of the pixel at (x, y)."""
        offset = self._offset(x, y)
        return int.from_bytes(self._data[offset:offset + 4], "little")

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Store the low 32 bits of ``color`` at (x, y)."""
        offset = self._offset(x, y)
        self._data[offset:offset + 4] = (color & _MASK32).to_bytes(4, "little")

    def draw_square(
        self,
        tile: Image,
        x: int,
        y: int,
        size: int = TILE_SIZE,
        transparent: int = TRANSPARENT,
    ) -> None:
        """Copy the top-left ``size`` x ``size`` square of ``tile`` to (x, y).

        Pixels equal to ``transparent`` are left out, and so are pixels that
        fall outside either image.
        """
        for j in range(min(size, tile.height)):
            target_y = y + j
            if not 0 <= target_y < self.height:
                continue
            for i in range(min(size, tile.width)):
                target_x = x + i
                if not 0 <= target_x < self.width:
                    continue
                color = tile.get_pixel(i, j)
                if color != transparent:
                    self.put_pixel(target_x, target_y, color)