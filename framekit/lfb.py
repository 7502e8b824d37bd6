"""A linear frame buffer: a block of bytes laid out as rows of packed pixels."""

from __future__ import annotations

import struct
from collections.abc import Callable

from framekit.color import Color

__all__ = [
    "DEFAULT_CHAR_WIDTH",
    "DEFAULT_CHAR_HEIGHT",
    "LinearFrameBuffer",
]

DEFAULT_CHAR_WIDTH = 8
DEFAULT_CHAR_HEIGHT = 16

_PixelWriter = Callable[[memoryview, int, int, int, Color], None]


def _write_15_bit(buffer: memoryview, pitch: int, x: int, y: int, color: Color) -> None:
    index = x + y * (pitch // 2)
    struct.pack_into("<H", buffer, index * 2, color.rgb_15())


def _write_16_bit(buffer: memoryview, pitch: int, x: int, y: int, color: Color) -> None:
    index = x + y * (pitch // 2)
    struct.pack_into("<H", buffer, index * 2, color.rgb_16())


def _write_24_bit(buffer: memoryview, pitch: int, x: int, y: int, color: Color) -> None:
    index = x * 3 + y * pitch
    buffer[index:index + 3] = color.rgb_24().to_bytes(3, "little")


def _write_32_bit(buffer: memoryview, pitch: int, x: int, y: int, color: Color) -> None:
    index = x + y * (pitch // 4)
    struct.pack_into("<I", buffer, index * 4, color.rgb_32())


def _write_unsupported(buffer: memoryview, pitch: int, x: int, y: int, color: Color) -> None:
    raise RuntimeError("Using empty LFB!")


_WRITERS: dict[int, _PixelWriter] = {
    15: _write_15_bit,
    16: _write_16_bit,
    24: _write_24_bit,
    32: _write_32_bit,
}


class LinearFrameBuffer:
    """Pixel access to a writable byte buffer of ``pitch * height`` bytes.

    ``pitch`` is the number of bytes per row; ``bpp`` is the colour depth
    (15, 16, 24 or 32). A buffer of another depth can be created, but drawing
    to it raises ``RuntimeError``.
    """

    def __init__(self, buffer, pitch: int, width: int, height: int, bpp: int) -> None:
        view = memoryview(buffer)
        if view.readonly:
            raise ValueError("LinearFrameBuffer: buffer must be writable")
        view = view.cast("B")
        if min(pitch, width, height, bpp) < 0:
            raise ValueError("LinearFrameBuffer: geometry must not be negative")
        if len(view) < pitch * height:
            raise ValueError(
                f"LinearFrameBuffer: buffer holds {len(view)} bytes, "
                f"{pitch * height} needed"
            )
        self._buffer = view
        self._pitch = pitch
        self._width = width
        self._height = height
        self._bpp = bpp
        self._writer = _WRITERS.get(bpp, _write_unsupported)

    @property
    def buffer(self) -> memoryview:
        return self._buffer

    @property
    def pitch(self) -> int:
        return self._pitch

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def bpp(self) -> int:
        return self._bpp

    def _contains(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def draw_pixel(self, x: int, y: int, color: Color) -> None:
        """Draw one pixel, blending translucent colours; off-screen pixels are ignored."""
        if not self._contains(x, y):
            return
        if color.alpha == 0:
            return
        if color.alpha < 255:
            color = self.read_pixel(x, y).blend(color)
        self._writer(self._buffer, self._pitch, x, y, color)

    def read_pixel(self, x: int, y: int) -> Color:
        """Decode the pixel at ``(x, y)``."""
        if not self._contains(x, y):
            raise IndexError("LinearFrameBuffer: Trying to read a pixel out of bounds!")
        stride_bits = 16 if self._bpp == 15 else self._bpp
        offset = x * (stride_bits // 8) + y * self._pitch
        raw = bytes(self._buffer[offset:offset + 4]).ljust(4, b"\x00")
        return Color.from_rgb(int.from_bytes(raw, "little"), self._bpp)

    def fill_rect(self, x: int, y: int, width: int, height: int, color: Color) -> None:
        """Fill a rectangle; parts outside the buffer are clipped."""
        for row in range(y, y + height):
            for col in range(x, x + width):
                self.draw_pixel(col, row, color)

    def clear(self) -> None:
        """Set every byte of the visible area to zero."""
        size = self._pitch * self._height
        self._buffer[:size] = bytes(size)

    def scroll_up(self, lines: int) -> None:
        """Move the contents up by ``lines`` rows and blank the rows freed below."""
        if not 0 <= lines <= self._height:
            raise ValueError(
                f"LinearFrameBuffer: cannot scroll {lines} lines of {self._height}"
            )
        shift = self._pitch * lines
        kept = self._pitch * (self._height - lines)
        self._buffer[:kept] = bytes(self._buffer[shift:shift + kept])
        self._buffer[kept:kept + shift] = bytes(shift)