"""The xterm 256-colour palette as RGBA colours.

Layout of the table:

* 0-15: the sixteen 4-bit ANSI colours, normal then bright;
* 16-231: a 6x6x6 colour cube, blue varying fastest;
* 232-255: a 24-step grayscale ramp.
"""

from __future__ import annotations

import operator
from itertools import product

from framekit import color as _colors
from framekit.color import Color

__all__ = ["COLOR_TABLE_256", "CUBE_LEVELS", "GRAYSCALE_LEVELS", "color_256"]

CUBE_LEVELS = (0, 95, 135, 175, 215, 255)
GRAYSCALE_LEVELS = tuple(range(8, 239, 10))

_BASE_COLORS = (
    _colors.BLACK,
    _colors.RED,
    _colors.GREEN,
    _colors.YELLOW,
    _colors.BLUE,
    _colors.MAGENTA,
    _colors.CYAN,
    _colors.WHITE,
)


def _build_table() -> tuple[Color, ...]:
    ansi = [*_BASE_COLORS, *(base.bright() for base in _BASE_COLORS)]
    cube = [Color(r, g, b, 255) for r, g, b in product(CUBE_LEVELS, repeat=3)]
    gray = [Color(level, level, level, 255) for level in GRAYSCALE_LEVELS]
    return (*ansi, *cube, *gray)


COLOR_TABLE_256: tuple[Color, ...] = _build_table()


def color_256(index: int) -> Color:
    """Return the palette colour for an index in 0..255."""
    position = operator.index(index)
    if not 0 <= position < len(COLOR_TABLE_256):
        raise ValueError(f"palette index must be in 0..255, got {position}")
    return COLOR_TABLE_256[position]