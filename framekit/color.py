"""RGBA colours and their packed 15-, 16-, 24- and 32-bit pixel forms.

Packed layouts:

* 32-bit: ``AAAAAAAA RRRRRRRR GGGGGGGG BBBBBBBB``
* 24-bit: ``RRRRRRRR GGGGGGGG BBBBBBBB``
* 16-bit: ``RRRRR GGGGGG BBBBB``
* 15-bit: ``RRRRR GGGGG BBBBB``
"""

from __future__ import annotations

import math
from dataclasses import dataclass

__all__ = [
    "Color",
    "BRIGHTNESS_SHIFT",
    "INVISIBLE",
    "BLACK",
    "RED",
    "GREEN",
    "YELLOW",
    "BROWN",
    "BLUE",
    "MAGENTA",
    "CYAN",
    "WHITE",
    "ACCENT_BLUE",
    "ACCENT_GREEN",
]

BRIGHTNESS_SHIFT = 85

_BYTE_MAX = 0xFF


def _saturate_byte(value: float) -> int:
    """Truncate a float towards zero and clamp it into the byte range."""
    if math.isnan(value):
        return 0
    if value <= 0:
        return 0
    if value >= _BYTE_MAX:
        return _BYTE_MAX
    return int(value)


@dataclass(frozen=True, slots=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    red: int
    green: int
    blue: int
    alpha: int = _BYTE_MAX

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue", "alpha"):
            value = getattr(self, name)
            if not isinstance(value, int) or not 0 <= value <= _BYTE_MAX:
                raise ValueError(f"Color: {name} must be an integer in 0..255, got {value!r}")

    # -- decoding -----------------------------------------------------------

    @classmethod
    def from_rgb(cls, rgb: int, bpp: int) -> Color:
        """Decode a packed pixel value of the given bit depth."""
        if bpp == 32:
            return cls.from_rgb_32(rgb)
        if bpp == 24:
            return cls.from_rgb_24(rgb)
        if bpp == 16:
            return cls.from_rgb_16(rgb & 0xFFFF)
        if bpp == 15:
            return cls.from_rgb_15(rgb & 0xFFFF)
        raise ValueError(f"Color: Invalid bpp {bpp}!")

    @classmethod
    def from_rgb_32(cls, rgba: int) -> Color:
        """Decode an ARGB value; the alpha byte is taken from the top."""
        return cls(
            red=(rgba & 0x00FF0000) >> 16,
            green=(rgba & 0x0000FF00) >> 8,
            blue=rgba & 0x000000FF,
            alpha=(rgba & 0xFF000000) >> 24,
        )

    @classmethod
    def from_rgb_24(cls, rgb: int) -> Color:
        """Decode an RGB value; the result has alpha 0."""
        return cls(
            red=(rgb & 0x00FF0000) >> 16,
            green=(rgb & 0x0000FF00) >> 8,
            blue=rgb & 0x000000FF,
            alpha=0,
        )

    @classmethod
    def from_rgb_16(cls, rgb: int) -> Color:
        """Decode a 5-6-5 value; the result has alpha 0."""
        return cls(
            red=((rgb & 0xF800) >> 11) * (256 // 32),
            green=((rgb & 0x07E0) >> 5) * (256 // 64),
            blue=(rgb & 0x001F) * (256 // 32),
            alpha=0,
        )

    @classmethod
    def from_rgb_15(cls, rgb: int) -> Color:
        """Decode a 5-5-5 value; the result has alpha 0."""
        return cls(
            red=((rgb & 0x7C00) >> 10) * (256 // 32),
            green=((rgb & 0x03E0) >> 5) * (256 // 32),
            blue=(rgb & 0x001F) * (256 // 32),
            alpha=0,
        )

    # -- encoding -----------------------------------------------------------

    def rgb_32(self) -> int:
        return (self.alpha << 24) | (self.red << 16) | (self.green << 8) | self.blue

    def rgb_24(self) -> int:
        return (self.red << 16) | (self.green << 8) | self.blue

    def rgb_16(self) -> int:
        return (self.blue >> 3) | ((self.green >> 2) << 5) | ((self.red >> 3) << 11)

    def rgb_15(self) -> int:
        return (self.blue >> 3) | ((self.green >> 3) << 5) | ((self.red >> 3) << 10)

    # -- adjustments --------------------------------------------------------

    def bright(self) -> Color:
        """Lighten every channel by a fixed step, saturating at 255."""
        return Color(
            red=min(self.red + BRIGHTNESS_SHIFT, _BYTE_MAX),
            green=min(self.green + BRIGHTNESS_SHIFT, _BYTE_MAX),
            blue=min(self.blue + BRIGHTNESS_SHIFT, _BYTE_MAX),
            alpha=self.alpha,
        )

    def dim(self) -> Color:
        """Darken every channel by a fixed step, saturating at 0."""
        return Color(
            red=max(self.red - BRIGHTNESS_SHIFT, 0),
            green=max(self.green - BRIGHTNESS_SHIFT, 0),
            blue=max(self.blue - BRIGHTNESS_SHIFT, 0),
            alpha=self.alpha,
        )

    def with_alpha(self, alpha: int) -> Color:
        return Color(self.red, self.green, self.blue, alpha)

    def blend(self, color: Color) -> Color:
        """Composite ``color`` over this colour (the "over" operator)."""
        if color.alpha == 0:
            return self
        if color.alpha == _BYTE_MAX:
            return color
        if self.alpha == 0:
            return BLACK.blend(color)

        alpha_top = color.alpha / 255.0
        alpha_bottom = self.alpha / 255.0
        alpha_out = alpha_top + (1.0 - alpha_top) * alpha_bottom

        def channel(top: int, bottom: int) -> int:
            mixed = alpha_top * top + (1.0 - alpha_top) * alpha_bottom * bottom
            return _saturate_byte((1.0 / alpha_out) * mixed)

        return Color(
            red=channel(color.red, self.red),
            green=channel(color.green, self.green),
            blue=channel(color.blue, self.blue),
            alpha=_saturate_byte(alpha_out * 255.0),
        )


INVISIBLE = Color(0, 0, 0, 0)

# ANSI colours
BLACK = Color(0, 0, 0, 255)
RED = Color(170, 0, 0, 255)
GREEN = Color(0, 170, 0, 255)
YELLOW = Color(170, 170, 0, 255)
BROWN = Color(170, 85, 0, 255)
BLUE = Color(0, 0, 170, 255)
MAGENTA = Color(170, 0, 170, 255)
CYAN = Color(0, 170, 170, 255)
WHITE = Color(170, 170, 170, 255)

# Arbitrary colours
ACCENT_BLUE = Color(0, 106, 179, 255)
ACCENT_GREEN = Color(140, 177, 16, 255)