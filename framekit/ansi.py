"""ANSI escape sequences for terminal colours and text attributes."""

from __future__ import annotations

import operator
from enum import IntEnum

from framekit.color import Color

__all__ = [
    "ESCAPE_SEQUENCE_START",
    "RESET",
    "FOREGROUND_BLACK",
    "FOREGROUND_RED",
    "FOREGROUND_GREEN",
    "FOREGROUND_YELLOW",
    "FOREGROUND_BLUE",
    "FOREGROUND_MAGENTA",
    "FOREGROUND_CYAN",
    "FOREGROUND_WHITE",
    "FOREGROUND_DEFAULT",
    "FOREGROUND_BRIGHT_BLACK",
    "FOREGROUND_BRIGHT_RED",
    "FOREGROUND_BRIGHT_GREEN",
    "FOREGROUND_BRIGHT_YELLOW",
    "FOREGROUND_BRIGHT_BLUE",
    "FOREGROUND_BRIGHT_MAGENTA",
    "FOREGROUND_BRIGHT_CYAN",
    "FOREGROUND_BRIGHT_WHITE",
    "BACKGROUND_BLACK",
    "BACKGROUND_RED",
    "BACKGROUND_GREEN",
    "BACKGROUND_YELLOW",
    "BACKGROUND_BLUE",
    "BACKGROUND_MAGENTA",
    "BACKGROUND_CYAN",
    "BACKGROUND_WHITE",
    "BACKGROUND_DEFAULT",
    "BACKGROUND_BRIGHT_BLACK",
    "BACKGROUND_BRIGHT_RED",
    "BACKGROUND_BRIGHT_GREEN",
    "BACKGROUND_BRIGHT_YELLOW",
    "BACKGROUND_BRIGHT_BLUE",
    "BACKGROUND_BRIGHT_MAGENTA",
    "BACKGROUND_BRIGHT_CYAN",
    "BACKGROUND_BRIGHT_WHITE",
    "Color8",
    "GraphicRendition",
    "Key",
    "fg_8bit_color",
    "bg_8bit_color",
    "fg_24bit_color",
    "bg_24bit_color",
]

ESCAPE_SEQUENCE_START = "\x1b"
RESET = "\x1b[0m"

FOREGROUND_BLACK = "\x1b[30m"
FOREGROUND_RED = "\x1b[31m"
FOREGROUND_GREEN = "\x1b[32m"
FOREGROUND_YELLOW = "\x1b[33m"
FOREGROUND_BLUE = "\x1b[34m"
FOREGROUND_MAGENTA = "\x1b[35m"
FOREGROUND_CYAN = "\x1b[36m"
FOREGROUND_WHITE = "\x1b[37m"
FOREGROUND_DEFAULT = "\x1b[39m"
FOREGROUND_BRIGHT_BLACK = "\x1b[90m"
FOREGROUND_BRIGHT_RED = "\x1b[91m"
FOREGROUND_BRIGHT_GREEN = "\x1b[92m"
FOREGROUND_BRIGHT_YELLOW = "\x1b[93m"
FOREGROUND_BRIGHT_BLUE = "\x1b[94m"
FOREGROUND_BRIGHT_MAGENTA = "\x1b[95m"
FOREGROUND_BRIGHT_CYAN = "\x1b[96m"
FOREGROUND_BRIGHT_WHITE = "\x1b[97m"

BACKGROUND_BLACK = "\x1b[40m"
BACKGROUND_RED = "\x1b[41m"
BACKGROUND_GREEN = "\x1b[42m"
BACKGROUND_YELLOW = "\x1b[43m"
BACKGROUND_BLUE = "\x1b[44m"
BACKGROUND_MAGENTA = "\x1b[45m"
BACKGROUND_CYAN = "\x1b[46m"
BACKGROUND_WHITE = "\x1b[47m"
BACKGROUND_DEFAULT = "\x1b[49m"
BACKGROUND_BRIGHT_BLACK = "\x1b[100m"
BACKGROUND_BRIGHT_RED = "\x1b[101m"
BACKGROUND_BRIGHT_GREEN = "\x1b[102m"
BACKGROUND_BRIGHT_YELLOW = "\x1b[103m"
BACKGROUND_BRIGHT_BLUE = "\x1b[104m"
BACKGROUND_BRIGHT_MAGENTA = "\x1b[105m"
BACKGROUND_BRIGHT_CYAN = "\x1b[106m"
BACKGROUND_BRIGHT_WHITE = "\x1b[107m"


class Color8(IntEnum):
    """The eight basic ANSI colour indices."""

    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    WHITE = 7


class GraphicRendition(IntEnum):
    """Select Graphic Rendition (SGR) parameters."""

    NORMAL = 0
    BRIGHT = 1
    DIM = 2
    ITALIC = 3
    UNDERLINE = 4
    SLOW_BLINK = 5
    FAST_BLINK = 6
    INVERT = 7
    RESET_BRIGHT_DIM = 22
    RESET_ITALIC = 23
    RESET_UNDERLINE = 24
    RESET_BLINK = 25
    RESET_INVERT = 27


class Key(IntEnum):
    """Codes for cursor keys delivered as single values."""

    KEY_UP = 0x0100
    KEY_DOWN = 0x0101
    KEY_RIGHT = 0x0102
    KEY_LEFT = 0x0103


def _palette_index(color_index: int) -> int:
    index = operator.index(color_index)
    if not 0 <= index <= 0xFF:
        raise ValueError(f"colour index must be in 0..255, got {index}")
    return index


def fg_8bit_color(color_index: int) -> str:
    """Escape sequence selecting a foreground colour from the 256-colour palette."""
    return f"\x1b[38;5;{_palette_index(color_index)}m"


def bg_8bit_color(color_index: int) -> str:
    """Escape sequence selecting a background colour from the 256-colour palette."""
    return f"\x1b[48;5;{_palette_index(color_index)}m"


def fg_24bit_color(color: Color) -> str:
    """Escape sequence selecting a true-colour foreground; alpha is ignored."""
    return f"\x1b[38;2;{color.red};{color.green};{color.blue}m"


def bg_24bit_color(color: Color) -> str:
    """Escape sequence selecting a true-colour background; alpha is ignored."""
    return f"\x1b[48;2;{color.red};{color.green};{color.blue}m"