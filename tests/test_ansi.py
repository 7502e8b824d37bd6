import re

import pytest

from framekit.ansi import (
    ESCAPE_SEQUENCE_START,
    Color8,
    bg_24bit_color,
    bg_8bit_color,
    fg_24bit_color,
    fg_8bit_color,
)
from framekit.color import Color, RED

_EIGHT_BIT = re.compile(r"\x1b\[(38|48);5;(\d+)m")
_TRUE_COLOR = re.compile(r"\x1b\[(38|48);2;(\d+);(\d+);(\d+)m")


def test_fg_8bit_sequence():
    assert fg_8bit_color(0) == "\x1b[38;5;0m"


def test_bg_8bit_sequence():
    assert bg_8bit_color(255) == "\x1b[48;5;255m"


def test_8bit_accepts_color8_member():
    assert fg_8bit_color(Color8.RED) == "\x1b[38;5;1m"
    assert bg_8bit_color(Color8.WHITE) == "\x1b[48;5;7m"


@pytest.mark.parametrize("index", range(0, 256, 17))
def test_8bit_round_trip(index):
    fg = _EIGHT_BIT.fullmatch(fg_8bit_color(index))
    bg = _EIGHT_BIT.fullmatch(bg_8bit_color(index))
    assert fg is not None and bg is not None
    assert (fg.group(1), int(fg.group(2))) == ("38", index)
    assert (bg.group(1), int(bg.group(2))) == ("48", index)
    assert fg_8bit_color(index).startswith(ESCAPE_SEQUENCE_START)


@pytest.mark.parametrize("index", [-1, 256, 1000])
def test_8bit_out_of_range(index):
    with pytest.raises(ValueError):
        fg_8bit_color(index)
    with pytest.raises(ValueError):
        bg_8bit_color(index)


def test_8bit_rejects_non_integer():
    with pytest.raises(TypeError):
        fg_8bit_color(1.5)


def test_fg_24bit_sequence():
    assert fg_24bit_color(Color(1, 2, 3)) == "\x1b[38;2;1;2;3m"


def test_bg_24bit_sequence():
    assert bg_24bit_color(RED) == "\x1b[48;2;170;0;0m"


@pytest.mark.parametrize(
    "color", [Color(0, 0, 0), Color(255, 128, 7, 10), Color(12, 250, 99, 0)]
)
def test_24bit_round_trip(color):
    for func, prefix in ((fg_24bit_color, "38"), (bg_24bit_color, "48")):
        match = _TRUE_COLOR.fullmatch(func(color))
        assert match is not None
        assert match.group(1) == prefix
        assert tuple(int(g) for g in match.groups()[1:]) == (
            color.red,
            color.green,
            color.blue,
        )


def test_24bit_ignores_alpha():
    color = Color(40, 50, 60, 255)
    assert fg_24bit_color(color.with_alpha(0)) == fg_24bit_color(color)
    assert bg_24bit_color(color.with_alpha(77)) == bg_24bit_color(color)