import pytest

from framekit.buffered_lfb import BufferedFrameBuffer
from framekit.color import Color
from framekit.lfb import LinearFrameBuffer


def make_target(width=4, height=3):
    buf = bytearray(width * 4 * height)
    return buf, LinearFrameBuffer(buf, width * 4, width, height, 32)


def test_back_buffer_matches_geometry():
    _, target = make_target()
    buffered = BufferedFrameBuffer(target)
    back = buffered.lfb
    assert (back.width, back.height, back.pitch, back.bpp) == (
        target.width,
        target.height,
        target.pitch,
        target.bpp,
    )
    assert buffered.direct_lfb is target


def test_drawing_not_visible_until_flush():
    buf, target = make_target()
    buffered = BufferedFrameBuffer(target)
    color = Color(1, 2, 3, 255)
    buffered.lfb.draw_pixel(1, 1, color)
    assert bytes(buf) == bytes(len(buf))
    buffered.flush()
    assert target.read_pixel(1, 1) == color


def test_flush_lines_copies_only_selected_rows():
    _, target = make_target()
    buffered = BufferedFrameBuffer(target)
    color = Color(4, 5, 6, 255)
    buffered.lfb.fill_rect(0, 0, 4, 3, color)
    buffered.flush_lines(1, 1)
    assert target.read_pixel(0, 1) == color
    assert target.read_pixel(0, 0) == Color(0, 0, 0, 0)
    assert target.read_pixel(0, 2) == Color(0, 0, 0, 0)


def test_flush_overwrites_direct_drawing():
    _, target = make_target()
    buffered = BufferedFrameBuffer(target)
    buffered.direct_lfb.draw_pixel(2, 2, Color(9, 9, 9, 255))
    buffered.flush()
    assert target.read_pixel(2, 2) == buffered.lfb.read_pixel(2, 2)


def test_flush_lines_out_of_range_raises():
    _, target = make_target()
    buffered = BufferedFrameBuffer(target)
    with pytest.raises(ValueError):
        buffered.flush_lines(2, 2)
    with pytest.raises(ValueError):
        buffered.flush_lines(-1, 1)