"""A back buffer that is drawn to off-screen and copied to a target on flush."""

from __future__ import annotations

from framekit.lfb import LinearFrameBuffer

__all__ = ["BufferedFrameBuffer"]


class BufferedFrameBuffer:
    """Double buffering for a :class:`LinearFrameBuffer`."""

    def __init__(self, target: LinearFrameBuffer) -> None:
        self._back = bytearray(target.height * target.pitch)
        self._lfb = LinearFrameBuffer(
            self._back, target.pitch, target.width, target.height, target.bpp
        )
        self._target = target

    @property
    def lfb(self) -> LinearFrameBuffer:
        """The off-screen frame buffer to draw into."""
        return self._lfb

    @property
    def direct_lfb(self) -> LinearFrameBuffer:
        """The target frame buffer, for drawing that bypasses the back buffer."""
        return self._target

    def flush_lines(self, start: int, count: int) -> None:
        """Copy ``count`` rows beginning at row ``start`` to the target."""
        if start < 0 or count < 0 or start + count > self._lfb.height:
            raise ValueError(
                f"BufferedFrameBuffer: rows {start}..{start + count} "
                f"outside 0..{self._lfb.height}"
            )
        pitch = self._lfb.pitch
        begin = pitch * start
        end = begin + pitch * count
        self._target.buffer[begin:end] = self._back[begin:end]

    def flush(self) -> None:
        """Copy the whole back buffer to the target."""
        self.flush_lines(0, self._lfb.height)