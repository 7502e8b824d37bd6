"""Types shared by the naming service, and C-string helpers.

Directory entries travel between kernel and user space as a fixed-size
record (:class:`RawDirent`): an 8-byte little-endian type field followed by
a 256-byte, NUL-terminated name.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import IntEnum, IntFlag

from framekit.results import Errno, SyscallError

__all__ = [
    "OpenOptions",
    "SeekOrigin",
    "FileType",
    "DirEntry",
    "RawDirent",
    "NAME_LENGTH",
    "strlen",
    "decode_c_string",
]

NAME_LENGTH = 256

_DIRENT_FORMAT = struct.Struct(f"<Q{NAME_LENGTH}s")


class OpenOptions(IntFlag):
    """Option flags for opening objects."""

    READONLY = 1
    READWRITE = 2
    CREATE = 3
    EXCLUSIVE = 4
    DIRECTORY = 5


class SeekOrigin(IntEnum):
    """Origin for ``seek``; unknown values fall back to ``START``."""

    START = 1
    END = 2
    CURRENT = 3

    @classmethod
    def _missing_(cls, value: object) -> SeekOrigin | None:
        if isinstance(value, int) and not isinstance(value, bool):
            return cls.START
        return None

    @classmethod
    def from_primitive(cls, value: int) -> SeekOrigin:
        """Return the origin for a raw value, defaulting to ``START``."""
        return cls(value)


class FileType(IntEnum):
    """Kinds of naming-service objects."""

    DIRECTORY = 4
    REGULAR = 8
    LINK = 10


def _take_c_chars(data: bytes) -> str:
    """Map bytes up to the first NUL one-to-one onto characters."""
    return bytes(data).split(b"\x00", 1)[0].decode("latin-1")


@dataclass
class RawDirent:
    """The fixed-size directory record exchanged with the kernel."""

    d_type: int = 0
    d_name: bytes = bytes(NAME_LENGTH)

    SIZE = _DIRENT_FORMAT.size

    def __post_init__(self) -> None:
        if not 0 <= self.d_type < 1 << 64:
            raise ValueError(f"RawDirent: d_type out of range: {self.d_type}")
        name = bytes(self.d_name)
        if len(name) > NAME_LENGTH:
            raise ValueError(f"RawDirent: name longer than {NAME_LENGTH} bytes")
        self.d_name = name.ljust(NAME_LENGTH, b"\x00")

    def pack(self) -> bytes:
        """Encode the record into its wire form."""
        return _DIRENT_FORMAT.pack(self.d_type, self.d_name)

    @classmethod
    def unpack(cls, data: bytes) -> RawDirent:
        """Decode a record from the start of ``data``."""
        if len(data) < cls.SIZE:
            raise SyscallError(Errno.EINVAL)
        d_type, d_name = _DIRENT_FORMAT.unpack_from(data)
        return cls(d_type, d_name)


@dataclass(frozen=True)
class DirEntry:
    """A directory entry."""

    file_type: FileType
    name: str

    @classmethod
    def from_dirent(cls, dirent: RawDirent) -> DirEntry | None:
        """Build an entry from a raw record, or ``None`` if it holds no usable entry."""
        try:
            file_type = FileType(dirent.d_type)
        except ValueError:
            return None
        name = _take_c_chars(dirent.d_name)
        if not name:
            return None
        return cls(file_type, name)


def strlen(data: bytes) -> int:
    """Return the number of bytes before the first NUL byte."""
    position = bytes(data).find(b"\x00")
    if position < 0:
        raise ValueError("strlen: string is not NUL-terminated")
    return position


def decode_c_string(data: bytes | None) -> str:
    """Decode a NUL-terminated UTF-8 string; failures raise ``EBADSTR``."""
    if data is None:
        raise SyscallError(Errno.EBADSTR)
    try:
        length = strlen(data)
        return bytes(data[:length]).decode("utf-8")
    except (ValueError, UnicodeDecodeError) as exc:
        raise SyscallError(Errno.EBADSTR) from exc