"""Error codes reported by system calls and conversion between codes and results.

A system call answers with a single signed integer: zero or more is a
successful result, a negative value is one of the :class:`Errno` codes.
"""

from __future__ import annotations

import operator
from enum import IntEnum

__all__ = ["Errno", "SyscallError", "result_from_code", "code_from_result"]


class Errno(IntEnum):
    """Error codes for system calls; unknown negative codes map to ``EUNKN``."""

    EUNKN = -1  # Unknown error
    ENOENT = -2  # No such file or directory
    ENOHANDLES = -3  # No more free handles
    EBADF = -4  # Bad file descriptor for an operation
    EACCES = -5  # Permission denied
    EEXIST = -6  # File/directory exists
    ENOTDIR = -7  # Not a directory
    EINVAL = -8  # Invalid argument
    EINVALH = -9  # Invalid handle
    ENOTEMPTY = -10  # Directory not empty
    EBADSTR = -11  # Bad string

    @classmethod
    def _missing_(cls, value: object) -> Errno | None:
        if isinstance(value, int) and not isinstance(value, bool):
            return cls.EUNKN
        return None


class SyscallError(Exception):
    """Raised when a system call reports an error code."""

    def __init__(self, errno: Errno) -> None:
        self.errno = Errno(errno)
        super().__init__(f"system call failed: {self.errno.name} ({int(self.errno)})")


def result_from_code(code: int) -> int:
    """Return a non-negative return code, or raise the error a negative one names."""
    value = operator.index(code)
    if value < 0:
        raise SyscallError(Errno(value))
    return value


def code_from_result(result: int | Errno | SyscallError) -> int:
    """Turn a result value or an error back into the return code that carries it."""
    if isinstance(result, SyscallError):
        return int(result.errno)
    if isinstance(result, Errno):
        return int(result)
    value = operator.index(result)
    if value < 0:
        raise ValueError(f"a successful result cannot be negative, got {value}")
    return value