"""Socket memory attribute (``INET_DIAG_MEMINFO``, ``struct inet_diag_meminfo``)."""

from __future__ import annotations

import struct
from dataclasses import dataclass

MEM_INFO_SIZE = 16
MEM_INFO_ATTRIBUTE = 1

_MEM_INFO = struct.Struct("<4I")


class MemInfoTooSmall(ValueError):
    """Raised when a buffer is shorter than an inet_diag_meminfo."""

    def __init__(self, size: int) -> None:
        super().__init__(
            f"data too small for MemInfo: {size} bytes, need {MEM_INFO_SIZE}"
        )
        self.size = size


@dataclass(frozen=True, slots=True)
class MemInfo:
    """Receive, write, forward-alloc and total memory of a socket."""

    rmem: int
    wmem: int
    fmem: int
    tmem: int

    @classmethod
    def from_bytes(cls, data: bytes | bytearray | memoryview) -> MemInfo:
        """Decode the first 16 bytes of ``data``."""
        if len(data) < MEM_INFO_SIZE:
            raise MemInfoTooSmall(len(data))
        rmem, wmem, fmem, tmem = _MEM_INFO.unpack_from(data, 0)
        return cls(rmem=rmem, wmem=wmem, fmem=fmem, tmem=tmem)