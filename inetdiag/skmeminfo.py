"""Socket memory counters attribute (``INET_DIAG_SKMEMINFO``, ``struct sk_meminfo``)."""

from __future__ import annotations

import struct
from dataclasses import dataclass

SK_MEM_INFO_SIZE = 36
SK_MEM_INFO_ATTRIBUTE = 7

_SK_MEM_INFO = struct.Struct("<9I")


class SkMemInfoTooSmall(ValueError):
    """Raised when a buffer is shorter than an sk_meminfo."""

    def __init__(self, size: int) -> None:
        super().__init__(
            f"data too small for SkMemInfo: {size} bytes, need {SK_MEM_INFO_SIZE}"
        )
        self.size = size


@dataclass(frozen=True, slots=True)
class SkMemInfo:
    """Socket buffer usage as reported by ``ss -m`` (``skmem:(...)``)."""

    rmem_alloc: int
    rcv_buf: int
    wmem_alloc: int
    snd_buf: int
    fwd_alloc: int
    wmem_queued: int
    optmem: int
    backlog: int
    drops: int

    @classmethod
    def from_bytes(cls, data: bytes | bytearray | memoryview) -> SkMemInfo:
        """Decode the first 36 bytes of ``data``."""
        if len(data) < SK_MEM_INFO_SIZE:
            raise SkMemInfoTooSmall(len(data))
        (
            rmem_alloc,
            rcv_buf,
            wmem_alloc,
            snd_buf,
            fwd_alloc,
            wmem_queued,
            optmem,
            backlog,
            drops,
        ) = _SK_MEM_INFO.unpack_from(data, 0)
        return cls(
            rmem_alloc=rmem_alloc,
            rcv_buf=rcv_buf,
            wmem_alloc=wmem_alloc,
            snd_buf=snd_buf,
            fwd_alloc=fwd_alloc,
            wmem_queued=wmem_queued,
            optmem=optmem,
            backlog=backlog,
            drops=drops,
        )