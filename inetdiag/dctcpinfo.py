"""DCTCP state attribute (``INET_DIAG_DCTCPINFO``, ``struct tcp_dctcp_info``)."""

from __future__ import annotations

import struct
from dataclasses import dataclass

DCTCP_INFO_SIZE = 16
DCTCP_INFO_ATTRIBUTE = 9

_DCTCP_INFO = struct.Struct("<HHIII")


class DCTCPInfoTooSmall(ValueError):
    """Raised when a buffer is shorter than a tcp_dctcp_info."""

    def __init__(self, size: int) -> None:
        super().__init__(
            f"data too small for DCTCPInfo: {size} bytes, need {DCTCP_INFO_SIZE}"
        )
        self.size = size


@dataclass(frozen=True, slots=True)
class DCTCPInfo:
    """DCTCP enable flag, CE state, alpha and ECN-marked/total byte counters."""

    enabled: int
    ce_state: int
    alpha: int
    ab_ecn: int
    ab_tot: int

    @classmethod
    def from_bytes(cls, data: bytes | bytearray | memoryview) -> DCTCPInfo:
        """Decode the first 16 bytes of ``data``."""
        if len(data) < DCTCP_INFO_SIZE:
            raise DCTCPInfoTooSmall(len(data))
        enabled, ce_state, alpha, ab_ecn, ab_tot = _DCTCP_INFO.unpack_from(data, 0)
        return cls(
            enabled=enabled,
            ce_state=ce_state,
            alpha=alpha,
            ab_ecn=ab_ecn,
            ab_tot=ab_tot,
        )