"""TCP Prague state attribute (``INET_DIAG_PRAGUEINFO``, ``struct tcp_prague_info``)."""

from __future__ import annotations

import struct
from dataclasses import dataclass

PRAGUE_INFO_SIZE = 36
PRAGUE_INFO_ATTRIBUTE = 23

_PRAGUE_INFO = struct.Struct("<3Q3I")


class PragueInfoTooSmall(ValueError):
    """Raised when a buffer is shorter than a tcp_prague_info."""

    def __init__(self, size: int) -> None:
        super().__init__(
            f"data too small for PragueInfo: {size} bytes, need {PRAGUE_INFO_SIZE}"
        )
        self.size = size


@dataclass(frozen=True, slots=True)
class PragueInfo:
    """Prague alpha, fractional cwnd, pacing rate, burst, round and RTT target.

    The trailing ``prague_enabled`` flag of the kernel structure is not read.
    """

    alpha: int
    frac_cwnd: int
    rate_bytes: int
    max_burst: int
    round: int
    rtt_target: int

    @classmethod
    def from_bytes(cls, data: bytes | bytearray | memoryview) -> PragueInfo:
        """Decode the first 36 bytes of ``data``."""
        if len(data) < PRAGUE_INFO_SIZE:
            raise PragueInfoTooSmall(len(data))
        alpha, frac_cwnd, rate_bytes, max_burst, rounds, rtt_target = (
            _PRAGUE_INFO.unpack_from(data, 0)
        )
        return cls(
            alpha=alpha,
            frac_cwnd=frac_cwnd,
            rate_bytes=rate_bytes,
            max_burst=max_burst,
            round=rounds,
            rtt_target=rtt_target,
        )