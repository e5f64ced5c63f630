"""Socket option bits attribute (``INET_DIAG_SOCKOPT``, ``struct inet_diag_sockopt``)."""

from __future__ import annotations

import struct

SOCKOPT_SIZE = 2
SOCKOPT_ATTRIBUTE = 22

_SOCKOPT = struct.Struct("<H")


class SockOptTooSmall(ValueError):
    """Raised when a buffer is shorter than an inet_diag_sockopt."""

    def __init__(self, size: int) -> None:
        super().__init__(
            f"data too small for SockOpt: {size} bytes, need {SOCKOPT_SIZE}"
        )
        self.size = size


def decode_sockopt(data: bytes | bytearray | memoryview) -> int:
    """Return the two option bytes at the start of ``data`` as a little-endian int.

    The low byte holds recverr, is_icsk, freebind, hdrincl, mc_loop,
    transparent, mc_all and nodefrag (bit 0 upwards); the high byte holds
    bind_address_no_port, recverr_rfc4884 and defer_connect.
    """
    if len(data) < SOCKOPT_SIZE:
        raise SockOptTooSmall(len(data))
    (value,) = _SOCKOPT.unpack_from(data, 0)
    return value