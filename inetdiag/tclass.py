"""IPv6 traffic class attribute (``INET_DIAG_TCLASS``); IPv4 uses TOS instead."""

from __future__ import annotations

TRAFFIC_CLASS_SIZE = 1
TRAFFIC_CLASS_ATTRIBUTE = 6


class TrafficClassTooSmall(ValueError):
    """Raised when a buffer holds no traffic class byte."""

    def __init__(self, size: int) -> None:
        super().__init__(
            f"data too small for TrafficClass: {size} bytes, need {TRAFFIC_CLASS_SIZE}"
        )
        self.size = size


def decode_traffic_class(data: bytes | bytearray | memoryview) -> int:
    """Return the traffic class byte at the start of ``data``."""
    if len(data) < TRAFFIC_CLASS_SIZE:
        raise TrafficClassTooSmall(len(data))
    return bytes(data[:1])[0]