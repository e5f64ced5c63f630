"""Socket shutdown state attribute (``INET_DIAG_SHUTDOWN``)."""

from __future__ import annotations

SHUTDOWN_SIZE = 1
SHUTDOWN_ATTRIBUTE = 8


class ShutdownTooSmall(ValueError):
    """Raised when a buffer holds no shutdown byte."""

    def __init__(self, size: int) -> None:
        super().__init__(
            f"data too small for Shutdown: {size} bytes, need {SHUTDOWN_SIZE}"
        )
        self.size = size


def decode_shutdown(data: bytes | bytearray | memoryview) -> int:
    """Return the shutdown state byte at the start of ``data``."""
    if len(data) < SHUTDOWN_SIZE:
        raise ShutdownTooSmall(len(data))
    return bytes(data[:1])[0]