"""Congestion control name attribute (``INET_DIAG_CONG``)."""

from __future__ import annotations

from dataclasses import dataclass

CONG_INFO_MIN_SIZE = 4  # "bbr\0"
CONG_INFO_ATTRIBUTE = 4


class CongInfoTooSmall(ValueError):
    """Raised when a buffer is shorter than the smallest congestion name."""

    def __init__(self, size: int) -> None:
        super().__init__(
            f"data too small for CongInfo: {size} bytes, need {CONG_INFO_MIN_SIZE}"
        )
        self.size = size


@dataclass(frozen=True, slots=True)
class CongInfo:
    """The NUL-terminated congestion algorithm name, kept as raw bytes."""

    cong: bytes

    @classmethod
    def from_bytes(cls, data: bytes | bytearray | memoryview) -> CongInfo:
        """Take all of ``data`` as the congestion name, terminator included."""
        if len(data) < CONG_INFO_MIN_SIZE:
            raise CongInfoTooSmall(len(data))
        return cls(cong=bytes(data))

    def name(self) -> str:
        """Return the algorithm name up to the first NUL byte."""
        return self.cong.split(b"\x00", 1)[0].decode("ascii", errors="replace")