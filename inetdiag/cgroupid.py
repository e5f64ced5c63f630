"""cgroup v2 identifier attribute (``INET_DIAG_CGROUP_ID``)."""

from __future__ import annotations

import struct

CGROUP_ID_SIZE = 8
CGROUP_ID_ATTRIBUTE = 21

_CGROUP_ID = struct.Struct("<Q")


class CGroupIDTooSmall(ValueError):
    """Raised when a buffer is shorter than a cgroup id."""

    def __init__(self, size: int) -> None:
        super().__init__(
            f"data too small for CGroupID: {size} bytes, need {CGROUP_ID_SIZE}"
        )
        self.size = size


def decode_cgroup_id(data: bytes | bytearray | memoryview) -> int:
    """Return the little-endian 64-bit cgroup id at the start of ``data``."""
    if len(data) < CGROUP_ID_SIZE:
        raise CGroupIDTooSmall(len(data))
    (cgroup_id,) = _CGROUP_ID.unpack_from(data, 0)
    return cgroup_id