"""Traffic-control class id attribute (``INET_DIAG_CLASS_ID``)."""

from __future__ import annotations

import struct

CLASS_ID_SIZE = 4
CLASS_ID_ATTRIBUTE = 17

_CLASS_ID = struct.Struct("<I")


class ClassIDTooSmall(ValueError):
    """Raised when a buffer is shorter than a class id."""

    def __init__(self, size: int) -> None:
        super().__init__(
            f"data too small for ClassID: {size} bytes, need {CLASS_ID_SIZE}"
        )
        self.size = size


def decode_class_id(data: bytes | bytearray | memoryview) -> int:
    """Return the little-endian 32-bit class id at the start of ``data``.

    For cgroup2 sockets the kernel reports zero here.
    """
    if len(data) < CLASS_ID_SIZE:
        raise ClassIDTooSmall(len(data))
    (class_id,) = _CLASS_ID.unpack_from(data, 0)
    return class_id