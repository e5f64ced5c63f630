"""sock_diag dump request body (``struct inet_diag_req_v2``)."""

from __future__ import annotations

import struct
from dataclasses import dataclass

from inetdiag.sockid import SOCKID_SIZE, InetDiagSockID

REQV2_SIZE = 56
REQV2_READ = 55

_HEAD = struct.Struct("<3B")
_STATES = struct.Struct(">I")
_SOCKID_OFFSET = 4


class InetDiagReqV2TooSmall(ValueError):
    """Raised when a buffer is shorter than an inet_diag_req_v2."""

    def __init__(self, size: int) -> None:
        super().__init__(
            f"data too small for InetDiagReqV2: {size} bytes, need {REQV2_SIZE}"
        )
        self.size = size


@dataclass(frozen=True, slots=True)
class InetDiagReqV2:
    """Family, protocol, extension mask, state mask and socket filter of a request.

    The pad byte is not read and is always reported as zero.
    """

    family: int
    protocol: int
    ext: int
    states: int
    socket_id: InetDiagSockID
    pad: int = 0

    @classmethod
    def from_bytes(cls, data: bytes | bytearray | memoryview) -> InetDiagReqV2:
        """Decode the first 56 bytes of ``data``.

        The state mask is read big-endian, and the socket id is taken from the
        48 bytes starting at offset 4.
        """
        data = bytes(data)
        if len(data) < REQV2_SIZE:
            raise InetDiagReqV2TooSmall(len(data))
        family, protocol, ext = _HEAD.unpack_from(data, 0)
        (states,) = _STATES.unpack_from(data, 4)
        socket_id = InetDiagSockID.from_bytes(
            data[_SOCKID_OFFSET : _SOCKID_OFFSET + SOCKID_SIZE]
        )
        return cls(
            family=family,
            protocol=protocol,
            ext=ext,
            states=states,
            socket_id=socket_id,
        )