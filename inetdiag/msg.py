"""Reply header of a sock_diag dump (``struct inet_diag_msg``)."""

from __future__ import annotations

import struct
from dataclasses import dataclass

from inetdiag.sockid import SOCKID_SIZE, InetDiagSockID

MSG_SIZE = 72
_BYTES_BEFORE_SOCKID = 4

_HEAD = struct.Struct("<4B")
_TAIL = struct.Struct("<5I")


class InetDiagMsgTooSmall(ValueError):
    """Raised when a buffer is shorter than an inet_diag_msg."""

    def __init__(self, size: int) -> None:
        super().__init__(
            f"data too small for InetDiagMsg: {size} bytes, need {MSG_SIZE}"
        )
        self.size = size


@dataclass(frozen=True, slots=True)
class InetDiagMsg:
    """One socket entry of a sock_diag reply.

    ``timer`` is 0 (none), 1 (retransmit), 2 (keep-alive), 3 (TIME_WAIT) or
    4 (zero window probe); ``retrans`` is only meaningful for 1, 2 and 4.
    """

    family: int
    state: int
    timer: int
    retrans: int
    socket_id: InetDiagSockID
    expires: int
    rqueue: int
    wqueue: int
    uid: int
    inode: int

    @classmethod
    def from_bytes(cls, data: bytes | bytearray | memoryview) -> InetDiagMsg:
        """Decode the first 72 bytes of ``data``."""
        data = bytes(data)
        if len(data) < MSG_SIZE:
            raise InetDiagMsgTooSmall(len(data))
        family, state, timer, retrans = _HEAD.unpack_from(data, 0)
        socket_id = InetDiagSockID.from_bytes(
            data[_BYTES_BEFORE_SOCKID : _BYTES_BEFORE_SOCKID + SOCKID_SIZE]
        )
        expires, rqueue, wqueue, uid, inode = _TAIL.unpack_from(
            data, _BYTES_BEFORE_SOCKID + SOCKID_SIZE
        )
        return cls(
            family=family,
            state=state,
            timer=timer,
            retrans=retrans,
            socket_id=socket_id,
            expires=expires,
            rqueue=rqueue,
            wqueue=wqueue,
            uid=uid,
            inode=inode,
        )