"""Socket identity block (``struct inet_diag_sockid``) used by sock_diag messages."""

from __future__ import annotations

import ipaddress
import struct
from dataclasses import dataclass

AF_INET = 2
AF_INET6 = 10

SOCKID_SIZE = 48

_PORTS = struct.Struct(">HH")
_TAIL = struct.Struct("<IQ")


class InetDiagSockIDTooSmall(ValueError):
    """Raised when a buffer is shorter than an inet_diag_sockid."""

    def __init__(self, size: int) -> None:
        super().__init__(
            f"data too small for InetDiagSockID: {size} bytes, need {SOCKID_SIZE}"
        )
        self.size = size


@dataclass(frozen=True, slots=True)
class InetDiagSockID:
    """Ports, addresses, interface and cookie identifying one socket.

    Ports are network byte order on the wire; interface and cookie are host
    (little-endian) order. IPv4 addresses occupy the first four address bytes.
    """

    sport: int
    dport: int
    src: bytes
    dst: bytes
    interface: int
    cookie: int

    @classmethod
    def from_bytes(cls, data: bytes | bytearray | memoryview) -> InetDiagSockID:
        """Decode the first 48 bytes of ``data``."""
        data = bytes(data)
        if len(data) < SOCKID_SIZE:
            raise InetDiagSockIDTooSmall(len(data))
        sport, dport = _PORTS.unpack_from(data, 0)
        interface, cookie = _TAIL.unpack_from(data, 36)
        return cls(
            sport=sport,
            dport=dport,
            src=data[4:20],
            dst=data[20:36],
            interface=interface,
            cookie=cookie,
        )

    def source_address(
        self, family: int
    ) -> ipaddress.IPv4Address | ipaddress.IPv6Address:
        """Return the source address interpreted for the given address family."""
        return _address(self.src, family)

    def destination_address(
        self, family: int
    ) -> ipaddress.IPv4Address | ipaddress.IPv6Address:
        """Return the destination address interpreted for the given address family."""
        return _address(self.dst, family)


def _address(raw: bytes, family: int) -> ipaddress.IPv4Address | ipaddress.IPv6Address:
    if family == AF_INET:
        return ipaddress.IPv4Address(raw[:4])
    if family == AF_INET6:
        return ipaddress.IPv6Address(raw[:16])
    raise ValueError(f"unknown address family: {family}")