import ipaddress
import struct

import pytest

from inetdiag.msg import MSG_SIZE, InetDiagMsg, InetDiagMsgTooSmall
from inetdiag.sockid import AF_INET, AF_INET6


def _msg_bytes(family, state, timer, retrans, expires, rqueue, wqueue, uid, inode,
               sport=1000, dport=2000, src="127.0.0.1", dst="127.0.0.1", cookie=1):
    sockid = (
        struct.pack(">HH", sport, dport)
        + ipaddress.ip_address(src).packed.ljust(16, b"\x00")
        + ipaddress.ip_address(dst).packed.ljust(16, b"\x00")
        + struct.pack("<IQ", 0, cookie)
    )
    return (
        bytes([family, state, timer, retrans])
        + sockid
        + struct.pack("<5I", expires, rqueue, wqueue, uid, inode)
    )


CASES = [
    ("6_10_3 port4322", 2, 1, 2, 0, 14491, 0, 0, 1000, 15598),
    ("port4018", 2, 1, 2, 0, 9854, 0, 0, 1000, 204403),
    ("port4001", 2, 1, 2, 0, 6029, 0, 0, 1000, 10698),
    ("4_19_319_port4005", 2, 1, 2, 0, 10947, 0, 0, 1000, 27461),
    ("port443v4", 2, 1, 2, 0, 36179, 0, 0, 1000, 26664450),
    ("port443v6", 10, 1, 0, 0, 0, 0, 0, 1000, 26683184),
]


@pytest.mark.parametrize(
    "description,family,state,timer,retrans,expires,rqueue,wqueue,uid,inode", CASES
)
def test_decode_msg(description, family, state, timer, retrans, expires, rqueue,
                    wqueue, uid, inode):
    data = _msg_bytes(family, state, timer, retrans, expires, rqueue, wqueue, uid, inode)
    m = InetDiagMsg.from_bytes(data)
    assert m.family == family
    assert m.state == state
    assert m.timer == timer
    assert m.retrans == retrans
    assert m.expires == expires
    assert m.rqueue == rqueue
    assert m.wqueue == wqueue
    assert m.uid == uid
    assert m.inode == inode


def test_socket_id_is_decoded():
    data = _msg_bytes(2, 1, 2, 0, 9854, 0, 0, 1000, 204403,
                      sport=1789, dport=4018, cookie=27550)
    m = InetDiagMsg.from_bytes(data)
    assert m.socket_id.sport == 1789
    assert m.socket_id.dport == 4018
    assert m.socket_id.cookie == 27550
    assert m.socket_id.source_address(AF_INET) == ipaddress.ip_address("127.0.0.1")


def test_socket_id_ipv6():
    data = _msg_bytes(10, 1, 0, 0, 0, 0, 0, 1000, 26683184,
                      sport=46965, dport=443,
                      src="2603:8000:9c00:9300:e4d4:5b27:2e76:ff0e",
                      dst="2607:f8b0:4007:817::200a", cookie=94476)
    m = InetDiagMsg.from_bytes(data)
    assert m.socket_id.destination_address(m.family) == ipaddress.ip_address(
        "2607:f8b0:4007:817::200a"
    )
    assert m.socket_id.source_address(AF_INET6) == ipaddress.ip_address(
        "2603:8000:9c00:9300:e4d4:5b27:2e76:ff0e"
    )


def test_queue_fields_little_endian():
    data = _msg_bytes(2, 1, 0, 0, 0, 0x01020304, 0x0A0B0C0D, 0, 0)
    m = InetDiagMsg.from_bytes(data)
    assert m.rqueue == 0x01020304
    assert m.wqueue == 0x0A0B0C0D


def test_exactly_72_bytes_decodes():
    data = _msg_bytes(2, 1, 2, 0, 1, 2, 3, 4, 5)
    assert len(data) == MSG_SIZE == 72
    m = InetDiagMsg.from_bytes(data)
    assert (m.expires, m.rqueue, m.wqueue, m.uid, m.inode) == (1, 2, 3, 4, 5)


def test_too_small_raises():
    with pytest.raises(InetDiagMsgTooSmall):
        InetDiagMsg.from_bytes(bytes(MSG_SIZE - 1))


def test_trailing_data_is_ignored():
    data = _msg_bytes(2, 1, 2, 0, 100, 0, 0, 1000, 42) + b"\xff" * 20
    m = InetDiagMsg.from_bytes(data)
    assert m.inode == 42
    assert m.expires == 100