import struct

import pytest

from inetdiag.dctcpinfo import DCTCPInfo, DCTCPInfoTooSmall


def _attribute(payload: bytes) -> bytes:
    return struct.pack("<HH", 4 + len(payload), 9) + payload


def test_from_bytes_port_4033_sample():
    payload = struct.pack("<HHIII", 1, 0, 654, 0, 32768)
    info = DCTCPInfo.from_bytes(_attribute(payload)[4:])
    assert info == DCTCPInfo(enabled=1, ce_state=0, alpha=654, ab_ecn=0, ab_tot=32768)


def test_from_bytes_field_offsets():
    data = bytes(
        [1, 0, 2, 0, 3, 0, 0, 0, 4, 0, 0, 0, 5, 0, 0, 0]
    )
    info = DCTCPInfo.from_bytes(data)
    assert (info.enabled, info.ce_state, info.alpha, info.ab_ecn, info.ab_tot) == (
        1,
        2,
        3,
        4,
        5,
    )


def test_from_bytes_ignores_trailing_bytes():
    payload = struct.pack("<HHIII", 1, 1, 10, 20, 30) + b"\xff" * 4
    assert DCTCPInfo.from_bytes(payload).ab_tot == 30


def test_from_bytes_too_small():
    with pytest.raises(DCTCPInfoTooSmall) as excinfo:
        DCTCPInfo.from_bytes(b"\x00" * 15)
    assert excinfo.value.size == 15