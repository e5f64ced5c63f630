# inetdiag

Pure-Python decoders for binary structures the Linux kernel uses on a
`NETLINK_SOCK_DIAG` socket: the `inet_diag_msg` reply header, the socket
identity it carries, the `inet_diag_req_v2` request body, and a set of
per-socket attributes (memory info, socket memory counters, congestion
control name, DCTCP and Prague state, cgroup and class ids, shutdown state,
socket options and traffic class).

Every decoder takes a `bytes`-like payload and checks its length. A payload
shorter than the structure raises the matching exception, for example
`MemInfoTooSmall` or `InetDiagMsgTooSmall`. All of these exceptions derive
from `ValueError` and carry the offending length in `.size`. Extra bytes
after the structure are ignored.

## Installation

```
pip install .
```

## Decoding a reply header

```python
from inetdiag.msg import InetDiagMsg
from inetdiag.sockid import AF_INET

msg = InetDiagMsg.from_bytes(payload)   # the 72 bytes that follow the nlmsghdr
print(msg.family, msg.state, msg.timer, msg.retrans)
print(msg.expires, msg.rqueue, msg.wqueue, msg.uid, msg.inode)

sock_id = msg.socket_id
print(sock_id.sport, sock_id.dport, sock_id.interface, sock_id.cookie)
print(sock_id.source_address(AF_INET), sock_id.destination_address(AF_INET))
```

`InetDiagSockID.from_bytes` decodes the 48-byte socket identity on its own.
Ports are big-endian on the wire; interface and cookie are little-endian.
`src` and `dst` hold the 16 raw address bytes; `source_address` and
`destination_address` turn them into `ipaddress` objects for `AF_INET` (the
first four bytes) or `AF_INET6` (all sixteen), and raise `ValueError` for any
other family.

## Decoding a request

`InetDiagReqV2.from_bytes` decodes the 56-byte `inet_diag_req_v2` body of a
dump request, giving `family`, `protocol`, `ext`, `states` and `socket_id`.
The pad byte is not read and `pad` is always zero. The state mask is read
big-endian from offset 4, and the socket id is taken from the 48 bytes
starting at that same offset.

## Decoding attributes

The attribute decoders read the payload that follows the 4-byte `rtattr`
header.

```python
from inetdiag.cgroupid import decode_cgroup_id
from inetdiag.classid import decode_class_id
from inetdiag.conginfo import CongInfo
from inetdiag.dctcpinfo import DCTCPInfo
from inetdiag.meminfo import MemInfo
from inetdiag.pragueinfo import PragueInfo
from inetdiag.shutdown import decode_shutdown
from inetdiag.skmeminfo import SkMemInfo
from inetdiag.sockopt import decode_sockopt
from inetdiag.tclass import decode_traffic_class

mem = MemInfo.from_bytes(attr_payload)        # rmem, wmem, fmem, tmem
skmem = SkMemInfo.from_bytes(attr_payload)    # rmem_alloc, rcv_buf, ..., drops
dctcp = DCTCPInfo.from_bytes(attr_payload)    # enabled, ce_state, alpha, ab_ecn, ab_tot
prague = PragueInfo.from_bytes(attr_payload)  # alpha, frac_cwnd, rate_bytes, max_burst, round, rtt_target

cong = CongInfo.from_bytes(b"cubic\x00")
print(cong.cong)     # b"cubic\x00"
print(cong.name())   # "cubic"

cgroup = decode_cgroup_id(attr_payload)       # 64-bit little-endian
class_id = decode_class_id(attr_payload)      # 32-bit little-endian
sockopt = decode_sockopt(attr_payload)        # 16-bit little-endian bit set
shutdown = decode_shutdown(attr_payload)      # one byte
tclass = decode_traffic_class(attr_payload)   # one byte
```

Each attribute module also defines its attribute type number, for example
`MEM_INFO_ATTRIBUTE` (1) or `CGROUP_ID_ATTRIBUTE` (21), and its size constant.

## What this package does not do

It only decodes buffers you already have. It does not open netlink sockets or
send dump requests, and it does not split a netlink message into its
`nlmsghdr` and `rtattr` parts; you pass each decoder the slice it expects.
There are no decoders here for `tcp_info`, BBR, Vegas or TOS attributes, and
there is no command-line tool.

## Running the tests

```
pip install .[test]
pytest
```