# udxkit

Building blocks for a reliable, multiplexed stream transport carried over UDP.
The package uses only the standard library.

## Modules

- `udxkit.constants`: header sizes (`HEADER_SIZE`, `IPV4_HEADER_SIZE`,
  `IPV6_HEADER_SIZE`), MTU limits (`MTU_BASE`, `MTU_MAX`, `MTU_STEP`,
  `MTU_MAX_PROBES`), `MAGIC_BYTE`, `VERSION`, and the enumerations
  `MtuState`, `SocketFlag`, `StreamFlag`, `HeaderFlag`, `WriteWant`,
  `DebugFlag`, `CongestionState` and `LookupFamily`.
- `udxkit.cirbuf`: `CircularBuffer`, a power-of-two table of objects keyed by
  their `seq` attribute. When two different sequence numbers land in the same
  slot, the table doubles until they no longer collide. It offers `set`,
  `get`, `remove`, `clear`, `len()`, iteration, and the `size` and `mask`
  properties. A size that is not a power of two raises `ValueError`.
- `udxkit.queue`: `Queue`, an ordered queue with `push`, `unshift`, `peek`,
  `shift`, `unlink`, `len()`, iteration and `in`. Items are tracked by
  identity. Adding an item twice, or unlinking one that is not present,
  raises `ValueError`.
- `udxkit.endian`: `endianness()` returns an `Endianness` value. There are
  also `is_le()`, `is_be()`, `swap_uint32(x)` and `swap_uint32_if_be(n)`.
  Values outside the uint32 range raise `ValueError`.
- `udxkit.io`: datagram socket helpers.
  - `get_link_mtu(address)` returns the link MTU towards an address, or
    `None` when it is unknown. It always returns `None` on macOS.
  - `set_dontfrag(sock, is_ipv6)` and `set_rxq_ovfl(sock)` set socket
    options. `set_rxq_ovfl` works on Linux only and returns `False`
    elsewhere.
  - `sendmsg(sock, buffers, address)` sends several buffers as one
    datagram.
  - `recvmsg(sock, bufsize, counter)` returns `(data, address)`. On Linux it
    feeds the kernel's drop report into a `DropCounter`.
  - `addr_to_v6(address)` maps an IPv4 `(host, port)` to an IPv4-mapped
    IPv6 `(host, port, 0, 0)` tuple.
- `udxkit.units`: `format_bytes(num, fmtchar)` formats quantities in bytes or
  bits. `format_interval(local_id, bytes_count, start, end, origin)` builds a
  throughput report line from millisecond timestamps.

## Examples

Keeping packets by sequence number:

```python
from dataclasses import dataclass
from udxkit.cirbuf import CircularBuffer

@dataclass
class Packet:
    seq: int

outgoing = CircularBuffer(16)
outgoing.set(Packet(seq=3))
outgoing.set(Packet(seq=19))   # collides with 3 in a table of 16, so it grows
assert outgoing.size == 32
assert outgoing.get(3).seq == 3
assert outgoing.remove(19).seq == 19
assert outgoing.get(19) is None
```

An ordered queue:

```python
from udxkit.queue import Queue

q = Queue()
q.push("b")
q.unshift("a")
q.push("c")
q.unlink("b")
assert list(q) == ["a", "c"]
assert q.shift() == "a"
```

Formatting transfer sizes and rates:

```python
from udxkit.units import format_bytes

format_bytes(10000, "A")   # '9.77 KByte'  (adaptive, bytes, base 1024)
format_bytes(10000, "a")   # '80.0 Kbit'   (adaptive, bits, base 1000)
```

## What it does not do

This package provides the parts listed above and nothing more. It does not
include:

- the socket or stream engine itself, so there is no connect, write,
  acknowledge or retransmit;
- congestion control;
- MTU probing;
- name lookup;
- network-interface watching;
- a command-line throughput tool.

## Running the tests

```
pip install "udxkit[test]"
python -m pytest
```