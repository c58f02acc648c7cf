"""Datagram socket I/O helpers: link MTU, kernel drop counting, DF bit."""

from __future__ import annotations

import ipaddress
import socket
import struct
import sys
from typing import Any, Iterable, Optional

_UINT32_MASK = 0xFFFFFFFF
_ANCILLARY_SIZE = 2048

# Linux socket option numbers.
IP_MTU = 14
IPV6_MTU = 24
SO_RXQ_OVFL = 40
LINUX_IP_MTU_DISCOVER = 10
LINUX_IPV6_MTU_DISCOVER = 23
PMTUDISC_PROBE = 3

# macOS socket option numbers.
DARWIN_IP_DONTFRAG = 28
DARWIN_IPV6_DONTFRAG = 62

# Windows socket option numbers.
WINDOWS_IP_MTU = 73
WINDOWS_IPV6_MTU = 72
WINDOWS_IP_MTU_DISCOVER = 71
WINDOWS_IPV6_MTU_DISCOVER = 71

IPPROTO_IPV6 = getattr(socket, "IPPROTO_IPV6", 41)


def _is_linux() -> bool:
    return sys.platform.startswith("linux")


class DropCounter:
    """Tracks packets the kernel reports as dropped on one socket.

    ``reported`` is the last absolute counter seen from the kernel and
    ``total`` the sum of all increments observed so far.
    """

    def __init__(self) -> None:
        self.reported = 0
        self.total = 0

    def update(self, reported: int) -> int:
        """Record a new kernel counter value and return the increment.

        A zero report is ignored; the counter wraps at 32 bits.
        """
        if not reported:
            return 0
        delta = (reported - self.reported) & _UINT32_MASK
        self.total += delta
        self.reported = reported
        return delta


def _family_of(address: Any) -> socket.AddressFamily:
    try:
        ip = ipaddress.ip_address(address[0])
    except (ValueError, TypeError, IndexError) as exc:
        raise ValueError(f"not an IPv4 or IPv6 address: {address!r}") from exc
    return socket.AF_INET if ip.version == 4 else socket.AF_INET6


def get_link_mtu(address: Any) -> Optional[int]:
    """Return the MTU of the link towards *address*, or None if unknown."""
    family = _family_of(address)

    if sys.platform == "darwin":
        return None

    if sys.platform == "win32":
        level, option = (
            (socket.IPPROTO_IP, WINDOWS_IP_MTU)
            if family == socket.AF_INET
            else (IPPROTO_IPV6, WINDOWS_IPV6_MTU)
        )
    else:
        level, option = (
            (socket.IPPROTO_IP, IP_MTU)
            if family == socket.AF_INET
            else (IPPROTO_IPV6, IPV6_MTU)
        )

    try:
        with socket.socket(family, socket.SOCK_DGRAM) as probe:
            probe.connect(address)
            return probe.getsockopt(level, option)
    except OSError:
        return None


def set_rxq_ovfl(sock: Any) -> bool:
    """Ask the kernel to report dropped packets; False if unsupported."""
    if not _is_linux():
        return False
    try:
        sock.setsockopt(socket.SOL_SOCKET, SO_RXQ_OVFL, 1)
    except OSError:
        return False
    return True


def set_dontfrag(sock: Any, is_ipv6: bool) -> None:
    """Forbid fragmentation so that oversized datagrams fail instead.

    Raises OSError if the option cannot be set.
    """
    if sys.platform == "darwin":
        if is_ipv6:
            sock.setsockopt(IPPROTO_IPV6, DARWIN_IPV6_DONTFRAG, 1)
        else:
            sock.setsockopt(socket.IPPROTO_IP, DARWIN_IP_DONTFRAG, 1)
        return

    if sys.platform == "win32":
        if is_ipv6:
            sock.setsockopt(IPPROTO_IPV6, WINDOWS_IPV6_MTU_DISCOVER, PMTUDISC_PROBE)
        else:
            sock.setsockopt(socket.IPPROTO_IP, WINDOWS_IP_MTU_DISCOVER, PMTUDISC_PROBE)
        return

    if is_ipv6:
        sock.setsockopt(IPPROTO_IPV6, LINUX_IPV6_MTU_DISCOVER, PMTUDISC_PROBE)
    else:
        sock.setsockopt(socket.IPPROTO_IP, LINUX_IP_MTU_DISCOVER, PMTUDISC_PROBE)


def sendmsg(sock: Any, buffers: Iterable[bytes], address: Any) -> int:
    """Send *buffers* as one datagram to *address*; return bytes sent."""
    parts = [bytes(part) for part in buffers]
    if sys.platform == "win32" or not hasattr(sock, "sendmsg"):
        return sock.sendto(b"".join(parts), address)
    return sock.sendmsg(parts, (), 0, address)


def recvmsg(
    sock: Any, bufsize: int, counter: Optional[DropCounter] = None
) -> tuple[bytes, Any]:
    """Receive one datagram; return ``(data, address)``.

    On Linux, a kernel drop report in the control data updates *counter*.
    """
    if sys.platform == "win32" or not hasattr(sock, "recvmsg"):
        data, address = sock.recvfrom(bufsize)
        return data, address

    data, ancdata, _flags, address = sock.recvmsg(bufsize, _ANCILLARY_SIZE)

    if _is_linux() and counter is not None:
        dropped = 0
        for level, kind, payload in ancdata:
            if level == socket.SOL_SOCKET and kind == SO_RXQ_OVFL and len(payload) >= 4:
                (dropped,) = struct.unpack("=I", payload[:4])
        counter.update(dropped)

    return data, address


def addr_to_v6(address: Any) -> tuple[str, int, int, int]:
    """Map an IPv4 ``(host, port)`` to its IPv4-mapped IPv6 form."""
    try:
        host, port = address[0], address[1]
        ip = ipaddress.ip_address(host)
    except (ValueError, TypeError, IndexError) as exc:
        raise ValueError(f"not an IPv4 address: {address!r}") from exc
    if ip.version != 4:
        raise ValueError(f"not an IPv4 address: {address!r}")
    mapped = ipaddress.IPv6Address(b"\x00" * 10 + b"\xff\xff" + ip.packed)
    return (str(mapped), port, 0, 0)