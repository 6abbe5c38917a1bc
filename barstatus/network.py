"""Network components: interface addresses, traffic rates and wireless link details."""

from __future__ import annotations

import array
import fcntl
import os
import re
import socket
import struct

import psutil

from .util import fmt_human, read_file, warn

NET_CLASS = "/sys/class/net"
PROC_WIRELESS = "/proc/net/wireless"

# The highest link quality reported by /proc/net/wireless.
WIRELESS_QUALITY_MAX = 70

SIOCGIWESSID = 0x8B1B
IW_ESSID_MAX_SIZE = 32
IFNAMSIZ = 16

_IWREQ_LAYOUT = f"{IFNAMSIZ}sPHH"
_IWREQ_SIZE = max(32, struct.calcsize(_IWREQ_LAYOUT))
_UINT = re.compile(r"\s*\+?(\d+)")
_QUALITY = re.compile(r"\s*[+-]?\d+\s*([+-]?\d+)")

# Last counter read from each statistics file.
_previous: dict[str, int] = {}


def _ip(interface: str, family: socket.AddressFamily) -> str | None:
    try:
        addresses = psutil.net_if_addrs()
    except OSError:
        warn("getifaddrs:")
        return None
    for address in addresses.get(interface, ()):
        if address.family == family:
            return address.address
    return None


def ipv4(interface: str) -> str | None:
    """Return the first IPv4 address of an interface."""
    return _ip(interface, socket.AF_INET)


def ipv6(interface: str) -> str | None:
    """Return the first IPv6 address of an interface."""
    return _ip(interface, socket.AF_INET6)


def _read_counter(path: str) -> int | None:
    text = read_file(path)
    if text is None:
        return None
    match = _UINT.match(text)
    return int(match.group(1)) if match else None


def _netspeed(interface: str, interval: int, name: str) -> str | None:
    if interval <= 0:
        raise ValueError(f"interval must be positive, not {interval}")
    path = os.path.join(NET_CLASS, interface, "statistics", name)
    count = _read_counter(path)
    if count is None:
        return None
    old = _previous.get(path, 0)
    _previous[path] = count
    if old == 0:
        return None
    return fmt_human(max(0, count - old) * 1000 // interval, 1024)


def netspeed_rx(interface: str, interval: int) -> str | None:
    """Return bytes received per second since the previous call, interval in ms."""
    return _netspeed(interface, interval, "rx_bytes")


def netspeed_tx(interface: str, interval: int) -> str | None:
    """Return bytes sent per second since the previous call, interval in ms."""
    return _netspeed(interface, interval, "tx_bytes")


def parse_wireless_quality(text: str, interface: str) -> str | None:
    """Return the link quality in percent from the text of /proc/net/wireless."""
    lines = text.splitlines()
    if len(lines) < 3:
        return None
    line = lines[2]
    start = line.find(interface)
    if start < 0:
        return None
    match = _QUALITY.match(line, start + len(interface) + 2)
    if match is None:
        return None
    quality = int(match.group(1))
    return str(int(quality / WIRELESS_QUALITY_MAX * 100))


def wifi_perc(interface: str) -> str | None:
    """Return the wireless link quality in percent when the interface is up."""
    state = read_file(os.path.join(NET_CLASS, interface, "operstate"))
    if state is None or not state.startswith("up\n"):
        return None
    text = read_file(PROC_WIRELESS)
    if text is None:
        return None
    return parse_wireless_quality(text, interface)


def wifi_essid(interface: str) -> str | None:
    """Return the ESSID the wireless interface is associated with."""
    name = interface.encode()
    if len(name) >= IFNAMSIZ:
        warn("vsnprintf: Output truncated")
        return None
    essid = array.array("B", bytes(IW_ESSID_MAX_SIZE + 1))
    address, length = essid.buffer_info()
    request = bytearray(
        struct.pack(_IWREQ_LAYOUT, name, address, length, 0).ljust(_IWREQ_SIZE, b"\0")
    )
    try:
        sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    except OSError:
        warn("socket 'AF_INET':")
        return None
    with sock:
        try:
            fcntl.ioctl(sock.fileno(), SIOCGIWESSID, request, True)
        except OSError:
            warn("ioctl 'SIOCGIWESSID':")
            return None
    value = essid.tobytes().split(b"\0", 1)[0]
    if not value:
        return None
    return value.decode("utf-8", errors="replace")