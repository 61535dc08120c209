"""Network address, throughput and wireless components."""

from __future__ import annotations

import array
import fcntl
import os
import re
import socket
import struct

import psutil

from .util import fmt_human, read_value, warn

NET_ROOT = "/sys/class/net"
PROC_WIRELESS = "/proc/net/wireless"
DEFAULT_INTERVAL = 1000

_UINT_MODULUS = 1 << 64
_UINT_RE = re.compile(r"\s*([+-]?)(\d+)")
_LINK_RE = re.compile(r"\s*[+-]?\d+\s*([+-]?\d+)")
_LINE_LIMIT = 1022
_INT32_MIN, _INT32_MAX = -(1 << 31), (1 << 31) - 1
# the largest link quality reported in /proc/net/wireless
_LINK_MAX = 70

_IFNAMSIZ = 16
_IW_ESSID_MAX_SIZE = 32
_SIOCGIWESSID = 0x8B1B
_IWREQ_FORMAT = "@16sPHH"
_IWREQ_SIZE = max(32, struct.calcsize(_IWREQ_FORMAT))


def _scan_uint(path: str) -> int | None:
    text = read_value(path)
    if text is None:
        return None
    match = _UINT_RE.match(text)
    if not match:
        return None
    value = int(match.group(2))
    if match.group(1) == "-":
        value = -value % _UINT_MODULUS
    return value


def _f32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def _ip(interface: str, family: socket.AddressFamily) -> str | None:
    try:
        addresses = psutil.net_if_addrs()
    except OSError as exc:
        warn("getifaddrs:", exc)
        return None
    for entry in addresses.get(interface, ()):
        if entry.family == family:
            return entry.address
    return None


def ipv4(interface: str) -> str | None:
    """First IPv4 address of ``interface``."""
    return _ip(interface, socket.AF_INET)


def ipv6(interface: str) -> str | None:
    """First IPv6 address of ``interface``."""
    return _ip(interface, socket.AF_INET6)


class NetSpeed:
    """Bytes per second received ('rx') or sent ('tx') since the previous call."""

    def __init__(
        self, direction: str, interval: int = DEFAULT_INTERVAL, root: str = NET_ROOT
    ) -> None:
        if direction not in ("rx", "tx"):
            raise ValueError(f"direction must be 'rx' or 'tx', not {direction!r}")
        if interval <= 0:
            raise ValueError("interval must be positive")
        self.direction = direction
        self.interval = interval
        self.root = root
        self._bytes = 0

    def __call__(self, interface: str) -> str | None:
        path = os.path.join(
            self.root, interface, "statistics", f"{self.direction}_bytes"
        )
        current = _scan_uint(path)
        if current is None:
            return None
        previous, self._bytes = self._bytes, current
        if previous == 0:
            return None
        delta = (current - previous) % _UINT_MODULUS
        rate = (delta * 1000) % _UINT_MODULUS // self.interval
        return fmt_human(rate, 1024)


_rx = NetSpeed("rx")
_tx = NetSpeed("tx")


def netspeed_rx(interface: str) -> str | None:
    """Receive speed of ``interface`` per second."""
    return _rx(interface)


def netspeed_tx(interface: str) -> str | None:
    """Transmit speed of ``interface`` per second."""
    return _tx(interface)


def rssi_to_perc(rssi: int) -> int:
    """Map a signal strength in dBm onto 0..100 percent."""
    if rssi >= -50:
        return 100
    if rssi <= -100:
        return 0
    return 2 * (rssi + 100)


def wifi_perc(
    interface: str, root: str = NET_ROOT, wireless_path: str = PROC_WIRELESS
) -> str | None:
    """Link quality of wireless ``interface`` in percent."""
    state_path = os.path.join(root, interface, "operstate")
    try:
        with open(state_path, encoding="utf-8", errors="replace") as handle:
            status = handle.readline(4)
    except OSError as exc:
        warn(f"fopen '{state_path}':", exc)
        return None
    if status != "up\n":
        return None

    try:
        with open(wireless_path, encoding="utf-8", errors="replace") as handle:
            lines = [handle.readline(_LINE_LIMIT) for _ in range(3)]
    except OSError as exc:
        warn(f"fopen '{wireless_path}':", exc)
        return None
    if not all(lines):
        return None

    line = lines[2]
    pos = line.find(interface)
    if pos < 0:
        return None
    match = _LINK_RE.match(line[pos + len(interface) + 2 :])
    if not match:
        return None
    cur = int(match.group(1))
    if not _INT32_MIN <= cur <= _INT32_MAX:
        return None
    return str(int(_f32(_f32(_f32(cur) / _LINK_MAX) * 100)))


def wifi_essid(interface: str) -> str | None:
    """ESSID of the network that wireless ``interface`` is joined to."""
    name = interface.encode()
    if len(name) >= _IFNAMSIZ:
        warn("vsnprintf: Output truncated")
        return None

    essid = array.array("B", bytes(_IW_ESSID_MAX_SIZE + 1))
    address, _ = essid.buffer_info()
    request = struct.pack(
        _IWREQ_FORMAT, name, address, _IW_ESSID_MAX_SIZE + 1, 0
    ).ljust(_IWREQ_SIZE, b"\0")

    try:
        sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    except OSError as exc:
        warn("socket 'AF_INET':", exc)
        return None
    with sock:
        try:
            fcntl.ioctl(sock.fileno(), _SIOCGIWESSID, request)
        except OSError as exc:
            warn("ioctl 'SIOCGIWESSID':", exc)
            return None

    value = essid.tobytes().split(b"\0", 1)[0]
    return value.decode("utf-8", errors="replace") or None