"""Components describing the host: time, names, load, uptime, users, entropy, temperature."""

from __future__ import annotations

import os
import pwd
import re
import socket
import sys
import time as _time

from .util import read_file, warn

time = _time

ENTROPY_AVAIL = "/proc/sys/kernel/random/entropy_avail"

_BUFFER_SIZE = 1024
_UINT = re.compile(r"\s*\+?(\d+)")
_UPTIME_CLOCK = getattr(
    _time, "CLOCK_BOOTTIME", getattr(_time, "CLOCK_UPTIME", _time.CLOCK_MONOTONIC)
)


def _read_uint(path: str) -> int | None:
    text = read_file(path)
    if text is None:
        return None
    match = _UINT.match(text)
    return int(match.group(1)) if match else None


def datetime(fmt: str) -> str | None:
    """Format the current local time with a strftime format."""
    try:
        result = time.strftime(fmt, time.localtime())
    except ValueError:
        result = ""
    if not result or len(result) >= _BUFFER_SIZE:
        warn("strftime: Result string exceeds buffer size")
        return None
    return result


def hostname(unused: str | None = None) -> str | None:
    """Return the host name."""
    try:
        return socket.gethostname()
    except OSError:
        warn("gethostbyname:")
        return None


def kernel_release(unused: str | None = None) -> str | None:
    """Return the kernel release string."""
    try:
        return os.uname().release
    except OSError:
        warn("uname:")
        return None


def load_avg(unused: str | None = None) -> str | None:
    """Return the 1, 5 and 15 minute load averages."""
    try:
        avgs = os.getloadavg()
    except OSError:
        warn("getloadavg: Failed to obtain load average")
        return None
    return " ".join(f"{avg:.2f}" for avg in avgs)


def uptime(unused: str | None = None) -> str | None:
    """Return the time since boot as hours and minutes."""
    try:
        seconds = int(time.clock_gettime(_UPTIME_CLOCK))
    except OSError:
        warn(f"clock_gettime {_UPTIME_CLOCK}")
        return None
    hours, rest = divmod(seconds, 3600)
    return f"{hours}h {rest // 60}m"


def gid(unused: str | None = None) -> str:
    """Return the real group id."""
    return str(os.getgid())


def uid(unused: str | None = None) -> str:
    """Return the effective user id."""
    return str(os.geteuid())


def username(unused: str | None = None) -> str | None:
    """Return the name of the effective user."""
    euid = os.geteuid()
    try:
        return pwd.getpwuid(euid).pw_name
    except KeyError:
        warn(f"getpwuid '{euid}':")
        return None


def entropy(unused: str | None = None) -> str | None:
    """Return the available kernel entropy, or infinity on the BSDs."""
    if sys.platform.startswith(("openbsd", "freebsd")):
        return "\u221e"
    value = _read_uint(ENTROPY_AVAIL)
    return None if value is None else str(value)


def temp(file: str) -> str | None:
    """Return the temperature in degrees Celsius from a millidegree sensor file."""
    value = _read_uint(file)
    return None if value is None else str(value // 1000)