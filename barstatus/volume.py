"""Master volume read from an OSS mixer device."""

from __future__ import annotations

import fcntl
import os
import sys

from .util import warn

SOUND_DEVICE_NAMES = (
    "vol", "bass", "treble", "synth", "pcm", "speaker", "line", "mic", "cd",
    "mix", "pcm2", "rec", "igain", "ogain", "line1", "line2", "line3", "dig1",
    "dig2", "dig3", "phin", "phout", "video", "radio", "monitor",
)

_SOUND_MIXER_DEVMASK = 0xFE
_INT_SIZE = 4
_IOC_READ = 0x80000000 if sys.platform.startswith("linux") else 0x40000000


def _mixer_read(channel: int) -> int:
    return _IOC_READ | (_INT_SIZE << 16) | (ord("M") << 8) | channel


SOUND_MIXER_READ_DEVMASK = _mixer_read(_SOUND_MIXER_DEVMASK)


def _ioctl_int(fd: int, request: int) -> int:
    result = bytearray(_INT_SIZE)
    fcntl.ioctl(fd, request, result, True)
    return int.from_bytes(result, sys.byteorder, signed=True)


def vol_perc(card: str) -> str | None:
    """Return the master volume of a mixer device in percent."""
    try:
        fd = os.open(card, os.O_RDONLY | os.O_NONBLOCK)
    except OSError:
        warn(f"open '{card}':")
        return None
    value = None
    try:
        try:
            devmask = _ioctl_int(fd, SOUND_MIXER_READ_DEVMASK)
        except OSError:
            warn("ioctl 'SOUND_MIXER_READ_DEVMASK':")
            return None
        for channel, name in enumerate(SOUND_DEVICE_NAMES):
            if devmask & (1 << channel) and name == "vol":
                try:
                    value = _ioctl_int(fd, _mixer_read(channel))
                except OSError:
                    warn(f"ioctl 'MIXER_READ({channel})':")
                    return None
    finally:
        os.close(fd)
    if value is None:
        return None
    return str(value & 0xFF)