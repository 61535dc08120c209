"""Mixer volume component using the OSS mixer interface."""

from __future__ import annotations

import array
import fcntl
import os

from .util import warn

_SOUND_DEVICE_NAMES = (
    "vol", "bass", "trebl", "synth", "pcm", "speaker", "line", "mic",
    "cd", "mix", "pcm2", "rec", "igain", "ogain", "line1", "line2",
    "line3", "dig1", "dig2", "dig3", "phin", "phout", "video", "radio",
    "monitor",
)
_SOUND_MIXER_DEVMASK = 0xFE


def _mixer_read(dev: int) -> int:
    """Request number reading one int from mixer channel ``dev``."""
    return 0x80000000 | (4 << 16) | (ord("M") << 8) | dev


_SOUND_MIXER_READ_DEVMASK = _mixer_read(_SOUND_MIXER_DEVMASK)


def vol_perc(card: str) -> str | None:
    """Master volume of mixer device ``card`` in percent (left channel)."""
    try:
        fd = os.open(card, os.O_RDONLY | os.O_NONBLOCK)
    except OSError as exc:
        warn(f"open '{card}':", exc)
        return None

    try:
        devmask = array.array("i", [0])
        try:
            fcntl.ioctl(fd, _SOUND_MIXER_READ_DEVMASK, devmask, True)
        except OSError as exc:
            warn("ioctl 'SOUND_MIXER_READ_DEVMASK':", exc)
            return None

        level = None
        for index, name in enumerate(_SOUND_DEVICE_NAMES):
            if devmask[0] & (1 << index) and name == "vol":
                value = array.array("i", [0])
                try:
                    fcntl.ioctl(fd, _mixer_read(index), value, True)
                except OSError as exc:
                    warn(f"ioctl 'MIXER_READ({index})':", exc)
                    return None
                level = value[0]
    finally:
        os.close(fd)

    if level is None:
        return None
    return str(level & 0xFF)