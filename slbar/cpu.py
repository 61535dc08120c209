"""Processor, load, entropy and uptime components."""

from __future__ import annotations

import os
import re
import time

from .util import fmt_human, read_value, warn

CPU_FREQ = "/sys/devices/system/cpu/cpu0/cpufreq/scaling_cur_freq"
PROC_STAT = "/proc/stat"
ENTROPY_AVAIL = "/proc/sys/kernel/random/entropy_avail"

_UINT_RE = re.compile(r"\s*([+-]?)(\d+)")
_UINT_MODULUS = 1 << 64
_STAT_FIELDS = 7

if hasattr(time, "CLOCK_BOOTTIME"):
    _UPTIME_CLOCK = time.CLOCK_BOOTTIME
elif hasattr(time, "CLOCK_UPTIME"):
    _UPTIME_CLOCK = time.CLOCK_UPTIME
else:
    _UPTIME_CLOCK = time.CLOCK_MONOTONIC


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


def _parse_stat(text: str) -> list[float] | None:
    fields = text.split()
    values = []
    for field in fields[1 : 1 + _STAT_FIELDS]:
        try:
            values.append(float(field))
        except ValueError:
            break
    return values if len(values) == _STAT_FIELDS else None


class CpuUsage:
    """CPU usage in percent since the previous call, read from /proc/stat."""

    def __init__(self, path: str = PROC_STAT) -> None:
        self.path = path
        self._last = [0.0] * _STAT_FIELDS

    def __call__(self, unused: object = None) -> str | None:
        text = read_value(self.path)
        if text is None:
            return None
        current = _parse_stat(text)
        if current is None:
            return None

        previous, self._last = self._last, current
        if previous[0] == 0:
            return None

        total = sum(previous) - sum(current)
        if total == 0:
            return None

        busy = (0, 1, 2, 5, 6)
        busy_delta = sum(previous[i] for i in busy) - sum(current[i] for i in busy)
        return str(int(100 * busy_delta / total))


_cpu_usage = CpuUsage()


def cpu_freq(unused: object = None, path: str = CPU_FREQ) -> str | None:
    """Current frequency of the first CPU."""
    khz = _scan_uint(path)
    if khz is None:
        return None
    return fmt_human(khz * 1000, 1000)


def cpu_perc(unused: object = None) -> str | None:
    """CPU usage in percent since the previous call."""
    return _cpu_usage(unused)


def load_avg(unused: object = None) -> str | None:
    """The 1, 5 and 15 minute load averages."""
    try:
        one, five, fifteen = os.getloadavg()
    except OSError:
        warn("getloadavg: Failed to obtain load average")
        return None
    return f"{one:.2f} {five:.2f} {fifteen:.2f}"


def entropy(unused: object = None, path: str = ENTROPY_AVAIL) -> str | None:
    """Available kernel entropy."""
    value = _scan_uint(path)
    if value is None:
        return None
    return str(value)


def format_uptime(seconds: int | float) -> str:
    """Render a duration in whole hours and minutes as 'Hh Mm'."""
    seconds = int(seconds)
    hours = seconds // 3600
    minutes = seconds % 3600 // 60
    return f"{hours}h {minutes}m"


def uptime(unused: object = None) -> str | None:
    """Time since the system booted."""
    try:
        seconds = time.clock_gettime(_UPTIME_CLOCK)
    except OSError:
        warn(f"clock_gettime {_UPTIME_CLOCK}")
        return None
    return format_uptime(seconds)