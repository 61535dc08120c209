"""Memory and swap components backed by /proc/meminfo."""

from __future__ import annotations

import re

from .util import fmt_human, read_value

MEMINFO = "/proc/meminfo"

_FIELD_RE = re.compile(r"\s*([+-]?\d+)")


def parse_meminfo(text: str) -> dict[str, int]:
    """Map each field name of a meminfo listing to its numeric value (kB)."""
    fields: dict[str, int] = {}
    for line in text.splitlines():
        name, sep, rest = line.partition(":")
        if not sep:
            continue
        match = _FIELD_RE.match(rest)
        if match:
            fields[name.strip()] = int(match.group(1))
    return fields


def _fields(path: str, *names: str) -> tuple[int, ...] | None:
    text = read_value(path)
    if text is None:
        return None
    info = parse_meminfo(text)
    try:
        return tuple(info[name] for name in names)
    except KeyError:
        return None


def _trunc_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


def ram_free(unused: object = None, path: str = MEMINFO) -> str | None:
    """Memory available for new allocations (MemAvailable)."""
    values = _fields(path, "MemAvailable")
    if values is None:
        return None
    (available,) = values
    return fmt_human(available * 1024, 1024)


def ram_perc(unused: object = None, path: str = MEMINFO) -> str | None:
    """Memory in use, excluding buffers and cache, in percent."""
    values = _fields(path, "MemTotal", "MemFree", "Buffers", "Cached")
    if values is None:
        return None
    total, free, buffers, cached = values
    if total == 0:
        return None
    used = (total - free) - (buffers + cached)
    return str(_trunc_div(100 * used, total))


def ram_total(unused: object = None, path: str = MEMINFO) -> str | None:
    """Total memory in whole GiB, rounded down."""
    values = _fields(path, "MemTotal")
    if values is None:
        return None
    (total,) = values
    return f"{total // 1024 // 1024}G"


def ram_used(unused: object = None, path: str = MEMINFO) -> str | None:
    """Memory in use, excluding buffers and cache, in whole GiB."""
    values = _fields(path, "MemTotal", "MemFree", "Buffers", "Cached")
    if values is None:
        return None
    total, free, buffers, cached = values
    return f"{(total - free - buffers - cached) // 1024 // 1024}G"


def swap_free(unused: object = None, path: str = MEMINFO) -> str | None:
    """Unused swap space."""
    values = _fields(path, "SwapFree")
    if values is None:
        return None
    (free,) = values
    return fmt_human(free * 1024, 1024)


def swap_perc(unused: object = None, path: str = MEMINFO) -> str | None:
    """Swap in use, excluding swap cache, in percent."""
    values = _fields(path, "SwapTotal", "SwapFree", "SwapCached")
    if values is None:
        return None
    total, free, cached = values
    if total == 0:
        return None
    return str(_trunc_div(100 * (total - free - cached), total))


def swap_total(unused: object = None, path: str = MEMINFO) -> str | None:
    """Total swap space."""
    values = _fields(path, "SwapTotal")
    if values is None:
        return None
    (total,) = values
    return fmt_human(total * 1024, 1024)


def swap_used(unused: object = None, path: str = MEMINFO) -> str | None:
    """Swap in use, excluding swap cache."""
    values = _fields(path, "SwapTotal", "SwapFree", "SwapCached")
    if values is None:
        return None
    total, free, cached = values
    return fmt_human((total - free - cached) * 1024, 1024)