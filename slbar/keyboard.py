"""Keyboard indicator formatting and XKB layout parsing."""

from __future__ import annotations

import re
import string

_INVALID_SYMBOLS = ("evdev", "inet", "pc", "base")
_FMT_LIMIT = 4


def format_indicators(fmt: str, led_mask: int) -> str:
    """Render caps/num lock state according to ``fmt``.

    ``fmt`` holds 'c' (caps lock) and/or 'n' (num lock), each optionally
    followed by '?'. With '?', the letter (case preserved) appears only when
    the indicator is on; without it, the letter always appears, upper case
    when on and lower case when off. Only the first four characters count.
    """
    fmt = fmt[:_FMT_LIMIT]
    out = []
    for pos, char in enumerate(fmt):
        key = char.lower()
        if key not in ("c", "n"):
            continue
        following = fmt[pos + 1 : pos + 2]
        togglecase = following != "?"
        isset = bool(led_mask & (1 << (key == "n")))
        if togglecase:
            out.append(key.upper() if isset else key)
        elif isset:
            out.append(char)
    return "".join(out)


def is_valid_layout(sym: str) -> bool:
    """Tell whether an XKB symbols token names a layout or variant."""
    return not any(sym.startswith(bad) for bad in _INVALID_SYMBOLS)


def parse_layout(symbols: str, group: int) -> str | None:
    """Return the layout of keyboard ``group`` from an XKB symbols name."""
    layout = None
    found = 0
    for token in filter(None, re.split(r"[+:]", symbols)):
        if found > group:
            break
        if not is_valid_layout(token):
            continue
        if len(token) == 1 and token in string.digits:
            # additional layout group markers such as :2
            continue
        layout = token
        found += 1
    return layout