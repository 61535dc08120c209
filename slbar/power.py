"""Battery and temperature components backed by sysfs."""

from __future__ import annotations

import os
import re

from .util import read_value

POWER_SUPPLY_ROOT = "/sys/class/power_supply"

_STATE_SYMBOLS = {
    "Charging": "+",
    "Discharging": "-",
    "Full": "o",
    "Not charging": "o",
}

_INT_RE = re.compile(r"\s*([+-]?\d+)")
_UINT_RE = re.compile(r"\s*([+-]?)(\d+)")
_STATE_RE = re.compile(r"[a-zA-Z ]{1,12}")
_UINT_MODULUS = 1 << 64


def _scan_int(path: str) -> int | None:
    text = read_value(path)
    if text is None:
        return None
    match = _INT_RE.match(text)
    return int(match.group(1)) if match else None


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


def _read_state(path: str) -> str | None:
    text = read_value(path)
    if text is None:
        return None
    match = _STATE_RE.match(text)
    return match.group(0) if match else None


def _pick(directory: str, first: str, second: str) -> str | None:
    """Return the first readable of two attribute files in ``directory``."""
    for name in (first, second):
        path = os.path.join(directory, name)
        if os.access(path, os.R_OK):
            return path
    return None


def battery_perc(bat: str, root: str = POWER_SUPPLY_ROOT) -> str | None:
    """Charge level of battery ``bat`` in percent."""
    capacity = _scan_int(os.path.join(root, bat, "capacity"))
    if capacity is None:
        return None
    return str(capacity)


def battery_state(bat: str, root: str = POWER_SUPPLY_ROOT) -> str | None:
    """Charging state of ``bat`` as '+', '-', 'o', or '?' when unknown."""
    state = _read_state(os.path.join(root, bat, "status"))
    if state is None:
        return None
    return _STATE_SYMBOLS.get(state, "?")


def battery_remaining(bat: str, root: str = POWER_SUPPLY_ROOT) -> str | None:
    """Time left on ``bat`` as 'Hh Mm' while discharging, else ''."""
    directory = os.path.join(root, bat)
    state = _read_state(os.path.join(directory, "status"))
    if state is None:
        return None

    charge_path = _pick(directory, "charge_now", "energy_now")
    if charge_path is None:
        return None
    charge_now = _scan_uint(charge_path)
    if charge_now is None:
        return None

    if state != "Discharging":
        return ""

    current_path = _pick(directory, "current_now", "power_now")
    if current_path is None:
        return None
    current_now = _scan_uint(current_path)
    if current_now is None or current_now == 0:
        return None

    timeleft = charge_now / current_now
    hours = int(timeleft)
    minutes = int((timeleft - hours) * 60)
    return f"{hours}h {minutes}m"


def temp(file: str) -> str | None:
    """Temperature in degrees Celsius from a millidegree sensor file."""
    value = _scan_uint(file)
    if value is None:
        return None
    return str(value // 1000)