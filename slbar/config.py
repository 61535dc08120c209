"""Status bar configuration: components, formats and limits."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from . import cpu, disk, memory, network, power, system, volume

#: interval between updates in milliseconds
INTERVAL = 1000
#: text shown when a component yields no value
UNKNOWN_STR = "n/a"
#: maximum length of the status text
MAXLEN = 2048

Component = Callable[[Optional[str]], Optional[str]]

_COMPONENTS: dict[str, Component] = {
    "battery_perc": power.battery_perc,
    "battery_remaining": power.battery_remaining,
    "battery_state": power.battery_state,
    "cat": system.cat,
    "cpu_freq": cpu.cpu_freq,
    "cpu_perc": cpu.cpu_perc,
    "datetime": system.datetime,
    "disk_free": disk.disk_free,
    "disk_perc": disk.disk_perc,
    "disk_total": disk.disk_total,
    "disk_used": disk.disk_used,
    "entropy": cpu.entropy,
    "gid": system.gid,
    "hostname": system.hostname,
    "ipv4": network.ipv4,
    "ipv6": network.ipv6,
    "kernel_release": system.kernel_release,
    "load_avg": cpu.load_avg,
    "netspeed_rx": network.netspeed_rx,
    "netspeed_tx": network.netspeed_tx,
    "num_files": disk.num_files,
    "ram_free": memory.ram_free,
    "ram_perc": memory.ram_perc,
    "ram_total": memory.ram_total,
    "ram_used": memory.ram_used,
    "run_command": system.run_command,
    "swap_free": memory.swap_free,
    "swap_perc": memory.swap_perc,
    "swap_total": memory.swap_total,
    "swap_used": memory.swap_used,
    "temp": power.temp,
    "uid": system.uid,
    "uptime": cpu.uptime,
    "username": system.username,
    "vol_perc": volume.vol_perc,
    "wifi_essid": network.wifi_essid,
    "wifi_perc": network.wifi_perc,
}


@dataclass(frozen=True)
class Arg:
    """One status entry: a component, its printf-style format and argument."""

    func: Component
    fmt: str
    args: Optional[str] = None


def resolve_component(name: str) -> Component:
    """Return the component function called ``name``."""
    try:
        return _COMPONENTS[name]
    except KeyError:
        raise ValueError(f"unknown component {name!r}") from None


def default_args() -> list[Arg]:
    """The entries shown in the status text, in order."""
    return [
        Arg(cpu.cpu_perc, "  %s%%"),
        Arg(memory.ram_used, "  %s"),
        Arg(memory.ram_total, "/%s"),
        Arg(system.datetime, "  %s", "%m-%d-%Y %I:%M:%S %p "),
    ]