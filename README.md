# slbar

`slbar` builds a one-line status text from small components (clock, CPU
usage, memory, disk, battery, network and more) and refreshes it once a
second. It is meant to feed the status area of a tiling window manager bar.
Most components read Linux `/proc` and `/sys` files.

## Installation

```
pip install .
```

## Usage

```
slbar [-v] [-s] [-1]
```

- `-v` prints `slbar-1.0` to standard error and exits with status 1.
- `-s` writes each status line to standard output.
- `-1` writes one status line to standard output and exits.

Without `-s` or `-1`, each line is set as the X root window name by running
`xsetroot -name`; `DISPLAY` must be set and `xsetroot` must be on the
`PATH`, otherwise `slbar` stops with an error. On exit the name is cleared.

Give `-s` when piping into another bar program:

```
slbar -s
```

The process stops on `SIGINT` or `SIGTERM`. `SIGUSR1` interrupts the current
wait so that the line is refreshed at once.

## Configuration

The line is built from the entries that `slbar.config.default_args()`
returns. Each entry is an `slbar.config.Arg`: a component (`func`), a
`%`-style format with one `%s` (`fmt`), and the argument passed to the
component (`args`). The defaults show CPU usage, used and total memory, and
the date and time.

`slbar.config` also holds `INTERVAL` (1000 ms), `UNKNOWN_STR` (`n/a`) and
`MAXLEN` (2048). When a component cannot read its value it returns `None`,
and `UNKNOWN_STR` is shown in its place. `slbar.cli.render_status(args,
unknown, maxlen)` builds one line from a list of entries.

Components are looked up by name with
`slbar.config.resolve_component(name)`, which raises `ValueError` for an
unknown name.

## Components

| name | shows | argument |
| --- | --- | --- |
| `battery_perc`, `battery_state`, `battery_remaining` | battery | battery name, e.g. `BAT0` |
| `cat` | first line of a file | path |
| `cpu_freq`, `cpu_perc` | CPU frequency and usage | none |
| `datetime` | date and time | `strftime` format |
| `disk_free`, `disk_perc`, `disk_total`, `disk_used` | disk space | mount point |
| `entropy` | available entropy | none |
| `hostname`, `kernel_release` | host information | none |
| `ipv4`, `ipv6` | interface address | interface name |
| `load_avg` | load average | none |
| `netspeed_rx`, `netspeed_tx` | network speed | interface name |
| `num_files` | entries in a directory | path |
| `ram_free`, `ram_perc`, `ram_total`, `ram_used` | memory | none |
| `run_command` | first line of a shell command's output | command |
| `swap_free`, `swap_perc`, `swap_total`, `swap_used` | swap | none |
| `temp` | temperature in °C | millidegree sensor file |
| `uptime` | time since boot | none |
| `gid`, `uid`, `username` | current user | none |
| `vol_perc` | OSS mixer volume | mixer device, e.g. `/dev/mixer` |
| `wifi_essid`, `wifi_perc` | wireless network | interface name |

`battery_state` gives `+` (charging), `-` (discharging), `o` (full or not
charging) or `?`. `battery_remaining` gives `Hh Mm` while discharging and an
empty string otherwise. `ram_total` and `ram_used` give whole GiB such as
`15G`; other sizes use binary prefixes (`Ki`, `Mi`, `Gi`, ...) via
`slbar.util.fmt_human(num, base)`, which also accepts base 1000.

`cpu_perc`, `netspeed_rx` and `netspeed_tx` compare with the previous call,
so their first call returns `None`. `slbar.cpu.CpuUsage` and
`slbar.network.NetSpeed` keep separate counters when more than one is needed.

## What it does not do

There are no components for keyboard LEDs or the current keyboard layout:
`slbar` does not query the X server for them. `slbar.keyboard` only offers
the text helpers `format_indicators(fmt, led_mask)`, `is_valid_layout(sym)`
and `parse_layout(symbols, group)` for values obtained elsewhere. The
entries shown cannot be changed from the command line or a configuration
file; edit `default_args()` instead.

## Running the tests

```
pip install ".[test]"
pytest
```