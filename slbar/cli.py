"""Command line entry point: build the status text and publish it."""

from __future__ import annotations

import select
import shutil
import signal
import socket
import subprocess
import sys
import time
from dataclasses import dataclass
from typing import Iterable, Sequence

from .config import INTERVAL, MAXLEN, UNKNOWN_STR, Arg, default_args
from .util import die, warn

PROG = "slbar"
VERSION = "1.0"


@dataclass(frozen=True)
class Options:
    """Parsed command line flags."""

    stdout: bool = False
    once: bool = False


def _usage() -> None:
    die(f"usage: {PROG} [-v] [-s] [-1]")


def parse_args(argv: Sequence[str]) -> Options:
    """Parse flags: -v prints the version, -s writes to stdout, -1 runs once."""
    stdout = once = False
    remaining = list(argv)
    while remaining and remaining[0].startswith("-") and len(remaining[0]) > 1:
        flags = remaining.pop(0)
        if flags == "--":
            break
        for flag in flags[1:]:
            if flag == "v":
                die(f"{PROG}-{VERSION}")
            elif flag == "1":
                once = True
                stdout = True
            elif flag == "s":
                stdout = True
            else:
                _usage()
    if remaining:
        _usage()
    return Options(stdout=stdout, once=once)


def render_status(
    args: Iterable[Arg], unknown: str = UNKNOWN_STR, maxlen: int = MAXLEN
) -> str:
    """Join the formatted component values, bounded to ``maxlen - 1`` characters."""
    status = ""
    for arg in args:
        value = arg.func(arg.args)
        if value is None:
            value = unknown
        try:
            piece = arg.fmt % value
        except (TypeError, ValueError) as exc:
            warn("vsnprintf:", exc)
            break
        room = maxlen - len(status)
        if len(piece) >= room:
            warn("vsnprintf: Output truncated")
            status += piece[: max(room - 1, 0)]
            break
        status += piece
    return status


def _store_name(status: str) -> None:
    try:
        subprocess.run(["xsetroot", "-name", status], check=True)
    except (OSError, subprocess.CalledProcessError):
        die("XStoreName: Allocation failed")


def _clear_name() -> None:
    try:
        subprocess.run(["xsetroot", "-name", ""], check=False)
    except OSError as exc:
        die("XCloseDisplay: Failed to close display", exc)


def _have_display() -> bool:
    import os

    return bool(os.environ.get("DISPLAY")) and shutil.which("xsetroot") is not None


def main(argv: Sequence[str] | None = None) -> int:
    """Run the status loop until interrupted, or once with -1."""
    options = parse_args(sys.argv[1:] if argv is None else argv)
    done = options.once

    def terminate(signo: int, frame: object) -> None:
        nonlocal done
        if signo != signal.SIGUSR1:
            done = True

    handled = (signal.SIGINT, signal.SIGTERM, signal.SIGUSR1)
    previous = {signo: signal.signal(signo, terminate) for signo in handled}
    wake_r, wake_w = socket.socketpair()
    wake_r.setblocking(False)
    wake_w.setblocking(False)
    old_wakeup = signal.set_wakeup_fd(wake_w.fileno())

    try:
        if not options.stdout and not _have_display():
            die("XOpenDisplay: Failed to open display")

        args = default_args()
        while True:
            start = time.monotonic()
            status = render_status(args, UNKNOWN_STR, MAXLEN)

            if options.stdout:
                try:
                    print(status, flush=True)
                except OSError as exc:
                    die("puts:", exc)
            else:
                _store_name(status)

            if done:
                break
            wait = INTERVAL / 1000 - (time.monotonic() - start)
            if wait >= 0:
                ready, _, _ = select.select([wake_r], [], [], wait)
                if ready:
                    try:
                        while wake_r.recv(512):
                            pass
                    except BlockingIOError:
                        pass
            if done:
                break

        if not options.stdout:
            _clear_name()
    finally:
        signal.set_wakeup_fd(old_wakeup)
        wake_r.close()
        wake_w.close()
        for signo, handler in previous.items():
            signal.signal(signo, handler)

    return 0


if __name__ == "__main__":
    sys.exit(main())