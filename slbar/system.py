"""Components describing the host, the user and arbitrary text sources."""

from __future__ import annotations

import os
import pwd
import socket
import subprocess
import time

from .util import warn

_BUF_SIZE = 1024
# a line read into the shared buffer holds at most this many characters
_LINE_LIMIT = _BUF_SIZE - 2


def _bounded(text: str) -> str | None:
    if len(text) >= _BUF_SIZE:
        warn("vsnprintf: Output truncated")
        return None
    return text


def _first_line(line: str) -> str | None:
    idx = line.rfind("\n")
    if idx >= 0:
        line = line[:idx]
    return line or None


def datetime(fmt: str) -> str | None:
    """Current local date and time formatted with strftime ``fmt``."""
    result = time.strftime(fmt, time.localtime())
    if not result or len(result) >= _BUF_SIZE:
        warn("strftime: Result string exceeds buffer size")
        return None
    return result


def hostname(unused: object = None) -> str | None:
    """Host name of this machine."""
    try:
        return socket.gethostname()
    except OSError as exc:
        warn("gethostbyname:", exc)
        return None


def kernel_release(unused: object = None) -> str | None:
    """Kernel release, as printed by ``uname -r``."""
    try:
        return _bounded(os.uname().release)
    except OSError as exc:
        warn("uname:", exc)
        return None


def gid(unused: object = None) -> str:
    """Real group id of the current process."""
    return str(os.getgid())


def uid(unused: object = None) -> str:
    """Effective user id of the current process."""
    return str(os.geteuid())


def username(unused: object = None) -> str | None:
    """Name of the effective user."""
    euid = os.geteuid()
    try:
        entry = pwd.getpwuid(euid)
    except KeyError as exc:
        warn(f"getpwuid '{euid}':", exc)
        return None
    return _bounded(entry.pw_name)


def run_command(cmd: str) -> str | None:
    """First line printed by the shell command ``cmd``."""
    try:
        proc = subprocess.Popen(
            cmd,
            shell=True,
            stdout=subprocess.PIPE,
            text=True,
            errors="replace",
        )
    except OSError as exc:
        warn(f"popen '{cmd}':", exc)
        return None

    assert proc.stdout is not None
    with proc.stdout:
        line = proc.stdout.readline(_LINE_LIMIT)
    proc.wait()
    return _first_line(line)


def cat(path: str) -> str | None:
    """First line of the file at ``path``."""
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            line = handle.readline(_LINE_LIMIT)
    except OSError as exc:
        warn(f"fopen '{path}':", exc)
        return None
    return _first_line(line)