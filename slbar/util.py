"""Shared helpers: diagnostics, human-readable sizes and file reading."""

from __future__ import annotations

import sys

_PREFIXES = {
    1000: ("", "k", "M", "G", "T", "P", "E", "Z", "Y"),
    1024: ("", "Ki", "Mi", "Gi", "Ti", "Pi", "Ei", "Zi", "Yi"),
}


def _describe(error: BaseException | None) -> str:
    if error is None:
        return "Unknown error"
    if isinstance(error, OSError) and error.strerror:
        return error.strerror
    return str(error)


def warn(message: str, error: BaseException | None = None) -> None:
    """Print a diagnostic to stderr.

    A message ending in ':' is followed by a description of ``error``.
    """
    if message.endswith(":"):
        line = f"{message} {_describe(error)}"
    else:
        line = message
    print(line, file=sys.stderr, flush=True)


def die(message: str, error: BaseException | None = None) -> None:
    """Print a diagnostic like :func:`warn` and exit with status 1."""
    warn(message, error)
    raise SystemExit(1)


def fmt_human(num: int | float, base: int) -> str:
    """Format ``num`` with a decimal (1000) or binary (1024) unit prefix."""
    try:
        prefixes = _PREFIXES[base]
    except KeyError:
        raise ValueError(f"fmt_human: Invalid base {base!r}") from None

    scaled = float(num)
    index = 0
    while index < len(prefixes) - 1 and scaled >= base:
        scaled /= base
        index += 1
    return f"{scaled:.1f} {prefixes[index]}"


def read_value(path: str) -> str | None:
    """Return the whole text of ``path``, or None after a warning if unreadable."""
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            return handle.read()
    except OSError as exc:
        warn(f"fopen '{path}':", exc)
        return None