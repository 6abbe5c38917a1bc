"""Diagnostics, human-readable sizes and file reading shared by all components."""

from __future__ import annotations

import os
import sys

_PREFIXES = {
    1000: ("", "k", "M", "G", "T", "P", "E", "Z", "Y"),
    1024: ("", "Ki", "Mi", "Gi", "Ti", "Pi", "Ei", "Zi", "Yi"),
}


class FatalError(Exception):
    """An unrecoverable error; the program prints the message and exits with status 1."""


def _format(message: str) -> str:
    """Append the error being handled when the message ends with a colon."""
    if not message.endswith(":"):
        return message
    exc = sys.exception()
    if exc is None:
        return message
    if isinstance(exc, OSError) and exc.strerror:
        detail = exc.strerror
    else:
        detail = str(exc)
    return f"{message} {detail}"


def warn(message: str) -> None:
    """Print a diagnostic to standard error."""
    print(_format(message), file=sys.stderr)


def die(message: str) -> None:
    """Raise FatalError carrying the formatted diagnostic."""
    raise FatalError(_format(message))


def fmt_human(num: int, base: int) -> str:
    """Scale a number by 1000 or 1024 and give it one decimal and a unit prefix."""
    try:
        prefixes = _PREFIXES[base]
    except KeyError:
        raise ValueError(f"fmt_human: Invalid base {base}") from None
    scaled = float(num)
    index = 0
    while index < len(prefixes) - 1 and scaled >= base:
        scaled /= base
        index += 1
    return f"{scaled:.1f} {prefixes[index]}"


def read_file(path: str | os.PathLike[str]) -> str | None:
    """Return the text of a file, or None after a warning if it cannot be opened."""
    try:
        with open(path, encoding="utf-8", errors="replace") as fp:
            return fp.read()
    except OSError:
        warn(f"fopen '{os.fspath(path)}':")
        return None