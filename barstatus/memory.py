"""RAM and swap components reading /proc/meminfo."""

from __future__ import annotations

from .util import fmt_human, read_file

MEMINFO = "/proc/meminfo"

_RAM_FIELDS = ("MemTotal", "MemFree", "MemAvailable", "Buffers", "Cached")


def parse_meminfo(text: str) -> dict[str, int]:
    """Map each 'Name: value kB' line to its value in kB, keeping file order."""
    fields: dict[str, int] = {}
    for line in text.splitlines():
        name, sep, rest = line.partition(":")
        if not sep:
            continue
        parts = rest.split()
        if not parts:
            continue
        try:
            fields[name.strip()] = int(parts[0])
        except ValueError:
            continue
    return fields


def _read() -> dict[str, int] | None:
    text = read_file(MEMINFO)
    return None if text is None else parse_meminfo(text)


def _leading(count: int) -> list[int] | None:
    """Return the first values when the file starts with the expected RAM lines."""
    fields = _read()
    if fields is None:
        return None
    names = list(fields)[:count]
    if names != list(_RAM_FIELDS[:count]):
        return None
    return [fields[name] for name in names]


def _swap(*names: str) -> list[int] | None:
    fields = _read()
    if fields is None or any(name not in fields for name in names):
        return None
    return [fields[name] for name in names]


def _trunc_div(num: int, den: int) -> int:
    quotient = abs(num) // abs(den)
    return quotient if (num < 0) == (den < 0) else -quotient


def ram_free(unused: str | None = None) -> str | None:
    """Return the memory available for new allocations."""
    values = _leading(3)
    if values is None:
        return None
    return fmt_human(values[2] * 1024, 1024)


def ram_perc(unused: str | None = None) -> str | None:
    """Return the percentage of memory in use, not counting buffers and cache."""
    values = _leading(5)
    if values is None:
        return None
    total, free, _, buffers, cached = values
    if total == 0:
        return None
    return str(_trunc_div(100 * ((total - free) - (buffers + cached)), total))


def ram_total(unused: str | None = None) -> str | None:
    """Return the total memory."""
    values = _leading(1)
    if values is None:
        return None
    return fmt_human(values[0] * 1024, 1024)


def ram_used(unused: str | None = None) -> str | None:
    """Return the memory in use, not counting buffers and cache."""
    values = _leading(5)
    if values is None:
        return None
    total, free, _, buffers, cached = values
    return fmt_human((total - free - buffers - cached) * 1024, 1024)


def swap_free(unused: str | None = None) -> str | None:
    """Return the free swap space."""
    values = _swap("SwapFree")
    if values is None:
        return None
    return fmt_human(values[0] * 1024, 1024)


def swap_perc(unused: str | None = None) -> str | None:
    """Return the percentage of swap in use."""
    values = _swap("SwapTotal", "SwapFree", "SwapCached")
    if values is None:
        return None
    total, free, cached = values
    if total == 0:
        return None
    return str(_trunc_div(100 * (total - free - cached), total))


def swap_total(unused: str | None = None) -> str | None:
    """Return the total swap space."""
    values = _swap("SwapTotal")
    if values is None:
        return None
    return fmt_human(values[0] * 1024, 1024)


def swap_used(unused: str | None = None) -> str | None:
    """Return the swap space in use."""
    values = _swap("SwapTotal", "SwapFree", "SwapCached")
    if values is None:
        return None
    total, free, cached = values
    return fmt_human((total - free - cached) * 1024, 1024)