"""CPU frequency and utilisation read from sysfs and /proc/stat."""

from __future__ import annotations

import re

from .util import fmt_human, read_file

CPU_FREQ = "/sys/devices/system/cpu/cpu0/cpufreq/scaling_cur_freq"
PROC_STAT = "/proc/stat"

# Fields of the aggregate line: user nice system idle iowait irq softirq.
_FIELDS = 7
_BUSY = (0, 1, 2, 5, 6)
_UINT = re.compile(r"\s*\+?(\d+)")

# Last sample seen for each statistics file.
_previous: dict[str, tuple[float, ...]] = {}


def parse_stat_line(line: str) -> tuple[float, ...] | None:
    """Return the seven counters that follow the label of a /proc/stat cpu line."""
    fields = line.split()
    if len(fields) < _FIELDS + 1:
        return None
    try:
        return tuple(float(field) for field in fields[1 : _FIELDS + 1])
    except ValueError:
        return None


def cpu_freq(unused: str | None = None) -> str | None:
    """Return the current frequency of the first CPU in hertz, scaled."""
    text = read_file(CPU_FREQ)
    if text is None:
        return None
    match = _UINT.match(text)
    if match is None:
        return None
    khz = int(match.group(1))
    return fmt_human(khz * 1000, 1000)


def cpu_perc(unused: str | None = None) -> str | None:
    """Return the CPU utilisation in percent since the previous call."""
    path = PROC_STAT
    text = read_file(path)
    if text is None:
        return None
    current = parse_stat_line(text.partition("\n")[0])
    if current is None:
        return None
    previous = _previous.get(path)
    _previous[path] = current
    if previous is None or previous[0] == 0:
        return None
    total = sum(previous) - sum(current)
    if total == 0:
        return None
    busy = sum(previous[i] for i in _BUSY) - sum(current[i] for i in _BUSY)
    return str(int(100 * busy / total))