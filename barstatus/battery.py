"""Battery components reading the power supply class in sysfs."""

from __future__ import annotations

import os
import re

from .util import read_file

POWER_SUPPLY = "/sys/class/power_supply"

_STATE_SYMBOLS = {
    "Charging": "+",
    "Discharging": "-",
    "Full": "o",
    "Not charging": "o",
}
_INT = re.compile(r"\s*([+-]?\d+)")
_UINT = re.compile(r"\s*\+?(\d+)")
_STATE = re.compile(r"[a-zA-Z ]{1,12}")


def _path(bat: str, name: str) -> str:
    return os.path.join(POWER_SUPPLY, bat, name)


def _scan(path: str, pattern: re.Pattern[str]) -> str | None:
    text = read_file(path)
    if text is None:
        return None
    match = pattern.match(text)
    return match.group(match.lastindex or 0) if match else None


def _read_state(bat: str) -> str | None:
    return _scan(_path(bat, "status"), _STATE)


def _pick(bat: str, *names: str) -> str | None:
    for name in names:
        path = _path(bat, name)
        if os.access(path, os.R_OK):
            return path
    return None


def _read_uint(path: str | None) -> int | None:
    if path is None:
        return None
    value = _scan(path, _UINT)
    return None if value is None else int(value)


def battery_perc(bat: str) -> str | None:
    """Return the battery charge in percent."""
    value = _scan(_path(bat, "capacity"), _INT)
    return None if value is None else str(int(value))


def battery_state(bat: str) -> str | None:
    """Return '+' when charging, '-' when discharging, 'o' when full, '?' otherwise."""
    state = _read_state(bat)
    if state is None:
        return None
    return _STATE_SYMBOLS.get(state, "?")


def battery_remaining(bat: str) -> str | None:
    """Return the time left while discharging, or an empty string otherwise."""
    state = _read_state(bat)
    if state is None:
        return None
    charge_now = _read_uint(_pick(bat, "charge_now", "energy_now"))
    if charge_now is None:
        return None
    if state != "Discharging":
        return ""
    current_now = _read_uint(_pick(bat, "current_now", "power_now"))
    if not current_now:
        return None
    timeleft = charge_now / current_now
    hours = int(timeleft)
    minutes = int((timeleft - hours) * 60)
    return f"{hours}h {minutes}m"