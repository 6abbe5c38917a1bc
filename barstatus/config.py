"""Status bar configuration: the components shown, their formats and timing."""

from __future__ import annotations

import os
import tomllib
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from . import battery, cpu, disk, files, memory, network, system, volume

Component = Callable[[str | None], str | None]

DEFAULT_INTERVAL = 1000
DEFAULT_UNKNOWN_STR = "n/a"
DEFAULT_MAXLEN = 2048

_COMPONENTS: dict[str, Callable[..., str | None]] = {
    func.__name__: func
    for func in (
        battery.battery_perc,
        battery.battery_remaining,
        battery.battery_state,
        files.cat,
        cpu.cpu_freq,
        cpu.cpu_perc,
        system.datetime,
        disk.disk_free,
        disk.disk_perc,
        disk.disk_total,
        disk.disk_used,
        system.entropy,
        system.hostname,
        network.ipv4,
        network.ipv6,
        system.kernel_release,
        system.load_avg,
        network.netspeed_rx,
        network.netspeed_tx,
        files.num_files,
        memory.ram_free,
        memory.ram_perc,
        memory.ram_total,
        memory.ram_used,
        files.run_command,
        memory.swap_free,
        memory.swap_perc,
        memory.swap_total,
        memory.swap_used,
        system.temp,
        system.uptime,
        system.gid,
        system.uid,
        system.username,
        volume.vol_perc,
        network.wifi_essid,
        network.wifi_perc,
    )
}

# Components that also need the update interval in milliseconds.
_INTERVAL_COMPONENTS = frozenset({"netspeed_rx", "netspeed_tx"})

_TOP_LEVEL_KEYS = frozenset({"interval", "unknown_str", "maxlen", "args"})
_ENTRY_KEYS = frozenset({"function", "fmt", "argument"})


@dataclass(frozen=True)
class Arg:
    """One piece of the status: a component, its printf-style format and argument."""

    func: Component
    fmt: str = "%s"
    args: str | None = None


def _default_args() -> tuple[Arg, ...]:
    return (Arg(system.datetime, "%s", "%F %T"),)


@dataclass(frozen=True)
class Config:
    """Update interval in milliseconds, placeholder text, length limit and pieces."""

    interval: int = DEFAULT_INTERVAL
    unknown_str: str = DEFAULT_UNKNOWN_STR
    maxlen: int = DEFAULT_MAXLEN
    args: tuple[Arg, ...] = field(default_factory=_default_args)

    def __post_init__(self) -> None:
        if isinstance(self.interval, bool) or not isinstance(self.interval, int):
            raise ValueError(f"interval must be an integer, not {self.interval!r}")
        if self.interval <= 0:
            raise ValueError(f"interval must be positive, not {self.interval}")
        if isinstance(self.maxlen, bool) or not isinstance(self.maxlen, int):
            raise ValueError(f"maxlen must be an integer, not {self.maxlen!r}")
        if self.maxlen <= 0:
            raise ValueError(f"maxlen must be positive, not {self.maxlen}")
        if not isinstance(self.unknown_str, str):
            raise ValueError(f"unknown_str must be a string, not {self.unknown_str!r}")
        object.__setattr__(self, "args", tuple(self.args))


def component(name: str) -> Callable[..., str | None]:
    """Return the component function of the given name.

    netspeed_rx and netspeed_tx take the interval as a second argument;
    load_config binds it for them.
    """
    try:
        return _COMPONENTS[name]
    except KeyError:
        raise ValueError(f"unknown component '{name}'") from None


def _bind(name: str, interval: int) -> Component:
    func = component(name)
    if name not in _INTERVAL_COMPONENTS:
        return func

    def bound(argument: str | None) -> str | None:
        return func(argument, interval)

    bound.__name__ = name
    return bound


def _check_keys(table: dict, allowed: Iterable[str], where: str) -> None:
    unknown = sorted(set(table) - set(allowed))
    if unknown:
        raise ValueError(f"unknown key '{unknown[0]}' in {where}")


def _entry(index: int, entry: object, interval: int) -> Arg:
    where = f"args entry {index}"
    if not isinstance(entry, dict):
        raise ValueError(f"{where} must be a table")
    _check_keys(entry, _ENTRY_KEYS, where)
    name = entry.get("function")
    if not isinstance(name, str):
        raise ValueError(f"{where} needs a 'function' string")
    fmt = entry.get("fmt", "%s")
    if not isinstance(fmt, str):
        raise ValueError(f"'fmt' in {where} must be a string")
    argument = entry.get("argument")
    if argument is not None and not isinstance(argument, str):
        raise ValueError(f"'argument' in {where} must be a string")
    return Arg(_bind(name, interval), fmt, argument)


def load_config(path: str | os.PathLike[str]) -> Config:
    """Read a configuration from a TOML file."""
    with open(path, "rb") as fp:
        data = tomllib.load(fp)
    _check_keys(data, _TOP_LEVEL_KEYS, "configuration")
    interval = data.get("interval", DEFAULT_INTERVAL)
    settings = {
        "interval": interval,
        "unknown_str": data.get("unknown_str", DEFAULT_UNKNOWN_STR),
        "maxlen": data.get("maxlen", DEFAULT_MAXLEN),
    }
    # Validate the interval before binding it into components.
    Config(**settings, args=())
    if "args" in data:
        entries = data["args"]
        if not isinstance(entries, list):
            raise ValueError("'args' must be an array of tables")
        settings["args"] = tuple(
            _entry(index, entry, interval) for index, entry in enumerate(entries)
        )
    return Config(**settings)