"""Command line, status rendering and the update loop."""

from __future__ import annotations

import os
import signal
import subprocess
import sys
import threading
import time
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

from .config import Arg, Config, load_config
from .util import FatalError, die, warn

VERSION = "1.0"
PROGRAM = "barstatus"
USAGE = f"usage: {PROGRAM} [-v] [-s] [-1]"
CONFIG_ENV = "BARSTATUS_CONFIG"

_SIGNALS = (signal.SIGINT, signal.SIGTERM, signal.SIGUSR1)


@dataclass(frozen=True)
class Options:
    """Command line switches: print to stdout instead of the root window, run once."""

    single: bool = False
    once: bool = False


def parse_args(argv: Sequence[str]) -> Options:
    """Parse the switches; raise FatalError with the version or the usage line."""
    single = once = False
    rest = list(argv)
    while rest and rest[0].startswith("-") and len(rest[0]) > 1:
        arg = rest.pop(0)
        if arg == "--":
            break
        for flag in arg[1:]:
            if flag == "v":
                raise FatalError(f"{PROGRAM}-{VERSION}")
            if flag == "1":
                once = single = True
            elif flag == "s":
                single = True
            else:
                raise FatalError(USAGE)
    if rest:
        raise FatalError(USAGE)
    return Options(single=single, once=once)


def render_status(args: Iterable[Arg], unknown_str: str, maxlen: int) -> str:
    """Join the formatted components, cutting the text to fit in maxlen - 1 characters."""
    parts: list[str] = []
    length = 0
    for arg in args:
        result = arg.func(arg.args)
        if result is None:
            result = unknown_str
        try:
            piece = arg.fmt % (result,)
        except (TypeError, ValueError):
            warn("vsnprintf:")
            break
        room = maxlen - length
        if len(piece) >= room:
            warn("vsnprintf: Output truncated")
            parts.append(piece[: max(room - 1, 0)])
            break
        parts.append(piece)
        length += len(piece)
    return "".join(parts)


def sleep_time(interval: int, elapsed: float) -> float:
    """Seconds left of an interval in milliseconds after elapsed seconds, at least 0."""
    return max(0.0, interval / 1000 - elapsed)


class _Wakeup(BaseException):
    """Raised by the signal handler to cut a pause short."""


class _LoopState:
    def __init__(self, done: bool) -> None:
        self.done = done
        self.sleeping = False


def _install_handlers(state: _LoopState) -> dict:
    if threading.current_thread() is not threading.main_thread():
        return {}

    def handler(signo: int, frame: object) -> None:
        if signo != signal.SIGUSR1:
            state.done = True
        if state.sleeping:
            raise _Wakeup

    return {signo: signal.signal(signo, handler) for signo in _SIGNALS}


def _restore_handlers(previous: dict) -> None:
    for signo, handler in previous.items():
        signal.signal(signo, signal.SIG_DFL if handler is None else handler)


def _pause(state: _LoopState, seconds: float) -> None:
    try:
        state.sleeping = True
        time.sleep(seconds)
    except _Wakeup:
        pass
    finally:
        state.sleeping = False


def _print_line(status: str) -> None:
    try:
        print(status, flush=True)
    except OSError:
        die("puts:")


class _RootWindow:
    """Sets the name of the X root window, which status bars display."""

    def __init__(self) -> None:
        if not os.environ.get("DISPLAY"):
            die("XOpenDisplay: Failed to open display")

    @staticmethod
    def _set(name: str) -> None:
        subprocess.run(
            ["xsetroot", "-name", name],
            check=True,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )

    def store(self, status: str) -> None:
        try:
            self._set(status)
        except (OSError, subprocess.CalledProcessError):
            die("XStoreName: Allocation failed")

    def clear(self) -> None:
        try:
            self._set("")
        except (OSError, subprocess.CalledProcessError):
            pass


def run(
    config: Config,
    options: Options,
    out: Callable[[str], None] | None = None,
) -> None:
    """Render the status every interval and hand it to out until told to stop.

    Without out, the status goes to standard output with -s or -1, and to the
    name of the X root window otherwise. SIGINT and SIGTERM stop the loop;
    SIGUSR1 forces an immediate update.
    """
    display = None
    if out is None:
        if options.single:
            out = _print_line
        else:
            display = _RootWindow()
            out = display.store
    state = _LoopState(done=options.once)
    previous = _install_handlers(state)
    try:
        while True:
            start = time.monotonic()
            out(render_status(config.args, config.unknown_str, config.maxlen))
            if not state.done:
                _pause(state, sleep_time(config.interval, time.monotonic() - start))
            if state.done:
                break
    finally:
        _restore_handlers(previous)
        if display is not None:
            display.clear()


def _config_path() -> Path:
    explicit = os.environ.get(CONFIG_ENV)
    if explicit:
        return Path(explicit)
    base = os.environ.get("XDG_CONFIG_HOME") or os.path.join(
        os.path.expanduser("~"), ".config"
    )
    return Path(base) / PROGRAM / "config.toml"


def _load() -> Config:
    path = _config_path()
    if not path.exists():
        return Config()
    try:
        return load_config(path)
    except (OSError, ValueError) as exc:
        raise FatalError(f"config '{path}': {exc}") from exc


def main(argv: Sequence[str] | None = None) -> int:
    """Run the status monitor; return the exit status."""
    try:
        options = parse_args(sys.argv[1:] if argv is None else argv)
        run(_load(), options)
    except FatalError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0