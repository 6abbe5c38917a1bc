"""Components that read a file, count directory entries or run a command."""

from __future__ import annotations

import os
import subprocess

from .util import warn

# One line is read into a buffer of this many characters at most.
_LINE_LIMIT = 1022


def _first_line(line: str) -> str | None:
    if line.endswith("\n"):
        line = line[:-1]
    return line or None


def cat(path: str) -> str | None:
    """Return the first line of a file without its newline, or None if empty."""
    try:
        with open(path, encoding="utf-8", errors="replace") as fp:
            line = fp.readline(_LINE_LIMIT)
    except OSError:
        warn(f"fopen '{path}':")
        return None
    return _first_line(line)


def num_files(path: str) -> str | None:
    """Return the number of entries in a directory."""
    try:
        entries = os.listdir(path)
    except OSError:
        warn(f"opendir '{path}':")
        return None
    return str(len(entries))


def run_command(cmd: str) -> str | None:
    """Run a shell command and return the first line of its output."""
    try:
        proc = subprocess.Popen(
            cmd,
            shell=True,
            stdout=subprocess.PIPE,
            text=True,
            errors="replace",
        )
    except OSError:
        warn(f"popen '{cmd}':")
        return None
    try:
        line = proc.stdout.readline(_LINE_LIMIT)
    finally:
        proc.stdout.close()
        proc.wait()
    return _first_line(line)