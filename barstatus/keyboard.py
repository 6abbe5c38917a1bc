"""Keyboard indicator formatting and XKB layout extraction."""

from __future__ import annotations

import re

# Symbols in XKB rules that never name a layout or variant.
_INVALID_PREFIXES = ("evdev", "inet", "pc", "base")
_SEPARATORS = re.compile(r"[+:]")
_FMT_LIMIT = 4


def format_indicators(fmt: str, led_mask: int) -> str:
    """Render caps ('c') and num ('n') lock state as described by fmt.

    A letter followed by '?' appears, case preserved, only when its indicator
    is on; otherwise it always appears, upper case when on and lower when off.
    """
    fmt = fmt[:_FMT_LIMIT]
    out = []
    for i, char in enumerate(fmt):
        key = char.lower()
        if key not in ("c", "n"):
            continue
        togglecase = i + 1 >= len(fmt) or fmt[i + 1] != "?"
        isset = bool(led_mask & (1 << (key == "n")))
        if togglecase:
            out.append(key.upper() if isset else key)
        elif isset:
            out.append(char)
    return "".join(out)


def _valid(symbol: str) -> bool:
    return not symbol.startswith(_INVALID_PREFIXES)


def get_layout(symbols: str, group: int) -> str | None:
    """Return the layout of a keyboard group from an XKB symbols name."""
    layout = None
    count = 0
    for token in filter(None, _SEPARATORS.split(symbols)):
        if count > group:
            break
        if not _valid(token):
            continue
        if len(token) == 1 and token.isdigit():
            continue
        layout = token
        count += 1
    return layout