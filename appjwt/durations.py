"""Go-style duration strings.

The command line accepts token lifetimes in the same notation as Go's
``time.ParseDuration``: a possibly signed sequence of decimal numbers, each
with an optional fraction and a mandatory unit, e.g. ``10m``, ``1h30m``,
``1.5h`` or ``-90s``. Valid units are ``ns``, ``us`` (or ``µs``), ``ms``,
``s``, ``m`` and ``h``.
"""

from __future__ import annotations

import re
from datetime import timedelta
from decimal import Decimal, InvalidOperation

# Nanoseconds per unit
_UNITS: dict[str, int] = {
    "ns": 1,
    "us": 1_000,
    "µs": 1_000,  # U+00B5 micro sign
    "μs": 1_000,  # U+03BC Greek mu
    "ms": 1_000_000,
    "s": 1_000_000_000,
    "m": 60 * 1_000_000_000,
    "h": 3600 * 1_000_000_000,
}

# Go durations are int64 nanoseconds
MAX_DURATION_NS = 2**63 - 1

_NUMBER = r"(?:\d+(?:\.\d*)?|\.\d+)"
_UNIT = "|".join(sorted((re.escape(u) for u in _UNITS), key=len, reverse=True))
_COMPONENT = re.compile(rf"({_NUMBER})({_UNIT})")
_DURATION = re.compile(rf"[-+]?(?:{_NUMBER}(?:{_UNIT}))+")


def parse_duration(text: str) -> timedelta:
    """Parse a Go-style duration string into a ``timedelta``.

    Args:
        text: Duration such as ``"10m"`` or ``"1h30m"``.

    Returns:
        The parsed duration, truncated to microsecond resolution.

    Raises:
        ValueError: If ``text`` is not a valid duration.
    """
    raw = text.strip()
    if raw in ("0", "+0", "-0"):
        return timedelta(0)
    if not _DURATION.fullmatch(raw):
        raise ValueError(f"invalid duration {text!r}")

    sign = -1 if raw.startswith("-") else 1
    total_ns = Decimal(0)
    for number, unit in _COMPONENT.findall(raw.lstrip("+-")):
        try:
            total_ns += Decimal(number) * _UNITS[unit]
        except InvalidOperation as e:
            raise ValueError(f"invalid duration {text!r}") from e

    if total_ns > MAX_DURATION_NS:
        raise ValueError(f"invalid duration {text!r}: out of range")

    return timedelta(microseconds=sign * int(total_ns // 1000))


def format_duration(value: timedelta) -> str:
    """Render a ``timedelta`` the way Go prints durations (``10m0s``)."""
    total_us = (value.days * 86_400 + value.seconds) * 1_000_000 + value.microseconds
    if total_us == 0:
        return "0s"

    sign = "-" if total_us < 0 else ""
    total_us = abs(total_us)

    if total_us < 1_000_000:
        if total_us < 1_000:
            return f"{sign}{total_us}µs"
        return f"{sign}{_trim(Decimal(total_us) / 1_000)}ms"

    hours, rest = divmod(total_us, 3600 * 1_000_000)
    minutes, rest = divmod(rest, 60 * 1_000_000)
    seconds = _trim(Decimal(rest) / 1_000_000)

    out = sign
    if hours:
        out += f"{hours}h"
    if hours or minutes:
        out += f"{minutes}m"
    return f"{out}{seconds}s"


def _trim(value: Decimal) -> str:
    text = f"{value:f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text
