"""Human-readable durations such as ``30s``, ``1m30s`` or ``1.5h``.

Values are handled as integer nanoseconds. The accepted syntax is a sequence
of decimal numbers, each with an optional fraction and a unit suffix
(``ns``, ``us``/``µs``, ``ms``, ``s``, ``m``, ``h``), optionally signed.
A bare ``0`` is the only value allowed without a unit.
"""

from __future__ import annotations

import re

NANOSECOND = 1
MICROSECOND = 1000 * NANOSECOND
MILLISECOND = 1000 * MICROSECOND
SECOND = 1000 * MILLISECOND
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE

_MAX_DURATION = (1 << 63) - 1

_UNITS: dict[str, int] = {
    "ns": NANOSECOND,
    "us": MICROSECOND,
    "µs": MICROSECOND,  # micro sign
    "μs": MICROSECOND,  # greek small letter mu
    "ms": MILLISECOND,
    "s": SECOND,
    "m": MINUTE,
    "h": HOUR,
}

_RE_COMPONENT = re.compile(r"(\d*)(?:\.(\d*))?([^\d.]*)")


class DurationError(ValueError):
    """Raised when a duration string cannot be parsed."""

    def __init__(self, value: str, reason: str) -> None:
        super().__init__(f'invalid duration "{value}": {reason}')
        self.value = value
        self.reason = reason


def parse_duration(value: str) -> int:
    """Parse *value* and return the duration in nanoseconds."""
    s = value
    negative = False
    if s and s[0] in "+-":
        negative = s[0] == "-"
        s = s[1:]
    if s == "0":
        return 0
    if not s:
        raise DurationError(value, "empty duration")

    total = 0
    pos = 0
    while pos < len(s):
        match = _RE_COMPONENT.match(s, pos)
        assert match is not None  # every group is optional
        whole, frac, unit = match.group(1), match.group(2), match.group(3)
        if not whole and not frac:
            raise DurationError(value, "expected a number")
        if not unit:
            raise DurationError(value, "missing unit")
        if unit not in _UNITS:
            raise DurationError(value, f'unknown unit "{unit}"')

        scale = _UNITS[unit]
        component = int(whole or "0") * scale
        if frac:
            component += int(frac) * scale // (10 ** len(frac))
        total += component
        if total > _MAX_DURATION:
            raise DurationError(value, "overflow")
        pos = match.end()

    return -total if negative else total


def _fraction(value: int, precision: int) -> str:
    digits = f"{value:0{precision}d}".rstrip("0")
    return f".{digits}" if digits else ""


def format_duration(nanoseconds: int) -> str:
    """Render *nanoseconds* in canonical form, e.g. ``1h2m0.5s`` or ``250ms``."""
    sign = "-" if nanoseconds < 0 else ""
    u = abs(nanoseconds)

    if u == 0:
        return "0s"
    if u < MICROSECOND:
        return f"{sign}{u}ns"
    if u < MILLISECOND:
        whole, rest = divmod(u, MICROSECOND)
        return f"{sign}{whole}{_fraction(rest, 3)}µs"
    if u < SECOND:
        whole, rest = divmod(u, MILLISECOND)
        return f"{sign}{whole}{_fraction(rest, 6)}ms"

    seconds, rest = divmod(u, SECOND)
    text = f"{seconds % 60}{_fraction(rest, 9)}s"
    minutes = seconds // 60
    if minutes:
        text = f"{minutes % 60}m{text}"
        hours = minutes // 60
        if hours:
            text = f"{hours}h{text}"
    return sign + text


def to_minutes(nanoseconds: int) -> float:
    return nanoseconds / MINUTE
