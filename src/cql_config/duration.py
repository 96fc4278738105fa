"""
Duration text used by config strings.

Durations are written as a signed sequence of decimal numbers, each with an
optional fraction and a unit suffix, such as ``300ms``, ``-1.5h`` or
``2h45m``. Valid units are ``ns``, ``us`` (or ``µs``), ``ms``, ``s``, ``m``
and ``h``.

Values are held as ``datetime.timedelta``, so anything finer than a
microsecond is truncated toward zero when parsed.
"""

import re
from datetime import timedelta

from .exceptions import DurationError

NANOSECOND = 1
MICROSECOND = 1000 * NANOSECOND
MILLISECOND = 1000 * MICROSECOND
SECOND = 1000 * MILLISECOND
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE

_MAX_NANOSECONDS = (1 << 63) - 1

# Digits beyond these cannot change a value that fits in int64 nanoseconds.
_MAX_WHOLE_DIGITS = 19
_MAX_FRACTION_DIGITS = 18

UNITS: dict[str, int] = {
    "ns": NANOSECOND,
    "us": MICROSECOND,
    "µs": MICROSECOND,  # U+00B5 micro sign
    "μs": MICROSECOND,  # U+03BC greek mu
    "ms": MILLISECOND,
    "s": SECOND,
    "m": MINUTE,
    "h": HOUR,
}

_COMPONENT_RE = re.compile(r"([0-9]*)(?:\.([0-9]*))?([^0-9.]*)")


def to_nanoseconds(value: timedelta) -> int:
    """Convert a timedelta to an integer count of nanoseconds."""
    return (value // timedelta(microseconds=1)) * MICROSECOND


def parse_duration(text: str) -> timedelta:
    """
    Parse duration text into a timedelta.

    Args:
        text: Duration text, e.g. ``"11s"``, ``"1m30s"`` or ``"-5s"``

    Returns:
        The parsed duration

    Raises:
        DurationError: If the text is empty, has a missing or unknown unit,
            or does not fit in a signed 64-bit nanosecond count
    """
    rest = text
    negative = False
    if rest[:1] in ("-", "+"):
        negative = rest[0] == "-"
        rest = rest[1:]

    # A bare zero is the only unitless form accepted.
    if rest == "0":
        return timedelta(0)
    if not rest:
        raise DurationError("invalid duration", text)

    total = 0
    while rest:
        match = _COMPONENT_RE.match(rest)
        whole, fraction, unit = match.group(1), match.group(2), match.group(3)
        if not whole and not fraction:
            raise DurationError("invalid duration", text)
        if not unit:
            raise DurationError("missing unit in duration", text)
        if unit not in UNITS:
            raise DurationError(f"unknown unit {unit!r} in duration", text)

        whole = whole.lstrip("0")
        if len(whole) > _MAX_WHOLE_DIGITS:
            raise DurationError("invalid duration", text)
        fraction = fraction[:_MAX_FRACTION_DIGITS] if fraction else fraction

        scale = UNITS[unit]
        total += int(whole or "0") * scale
        if fraction:
            total += int(fraction) * scale // 10 ** len(fraction)
        if total > _MAX_NANOSECONDS + (1 if negative else 0):
            raise DurationError("invalid duration", text)
        rest = rest[match.end() :]

    microseconds = total // MICROSECOND
    return timedelta(microseconds=-microseconds if negative else microseconds)


def _format_fraction(value: int, precision: int) -> tuple[str, int]:
    """Split ``value`` at ``precision`` digits, dropping trailing zeros of the fraction."""
    whole, fraction = divmod(value, 10**precision)
    digits = f"{fraction:0{precision}d}".rstrip("0")
    return (f".{digits}" if digits else ""), whole


def format_duration(value: timedelta) -> str:
    """
    Format a timedelta as duration text.

    The output always parses back to the same value, e.g. ``"0s"``,
    ``"200µs"``, ``"1.5s"``, ``"1m30s"`` or ``"1h0m0s"``.

    Raises:
        DurationError: If the value does not fit in a signed 64-bit
            nanosecond count
    """
    nanoseconds = to_nanoseconds(value)
    if not -_MAX_NANOSECONDS - 1 <= nanoseconds <= _MAX_NANOSECONDS:
        raise DurationError("duration out of range", str(value))
    if nanoseconds == 0:
        return "0s"

    sign = "-" if nanoseconds < 0 else ""
    remaining = abs(nanoseconds)

    if remaining < SECOND:
        if remaining < MICROSECOND:
            return f"{sign}{remaining}ns"
        if remaining < MILLISECOND:
            fraction, whole = _format_fraction(remaining, 3)
            return f"{sign}{whole}{fraction}µs"
        fraction, whole = _format_fraction(remaining, 6)
        return f"{sign}{whole}{fraction}ms"

    fraction, seconds = _format_fraction(remaining, 9)
    text = f"{seconds % 60}{fraction}s"
    minutes = seconds // 60
    if minutes > 0:
        text = f"{minutes % 60}m{text}"
        hours = minutes // 60
        if hours > 0:
            text = f"{hours}h{text}"
    return sign + text


__all__ = ["parse_duration", "format_duration", "to_nanoseconds", "UNITS"]
