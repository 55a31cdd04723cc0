"""Decimal hours ↔ clock time conversion."""

import math

from siderealclock.models import NANOSECONDS_PER_SECOND, ClockTime


class InvalidTimeValue(ValueError):
    """Decimal-hours value that cannot be shown as a clock time."""


def decode(decimal_hours: float) -> ClockTime:
    """Split decimal hours into hours, minutes, seconds and nanoseconds.

    Every stage truncates toward zero, so values just below a boundary read
    as e.g. 59 seconds and 999999999 nanoseconds rather than rounding up.
    Hours of 24 and above are kept as-is for elapsed durations.

    Raises:
        InvalidTimeValue: On negative, NaN or infinite input.
    """
    if not math.isfinite(decimal_hours):
        raise InvalidTimeValue(f"decimal hours must be finite: {decimal_hours}")
    if decimal_hours < 0.0:
        raise InvalidTimeValue(f"decimal hours must be non-negative: {decimal_hours}")

    hours_frac, hours_full = math.modf(decimal_hours)
    minutes_frac, minutes_full = math.modf(hours_frac * 60.0)
    seconds_frac, seconds_full = math.modf(minutes_frac * 60.0)
    nanoseconds = int(seconds_frac * NANOSECONDS_PER_SECOND)
    return ClockTime(int(hours_full), int(minutes_full), int(seconds_full), nanoseconds)


def encode(clock: ClockTime) -> float:
    return (
        clock.hour
        + clock.minute / 60.0
        + clock.second / 3600.0
        + clock.nanosecond / 3.6e12
    )
