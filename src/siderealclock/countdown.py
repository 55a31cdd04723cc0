"""Countdown to the next recurrence of a fixed sidereal clock time."""

from dataclasses import dataclass
from datetime import timedelta

from siderealclock.codec import decode
from siderealclock.models import NANOSECONDS_PER_SECOND, ClockTime

DEFAULT_TARGET = ClockTime(13, 30, 0)

_NANOSECONDS_PER_DAY = 24 * 3600 * NANOSECONDS_PER_SECOND


def time_until(current: ClockTime, target: ClockTime) -> timedelta:
    """Return the duration from current until target next comes around.

    Sidereal time repeats every 24 hours, so a target already passed today is
    reached on the next cycle. The result lies in [0, 24h); the wrap is
    decided on nanoseconds, then the duration is truncated to microseconds.
    """
    duration_ns = target.total_nanoseconds - current.total_nanoseconds
    if duration_ns < 0:
        duration_ns += _NANOSECONDS_PER_DAY
    return timedelta(microseconds=duration_ns // 1000)


def duration_to_hours(duration: timedelta) -> float:
    return duration.total_seconds() / 3600.0


@dataclass(frozen=True)
class PeakTimeCountdown:
    """Countdown towards a fixed target local mean sidereal time."""

    target: ClockTime = DEFAULT_TARGET

    def time_until(self, current: ClockTime) -> timedelta:
        return time_until(current, self.target)

    def remaining(self, current: ClockTime) -> ClockTime:
        """Time until the target, decoded for display like a clock value."""
        return decode(duration_to_hours(self.time_until(current)))
