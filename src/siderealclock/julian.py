"""Civil calendar → Modified Julian Date conversion."""

import math

from siderealclock.models import CivilInstant

# Meeus subtracts 1524.5 to reach JD; MJD = JD - 2400000.5.
_MJD_DAY_OFFSET = 1524 + 2400001

# First day of the Gregorian calendar; earlier dates are taken as Julian.
_GREGORIAN_START = (1582, 10, 15)


def _is_gregorian(year: int, month: int, day: int) -> bool:
    return (year, month, day) >= _GREGORIAN_START


def mjd_from_date(year: int, month: int, day: int) -> float:
    """Convert a calendar date to the Modified Julian Date at 0h UTC.

    Meeus, Astronomical Algorithms, ch. 7. Dates before 1582 October 15 are
    read in the Julian calendar. Month length is not validated; an impossible
    date such as February 31 yields a defined but meaningless day count.

    Args:
        year: Astronomical year (1 BC is year 0).
        month: Month, 1..12.
        day: Day of month.

    Returns:
        MJD as a float with a zero fractional part.
    """
    gregorian = _is_gregorian(year, month, day)

    # January/February are months 13 and 14 of the previous year.
    if month <= 2:
        year -= 1
        month += 12

    if gregorian:
        a = year // 100
        b = 2 - a + a // 4
    else:
        b = 0

    days = math.floor(365.25 * (year + 4716)) + math.floor(30.6001 * (month + 1)) + day + b
    # Kept integral until the end so the result has no fractional residue.
    return float(days - _MJD_DAY_OFFSET)


def fractional_day_from_time(
    hour: int, minute: int, second: int, nanosecond: int = 0
) -> float:
    """Return the fraction of a day elapsed at the given time of day."""
    return hour / 24.0 + minute / 1440.0 + second / 86400.0 + nanosecond / 8.64e13


def mjd_from_datetime(instant: CivilInstant) -> float:
    """Modified Julian Date of a UTC instant, including the fractional day."""
    return mjd_from_date(instant.year, instant.month, instant.day) + fractional_day_from_time(
        instant.hour, instant.minute, instant.second, instant.nanosecond
    )
