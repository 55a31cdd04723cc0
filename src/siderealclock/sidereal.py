"""Greenwich and local mean sidereal time.

Mean sidereal time only: no nutation, so no equation of the equinoxes, and
UTC stands in for UT1.
"""

import math

from siderealclock.julian import mjd_from_date
from siderealclock.models import CivilInstant

HOURS_PER_DAY = 24.0

MJD_J2000 = 51544.5  # 2000 January 1.5
DAYS_PER_JULIAN_CENTURY = 36525.0

# IAU 1982 GMST at 0h UT, in seconds of time, as a polynomial in T.
_GMST0_COEFFICIENTS = (24110.54841, 8640184.812866, 0.093104, -6.2e-6)

# Sidereal hours per UT hour.
SIDEREAL_RATE = 1.00273790935


def utc_to_decimal_hours(hour: int, minute: int, second: int, nanosecond: int = 0) -> float:
    return hour + minute / 60.0 + second / 3600.0 + nanosecond / 3.6e12


def _poly_eval(x: float, coefficients: tuple[float, ...]) -> float:
    """Horner evaluation, lowest order coefficient first."""
    result = 0.0
    for coefficient in reversed(coefficients):
        result = result * x + coefficient
    return result


def greenwich_mean_sidereal_time(instant: CivilInstant) -> float:
    """Compute Greenwich Mean Sidereal Time for a UTC instant.

    The polynomial is evaluated at 0h UT of the instant's date; the advance
    during the day is added from the UT time of day at the sidereal rate.

    Args:
        instant: UTC instant.

    Returns:
        GMST in decimal hours. Not reduced to [0, 24).
    """
    mjd0 = math.floor(mjd_from_date(instant.year, instant.month, instant.day))
    centuries = (mjd0 - MJD_J2000) / DAYS_PER_JULIAN_CENTURY
    gmst0 = _poly_eval(centuries, _GMST0_COEFFICIENTS) / 3600.0
    ut_hours = utc_to_decimal_hours(
        instant.hour, instant.minute, instant.second, instant.nanosecond
    )
    return gmst0 + SIDEREAL_RATE * ut_hours


def _fractional_part(x: float) -> float:
    # Floored: always in [0, 1), also for negative x.
    return x - math.floor(x)


def normalize_hours(hours: float) -> float:
    """Reduce a decimal-hours value into [0, 24) with floored modulo."""
    reduced = HOURS_PER_DAY * _fractional_part(hours / HOURS_PER_DAY)
    # A tiny negative input rounds up to exactly 24.0.
    if reduced >= HOURS_PER_DAY:
        return 0.0
    return reduced


def local_mean_sidereal_time(gmst: float, longitude: float) -> float:
    """Local mean sidereal time in [0, 24) hours.

    Args:
        gmst: Greenwich mean sidereal time in hours, any range.
        longitude: Observer longitude in degrees, East positive.
    """
    return normalize_hours(gmst + longitude / 15.0)
