"""Sidereal computation layer — civil time → MJD → GMST → LMST → countdown."""

import json
import logging

from pytz import UnknownTimeZoneError

from siderealclock.codec import decode
from siderealclock.config import SiderealConfig
from siderealclock.countdown import DEFAULT_TARGET, PeakTimeCountdown
from siderealclock.julian import mjd_from_datetime
from siderealclock.models import CivilInstant, ClockTime, SiderealSnapshot
from siderealclock.sidereal import (
    greenwich_mean_sidereal_time,
    local_mean_sidereal_time,
    normalize_hours,
)
from siderealclock.timezones import TimezoneResolutionError, TimezoneResolver, localize

LOGGER = logging.getLogger(__name__)


def _resolve_timezone(
    resolver: TimezoneResolver, latitude: float, longitude: float
) -> str | None:
    """Zone name for the coordinates, or None when it cannot be resolved.

    The zone only annotates the display; failing to find one must not stop
    the sidereal computation.
    """
    try:
        return resolver.resolve(latitude, longitude)
    except TimezoneResolutionError as exc:
        LOGGER.warning(
            json.dumps(
                {
                    "event": "timezone_unavailable",
                    "lat": latitude,
                    "lng": longitude,
                    "error": str(exc),
                }
            )
        )
        return None


def evaluate(
    instant: CivilInstant,
    longitude: float,
    target: ClockTime = DEFAULT_TARGET,
    latitude: float | None = None,
    resolver: TimezoneResolver | None = None,
) -> SiderealSnapshot:
    """Run one evaluation cycle for a UTC instant.

    Args:
        instant: UTC instant to evaluate.
        longitude: Observer longitude in degrees, East positive, (-180, 180].
        target: Sidereal clock time the countdown runs towards.
        latitude: Observer latitude. When given, the timezone is resolved too.
        resolver: Timezone resolver. Defaults to the timezonefinder database.

    Returns:
        SiderealSnapshot with every output of the cycle.

    Raises:
        InvalidTimeValue: If a sidereal value cannot be decoded to a clock time.
    """
    mjd = mjd_from_datetime(instant)
    gmst_hours = greenwich_mean_sidereal_time(instant)
    lmst = decode(local_mean_sidereal_time(gmst_hours, longitude))

    countdown = PeakTimeCountdown(target)
    remaining = countdown.time_until(lmst)

    timezone_name = None
    local_dt = None
    if latitude is not None:
        timezone_name = _resolve_timezone(resolver or TimezoneResolver(), latitude, longitude)
    if timezone_name is not None:
        try:
            local_dt = localize(instant, timezone_name)
        except UnknownTimeZoneError:
            LOGGER.warning(
                json.dumps({"event": "timezone_unavailable", "timezone": timezone_name})
            )
            timezone_name = None
        except ValueError as exc:
            # datetime only covers years 1..9999; the zone stays, the local clock is dropped.
            LOGGER.warning(
                json.dumps(
                    {
                        "event": "local_time_unavailable",
                        "timezone": timezone_name,
                        "error": str(exc),
                    }
                )
            )

    snapshot = SiderealSnapshot(
        instant=instant,
        longitude=longitude,
        latitude=latitude,
        mjd=mjd,
        gmst_hours=gmst_hours,
        gmst=decode(normalize_hours(gmst_hours)),
        lmst=lmst,
        target=target,
        countdown=remaining,
        countdown_clock=countdown.remaining(lmst),
        timezone_name=timezone_name,
        local_dt=local_dt,
    )
    LOGGER.debug(
        json.dumps(
            {
                "event": "snapshot",
                "mjd": mjd,
                "gmst": str(snapshot.gmst),
                "lmst": str(lmst),
                "countdown": str(snapshot.countdown_clock),
            }
        )
    )
    return snapshot


def run(
    config: SiderealConfig,
    instant: CivilInstant | None = None,
    resolver: TimezoneResolver | None = None,
) -> SiderealSnapshot:
    """Top-level entry point: evaluate the configured observer at an instant.

    Args:
        config: Observer position and target.
        instant: UTC instant. Defaults to now.
        resolver: Timezone resolver. Defaults to the timezonefinder database.

    Returns:
        Fully computed SiderealSnapshot.
    """
    if instant is None:
        instant = CivilInstant.now()
    return evaluate(
        instant,
        longitude=config.longitude,
        target=config.target,
        latitude=config.latitude,
        resolver=resolver,
    )
