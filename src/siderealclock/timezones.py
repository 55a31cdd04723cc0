"""Coordinate → IANA timezone resolution, for local-time display only."""

import json
import logging
from collections.abc import Callable, Sequence
from datetime import datetime

from pytz import timezone
from timezonefinder import TimezoneFinder

from siderealclock.models import CivilInstant

LOGGER = logging.getLogger(__name__)

TimezoneLookup = Callable[[float, float], Sequence[str]]

_tf: TimezoneFinder | None = None


class TimezoneResolutionError(LookupError):
    """Coordinates did not resolve to exactly one timezone."""


class NoTimezoneFound(TimezoneResolutionError):
    """No timezone region contains the coordinates."""


class AmbiguousTimezone(TimezoneResolutionError):
    """Several overlapping timezone regions contain the coordinates."""

    def __init__(self, latitude: float, longitude: float, candidates: Sequence[str]):
        self.candidates = tuple(candidates)
        super().__init__(
            f"Ambiguous timezone: lat={latitude}, lng={longitude}: {', '.join(self.candidates)}"
        )


def timezonefinder_lookup(latitude: float, longitude: float) -> list[str]:
    """Candidate zones from the timezonefinder polygon database."""
    global _tf
    if _tf is None:
        _tf = TimezoneFinder()
    tz_str = _tf.timezone_at(lat=latitude, lng=longitude)
    return [tz_str] if tz_str is not None else []


class TimezoneResolver:
    """Resolve (latitude, longitude) to a single IANA zone name.

    Overlapping matches are not disambiguated; they are reported as
    AmbiguousTimezone.
    """

    def __init__(self, lookup: TimezoneLookup | None = None):
        self._lookup = lookup or timezonefinder_lookup

    def resolve(self, latitude: float, longitude: float) -> str:
        """Return the zone name containing the coordinates.

        Raises:
            NoTimezoneFound: When no zone matches.
            AmbiguousTimezone: When more than one distinct zone matches.
        """
        candidates = tuple(dict.fromkeys(self._lookup(latitude, longitude)))
        if not candidates:
            raise NoTimezoneFound(f"Timezone not found: lat={latitude}, lng={longitude}")
        if len(candidates) > 1:
            raise AmbiguousTimezone(latitude, longitude, candidates)

        tz_str = candidates[0]
        LOGGER.debug(
            json.dumps(
                {
                    "event": "timezone_resolved",
                    "lat": latitude,
                    "lng": longitude,
                    "timezone": tz_str,
                }
            )
        )
        return tz_str


def localize(instant: CivilInstant, tz_name: str) -> datetime:
    """Express a UTC instant as wall-clock time in the named zone.

    Raises:
        pytz.UnknownTimeZoneError: If tz_name is not in the pytz database.
        ValueError: If the instant's year is outside datetime's range.
    """
    local_tz = timezone(tz_name)
    return instant.to_datetime().astimezone(local_tz)
