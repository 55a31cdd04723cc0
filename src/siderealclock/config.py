"""Startup configuration read from the environment (populated from .env by the entry point)."""

import json
import logging
import os
import re
from collections.abc import Mapping
from dataclasses import dataclass

from siderealclock.countdown import DEFAULT_TARGET
from siderealclock.models import ClockTime

LOGGER = logging.getLogger(__name__)

# don't use more than two digits of precision for coordinates
DEFAULT_LATITUDE = 36.717
DEFAULT_LONGITUDE = 127.837

_CLOCK_PATTERN = re.compile(r"^(\d{1,2}):(\d{2})(?::(\d{2})(?:\.(\d{1,9}))?)?$")


class ConfigError(ValueError):
    """Invalid configuration value."""


@dataclass(frozen=True)
class SiderealConfig:
    """Fixed observer position and target for every evaluation cycle."""

    latitude: float = DEFAULT_LATITUDE  # Degrees North, [-90, 90]
    longitude: float = DEFAULT_LONGITUDE  # Degrees East, (-180, 180]
    target: ClockTime = DEFAULT_TARGET  # Target local mean sidereal time


def parse_clock_time(value: str) -> ClockTime:
    """Parse "HH:MM", "HH:MM:SS" or "HH:MM:SS.fffffffff" into a time of day.

    Raises:
        ConfigError: On malformed or out-of-range input.
    """
    match = _CLOCK_PATTERN.match(value.strip())
    if match is None:
        raise ConfigError(f"Invalid clock time: {value!r}")
    hour, minute, second, fraction = match.groups()
    nanosecond = int(fraction.ljust(9, "0")) if fraction else 0
    if int(hour) >= 24:
        raise ConfigError(f"Clock time hour out of range [0, 24): {value!r}")
    try:
        return ClockTime(int(hour), int(minute), int(second or 0), nanosecond)
    except ValueError as exc:
        raise ConfigError(f"Invalid clock time: {value!r}: {exc}") from exc


def _parse_float(environ: Mapping[str, str], key: str, default: float) -> float:
    raw = environ.get(key)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ConfigError(f"{key} must be a number: {raw!r}") from exc


def load_config(environ: Mapping[str, str] | None = None) -> SiderealConfig:
    """Build the configuration from SIDEREAL_* environment variables.

    Args:
        environ: Variable source. Defaults to os.environ.

    Returns:
        SiderealConfig with defaults for unset variables.

    Raises:
        ConfigError: On malformed or out-of-range values.
    """
    if environ is None:
        environ = os.environ

    latitude = _parse_float(environ, "SIDEREAL_LATITUDE", DEFAULT_LATITUDE)
    longitude = _parse_float(environ, "SIDEREAL_LONGITUDE", DEFAULT_LONGITUDE)
    if not -90.0 <= latitude <= 90.0:
        raise ConfigError(f"SIDEREAL_LATITUDE out of range [-90, 90]: {latitude}")
    if not -180.0 < longitude <= 180.0:
        raise ConfigError(f"SIDEREAL_LONGITUDE out of range (-180, 180]: {longitude}")

    raw_target = environ.get("SIDEREAL_TARGET")
    target = parse_clock_time(raw_target) if raw_target else DEFAULT_TARGET

    config = SiderealConfig(latitude=latitude, longitude=longitude, target=target)
    LOGGER.info(
        json.dumps(
            {
                "event": "config_loaded",
                "lat": latitude,
                "lng": longitude,
                "target": str(target),
            }
        )
    )
    return config
