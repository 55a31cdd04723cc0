"""Data model definitions — explicit boundaries between input, compute, and report layers."""

from dataclasses import dataclass
from datetime import datetime, timedelta

from pytz import utc

NANOSECONDS_PER_SECOND = 1_000_000_000


@dataclass(frozen=True)
class CivilInstant:
    """A UTC calendar date plus time-of-day. Sampled once per evaluation cycle."""

    year: int  # Astronomical year numbering (year 0 exists)
    month: int  # 1..12
    day: int  # 1..31, not checked against month length
    hour: int
    minute: int
    second: int
    nanosecond: int = 0  # Sub-second fraction in nanoseconds

    @classmethod
    def from_datetime(cls, dt: datetime) -> "CivilInstant":
        """Build an instant from a timezone-aware datetime, converted to UTC.

        Raises:
            ValueError: If dt is naive.
        """
        if dt.tzinfo is None:
            raise ValueError("datetime must be timezone-aware (UTC)")
        dt_utc = dt.astimezone(utc)
        return cls(
            year=dt_utc.year,
            month=dt_utc.month,
            day=dt_utc.day,
            hour=dt_utc.hour,
            minute=dt_utc.minute,
            second=dt_utc.second,
            nanosecond=dt_utc.microsecond * 1000,
        )

    @classmethod
    def now(cls) -> "CivilInstant":
        return cls.from_datetime(datetime.now(utc))

    def to_datetime(self) -> datetime:
        """Return the instant as an aware UTC datetime (microsecond resolution).

        Raises:
            ValueError: If the year is outside datetime's 1..9999 range.
        """
        return datetime(
            self.year,
            self.month,
            self.day,
            self.hour,
            self.minute,
            self.second,
            self.nanosecond // 1000,
            tzinfo=utc,
        )


@dataclass(frozen=True)
class ClockTime:
    """Hour/minute/second/nanosecond decomposition of a decimal-hours value.

    hour stays below 24 for a time of day; larger values only appear when the
    value is an elapsed duration rendered through the same decoder.
    """

    hour: int
    minute: int
    second: int
    nanosecond: int = 0

    def __post_init__(self) -> None:
        if self.hour < 0:
            raise ValueError(f"hour must be non-negative: {self.hour}")
        if not 0 <= self.minute < 60:
            raise ValueError(f"minute out of range [0, 60): {self.minute}")
        if not 0 <= self.second < 60:
            raise ValueError(f"second out of range [0, 60): {self.second}")
        if not 0 <= self.nanosecond < NANOSECONDS_PER_SECOND:
            raise ValueError(f"nanosecond out of range [0, 1e9): {self.nanosecond}")

    @property
    def total_nanoseconds(self) -> int:
        seconds = self.hour * 3600 + self.minute * 60 + self.second
        return seconds * NANOSECONDS_PER_SECOND + self.nanosecond

    def __str__(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}.{self.nanosecond // 1000:06d}"


@dataclass(frozen=True)
class SiderealSnapshot:
    """Every output of one evaluation cycle. The sole input to the report layer."""

    instant: CivilInstant  # UTC instant the cycle was evaluated for
    longitude: float  # Degrees, East positive
    latitude: float | None  # Degrees, only needed for timezone resolution
    mjd: float  # Modified Julian Date including the fractional day
    gmst_hours: float  # Raw GMST before reduction to [0, 24)
    gmst: ClockTime  # GMST reduced to a clock value
    lmst: ClockTime  # Local mean sidereal time
    target: ClockTime  # Target LMST the countdown runs towards
    countdown: timedelta  # Time until the target next recurs, [0, 24h)
    countdown_clock: ClockTime  # Same countdown decoded for display
    timezone_name: str | None = None  # IANA zone for (latitude, longitude), if resolved
    local_dt: datetime | None = None  # instant in timezone_name, if resolved
