from __future__ import annotations

import math
import random

import pytest

from siderealclock.codec import InvalidTimeValue, decode, encode
from siderealclock.models import ClockTime


def test_decode_exact_values():
    assert decode(0.0) == ClockTime(0, 0, 0)
    assert decode(13.5) == ClockTime(13, 30, 0)
    assert decode(23.75) == ClockTime(23, 45, 0)


def test_decode_accepts_durations_past_a_day():
    assert decode(30.25) == ClockTime(30, 15, 0)


def test_decode_truncates_instead_of_rounding():
    clock = decode(2.999999)
    assert (clock.hour, clock.minute, clock.second) == (2, 59, 59)


@pytest.mark.parametrize("value", [-0.1, -1e-12, math.nan, math.inf, -math.inf])
def test_decode_rejects_invalid_values(value):
    with pytest.raises(InvalidTimeValue):
        decode(value)


def test_invalid_time_value_is_value_error():
    assert issubclass(InvalidTimeValue, ValueError)


def test_encode():
    assert encode(ClockTime(13, 30, 0)) == 13.5
    assert encode(ClockTime(0, 0, 36)) == 0.01
    assert encode(ClockTime(6, 0, 1, 800_000_000)) == pytest.approx(6.0 + 1.8 / 3600)


def _round_trip_cases() -> list[ClockTime]:
    rng = random.Random(20261018)
    cases = [
        ClockTime(0, 0, 0),
        ClockTime(13, 30, 0),
        ClockTime(23, 59, 59, 999_999_999),
        ClockTime(12, 0, 0, 1),
        ClockTime(18, 41, 50, 548_408_800),
    ]
    cases.extend(
        ClockTime(
            rng.randrange(24),
            rng.randrange(60),
            rng.randrange(60),
            rng.randrange(1_000_000_000),
        )
        for _ in range(200)
    )
    return cases


@pytest.mark.parametrize("clock", _round_trip_cases(), ids=str)
def test_round_trip_within_a_microsecond(clock):
    decoded = decode(encode(clock))
    assert abs(decoded.total_nanoseconds - clock.total_nanoseconds) < 1000
