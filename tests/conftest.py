from __future__ import annotations

import pytest

from siderealclock.models import CivilInstant
from siderealclock.timezones import TimezoneResolver


@pytest.fixture
def j2000() -> CivilInstant:
    """2000 January 1, 12h UTC."""
    return CivilInstant(2000, 1, 1, 12, 0, 0)


@pytest.fixture
def seoul_resolver() -> TimezoneResolver:
    return TimezoneResolver(lookup=lambda lat, lng: ["Asia/Seoul"])
