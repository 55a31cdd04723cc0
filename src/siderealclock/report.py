"""One-shot text report of the current sidereal time.

Set SIDEREAL_LATITUDE / SIDEREAL_LONGITUDE / SIDEREAL_TARGET (or a .env file), then run:
    uv run sidereal-clock
"""

import logging

from dotenv import load_dotenv

from siderealclock.compute import run
from siderealclock.config import load_config
from siderealclock.models import SiderealSnapshot


def format_snapshot(snapshot: SiderealSnapshot) -> list[str]:
    """Render a snapshot as display lines. Timezone lines are omitted when unresolved."""
    instant = snapshot.instant
    lines: list[str] = []
    if snapshot.timezone_name is not None:
        lines.append(
            f"Zone for {snapshot.latitude}, {snapshot.longitude}: {snapshot.timezone_name}"
        )
    lines.append(f"Gregorian Date: {instant.year:04d}-{instant.month:02d}-{instant.day:02d}")
    lines.append(
        f"UTC: {instant.hour:02d}:{instant.minute:02d}:{instant.second:02d}"
        f".{instant.nanosecond // 1000:06d}"
    )
    if snapshot.local_dt is not None:
        lines.append(f"Local Time: {snapshot.local_dt.strftime('%H:%M:%S.%f %Z')}")
    lines.append(f"Modified Julian Date: {snapshot.mjd:.6f}")
    lines.append(f"GMST: {snapshot.gmst}")
    lines.append(f"LMST: {snapshot.lmst}")
    lines.append(f"Time until {snapshot.target} LMST: {snapshot.countdown_clock}")
    return lines


def main() -> None:
    load_dotenv()
    logging.basicConfig(level=logging.INFO, format="%(message)s")

    snapshot = run(load_config())
    for line in format_snapshot(snapshot):
        print(line)


if __name__ == "__main__":
    main()
