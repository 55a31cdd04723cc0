from __future__ import annotations

import pytest

from siderealclock import report
from siderealclock.compute import evaluate
from siderealclock.models import CivilInstant


def test_format_snapshot_with_timezone(j2000, seoul_resolver):
    snapshot = evaluate(j2000, longitude=127.837, latitude=36.717, resolver=seoul_resolver)
    lines = report.format_snapshot(snapshot)
    assert lines[0] == "Zone for 36.717, 127.837: Asia/Seoul"
    assert lines[1] == "Gregorian Date: 2000-01-01"
    assert lines[2] == "UTC: 12:00:00.000000"
    assert lines[3] == "Local Time: 21:00:00.000000 KST"
    assert lines[4] == "Modified Julian Date: 51544.500000"
    assert lines[5].startswith("GMST: 18:41:50.")
    assert lines[6].startswith("LMST: ")
    assert lines[7].startswith("Time until 13:30:00.000000 LMST: ")


def test_format_snapshot_without_timezone(j2000):
    lines = report.format_snapshot(evaluate(j2000, longitude=0.0))
    assert not any(line.startswith(("Zone for", "Local Time")) for line in lines)
    assert lines[-2].startswith("LMST: 18:41:50.")
    assert lines[-1].startswith("Time until 13:30:00.000000 LMST: 18:48:")


def test_main_prints_one_report(monkeypatch, capsys, j2000):
    monkeypatch.setenv("SIDEREAL_LATITUDE", "51.4779")
    monkeypatch.setenv("SIDEREAL_LONGITUDE", "0.0")
    monkeypatch.setenv("SIDEREAL_TARGET", "19:00:00")

    def fake_run(config):
        return evaluate(j2000, longitude=config.longitude, target=config.target)

    monkeypatch.setattr(report, "run", fake_run)
    report.main()
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "Gregorian Date: 2000-01-01"
    assert out[-1].startswith("Time until 19:00:00.000000 LMST: 00:18:")


def test_main_rejects_bad_config(monkeypatch):
    monkeypatch.setenv("SIDEREAL_LONGITUDE", "500")
    with pytest.raises(ValueError):
        report.main()


def test_format_snapshot_keeps_zone_without_local_time(seoul_resolver):
    snapshot = evaluate(
        CivilInstant(-44, 3, 15, 9, 0, 0), longitude=127.0, latitude=36.0, resolver=seoul_resolver
    )
    lines = report.format_snapshot(snapshot)
    assert lines[0] == "Zone for 36.0, 127.0: Asia/Seoul"
    assert not any(line.startswith("Local Time") for line in lines)
    assert lines[1] == "Gregorian Date: -044-03-15"
