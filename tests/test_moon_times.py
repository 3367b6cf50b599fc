# tests/test_moon_times.py

import math

import pytest

import sunmoon
from sunmoon.core.types import MoonPosition
from sunmoon.reference import lunar

LAT, LON = 50.5, 30.5
DAY = 1362355200000  # 2013-03-04 UTC


def test_moon_times_reference_day():
    mt = sunmoon.moon_times(DAY, LAT, LON)
    assert mt.rise is not None and mt.set is not None
    assert not mt.always_up and not mt.always_down

    # within the UTC day
    for t in (mt.rise, mt.set):
        assert DAY <= t <= DAY + 86_400_000

    # published values for this day: rise 23:54:29, set 07:47:58 UTC
    assert abs(mt.rise - 1362441269000) < 30 * 60_000
    assert abs(mt.set - 1362383278000) < 30 * 60_000

def test_moon_times_cross_the_horizon_threshold():
    mt = sunmoon.moon_times(DAY, LAT, LON)
    alt = lambda t: sunmoon.moon_position(t, LAT, LON).altitude - lunar.MOON_HORIZON_ALTITUDE

    assert alt(mt.rise) == pytest.approx(0.0, abs=5e-3)
    assert alt(mt.rise - 600_000) < alt(mt.rise + 600_000)

    assert alt(mt.set) == pytest.approx(0.0, abs=5e-3)
    assert alt(mt.set - 600_000) > alt(mt.set + 600_000)

def test_start_of_day_flag():
    base = sunmoon.moon_times(DAY, LAT, LON)
    later = DAY + 10 * 3_600_000
    assert sunmoon.moon_times(later, LAT, LON) == base

    # searching from 10:00 finds the next morning's moonset instead
    shifted = sunmoon.moon_times(later, LAT, LON, start_of_day=False)
    assert shifted.set is not None and shifted.set > base.set + 12 * 3_600_000

def _constant_altitude(alt):
    def fake(unixtime_ms, lat_deg, lon_deg):
        return MoonPosition(azimuth=0.0, altitude=alt)
    return fake

def test_always_up(monkeypatch):
    monkeypatch.setattr(lunar, "moon_position", _constant_altitude(math.radians(20.0)))
    mt = lunar.moon_times(DAY, 89.0, 0.0)
    assert mt.always_up and not mt.always_down
    assert mt.rise is None and mt.set is None

def test_always_down(monkeypatch):
    monkeypatch.setattr(lunar, "moon_position", _constant_altitude(math.radians(-20.0)))
    mt = lunar.moon_times(DAY, 89.0, 0.0)
    assert mt.always_down and not mt.always_up

def test_undefined_altitude_counts_as_down():
    mt = lunar.moon_times(DAY, math.nan, 0.0)
    assert mt.always_down and not mt.always_up
    assert mt.rise is None and mt.set is None

def test_infinite_longitude_counts_as_down():
    mt = sunmoon.moon_times(DAY, LAT, math.inf)
    assert mt.always_down and not mt.always_up
