# tests/test_sun_phases.py

import math

import pytest

import sunmoon
from sunmoon import SunPhase
from sunmoon.core.registry import STANDARD_TIMES
from sunmoon.core.time import from_julian_date
from sunmoon.reference import solar

DATE = 1362441600000  # 2013-03-05 UTC
LAT, LON = 50.5, 30.5
MIDSUMMER = 1371772800000  # 2013-06-21 UTC
MIDWINTER = 1387584000000  # 2013-12-21 UTC


def test_sunrise_sunset_reference():
    assert sunmoon.time_at_phase(DATE, SunPhase.SUNRISE, LAT, LON, 0.0) == 1362458096440
    assert sunmoon.time_at_phase(DATE, SunPhase.SUNSET, LAT, LON, 0.0) == 1362498417875

def test_custom_phase_matches_named():
    dusk = sunmoon.time_at_phase(DATE, SunPhase.DUSK, LAT, LON, 0.0)
    dawn = sunmoon.time_at_phase(DATE, SunPhase.DAWN, LAT, LON, 0.0)
    assert sunmoon.time_at_phase(DATE, SunPhase.custom(-6, False), LAT, LON, 0.0) == dusk
    assert sunmoon.time_at_phase(DATE, SunPhase.custom(-6, True), LAT, LON, 0.0) == dawn

def test_phase_constants():
    assert SunPhase.SUNRISE.angle_deg == -0.833 and SunPhase.SUNRISE.is_rise
    assert SunPhase.SUNSET_START.angle_deg == -0.5 and not SunPhase.SUNSET_START.is_rise
    assert SunPhase.NAUTICAL_DAWN.angle_deg == -12.0 and SunPhase.NAUTICAL_DAWN.is_rise
    assert SunPhase.NIGHT.angle_deg == -18.0 and not SunPhase.NIGHT.is_rise
    assert SunPhase.GOLDEN_HOUR_END.angle_deg == 6.0 and SunPhase.GOLDEN_HOUR_END.is_rise
    assert len(SunPhase) == 12

@pytest.mark.parametrize("lat,lon,height", [(LAT, LON, 0.0), (-33.9, 18.4, 120.0), (64.1, -21.9, 10.0)])
@pytest.mark.parametrize("phase", [SunPhase.SUNSET, SunPhase.DUSK, SunPhase.NAUTICAL_DUSK, SunPhase.GOLDEN_HOUR])
def test_rise_set_symmetric_about_noon(lat, lon, height, phase):
    tr = solar.solar_transit(DATE, lat, lon)
    jd_set = tr.crossing_julian(phase.angle_deg, False, height)
    jd_rise = tr.crossing_julian(phase.angle_deg, True, height)
    assert tr.jd_noon - jd_rise == pytest.approx(jd_set - tr.jd_noon, abs=1e-9)

    noon = from_julian_date(tr.jd_noon)
    rise = from_julian_date(jd_rise)
    set_ = from_julian_date(jd_set)
    assert abs((noon - rise) - (set_ - noon)) <= 2

def test_phase_order_through_the_day():
    order = [
        SunPhase.NIGHT_END, SunPhase.NAUTICAL_DAWN, SunPhase.DAWN, SunPhase.SUNRISE,
        SunPhase.SUNRISE_END, SunPhase.GOLDEN_HOUR_END, SunPhase.GOLDEN_HOUR,
        SunPhase.SUNSET_START, SunPhase.SUNSET, SunPhase.DUSK, SunPhase.NAUTICAL_DUSK, SunPhase.NIGHT,
    ]
    times = [sunmoon.time_at_phase(DATE, p, LAT, LON) for p in order]
    assert times == sorted(times)

def test_observer_height_widens_the_day():
    rise0 = sunmoon.time_at_phase(DATE, SunPhase.SUNRISE, LAT, LON, 0.0)
    rise1 = sunmoon.time_at_phase(DATE, SunPhase.SUNRISE, LAT, LON, 500.0)
    set0 = sunmoon.time_at_phase(DATE, SunPhase.SUNSET, LAT, LON, 0.0)
    set1 = sunmoon.time_at_phase(DATE, SunPhase.SUNSET, LAT, LON, 500.0)
    assert rise1 < rise0
    assert set1 > set0

def test_observer_angle():
    assert solar.observer_angle(0.0) == 0.0
    assert solar.observer_angle(100.0) == pytest.approx(-2.076 * 10.0 / 60.0)
    assert math.isnan(solar.observer_angle(-1.0))

def test_negative_height_gives_nan():
    t = sunmoon.time_at_phase(DATE, SunPhase.SUNRISE, LAT, LON, -5.0)
    assert math.isnan(t)

@pytest.mark.parametrize("phase", [SunPhase.NIGHT, SunPhase.NIGHT_END, SunPhase.SUNSET])
def test_polar_day_is_nan(phase):
    # at 80N around the June solstice the Sun stays well above -18 deg (and above the horizon)
    t = sunmoon.time_at_phase(MIDSUMMER, phase, 80.0, 0.0, 0.0)
    assert math.isnan(t)

def test_polar_night_is_nan():
    t = sunmoon.time_at_phase(MIDWINTER, SunPhase.SUNRISE, 80.0, 0.0, 0.0)
    assert math.isnan(t)

def test_sun_times_agree_with_time_at_phase():
    times = sunmoon.sun_times(DATE, LAT, LON, 0.0)
    assert times["sunrise"] == 1362458096440
    assert times["sunset"] == 1362498417875
    for phase, name in [
        (SunPhase.DAWN, "dawn"), (SunPhase.DUSK, "dusk"),
        (SunPhase.NIGHT_END, "night_end"), (SunPhase.NIGHT, "night"),
        (SunPhase.GOLDEN_HOUR_END, "golden_hour_end"), (SunPhase.GOLDEN_HOUR, "golden_hour"),
    ]:
        assert times[name] == sunmoon.time_at_phase(DATE, phase, LAT, LON, 0.0)

    expected = {"solar_noon", "nadir"} | {n for _, r, s in STANDARD_TIMES for n in (r, s)}
    assert set(times) == expected

def test_solar_noon_is_highest_point():
    times = sunmoon.sun_times(DATE, LAT, LON)
    noon = times["solar_noon"]
    alt = lambda t: sunmoon.sun_position(t, LAT, LON).altitude
    assert alt(noon) > alt(noon - 600_000)
    assert alt(noon) > alt(noon + 600_000)
    assert abs(noon - times["nadir"] - 43_200_000) <= 1

def test_sunrise_altitude_matches_phase_angle():
    t = sunmoon.time_at_phase(DATE, SunPhase.SUNRISE, LAT, LON)
    alt = math.degrees(sunmoon.sun_position(t, LAT, LON).altitude)
    # closed-form transit approximation, not an exact root
    assert alt == pytest.approx(-0.833, abs=0.5)

def test_sun_times_polar_values_are_nan():
    times = sunmoon.sun_times(MIDSUMMER, 80.0, 0.0)
    assert math.isnan(times["night"])
    assert math.isnan(times["sunset"])
    assert math.isfinite(times["solar_noon"])

@pytest.mark.parametrize("lat, lon, height", [
    (LAT, LON, math.inf),
    (LAT, math.inf, 0.0),
    (-math.inf, LON, 0.0),
    (math.nan, LON, 0.0),
])
def test_non_finite_inputs_give_nan(lat, lon, height):
    assert math.isnan(sunmoon.time_at_phase(DATE, SunPhase.SUNRISE, lat, lon, height))
    assert math.isnan(sunmoon.time_at_phase(DATE, SunPhase.SUNSET, lat, lon, height))

def test_sun_times_infinite_longitude_is_nan():
    times = sunmoon.sun_times(DATE, LAT, math.inf)
    assert all(math.isnan(t) for t in times.values())

def test_julian_cycle_passes_non_finite_through():
    assert solar.julian_cycle(0.0, -math.inf) == math.inf
    assert math.isnan(solar.julian_cycle(math.nan, 0.0))
