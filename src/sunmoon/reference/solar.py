# reference/solar.py

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, Iterable, Tuple

from . import _trig
from . import coords as co
from . import elements as el
from ..core import time as tm
from ..core.types import EquatorialCoords, PhaseLike, Position

J0 = 0.0009  # mean solar transit offset (days)
TWO_PI = 2.0 * math.pi


def sun_coords(d: float) -> EquatorialCoords:
    """Equatorial coordinates of the Sun; its ecliptic latitude is taken as 0."""
    m = el.solar_mean_anomaly(d)
    l = el.solar_ecliptic_longitude(m)
    return EquatorialCoords(
        right_ascension=co.right_ascension(l, 0.0),
        declination=co.declination(l, 0.0),
    )


def sun_position(unixtime_ms: int, lat_deg: float, lon_deg: float) -> Position:
    """Azimuth and altitude of the Sun (radians) for an observer."""
    lw = -lon_deg * el.TO_RAD
    phi = lat_deg * el.TO_RAD
    d = tm.to_days_since_2000(unixtime_ms)

    c = sun_coords(d)
    h = co.sidereal_time(d, lw) - c.right_ascension

    return Position(
        azimuth=co.azimuth(h, phi, c.declination),
        altitude=co.altitude(h, phi, c.declination),
    )


# ============================================================
# Sun phase times
# ============================================================

def julian_cycle(d: float, lw: float) -> float:
    x = d - J0 - lw / TWO_PI
    if not math.isfinite(x):
        return x
    return float(round(x))

def approx_transit(ht: float, lw: float, n: float) -> float:
    return J0 + (ht + lw) / TWO_PI + n

def solar_transit_julian(ds: float, m: float, l: float) -> float:
    return tm.JULIAN_2000 + ds + 0.0053 * _trig.sin(m) - 0.0069 * _trig.sin(2.0 * l)

def hour_angle(h: float, phi: float, dec: float) -> float:
    """
    Hour angle at which the Sun's centre sits at altitude h.
    NaN when that altitude is never reached (polar day/night).
    """
    return _trig.acos((_trig.sin(h) - _trig.sin(phi) * _trig.sin(dec)) / (_trig.cos(phi) * _trig.cos(dec)))

def observer_angle(height_m: float) -> float:
    """Dip of the horizon (degrees) for an observer height_m metres above it."""
    return -2.076 * _trig.sqrt(height_m) / 60.0


@dataclass(frozen=True)
class SolarTransit:
    """Solar noon of the day nearest to a given instant, with the terms reused
    for every phase crossing of that day."""
    lw: float
    phi: float
    n: float
    m: float
    l: float
    dec: float
    jd_noon: float

    def set_julian(self, h0: float) -> float:
        w = hour_angle(h0, self.phi, self.dec)
        a = approx_transit(w, self.lw, self.n)
        return solar_transit_julian(a, self.m, self.l)

    def crossing_julian(self, angle_deg: float, is_rise: bool, height_m: float = 0.0) -> float:
        h0 = (angle_deg + observer_angle(height_m)) * el.TO_RAD
        jd_set = self.set_julian(h0)
        if is_rise:
            # rising is the mirror image of setting around the transit
            return self.jd_noon - (jd_set - self.jd_noon)
        return jd_set


def solar_transit(unixtime_ms: int, lat_deg: float, lon_deg: float) -> SolarTransit:
    lw = -lon_deg * el.TO_RAD
    phi = lat_deg * el.TO_RAD
    d = tm.to_days_since_2000(unixtime_ms)

    n = julian_cycle(d, lw)
    ds = approx_transit(0.0, lw, n)
    m = el.solar_mean_anomaly(ds)
    l = el.solar_ecliptic_longitude(m)
    dec = co.declination(l, 0.0)

    return SolarTransit(
        lw=lw, phi=phi, n=n, m=m, l=l, dec=dec,
        jd_noon=solar_transit_julian(ds, m, l),
    )


def time_at_phase(
    unixtime_ms: int,
    phase: PhaseLike,
    lat_deg: float,
    lon_deg: float,
    height_m: float = 0.0,
) -> int | float:
    """
    Unix milliseconds at which the Sun crosses the altitude of `phase` on the
    day nearest to `unixtime_ms`. Returns NaN if the crossing does not happen.
    """
    transit = solar_transit(unixtime_ms, lat_deg, lon_deg)
    jd = transit.crossing_julian(phase.angle_deg, phase.is_rise, height_m)
    return tm.from_julian_date(jd)


def sun_times(
    unixtime_ms: int,
    lat_deg: float,
    lon_deg: float,
    rows: Iterable[Tuple[float, str, str]],
    height_m: float = 0.0,
) -> Dict[str, int | float]:
    """
    Solar noon, nadir and the rise/set instants of every (angle_deg, rise_name, set_name) row.
    """
    transit = solar_transit(unixtime_ms, lat_deg, lon_deg)

    out: Dict[str, int | float] = {
        "solar_noon": tm.from_julian_date(transit.jd_noon),
        "nadir": tm.from_julian_date(transit.jd_noon - 0.5),
    }
    for angle_deg, rise_name, set_name in rows:
        out[rise_name] = tm.from_julian_date(transit.crossing_julian(angle_deg, True, height_m))
        out[set_name] = tm.from_julian_date(transit.crossing_julian(angle_deg, False, height_m))
    return out
