# reference/lunar.py

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from . import _trig
from . import coords as co
from . import elements as el
from .solar import sun_coords
from ..core import time as tm
from ..core.types import Illumination, MoonPosition, MoonTimes

EARTH_SUN_DISTANCE_KM = 149598000.0
MOON_HORIZON_ALTITUDE = 0.133 * el.TO_RAD  # apparent radius + parallax allowance
MILLISECONDS_PER_HOUR = 3_600_000


@dataclass(frozen=True)
class LunarCoords:
    """Geocentric equatorial coordinates (radians) and distance (km) of the Moon."""
    right_ascension: float
    declination: float
    distance_km: float


def moon_coords(d: float) -> LunarCoords:
    lon, lat = el.lunar_ecliptic_position(d)
    return LunarCoords(
        right_ascension=co.right_ascension(lon, lat),
        declination=co.declination(lon, lat),
        distance_km=el.lunar_distance_km(el.lunar_mean_anomaly(d)),
    )


def astro_refraction(h: float) -> float:
    """
    Empirical refraction (radians) for an apparent altitude h (radians).
    Only valid above the horizon, so negative altitudes are evaluated at 0.
    """
    if h < 0.0:
        h = 0.0
    return 0.0002967 / _trig.tan(h + 0.00312536 / (h + 0.08901179))


def moon_position(unixtime_ms: int, lat_deg: float, lon_deg: float) -> MoonPosition:
    lw = -lon_deg * el.TO_RAD
    phi = lat_deg * el.TO_RAD
    d = tm.to_days_since_2000(unixtime_ms)

    c = moon_coords(d)
    h = co.sidereal_time(d, lw) - c.right_ascension
    alt = co.altitude(h, phi, c.declination)

    return MoonPosition(
        azimuth=co.azimuth(h, phi, c.declination),
        altitude=alt + astro_refraction(alt),
        distance_km=c.distance_km,
        parallactic_angle=co.parallactic_angle(h, phi, c.declination),
    )


def moon_illumination(unixtime_ms: int) -> Illumination:
    d = tm.to_days_since_2000(unixtime_ms)
    s = sun_coords(d)
    m = moon_coords(d)

    d_ra = s.right_ascension - m.right_ascension

    # geocentric elongation of the Moon from the Sun
    phi = _trig.acos(
        _trig.sin(s.declination) * _trig.sin(m.declination)
        + _trig.cos(s.declination) * _trig.cos(m.declination) * _trig.cos(d_ra)
    )
    # selenocentric elongation of the Earth from the Sun
    inc = math.atan2(
        EARTH_SUN_DISTANCE_KM * _trig.sin(phi),
        m.distance_km - EARTH_SUN_DISTANCE_KM * _trig.cos(phi),
    )
    angle = math.atan2(
        _trig.cos(s.declination) * _trig.sin(d_ra),
        _trig.sin(s.declination) * _trig.cos(m.declination)
        - _trig.cos(s.declination) * _trig.sin(m.declination) * _trig.cos(d_ra),
    )

    sign = -1.0 if angle < 0.0 else 1.0
    return Illumination(
        fraction=(1.0 + _trig.cos(inc)) / 2.0,
        phase=0.5 + 0.5 * inc * sign / math.pi,
        angle=angle,
    )


# ============================================================
# Moon rise / set
# ============================================================

def _hours_later(t0_ms: int, hours: float) -> int:
    return t0_ms + round(hours * MILLISECONDS_PER_HOUR)


def moon_times(
    unixtime_ms: int,
    lat_deg: float,
    lon_deg: float,
    *,
    start_of_day: bool = True,
) -> MoonTimes:
    """
    Moonrise and moonset within 24 hours of the start of the UTC day
    containing `unixtime_ms` (or of `unixtime_ms` itself).

    Samples the Moon's altitude hourly and fits a parabola through each
    three-hour window; the parabola's roots inside the window are the
    horizon crossings.
    """
    t0 = tm.start_of_utc_day(unixtime_ms) if start_of_day else unixtime_ms

    def alt(hours: float) -> float:
        return moon_position(_hours_later(t0, hours), lat_deg, lon_deg).altitude - MOON_HORIZON_ALTITUDE

    rise: Optional[float] = None
    set_: Optional[float] = None
    ye = 0.0

    h0 = alt(0)
    for i in range(1, 25, 2):
        h1 = alt(i)
        h2 = alt(i + 1)

        a = (h0 + h2) / 2.0 - h1
        b = (h2 - h0) / 2.0
        if a == 0.0:
            # straight line through the window; no vertex to fit
            ye = h1
            h0 = h2
            continue

        xe = -b / (2.0 * a)
        ye = (a * xe + b) * xe + h1
        disc = b * b - 4.0 * a * h1
        roots = 0
        x1 = x2 = 0.0

        if disc >= 0.0:
            dx = math.sqrt(disc) / (abs(a) * 2.0)
            x1 = xe - dx
            x2 = xe + dx
            if abs(x1) <= 1.0:
                roots += 1
            if abs(x2) <= 1.0:
                roots += 1
            if x1 < -1.0:
                x1 = x2

        if roots == 1:
            if h0 < 0.0:
                rise = i + x1
            else:
                set_ = i + x1
        elif roots == 2:
            rise = i + (x2 if ye < 0.0 else x1)
            set_ = i + (x1 if ye < 0.0 else x2)

        if rise is not None and set_ is not None:
            break

        h0 = h2

    if rise is None and set_ is None:
        # an undefined altitude (NaN) counts as down
        return MoonTimes(always_up=ye > 0.0, always_down=not ye > 0.0)

    return MoonTimes(
        rise=_hours_later(t0, rise) if rise is not None else None,
        set=_hours_later(t0, set_) if set_ is not None else None,
    )
